"""Configuration helpers resolving pricing curves for the cost calculator."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Mapping, Optional, Union

from .costs import CostData

DEFAULT_COST_BASE = 10.0
DEFAULT_MULTIPLIER = 1.07


class ConfigurationError(ValueError):
    """Raised when pricing settings are missing, malformed or out of range."""


# //1.- Reject curves that would make the pricing formulas meaningless.
def _validated(cost_base: float, multiplier: float) -> CostData:
    if cost_base <= 0:
        raise ConfigurationError(f"cost_base must be positive, got {cost_base}")
    if multiplier <= 0:
        raise ConfigurationError(f"multiplier must be positive, got {multiplier}")
    return CostData(cost_base=cost_base, multiplier=multiplier)


def _as_float(payload: Mapping[str, object], key: str, default: float) -> float:
    raw = payload.get(key, default)
    try:
        return float(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"{key} must be numeric, got {raw!r}") from exc


# //2.- Build pricing data from a plain mapping, falling back to defaults.
def cost_data_from_mapping(payload: Optional[Mapping[str, object]] = None) -> CostData:
    payload = payload or {}
    return _validated(
        _as_float(payload, "cost_base", DEFAULT_COST_BASE),
        _as_float(payload, "multiplier", DEFAULT_MULTIPLIER),
    )


# //3.- Allow overriding the curve through environment variables.
def cost_data_from_env(
    env: Optional[Mapping[str, str]] = None,
    *,
    prefix: str = "VECTORKIT",
) -> CostData:
    source = env if env is not None else os.environ
    mapping = {}
    base = source.get(f"{prefix}_COST_BASE")
    multiplier = source.get(f"{prefix}_COST_MULTIPLIER")
    if base is not None:
        mapping["cost_base"] = base
    if multiplier is not None:
        mapping["multiplier"] = multiplier
    return cost_data_from_mapping(mapping)


# //4.- Load a JSON object holding ``cost_base`` and ``multiplier``.
def cost_data_from_json(path: Union[str, Path]) -> CostData:
    try:
        with open(path, "r", encoding="utf-8") as handle:
            payload = json.load(handle)
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise ConfigurationError(f"Expected a JSON object in {path}")
    return cost_data_from_mapping(payload)


# //5.- Canonical accessor: explicit mapping, then file, then environment.
def load_cost_config(
    mapping: Optional[Mapping[str, object]] = None,
    *,
    path: Optional[Union[str, Path]] = None,
    env: Optional[Mapping[str, str]] = None,
    env_prefix: str = "VECTORKIT",
) -> CostData:
    if mapping is not None:
        return cost_data_from_mapping(mapping)
    if path is not None:
        return cost_data_from_json(path)
    return cost_data_from_env(env, prefix=env_prefix)


__all__ = [
    "ConfigurationError",
    "DEFAULT_COST_BASE",
    "DEFAULT_MULTIPLIER",
    "cost_data_from_mapping",
    "cost_data_from_env",
    "cost_data_from_json",
    "load_cost_config",
]
