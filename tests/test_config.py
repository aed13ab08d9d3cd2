"""Tests for pricing configuration loading."""
from __future__ import annotations

import json

import pytest

from vectorkit.config import (
    ConfigurationError,
    DEFAULT_COST_BASE,
    DEFAULT_MULTIPLIER,
    cost_data_from_env,
    cost_data_from_json,
    load_cost_config,
)
from vectorkit.costs import CostData


def test_mapping_overrides_defaults() -> None:
    data = load_cost_config({"cost_base": "25", "multiplier": 1.15})
    assert data == CostData(cost_base=25.0, multiplier=1.15)


def test_empty_environment_uses_defaults() -> None:
    data = cost_data_from_env({})
    assert data == CostData(cost_base=DEFAULT_COST_BASE, multiplier=DEFAULT_MULTIPLIER)


def test_environment_prefix_is_respected() -> None:
    env = {"SHOP_COST_BASE": "3.5", "SHOP_COST_MULTIPLIER": "1.2"}
    assert load_cost_config(env=env, env_prefix="SHOP") == CostData(3.5, 1.2)


def test_process_environment_is_read_by_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VECTORKIT_COST_BASE", "42")
    monkeypatch.delenv("VECTORKIT_COST_MULTIPLIER", raising=False)
    assert load_cost_config() == CostData(42.0, DEFAULT_MULTIPLIER)


def test_json_file_is_loaded(tmp_path) -> None:
    path = tmp_path / "curve.json"
    path.write_text(json.dumps({"cost_base": 7, "multiplier": 1.5}), encoding="utf-8")
    assert load_cost_config(path=path) == CostData(7.0, 1.5)


def test_malformed_json_is_reported(tmp_path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        cost_data_from_json(path)


@pytest.mark.parametrize(
    "payload",
    [{"cost_base": 0}, {"multiplier": -1.0}, {"cost_base": "cheap"}],
)
def test_invalid_values_raise(payload: dict) -> None:
    with pytest.raises(ConfigurationError):
        load_cost_config(payload)
