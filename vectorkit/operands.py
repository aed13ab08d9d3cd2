"""Operand resolution for the vector types.

Binary vector operations accept either another vector-shaped object or
discrete components. Both call shapes are resolved here into plain
component tuples before any arithmetic runs.
"""
from __future__ import annotations

from typing import NamedTuple, Protocol


class VectorLike2(Protocol):
    """Anything exposing numeric ``x`` and ``y`` attributes."""

    x: float
    y: float


class VectorLike3(Protocol):
    """Anything exposing numeric ``x``, ``y`` and ``z`` attributes."""

    x: float
    y: float
    z: float


class Components2(NamedTuple):
    x: float
    y: float


class Components3(NamedTuple):
    x: float
    y: float
    z: float


def resolve2(other: VectorLike2) -> Components2:
    return Components2(other.x, other.y)


def resolve3(other: VectorLike3) -> Components3:
    return Components3(other.x, other.y, other.z)


def safe_divide(value: float, divisor: float) -> float:
    """Divide ``value`` by ``divisor`` treating a zero divisor as producing 0."""

    if divisor == 0:
        return 0.0
    return value / divisor


def format_component(value: float) -> str:
    """Render a component with the shortest text, dropping a trailing ``.0``."""

    if value == 0:
        return "0"
    text = repr(float(value))
    # Large magnitudes keep the exponent form repr already chose.
    if text.endswith(".0") and abs(float(value)) < 1e16:
        return text[:-2]
    return text


__all__ = [
    "VectorLike2",
    "VectorLike3",
    "Components2",
    "Components3",
    "resolve2",
    "resolve3",
    "safe_divide",
    "format_component",
]
