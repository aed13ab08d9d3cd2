"""Scalar helper behaviour shared by both vector types."""
from __future__ import annotations

import math

import pytest

from vectorkit import mathf


@pytest.mark.parametrize(
    ("value", "expected"),
    [(-2.0, 0.0), (0.25, 0.25), (3.0, 1.0)],
)
def test_clamp_bounds_value(value: float, expected: float) -> None:
    assert mathf.clamp(value, 0.0, 1.0) == expected
    assert mathf.clamp01(value) == expected


def test_clamp_respects_custom_range() -> None:
    assert mathf.clamp(5.0, -1.0, 1.0) == 1.0
    assert mathf.clamp(-5.0, -1.0, 1.0) == -1.0


def test_repeat_wraps_into_length() -> None:
    assert mathf.repeat(7.0, 5.0) == 2.0
    assert mathf.repeat(-1.0, 5.0) == 4.0
    assert mathf.repeat(10.0, 5.0) == 0.0


def test_ping_pong_reflects_at_length() -> None:
    assert mathf.ping_pong(7.0, 5.0) == 3.0
    assert mathf.ping_pong(2.0, 5.0) == 2.0
    assert mathf.ping_pong(10.0, 5.0) == 0.0


def test_lerp_clamps_parameter() -> None:
    assert mathf.lerp(0.0, 10.0, 0.5) == 5.0
    assert mathf.lerp(0.0, 10.0, 2.0) == 10.0
    assert mathf.lerp(0.0, 10.0, -1.0) == 0.0


def test_lerp_unclamped_extrapolates() -> None:
    assert mathf.lerp_unclamped(0.0, 10.0, 2.0) == 20.0
    assert mathf.lerp_unclamped(0.0, 10.0, -0.5) == -5.0


def test_inverse_lerp_handles_degenerate_bounds() -> None:
    assert mathf.inverse_lerp(5.0, 5.0, 7.0) == 0.0
    assert mathf.inverse_lerp(0.0, 10.0, 2.5) == 0.25
    assert mathf.inverse_lerp(0.0, 10.0, 20.0) == 1.0


def test_angle_conversion_constants_are_reciprocal() -> None:
    assert mathf.DEG_TO_RAD * 180.0 == pytest.approx(math.pi)
    assert mathf.DEG_TO_RAD * mathf.RAD_TO_DEG == pytest.approx(1.0)


@pytest.mark.parametrize("t", [math.nan, math.inf, -math.inf])
def test_repeat_and_ping_pong_propagate_non_finite_input(t: float) -> None:
    assert math.isnan(mathf.repeat(t, 5.0))
    assert math.isnan(mathf.ping_pong(t, 5.0))


def test_zero_length_wrap_yields_nan() -> None:
    assert math.isnan(mathf.repeat(3.0, 0.0))
    assert math.isnan(mathf.ping_pong(3.0, 0.0))
