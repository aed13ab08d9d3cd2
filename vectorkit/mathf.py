"""Scalar helpers shared by the 2D and 3D vector types.

Both vector implementations delegate every clamp and interpolation step to
these functions so boundary behaviour stays identical across dimensions.
"""
from __future__ import annotations

import math

DEG_TO_RAD = math.pi / 180.0
RAD_TO_DEG = 180.0 / math.pi


# //1.- Bound a value to the closed interval [min_value, max_value].
def clamp(value: float, min_value: float, max_value: float) -> float:
    if value < min_value:
        return min_value
    if value > max_value:
        return max_value
    return value


# //2.- Shorthand for the common unit interval clamp.
def clamp01(value: float) -> float:
    return clamp(value, 0.0, 1.0)


# //3.- Wrap t into [0, length); the final clamp absorbs rounding at the boundary.
def repeat(t: float, length: float) -> float:
    if length == 0:
        return math.nan
    cycles = t / length
    # NaN and infinite inputs have no cycle count.
    if not math.isfinite(cycles):
        return math.nan
    return clamp(t - math.floor(cycles) * length, 0.0, length)


# //4.- Triangle wave oscillating between 0 and length.
def ping_pong(t: float, length: float) -> float:
    t = repeat(t, length * 2.0)
    return length - abs(t - length)


# //5.- Interpolate with t clamped so the result never leaves [a, b].
def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * clamp01(t)


# //6.- Interpolate without clamping so callers can extrapolate.
def lerp_unclamped(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


# //7.- Recover the interpolation parameter; equal bounds map to 0.
def inverse_lerp(a: float, b: float, value: float) -> float:
    if a != b:
        return clamp01((value - a) / (b - a))
    return 0.0


__all__ = [
    "DEG_TO_RAD",
    "RAD_TO_DEG",
    "clamp",
    "clamp01",
    "repeat",
    "ping_pong",
    "lerp",
    "lerp_unclamped",
    "inverse_lerp",
]
