"""Mutable 2D vector value type mirroring :class:`vectorkit.vector3.Vector3`."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

import numpy as np

from . import mathf
from .operands import Components2, VectorLike2, format_component, resolve2, safe_divide

LOGGER = logging.getLogger(__name__)


@dataclass
class Vector2:
    """2D vector with opt-in in-place arithmetic."""

    x: float = 0.0
    y: float = 0.0

    K_EPSILON = 1e-5
    K_EPSILON_NORMAL_SQRT = 1e-15

    @staticmethod
    def zero() -> "Vector2":
        return Vector2(0.0, 0.0)

    @staticmethod
    def one() -> "Vector2":
        return Vector2(1.0, 1.0)

    @staticmethod
    def from_iter(values: Iterable[float]) -> "Vector2":
        x, y = values
        return Vector2(float(x), float(y))

    @staticmethod
    def from_array(array: np.ndarray) -> "Vector2":
        values = np.asarray(array, dtype=float).reshape(-1)
        if values.shape[0] != 2:
            raise ValueError("Vector2 requires exactly two components")
        return Vector2(float(values[0]), float(values[1]))

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)

    def clone(self) -> "Vector2":
        return Vector2(self.x, self.y)

    def set(self, x: float = 0.0, y: float = 0.0) -> "Vector2":
        self.x = x
        self.y = y
        return self

    @property
    def sqr_magnitude(self) -> float:
        return self.x * self.x + self.y * self.y

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.sqr_magnitude)

    def _target(self, local: bool) -> "Vector2":
        return self if local else self.clone()

    def add(self, other: VectorLike2, *, local: bool = False) -> "Vector2":
        return self._add(resolve2(other), local)

    def add_components(self, x: float, y: float, *, local: bool = False) -> "Vector2":
        return self._add(Components2(x, y), local)

    def _add(self, operand: Components2, local: bool) -> "Vector2":
        target = self._target(local)
        target.x += operand.x
        target.y += operand.y
        return target

    def subtract(self, other: VectorLike2, *, local: bool = False) -> "Vector2":
        return self._subtract(resolve2(other), local)

    def subtract_components(self, x: float, y: float, *, local: bool = False) -> "Vector2":
        return self._subtract(Components2(x, y), local)

    def _subtract(self, operand: Components2, local: bool) -> "Vector2":
        target = self._target(local)
        target.x -= operand.x
        target.y -= operand.y
        return target

    def multiply(self, other: VectorLike2, *, local: bool = False) -> "Vector2":
        return self._multiply(resolve2(other), local)

    def multiply_components(self, x: float, y: float, *, local: bool = False) -> "Vector2":
        return self._multiply(Components2(x, y), local)

    def _multiply(self, operand: Components2, local: bool) -> "Vector2":
        target = self._target(local)
        target.x *= operand.x
        target.y *= operand.y
        return target

    def divide(self, other: VectorLike2, *, local: bool = False) -> "Vector2":
        return self._divide(resolve2(other), local)

    def divide_components(self, x: float, y: float, *, local: bool = False) -> "Vector2":
        return self._divide(Components2(x, y), local)

    def _divide(self, operand: Components2, local: bool) -> "Vector2":
        target = self._target(local)
        target.x = safe_divide(target.x, operand.x)
        target.y = safe_divide(target.y, operand.y)
        return target

    def dot(self, other: VectorLike2) -> float:
        return self._dot(resolve2(other))

    def dot_components(self, x: float, y: float) -> float:
        return self._dot(Components2(x, y))

    def _dot(self, operand: Components2) -> float:
        return self.x * operand.x + self.y * operand.y

    def normalize(self, *, local: bool = False) -> "Vector2":
        mag = self.magnitude
        target = self._target(local)
        if mag < Vector2.K_EPSILON:
            LOGGER.debug("Normalizing near-zero vector %s to zero", self)
            target.set(0.0, 0.0)
        else:
            target.divide_components(mag, mag, local=True)
        return target

    def equals(self, other: Optional[VectorLike2]) -> bool:
        if other is None:
            return False
        return self._equals(resolve2(other))

    def equals_components(self, x: float, y: float) -> bool:
        return self._equals(Components2(x, y))

    def _equals(self, operand: Components2) -> bool:
        return self.x == operand.x and self.y == operand.y

    @staticmethod
    def lerp(a: VectorLike2, b: VectorLike2, t: float, clamp: bool = True) -> "Vector2":
        if clamp:
            t = mathf.clamp01(t)
            blend = mathf.lerp
        else:
            blend = mathf.lerp_unclamped
        return Vector2(blend(a.x, b.x, t), blend(a.y, b.y, t))

    @staticmethod
    def angle_rad(from_: "Vector2", to: "Vector2") -> float:
        denominator = math.sqrt(from_.sqr_magnitude * to.sqr_magnitude)
        if abs(denominator) < Vector2.K_EPSILON_NORMAL_SQRT:
            LOGGER.debug("Angle between %s and %s is degenerate", from_, to)
            return 0.0
        cosine = mathf.clamp(from_.dot(to) / denominator, -1.0, 1.0)
        return math.acos(cosine)

    @staticmethod
    def angle(from_: "Vector2", to: "Vector2") -> float:
        return Vector2.angle_rad(from_, to) * mathf.RAD_TO_DEG

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return "_".join(format_component(component) for component in self)

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def __add__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if isinstance(other, Vector2):
            return self.multiply(other)
        if isinstance(other, (int, float)):
            return self.multiply_components(other, other)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, Vector2):
            return self.divide(other)
        if isinstance(other, (int, float)):
            return self.divide_components(other, other)
        return NotImplemented


__all__ = ["Vector2"]
