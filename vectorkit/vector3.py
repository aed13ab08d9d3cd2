"""Mutable 3D vector value type.

Every arithmetic method follows the same contract: by default it leaves the
receiver untouched and returns a fresh vector, while ``local=True`` writes
the result into the receiver and returns it so call chains can stay
allocation free. Binary operations come in two shapes, ``add(other)`` for
vector-like operands and ``add_components(x, y, z)`` for discrete values.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

import numpy as np

from . import mathf
from .operands import Components3, VectorLike3, format_component, resolve3, safe_divide

LOGGER = logging.getLogger(__name__)


@dataclass
class Vector3:
    """3D vector with opt-in in-place arithmetic."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    K_EPSILON = 1e-5
    K_EPSILON_NORMAL_SQRT = 1e-15

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------
    @staticmethod
    def zero() -> "Vector3":
        return Vector3(0.0, 0.0, 0.0)

    @staticmethod
    def one() -> "Vector3":
        return Vector3(1.0, 1.0, 1.0)

    @staticmethod
    def from_iter(values: Iterable[float]) -> "Vector3":
        x, y, z = values
        return Vector3(float(x), float(y), float(z))

    @staticmethod
    def from_array(array: np.ndarray) -> "Vector3":
        """Build a vector from a NumPy array holding exactly three values."""

        values = np.asarray(array, dtype=float).reshape(-1)
        if values.shape[0] != 3:
            raise ValueError("Vector3 requires exactly three components")
        return Vector3(float(values[0]), float(values[1]), float(values[2]))

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)

    def clone(self) -> "Vector3":
        return Vector3(self.x, self.y, self.z)

    def set(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> "Vector3":
        """Overwrite all components in place and return the receiver."""

        self.x = x
        self.y = y
        self.z = z
        return self

    # ------------------------------------------------------------------
    # Derived quantities
    # ------------------------------------------------------------------
    @property
    def sqr_magnitude(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.sqr_magnitude)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------
    def _target(self, local: bool) -> "Vector3":
        return self if local else self.clone()

    def add(self, other: VectorLike3, *, local: bool = False) -> "Vector3":
        return self._add(resolve3(other), local)

    def add_components(self, x: float, y: float, z: float, *, local: bool = False) -> "Vector3":
        return self._add(Components3(x, y, z), local)

    def _add(self, operand: Components3, local: bool) -> "Vector3":
        target = self._target(local)
        target.x += operand.x
        target.y += operand.y
        target.z += operand.z
        return target

    def subtract(self, other: VectorLike3, *, local: bool = False) -> "Vector3":
        return self._subtract(resolve3(other), local)

    def subtract_components(self, x: float, y: float, z: float, *, local: bool = False) -> "Vector3":
        return self._subtract(Components3(x, y, z), local)

    def _subtract(self, operand: Components3, local: bool) -> "Vector3":
        target = self._target(local)
        target.x -= operand.x
        target.y -= operand.y
        target.z -= operand.z
        return target

    def multiply(self, other: VectorLike3, *, local: bool = False) -> "Vector3":
        return self._multiply(resolve3(other), local)

    def multiply_components(self, x: float, y: float, z: float, *, local: bool = False) -> "Vector3":
        return self._multiply(Components3(x, y, z), local)

    def _multiply(self, operand: Components3, local: bool) -> "Vector3":
        target = self._target(local)
        target.x *= operand.x
        target.y *= operand.y
        target.z *= operand.z
        return target

    def divide(self, other: VectorLike3, *, local: bool = False) -> "Vector3":
        """Divide component-wise; a zero divisor component yields 0."""

        return self._divide(resolve3(other), local)

    def divide_components(self, x: float, y: float, z: float, *, local: bool = False) -> "Vector3":
        return self._divide(Components3(x, y, z), local)

    def _divide(self, operand: Components3, local: bool) -> "Vector3":
        target = self._target(local)
        target.x = safe_divide(target.x, operand.x)
        target.y = safe_divide(target.y, operand.y)
        target.z = safe_divide(target.z, operand.z)
        return target

    def dot(self, other: VectorLike3) -> float:
        return self._dot(resolve3(other))

    def dot_components(self, x: float, y: float, z: float) -> float:
        return self._dot(Components3(x, y, z))

    def _dot(self, operand: Components3) -> float:
        return self.x * operand.x + self.y * operand.y + self.z * operand.z

    def cross(self, other: VectorLike3, *, local: bool = False) -> "Vector3":
        return self._cross(resolve3(other), local)

    def cross_components(self, x: float, y: float, z: float, *, local: bool = False) -> "Vector3":
        return self._cross(Components3(x, y, z), local)

    def _cross(self, operand: Components3, local: bool) -> "Vector3":
        target = self._target(local)
        # Read all three products before writing so in-place updates stay consistent.
        cx = target.y * operand.z - target.z * operand.y
        cy = target.z * operand.x - target.x * operand.z
        cz = target.x * operand.y - target.y * operand.x
        target.x = cx
        target.y = cy
        target.z = cz
        return target

    def normalize(self, *, local: bool = False) -> "Vector3":
        """Scale to unit length, collapsing near-zero vectors to the origin."""

        mag = self.magnitude
        target = self._target(local)
        if mag < Vector3.K_EPSILON:
            LOGGER.debug("Normalizing near-zero vector %s to zero", self)
            target.set(0.0, 0.0, 0.0)
        else:
            target.divide_components(mag, mag, mag, local=True)
        return target

    def equals(self, other: Optional[VectorLike3]) -> bool:
        if other is None:
            return False
        return self._equals(resolve3(other))

    def equals_components(self, x: float, y: float, z: float) -> bool:
        return self._equals(Components3(x, y, z))

    def _equals(self, operand: Components3) -> bool:
        return self.x == operand.x and self.y == operand.y and self.z == operand.z

    # ------------------------------------------------------------------
    # Static helpers
    # ------------------------------------------------------------------
    @staticmethod
    def lerp(a: VectorLike3, b: VectorLike3, t: float, clamp: bool = True) -> "Vector3":
        """Interpolate between ``a`` and ``b``; ``clamp=False`` allows extrapolation."""

        if clamp:
            t = mathf.clamp01(t)
            blend = mathf.lerp
        else:
            blend = mathf.lerp_unclamped
        return Vector3(blend(a.x, b.x, t), blend(a.y, b.y, t), blend(a.z, b.z, t))

    @staticmethod
    def angle_rad(from_: "Vector3", to: "Vector3") -> float:
        """Unsigned angle in radians; 0 when either vector is degenerate."""

        # sqrt(a) * sqrt(b) == sqrt(a * b) for non-negative reals.
        denominator = math.sqrt(from_.sqr_magnitude * to.sqr_magnitude)
        if abs(denominator) < Vector3.K_EPSILON_NORMAL_SQRT:
            LOGGER.debug("Angle between %s and %s is degenerate", from_, to)
            return 0.0
        cosine = mathf.clamp(from_.dot(to) / denominator, -1.0, 1.0)
        return math.acos(cosine)

    @staticmethod
    def angle(from_: "Vector3", to: "Vector3") -> float:
        """Unsigned angle in degrees."""

        return Vector3.angle_rad(from_, to) * mathf.RAD_TO_DEG

    # ------------------------------------------------------------------
    # Python protocol sugar
    # ------------------------------------------------------------------
    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        return "_".join(format_component(component) for component in self)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __add__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if isinstance(other, Vector3):
            return self.multiply(other)
        if isinstance(other, (int, float)):
            return self.multiply_components(other, other, other)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, Vector3):
            return self.divide(other)
        if isinstance(other, (int, float)):
            return self.divide_components(other, other, other)
        return NotImplemented


__all__ = ["Vector3"]
