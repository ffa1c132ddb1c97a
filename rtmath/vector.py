"""Four-component vectors and angle helpers used by the ray tracer."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector:
    """A homogeneous vector; ``w`` is 0 for directions and 1 for points."""

    x: float
    y: float
    z: float
    w: float = 0.0

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(
            self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w
        )

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(
            self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w
        )

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z, 0.0)

    def dot(self, other: Vector) -> float:
        """Dot product of the spatial components."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector) -> Vector:
        """Cross product; the result is a direction (``w`` = 0)."""
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
            0.0,
        )

    def scale(self, factor: float) -> Vector:
        """Multiply the spatial components by ``factor``."""
        return Vector(self.x * factor, self.y * factor, self.z * factor, 0.0)

    def mul(self, other: Vector) -> Vector:
        """Component-wise product of the spatial components."""
        return Vector(self.x * other.x, self.y * other.y, self.z * other.z, 0.0)

    def div(self, divisor: float) -> Vector:
        """Divide the spatial components by ``divisor``."""
        return Vector(self.x / divisor, self.y / divisor, self.z / divisor, 0.0)

    def modulus(self) -> float:
        """Euclidean length of the spatial components."""
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def unit(self) -> Vector:
        """Direction of this vector with length 1.

        Raises ZeroDivisionError for the zero vector.
        """
        return self.div(self.modulus())

    def reflect(self, normal: Vector) -> Vector:
        """Reflect this direction about ``normal``; both are normalised first."""
        n = normal.unit()
        incoming = self.unit()
        return incoming - n.scale(2 * incoming.dot(n))


def to_rad(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * (math.pi / 180.0)