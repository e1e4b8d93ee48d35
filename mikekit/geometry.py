"""Basic 3D vector and rotator types with angle helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass

SMALL_NUMBER = 1e-8


@dataclass(frozen=True)
class Vector:
    """An immutable three component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    def __mul__(self, scale: float) -> Vector:
        return Vector(self.x * scale, self.y * scale, self.z * scale)

    __rmul__ = __mul__

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def size_squared(self) -> float:
        """Squared length of the vector."""
        return self.dot(self)

    def length(self) -> float:
        """Length of the vector."""
        return math.sqrt(self.size_squared())

    def dot(self, other: Vector) -> float:
        """Dot product with another vector."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def safe_normal(self, tolerance: float = SMALL_NUMBER) -> Vector:
        """Unit vector in the same direction, or the zero vector if too short."""
        squared = self.size_squared()
        if squared == 1.0:
            return self
        if squared < tolerance:
            return Vector()
        return self * (1.0 / math.sqrt(squared))

    def abs_max(self) -> float:
        """Largest absolute component."""
        return max(abs(component) for component in self)

    def flattened(self) -> Vector:
        """Copy with the Z component set to zero."""
        return Vector(self.x, self.y, 0.0)


@dataclass(frozen=True)
class Rotator:
    """An immutable rotation in degrees: pitch (Y), yaw (Z) and roll (X)."""

    pitch: float = 0.0
    yaw: float = 0.0
    roll: float = 0.0


def _clamp_axis(angle: float) -> float:
    """Wrap an angle into [0, 360)."""
    angle = math.fmod(angle, 360.0)
    if angle < 0.0:
        angle += 360.0
    return angle


def normalize_axis(angle: float) -> float:
    """Wrap an angle into (-180, 180]."""
    angle = _clamp_axis(angle)
    if angle > 180.0:
        angle -= 360.0
    return angle


def clamp_angle(angle: float, min_angle: float, max_angle: float) -> float:
    """Clamp an angle to the arc from min_angle to max_angle, snapping to the nearest bound."""
    max_delta = _clamp_axis(max_angle - min_angle) * 0.5
    range_center = _clamp_axis(min_angle + max_delta)
    delta_from_center = normalize_axis(angle - range_center)
    if delta_from_center > max_delta:
        return normalize_axis(range_center + max_delta)
    if delta_from_center < -max_delta:
        return normalize_axis(range_center - max_delta)
    return normalize_axis(angle)