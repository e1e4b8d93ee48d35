"""Math helpers for gameplay code: angles, range conversion, clamping and movement checks."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

from mikekit.geometry import SMALL_NUMBER, Rotator, Vector, clamp_angle

__all__ = [
    "MovementCheck",
    "is_nearly_equal",
    "angle_radians",
    "angle_degrees",
    "fast_linear_conversion",
    "linear_conversion",
    "fast_inverse_interpolation",
    "inverse_interpolation",
    "incremental_value",
    "max_absolute_element",
    "clamp_angles",
    "circular_clamp",
    "exclusive_random_in_range",
    "is_moving_forward",
    "is_moving_forward_xy",
]


@dataclass(frozen=True)
class MovementCheck:
    """Result of comparing a velocity with a forward and a right direction."""

    moving_forward: bool
    forward_angle: float
    right_angle: float
    moving_right: bool


def is_nearly_equal(a: float, b: float, tolerance: float = SMALL_NUMBER) -> bool:
    """True if a and b differ by no more than tolerance."""
    return abs(a - b) <= tolerance


def angle_radians(first: Vector, second: Vector) -> float:
    """Angle in radians between two unit vectors.

    The dot product is clamped to [-1, 1] so rounding noise cannot leave
    the domain of acos.
    """
    return math.acos(max(-1.0, min(1.0, first.dot(second))))


def angle_degrees(first: Vector, second: Vector) -> float:
    """Angle in degrees between two unit vectors."""
    return angle_radians(first, second) * (180.0 / math.pi)


def fast_linear_conversion(
    value: float, old_min: float, old_max: float, new_min: float, new_max: float
) -> float:
    """Map value from [old_min, old_max] onto [new_min, new_max].

    Raises ZeroDivisionError when old_min equals old_max.
    """
    return new_min + ((value - old_min) * (new_max - new_min)) / (old_max - old_min)


def linear_conversion(
    value: float, old_min: float, old_max: float, new_min: float, new_max: float
) -> float:
    """Map value between ranges; returns value unchanged if the old range is empty."""
    if is_nearly_equal(old_max, old_min):
        return value
    return fast_linear_conversion(value, old_min, old_max, new_min, new_max)


def fast_inverse_interpolation(value: float, minimum: float, maximum: float) -> float:
    """Fraction of the way value lies from minimum to maximum.

    Raises ZeroDivisionError when minimum equals maximum.
    """
    return (value - minimum) / (maximum - minimum)


def inverse_interpolation(value: float, minimum: float, maximum: float) -> float:
    """Fraction of the way value lies from minimum to maximum; 0 for an empty range."""
    if is_nearly_equal(minimum, maximum):
        return 0.0
    return fast_inverse_interpolation(value, minimum, maximum)


def incremental_value(value: float, multiplier_increment: float, alpha: float = 1.0) -> float:
    """Increase value by value * multiplier_increment, scaled by alpha."""
    return value + value * multiplier_increment * alpha


def max_absolute_element(vector: Vector) -> float:
    """Largest absolute component of a vector."""
    return vector.abs_max()


def clamp_angles(value: Rotator, minimum: Rotator, maximum: Rotator) -> Rotator:
    """Clamp each axis of a rotator to its arc, snapping to the nearest bound."""
    return Rotator(
        clamp_angle(value.pitch, minimum.pitch, maximum.pitch),
        clamp_angle(value.yaw, minimum.yaw, maximum.yaw),
        clamp_angle(value.roll, minimum.roll, maximum.roll),
    )


def circular_clamp(value: int, minimum: int, maximum: int) -> int:
    """Wrap value to minimum when above maximum and to maximum when below minimum."""
    if value > maximum:
        return minimum
    if value < minimum:
        return maximum
    return value


def exclusive_random_in_range(
    excluded_value: int,
    minimum: int,
    maximum: int,
    rng: random.Random | None = None,
) -> tuple[bool, int]:
    """Pick a random integer in [minimum, maximum] other than excluded_value.

    Returns (found, value). When minimum >= maximum no exclusion is possible:
    found is False and value is minimum.
    """
    if minimum >= maximum:
        return False, minimum
    source = rng if rng is not None else random
    while True:
        candidate = source.randint(minimum, maximum)
        if candidate != excluded_value:
            return True, candidate


def is_moving_forward(
    forward_angle_threshold: float,
    right_angle_threshold: float,
    forward: Vector,
    right: Vector,
    velocity: Vector,
) -> MovementCheck:
    """Compare the direction of velocity with the forward and right directions."""
    direction = velocity.safe_normal()
    right_angle = angle_degrees(right, direction)
    forward_angle = angle_degrees(forward, direction)
    return MovementCheck(
        moving_forward=forward_angle_threshold > forward_angle,
        forward_angle=forward_angle,
        right_angle=right_angle,
        moving_right=right_angle_threshold > right_angle,
    )


def is_moving_forward_xy(
    forward_angle_threshold: float,
    right_angle_threshold: float,
    forward: Vector,
    right: Vector,
    velocity: Vector,
) -> MovementCheck:
    """Like is_moving_forward, ignoring the Z axis of every vector."""
    return is_moving_forward(
        forward_angle_threshold,
        right_angle_threshold,
        forward.flattened().safe_normal(),
        right.flattened().safe_normal(),
        velocity.flattened(),
    )