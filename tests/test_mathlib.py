import math
import random

import pytest

from mikekit.geometry import Rotator, Vector
from mikekit.mathlib import (
    MovementCheck,
    angle_degrees,
    angle_radians,
    circular_clamp,
    clamp_angles,
    exclusive_random_in_range,
    fast_inverse_interpolation,
    fast_linear_conversion,
    incremental_value,
    inverse_interpolation,
    is_moving_forward,
    is_moving_forward_xy,
    is_nearly_equal,
    linear_conversion,
    max_absolute_element,
)

FORWARD = Vector(1.0, 0.0, 0.0)
RIGHT = Vector(0.0, 1.0, 0.0)


def test_is_nearly_equal():
    assert is_nearly_equal(1.0, 1.0 + 1e-9)
    assert not is_nearly_equal(1.0, 1.1)
    assert is_nearly_equal(1.0, 1.1, 0.2)


def test_angle_same_and_opposite():
    assert angle_radians(FORWARD, FORWARD) == pytest.approx(0.0)
    assert angle_radians(FORWARD, -FORWARD) == pytest.approx(math.pi)


def test_angle_degrees_matches_radians():
    a = Vector(1.0, 1.0, 0.0).safe_normal()
    assert angle_degrees(a, FORWARD) == pytest.approx(math.degrees(angle_radians(a, FORWARD)))


def test_angle_perpendicular():
    assert angle_degrees(FORWARD, RIGHT) == pytest.approx(90.0)


def test_angle_tolerates_rounding_outside_domain():
    slightly_long = Vector(1.0000001, 0.0, 0.0)
    assert angle_radians(slightly_long, FORWARD) == pytest.approx(0.0)


def test_fast_linear_conversion_endpoints():
    assert fast_linear_conversion(2.0, 2.0, 6.0, 10.0, 30.0) == pytest.approx(10.0)
    assert fast_linear_conversion(6.0, 2.0, 6.0, 10.0, 30.0) == pytest.approx(30.0)


def test_fast_linear_conversion_empty_range_raises():
    with pytest.raises(ZeroDivisionError):
        fast_linear_conversion(1.0, 3.0, 3.0, 0.0, 1.0)


def test_linear_conversion_empty_range_returns_value():
    assert linear_conversion(7.5, 3.0, 3.0, 0.0, 1.0) == 7.5


@pytest.mark.parametrize("value", [-4.0, 0.0, 2.5, 11.0])
def test_linear_conversion_round_trip(value):
    there = linear_conversion(value, -5.0, 5.0, 100.0, 300.0)
    back = linear_conversion(there, 100.0, 300.0, -5.0, 5.0)
    assert back == pytest.approx(value)


def test_inverse_interpolation_bounds():
    assert inverse_interpolation(4.0, 4.0, 8.0) == pytest.approx(0.0)
    assert inverse_interpolation(8.0, 4.0, 8.0) == pytest.approx(1.0)


def test_inverse_interpolation_empty_range_is_zero():
    assert inverse_interpolation(5.0, 2.0, 2.0) == 0.0


def test_fast_inverse_interpolation_empty_range_raises():
    with pytest.raises(ZeroDivisionError):
        fast_inverse_interpolation(5.0, 2.0, 2.0)


def test_inverse_interpolation_inverts_linear_conversion():
    value = linear_conversion(0.25, 0.0, 1.0, 10.0, 50.0)
    assert inverse_interpolation(value, 10.0, 50.0) == pytest.approx(0.25)


def test_incremental_value_neutral_cases():
    assert incremental_value(12.0, 0.0, 0.7) == 12.0
    assert incremental_value(12.0, 0.5, 0.0) == 12.0
    assert incremental_value(12.0, 0.5) == incremental_value(12.0, 0.5, 1.0)


def test_max_absolute_element():
    assert max_absolute_element(Vector(1.0, -5.0, 3.0)) == 5.0


def test_clamp_angles_inside_range_unchanged():
    value = Rotator(10.0, -20.0, 30.0)
    low = Rotator(-45.0, -45.0, -45.0)
    high = Rotator(45.0, 45.0, 45.0)
    result = clamp_angles(value, low, high)
    assert result.pitch == pytest.approx(value.pitch)
    assert result.yaw == pytest.approx(value.yaw)
    assert result.roll == pytest.approx(value.roll)


def test_clamp_angles_snaps_to_nearest_bound():
    low = Rotator(-45.0, -45.0, -45.0)
    high = Rotator(45.0, 45.0, 45.0)
    result = clamp_angles(Rotator(60.0, -60.0, 44.0), low, high)
    assert result.pitch == pytest.approx(high.pitch)
    assert result.yaw == pytest.approx(low.yaw)
    assert result.roll == pytest.approx(44.0)


@pytest.mark.parametrize(
    "value, expected",
    [(11, 1), (0, 10), (1, 1), (10, 10), (5, 5)],
)
def test_circular_clamp(value, expected):
    assert circular_clamp(value, 1, 10) == expected


def test_exclusive_random_never_returns_excluded():
    rng = random.Random(1234)
    results = [exclusive_random_in_range(3, 1, 4, rng) for _ in range(200)]
    assert all(found for found, _ in results)
    values = {value for _, value in results}
    assert 3 not in values
    assert values <= {1, 2, 4}


def test_exclusive_random_two_values_forces_other():
    rng = random.Random(7)
    for _ in range(20):
        assert exclusive_random_in_range(0, 0, 1, rng) == (True, 1)


def test_exclusive_random_empty_range_fails():
    assert exclusive_random_in_range(5, 5, 5) == (False, 5)
    assert exclusive_random_in_range(0, 9, 2) == (False, 9)


def test_is_moving_forward_straight_ahead():
    check = is_moving_forward(45.0, 45.0, FORWARD, RIGHT, Vector(300.0, 0.0, 0.0))
    assert isinstance(check, MovementCheck)
    assert check.moving_forward
    assert not check.moving_right
    assert check.forward_angle == pytest.approx(0.0)
    assert check.right_angle == pytest.approx(angle_degrees(RIGHT, FORWARD))


def test_is_moving_forward_backwards():
    check = is_moving_forward(90.0, 90.0, FORWARD, RIGHT, Vector(-2.0, 0.0, 0.0))
    assert not check.moving_forward
    assert check.forward_angle == pytest.approx(math.degrees(math.pi))


def test_is_moving_forward_sideways_right():
    check = is_moving_forward(45.0, 45.0, FORWARD, RIGHT, Vector(0.0, 5.0, 0.0))
    assert not check.moving_forward
    assert check.moving_right
    assert check.right_angle == pytest.approx(0.0)


def test_is_moving_forward_xy_ignores_z():
    tilted_forward = Vector(1.0, 0.0, 0.8)
    with_z = is_moving_forward_xy(45.0, 45.0, tilted_forward, RIGHT, Vector(3.0, 1.0, 50.0))
    without_z = is_moving_forward(45.0, 45.0, FORWARD, RIGHT, Vector(3.0, 1.0, 0.0))
    assert with_z.moving_forward == without_z.moving_forward
    assert with_z.moving_right == without_z.moving_right
    assert with_z.forward_angle == pytest.approx(without_z.forward_angle)
    assert with_z.right_angle == pytest.approx(without_z.right_angle)


def test_zero_velocity_is_not_forward_or_right():
    check = is_moving_forward_xy(45.0, 45.0, FORWARD, RIGHT, Vector(0.0, 0.0, 9.0))
    assert not check.moving_forward
    assert not check.moving_right
    assert check.forward_angle == pytest.approx(check.right_angle)