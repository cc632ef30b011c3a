import math

import pytest

from wireframe.geometry import (
    Point,
    coverage,
    fractional,
    isometric,
    rotate_x,
    rotate_y,
    rotate_z,
)


@pytest.mark.parametrize("rotate", [rotate_x, rotate_y, rotate_z])
def test_zero_angle_is_identity(rotate):
    assert rotate(17, -5, 0.0) == (17, -5)


def test_rotate_z_quarter_turn():
    assert rotate_z(10, 0, math.pi / 2) == (0, 10)


def test_rotate_x_half_turn():
    assert rotate_x(10, 0, math.pi) == (-10, 0)


def test_rotate_y_half_turn_flips_x():
    x, z = rotate_y(25, 0, math.pi)
    assert x == -25
    assert z == 0


def test_rotation_truncates_towards_zero():
    # 1*cos45 - 1*sin45 is ~0 and 1*sin45 + 1*cos45 is ~1.414
    assert rotate_z(1, 1, math.pi / 4) == (0, 1)


def test_isometric_height_moves_up():
    assert isometric(0, 0, 5) == (0, -5)


@pytest.mark.parametrize("value", [0, 3, 40, -12])
def test_isometric_diagonal_has_zero_x(value):
    x, _ = isometric(value, value, 0)
    assert x == 0


def test_isometric_is_symmetric_in_y():
    assert isometric(7, 3, 2)[1] == isometric(3, 7, 2)[1]


def test_fractional_positive():
    assert fractional(2.25) == pytest.approx(0.25)


def test_fractional_of_zero_is_shifted():
    assert fractional(0.0) == -1.0


@pytest.mark.parametrize("n", [0.0, 0.5, 3.75, -1.25, 10.0])
def test_coverage_complements_fractional(n):
    assert coverage(n) + fractional(n) == pytest.approx(1.0)


def test_point_fields_are_compared_by_value():
    a = Point(1, 2, 3, 0x3F5EFB)
    b = Point(1, 2, 3, 0x3F5EFB)
    assert a == b
    b.color = 0xFC466B
    assert a != b and a.color == 0x3F5EFB