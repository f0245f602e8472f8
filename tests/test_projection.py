import math

import pytest

from wireframe.parsing import Point
from wireframe.projection import (
    PI,
    bresenham,
    get_radian,
    isometric,
    rotate_x,
    rotate_y,
    rotate_z,
)


def test_get_radian_half_turn_is_pi():
    assert get_radian(180) == pytest.approx(PI)


def test_get_radian_zero():
    assert get_radian(0) == 0


def test_isometric_equal_xy_gives_zero_x():
    x, _ = isometric(4.0, 4.0, 9, 30)
    assert x == pytest.approx(0.0)


def test_isometric_angle_zero_y_is_minus_z():
    _, y = isometric(5.0, 2.0, 7, 0)
    assert y == pytest.approx(-7)


def test_isometric_height_shifts_y_only():
    flat = isometric(3.0, 1.0, 0, 30)
    raised = isometric(3.0, 1.0, 12, 30)
    assert raised[0] == pytest.approx(flat[0])
    assert flat[1] - raised[1] == pytest.approx(12)


def test_rotate_x_zero_truncates_y():
    point = Point(1.5, 2.9, 4, 4)
    rotate_x(point, 0.0)
    assert point.y == 2
    assert point.z == 4
    assert point.x == 1.5


def test_rotate_x_quarter_turn_moves_height_into_y():
    point = Point(0.0, 0.0, 5, 5)
    rotate_x(point, math.pi / 2)
    assert point.y == pytest.approx(-5)
    assert point.z == 0


def test_rotate_y_zero_truncates_x():
    point = Point(3.7, 1.0, 2, 2)
    rotate_y(point, 0.0)
    assert point.x == 3
    assert point.z == 2


def test_rotate_z_quarter_turn():
    point = Point(1.0, 0.0, 0, 0)
    rotate_z(point, math.pi / 2)
    assert point.x == pytest.approx(0.0, abs=1e-9)
    assert point.y == pytest.approx(1.0)


def test_bresenham_horizontal():
    assert list(bresenham(0, 0, 3, 0)) == [(0, 0), (1, 0), (2, 0), (3, 0)]


@pytest.mark.parametrize(
    "x0, y0, x1, y1",
    [
        (0, 0, 2, 1),
        (0, 0, 2, 2),
        (0, 0, 0, 3),
        (0, 0, 1, 3),
        (3, 3, 0, 1),
        (5, 2, -4, 7),
        (10, 10, 10, 10),
    ],
)
def test_bresenham_reaches_end(x0, y0, x1, y1):
    points = list(bresenham(x0, y0, x1, y1))
    assert points[0] == (x0, y0)
    assert points[-1] == (x1, y1)
    assert len(points) == max(abs(x1 - x0), abs(y1 - y0)) + 1


@pytest.mark.parametrize("end", [(7, 3), (-6, 2), (1, -9), (-4, -4)])
def test_bresenham_steps_are_adjacent(end):
    points = list(bresenham(0, 0, *end))
    for (ax, ay), (bx, by) in zip(points, points[1:]):
        assert abs(bx - ax) <= 1
        assert abs(by - ay) <= 1
        assert (ax, ay) != (bx, by)