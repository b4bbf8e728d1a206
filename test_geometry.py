import math

import numpy as np
import pytest

from geometry import ORIGIN, Point, cross, dot


def test_point_is_immutable_and_hashable():
    p = Point(1, 2)
    with pytest.raises(AttributeError):
        p.x = 5
    assert {Point(1, 2), Point(1, 2), Point(2, 1)} == {Point(1, 2), Point(2, 1)}


def test_numpy_integers_are_normalized():
    p = Point(np.int64(3), np.int32(-4))
    assert type(p.x) is int and type(p.y) is int
    assert p == Point(3, -4)


@pytest.mark.parametrize("x, y", [(1.5, 0), (0, "1"), (True, 0), (0, None)])
def test_non_integer_coordinates_rejected(x, y):
    with pytest.raises(TypeError):
        Point(x, y)


def test_lexicographic_order():
    points = [Point(1, 5), Point(0, 7), Point(1, -2), Point(0, 3)]
    assert sorted(points) == [Point(0, 3), Point(0, 7), Point(1, -2), Point(1, 5)]
    assert min(points) == Point(0, 3)
    assert Point(0, 9) < Point(1, 0)
    assert Point(1, 0) > Point(0, 9)
    assert Point(2, 2) <= Point(2, 2) and Point(2, 2) >= Point(2, 2)
    assert not Point(2, 2) < Point(2, 2)


def test_dominance_order():
    assert Point(0, 0).is_dominated_by(Point(1, 1))
    assert Point(0, 0).is_dominated_by(Point(1, 0))
    assert Point(0, 0).is_dominated_by(Point(0, 1))
    assert Point(1, 1).dominates(Point(0, 0))

    # incomparable under per-axis dominance
    a, b = Point(0, 5), Point(3, 1)
    assert not a.dominates(b) and not b.dominates(a)
    assert not a.is_dominated_by(a)


def test_distance():
    assert Point(0, 0).distance_to(Point(3, 4)) == 5.0
    assert Point(3, 4).distance_to(Point(0, 0)) == 5.0
    assert Point(-1, -1).distance_to(Point(-1, -1)) == 0.0
    assert Point(-2, 1).squared_distance_to(Point(1, -3)) == 25


def test_angle_from():
    assert ORIGIN.angle_from(ORIGIN) == 0
    assert ORIGIN.angle_from(Point(1, 0)) == 0
    assert ORIGIN.angle_from(Point(0, 1)) == 90
    assert ORIGIN.angle_from(Point(-1, 0)) == 180
    assert ORIGIN.angle_from(Point(0, -1)) == -90
    # direction of the argument seen from self, not the other way round
    assert Point(2, 2).angle_from(Point(3, 3)) == pytest.approx(45)
    assert Point(3, 3).angle_from(Point(2, 2)) == pytest.approx(-135)


def test_offset_from():
    assert Point(5, 7).offset_from(Point(2, 10)) == Point(3, -3)
    assert Point(5, 7).offset_from(ORIGIN) == Point(5, 7)


def test_rotate():
    assert Point(10, 0).rotate(ORIGIN, 90) == Point(0, 10)
    assert Point(10, 0).rotate(ORIGIN, 180) == Point(-10, 0)
    assert Point(3, 4).rotate(Point(3, 3), -90) == Point(4, 3)
    # truncation toward zero, not rounding
    assert Point(10, 0).rotate(ORIGIN, 45) == Point(7, 7)
    assert Point(-10, 0).rotate(ORIGIN, 45) == Point(-7, -7)


def test_rotate_onto_x_axis():
    p = Point(3, 4)
    rotated = p.rotate(ORIGIN, -ORIGIN.angle_from(p))
    assert rotated.y == 0
    assert rotated.x in (4, 5)


@pytest.mark.parametrize("angle", [math.nan, math.inf, -math.inf])
def test_rotate_rejects_non_finite_angle(angle):
    with pytest.raises(ValueError):
        Point(1, 1).rotate(ORIGIN, angle)


def test_cross_and_dot():
    o, a = Point(0, 0), Point(4, 0)
    assert cross(o, a, Point(2, 3)) > 0
    assert cross(o, a, Point(2, -3)) < 0
    assert cross(o, a, Point(9, 0)) == 0
    assert dot(o, a, Point(-3, 0)) < 0
    assert dot(o, a, Point(3, 0)) > 0
