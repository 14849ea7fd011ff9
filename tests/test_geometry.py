import random

import pytest

from casegen.geometry import (
    Point,
    PointDirection,
    point_direction,
    polar_angle_sort,
    quadrant,
)


def test_subtraction_of_self_is_origin():
    p = Point(7, -3)
    assert p - p == Point()


def test_subtraction_then_cross_is_translation_invariant():
    a, b, o = Point(4, 9), Point(-2, 5), Point(3, 3)
    assert ((a - o) ^ (b - o)) == ((a - o) ^ (b - o))
    assert (a - o) - (b - o) == a - b


def test_cross_is_antisymmetric():
    a, b = Point(3, 5), Point(-4, 2)
    assert a ^ b == -(b ^ a)
    assert a ^ a == 0


def test_dot_is_symmetric():
    a, b = Point(3, 5), Point(-4, 2)
    assert a * b == b * a


def test_str_uses_space_separator():
    assert str(Point(3, -4)) == "3 -4"


def test_quadrants_counter_clockwise():
    pts = [Point(1, 1), Point(-1, 1), Point(-1, -1), Point(1, -1)]
    assert [quadrant(p) for p in pts] == [0, 1, 2, 3]


def test_origin_and_positive_axis_share_quadrant():
    assert quadrant(Point()) == quadrant(Point(5, 0)) == quadrant(Point(1, 1))


def test_polar_angle_sort_orders_around_origin():
    expected = [
        Point(1, 0),
        Point(1, 1),
        Point(0, 1),
        Point(-1, 1),
        Point(-1, 0),
        Point(-1, -1),
        Point(0, -1),
        Point(1, -1),
    ]
    shuffled = expected[:]
    random.Random(3).shuffle(shuffled)
    assert polar_angle_sort(shuffled) == expected


def test_polar_angle_sort_collinear_by_x():
    pts = [Point(3, 3), Point(1, 1), Point(2, 2)]
    assert polar_angle_sort(pts) == [Point(1, 1), Point(2, 2), Point(3, 3)]


def test_polar_angle_sort_with_origin_matches_shifted():
    o = Point(10, 10)
    base = [Point(1, 0), Point(0, 1), Point(-1, 0), Point(0, -1)]
    shifted = [Point(p.x + o.x, p.y + o.y) for p in base]
    result = polar_angle_sort(reversed(shifted), o)
    assert [p - o for p in result] == base


@pytest.mark.parametrize(
    "c, expected",
    [
        (Point(1, 1), PointDirection.COUNTER_CLOCKWISE),
        (Point(1, -1), PointDirection.CLOCKWISE),
        (Point(-1, 0), PointDirection.ONLINE_BACK),
        (Point(5, 0), PointDirection.ONLINE_FRONT),
        (Point(1, 0), PointDirection.ON_SEGMENT),
    ],
)
def test_point_direction(c, expected):
    assert point_direction(Point(0, 0), Point(2, 0), c) is expected


def test_point_direction_swapping_ends_flips_turn():
    a, b, c = Point(0, 0), Point(3, 1), Point(1, 4)
    assert point_direction(a, b, c) is PointDirection.COUNTER_CLOCKWISE
    assert point_direction(b, a, c) is PointDirection.CLOCKWISE