"""Plane points and the basic orientation algorithms on them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import cmp_to_key
from typing import Iterable, Union

Number = Union[int, float]


def _format_number(value: Number) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


@dataclass(frozen=True, order=True)
class Point:
    """A point, or a vector from the origin, with integer or real coordinates."""

    x: Number = 0
    y: Number = 0

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __xor__(self, other: Point) -> Number:
        """Cross product of two vectors."""
        if not isinstance(other, Point):
            return NotImplemented
        return self.x * other.y - self.y * other.x

    def __mul__(self, other: Point) -> Number:
        """Dot product of two vectors."""
        if not isinstance(other, Point):
            return NotImplemented
        return self.x * other.x + self.y * other.y

    def __str__(self) -> str:
        return f"{_format_number(self.x)} {_format_number(self.y)}"


class PointDirection(Enum):
    """Position of a point relative to a directed segment."""

    COUNTER_CLOCKWISE = "counter_clockwise"
    CLOCKWISE = "clockwise"
    ONLINE_BACK = "online_back"
    ONLINE_FRONT = "online_front"
    ON_SEGMENT = "on_segment"


def quadrant(p: Point) -> int:
    """Quadrant index 0..3 counter-clockwise, starting from the positive x-axis."""
    below = p.y < 0
    left = p.x < 0
    return (int(below) << 1) | int(left ^ below)


def polar_angle_sort(points: Iterable[Point], origin: Point | None = None) -> list[Point]:
    """Return the points sorted by polar angle around ``origin``.

    Points at the same angle are ordered by their x-coordinate.
    """
    o = origin if origin is not None else Point()

    def less(a: Point, b: Point) -> bool:
        oa = a - o
        ob = b - o
        qa = quadrant(oa)
        qb = quadrant(ob)
        if qa == qb:
            cross = oa ^ ob
            if cross == 0:
                return a.x < b.x
            return cross > 0
        return qa < qb

    def compare(a: Point, b: Point) -> int:
        if less(a, b):
            return -1
        if less(b, a):
            return 1
        return 0

    return sorted(points, key=cmp_to_key(compare))


def point_direction(a: Point, b: Point, c: Point) -> PointDirection:
    """Where ``c`` lies relative to the directed segment from ``a`` to ``b``."""
    b = b - a
    c = c - a
    cross = b ^ c
    if cross > 0:
        return PointDirection.COUNTER_CLOCKWISE
    if cross < 0:
        return PointDirection.CLOCKWISE
    if b * c < 0:
        return PointDirection.ONLINE_BACK
    if b * b < c * c:
        return PointDirection.ONLINE_FRONT
    return PointDirection.ON_SEGMENT