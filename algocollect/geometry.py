"""Smallest circle enclosing a set of points in the plane."""

from __future__ import annotations

import math
from dataclasses import dataclass
from itertools import combinations
from typing import Iterable, Optional, Sequence

_TOLERANCE = 1e-9


@dataclass(frozen=True)
class Point:
    """A point in the plane."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Circle:
    """A circle given by its centre and radius."""

    center: Point
    radius: float


def distance(a: Point, b: Point) -> float:
    """Return the Euclidean distance between two points."""
    return math.hypot(b.x - a.x, b.y - a.y)


def triangle_area(a: Point, b: Point, c: Point) -> float:
    """Return the area of triangle ``abc`` by Heron's formula."""
    ab, bc, ca = distance(a, b), distance(b, c), distance(c, a)
    s = (ab + bc + ca) / 2
    return math.sqrt(max(0.0, s * (s - ab) * (s - bc) * (s - ca)))


def encloses(points: Iterable[Point], center: Point, radius: float) -> bool:
    """Return True if every point lies within ``radius`` of ``center``."""
    limit = radius + _TOLERANCE * max(1.0, radius)
    return all(distance(point, center) <= limit for point in points)


def _circumcenter(a: Point, b: Point, c: Point) -> Optional[Point]:
    denominator = a.x * (b.y - c.y) + b.x * (c.y - a.y) + c.x * (a.y - b.y)
    if denominator == 0:
        return None
    sa = a.x * a.x + a.y * a.y
    sb = b.x * b.x + b.y * b.y
    sc = c.x * c.x + c.y * c.y
    x = -0.5 * (a.y * (sb - sc) + b.y * (sc - sa) + c.y * (sa - sb)) / denominator
    y = 0.5 * (a.x * (sb - sc) + b.x * (sc - sa) + c.x * (sa - sb)) / denominator
    return Point(x, y)


def _candidates(points: Sequence[Point]) -> Iterable[Circle]:
    for a, b, c in combinations(points, 3):
        center = _circumcenter(a, b, c)
        area = triangle_area(a, b, c)
        if center is None or area == 0:
            continue
        radius = distance(a, b) * distance(b, c) * distance(c, a) / (4 * area)
        yield Circle(center, radius)
    for a, b in combinations(points, 2):
        center = Point((a.x + b.x) / 2, (a.y + b.y) / 2)
        yield Circle(center, distance(center, a))


def smallest_enclosing_circle(points: Iterable[Point]) -> Circle:
    """Return the smallest circle containing every given point.

    Every circle through three of the points and every circle on two of
    the points as diameter is tried; the smallest that encloses them all
    wins, later candidates winning ties.
    """
    pts = list(points)
    if not pts:
        raise ValueError("at least one point is needed")
    if len(pts) == 1:
        return Circle(pts[0], 0.0)
    best: Optional[Circle] = None
    for circle in _candidates(pts):
        if not encloses(pts, circle.center, circle.radius):
            continue
        if best is None or circle.radius <= best.radius:
            best = circle
    if best is None:
        raise ValueError("no enclosing circle found")
    return best