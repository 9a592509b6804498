import math
from itertools import combinations

import pytest

from algocollect.geometry import (
    Circle,
    Point,
    distance,
    encloses,
    smallest_enclosing_circle,
    triangle_area,
)


def _check_minimal_shape(points, circle):
    assert encloses(points, circle.center, circle.radius)
    widest = max(distance(a, b) for a, b in combinations(points, 2))
    assert circle.radius >= widest / 2 - 1e-9
    on_boundary = [
        p for p in points if distance(p, circle.center) == pytest.approx(circle.radius)
    ]
    assert len(on_boundary) >= 2


def test_distance_pythagorean():
    assert distance(Point(0, 0), Point(3, 4)) == 5.0


def test_distance_is_symmetric():
    a, b = Point(1.5, -2), Point(-3, 7.25)
    assert distance(a, b) == distance(b, a)


def test_triangle_area_right_triangle():
    assert triangle_area(Point(0, 0), Point(4, 0), Point(0, 3)) == pytest.approx(6.0)


def test_triangle_area_collinear_is_zero():
    assert triangle_area(Point(0, 0), Point(1, 1), Point(2, 2)) == pytest.approx(0.0)


def test_encloses_true_and_false():
    points = [Point(0, 0), Point(1, 0), Point(0, 1)]
    assert encloses(points, Point(0, 0), 1.0)
    assert not encloses(points + [Point(5, 5)], Point(0, 0), 1.0)


def test_square_circle():
    corners = [Point(0, 0), Point(0, 2), Point(2, 2), Point(2, 0)]
    circle = smallest_enclosing_circle(corners)
    assert circle.radius == pytest.approx(distance(corners[0], corners[2]) / 2)
    for corner in corners:
        assert distance(corner, circle.center) == pytest.approx(circle.radius)


def test_five_point_example():
    points = [Point(0, 0), Point(1, 3), Point(4, 1), Point(5, 4), Point(3, -2)]
    _check_minimal_shape(points, smallest_enclosing_circle(points))


def test_three_point_example():
    points = [Point(0.5, 1), Point(3.5, 3), Point(2.5, 0)]
    _check_minimal_shape(points, smallest_enclosing_circle(points))


def test_collinear_points_use_diameter():
    points = [Point(0, 0), Point(1, 0), Point(2, 0)]
    circle = smallest_enclosing_circle(points)
    assert circle.radius == pytest.approx(distance(points[0], points[2]) / 2)
    assert distance(circle.center, points[1]) == pytest.approx(0.0)


def test_single_point():
    point = Point(3, 4)
    assert smallest_enclosing_circle([point]) == Circle(point, 0.0)


def test_empty_raises():
    with pytest.raises(ValueError):
        smallest_enclosing_circle([])


def test_circle_not_larger_than_any_enclosing_diameter_circle():
    points = [Point(0, 0), Point(1, 3), Point(4, 1), Point(5, 4), Point(3, -2)]
    circle = smallest_enclosing_circle(points)
    for a, b in combinations(points, 2):
        mid = Point((a.x + b.x) / 2, (a.y + b.y) / 2)
        r = distance(a, b) / 2
        if encloses(points, mid, r):
            assert circle.radius <= r + 1e-9
    assert circle.radius < math.inf