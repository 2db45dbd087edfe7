import math

import pytest

from runetools.geometry import Point
from runetools.shapes import (
    ellipse_points,
    rect_points,
    size_label,
    square_locked,
    star_locked,
    star_points,
)


def test_square_locked_keeps_downward_direction():
    assert square_locked(Point(0, 0), Point(5, -2)) == Point(5, -5)


def test_square_locked_keeps_upward_direction():
    assert square_locked(Point(1, 1), Point(-3, 7)) == Point(-3, 5)


def test_square_locked_zero_height_counts_as_upward():
    assert square_locked(Point(0, 0), Point(4, 0)) == Point(4, 4)


def test_star_locked_uses_larger_extent():
    assert star_locked(Point(0, 0), Point(3, -5)) == Point(5, -5)
    assert star_locked(Point(0, 0), Point(-7, 2)) == Point(-7, 7)


def test_rect_points_puts_first_corner_last():
    pts = rect_points(Point(0, 0), Point(10, 5))
    assert pts == [Point(10, 0), Point(10, 5), Point(0, 5), Point(0, 0)]


def test_star_points_count_and_radii():
    center = Point(10, 20)
    outer = Point(10, 30)
    pts = star_points(center, outer)
    assert len(pts) == 10
    for i, p in enumerate(pts):
        dist = (p - center).hypot()
        expected = 10.0 if i % 2 == 0 else 10.0 * 0.382
        assert dist == pytest.approx(expected)


def test_star_first_point_along_negative_y():
    center = Point(0, 0)
    pts = star_points(center, Point(0, 10))
    assert pts[0].x == pytest.approx(0.0)
    assert pts[0].y == pytest.approx(-10.0)


def test_star_points_degenerate_radius():
    pts = star_points(Point(3, 4), Point(3, 4))
    assert all(p == Point(3, 4) for p in pts)


def test_size_label_integers():
    assert size_label(Point(0, 0), Point(3, -4)) == "3, 4"


def test_size_label_fraction():
    assert size_label(Point(0, 0), Point(2.5, 1)) == "2.5, 1"


def test_ellipse_points_on_curve_points_lie_on_ellipse():
    pts = ellipse_points(Point(10, 2), Point(0, 8))
    assert len(pts) == 12
    cx, cy, rx, ry = 5.0, 5.0, 5.0, 3.0
    for p in pts[2::3]:
        value = ((p.x - cx) / rx) ** 2 + ((p.y - cy) / ry) ** 2
        assert value == pytest.approx(1.0)


def test_ellipse_points_closes_at_right_extreme():
    pts = ellipse_points(Point(0, 0), Point(4, 2))
    assert pts[-1] == Point(4, 1)
    assert all(0 <= p.x <= 4 and 0 <= p.y <= 2 for p in pts)
    assert not any(math.isnan(p.x) for p in pts)