"""Geometry for the rectangle, star and ellipse drawing tools."""

from __future__ import annotations

import math
from decimal import Decimal
from typing import List

from runetools.geometry import Point

STAR_POINT_COUNT = 10
STAR_INNER_RADIUS_RATIO = 0.382
_ELLIPSE_KAPPA = 0.5522847498307936


def _signum(value: float) -> float:
    """Sign of ``value`` as 1.0 or -1.0, treating signed zeros by their sign."""
    if math.isnan(value):
        return value
    return math.copysign(1.0, value)


def square_locked(start: Point, current: Point) -> Point:
    """Move ``current`` so the box from ``start`` is a square of the same width.

    The vertical extent takes the magnitude of the horizontal one and keeps
    its own direction (a zero height counts as upward).
    """
    delta = current - start
    side = abs(delta.x)
    dy = side if _signum(delta.y) > 0 else -side
    return Point(start.x + delta.x, start.y + dy)


def star_locked(start: Point, current: Point) -> Point:
    """Move ``current`` so the box from ``start`` is a square of the larger extent."""
    dx = current.x - start.x
    dy = current.y - start.y
    size = max(abs(dx), abs(dy))
    return Point(start.x + size * _signum(dx), start.y + size * _signum(dy))


def rect_points(p1: Point, p3: Point) -> List[Point]:
    """Corners of the closed rectangle with opposite corners ``p1`` and ``p3``.

    The first corner, ``p1``, comes last, as closed paths store their start
    point at the end.
    """
    p2 = Point(p3.x, p1.y)
    p4 = Point(p1.x, p3.y)
    return [p2, p3, p4, p1]


def star_points(center: Point, outer: Point) -> List[Point]:
    """Vertices of a five-pointed star centred on ``center``.

    The outer radius is the distance to ``outer``; the inner vertices lie at
    0.382 of it. The first vertex points straight along negative y.
    """
    radius = (outer - center).hypot()
    inner_radius = radius * STAR_INNER_RADIUS_RATIO
    angle_offset = -math.pi / 2.0
    points = []
    for i in range(STAR_POINT_COUNT):
        angle = angle_offset + i * math.pi / 5.0
        r = radius if i % 2 == 0 else inner_radius
        points.append(Point(center.x + r * math.cos(angle), center.y + r * math.sin(angle)))
    return points


def _format_number(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def size_label(start: Point, current: Point) -> str:
    """The ``"width, height"`` label shown while dragging out a shape."""
    size = start - current
    return f"{_format_number(abs(size.x))}, {_format_number(abs(size.y))}"


def ellipse_points(p1: Point, p2: Point) -> List[Point]:
    """Points of a closed four-arc cubic ellipse inscribed in the box ``p1``-``p2``.

    The sequence is off, off, on for each quarter arc; the final on-curve
    point is the start point, at the right-hand extreme of the ellipse.
    """
    x0, x1 = sorted((p1.x, p2.x))
    y0, y1 = sorted((p1.y, p2.y))
    cx, cy = (x0 + x1) / 2.0, (y0 + y1) / 2.0
    rx, ry = (x1 - x0) / 2.0, (y1 - y0) / 2.0
    kx, ky = rx * _ELLIPSE_KAPPA, ry * _ELLIPSE_KAPPA
    return [
        Point(cx + rx, cy + ky),
        Point(cx + kx, cy + ry),
        Point(cx, cy + ry),
        Point(cx - kx, cy + ry),
        Point(cx - rx, cy + ky),
        Point(cx - rx, cy),
        Point(cx - rx, cy - ky),
        Point(cx - kx, cy - ry),
        Point(cx, cy - ry),
        Point(cx + kx, cy - ry),
        Point(cx + rx, cy - ky),
        Point(cx + rx, cy),
    ]