"""Small geometric helpers shared by the tools."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Point:
    """A 2D point or vector."""

    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> "Point":
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def hypot(self) -> float:
        """Length of this point taken as a vector."""
        return math.hypot(self.x, self.y)


def _finite_ratio(numerator: float, denominator: float) -> float:
    try:
        ratio = numerator / denominator
    except ZeroDivisionError:
        return 1.0
    return ratio if math.isfinite(ratio) else 1.0


def compute_scale(pre: Tuple[float, float], post: Tuple[float, float]) -> Point:
    """Scale factors taking a ``(width, height)`` size ``pre`` to ``post``.

    Axes whose ratio is not finite scale by 1.
    """
    pre_w, pre_h = pre
    post_w, post_h = post
    return Point(_finite_ratio(post_w, pre_w), _finite_ratio(post_h, pre_h))


def axis_locked_point(point: Point, prev: Point) -> Point:
    """Lock the smaller axis of the movement from ``prev`` to ``point`` onto ``prev``."""
    delta = prev - point
    if abs(delta.x) > abs(delta.y):
        return Point(point.x, prev.y)
    return Point(prev.x, point.y)