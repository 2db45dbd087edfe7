"""Computations behind the measure tool: angles, labels and segment lengths."""

from __future__ import annotations

import math
from typing import Iterable, List, Tuple

from runetools.geometry import Point

MEASURE_FUZZY_TOLERANCE = 0.1
"""Segments shorter than this, in design units, are not reported."""


def atan_to_angle(atan: float) -> float:
    """Convert a screen-space ``atan2`` result to degrees in ``[-90, 270)``.

    Non-finite input gives 0.
    """
    if not math.isfinite(atan):
        return 0.0
    angle = atan * (-180.0 / math.pi)
    if angle < -90.0:
        angle += 360.0
    return angle


def _trim_zero_fraction(text: str) -> str:
    while text.endswith(".0"):
        text = text[:-2]
    return text


def format_pt(x: float, y: float) -> str:
    """Format a coordinate pair to one decimal, dropping a ``.0`` fraction."""
    return f"{_trim_zero_fraction(f'{x:.1f}')}, {_trim_zero_fraction(f'{y:.1f}')}"


def label_offset(angle: float) -> Point:
    """Offset of the angle label from the end of the measuring line."""
    if angle < 90.0:
        return Point(14.0, -6.0)
    if angle < 180.0:
        return Point(-14.0, -6.0)
    return Point(-14.0, 8.0)


def _clamp_unit(t: float) -> float:
    if math.isnan(t):
        return 0.0
    return min(max(t, 0.0), 1.0)


def cluster_intersections(line_ts: Iterable[float], line_length: float) -> List[float]:
    """Sort and merge intersection parameters along a measuring line.

    The line's endpoints 0 and 1 are always included. Parameters closer than
    the tolerance are merged: a cluster touching 0 stays at 0, one reaching 1
    snaps to 1, and others take the midpoint of the cluster's extent.
    Raises ValueError if ``line_length`` is not positive.
    """
    if not line_length > 0:
        raise ValueError("line_length must be positive")
    ts = sorted([0.0, 1.0, *(_clamp_unit(t) for t in line_ts)])
    thresh = MEASURE_FUZZY_TOLERANCE / line_length

    result: List[float] = []
    cluster_start = -1.0
    last = -1.0
    for t in ts:
        if t - last > thresh:
            cluster_start = t
            result.append(t)
        elif cluster_start == 0.0:
            result[-1] = 0.0
        elif t == 1.0:
            result[-1] = 1.0
        else:
            result[-1] = 0.5 * (cluster_start + t)
        last = t
    return result


def segment_lengths(
    line_ts: Iterable[float], line_length: float
) -> List[Tuple[float, float]]:
    """Pieces of the measuring line between merged intersections.

    Returns ``(mid_t, length)`` for each piece, where ``mid_t`` is the
    parameter of the piece's centre and ``length`` its length in design units.
    """
    ts = cluster_intersections(line_ts, line_length)
    return [
        (0.5 * (t0 + t1), line_length * (t1 - t0)) for t0, t1 in zip(ts, ts[1:])
    ]