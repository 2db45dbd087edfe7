import math

import pytest

from runetools.geometry import Point
from runetools.measure import (
    atan_to_angle,
    cluster_intersections,
    format_pt,
    label_offset,
    segment_lengths,
)


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_atan_to_angle_non_finite_is_zero(value):
    assert atan_to_angle(value) == 0.0


@pytest.mark.parametrize("atan", [-3.1, -1.0, -0.2, 0.0, 0.3, 1.5, 3.1])
def test_atan_to_angle_range(atan):
    angle = atan_to_angle(atan)
    assert -90.0 <= angle < 270.0
    # converting back agrees up to a full turn
    back = -angle * math.pi / 180.0
    assert math.isclose(math.cos(back), math.cos(atan), abs_tol=1e-9)
    assert math.isclose(math.sin(back), math.sin(atan), abs_tol=1e-9)


def test_atan_to_angle_straight_up_on_screen():
    assert atan_to_angle(-math.pi / 2) == pytest.approx(90.0)


def test_format_pt_drops_zero_fraction():
    assert format_pt(10.0, 20.0) == "10, 20"
    assert format_pt(1.5, -3.0) == "1.5, -3"


def test_label_offset_by_angle():
    assert label_offset(45.0) == Point(14.0, -6.0)
    assert label_offset(120.0) == Point(-14.0, -6.0)
    assert label_offset(200.0) == Point(-14.0, 8.0)


def test_cluster_without_hits_is_endpoints():
    assert cluster_intersections([], 100.0) == [0.0, 1.0]


def test_cluster_keeps_distinct_hits_sorted():
    result = cluster_intersections([0.7, 0.2], 100.0)
    assert result == [0.0, 0.2, 0.7, 1.0]


def test_cluster_merges_close_hits_inside_range():
    result = cluster_intersections([0.5, 0.5005], 100.0)
    assert len(result) == 3
    assert 0.5 <= result[1] <= 0.5005


def test_cluster_snaps_to_endpoints():
    assert cluster_intersections([0.0005], 100.0) == [0.0, 1.0]
    assert cluster_intersections([0.9995], 100.0) == [0.0, 1.0]


def test_cluster_clamps_out_of_range():
    assert cluster_intersections([-0.5, 1.5], 100.0) == [0.0, 1.0]


def test_cluster_rejects_zero_length():
    with pytest.raises(ValueError):
        cluster_intersections([0.5], 0.0)


def test_segment_lengths_cover_whole_line():
    pieces = segment_lengths([0.25, 0.6], 80.0)
    assert len(pieces) == 3
    assert sum(length for _, length in pieces) == pytest.approx(80.0)
    mids = [mid for mid, _ in pieces]
    assert mids == sorted(mids)
    assert all(0.0 < mid < 1.0 for mid in mids)