import pytest

from linechart.charting.geometry import (
    closed_area,
    line_points,
    point_on_curve,
    quad_curve_segments,
)
from linechart.charting.types import InsufficientDataError

QUARTERS = [10, 25, 28, 18]


def test_line_points_min_max_normalised():
    pts = line_points(QUARTERS, 180, 120)
    assert pts == [(0.0, 120.0), (60.0, 45.0), (120.0, 30.0), (180.0, 80.0)]


def test_flat_series_sits_on_bottom_edge():
    pts = line_points([5, 5, 5], 100, 50)
    assert [y for _, y in pts] == [50.0, 50.0, 50.0]


def test_line_points_needs_two_samples():
    with pytest.raises(InsufficientDataError):
        line_points([1], 100, 50)


def test_segments_are_continuous():
    pts = line_points(QUARTERS, 180, 120)
    segs = quad_curve_segments(pts)
    assert len(segs) == 2 * (len(pts) - 1)
    assert segs[0].start == pts[0]
    assert segs[-1].end == pts[-1]
    for a, b in zip(segs, segs[1:]):
        assert a.end == b.start


def test_curve_passes_through_samples():
    pts = line_points(QUARTERS, 180, 120)
    segs = quad_curve_segments(pts)
    for x, y in pts:
        px, py = point_on_curve(segs, x)
        assert px == pytest.approx(x)
        assert py == pytest.approx(y)


def test_x_is_linear_along_each_segment():
    segs = quad_curve_segments(line_points(QUARTERS, 180, 120))
    for seg in segs:
        assert seg.at(0.5)[0] == pytest.approx((seg.start[0] + seg.end[0]) / 2)


def test_point_on_curve_clamps():
    pts = line_points(QUARTERS, 180, 120)
    segs = quad_curve_segments(pts)
    assert point_on_curve(segs, -10) == pts[0]
    assert point_on_curve(segs, 500) == pts[-1]


def test_point_on_curve_requires_segments():
    with pytest.raises(ValueError):
        point_on_curve([], 0)


def test_closed_area():
    pts = [(0.0, 10.0), (50.0, 5.0), (100.0, 20.0)]
    area = closed_area(pts, 40)
    assert area[0] == (0.0, 40)
    assert area[-1] == (100.0, 40)
    assert area[1:-1] == pts
    assert closed_area([], 40) == []
