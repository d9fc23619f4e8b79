import math

import pytest

from linechart.charting.locator import (
    NO_SELECTION,
    PointLocator,
    Selection,
    locate,
    pointer_x,
    round_half_away,
)
from linechart.charting.types import ChartData, InsufficientDataError

QUARTERS = [10, 25, 28, 18]
NINE = [8, 23, 54, 32, 12, 37, 7, 23, 43]


def test_pointer_between_samples_picks_nearest():
    sel = locate(QUARTERS, (65, 0), 180, 120)
    assert sel.index == 1
    assert QUARTERS[sel.index] == 25
    assert sel.x == pytest.approx(60.0)
    assert sel.y == pytest.approx(25 * 120 / 38)


def test_pointer_beyond_width_is_no_selection():
    sel = locate(NINE, (200, 10), 180, 120)
    assert sel is NO_SELECTION
    assert sel.index is None
    assert sel.point == (0.0, 0.0)
    assert not sel.is_selection


def test_edges_select_first_and_last():
    assert locate(NINE, (0, 0), 180, 120).index == 0
    assert locate(NINE, (180, 0), 180, 120).index == len(NINE) - 1


def test_index_is_round_of_offset_over_step_width():
    step = 180 / (len(NINE) - 1)
    for x in range(0, 181, 7):
        expected = round_half_away(x / step)
        assert locate(NINE, (x, 0), 180, 120).index == expected


def test_ties_round_away_from_zero():
    # step width 50: 25 -> 0.5 and 75 -> 1.5
    assert locate([1, 2, 3], (25, 0), 100, 50).index == 1
    assert locate([1, 2, 3], (75, 0), 100, 50).index == 2
    assert round_half_away(2.5) == 3
    assert round_half_away(-2.5) == -3
    assert round_half_away(0.49) == 0


def test_slightly_negative_pointer_rounds_to_first():
    assert locate(QUARTERS, (-20, 0), 180, 120).index == 0
    assert locate(QUARTERS, (-40, 0), 180, 120) is NO_SELECTION


@pytest.mark.parametrize("x", [math.nan, math.inf, -math.inf])
def test_non_finite_pointer_is_no_selection(x):
    assert locate(NINE, (x, 0), 180, 120) is NO_SELECTION
    assert PointLocator(ChartData.from_values(NINE)).locate((x, 0), 180, 120) is NO_SELECTION


def test_same_inputs_same_result():
    a = locate(NINE, (91.3, 4), 180, 120)
    b = locate(NINE, (91.3, 4), 180, 120)
    assert a == b


def test_vertical_pointer_component_is_ignored():
    assert locate(QUARTERS, (65, 0), 180, 120) == locate(QUARTERS, (65, 999), 180, 120)


def test_zero_vertical_denominator_gives_zero_height():
    sel = locate([-5, 5], (100, 0), 100, 80)
    assert sel.index == 1
    assert sel.y == 0.0


@pytest.mark.parametrize("samples", [[], [4.0]])
def test_fewer_than_two_samples_fails_fast(samples):
    with pytest.raises(InsufficientDataError):
        locate(samples, (0, 0), 100, 100)


def test_non_positive_width_rejected():
    with pytest.raises(ValueError):
        locate(QUARTERS, (0, 0), 0, 100)


def test_pointer_shapes():
    class P:
        def __init__(self, x):
            self.x = x

    assert pointer_x((3, 4)) == 3.0
    assert pointer_x([5, 6]) == 5.0
    assert pointer_x(P(7)) == 7.0

    from PyQt6.QtCore import QPointF

    assert pointer_x(QPointF(8.5, 1.0)) == 8.5


def test_point_locator_binds_data():
    data = ChartData.from_values(QUARTERS)
    loc = PointLocator(data)
    assert loc.data is data
    assert loc.step_width(180) == pytest.approx(60.0)
    assert loc.step_height(120) == pytest.approx(120 / 38)
    assert loc.locate((65, 0), 180, 120) == Selection(1, 60.0, pytest.approx(25 * 120 / 38))
