import math

import pytest

from linechart.charting.rate import INFINITE_RATE_TEXT, RateDirection, format_rate


def test_positive_rate_points_up():
    d = format_rate(0.25)
    assert d.direction is RateDirection.UP
    assert d.text == "25 %"
    assert d.label == "↑ 25 %"


def test_negative_finite_rate_never_shows_infinity_text():
    d = format_rate(-1.0)
    assert d.direction is RateDirection.DOWN
    assert d.text == "-100 %"
    assert INFINITE_RATE_TEXT not in d.label


@pytest.mark.parametrize("rate", [None, 0, 0.0, -0.0, math.nan])
def test_nothing_shown(rate):
    assert format_rate(rate) is None
    assert format_rate(rate, show_infinities=True) is None


def test_percentage_rounds_half_away_from_zero():
    assert format_rate(0.125).text == "13 %"
    assert format_rate(-0.125).text == "-13 %"
    assert format_rate(0.004).text == "0 %"


@pytest.mark.parametrize("rate", [math.inf, -math.inf])
def test_infinities_hidden_unless_enabled(rate):
    assert format_rate(rate) is None
    assert format_rate(rate, show_infinities=True).text == INFINITE_RATE_TEXT


def test_infinity_arrow_directions():
    assert format_rate(-math.inf, show_infinities=True).direction is RateDirection.UP
    assert format_rate(math.inf, show_infinities=True).direction is RateDirection.DOWN


def test_arrows():
    assert RateDirection.UP.arrow == "↑"
    assert RateDirection.DOWN.arrow == "↓"
