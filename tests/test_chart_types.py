import math

import pytest

from linechart.charting.types import ChartData, ChartForm, ChartPoint, InsufficientDataError


def test_from_values_accepts_numbers_pairs_and_points():
    data = ChartData.from_values([1, ("Q2", 2.5), ChartPoint("Q3", 3)])
    assert len(data) == 3
    assert data[0] == ChartPoint(None, 1.0)
    assert data[1].label == "Q2"
    assert data.only_points() == (1.0, 2.5, 3)


def test_iteration_and_equality():
    a = ChartData.from_values([1, 2, 3])
    b = ChartData.from_values([1.0, 2.0, 3.0])
    assert a == b
    assert hash(a) == hash(b)
    assert [p.value for p in a] == [1.0, 2.0, 3.0]
    assert a != ChartData.from_values([3, 2, 1])


@pytest.mark.parametrize("values", [[], [42]])
def test_insufficient_data(values):
    with pytest.raises(InsufficientDataError):
        ChartData.from_values(values)


def test_insufficient_data_is_value_error():
    assert issubclass(InsufficientDataError, ValueError)


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
def test_non_finite_samples_rejected(bad):
    with pytest.raises(ValueError):
        ChartData.from_values([1, bad])


def test_form_sizes():
    assert ChartForm.SMALL.size() == (180, 120)
    assert ChartForm.MEDIUM.size() == (180, 240)
    assert ChartForm.LARGE.size() == (360, 120)
    assert ChartForm.DETAIL.size() == (180, 120)
    assert ChartForm.EXTRA_LARGE.size() == (360, 240)
    assert ChartForm.SMALL is not ChartForm.DETAIL


def test_plot_size_is_half_height():
    for form in ChartForm:
        w, h = form.size()
        assert form.plot_size() == (w, h / 2)


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("medium", ChartForm.MEDIUM),
        (" Large ", ChartForm.LARGE),
        ("extra-large", ChartForm.EXTRA_LARGE),
        ("extralarge", ChartForm.EXTRA_LARGE),
        (ChartForm.DETAIL, ChartForm.DETAIL),
    ],
)
def test_form_parse(raw, expected):
    assert ChartForm.parse(raw) is expected


def test_form_parse_unknown():
    with pytest.raises(ValueError):
        ChartForm.parse("huge")
