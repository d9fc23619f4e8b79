import pytest

from linechart.design.gradients import (
    GradientDef,
    GradientStop,
    area_fill_gradient,
    from_gradient_color,
    qt_linear_gradient,
    validate_gradient,
)
from linechart.design.palette import Colors, GradientColors


def test_stroke_from_gradient_color():
    g = from_gradient_color("orange", GradientColors.ORANGE)
    assert g.kind == "stroke"
    assert [s.position for s in g.stops] == [0.0, 1.0]
    assert [s.color for s in g.stops] == [Colors.ORANGE_START, Colors.ORANGE_END]


def test_multi_stop_gradient_is_valid():
    g = GradientDef(
        id="sunset",
        kind="area",
        stops=(GradientStop(0.0, "#FF0000"), GradientStop(0.5, "#FF8800"), GradientStop(1.0, "#FFFFFF")),
    )
    assert validate_gradient(g) is g


@pytest.mark.parametrize(
    "g",
    [
        GradientDef("bad id", "stroke", (GradientStop(0, "#000"), GradientStop(1, "#FFF"))),
        GradientDef("x", "radial", (GradientStop(0, "#000"), GradientStop(1, "#FFF"))),
        GradientDef("x", "stroke", (GradientStop(0, "#000"),)),
        GradientDef("x", "stroke", (GradientStop(0.6, "#000"), GradientStop(0.2, "#FFF"))),
        GradientDef("x", "stroke", (GradientStop(0, "#000"), GradientStop(1.5, "#FFF"))),
        GradientDef("x", "stroke", (GradientStop(0, "black"), GradientStop(1, "#FFF"))),
    ],
)
def test_invalid_gradients_rejected(g):
    with pytest.raises(ValueError):
        validate_gradient(g)


def test_area_fill_follows_background():
    g = area_fill_gradient(bottom=Colors.BLACK)
    assert g.kind == "area"
    assert g.stops[0].color == Colors.GRADIENT_UPPER_BLUE
    assert g.stops[-1].color == Colors.BLACK


def test_area_fill_rejects_bad_colour():
    with pytest.raises(ValueError):
        area_fill_gradient(bottom="transparent")


def test_qt_linear_gradient_stops():
    qg = qt_linear_gradient(from_gradient_color("o", GradientColors.ORANGE), 0, 0, 100, 0)
    stops = qg.stops()
    assert [pos for pos, _ in stops] == [0.0, 1.0]
    assert stops[0][1].name().upper() == Colors.ORANGE_START
    assert qg.finalStop().x() == 100
