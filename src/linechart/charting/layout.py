"""Form-driven header and plot frame composition.

Maps a ``ChartForm`` (plus whether a legend / rate is present) to the
arrangement the card renders. Kept free of Qt so it can be unit tested
headless; the view only translates these structures into widgets.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .types import ChartForm

__all__ = [
    "LegendRateArrangement",
    "HeaderLayout",
    "PlotFrame",
    "header_layout",
    "plot_frame",
]


class LegendRateArrangement(Enum):
    SIDE_BY_SIDE = "side_by_side"  # legend left, rate right on one row
    STACKED = "stacked"  # legend row, then rate row
    RATE_IN_TITLE_ROW = "rate_in_title_row"  # rate beside title, legend below


@dataclass(frozen=True)
class HeaderLayout:
    arrangement: LegendRateArrangement
    show_legend: bool
    show_rate: bool

    @property
    def rate_in_title_row(self) -> bool:
        return self.arrangement is LegendRateArrangement.RATE_IN_TITLE_ROW


@dataclass(frozen=True)
class PlotFrame:
    width: float
    ideal_height: float
    max_height: float


def header_layout(form: ChartForm, has_legend: bool, has_rate: bool) -> HeaderLayout:
    if form in (ChartForm.LARGE, ChartForm.EXTRA_LARGE):
        arrangement = LegendRateArrangement.RATE_IN_TITLE_ROW
    elif form in (ChartForm.SMALL, ChartForm.DETAIL):
        arrangement = LegendRateArrangement.SIDE_BY_SIDE
    elif form is ChartForm.MEDIUM:
        arrangement = LegendRateArrangement.STACKED
    else:  # pragma: no cover - closed enum
        raise ValueError(f"Unhandled form {form!r}")
    return HeaderLayout(arrangement=arrangement, show_legend=has_legend, show_rate=has_rate)


def plot_frame(form: ChartForm, has_legend: bool, has_rate: bool) -> PlotFrame:
    width, height = form.plot_size()
    extra = 30.0 if form in (ChartForm.MEDIUM, ChartForm.EXTRA_LARGE) else 0.0
    if not has_legend and not has_rate:
        extra += 10.0
    return PlotFrame(width=width, ideal_height=height, max_height=height + extra)
