"""Static card snapshots rendered with matplotlib.

Produces PNG/SVG images of a line card (background, header text, gradient
line, optional highlighted selection) without a running Qt event loop. The
figure uses the Agg canvas directly and pixel coordinates matching the Qt
widget (origin top-left, y down), so the same geometry functions apply.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import numpy as np
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.collections import LineCollection
from matplotlib.colors import LinearSegmentedColormap, to_rgba
from matplotlib.figure import Figure
from matplotlib.patches import FancyBboxPatch, Polygon

from linechart.design.gradients import area_fill_gradient, from_gradient_color
from linechart.design.palette import Colors
from linechart.design.styles import ChartStyle, ColorScheme, Styles, style_for_scheme

from .formatting import DEFAULT_VALUE_SPECIFIER, format_value, validate_specifier
from .geometry import closed_area, line_points, point_on_curve, quad_curve_segments
from .layout import LegendRateArrangement, header_layout, plot_frame
from .rate import format_rate
from .types import ChartData, ChartForm

__all__ = ["CardSnapshot", "build_figure", "render_snapshot", "SUPPORTED_FORMATS"]

log = logging.getLogger(__name__)

SUPPORTED_FORMATS = {"png", "svg"}
CURVE_SAMPLES_PER_SEGMENT = 8


@dataclass(frozen=True)
class CardSnapshot:
    """Everything needed to draw one card.

    ``selected_index`` renders the drag state: value label instead of the
    header, and the indicator dot on the curve at that sample.
    """

    data: ChartData
    title: str
    legend: Optional[str] = None
    style: ChartStyle = Styles.LINE_CHART_STYLE_ONE
    form: ChartForm = ChartForm.MEDIUM
    rate_value: Optional[float] = None
    show_infinities: bool = False
    value_specifier: str = DEFAULT_VALUE_SPECIFIER
    color_scheme: ColorScheme = ColorScheme.LIGHT
    selected_index: Optional[int] = None


def _curve_xy(points, step: int = CURVE_SAMPLES_PER_SEGMENT) -> np.ndarray:
    segs = quad_curve_segments(points)
    ts = np.linspace(0.0, 1.0, step, endpoint=False)
    xy = [seg.at(float(t)) for seg in segs for t in ts]
    xy.append(segs[-1].end)
    return np.asarray(xy, dtype=float)


def _draw_header(fig: Figure, card: CardSnapshot, active: ChartStyle, w: float, h: float) -> None:
    def at(x_px: float, y_px: float):
        return x_px / w, 1.0 - y_px / h

    rate = format_rate(card.rate_value, card.show_infinities)
    if card.selected_index is not None:
        pt = card.data[card.selected_index]
        fig.text(*at(w / 2, 14), format_value(pt.value, card.value_specifier), ha="center", va="top",
                 fontsize=24, fontweight="bold", color=active.text_color)
        if pt.label:
            fig.text(*at(w / 2, 50), pt.label, ha="center", va="top", fontsize=9,
                     color=active.legend_text_color)
        return
    layout = header_layout(card.form, card.legend is not None, card.rate_value is not None)
    fig.text(*at(16, 16), card.title, ha="left", va="top", fontsize=15, fontweight="bold",
             color=active.text_color)
    y = 48.0
    if layout.rate_in_title_row:
        if rate:
            fig.text(*at(w - 16, 20), rate.label, ha="right", va="top", fontsize=9, color=active.text_color)
        if card.legend:
            fig.text(*at(16, y), card.legend, ha="left", va="top", fontsize=9, color=active.legend_text_color)
        return
    if card.legend:
        fig.text(*at(16, y), card.legend, ha="left", va="top", fontsize=9, color=active.legend_text_color)
        if layout.arrangement is LegendRateArrangement.STACKED:
            y += 20
    if rate:
        x, ha = (w - 16, "right") if layout.arrangement is LegendRateArrangement.SIDE_BY_SIDE else (16, "left")
        fig.text(*at(x, y), rate.label, ha=ha, va="top", fontsize=9, color=active.text_color)


def build_figure(card: CardSnapshot, dpi: int = 120) -> Figure:
    w, h = (float(v) for v in card.form.size())
    active = style_for_scheme(card.style, card.color_scheme)
    fig = Figure(figsize=(w / dpi, h / dpi), dpi=dpi)
    fig.patch.set_alpha(0.0)
    ax = fig.add_axes((0, 0, 1, 1))
    ax.set_xlim(0, w)
    ax.set_ylim(h, 0)
    ax.axis("off")
    ax.add_patch(
        FancyBboxPatch((0, 0), w, h, boxstyle="round,pad=0,rounding_size=20",
                       facecolor=active.background_color, edgecolor="none")
    )

    frame = plot_frame(card.form, card.legend is not None, card.rate_value is not None)
    plot_h = min(frame.max_height, h)
    top = h - plot_h
    pts = [(x, y + top) for x, y in line_points(card.data.only_points(), w, plot_h)]
    curve = _curve_xy(pts)

    area = Polygon(closed_area([tuple(p) for p in curve], h), closed=True, facecolor="none", edgecolor="none")
    ax.add_patch(area)
    fill_def = area_fill_gradient(bottom=active.background_color)
    fill = LinearSegmentedColormap.from_list("area", [(s.position, s.color) for s in fill_def.stops])
    grad = np.linspace(0.0, 1.0, 64).reshape(-1, 1)
    img = ax.imshow(grad, cmap=fill, extent=(0, w, h, float(curve[:, 1].min())), aspect="auto", zorder=1)
    img.set_clip_path(area)

    stroke = from_gradient_color("stroke", card.style.gradient).stops
    start, end = np.array(to_rgba(stroke[0].color)), np.array(to_rgba(stroke[-1].color))
    segs = np.stack([curve[:-1], curve[1:]], axis=1)
    frac = np.linspace(0.0, 1.0, len(segs)).reshape(-1, 1)
    ax.add_collection(LineCollection(segs, colors=start + (end - start) * frac, linewidths=2.2,
                                     capstyle="round", joinstyle="round", zorder=2))

    if card.selected_index is not None:
        x = card.selected_index * (w / (len(card.data) - 1))
        cx, cy = point_on_curve(quad_curve_segments(pts), x)
        ax.scatter([cx], [cy], s=60, color=Colors.INDICATOR_KNOB, edgecolors=Colors.WHITE,
                   linewidths=2.5, zorder=3)
    _draw_header(fig, card, active, w, h)
    return fig


def render_snapshot(card: CardSnapshot, path: str | Path, *, format: str = "png", dpi: int = 120) -> Path:
    """Write ``card`` to ``path`` as PNG or SVG; returns the path written."""
    fmt = format.lower()
    if fmt not in SUPPORTED_FORMATS:
        raise ValueError("format must be 'png' or 'svg'")
    if card.selected_index is not None and not 0 <= card.selected_index < len(card.data):
        raise IndexError(f"selected_index {card.selected_index} out of range")
    validate_specifier(card.value_specifier)
    fig = build_figure(card, dpi=dpi)
    FigureCanvasAgg(fig)
    out = Path(path)
    fig.savefig(out, format=fmt, dpi=dpi if fmt == "png" else None, transparent=True)
    log.info("wrote %s snapshot %s", fmt, out)
    return out
