"""Line chart card widget.

A fixed-size rounded card (size from ``ChartForm``) with:

- a header showing title, optional legend and optional rate indicator,
  arranged per ``linechart.charting.layout``;
- a gradient line plot anchored to the bottom edge;
- drag-to-inspect: pressing/moving the left mouse button shows the indicator
  dot, swaps the header for the selected value (large, bold) and its label,
  and pulses haptics once per selection change. Releasing ends the drag.

Pointer lookup uses card coordinates against the nominal plot frame
``(form width, form height / 2)``.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Union

from PyQt6.QtCore import QEasingCurve, QPropertyAnimation, QRectF, Qt
from PyQt6.QtGui import QBrush, QGuiApplication, QPainter, QPainterPath
from PyQt6.QtWidgets import (
    QGraphicsOpacityEffect,
    QHBoxLayout,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from linechart.charting.formatting import DEFAULT_VALUE_SPECIFIER, format_value, validate_specifier
from linechart.charting.layout import HeaderLayout, LegendRateArrangement, header_layout, plot_frame
from linechart.charting.locator import Selection
from linechart.charting.rate import RateDisplay, format_rate
from linechart.charting.types import ChartData, ChartForm
from linechart.design import reduced_motion
from linechart.design.elevation import apply_card_shadow
from linechart.design.palette import to_qcolor
from linechart.design.styles import ChartStyle, ColorScheme, Styles, style_for_scheme
from linechart.services.color_scheme import parse_preference, resolve_color_scheme
from linechart.services.event_bus import ChartEvent, EventBus
from linechart.services.haptics import HapticFeedback
from linechart.services.selection import SelectedPoint, SelectionModel
from linechart.services.service_locator import services

from .labels import ScalingLabel
from .line_plot import CORNER_RADIUS, LinePlot

__all__ = ["LineChartView", "TITLE_POINT_SIZE", "VALUE_POINT_SIZE", "CALLOUT_POINT_SIZE"]

log = logging.getLogger(__name__)

TITLE_POINT_SIZE = 21.0
VALUE_POINT_SIZE = 41.0
CALLOUT_POINT_SIZE = 12.0
HEADER_SPACING = 8
HEADER_PADDING = 16

PAGE_TOP_ROW = 0
PAGE_SELECTION = 1


class LineChartView(QWidget):
    def __init__(
        self,
        data: Union[ChartData, Iterable],
        title: str,
        legend: Optional[str] = None,
        style: ChartStyle = Styles.LINE_CHART_STYLE_ONE,
        form: Optional[ChartForm] = None,
        rate_value: Optional[float] = None,
        drop_shadow: bool = True,
        value_specifier: Optional[str] = None,
        show_infinities: bool = False,
        *,
        color_scheme: Optional[ColorScheme] = None,
        haptics: Optional[HapticFeedback] = None,
        event_bus: Optional[EventBus] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.setObjectName("lineChartView")
        cfg = services.try_get("chart_config")
        self._data = data if isinstance(data, ChartData) else ChartData.from_values(data)
        self._title = title
        self._legend = legend
        self._style = style
        self._form = form or (cfg.form if cfg is not None else ChartForm.MEDIUM)
        self._rate_value = rate_value
        self._show_infinities = show_infinities
        self._drop_shadow = drop_shadow
        self._value_specifier = validate_specifier(
            value_specifier
            or (cfg.value_specifier if cfg is not None else DEFAULT_VALUE_SPECIFIER)
        )
        self._rate_display = format_rate(rate_value, show_infinities)
        self._header_layout = header_layout(self._form, legend is not None, rate_value is not None)
        self._plot_frame = plot_frame(self._form, legend is not None, rate_value is not None)

        self._bus: Optional[EventBus] = event_bus or services.try_get("event_bus")
        haptics = haptics or services.try_get("haptics") or HapticFeedback(event_bus=self._bus)
        self._selection = SelectionModel(self._data, haptics=haptics, event_bus=self._bus)
        self._selection.indicator_visible.subscribe(self._on_indicator_changed)
        self._selection.current.subscribe(self._on_current_changed)

        preference = parse_preference(cfg.color_scheme if cfg is not None else None)
        # only an unset scheme with a "system" preference tracks the platform
        self._follow_system = color_scheme is None and preference == "system"
        if color_scheme is None:
            color_scheme = resolve_color_scheme(preference)
        self._scheme = color_scheme

        self.setFixedSize(*self._form.size())
        self._build_header()
        self._plot = LinePlot(self._data.only_points(), self._style.gradient, self)
        self._plot.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents, True)
        self._apply_style()
        self._layout_children()
        if self._follow_system:
            self._connect_system_scheme()

    # Construction ------------------------------------------------------
    def _build_header(self) -> None:
        self._header = QStackedWidget(self)
        self._header.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents, True)

        top = QWidget()
        col = QVBoxLayout(top)
        col.setContentsMargins(HEADER_PADDING, HEADER_PADDING, 0, 0)
        col.setSpacing(HEADER_SPACING)
        self._title_label = ScalingLabel(self._title, point_size=TITLE_POINT_SIZE, bold=True, min_scale=0.5)
        self._legend_label = ScalingLabel(self._legend or "", point_size=CALLOUT_POINT_SIZE, min_scale=0.8)
        self._rate_label = ScalingLabel(
            self._rate_display.label if self._rate_display else "",
            point_size=CALLOUT_POINT_SIZE,
            min_scale=0.8,
        )
        self._legend_label.setVisible(self._legend is not None)
        self._rate_label.setVisible(self._rate_display is not None)
        self._rate_label.setContentsMargins(0, 0, HEADER_PADDING, 0)
        self._title_label.setContentsMargins(0, 0, HEADER_PADDING, 0)

        title_row = QHBoxLayout()
        title_row.addWidget(self._title_label, 1)
        arrangement = self._header_layout.arrangement
        if arrangement is LegendRateArrangement.RATE_IN_TITLE_ROW:
            title_row.addWidget(self._rate_label)
            col.addLayout(title_row)
            col.addWidget(self._legend_label)
        elif arrangement is LegendRateArrangement.SIDE_BY_SIDE:
            col.addLayout(title_row)
            row = QHBoxLayout()
            if self._legend is not None:
                row.addWidget(self._legend_label, 1)
            else:
                row.addStretch(1)
            row.addWidget(self._rate_label)
            col.addLayout(row)
        else:
            col.addLayout(title_row)
            col.addWidget(self._legend_label)
            col.addWidget(self._rate_label)
        col.addStretch(1)
        self._top_row = top
        self._top_effect = QGraphicsOpacityEffect(top)
        self._top_effect.setOpacity(1.0)
        top.setGraphicsEffect(self._top_effect)
        self._fade = QPropertyAnimation(self._top_effect, b"opacity", self)
        self._fade.setStartValue(0.0)
        self._fade.setEndValue(1.0)
        self._fade.setEasingCurve(QEasingCurve.Type.InQuad)

        sel = QWidget()
        sel_col = QVBoxLayout(sel)
        sel_col.setContentsMargins(0, 10, 0, 0)
        sel_col.setSpacing(2)
        self._value_label = ScalingLabel("", point_size=VALUE_POINT_SIZE, bold=True, min_scale=0.5)
        self._value_label.setAlignment(Qt.AlignmentFlag.AlignHCenter)
        self._selection_label = ScalingLabel("", point_size=CALLOUT_POINT_SIZE)
        self._selection_label.setAlignment(Qt.AlignmentFlag.AlignHCenter)
        sel_col.addWidget(self._value_label)
        sel_col.addWidget(self._selection_label)
        sel_col.addStretch(1)

        self._header.addWidget(top)
        self._header.addWidget(sel)
        self._header.setCurrentIndex(PAGE_TOP_ROW)

    def _layout_children(self) -> None:
        w, h = self.width(), self.height()
        self._header.setGeometry(0, 0, w, h)
        plot_h = int(min(self._plot_frame.max_height, h))
        self._plot.setGeometry(0, h - plot_h, w, plot_h)

    def _connect_system_scheme(self) -> None:
        app = QGuiApplication.instance()
        hints = app.styleHints() if app is not None else None
        signal = getattr(hints, "colorSchemeChanged", None)
        if signal is not None:
            signal.connect(self._on_system_scheme_changed)

    # Public API --------------------------------------------------------
    @property
    def data(self) -> ChartData:
        return self._data

    @property
    def form(self) -> ChartForm:
        return self._form

    @property
    def chart_style(self) -> ChartStyle:
        return self._style

    @property
    def active_style(self) -> ChartStyle:
        return style_for_scheme(self._style, self._scheme)

    @property
    def color_scheme(self) -> ColorScheme:
        return self._scheme

    @property
    def header_layout(self) -> HeaderLayout:
        return self._header_layout

    @property
    def rate_display(self) -> Optional[RateDisplay]:
        return self._rate_display

    @property
    def selection_model(self) -> SelectionModel:
        return self._selection

    @property
    def plot(self) -> LinePlot:
        return self._plot

    @property
    def drop_shadow(self) -> bool:
        return self._drop_shadow

    @property
    def follows_system_scheme(self) -> bool:
        return self._follow_system

    def frame_size(self) -> tuple[float, float]:
        return self._form.plot_size()

    def title_text(self) -> str:
        return self._title_label.text()

    def legend_text(self) -> Optional[str]:
        return self._legend_label.text() if self._legend is not None else None

    def rate_text(self) -> Optional[str]:
        return self._rate_label.text() if self._rate_display is not None else None

    def value_text(self) -> str:
        return self._value_label.text()

    def selection_text(self) -> str:
        return self._selection_label.text()

    def showing_selection(self) -> bool:
        return self._header.currentIndex() == PAGE_SELECTION

    def closest_data_point(
        self, pointer, width: Optional[float] = None, height: Optional[float] = None
    ) -> Selection:
        """Select the sample nearest ``pointer`` (card coordinates)."""
        fw, fh = self.frame_size()
        return self._selection.select_nearest(
            pointer,
            fw if width is None else width,
            fh if height is None else height,
        )

    def drag_to(self, x: float, y: float) -> Selection:
        fw, fh = self.frame_size()
        result = self._selection.update_from_pointer((x, y), fw, fh)
        self._plot.show_indicator_at(x)
        return result

    def end_drag(self) -> None:
        self._selection.end_drag()
        self._plot.hide_indicator()

    def set_color_scheme(self, scheme: ColorScheme) -> None:
        if scheme == self._scheme:
            return
        self._scheme = scheme
        self._apply_style()
        if self._bus is not None:
            self._bus.publish(ChartEvent.COLOR_SCHEME_CHANGED, {"scheme": scheme.value})

    # Reactions ---------------------------------------------------------
    def _on_indicator_changed(self, _old: bool, visible: bool) -> None:
        if visible:
            self._header.setCurrentIndex(PAGE_SELECTION)
            return
        self._header.setCurrentIndex(PAGE_TOP_ROW)
        self._fade_in_top_row()

    def _on_current_changed(self, _old: Optional[SelectedPoint], new: Optional[SelectedPoint]) -> None:
        if new is None:
            return
        self._value_label.setText(format_value(new.value, self._value_specifier))
        self._selection_label.setText(new.label or "")

    def _on_system_scheme_changed(self, *_args) -> None:
        if not self._follow_system:
            return
        self.set_color_scheme(resolve_color_scheme("system"))

    def _fade_in_top_row(self) -> None:
        duration = reduced_motion.adjust_duration(reduced_motion.HEADER_FADE_MS)
        self._fade.stop()
        if duration == 0:
            self._top_effect.setOpacity(1.0)
            return
        self._fade.setDuration(duration)
        self._fade.start()

    def _apply_style(self) -> None:
        active = self.active_style
        text_css = f"color: {active.text_color};"
        legend_css = f"color: {active.legend_text_color};"
        self._title_label.setStyleSheet(text_css)
        self._rate_label.setStyleSheet(text_css)
        self._value_label.setStyleSheet(text_css)
        self._legend_label.setStyleSheet(legend_css)
        self._selection_label.setStyleSheet(legend_css)
        self._plot.set_fill_bottom_color(active.background_color)
        apply_card_shadow(self, active.drop_shadow_color, self._drop_shadow)
        log.debug("styled %r for %s scheme", self._title, self._scheme.value)
        self.update()

    # Qt events ---------------------------------------------------------
    def resizeEvent(self, event):  # type: ignore[override]
        super().resizeEvent(event)
        self._layout_children()

    def paintEvent(self, event):  # type: ignore[override]
        p = QPainter(self)
        p.setRenderHint(QPainter.RenderHint.Antialiasing)
        path = QPainterPath()
        path.addRoundedRect(QRectF(self.rect()), CORNER_RADIUS, CORNER_RADIUS)
        p.fillPath(path, QBrush(to_qcolor(self.active_style.background_color)))

    def mousePressEvent(self, event):  # type: ignore[override]
        if event.button() == Qt.MouseButton.LeftButton:
            pos = event.position()
            self.drag_to(pos.x(), pos.y())
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event):  # type: ignore[override]
        if event.buttons() & Qt.MouseButton.LeftButton:
            pos = event.position()
            self.drag_to(pos.x(), pos.y())
            event.accept()
            return
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event):  # type: ignore[override]
        if event.button() == Qt.MouseButton.LeftButton:
            self.end_drag()
            event.accept()
            return
        super().mouseReleaseEvent(event)
