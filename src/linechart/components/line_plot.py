"""Line canvas: gradient stroke, area fill, reveal animation, indicator dot.

Geometry comes from ``linechart.charting.geometry`` and is recomputed on
resize. The reveal animation clips the drawing to a growing fraction of the
width; under reduced motion it completes immediately.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from PyQt6.QtCore import QEasingCurve, QPointF, QRectF, Qt, QVariantAnimation
from PyQt6.QtGui import QBrush, QPainter, QPainterPath, QPen
from PyQt6.QtWidgets import QWidget

from linechart.charting.geometry import (
    QuadSegment,
    line_points,
    point_on_curve,
    quad_curve_segments,
)
from linechart.design import reduced_motion
from linechart.design.gradients import area_fill_gradient, from_gradient_color, qt_linear_gradient
from linechart.design.palette import Colors, GradientColor

from .indicator_point import IndicatorPoint

__all__ = ["LinePlot", "CORNER_RADIUS", "LINE_WIDTH", "INDICATOR_LIFT"]

CORNER_RADIUS = 20.0
LINE_WIDTH = 3.0
INDICATOR_LIFT = 2.0  # plot shifts up while the indicator is shown


class LinePlot(QWidget):
    def __init__(
        self,
        samples: Sequence[float],
        gradient: GradientColor,
        parent: Optional[QWidget] = None,
        *,
        show_background: bool = True,
        fill_bottom_color: str = Colors.WHITE,
    ) -> None:
        super().__init__(parent)
        self.setObjectName("linePlot")
        self._samples = tuple(samples)
        self._gradient = gradient
        self._show_background = show_background
        self._fill_bottom = fill_bottom_color
        self._points: List[tuple[float, float]] = []
        self._segments: List[QuadSegment] = []
        self._indicator_x: Optional[float] = None
        self._progress = 0.0
        self._reveal = QVariantAnimation(self)
        self._reveal.setStartValue(0.0)
        self._reveal.setEndValue(1.0)
        self._reveal.setEasingCurve(QEasingCurve.Type.OutCubic)
        self._reveal.valueChanged.connect(self._set_progress)  # type: ignore[attr-defined]
        self._indicator = IndicatorPoint(self)
        self._indicator.hide()

    # Data / style -----------------------------------------------------
    def set_gradient(self, gradient: GradientColor) -> None:
        self._gradient = gradient
        self.update()

    def set_fill_bottom_color(self, color: str) -> None:
        self._fill_bottom = color
        self.update()

    def points(self) -> List[tuple[float, float]]:
        return list(self._points)

    def reveal_progress(self) -> float:
        return self._progress

    @property
    def indicator(self) -> IndicatorPoint:
        return self._indicator

    # Indicator ---------------------------------------------------------
    def show_indicator_at(self, x: float) -> tuple[float, float]:
        """Place the indicator on the curve at ``x``; returns its center."""
        if not self._segments:
            # geometry is built on the first resize event, which Qt defers until shown
            self._indicator_x = None
            self._rebuild_geometry()
        self._indicator_x = x
        cx, cy = point_on_curve(self._segments, x) if self._segments else (0.0, 0.0)
        cy -= INDICATOR_LIFT
        self._indicator.center_on(cx, cy)
        self._indicator.show()
        self.update()
        return cx, cy

    def hide_indicator(self) -> None:
        self._indicator_x = None
        self._indicator.hide()
        self.update()

    def indicator_visible(self) -> bool:
        return self._indicator_x is not None

    # Animation ---------------------------------------------------------
    def start_reveal(self) -> None:
        duration = reduced_motion.adjust_duration(reduced_motion.LINE_REVEAL_MS)
        self._reveal.stop()
        if duration == 0:
            self._set_progress(1.0)
            return
        self._reveal.setDuration(duration)
        self._reveal.start()

    def _set_progress(self, value) -> None:
        self._progress = float(value)
        self.update()

    # Qt events ---------------------------------------------------------
    def showEvent(self, event):  # type: ignore[override]
        super().showEvent(event)
        if self._progress == 0.0:
            self.start_reveal()

    def resizeEvent(self, event):  # type: ignore[override]
        super().resizeEvent(event)
        self._rebuild_geometry()

    def _rebuild_geometry(self) -> None:
        w, h = float(self.width()), float(self.height())
        if w <= 0 or h <= 0:
            self._points, self._segments = [], []
            return
        self._points = line_points(self._samples, w, h)
        self._segments = quad_curve_segments(self._points)
        if self._indicator_x is not None:
            self.show_indicator_at(self._indicator_x)

    def _curve_path(self) -> QPainterPath:
        path = QPainterPath()
        if not self._segments:
            return path
        path.moveTo(QPointF(*self._segments[0].start))
        for seg in self._segments:
            path.quadTo(QPointF(*seg.control), QPointF(*seg.end))
        return path

    def paintEvent(self, event):  # type: ignore[override]
        if not self._segments:
            return
        p = QPainter(self)
        p.setRenderHint(QPainter.RenderHint.Antialiasing)
        clip = QPainterPath()
        clip.addRoundedRect(QRectF(self.rect()), CORNER_RADIUS, CORNER_RADIUS)
        p.setClipPath(clip)
        if self._indicator_x is not None:
            p.translate(0, -INDICATOR_LIFT)
        w, h = float(self.width()), float(self.height())
        reveal = QRectF(0, -LINE_WIDTH, w * self._progress, h + LINE_WIDTH * 2)
        p.setClipRect(reveal, Qt.ClipOperation.IntersectClip)
        curve = self._curve_path()
        if self._show_background:
            area = QPainterPath(curve)
            area.lineTo(self._points[-1][0], h)
            area.lineTo(self._points[0][0], h)
            area.closeSubpath()
            top = min(y for _, y in self._points)
            fill = qt_linear_gradient(
                area_fill_gradient(bottom=self._fill_bottom), 0, top, 0, h
            )
            p.setPen(Qt.PenStyle.NoPen)
            p.setBrush(QBrush(fill))
            p.drawPath(area)
        stroke = qt_linear_gradient(from_gradient_color("stroke", self._gradient), 0, 0, w, 0)
        pen = QPen(QBrush(stroke), LINE_WIDTH)
        pen.setJoinStyle(Qt.PenJoinStyle.RoundJoin)
        pen.setCapStyle(Qt.PenCapStyle.RoundCap)
        p.setPen(pen)
        p.setBrush(Qt.BrushStyle.NoBrush)
        p.drawPath(curve)
