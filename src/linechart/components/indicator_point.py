"""Indicator dot shown at the inspected sample during a drag."""

from __future__ import annotations

from typing import Optional

from PyQt6.QtCore import QRectF, Qt
from PyQt6.QtGui import QPainter, QPen
from PyQt6.QtWidgets import QWidget

from linechart.design.elevation import indicator_shadow_effect
from linechart.design.palette import Colors, to_qcolor

__all__ = ["IndicatorPoint", "KNOB_SIZE"]

KNOB_SIZE = 14
RING_WIDTH = 4


class IndicatorPoint(QWidget):
    """Filled knob with a white ring and a soft drop shadow."""

    def __init__(
        self,
        parent: Optional[QWidget] = None,
        *,
        knob_color: str = Colors.INDICATOR_KNOB,
        shadow_color: str = Colors.LEGEND_COLOR,
    ) -> None:
        super().__init__(parent)
        self.setObjectName("indicatorPoint")
        self.setFixedSize(KNOB_SIZE, KNOB_SIZE)
        self.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents, True)
        self._knob_color = knob_color
        self._shadow_color = shadow_color
        self.setGraphicsEffect(indicator_shadow_effect(shadow_color))

    @property
    def knob_color(self) -> str:
        return self._knob_color

    @property
    def shadow_color(self) -> str:
        return self._shadow_color

    def center_on(self, x: float, y: float) -> None:
        self.move(round(x - KNOB_SIZE / 2), round(y - KNOB_SIZE / 2))

    def paintEvent(self, event):  # type: ignore[override]
        p = QPainter(self)
        p.setRenderHint(QPainter.RenderHint.Antialiasing)
        half = RING_WIDTH / 2
        rect = QRectF(half, half, KNOB_SIZE - RING_WIDTH, KNOB_SIZE - RING_WIDTH)
        p.setBrush(to_qcolor(self._knob_color))
        p.setPen(QPen(to_qcolor(Colors.WHITE), RING_WIDTH))
        p.drawEllipse(rect)
