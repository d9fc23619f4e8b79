"""Single-line label that shrinks its font to fit, down to a minimum scale."""

from __future__ import annotations

from typing import Optional

from PyQt6.QtGui import QFont, QFontMetricsF
from PyQt6.QtWidgets import QLabel, QSizePolicy, QWidget

__all__ = ["ScalingLabel", "fitted_point_size"]


def fitted_point_size(font: QFont, text: str, width: float, min_scale: float) -> float:
    """Largest point size (>= base * min_scale) whose text advance fits ``width``."""
    base = font.pointSizeF()
    if not text or width <= 0 or base <= 0:
        return base
    advance = QFontMetricsF(font).horizontalAdvance(text)
    if advance <= width:
        return base
    return max(base * min_scale, base * width / advance)


class ScalingLabel(QLabel):
    def __init__(
        self,
        text: str = "",
        parent: Optional[QWidget] = None,
        *,
        point_size: float = 13.0,
        bold: bool = False,
        min_scale: float = 1.0,
    ) -> None:
        super().__init__(parent)
        self._min_scale = min_scale
        self._base_font = QFont(self.font())
        self._base_font.setPointSizeF(point_size)
        self._base_font.setBold(bold)
        self.setFont(self._base_font)
        self.setSizePolicy(QSizePolicy.Policy.Ignored, QSizePolicy.Policy.Preferred)
        self.setText(text)

    def setText(self, text: str) -> None:  # type: ignore[override]
        super().setText(text)
        self._refit()

    def resizeEvent(self, event):  # type: ignore[override]
        super().resizeEvent(event)
        self._refit()

    def _refit(self) -> None:
        font = QFont(self._base_font)
        font.setPointSizeF(fitted_point_size(self._base_font, self.text(), self.contentsRect().width(), self._min_scale))
        if font != self.font():
            self.setFont(font)
