"""Gradient definitions for line strokes and area fills.

Multi-stop gradients are kept as plain data (hex colors + positions) and
validated when built. ``qt_linear_gradient`` adapts a definition to a
``QLinearGradient`` at paint time; Qt is imported lazily so definitions
stay usable headless (the matplotlib snapshot reads the same stops).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .palette import Colors, GradientColor, normalize_hex

__all__ = [
    "GradientStop",
    "GradientDef",
    "validate_gradient",
    "from_gradient_color",
    "area_fill_gradient",
    "qt_linear_gradient",
]

KINDS = {"stroke", "area"}


@dataclass(frozen=True)
class GradientStop:
    position: float  # 0.0 .. 1.0
    color: str  # #RRGGBB or #RRGGBBAA


@dataclass(frozen=True)
class GradientDef:
    id: str
    kind: str  # "stroke" | "area"
    stops: Tuple[GradientStop, ...]
    description: str | None = None


def validate_gradient(gradient: GradientDef) -> GradientDef:
    """Return ``gradient`` unchanged, or raise ValueError if malformed."""
    if not gradient.id or any(ch.isspace() for ch in gradient.id):
        raise ValueError("Gradient id must be non-empty and contain no whitespace")
    if gradient.kind not in KINDS:
        raise ValueError(f"Unsupported gradient kind: {gradient.kind!r}")
    if len(gradient.stops) < 2:
        raise ValueError("Gradient must have at least two stops")
    last_pos = -1.0
    for stop in gradient.stops:
        if not (0.0 <= stop.position <= 1.0):
            raise ValueError("Stop position out of range [0,1]")
        if stop.position < last_pos:
            raise ValueError("Stop positions must be non-decreasing")
        last_pos = stop.position
        normalize_hex(stop.color)
    return gradient


def from_gradient_color(grad_id: str, color: GradientColor) -> GradientDef:
    return validate_gradient(
        GradientDef(
            id=grad_id,
            kind="stroke",
            stops=(GradientStop(0.0, color.start), GradientStop(1.0, color.end)),
        )
    )


def area_fill_gradient(top: str = Colors.GRADIENT_UPPER_BLUE, bottom: str = Colors.WHITE) -> GradientDef:
    """Vertical fill under the line: ``top`` at the line, fading to ``bottom``."""
    return validate_gradient(
        GradientDef(
            id="area-fill",
            kind="area",
            stops=(GradientStop(0.0, top), GradientStop(1.0, bottom)),
        )
    )


def qt_linear_gradient(gradient: GradientDef, x0: float, y0: float, x1: float, y1: float):
    from PyQt6.QtGui import QLinearGradient

    from .palette import to_qcolor

    qg = QLinearGradient(x0, y0, x1, y1)
    for stop in gradient.stops:
        qg.setColorAt(stop.position, to_qcolor(stop.color))
    return qg
