"""Drop shadow effects for the card and the indicator knob.

Qt Widgets have no CSS ``box-shadow``; shadows are emulated with
``QGraphicsDropShadowEffect``. A widget holds at most one graphics effect.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from PyQt6.QtWidgets import QGraphicsDropShadowEffect, QWidget

from .palette import to_qcolor

__all__ = [
    "ShadowSpec",
    "CARD_SHADOW",
    "INDICATOR_SHADOW",
    "make_shadow_effect",
    "card_shadow_effect",
    "indicator_shadow_effect",
    "apply_card_shadow",
]


@dataclass(frozen=True)
class ShadowSpec:
    blur: float
    x: float
    y: float
    alpha: int = 255


CARD_SHADOW = ShadowSpec(blur=8, x=0, y=0, alpha=200)
INDICATOR_SHADOW = ShadowSpec(blur=6, x=0, y=3)


def make_shadow_effect(color: str, spec: ShadowSpec) -> QGraphicsDropShadowEffect:
    effect = QGraphicsDropShadowEffect()
    effect.setBlurRadius(spec.blur)
    effect.setOffset(spec.x, spec.y)
    effect.setColor(to_qcolor(color, alpha=spec.alpha))
    return effect


def card_shadow_effect(color: str, enabled: bool = True) -> Optional[QGraphicsDropShadowEffect]:
    if not enabled:
        return None
    return make_shadow_effect(color, CARD_SHADOW)


def indicator_shadow_effect(color: str) -> QGraphicsDropShadowEffect:
    return make_shadow_effect(color, INDICATOR_SHADOW)


def apply_card_shadow(widget: QWidget, color: str, enabled: bool) -> None:
    """Attach (or clear, when disabled) the card drop shadow."""
    widget.setGraphicsEffect(card_shadow_effect(color, enabled))  # type: ignore[arg-type]
