"""Chart styles: a light palette with an optional dark-mode pair.

``ChartStyle.resolved_dark_style()`` falls back to ``LINE_VIEW_DARK_MODE``
when a style does not define its own dark counterpart.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from .palette import Colors, GradientColor, normalize_hex

__all__ = ["ColorScheme", "ChartStyle", "Styles", "style_for_scheme"]


class ColorScheme(str, Enum):
    LIGHT = "light"
    DARK = "dark"


@dataclass(frozen=True)
class ChartStyle:
    background_color: str
    accent_color: str
    second_gradient_color: str
    text_color: str
    legend_text_color: str
    drop_shadow_color: str
    dark_mode_style: Optional["ChartStyle"] = None

    def __post_init__(self) -> None:
        for name in (
            "background_color",
            "accent_color",
            "second_gradient_color",
            "text_color",
            "legend_text_color",
            "drop_shadow_color",
        ):
            object.__setattr__(self, name, normalize_hex(getattr(self, name)))

    @property
    def gradient(self) -> GradientColor:
        return GradientColor(self.accent_color, self.second_gradient_color)

    def with_gradient(self, gradient: GradientColor) -> "ChartStyle":
        return replace(self, accent_color=gradient.start, second_gradient_color=gradient.end)

    def resolved_dark_style(self) -> "ChartStyle":
        return self.dark_mode_style if self.dark_mode_style is not None else Styles.LINE_VIEW_DARK_MODE


class Styles:
    LINE_VIEW_DARK_MODE = ChartStyle(
        background_color=Colors.BLACK,
        accent_color=Colors.ORANGE_START,
        second_gradient_color=Colors.ORANGE_END,
        text_color=Colors.WHITE,
        legend_text_color=Colors.WHITE,
        drop_shadow_color=Colors.GRAY,
    )
    LINE_CHART_STYLE_ONE = ChartStyle(
        background_color=Colors.WHITE,
        accent_color=Colors.ORANGE_START,
        second_gradient_color=Colors.ORANGE_END,
        text_color=Colors.BLACK,
        legend_text_color=Colors.GRAY,
        drop_shadow_color=Colors.GRAY,
    )
    BAR_CHART_STYLE_ORANGE_DARK = ChartStyle(
        background_color=Colors.BLACK,
        accent_color=Colors.ORANGE_START,
        second_gradient_color=Colors.ORANGE_END,
        text_color=Colors.WHITE,
        legend_text_color=Colors.GRAY,
        drop_shadow_color=Colors.GRAY,
    )
    BAR_CHART_STYLE_ORANGE_LIGHT = ChartStyle(
        background_color=Colors.WHITE,
        accent_color=Colors.ORANGE_START,
        second_gradient_color=Colors.ORANGE_END,
        text_color=Colors.BLACK,
        legend_text_color=Colors.GRAY,
        drop_shadow_color=Colors.GRAY,
        dark_mode_style=BAR_CHART_STYLE_ORANGE_DARK,
    )
    BAR_CHART_STYLE_NEON_BLUE_DARK = ChartStyle(
        background_color=Colors.BLACK,
        accent_color=Colors.GRADIENT_NEON_BLUE,
        second_gradient_color=Colors.GRADIENT_PURPLE,
        text_color=Colors.WHITE,
        legend_text_color=Colors.GRAY,
        drop_shadow_color=Colors.GRAY,
    )
    BAR_CHART_STYLE_NEON_BLUE_LIGHT = ChartStyle(
        background_color=Colors.WHITE,
        accent_color=Colors.GRADIENT_NEON_BLUE,
        second_gradient_color=Colors.GRADIENT_PURPLE,
        text_color=Colors.BLACK,
        legend_text_color=Colors.GRAY,
        drop_shadow_color=Colors.GRAY,
        dark_mode_style=BAR_CHART_STYLE_NEON_BLUE_DARK,
    )
    BAR_CHART_MIDNIGHT_GREEN_DARK = ChartStyle(
        background_color="#24325B",
        accent_color="#FFABAB",
        second_gradient_color="#FFABAB",
        text_color=Colors.WHITE,
        legend_text_color="#D7D7D7",
        drop_shadow_color=Colors.GRAY,
    )
    BAR_CHART_MIDNIGHT_GREEN_LIGHT = ChartStyle(
        background_color=Colors.WHITE,
        accent_color="#84A094",
        second_gradient_color="#50675B",
        text_color=Colors.BLACK,
        legend_text_color=Colors.GRAY,
        drop_shadow_color=Colors.GRAY,
        dark_mode_style=BAR_CHART_MIDNIGHT_GREEN_DARK,
    )
    PIE_CHART_STYLE_ONE = ChartStyle(
        background_color=Colors.WHITE,
        accent_color=Colors.ORANGE_END,
        second_gradient_color=Colors.ORANGE_START,
        text_color=Colors.BLACK,
        legend_text_color=Colors.GRAY,
        drop_shadow_color=Colors.GRAY,
    )

    @classmethod
    def named(cls, name: str) -> ChartStyle:
        key = name.strip().upper().replace("-", "_")
        style = getattr(cls, key, None)
        if not isinstance(style, ChartStyle):
            raise KeyError(f"Unknown chart style: {name}")
        return style


def style_for_scheme(style: ChartStyle, scheme: ColorScheme) -> ChartStyle:
    return style.resolved_dark_style() if scheme is ColorScheme.DARK else style
