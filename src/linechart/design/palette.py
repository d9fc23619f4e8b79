"""Named colors and two-stop gradient presets used by chart styles.

Colors are plain ``#RRGGBB`` strings so styles stay Qt-free; ``to_qcolor``
performs the conversion at paint time.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = ["normalize_hex", "to_qcolor", "Colors", "GradientColor", "GradientColors"]

_HEX = re.compile(r"#(?:[0-9a-fA-F]{8}|[0-9a-fA-F]{6}|[0-9a-fA-F]{3})")


def normalize_hex(hex_literal: str) -> str:
    """Normalize a hex color to uppercase ``#RRGGBB`` (or ``#RRGGBBAA``).

    Short ``#abc`` form is expanded. Raises ValueError for anything else.
    """
    lit = hex_literal.strip()
    if not _HEX.fullmatch(lit):
        raise ValueError(f"Invalid hex color: {hex_literal!r}")
    body = lit[1:]
    if len(body) == 3:
        body = "".join(ch * 2 for ch in body)
    return "#" + body.upper()


def to_qcolor(hex_literal: str, alpha: int | None = None):
    from PyQt6.QtGui import QColor

    norm = normalize_hex(hex_literal)
    body = norm[1:]
    color = QColor(int(body[0:2], 16), int(body[2:4], 16), int(body[4:6], 16))
    if len(body) == 8:
        color.setAlpha(int(body[6:8], 16))
    if alpha is not None:
        color.setAlpha(alpha)
    return color


class Colors:
    COLOR_1 = "#141B2C"
    DARK_PURPLE = "#20162C"
    DARK_BLUE = "#1A1A2E"
    WHITE = "#FFFFFF"
    BLACK = "#000000"
    GRAY = "#8E8E93"
    BORDER_BLUE = "#4EBCFF"
    ORANGE_START = "#FF782C"
    ORANGE_END = "#EC2301"
    LEGEND_TEXT = "#A7A6A8"
    LEGEND_COLOR = "#E8E7EA"
    LEGEND_DARK_COLOR = "#545454"
    INDICATOR_KNOB = "#FF57A6"
    GRADIENT_UPPER_BLUE = "#C2E8FF"
    GRADIENT_PURPLE = "#7B75FF"
    GRADIENT_NEON_BLUE = "#6FEAFF"
    GRADIENT_LOWER_BLUE = "#F1F9FF"
    DARK_GREEN = "#00C4A4"
    LIGHT_GREEN = "#00D94F"
    PINK = "#F05CA6"
    NEON_PINK = "#FF5C94"
    PURPLE = "#5B4CFF"


@dataclass(frozen=True)
class GradientColor:
    start: str
    end: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", normalize_hex(self.start))
        object.__setattr__(self, "end", normalize_hex(self.end))

    def stops(self) -> tuple[str, str]:
        return self.start, self.end


class GradientColors:
    ORANGE = GradientColor(Colors.ORANGE_START, Colors.ORANGE_END)
    BLUE = GradientColor(Colors.GRADIENT_PURPLE, Colors.GRADIENT_NEON_BLUE)
    GREEN = GradientColor("#00D9C3", "#00DA67")
    BLU = GradientColor("#0591FF", "#29D4FF")
    BLUE_PURPLE = GradientColor("#4E51FF", "#9A41FF")
    PURPLE = GradientColor("#7B75FF", "#9A41FF")
    PRPL_PINK = GradientColor("#9A41FF", "#FF5C94")
    PRPL_NEON_BLUE = GradientColor("#9A41FF", "#29D4FF")
    ORNG_PINK = GradientColor("#FF782C", "#FF5C94")
