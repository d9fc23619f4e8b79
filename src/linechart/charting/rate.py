"""Rate value display rules.

A rate is a signed fraction shown as a whole percentage with a direction
arrow. Zero and NaN show nothing. Non-finite rates only show ``"> 999 %"``
when infinities are enabled, with ``-inf`` pointing up and ``+inf`` down.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .locator import round_half_away

__all__ = ["RateDirection", "RateDisplay", "format_rate", "INFINITE_RATE_TEXT"]

INFINITE_RATE_TEXT = "> 999 %"


class RateDirection(Enum):
    UP = "up"
    DOWN = "down"

    @property
    def arrow(self) -> str:
        return "↑" if self is RateDirection.UP else "↓"


@dataclass(frozen=True)
class RateDisplay:
    direction: Optional[RateDirection]
    text: str

    @property
    def label(self) -> str:
        if self.direction is None:
            return self.text
        return f"{self.direction.arrow} {self.text}"


def format_rate(rate: Optional[float], show_infinities: bool = False) -> Optional[RateDisplay]:
    if rate is None or rate == 0 or math.isnan(rate):
        return None
    if math.isfinite(rate):
        direction = RateDirection.UP if rate > 0 else RateDirection.DOWN
        return RateDisplay(direction, f"{round_half_away(rate * 100)} %")
    if not show_infinities:
        return None
    direction = RateDirection.UP if rate < 0 else RateDirection.DOWN
    return RateDisplay(direction, INFINITE_RATE_TEXT)
