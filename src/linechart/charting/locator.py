"""Nearest data point lookup for drag-to-inspect.

Maps a pointer position inside the plot viewport to the closest sample along
the horizontal axis, and back to a screen coordinate for that sample.

Horizontal mapping
    The viewport width is split into ``count - 1`` equal steps; the selected
    index is ``pointer.x / step_width`` rounded half away from zero.

Vertical mapping (returned point only)
    ``step_height = height / (max + min)``, not a min-max normalisation.
    A zero denominator yields a scale of ``0.0``.

Bounds
    An index outside ``[0, count - 1]`` produces ``NO_SELECTION`` (index
    ``None``, point ``(0, 0)``). Indexes are never clamped.
    A NaN or infinite pointer x also produces ``NO_SELECTION``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Tuple

from .types import ChartData, InsufficientDataError, MIN_SAMPLES

__all__ = [
    "Selection",
    "NO_SELECTION",
    "PointLocator",
    "locate",
    "round_half_away",
    "pointer_x",
]


@dataclass(frozen=True)
class Selection:
    index: Optional[int]
    x: float = 0.0
    y: float = 0.0

    @property
    def is_selection(self) -> bool:
        return self.index is not None

    @property
    def point(self) -> Tuple[float, float]:
        return self.x, self.y


NO_SELECTION = Selection(index=None)


def round_half_away(value: float) -> int:
    """Round to nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def pointer_x(pointer: Any) -> float:
    """Horizontal component of a pointer: ``(x, y)`` tuple, QPointF or ``.x``."""
    if isinstance(pointer, (tuple, list)):
        return float(pointer[0])
    x = getattr(pointer, "x")
    return float(x() if callable(x) else x)


def _step_width(count: int, width: float) -> float:
    if count < MIN_SAMPLES:
        raise InsufficientDataError(
            f"Point lookup needs at least {MIN_SAMPLES} samples, got {count}"
        )
    if width <= 0:
        raise ValueError(f"Viewport width must be positive, got {width!r}")
    return width / (count - 1)


def _step_height(samples: Sequence[float], height: float) -> float:
    denom = max(samples) + min(samples)
    if denom == 0:
        return 0.0
    return height / denom


def locate(
    samples: Sequence[float],
    pointer: Any,
    viewport_width: float,
    viewport_height: float,
) -> Selection:
    """Return the sample closest to ``pointer`` horizontally.

    Raises ``InsufficientDataError`` for fewer than two samples and
    ``ValueError`` for a non-positive viewport width. A NaN or infinite
    pointer x yields ``NO_SELECTION``.
    """
    count = len(samples)
    step_w = _step_width(count, viewport_width)
    x = pointer_x(pointer)
    if not math.isfinite(x):
        return NO_SELECTION
    index = round_half_away(x / step_w)
    if index < 0 or index >= count:
        return NO_SELECTION
    step_h = _step_height(samples, viewport_height)
    return Selection(index=index, x=index * step_w, y=samples[index] * step_h)


class PointLocator:
    """``locate`` bound to a ``ChartData`` instance."""

    def __init__(self, data: ChartData) -> None:
        self._data = data
        self._samples = data.only_points()

    @property
    def data(self) -> ChartData:
        return self._data

    def step_width(self, width: float) -> float:
        return _step_width(len(self._samples), width)

    def step_height(self, height: float) -> float:
        return _step_height(self._samples, height)

    def locate(self, pointer: Any, width: float, height: float) -> Selection:
        return locate(self._samples, pointer, width, height)
