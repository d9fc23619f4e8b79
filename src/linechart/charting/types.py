"""Core chart data types.

``ChartData`` holds the ordered samples plotted by the line card. Each sample
may carry an optional label (e.g. ``"Q1 2020"``) shown while it is selected.

``ChartForm`` enumerates the fixed layout presets. Small and detail share the
same pixel size; they are still distinct presets for layout decisions.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Tuple, Union

__all__ = [
    "ChartPoint",
    "ChartData",
    "ChartForm",
    "InsufficientDataError",
    "MIN_SAMPLES",
]

MIN_SAMPLES = 2  # step width divides by (count - 1)


class InsufficientDataError(ValueError):
    """Raised when a chart is built from fewer than ``MIN_SAMPLES`` values."""


@dataclass(frozen=True)
class ChartPoint:
    label: str | None
    value: float


RawValue = Union[float, int, Tuple[str, float], ChartPoint]


class ChartData:
    """Immutable ordered sequence of labelled samples.

    Parameters
    ----------
    points: Iterable of ``ChartPoint``.

    Raises
    ------
    InsufficientDataError
        If fewer than two samples are supplied.
    ValueError
        If any sample is not a finite number.
    """

    __slots__ = ("_points",)

    def __init__(self, points: Iterable[ChartPoint]) -> None:
        pts = tuple(points)
        if len(pts) < MIN_SAMPLES:
            raise InsufficientDataError(
                f"Line chart needs at least {MIN_SAMPLES} samples, got {len(pts)}"
            )
        for p in pts:
            if not math.isfinite(p.value):
                raise ValueError(f"Sample value must be finite, got {p.value!r}")
        self._points: Tuple[ChartPoint, ...] = pts

    @classmethod
    def from_values(cls, values: Iterable[RawValue]) -> "ChartData":
        """Build from plain numbers, ``(label, value)`` pairs or ``ChartPoint``s."""
        pts = []
        for raw in values:
            if isinstance(raw, ChartPoint):
                pts.append(raw)
            elif isinstance(raw, tuple):
                label, value = raw
                pts.append(ChartPoint(label=str(label), value=float(value)))
            else:
                pts.append(ChartPoint(label=None, value=float(raw)))
        return cls(pts)

    @property
    def points(self) -> Tuple[ChartPoint, ...]:
        return self._points

    def only_points(self) -> Tuple[float, ...]:
        return tuple(p.value for p in self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[ChartPoint]:
        return iter(self._points)

    def __getitem__(self, index: int) -> ChartPoint:
        return self._points[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChartData):
            return NotImplemented
        return self._points == other._points

    def __hash__(self) -> int:
        return hash(self._points)

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"ChartData({list(self._points)!r})"


class ChartForm(Enum):
    """Layout preset controlling card size and header arrangement."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    DETAIL = "detail"
    EXTRA_LARGE = "extra_large"

    def size(self) -> Tuple[int, int]:
        return _FORM_SIZES[self]

    def plot_size(self) -> Tuple[float, float]:
        """Nominal drawing area for the line: full width, half height."""
        w, h = self.size()
        return float(w), h / 2.0

    @classmethod
    def parse(cls, value: "str | ChartForm") -> "ChartForm":
        if isinstance(value, ChartForm):
            return value
        key = value.strip().lower().replace("-", "_")
        if key == "extralarge":
            key = "extra_large"
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown chart form: {value!r}") from None


_FORM_SIZES = {
    ChartForm.SMALL: (180, 120),
    ChartForm.MEDIUM: (180, 240),
    ChartForm.LARGE: (360, 120),
    ChartForm.DETAIL: (180, 120),
    ChartForm.EXTRA_LARGE: (360, 240),
}
