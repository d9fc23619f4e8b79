"""Screen geometry for the plotted line.

Pure functions (no Qt) producing the points, smooth curve segments and fill
polygon the line canvas paints. Coordinates use Qt's convention: origin at
the top-left, y growing downwards.

The drawn line is min-max normalised into ``height - padding`` so the top
sample keeps some headroom. The smooth path joins consecutive samples with
two quadratic segments meeting at their midpoint; each control point shares
the x of its segment's midpoint, so x is linear in the curve parameter and a
point on the curve at a given x can be computed directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .types import MIN_SAMPLES, InsufficientDataError

__all__ = [
    "DEFAULT_PADDING",
    "QuadSegment",
    "line_points",
    "quad_curve_segments",
    "point_on_curve",
    "closed_area",
]

DEFAULT_PADDING = 30.0

Point = Tuple[float, float]


@dataclass(frozen=True)
class QuadSegment:
    start: Point
    control: Point
    end: Point

    def at(self, t: float) -> Point:
        u = 1.0 - t
        x = u * u * self.start[0] + 2 * u * t * self.control[0] + t * t * self.end[0]
        y = u * u * self.start[1] + 2 * u * t * self.control[1] + t * t * self.end[1]
        return x, y


def line_points(
    samples: Sequence[float],
    width: float,
    height: float,
    *,
    padding: float = DEFAULT_PADDING,
) -> List[Point]:
    if len(samples) < MIN_SAMPLES:
        raise InsufficientDataError(f"Need at least {MIN_SAMPLES} samples to draw a line")
    step_x = width / (len(samples) - 1)
    lo, hi = min(samples), max(samples)
    step_y = (height - padding) / (hi - lo) if hi != lo else 0.0
    return [(i * step_x, height - (v - lo) * step_y) for i, v in enumerate(samples)]


def _mid(a: Point, b: Point) -> Point:
    return (a[0] + b[0]) / 2.0, (a[1] + b[1]) / 2.0


def _control(a: Point, b: Point) -> Point:
    cx, cy = _mid(a, b)
    dy = abs(b[1] - cy)
    if a[1] < b[1]:
        cy += dy
    elif a[1] > b[1]:
        cy -= dy
    return cx, cy


def quad_curve_segments(points: Sequence[Point]) -> List[QuadSegment]:
    segs: List[QuadSegment] = []
    for p1, p2 in zip(points, points[1:]):
        mid = _mid(p1, p2)
        segs.append(QuadSegment(p1, _control(mid, p1), mid))
        segs.append(QuadSegment(mid, _control(mid, p2), p2))
    return segs


def point_on_curve(segments: Sequence[QuadSegment], x: float) -> Point:
    """Point on the curve at horizontal position ``x`` (clamped to its range)."""
    if not segments:
        raise ValueError("No curve segments")
    first, last = segments[0], segments[-1]
    if x <= first.start[0]:
        return first.start
    if x >= last.end[0]:
        return last.end
    for seg in segments:
        x0, x1 = seg.start[0], seg.end[0]
        if x0 <= x <= x1:
            t = 0.0 if x1 == x0 else (x - x0) / (x1 - x0)
            return seg.at(t)
    return last.end  # pragma: no cover - unreachable for monotone x


def closed_area(points: Sequence[Point], height: float) -> List[Point]:
    """Polygon under the line down to the bottom edge."""
    if not points:
        return []
    return [(points[0][0], height), *points, (points[-1][0], height)]
