"""Reduced motion preference and card animation timings.

Single source of truth for whether the card animates (header fade, line
reveal). ``LINECHART_REDUCED_MOTION=1`` (or "true"/"yes"/"on") enables
reduced motion at import time. When enabled, ``adjust_duration`` returns the
minimum (default 0) so animations complete instantly.
"""

from __future__ import annotations

import contextlib
import os
from typing import Iterator

__all__ = [
    "HEADER_FADE_MS",
    "LINE_REVEAL_MS",
    "set_reduced_motion",
    "is_reduced_motion",
    "adjust_duration",
    "temporarily_reduced_motion",
]

HEADER_FADE_MS = 100  # ease-in
LINE_REVEAL_MS = 1200  # ease-out

_reduced_motion_enabled: bool = os.getenv("LINECHART_REDUCED_MOTION", "").strip().lower() in {
    "1",
    "true",
    "yes",
    "on",
}


def set_reduced_motion(enabled: bool) -> None:
    global _reduced_motion_enabled
    _reduced_motion_enabled = bool(enabled)


def is_reduced_motion() -> bool:
    return _reduced_motion_enabled


def adjust_duration(ms: int, minimum_ms: int = 0) -> int:
    """Return ``ms`` (clamped >= 0), or ``minimum_ms`` under reduced motion."""
    minimum_ms = max(0, minimum_ms)
    ms = max(0, ms)
    return minimum_ms if _reduced_motion_enabled else ms


@contextlib.contextmanager
def temporarily_reduced_motion(force: bool = True) -> Iterator[None]:
    prev = _reduced_motion_enabled
    try:
        set_reduced_motion(force)
        yield
    finally:
        set_reduced_motion(prev)
