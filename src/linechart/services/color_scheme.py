"""Light/dark color scheme resolution.

Order of precedence: explicit preference ("light" / "dark") from config,
then Qt's reported scheme (``QStyleHints.colorScheme``, Qt >= 6.5), then the
application palette's window lightness. Defaults to light when no
``QApplication`` exists.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from linechart.design.styles import ColorScheme

__all__ = ["ColorScheme", "parse_preference", "detect_color_scheme", "resolve_color_scheme"]

log = logging.getLogger(__name__)

PREFERENCES = {"system", "light", "dark"}


def parse_preference(value: str | None) -> str:
    pref = (value or "system").strip().lower()
    if pref not in PREFERENCES:
        raise ValueError(f"Color scheme must be one of {sorted(PREFERENCES)}, got {value!r}")
    return pref


def detect_color_scheme(app: Optional[Any] = None) -> ColorScheme:
    from PyQt6.QtCore import Qt
    from PyQt6.QtGui import QGuiApplication

    app = app or QGuiApplication.instance()
    if app is None:
        return ColorScheme.LIGHT
    hints = app.styleHints()
    getter = getattr(hints, "colorScheme", None)
    if getter is not None:
        scheme = getter()
        if scheme == Qt.ColorScheme.Dark:
            return ColorScheme.DARK
        if scheme == Qt.ColorScheme.Light:
            return ColorScheme.LIGHT
    window = app.palette().window().color()
    detected = ColorScheme.DARK if window.lightness() < 128 else ColorScheme.LIGHT
    log.debug("color scheme from palette lightness %d: %s", window.lightness(), detected.value)
    return detected


def resolve_color_scheme(preference: str | None = None, app: Optional[Any] = None) -> ColorScheme:
    pref = parse_preference(preference)
    if pref == "light":
        return ColorScheme.LIGHT
    if pref == "dark":
        return ColorScheme.DARK
    return detect_color_scheme(app)
