"""printf-style value formatting for the selected value label."""

from __future__ import annotations

__all__ = ["DEFAULT_VALUE_SPECIFIER", "format_value", "validate_specifier"]

DEFAULT_VALUE_SPECIFIER = "%.0f"


def validate_specifier(specifier: str) -> str:
    """Return ``specifier`` if it formats a single float, else raise ValueError."""
    try:
        specifier % 1.5
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid value specifier {specifier!r}: {e}") from e
    return specifier


def format_value(value: float, specifier: str = DEFAULT_VALUE_SPECIFIER) -> str:
    return specifier % value
