"""Haptic feedback service.

The card asks for a short "selection" pulse whenever the inspected sample
changes. Desktop Qt has no haptics API, so the pulse is delegated to a
pluggable ``HapticBackend``; the default backend only logs and counts.
Backend failures are logged and never propagate into the drag handler.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from .event_bus import ChartEvent, EventBus

__all__ = ["HapticBackend", "LoggingHapticBackend", "HapticFeedback"]

log = logging.getLogger(__name__)


class HapticBackend(Protocol):
    def play_selection(self) -> None: ...  # pragma: no cover - structural


class LoggingHapticBackend:
    def __init__(self) -> None:
        self.pulses = 0

    def play_selection(self) -> None:
        self.pulses += 1
        log.debug("haptic selection pulse #%d", self.pulses)


class HapticFeedback:
    def __init__(
        self,
        backend: Optional[HapticBackend] = None,
        *,
        enabled: bool = True,
        event_bus: Optional[EventBus] = None,
    ) -> None:
        self.backend: HapticBackend = backend if backend is not None else LoggingHapticBackend()
        self.enabled = enabled
        self._bus = event_bus
        self.pulse_count = 0

    def play_selection(self) -> bool:
        """Trigger a selection pulse; returns whether the backend was invoked."""
        if not self.enabled:
            return False
        self.pulse_count += 1
        try:
            self.backend.play_selection()
        except Exception as exc:  # noqa: BLE001 - feedback is best effort
            log.warning("Haptic backend %r failed: %s", type(self.backend).__name__, exc)
        if self._bus is not None:
            self._bus.publish(ChartEvent.HAPTIC_PULSE, {"count": self.pulse_count})
        return True
