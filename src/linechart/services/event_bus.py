"""Synchronous publish/subscribe for chart events.

Producers (selection model, haptics, color scheme changes) and consumers
(views, tests, host applications) are decoupled through named events.

- One failing handler does not break the publish cycle; its exception is
  recorded in ``errors`` and logged.
- ``once`` subscriptions are removed after their first successful call.

Handlers run without the lock held, so they may subscribe or unsubscribe
recursively.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from threading import RLock
from time import perf_counter
from typing import Any, Dict, List, Protocol

__all__ = [
    "ChartEvent",
    "Event",
    "EventBus",
    "EventHandler",
    "Subscription",
]

log = logging.getLogger(__name__)


class ChartEvent(str, Enum):
    SELECTION_CHANGED = "selection_changed"
    SELECTION_CLEARED = "selection_cleared"
    HAPTIC_PULSE = "haptic_pulse"
    COLOR_SCHEME_CHANGED = "color_scheme_changed"


@dataclass
class Event:
    name: str
    payload: Any
    timestamp: float


class EventHandler(Protocol):
    def __call__(self, event: Event) -> None: ...  # pragma: no cover - structural


@dataclass
class Subscription:
    event: str
    handler: EventHandler
    once: bool
    active: bool = True

    def cancel(self) -> None:
        self.active = False


def _key(name: str | ChartEvent) -> str:
    return name.value if isinstance(name, ChartEvent) else name


class EventBus:
    def __init__(self) -> None:
        self._lock = RLock()
        self._subs: Dict[str, List[Subscription]] = {}
        self._errors: List[tuple[Event, Exception]] = []

    # Subscription management ------------------------------------------
    def subscribe(
        self, name: str | ChartEvent, handler: EventHandler, *, once: bool = False
    ) -> Subscription:
        sub = Subscription(event=_key(name), handler=handler, once=once)
        with self._lock:
            self._subs.setdefault(sub.event, []).append(sub)
        return sub

    def unsubscribe(self, sub: Subscription) -> None:
        with self._lock:
            bucket = self._subs.get(sub.event)
            if bucket and sub in bucket:
                bucket.remove(sub)
                if not bucket:
                    self._subs.pop(sub.event, None)
        sub.active = False

    def clear(self) -> None:
        with self._lock:
            self._subs.clear()
            self._errors.clear()

    # Publishing --------------------------------------------------------
    def publish(self, name: str | ChartEvent, payload: Any = None) -> Event:
        key = _key(name)
        evt = Event(name=key, payload=payload, timestamp=perf_counter())
        with self._lock:
            subs = list(self._subs.get(key, ()))
        done: List[Subscription] = []
        for sub in subs:
            if not sub.active:
                continue
            try:
                sub.handler(evt)
            except Exception as exc:  # noqa: BLE001 - isolate handler failures
                log.warning("Handler for %s failed: %s", key, exc)
                with self._lock:
                    self._errors.append((evt, exc))
            else:
                if sub.once:
                    done.append(sub)
        for sub in done:
            self.unsubscribe(sub)
        return evt

    # Introspection -----------------------------------------------------
    @property
    def errors(self) -> list[tuple[Event, Exception]]:
        with self._lock:
            return list(self._errors)
