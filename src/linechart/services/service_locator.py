"""Process-wide registry for shared chart services.

Cards look up optional collaborators here (``event_bus``, ``haptics``,
``chart_config``) when they are not passed explicitly, so a host application
can wire them once:

    from linechart.services.service_locator import services
    services.register("haptics", HapticFeedback(MyBackend()))

Tests use ``override_context`` to swap services temporarily.
"""

from __future__ import annotations

from contextlib import contextmanager
from threading import RLock
from typing import Any, Dict, Generator

__all__ = ["ServiceLocator", "services", "ServiceAlreadyRegisteredError", "ServiceNotFoundError"]

_MISSING = object()


class ServiceAlreadyRegisteredError(RuntimeError):
    """Raised when registering an existing key without allow_override."""


class ServiceNotFoundError(KeyError):
    """Raised when a requested service key is not present."""


class ServiceLocator:
    def __init__(self) -> None:
        self._lock = RLock()
        self._services: Dict[str, Any] = {}

    def register(self, key: str, value: Any, *, allow_override: bool = False) -> None:
        with self._lock:
            if key in self._services and not allow_override:
                raise ServiceAlreadyRegisteredError(f"Service '{key}' already registered")
            self._services[key] = value

    def get(self, key: str) -> Any:
        with self._lock:
            if key not in self._services:
                raise ServiceNotFoundError(key)
            return self._services[key]

    def try_get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            return self._services.get(key, default)

    @contextmanager
    def override_context(self, **overrides: Any) -> Generator[None, None, None]:
        """Temporarily replace (or add) services; prior state restored on exit."""
        with self._lock:
            previous = {k: self._services.get(k, _MISSING) for k in overrides}
            self._services.update(overrides)
        try:
            yield
        finally:
            with self._lock:
                for key, prior in previous.items():
                    if prior is _MISSING:
                        self._services.pop(key, None)
                    else:
                        self._services[key] = prior

    def clear(self) -> None:
        with self._lock:
            self._services.clear()


services = ServiceLocator()
