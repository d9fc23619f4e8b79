"""Headless services shared by chart cards (events, selection, haptics)."""

from .event_bus import ChartEvent, Event, EventBus  # noqa: F401
from .haptics import HapticFeedback, LoggingHapticBackend  # noqa: F401
from .selection import ObservableValue, SelectedPoint, SelectionModel  # noqa: F401
from .service_locator import services  # noqa: F401
