"""Observable selection state for drag-to-inspect.

``ObservableValue`` is a mutable cell with an explicit subscriber list;
``set`` only notifies when the new value differs from the old one.

``SelectionModel`` owns the transient state of one card:

- ``indicator_visible``: True while a drag is active.
- ``current``: the selected sample (``SelectedPoint``) or None.

Each pointer move runs the locator. In-bounds results update ``current``;
a change while the indicator is visible fires exactly one haptic pulse.
Out-of-bounds results leave ``current`` untouched. ``end_drag`` hides the
indicator and clears the selection.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, List, Optional, TypeVar

from linechart.charting.locator import PointLocator, Selection
from linechart.charting.types import ChartData, ChartPoint

from .event_bus import ChartEvent, EventBus
from .haptics import HapticFeedback

__all__ = ["ObservableValue", "SelectedPoint", "SelectionModel"]

log = logging.getLogger(__name__)

T = TypeVar("T")
Listener = Callable[[Any, Any], None]  # (old, new)


class ObservableValue(Generic[T]):
    def __init__(self, initial: T) -> None:
        self._value = initial
        self._listeners: List[Listener] = []

    @property
    def value(self) -> T:
        return self._value

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Add ``listener``; returns a callable that removes it."""
        self._listeners.append(listener)

        def _remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _remove

    def set(self, value: T) -> bool:
        old = self._value
        if old == value:
            return False
        self._value = value
        for listener in list(self._listeners):
            listener(old, value)
        return True


@dataclass(frozen=True)
class SelectedPoint:
    index: int
    point: ChartPoint
    selection: Selection

    @property
    def value(self) -> float:
        return self.point.value

    @property
    def label(self) -> Optional[str]:
        return self.point.label


class SelectionModel:
    def __init__(
        self,
        data: ChartData,
        *,
        haptics: Optional[HapticFeedback] = None,
        event_bus: Optional[EventBus] = None,
    ) -> None:
        self._locator = PointLocator(data)
        self._haptics = haptics
        self._bus = event_bus
        self.current: ObservableValue[Optional[SelectedPoint]] = ObservableValue(None)
        self.indicator_visible: ObservableValue[bool] = ObservableValue(False)
        self.pointer: tuple[float, float] = (0.0, 0.0)
        self.current.subscribe(self._on_current_changed)

    @property
    def data(self) -> ChartData:
        return self._locator.data

    @property
    def locator(self) -> PointLocator:
        return self._locator

    def update_from_pointer(self, pointer: tuple[float, float], width: float, height: float) -> Selection:
        """Handle one drag-changed event; returns the locator result."""
        self.pointer = pointer
        self.indicator_visible.set(True)
        return self.select_nearest(pointer, width, height)

    def select_nearest(self, pointer: Any, width: float, height: float) -> Selection:
        """Run the locator and store an in-bounds result as the current value."""
        result = self._locator.locate(pointer, width, height)
        index = result.index
        if index is None:
            return result
        # same sample index -> no change, even if its pixel position moved
        picked = self.data[index]
        cur = self.current.value
        if cur is None or cur.index != index:
            self.current.set(SelectedPoint(index=index, point=picked, selection=result))
        return result

    def end_drag(self) -> None:
        self.indicator_visible.set(False)
        if self.current.set(None) and self._bus is not None:
            self._bus.publish(ChartEvent.SELECTION_CLEARED, None)

    def _on_current_changed(self, old: Optional[SelectedPoint], new: Optional[SelectedPoint]) -> None:
        if new is None:
            return
        log.debug("selection changed: index=%s value=%s", new.index, new.value)
        if self.indicator_visible.value and self._haptics is not None:
            self._haptics.play_selection()
        if self._bus is not None:
            self._bus.publish(
                ChartEvent.SELECTION_CHANGED,
                {"index": new.index, "value": new.value, "label": new.label},
            )
