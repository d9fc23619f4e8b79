from linechart.services.event_bus import ChartEvent, EventBus
from linechart.services.haptics import HapticFeedback, LoggingHapticBackend


def test_default_backend_counts():
    h = HapticFeedback()
    assert isinstance(h.backend, LoggingHapticBackend)
    assert h.play_selection() is True
    assert h.play_selection() is True
    assert h.backend.pulses == 2
    assert h.pulse_count == 2


def test_disabled_does_nothing():
    backend = LoggingHapticBackend()
    h = HapticFeedback(backend, enabled=False)
    assert h.play_selection() is False
    assert backend.pulses == 0
    assert h.pulse_count == 0


def test_backend_failure_is_logged(caplog):
    class Broken:
        def play_selection(self):
            raise OSError("no actuator")

    bus = EventBus()
    pulses = []
    bus.subscribe(ChartEvent.HAPTIC_PULSE, lambda e: pulses.append(e.payload["count"]))
    h = HapticFeedback(Broken(), event_bus=bus)
    with caplog.at_level("WARNING"):
        assert h.play_selection() is True
    assert "no actuator" in caplog.text
    assert pulses == [1]
