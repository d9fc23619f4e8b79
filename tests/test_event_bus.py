from linechart.services.event_bus import ChartEvent, EventBus


def test_publish_reaches_subscribers_in_order():
    bus = EventBus()
    seen = []
    bus.subscribe(ChartEvent.SELECTION_CHANGED, lambda e: seen.append(("a", e.payload)))
    bus.subscribe("selection_changed", lambda e: seen.append(("b", e.payload)))
    evt = bus.publish(ChartEvent.SELECTION_CHANGED, {"index": 1})
    assert evt.name == "selection_changed"
    assert seen == [("a", {"index": 1}), ("b", {"index": 1})]


def test_once_subscription_removed_after_first_call():
    bus = EventBus()
    calls = []
    bus.subscribe(ChartEvent.HAPTIC_PULSE, lambda e: calls.append(e), once=True)
    bus.publish(ChartEvent.HAPTIC_PULSE)
    bus.publish(ChartEvent.HAPTIC_PULSE)
    assert len(calls) == 1


def test_failing_handler_is_isolated(caplog):
    bus = EventBus()
    seen = []

    def boom(_e):
        raise RuntimeError("broken")

    bus.subscribe("x", boom)
    bus.subscribe("x", lambda e: seen.append(e.name))
    with caplog.at_level("WARNING"):
        bus.publish("x")
    assert seen == ["x"]
    assert len(bus.errors) == 1
    assert isinstance(bus.errors[0][1], RuntimeError)
    assert "broken" in caplog.text


def test_unsubscribe_and_cancel():
    bus = EventBus()
    calls = []
    sub = bus.subscribe("x", lambda e: calls.append(1))
    sub2 = bus.subscribe("x", lambda e: calls.append(2))
    sub2.cancel()
    bus.publish("x")
    bus.unsubscribe(sub)
    bus.publish("x")
    assert calls == [1]


def test_handler_may_subscribe_during_publish():
    bus = EventBus()
    calls = []

    def first(_e):
        bus.subscribe("x", lambda e: calls.append("late"))
        calls.append("first")

    bus.subscribe("x", first, once=True)
    bus.publish("x")
    bus.publish("x")
    assert calls == ["first", "late"]


def test_clear_drops_subscribers_and_errors():
    bus = EventBus()
    bus.subscribe("x", lambda e: 1 / 0)
    bus.publish("x")
    bus.clear()
    assert bus.errors == []
    bus.publish("x")
    assert bus.errors == []
