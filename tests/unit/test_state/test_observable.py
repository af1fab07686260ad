"""Tests for Observable."""


def test_subscribers_receive_new_values():
    from livelist.state import Observable

    received = []
    observable = Observable(0)
    observable.subscribe(received.append)

    observable.set(1)
    observable.set(2)

    assert received == [1, 2]
    assert observable.value == 2


def test_emit_current_on_subscribe():
    from livelist.state import Observable

    received = []
    observable = Observable("start")
    observable.subscribe(received.append, emit_current=True)

    assert received == ["start"]


def test_unsubscribe_stops_notifications():
    from livelist.state import Observable

    received = []
    observable = Observable(0)
    unsubscribe = observable.subscribe(received.append)

    observable.set(1)
    unsubscribe()
    observable.set(2)

    assert received == [1]
    assert observable.subscriber_count == 0


def test_unsubscribe_twice_is_harmless():
    from livelist.state import Observable

    observable = Observable(0)
    unsubscribe = observable.subscribe(lambda value: None)

    unsubscribe()
    unsubscribe()

    assert observable.subscriber_count == 0


def test_unsubscribe_during_notification():
    from livelist.state import Observable

    received = []
    observable = Observable(0)
    unsubscribe_holder = {}

    def once(value):
        received.append(("once", value))
        unsubscribe_holder["fn"]()

    unsubscribe_holder["fn"] = observable.subscribe(once)
    observable.subscribe(lambda value: received.append(("always", value)))

    observable.set(1)
    observable.set(2)

    assert received == [("once", 1), ("always", 1), ("always", 2)]
