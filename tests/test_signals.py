from voxelcore.signals import Signal


def test_publish_calls_in_connection_order():
    signal = Signal()
    calls = []
    signal.connect(lambda *args: calls.append(("first", args)))
    signal.connect(lambda *args: calls.append(("second", args)))
    signal.publish("key", 1)
    assert calls == [("first", ("key", 1)), ("second", ("key", 1))]


def test_disconnect_stops_delivery():
    signal = Signal()
    calls = []
    callback = calls.append
    signal.connect(callback)
    signal.publish("a")
    signal.disconnect(callback)
    signal.publish("b")
    assert calls == ["a"]
    assert len(signal) == 0


def test_duplicate_connect_is_ignored():
    signal = Signal()
    calls = []
    callback = calls.append
    signal.connect(callback)
    signal.connect(callback)
    signal.publish("x")
    assert calls == ["x"]
    assert len(signal) == 1


def test_bound_methods_connect_once():
    class Listener:
        def __init__(self):
            self.seen = []

        def on_event(self, value):
            self.seen.append(value)

    listener = Listener()
    signal = Signal()
    signal.connect(listener.on_event)
    signal.connect(listener.on_event)
    signal.publish(3)
    assert listener.seen == [3]


def test_disconnect_unknown_leaves_others():
    signal = Signal()
    calls = []
    signal.connect(calls.append)
    signal.disconnect(print)
    signal.publish("kept")
    assert calls == ["kept"]


def test_callback_may_disconnect_itself_during_publish():
    signal = Signal()
    calls = []

    def once(value):
        calls.append(("once", value))
        signal.disconnect(once)

    signal.connect(once)
    signal.connect(lambda value: calls.append(("always", value)))
    signal.publish(1)
    signal.publish(2)
    assert calls == [("once", 1), ("always", 1), ("always", 2)]