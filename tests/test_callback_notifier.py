"""Test media-index notification."""

from core.notifier.callback_notifier import CallbackMediaNotifier


def test_listeners_receive_path():
    """Every registered listener gets the file path."""
    received = []
    notifier = CallbackMediaNotifier([received.append])
    notifier.addListener(lambda path: received.append(path.upper()))

    notifier.notify("/pictures/a.png")

    assert received == ["/pictures/a.png", "/PICTURES/A.PNG"]
    assert notifier.listenerCount == 2


def test_failing_listener_is_isolated():
    """A raising listener does not stop the others or reach the caller."""
    received = []

    def broken(path):
        raise RuntimeError("index offline")

    notifier = CallbackMediaNotifier([broken, received.append])

    notifier.notify("/pictures/b.png")

    assert received == ["/pictures/b.png"]


def test_remove_listener():
    """Removed listeners are no longer called."""
    received = []
    notifier = CallbackMediaNotifier()
    notifier.addListener(received.append)

    assert notifier.removeListener(received.append) is True
    assert notifier.removeListener(received.append) is False

    notifier.notify("/pictures/c.png")
    assert received == []
