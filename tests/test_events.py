import threading

from keyid.events import AppStarted, AppStartedHandler
from keyid.mediator import Mediator, NotificationChannel, NotificationPublisher, notification_type


class RecordingPublisher:
    def __init__(self):
        self.published = []

    def publish(self, notification):
        self.published.append(notification)


def test_handler_selects_app_started():
    handler = AppStartedHandler(RecordingPublisher())
    assert handler.notification_type == notification_type(AppStarted())


def test_handle_publishes_nothing():
    publisher = RecordingPublisher()
    AppStartedHandler(publisher).handle(AppStarted())
    assert publisher.published == []


def test_app_started_reaches_handler_through_mediator():
    channel = NotificationChannel()
    handled = threading.Event()

    class Watching(AppStartedHandler):
        def handle(self, notification):
            self.seen = notification
            handled.set()

    handler = Watching(NotificationPublisher(channel))
    with Mediator(channel, [handler], poll_interval=0.01):
        NotificationPublisher(channel).publish(AppStarted())
        assert handled.wait(2)
    assert handler.seen == AppStarted()