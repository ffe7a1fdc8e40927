import threading

from keyid.mediator import (
    Mediator,
    NotificationChannel,
    NotificationPublisher,
    notification_type,
)


class Ping:
    pass


class Pong:
    pass


class RecordingHandler:
    def __init__(self, kind):
        self.notification_type = notification_type(kind)
        self.received = []
        self.event = threading.Event()

    def handle(self, notification):
        self.received.append(notification)
        self.event.set()


def test_channel_is_first_in_first_out():
    channel = NotificationChannel()
    first, second = Ping(), Pong()
    channel.send(first)
    channel.send(second)
    assert channel.receive(timeout=1) is first
    assert channel.receive(timeout=1) is second


def test_receive_times_out_with_none():
    channel = NotificationChannel()
    assert channel.receive(timeout=0.01) is None


def test_publisher_sends_to_channel():
    channel = NotificationChannel()
    publisher = NotificationPublisher(channel)
    ping = Ping()
    publisher.publish(ping)
    assert channel.receive(timeout=1) is ping


def test_notification_type_same_for_instance_and_class():
    assert notification_type(Ping()) == notification_type(Ping)
    assert notification_type(Ping) != notification_type(Pong)
    assert notification_type(Ping).endswith("Ping")


def test_mediator_dispatches_only_to_matching_handler():
    channel = NotificationChannel()
    ping_handler = RecordingHandler(Ping)
    pong_handler = RecordingHandler(Pong)
    mediator = Mediator(channel, [ping_handler, pong_handler], poll_interval=0.01)
    ping = Ping()
    with mediator:
        NotificationPublisher(channel).publish(ping)
        assert ping_handler.event.wait(2)
    assert ping_handler.received == [ping]
    assert pong_handler.received == []


def test_stop_ends_dispatching():
    channel = NotificationChannel()
    handler = RecordingHandler(Ping)
    mediator = Mediator(channel, [handler], poll_interval=0.01)
    mediator.start()
    assert mediator.running
    mediator.stop()
    assert not mediator.running
    ping = Ping()
    channel.send(ping)
    assert channel.receive(timeout=0.5) is ping
    assert handler.received == []