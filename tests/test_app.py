import logging
import threading

import pytest

from keyid.app import Application, configure_logging
from keyid.args import Args
from keyid.events import AppStarted
from keyid.mediator import notification_type


class FakeSource:
    def __init__(self):
        self.closed = False

    def close(self):
        self.closed = True


class RecordingHandler:
    notification_type = notification_type(AppStarted)

    def __init__(self):
        self.received = []
        self.event = threading.Event()

    def handle(self, notification):
        self.received.append(notification)
        self.event.set()


@pytest.fixture
def restore_logger():
    logger = logging.getLogger("keyid")
    level, handlers = logger.level, list(logger.handlers)
    yield
    logger.setLevel(level)
    logger.handlers[:] = handlers


def test_configure_logging_debug(restore_logger):
    logger = configure_logging(Args(debug=True))
    assert logger.name == "keyid"
    assert logger.level == logging.DEBUG


def test_configure_logging_default(restore_logger):
    logger = configure_logging(Args())
    assert logger.level == logging.WARNING


def test_configure_logging_adds_handler_once(restore_logger):
    logger = configure_logging(Args())
    count = len(logger.handlers)
    configure_logging(Args(debug=True))
    assert len(logger.handlers) == count


def test_start_publishes_app_started(restore_logger):
    app = Application(Args(), FakeSource())
    handler = RecordingHandler()
    app.mediator.handlers.append(handler)
    app.mediator.poll_interval = 0.01
    app.start()
    try:
        assert handler.event.wait(2)
    finally:
        app.stop()
    assert handler.received == [AppStarted()]


def test_stop_closes_source_and_mediator(restore_logger):
    source = FakeSource()
    args = Args(playlist="Warmup")
    app = Application(args, source)
    app.mediator.poll_interval = 0.01
    with app:
        assert app.mediator.running
    assert source.closed
    assert not app.mediator.running
    assert app.client.args is args