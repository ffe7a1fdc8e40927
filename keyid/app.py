"""Wiring of the client, the notification mediator and logging."""

from __future__ import annotations

import logging
from typing import Optional

from keyid.args import Args
from keyid.client import RekordboxClient
from keyid.events import AppStarted, AppStartedHandler
from keyid.mediator import Mediator, NotificationChannel, NotificationPublisher

_log = logging.getLogger(__name__)
_handler: Optional[logging.Handler] = None


def configure_logging(args: Args) -> logging.Logger:
    """Send the package's log records to stderr, at debug level if requested."""
    global _handler
    logger = logging.getLogger("keyid")
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    if _handler not in logger.handlers:
        logger.addHandler(_handler)
    logger.setLevel(logging.DEBUG if args.debug else logging.WARNING)
    return logger


class Application:
    """The running program: a library client plus its notification machinery."""

    def __init__(self, args: Args, source) -> None:
        self.args = args
        configure_logging(args)
        self.client = RekordboxClient(source, args)
        self.channel = NotificationChannel()
        self.publisher = NotificationPublisher(self.channel)
        self.mediator = Mediator(self.channel, [AppStartedHandler(self.publisher)])

    def start(self) -> None:
        """Start dispatching notifications and announce the start."""
        self.mediator.start()
        _log.debug("Mediator started")
        self.publisher.publish(AppStarted())

    def stop(self) -> None:
        """Stop dispatching notifications and close the library client."""
        self.mediator.stop()
        _log.debug("Mediator stopped")
        self.client.close()

    def __enter__(self) -> Application:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()