"""In-process notification channel, publisher and dispatching mediator."""

from __future__ import annotations

import logging
import queue
import threading
from typing import Any, Iterable, Optional, Protocol

_log = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL = 0.1


def notification_type(notification: Any) -> str:
    """Return the type name that handlers use to select ``notification``.

    Accepts either a notification or its class.
    """
    cls = notification if isinstance(notification, type) else type(notification)
    return f"{cls.__module__}.{cls.__qualname__}"


class NotificationHandler(Protocol):
    """Handles notifications of one type."""

    notification_type: str

    def handle(self, notification: Any) -> None: ...


class NotificationChannel:
    """A thread-safe first-in, first-out queue of notifications.

    Sending never blocks.
    """

    def __init__(self) -> None:
        self._queue: queue.SimpleQueue[Any] = queue.SimpleQueue()

    def send(self, notification: Any) -> None:
        self._queue.put(notification)

    def receive(self, timeout: Optional[float] = None) -> Any:
        """Return the next notification, or None if none arrives within ``timeout``.

        A ``timeout`` of None waits until a notification arrives.
        """
        try:
            return self._queue.get(timeout=timeout)
        except queue.Empty:
            return None


class NotificationPublisher:
    """Publishes notifications onto a channel."""

    def __init__(self, channel: NotificationChannel) -> None:
        self.channel = channel

    def publish(self, notification: Any) -> None:
        self.channel.send(notification)


class Mediator:
    """Reads notifications from a channel and hands them to matching handlers.

    Each matching handler runs in its own thread.
    """

    def __init__(
        self,
        channel: NotificationChannel,
        handlers: Iterable[NotificationHandler] = (),
        poll_interval: float = DEFAULT_POLL_INTERVAL,
    ) -> None:
        self.channel = channel
        self.handlers: list[NotificationHandler] = list(handlers)
        self.poll_interval = poll_interval
        self._running = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._running.is_set()

    def start(self) -> None:
        """Begin dispatching notifications in a background thread."""
        if self.running:
            return
        self._running.set()
        self._thread = threading.Thread(
            target=self.handle_notifications, name="keyid-mediator", daemon=True
        )
        self._thread.start()

    def stop(self) -> None:
        """Stop dispatching and wait for the background thread to finish."""
        self._running.clear()
        if self._thread is not None:
            self._thread.join()
            self._thread = None

    def handle_notifications(self) -> None:
        """Dispatch notifications until the mediator is stopped."""
        while self.running:
            notification = self.channel.receive(timeout=self.poll_interval)
            if notification is None:
                continue
            kind = notification_type(notification)
            for handler in list(self.handlers):
                if handler.notification_type == kind:
                    _log.debug("Dispatching %s to %r", kind, handler)
                    threading.Thread(
                        target=handler.handle, args=(notification,), daemon=True
                    ).start()

    def __enter__(self) -> Mediator:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()