"""Application events and their handlers."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from keyid.mediator import NotificationPublisher, notification_type

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppStarted:
    """Published once the application has started."""


@dataclass
class AppStartedHandler:
    """Reacts to :class:`AppStarted` by recording each start it receives."""

    publisher: NotificationPublisher
    received: list[AppStarted] = field(default_factory=list)

    notification_type = notification_type(AppStarted)

    def handle(self, notification: AppStarted) -> None:
        """Record the start of the application."""
        if not isinstance(notification, AppStarted):
            raise TypeError(
                f"{type(self).__name__} cannot handle {type(notification).__name__}"
            )
        self.received.append(notification)
        _log.debug("application started")