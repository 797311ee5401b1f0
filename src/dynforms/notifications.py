"""Notification channels."""

from __future__ import annotations

from dynforms import logger
from dynforms.typing.enums import NotificationLevel
from dynforms.typing.models import Notification


class LogNotifier:
    """Route user-facing notifications to the package logger."""

    def info(self, title: str, message: str) -> None:
        logger.info(message, title=title, notification=NotificationLevel.INFO.to_str())

    def error(self, title: str, message: str) -> None:
        logger.error(message, title=title, notification=NotificationLevel.ERROR.to_str())


class CollectingNotifier:
    """Keep notifications in memory so a host can display them later."""

    def __init__(self) -> None:
        self.notifications: list[Notification] = []

    def info(self, title: str, message: str) -> None:
        self.notifications.append(Notification(level=NotificationLevel.INFO, title=title, message=message))

    def error(self, title: str, message: str) -> None:
        self.notifications.append(Notification(level=NotificationLevel.ERROR, title=title, message=message))

    def drain(self) -> list[Notification]:
        """Return and forget collected notifications."""
        drained, self.notifications = self.notifications, []
        return drained
