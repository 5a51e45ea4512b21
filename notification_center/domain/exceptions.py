"""Errors raised by the notification store."""

from __future__ import annotations


class NotificationError(Exception):
    """Base class for notification related failures."""


class PersistenceError(NotificationError, RuntimeError):
    """Raised when the storage could not read or write notifications."""


class NotFoundError(NotificationError, ValueError):
    """Raised when no non-deleted notification matches ``(id, user_id)``."""

    def __init__(self, notification_id: int, user_id: int) -> None:
        self.notification_id = notification_id
        self.user_id = user_id
        super().__init__(
            f"Notification {notification_id} not found for user {user_id}"
        )


__all__ = ["NotFoundError", "NotificationError", "PersistenceError"]
