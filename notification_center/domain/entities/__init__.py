"""Domain entities exposed by the application."""

from .notification import Notification, NotificationOwner

__all__ = ["Notification", "NotificationOwner"]
