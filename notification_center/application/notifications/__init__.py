"""Notification manager and its storage contract."""

from .manager import NotificationManager, NotificationTarget

__all__ = ["NotificationManager", "NotificationTarget"]
