from .notification import NotificationRead, NotificationWrite

__all__ = ["NotificationRead", "NotificationWrite"]
