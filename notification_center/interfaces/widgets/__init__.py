"""Text widgets built on top of the notification manager."""

from .notification_list import (
    ContainerCallback,
    ContainerTemplate,
    FieldLookup,
    NotificationList,
    NotificationProvider,
    SectionRender,
)

__all__ = [
    "ContainerCallback",
    "ContainerTemplate",
    "FieldLookup",
    "NotificationList",
    "NotificationProvider",
    "SectionRender",
]
