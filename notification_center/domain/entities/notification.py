"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol


class NotificationOwner(Protocol):
    """Component able to turn a notification into its display text."""

    def compile_text(self, notification: "Notification") -> str | dict[str, str]:
        ...


@dataclass
class Notification:
    """Information message delivered to a specific user."""

    id: int | None
    type: str
    data: Any
    user_id: int
    created_at: int
    is_read: bool = False
    is_deleted: bool = False
    owner: NotificationOwner | None = field(default=None, repr=False, compare=False)

    @property
    def timestamp(self) -> int:
        return self.created_at

    @property
    def compiled_text(self) -> str | dict[str, str]:
        """Display text compiled by the owning manager for this notification."""

        if self.owner is None:
            return ""
        return self.owner.compile_text(self)


__all__ = ["Notification", "NotificationOwner"]
