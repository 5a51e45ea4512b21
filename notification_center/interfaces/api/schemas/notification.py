"""Pydantic models describing notification payloads."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class NotificationWrite(BaseModel):
    """Payload used to create or replace a notification."""

    type: str = Field(..., min_length=1, max_length=255, description="Notification type")
    data: Any = Field(default=None, description="Arbitrary JSON payload")


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    id: int
    user_id: int
    type: str
    data: Any = None
    text: str | dict[str, str] = ""
    created_at: int
    is_read: bool = False


__all__ = ["NotificationRead", "NotificationWrite"]
