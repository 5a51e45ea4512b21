"""FastAPI dependency utilities."""

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from notification_center.application.notifications import NotificationManager
from notification_center.config import Settings, get_settings
from notification_center.infrastructure.database import get_db
from notification_center.infrastructure.repositories import NotificationRepository


def get_current_user_id(x_user_id: int | None = Header(default=None)) -> int:
    """Return the acting user identifier taken from the ``X-User-Id`` header."""

    if x_user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing X-User-Id header",
        )
    return x_user_id


def get_notification_manager(
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
    settings: Settings = Depends(get_settings),
) -> NotificationManager:
    """Return a manager bound to the request session and acting user."""

    return NotificationManager(
        lambda owner: NotificationRepository(db, owner=owner),
        types=settings.notification_types,
        user_id=user_id,
    )
