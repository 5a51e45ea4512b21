"""Endpoints for listing, mutating and rendering notifications."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.responses import PlainTextResponse

from notification_center.application.notifications import NotificationManager
from notification_center.config import Settings, get_settings
from notification_center.domain.entities import Notification
from notification_center.domain.exceptions import NotFoundError, PersistenceError
from notification_center.interfaces.api.dependencies import get_notification_manager
from notification_center.interfaces.api.schemas import NotificationRead, NotificationWrite
from notification_center.interfaces.widgets import NotificationList

router = APIRouter(prefix="/notifications", tags=["notifications"])

logger = logging.getLogger(__name__)


def _notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead(
        id=notification.id,
        user_id=notification.user_id,
        type=notification.type,
        data=notification.data,
        text=notification.compiled_text,
        created_at=notification.created_at,
        is_read=notification.is_read,
    )


def _storage_unavailable(exc: PersistenceError) -> HTTPException:
    logger.warning("Notification storage failed: %s", exc)
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail="Notification storage is unavailable",
    )


@router.get("/", response_model=list[NotificationRead])
def list_notifications(
    manager: NotificationManager = Depends(get_notification_manager),
) -> list[NotificationRead]:
    """Return the non-deleted notifications of the acting user, newest first."""

    try:
        notifications = manager.get_notifications()
    except PersistenceError as exc:
        raise _storage_unavailable(exc) from exc
    return [_notification_to_schema(notification) for notification in notifications]


@router.get("/rendered", response_class=PlainTextResponse)
def render_notifications(
    manager: NotificationManager = Depends(get_notification_manager),
    settings: Settings = Depends(get_settings),
) -> str:
    """Return the acting user's notifications rendered as plain text."""

    widget = NotificationList(
        manager,
        user_id=manager.user_id,
        timestamp_format=settings.notification_timestamp_format,
        list_glue=settings.notification_list_glue,
        empty_text=settings.notification_empty_text,
    )
    try:
        return widget.run()
    except PersistenceError as exc:
        raise _storage_unavailable(exc) from exc


@router.post("/", response_model=NotificationRead, status_code=status.HTTP_201_CREATED)
def create_notification(
    payload: NotificationWrite,
    manager: NotificationManager = Depends(get_notification_manager),
) -> NotificationRead:
    try:
        notification = manager.create(payload.type, payload.data)
    except PersistenceError as exc:
        raise _storage_unavailable(exc) from exc
    return _notification_to_schema(notification)


@router.put("/{notification_id}", response_model=NotificationRead)
def update_notification(
    notification_id: int,
    payload: NotificationWrite,
    manager: NotificationManager = Depends(get_notification_manager),
) -> NotificationRead:
    try:
        notification = manager.update(notification_id, payload.type, payload.data)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except PersistenceError as exc:
        raise _storage_unavailable(exc) from exc
    return _notification_to_schema(notification)


@router.post("/read-all", status_code=status.HTTP_204_NO_CONTENT)
def mark_all_notifications_read(
    manager: NotificationManager = Depends(get_notification_manager),
) -> Response:
    try:
        manager.mark_all_read()
    except PersistenceError as exc:
        raise _storage_unavailable(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{notification_id}/read", status_code=status.HTTP_204_NO_CONTENT)
def mark_notification_read(
    notification_id: int,
    manager: NotificationManager = Depends(get_notification_manager),
) -> Response:
    try:
        manager.mark_as_read(notification_id)
    except PersistenceError as exc:
        raise _storage_unavailable(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{notification_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_notification(
    notification_id: int,
    manager: NotificationManager = Depends(get_notification_manager),
) -> Response:
    try:
        manager.mark_as_deleted(notification_id)
    except PersistenceError as exc:
        raise _storage_unavailable(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/", status_code=status.HTTP_204_NO_CONTENT)
def clear_notifications(
    manager: NotificationManager = Depends(get_notification_manager),
) -> Response:
    try:
        manager.clear_all()
    except PersistenceError as exc:
        raise _storage_unavailable(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
