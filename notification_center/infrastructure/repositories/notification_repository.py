"""Persistence helpers for notification entities."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Callable, TypeVar

from sqlalchemy import false
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from notification_center.domain.entities import Notification, NotificationOwner
from notification_center.domain.exceptions import NotFoundError, PersistenceError
from notification_center.infrastructure.models import NotificationModel
from notification_center.utils import now_timestamp

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


class NotificationRepository:
    """Store notifications in the configured notifications table.

    Records are never removed physically: deleting a notification only raises
    its ``is_deleted`` flag, and every lookup ignores flagged rows. Each
    mutating call issues a single statement followed by a commit. Storage
    failures roll the session back and surface as :class:`PersistenceError`.
    """

    def __init__(self, session: Session, owner: NotificationOwner | None = None) -> None:
        self.session = session
        self.owner = owner

    def create(self, type: str, data: Any, user_id: int) -> Notification:
        """Persist a new unread notification for ``user_id`` and return it."""

        notification = Notification(
            id=None,
            type=type,
            data=data,
            user_id=user_id,
            created_at=now_timestamp(),
            is_read=False,
            owner=self.owner,
        )
        self._save(notification)
        return notification

    def update(self, id: int, type: str, data: Any, user_id: int) -> Notification:
        """Replace ``type`` and ``data`` of an existing notification."""

        notification = self.find_notification(id, user_id)
        notification.type = type
        notification.data = data
        self._save(notification)
        return notification

    def mark_as_read(self, id: int, user_id: int) -> None:
        self._update_where(
            {NotificationModel.is_read: True, NotificationModel.updated_at: now_timestamp()},
            NotificationModel.id == id,
            NotificationModel.user_id == user_id,
        )

    def mark_as_deleted(self, id: int, user_id: int) -> None:
        self._update_where(
            {NotificationModel.is_deleted: True, NotificationModel.updated_at: now_timestamp()},
            NotificationModel.id == id,
            NotificationModel.user_id == user_id,
        )

    def clear_all(self, user_id: int) -> None:
        """Soft delete every remaining notification of ``user_id``."""

        self._update_where(
            {NotificationModel.is_deleted: True, NotificationModel.updated_at: now_timestamp()},
            NotificationModel.user_id == user_id,
            NotificationModel.is_deleted == false(),
        )

    def mark_all_read(self, user_id: int) -> None:
        """Flag every unread notification of ``user_id`` as read."""

        self._update_where(
            {NotificationModel.is_read: True},
            NotificationModel.user_id == user_id,
            NotificationModel.is_read == false(),
        )

    def find_notifications(self, user_id: int) -> list[Notification]:
        """Return the non-deleted notifications of ``user_id``, newest first."""

        query = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.user_id == user_id)
            .filter(NotificationModel.is_deleted == false())
            .order_by(NotificationModel.created_at.desc(), NotificationModel.id.desc())
        )
        models = self._run(query.all, "list notifications")
        return [self._to_entity(model) for model in models]

    def find_notification(self, id: int, user_id: int) -> Notification:
        """Return a single non-deleted notification or raise :class:`NotFoundError`."""

        notification = self.find_notification_instance(id, user_id)
        if notification is None:
            raise NotFoundError(id, user_id)
        return notification

    def find_notification_instance(self, id: int, user_id: int) -> Notification | None:
        query = self.session.query(NotificationModel).filter(
            NotificationModel.id == id,
            NotificationModel.user_id == user_id,
            NotificationModel.is_deleted == false(),
        )
        model = self._run(query.one_or_none, "load notification")
        if model is None:
            return None
        return self._to_entity(model)

    def _save(self, notification: Notification) -> None:
        values = {
            "type": notification.type,
            "data": json.dumps(notification.data),
            "user_id": notification.user_id,
            "created_at": notification.created_at,
            "is_read": bool(notification.is_read),
        }

        if notification.id is not None:
            self._update_where(values, NotificationModel.id == notification.id)
            return

        def insert() -> int:
            model = NotificationModel(**values, is_deleted=False)
            self.session.add(model)
            self.session.flush()
            new_id = model.id
            self.session.commit()
            return new_id

        notification.id = self._run(insert, "insert notification")

    def _update_where(self, values: Mapping[Any, Any], *criteria: Any) -> int:
        def update() -> int:
            affected = (
                self.session.query(NotificationModel)
                .filter(*criteria)
                .update(dict(values), synchronize_session=False)
            )
            self.session.commit()
            return affected

        affected = self._run(update, "update notifications")
        if not affected:
            logger.debug("Notification update matched no rows")
        return affected

    def _run(self, operation: Callable[[], _T], description: str) -> _T:
        try:
            return operation()
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception("Could not %s", description)
            raise PersistenceError(f"Could not {description}: {exc}") from exc

    def _to_entity(self, model: NotificationModel) -> Notification:
        data = model.data
        return Notification(
            id=model.id,
            type=model.type,
            data=json.loads(data) if isinstance(data, str) else data,
            user_id=model.user_id,
            created_at=model.created_at,
            is_read=bool(model.is_read),
            is_deleted=bool(model.is_deleted),
            owner=self.owner,
        )


__all__ = ["NotificationRepository"]
