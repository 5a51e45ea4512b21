"""Facade coordinating the notification store and per-type display texts."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Protocol

from notification_center.domain.entities import Notification
from notification_center.utils import find_tokens, resolve_path, stringify, substitute


class NotificationTarget(Protocol):
    """Storage backend the manager delegates persistence to."""

    def create(self, type: str, data: Any, user_id: int) -> Notification:
        ...

    def update(self, id: int, type: str, data: Any, user_id: int) -> Notification:
        ...

    def mark_as_read(self, id: int, user_id: int) -> None:
        ...

    def mark_as_deleted(self, id: int, user_id: int) -> None:
        ...

    def mark_all_read(self, user_id: int) -> None:
        ...

    def clear_all(self, user_id: int) -> None:
        ...

    def find_notifications(self, user_id: int) -> list[Notification]:
        ...


TypeTemplate = str | Mapping[str, str]


class NotificationManager:
    """Entry point used by callers and widgets to work with notifications.

    ``target_factory`` receives the manager itself so the target can hand it to
    every notification it hydrates. ``types`` maps a notification type to the
    template of its display text: either a single string, or a mapping of
    named strings (for example a title and a body). Templates use ``{key}``
    placeholders resolved against the notification's ``data``.

    ``user_id`` is the current user; operations called without an explicit
    user act on it.
    """

    def __init__(
        self,
        target_factory: Callable[["NotificationManager"], NotificationTarget],
        *,
        types: Mapping[str, TypeTemplate] | None = None,
        user_id: int | None = None,
    ) -> None:
        self.types: dict[str, TypeTemplate] = dict(types or {})
        self.user_id = user_id
        self.target = target_factory(self)

    def create(self, type: str, data: Any = None, user_id: int | None = None) -> Notification:
        return self.target.create(type, data, self._resolve_user_id(user_id))

    def update(
        self, id: int, type: str, data: Any = None, user_id: int | None = None
    ) -> Notification:
        return self.target.update(id, type, data, self._resolve_user_id(user_id))

    def mark_as_read(self, id: int, user_id: int | None = None) -> None:
        self.target.mark_as_read(id, self._resolve_user_id(user_id))

    def mark_as_deleted(self, id: int, user_id: int | None = None) -> None:
        self.target.mark_as_deleted(id, self._resolve_user_id(user_id))

    def mark_all_read(self, user_id: int | None = None) -> None:
        self.target.mark_all_read(self._resolve_user_id(user_id))

    def clear_all(self, user_id: int | None = None) -> None:
        self.target.clear_all(self._resolve_user_id(user_id))

    def get_notifications(self, user_id: int | None = None) -> list[Notification]:
        return self.target.find_notifications(self._resolve_user_id(user_id))

    def compile_text(self, notification: Notification) -> str | dict[str, str]:
        """Return the display text of ``notification`` filled with its data.

        Unknown types compile to the type name itself.
        """

        template = self.types.get(notification.type)
        if template is None:
            return notification.type
        if isinstance(template, str):
            return self._fill(template, notification.data)
        return {key: self._fill(text, notification.data) for key, text in template.items()}

    @staticmethod
    def _fill(template: str, data: Any) -> str:
        replacements = {}
        for token in find_tokens(template):
            value = resolve_path(data, token)
            if value is not None:
                replacements[f"{{{token}}}"] = stringify(value)
        return substitute(template, replacements)

    def _resolve_user_id(self, user_id: int | None) -> int:
        resolved = user_id if user_id is not None else self.user_id
        if resolved is None:
            raise ValueError("A user id is required when no current user is set")
        return resolved


__all__ = ["NotificationManager", "NotificationTarget"]
