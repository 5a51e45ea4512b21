"""Widget rendering a user's notifications as text."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Callable, Protocol

from notification_center.domain.entities import Notification
from notification_center.infrastructure.formatting import (
    TimestampFormatter,
    get_timestamp_formatter,
)
from notification_center.utils import find_tokens, resolve_path, stringify, substitute

SectionFunction = Callable[[Notification, "NotificationList"], str]


class NotificationProvider(Protocol):
    """Source of the notifications displayed by the widget."""

    def get_notifications(self, user_id: int | None = None) -> list[Notification]:
        ...


@dataclass(frozen=True)
class FieldLookup:
    """Token bound to a dotted path resolved against the render context."""

    path: str

    def resolve(
        self,
        notification: Notification,
        context: Mapping[str, object],
        widget: "NotificationList",
    ) -> str:
        value = resolve_path(context, self.path)
        if value is None:
            return self.path
        return stringify(value)


@dataclass(frozen=True)
class SectionRender:
    """Token bound to a section function."""

    render: SectionFunction

    def resolve(
        self,
        notification: Notification,
        context: Mapping[str, object],
        widget: "NotificationList",
    ) -> str:
        return stringify(self.render(notification, widget))


TokenBinding = FieldLookup | SectionRender


@dataclass(frozen=True)
class ContainerTemplate:
    """Container rendered by substituting ``{notifications}`` and ``{emptyText}``."""

    template: str = "{notifications}{emptyText}"

    def render(
        self, notifications: Sequence[Notification], widget: "NotificationList"
    ) -> str:
        items = [widget.render_notification_text(n) for n in notifications]
        return substitute(
            self.template,
            {
                "{notifications}": widget.list_glue.join(items),
                "{emptyText}": "" if notifications else widget.empty_text,
            },
        )


@dataclass(frozen=True)
class ContainerCallback:
    """Container rendered by a function; its result is returned as is."""

    render_function: Callable[[Sequence[Notification], "NotificationList"], str]

    def render(
        self, notifications: Sequence[Notification], widget: "NotificationList"
    ) -> str:
        return self.render_function(notifications, widget)


class NotificationList:
    """Render the notifications of one user through string templates.

    Item template placeholders:

    ``{text}``
        compiled text of the notification, when its type template is a string.
    ``{text.key}``
        one entry of the compiled text, when its type template is a mapping.
    ``{timestamp}``
        creation time formatted with ``timestamp_format``.
    ``{section.key}``
        output of ``sections[key](notification, widget)``.
    ``{notification.key}``
        attribute of the notification itself, e.g. ``{notification.type}``.

    Placeholders that resolve to nothing are replaced by their own name.
    """

    def __init__(
        self,
        manager: NotificationProvider,
        *,
        user_id: int | None = None,
        item_template: str = "{notification.type} at {timestamp}",
        sections: Mapping[str, SectionFunction] | None = None,
        timestamp_format: str = "%m/%d/%Y %H:%M:%S",
        list_glue: str = "\n",
        empty_text: str = "No notifications available.",
        container_template: ContainerTemplate | ContainerCallback | None = None,
        formatter: TimestampFormatter | None = None,
    ) -> None:
        self.manager = manager
        self.user_id = user_id
        self.item_template = item_template
        self.sections: dict[str, SectionFunction] = dict(sections or {})
        self.timestamp_format = timestamp_format
        self.list_glue = list_glue
        self.empty_text = empty_text
        self.container_template = container_template or ContainerTemplate()
        self.formatter = formatter or get_timestamp_formatter()
        self.template_replacements = self._compile_template_replacements()

    def run(self) -> str:
        return self.render_notifications(self.get_notifications())

    def render_notification_text(self, notification: Notification) -> str:
        """Render ``notification`` through the item template."""

        context = self.get_notification_context(notification)
        replacements = {
            token: binding.resolve(notification, context, self)
            for token, binding in self.template_replacements.items()
        }
        replacements["{timestamp}"] = self.formatter.as_datetime(
            notification.timestamp, self.timestamp_format
        )
        return substitute(self.item_template, replacements)

    def render_notifications(self, notifications: Sequence[Notification]) -> str:
        return self.container_template.render(notifications, self)

    def get_notifications(self) -> list[Notification]:
        return self.manager.get_notifications(self.user_id)

    def get_notification_context(self, notification: Notification) -> dict[str, object]:
        return {
            "text": notification.compiled_text,
            "notification": notification,
        }

    def _compile_template_replacements(self) -> dict[str, TokenBinding]:
        context = {"section": self.sections}
        replacements: dict[str, TokenBinding] = {}
        for key in find_tokens(self.item_template):
            section = resolve_path(context, key)
            if callable(section):
                replacements[f"{{{key}}}"] = SectionRender(section)
            else:
                replacements[f"{{{key}}}"] = FieldLookup(key)
        return replacements


__all__ = [
    "ContainerCallback",
    "ContainerTemplate",
    "FieldLookup",
    "NotificationList",
    "NotificationProvider",
    "SectionRender",
]
