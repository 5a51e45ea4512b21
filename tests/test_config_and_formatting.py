"""Tests for settings loading and timestamp formatting."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from notification_center.config import Settings, get_settings, reset_settings_cache
from notification_center.infrastructure.formatting import TimestampFormatter, get_timestamp_formatter
from notification_center.infrastructure.models import NotificationModel
from notification_center.utils import get_app_timezone, resolve_timezone, timestamp_to_datetime


def test_settings_read_notification_types_from_environment(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("NOTIFICATION_TYPES", '{"welcome": {"title": "Hi {name}"}, "info": "{text}"}')
    monkeypatch.setenv("NOTIFICATION_EMPTY_TEXT", "Nothing here.")

    settings = Settings()

    assert settings.notification_types == {"welcome": {"title": "Hi {name}"}, "info": "{text}"}
    assert settings.notification_empty_text == "Nothing here."
    assert settings.notification_timestamp_format == "%m/%d/%Y %H:%M:%S"


def test_settings_reject_blank_type_names() -> None:
    with pytest.raises(ValueError):
        Settings(notification_types={" ": "text"})


@pytest.mark.parametrize(
    ("name", "offset"),
    [
        ("UTC", timedelta(0)),
        ("UTC-05:00", timedelta(hours=-5)),
        ("GMT+0530", timedelta(hours=5, minutes=30)),
        ("Not/AZone", timedelta(0)),
    ],
)
def test_resolve_timezone_accepts_names_and_offsets(name: str, offset: timedelta) -> None:
    moment = datetime(2024, 6, 1, tzinfo=timezone.utc)

    assert moment.astimezone(resolve_timezone(name)).utcoffset() == offset


def test_formatter_applies_pattern_in_its_timezone() -> None:
    timestamp = int(datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc).timestamp())
    formatter = TimestampFormatter(resolve_timezone("UTC-05:00"))

    assert formatter.as_datetime(timestamp, "%m/%d/%Y %H:%M:%S") == "01/01/2024 22:04:05"
    assert timestamp_to_datetime(timestamp, timezone.utc).hour == 3


def test_notifications_table_is_configurable(monkeypatch: pytest.MonkeyPatch) -> None:
    assert NotificationModel.__table__.name == get_settings().notifications_table
    assert Settings().notifications_table == "notification"

    monkeypatch.setenv("NOTIFICATIONS_TABLE", "user_notifications")
    assert Settings().notifications_table == "user_notifications"

    with pytest.raises(ValueError):
        Settings(notifications_table="drop table;")


def test_reset_settings_cache_refreshes_timezone_and_formatter(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """A changed ``APP_TIMEZONE`` applies once the settings cache is reset."""

    moment = datetime(2024, 6, 1, tzinfo=timezone.utc)
    get_timestamp_formatter()
    monkeypatch.setenv("APP_TIMEZONE", "UTC+02:00")
    try:
        reset_settings_cache()

        assert moment.astimezone(get_app_timezone()).utcoffset() == timedelta(hours=2)
        assert get_timestamp_formatter().as_datetime(int(moment.timestamp()), "%H:%M") == "02:00"
    finally:
        monkeypatch.undo()
        reset_settings_cache()

    assert moment.astimezone(get_app_timezone()).utcoffset() == timedelta(0)
