"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        default="sqlite:///./notifications.db",
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    notifications_table: str = Field(
        default="notification",
        description="Name of the table that stores notifications",
        pattern=r"^[A-Za-z_][A-Za-z0-9_]*$",
    )
    app_timezone: str = Field(
        default="UTC",
        description="IANA timezone name or UTC offset used to display timestamps",
    )
    notification_timestamp_format: str = Field(
        default="%m/%d/%Y %H:%M:%S",
        description="strftime pattern applied to the {timestamp} placeholder",
        min_length=1,
    )
    notification_list_glue: str = Field(
        default="\n",
        description="Separator placed between rendered notifications",
    )
    notification_empty_text: str = Field(
        default="No notifications available.",
        description="Text rendered in place of {emptyText} when the list is empty",
    )
    notification_types: dict[str, str | dict[str, str]] = Field(
        default_factory=dict,
        description="Display templates keyed by notification type",
    )

    @field_validator("notification_types")
    @classmethod
    def _validate_type_names(
        cls, value: dict[str, str | dict[str, str]]
    ) -> dict[str, str | dict[str, str]]:
        for name in value:
            if not name.strip():
                raise ValueError("NOTIFICATION_TYPES keys must be non-empty strings")
        return value


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache and the values derived from it.

    The application timezone and timestamp formatter are rebuilt on next use.
    The table name of the ORM model is fixed at import time.
    """

    from notification_center.infrastructure.formatting import get_timestamp_formatter
    from notification_center.utils.datetime import get_app_timezone

    get_settings.cache_clear()
    get_app_timezone.cache_clear()
    get_timestamp_formatter.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
