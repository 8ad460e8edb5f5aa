"""Notification configuration settings.

Environment variables use NOTIFY_ prefix.
Example: NOTIFY_CONFIG_FILE=/etc/notify/notifications.yaml, NOTIFY_TEMPLATE_DIR=/etc/notify/templates
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .yaml_sources import create_notify_yaml_source


class NotifySettings(BaseSettings):
    """Where the notification document and its template files live.

    Environment variables use NOTIFY_ prefix.
    """

    config_file: Path = Field(
        default=Path("conf/notifications.yaml"),
        description="Path to the notification configuration document (amqp/languages/events).",
    )

    template_dir: Path | None = Field(
        default=None,
        description="Base directory for relative template_path entries. None resolves against the working directory.",
    )

    collect_all_errors: bool = Field(
        default=False,
        description="Report every configuration violation instead of stopping at the first.",
    )

    autoescape: bool = Field(
        default=True,
        description="HTML-escape values substituted into templates.",
    )

    model_config = SettingsConfigDict(
        env_prefix="NOTIFY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
        env_ignore_empty=True,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: Any,
        env_settings: Any,
        dotenv_settings: Any,
        file_secret_settings: Any,
    ) -> tuple[Any, ...]:
        """Customize settings source precedence: init > yaml > env > dotenv > secrets."""
        return (
            init_settings,
            create_notify_yaml_source(settings_cls),
            env_settings,
            dotenv_settings,
            file_secret_settings,
        )
