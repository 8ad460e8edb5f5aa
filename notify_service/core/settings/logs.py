"""Logging settings consumed by ``configure_logging``."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .yaml_sources import create_logging_yaml_source

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings(BaseSettings):
    """Log level, output format and handlers for the CLI and library.

    Environment variables use the LOG_ prefix, e.g. ``LOG_LEVEL=debug``,
    ``LOG_JSON=false`` or ``LOG_FILE_ENABLED=true``. Values from
    ``conf/logging.yaml`` and ``conf/logging.d/*.yaml`` take precedence.
    """

    service_name: str = Field(default="notify-service", description="Static `service` field on JSON records")
    level: LogLevel = "INFO"
    json_logs: bool = Field(
        default=True,
        validation_alias=AliasChoices("json", "log_json", "json_logs"),
        description="Emit JSON Lines instead of plain text",
    )
    console_enabled: bool = Field(default=True, description="Write records to stderr")
    file_enabled: bool = False
    file_path: Path = Path("logs/notify-service.log.jsonl")
    file_max_bytes: int = Field(default=10 * 1024 * 1024, ge=1024)
    file_backup_count: int = Field(default=5, ge=0)

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        env_ignore_empty=True,
    )

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v

    def to_logging_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for ``configure_logging``; no file unless enabled."""
        return {
            "service_name": self.service_name,
            "log_level": self.level,
            "json_logs": self.json_logs,
            "console_enabled": self.console_enabled,
            "file_path": str(self.file_path) if self.file_enabled else None,
            "file_max_bytes": self.file_max_bytes,
            "file_backup_count": self.file_backup_count,
        }

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: Any,
        env_settings: Any,
        dotenv_settings: Any,
        file_secret_settings: Any,
    ) -> tuple[Any, ...]:
        return (
            init_settings,
            create_logging_yaml_source(settings_cls),
            env_settings,
            dotenv_settings,
            file_secret_settings,
        )
