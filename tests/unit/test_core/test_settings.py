"""Unit tests for Pydantic settings."""
from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from notify_service.core.settings import (
    LoggingSettings,
    NotifySettings,
    get_logging_settings,
    get_notify_settings,
)
from notify_service.core.settings.loader import clear_all_caches


@pytest.fixture
def config_dir(tmp_path, monkeypatch) -> Path:
    """Point the YAML settings sources at an empty directory."""
    monkeypatch.setenv("NOTIFY_CONFIG_DIR", str(tmp_path))
    monkeypatch.setenv("LOGGING_CONFIG_DIR", str(tmp_path))
    return tmp_path


@pytest.mark.unit
class TestNotifySettings:
    """Test suite for NotifySettings."""

    def test_defaults(self, config_dir, monkeypatch):
        for name in ("NOTIFY_CONFIG_FILE", "NOTIFY_TEMPLATE_DIR", "NOTIFY_COLLECT_ALL_ERRORS"):
            monkeypatch.delenv(name, raising=False)

        settings = NotifySettings()

        assert settings.config_file == Path("conf/notifications.yaml")
        assert settings.template_dir is None
        assert settings.collect_all_errors is False
        assert settings.autoescape is True

    def test_env_override(self, config_dir, monkeypatch):
        monkeypatch.setenv("NOTIFY_TEMPLATE_DIR", "/srv/templates")
        monkeypatch.setenv("NOTIFY_COLLECT_ALL_ERRORS", "true")

        settings = NotifySettings()

        assert settings.template_dir == Path("/srv/templates")
        assert settings.collect_all_errors is True

    def test_yaml_and_confd_sources(self, config_dir):
        (config_dir / "notify.yaml").write_text("config_file: base.yaml\nautoescape: false\n")
        (config_dir / "notify.d").mkdir()
        (config_dir / "notify.d" / "10-local.yaml").write_text("config_file: local.yaml\n")

        settings = NotifySettings()

        assert settings.config_file == Path("local.yaml")
        assert settings.autoescape is False

    def test_frozen(self, config_dir):
        settings = NotifySettings()

        with pytest.raises(ValidationError):
            settings.autoescape = False

    def test_cached_loader(self, config_dir):
        assert get_notify_settings() is get_notify_settings()

        first = get_notify_settings()
        clear_all_caches()

        assert get_notify_settings() is not first


@pytest.mark.unit
class TestLoggingSettings:
    """Test suite for LoggingSettings."""

    def test_level_is_normalized(self, config_dir):
        assert LoggingSettings(level="debug").level == "DEBUG"

    def test_json_alias(self, config_dir, monkeypatch):
        monkeypatch.setenv("LOG_JSON", "false")

        assert LoggingSettings().json_logs is False

    def test_file_path_only_when_enabled(self, config_dir):
        assert LoggingSettings(file_enabled=False).to_logging_kwargs()["file_path"] is None

        settings = LoggingSettings(file_enabled=True, file_path=Path("logs/out.jsonl"))
        assert settings.to_logging_kwargs()["file_path"] == str(Path("logs/out.jsonl"))

    def test_to_logging_kwargs(self, config_dir):
        kwargs = LoggingSettings(level="WARNING", service_name="svc").to_logging_kwargs()

        assert kwargs["log_level"] == "WARNING"
        assert kwargs["service_name"] == "svc"
        assert kwargs["file_path"] is None

    def test_cached_loader(self, config_dir):
        assert get_logging_settings() is get_logging_settings()
