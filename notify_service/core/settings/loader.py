"""LRU-cached settings loaders.

Settings are loaded and validated once, then cached for the lifetime of the
process.

Usage:
    from notify_service.core.settings import get_notify_settings

    settings = get_notify_settings()  # First call: loads and validates
    settings = get_notify_settings()  # Subsequent calls: returns cached instance

Testing:
    clear_all_caches()  # force reload after changing the environment
"""

from __future__ import annotations

from functools import lru_cache

from .logs import LoggingSettings
from .notify import NotifySettings


@lru_cache(maxsize=1)
def get_notify_settings() -> NotifySettings:
    """Get cached notification settings.

    Returns:
        Validated and frozen NotifySettings instance.
    """
    return NotifySettings()


@lru_cache(maxsize=1)
def get_logging_settings() -> LoggingSettings:
    """Get cached logging settings.

    Returns:
        Validated and frozen LoggingSettings instance.
    """
    return LoggingSettings()


def clear_all_caches() -> None:
    """Clear every cached settings instance."""
    get_notify_settings.cache_clear()
    get_logging_settings.cache_clear()
