"""Typed models for the notification configuration document."""

from __future__ import annotations

from notify_service.core.schemas.config import (
    BusBinding,
    Configuration,
    DocumentModel,
    Event,
    FileBody,
    InlineBody,
    Language,
    TemplateBody,
    TemplateSource,
)

__all__ = [
    "BusBinding",
    "Configuration",
    "DocumentModel",
    "Event",
    "FileBody",
    "InlineBody",
    "Language",
    "TemplateBody",
    "TemplateSource",
]
