"""Custom exception classes for configuration validation and rendering."""

from __future__ import annotations

from typing import Any


class NotifyServiceError(Exception):
    """Base notify-service exception.

    All custom exceptions should inherit from this class.

    Attributes:
        detail: Human-readable error message.
        type: Error type identifier (stable slug for callers and logs).
        extra: Additional context-specific information about the error.

    Example:
            raise NotifyServiceError(
            detail="Something went wrong",
            type="internal",
            extra={"event": "signup"},
        )
    """

    default_type = "about:blank"

    def __init__(
        self,
        detail: str,
        type: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        """Initialize notify-service exception.

        Args:
            detail: Human-readable error message.
            type: Error type identifier. Defaults to the class slug.
            extra: Additional context about the error.
        """
        self.detail = detail
        self.type = type or self.default_type
        self.extra = extra or {}
        super().__init__(detail)


# ============================================================================
# Configuration errors
# ============================================================================


class ConfigError(NotifyServiceError):
    """Raised when a configuration document is rejected."""

    default_type = "config-invalid"


class DecodeError(ConfigError):
    """Raised when the configuration document cannot be decoded.

    Covers malformed YAML, an empty document and structural mismatches
    against the configuration model.
    """

    default_type = "config-decode"


class LanguageFormatError(ConfigError):
    """Raised when a language code is empty or not upper-case.

    Example:
            raise LanguageFormatError(code="en")
    """

    default_type = "language-format"

    def __init__(self, code: str, detail: str | None = None) -> None:
        if detail is None:
            if code.strip():
                detail = f'language "{code}" should be uppercased'
            else:
                detail = "language code must not be empty"
        super().__init__(detail=detail, extra={"code": code})
        self.code = code


class TemplateConflictError(ConfigError):
    """Raised when a template specifies both inline text and a file path.

    The message is intentionally generic; ``event`` and ``language`` are
    available as attributes.
    """

    default_type = "template-conflict"

    def __init__(self, event: str = "", language: str = "") -> None:
        super().__init__(
            detail="template and template path both specified",
            extra={"event": event, "language": language},
        )
        self.event = event
        self.language = language


class TemplateKeyCaseError(ConfigError):
    """Raised when an event's template key is not upper-case."""

    default_type = "template-key-case"

    def __init__(self, event: str, language: str) -> None:
        super().__init__(
            detail=f'language "{language}" in event "{event}" should be uppercased',
            extra={"event": event, "language": language},
        )
        self.event = event
        self.language = language


class MissingLanguageTemplateError(ConfigError):
    """Raised when a declared language has no template in an event."""

    default_type = "missing-language-template"

    def __init__(self, event: str, language: str) -> None:
        super().__init__(
            detail=f'language "{language}" in event "{event}" is not defined',
            extra={"event": event, "language": language},
        )
        self.event = event
        self.language = language


# ============================================================================
# Rendering errors
# ============================================================================


class RenderError(NotifyServiceError):
    """Raised when template rendering fails."""

    default_type = "render-failed"

    def __init__(self, detail: str, template_name: str | None = None) -> None:
        """Initialize render error with details.

        Args:
            detail: Error description
            template_name: Name of template that failed
        """
        super().__init__(detail=detail, extra={"template_name": template_name})
        self.template_name = template_name


class RenderParseError(RenderError):
    """Raised when a template body has invalid syntax."""

    default_type = "render-parse"


class RenderLoadError(RenderError):
    """Raised when a template file cannot be read."""

    default_type = "render-load"


class RenderExecError(RenderError):
    """Raised when executing a parsed template fails."""

    default_type = "render-exec"
