"""Pydantic models for the notification configuration document.

The document binds the service to a message exchange, declares the
supported languages and lists the events with one template per language:

    amqp:
      exchange: notifications
      tag: notify-service
    languages:
      - code: EN
        name: English
    events:
      - name: signup
        key: user.signup
        templates:
          EN:
            subject: Welcome
            template: "Hello {{ .Name }}"

Models are frozen once decoded. Cross-field invariants (upper-case codes,
template coverage, inline/path exclusivity) are enforced by
``notify_service.core.validators.config`` so that a structurally sound but
invalid document still decodes and yields a precise error.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from notify_service.core.exceptions import RenderLoadError


class DocumentModel(BaseModel):
    """Base for models decoded from the configuration document.

    Missing keys and explicit nulls decode to the field's zero value and
    unknown keys are ignored.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if data is None:
            return {}
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class BusBinding(DocumentModel):
    """Message exchange and consumer tag used by the publisher."""

    exchange_name: str = Field(default="", alias="exchange")
    consumer_tag: str = Field(default="", alias="tag")


class Language(DocumentModel):
    """A supported locale identified by an upper-case code."""

    code: str = ""
    name: str = ""

    @property
    def is_valid(self) -> bool:
        """Whether the code is non-blank and already upper-case."""
        return bool(self.code.strip()) and self.code == self.code.upper()


# ============================================================================
# Template bodies
# ============================================================================


@dataclass(frozen=True)
class InlineBody:
    """Template text given directly in the configuration."""

    name: str
    text: str

    def load(self, base_dir: Path | None = None) -> str:
        return self.text


@dataclass(frozen=True)
class FileBody:
    """Template text stored in a file referenced by the configuration."""

    name: str
    path: str

    def resolve_path(self, base_dir: Path | None = None) -> Path:
        """Resolve the template path, relative paths against ``base_dir``."""
        path = Path(self.path.strip())
        if base_dir is not None and not path.is_absolute():
            return Path(base_dir) / path
        return path

    def load(self, base_dir: Path | None = None) -> str:
        """Read the template file.

        Raises:
            RenderLoadError: If no path is configured or the file is unreadable.
        """
        if not self.path.strip():
            msg = f"no template source configured for {self.name!r}"
            raise RenderLoadError(msg, template_name=self.name)

        path = self.resolve_path(base_dir)
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            msg = f"Failed to load template {path}: {exc}"
            raise RenderLoadError(msg, template_name=self.name) from exc


TemplateBody = InlineBody | FileBody


class TemplateSource(DocumentModel):
    """One template record: a subject and either inline text or a file path."""

    subject: str = ""
    path: str = Field(default="", alias="template_path")
    inline: str = Field(default="", alias="template")

    @property
    def has_inline(self) -> bool:
        return bool(self.inline.strip())

    @property
    def has_path(self) -> bool:
        return bool(self.path.strip())

    @property
    def is_empty(self) -> bool:
        """True for the zero value returned on a template lookup miss."""
        return not (self.subject or self.path or self.inline)

    def resolve_body(self) -> TemplateBody:
        """Select the render source: inline text wins over the file path.

        The inline body is named after the subject, the file body after its
        path. Both names are used for diagnostics only.
        """
        if self.has_inline:
            return InlineBody(name=self.subject, text=self.inline)
        return FileBody(name=self.path or self.subject, path=self.path)


class Event(DocumentModel):
    """A named notification trigger with one template per language."""

    name: str = ""
    routing_key: str = Field(default="", alias="key")
    templates: dict[str, TemplateSource] = Field(default_factory=dict)

    def template_for(self, code: str) -> TemplateSource:
        """Return the template for ``code``, looked up upper-cased.

        A miss returns an empty ``TemplateSource``; callers gate on
        ``Configuration.contains_language`` first.
        """
        return self.templates.get(code.upper(), TemplateSource())


class Configuration(DocumentModel):
    """Root of the notification configuration document."""

    bus: BusBinding = Field(default_factory=BusBinding, alias="amqp")
    languages: tuple[Language, ...] = ()
    events: tuple[Event, ...] = ()

    def contains_language(self, code: str) -> bool:
        """Check whether ``code`` is a declared language, ignoring case."""
        wanted = code.casefold()
        return any(language.code.casefold() == wanted for language in self.languages)

    def find_event(self, name: str) -> Event | None:
        """Return the first event called ``name``, if any."""
        for event in self.events:
            if event.name == name:
                return event
        return None
