"""Jinja2 template rendering for notifications."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any

from jinja2 import DictLoader, StrictUndefined, TemplateSyntaxError, UndefinedError
from jinja2.sandbox import SandboxedEnvironment
from pydantic import BaseModel

from notify_service.core.exceptions import (
    RenderExecError,
    RenderParseError,
)
from notify_service.features.notifications.templates.extensions import (
    ROOT_NAME,
    DotFieldExtension,
)
from notify_service.infra.logging import get_lazy_logger

if TYPE_CHECKING:
    from notify_service.core.schemas.config import Event, TemplateSource

INLINE_TEMPLATE_NAME = "<inline>"


class TemplateRenderer:
    """Jinja2 template renderer with security sandboxing.

    Every call builds its own sandboxed environment, so nothing is cached and
    a renderer can be shared between threads. Undefined variables are errors
    (``StrictUndefined``) rather than empty output.

    Example:
        renderer = TemplateRenderer(base_dir=Path("conf/templates"))
        body = renderer.render(event.template_for("en"), {"Name": "Ada"})
    """

    def __init__(self, base_dir: Path | None = None, autoescape: bool = True) -> None:
        """Initialize renderer.

        Args:
            base_dir: Directory relative template paths resolve against.
                None resolves them against the working directory.
            autoescape: HTML-escape substituted values.
        """
        self.base_dir = base_dir
        self.autoescape = autoescape
        self._logger = get_lazy_logger(__name__)

    def render(self, source: TemplateSource, data: Any = None) -> bytes:
        """Render a template source against ``data``.

        Inline text is used when it is not blank, otherwise the file at
        ``source.path`` is loaded.

        Args:
            source: Template record from the configuration.
            data: Render data. Mappings are used as the template context,
                other objects expose their public attributes.

        Returns:
            Rendered output encoded as UTF-8.

        Raises:
            RenderLoadError: If the template file cannot be read
            RenderParseError: If the template has invalid syntax
            RenderExecError: If rendering fails, e.g. a missing variable
        """
        body = source.resolve_body()
        name = body.name or INLINE_TEMPLATE_NAME
        text = body.load(self.base_dir)

        env = self._create_environment({name: text})

        try:
            template = env.get_template(name)
        except TemplateSyntaxError as exc:
            msg = f"Syntax error in template {name}: {exc}"
            raise RenderParseError(msg, template_name=name) from exc

        try:
            rendered = template.render(build_context(data))
        except UndefinedError as exc:
            msg = f"Missing variable in template {name}: {exc}"
            raise RenderExecError(msg, template_name=name) from exc
        except Exception as exc:
            msg = f"Failed to render template {name}: {exc}"
            raise RenderExecError(msg, template_name=name) from exc

        output = rendered.encode("utf-8")
        self._logger.debug(lambda: f"Rendered template {name} ({len(output)} bytes)")
        return output

    def render_event(self, event: Event, language: str, data: Any = None) -> bytes:
        """Render ``event``'s template for ``language``.

        Raises:
            RenderLoadError: If the event has no template for ``language``.
        """
        return self.render(event.template_for(language), data)

    def _create_environment(self, templates: dict[str, str]) -> SandboxedEnvironment:
        return SandboxedEnvironment(
            loader=DictLoader(templates),
            autoescape=self.autoescape,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            extensions=[DotFieldExtension],
        )


def build_context(data: Any) -> dict[str, Any]:
    """Build a template context from arbitrary render data.

    The data itself is always available as ``_root``.
    """
    if data is None:
        context: dict[str, Any] = {}
    elif isinstance(data, Mapping):
        context = {str(key): value for key, value in data.items()}
    elif isinstance(data, BaseModel):
        context = dict(data)
    elif dataclasses.is_dataclass(data) and not isinstance(data, type):
        context = {field.name: getattr(data, field.name) for field in dataclasses.fields(data)}
    elif hasattr(data, "__dict__"):
        context = {key: value for key, value in vars(data).items() if not key.startswith("_")}
    else:
        context = {}

    context.setdefault(ROOT_NAME, data)
    return context


def render(source: TemplateSource, data: Any = None, base_dir: Path | None = None) -> bytes:
    """Render ``source`` with a default renderer.

    See ``TemplateRenderer.render``.
    """
    return TemplateRenderer(base_dir=base_dir).render(source, data)
