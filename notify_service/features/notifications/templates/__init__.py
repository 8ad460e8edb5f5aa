"""Template rendering infrastructure for notifications.

Resolves a configured template source (inline text or file) and renders it
with Jinja2 against caller-supplied data.
"""

from __future__ import annotations

from notify_service.features.notifications.templates.extensions import (
    DotFieldExtension,
    rewrite_dot_fields,
)
from notify_service.features.notifications.templates.renderer import (
    TemplateRenderer,
    build_context,
    render,
)

__all__ = [
    "DotFieldExtension",
    "TemplateRenderer",
    "build_context",
    "render",
    "rewrite_dot_fields",
]
