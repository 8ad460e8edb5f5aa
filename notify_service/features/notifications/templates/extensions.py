"""Jinja2 extension accepting dot-prefixed field references.

Existing notification templates address the render data with a leading dot
(``{{.Name}}``, ``{{ .User.Email }}``, ``{{ . }}``). The extension rewrites
those references inside ``{{ }}`` and ``{% %}`` tags to plain Jinja2 names
before the template is parsed, so both styles render identically:

    "Hello {{.Name}}"   ->  "Hello {{Name}}"
    "{{ . }}"           ->  "{{ _root }}"

String literals and ``{% raw %}`` blocks are left as written. Only field
references are translated; control structures must use Jinja2 syntax.
"""

from __future__ import annotations

import re

from jinja2.ext import Extension

ROOT_NAME = "_root"

_TAG = re.compile(
    r"(?P<raw>\{%[-+]?\s*raw\s*[-+]?%\}.*?\{%[-+]?\s*endraw\s*[-+]?%\})"
    r"|(?P<open>\{\{-?|\{%-?)(?P<body>.*?)(?P<close>-?\}\}|-?%\})",
    re.DOTALL,
)
_REFERENCE = re.compile(
    r"""(?P<string>'(?:[^'\\]|\\.)*'|"(?:[^"\\]|\\.)*")"""
    r"""|(?P<field>(?<![\w)\]}'"])\.(?=[A-Za-z_]))"""
    r"""|(?P<dot>(?<![\w)\]}'".])\.(?![\w.]))""",
)


def _rewrite_reference(match: re.Match[str]) -> str:
    if match.group("field") is not None:
        return ""
    if match.group("dot") is not None:
        return ROOT_NAME
    return match.group("string")


def _rewrite_tag(match: re.Match[str]) -> str:
    if match.group("raw") is not None:
        return match.group("raw")
    body = _REFERENCE.sub(_rewrite_reference, match.group("body"))
    return f"{match.group('open')}{body}{match.group('close')}"


def rewrite_dot_fields(source: str) -> str:
    """Translate dot-prefixed references in every tag of ``source``."""
    return _TAG.sub(_rewrite_tag, source)


class DotFieldExtension(Extension):
    """Preprocess template source with ``rewrite_dot_fields``."""

    def preprocess(self, source: str, name: str | None, filename: str | None = None) -> str:
        return rewrite_dot_fields(source)
