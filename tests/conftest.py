"""Pytest configuration and shared fixtures.

Organization:
    - Document Fixtures: valid notification documents and file helpers
    - Settings Fixtures: isolated settings caches
    - CLI Fixtures: Click runner
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from pathlib import Path

from click.testing import CliRunner
import pytest

from notify_service.core.settings import clear_all_caches

# Keep CLI test output free of log records
os.environ.setdefault("LOG_CONSOLE_ENABLED", "false")
os.environ.setdefault("LOG_FILE_ENABLED", "false")


VALID_DOCUMENT = """\
amqp:
  exchange: notifications
  tag: notify-service
languages:
  - code: EN
    name: English
  - code: FR
    name: Français
events:
  - name: signup
    key: user.signup
    templates:
      EN:
        subject: Welcome
        template: "Hello {{.Name}}"
      FR:
        subject: Bienvenue
        template: "Bonjour {{.Name}}"
  - name: invoice
    key: billing.invoice
    templates:
      EN:
        subject: Your invoice
        template_path: invoice.en.tmpl
      FR:
        subject: Votre facture
        template_path: invoice.fr.tmpl
"""


# ============================================================================
# Document Fixtures
# ============================================================================


@pytest.fixture
def valid_document() -> str:
    """Return a fully consistent notification document.

    Returns:
        YAML text with two languages and two events.
    """
    return VALID_DOCUMENT


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write text files below ``tmp_path``.

    Example:
        def test_something(write_file):
            path = write_file("notifications.yaml", "amqp: {}")
    """

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def document_file(write_file: Callable[[str, str], Path], valid_document: str) -> Path:
    """Valid document plus its template files in a temporary directory."""
    write_file("invoice.en.tmpl", "Invoice {{ .Number }} for {{ .Name }}")
    write_file("invoice.fr.tmpl", "Facture {{ .Number }} pour {{ .Name }}")
    return write_file("notifications.yaml", valid_document)


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def _isolated_settings() -> Iterator[None]:
    """Drop cached settings around every test."""
    clear_all_caches()
    yield
    clear_all_caches()


# ============================================================================
# CLI Fixtures
# ============================================================================


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create Click CLI runner for testing commands."""
    return CliRunner()
