"""Tests for the notify-service CLI commands.

Testing approach:
- Uses Click's CliRunner for command invocation
- Writes documents and templates to tmp_path
- Checks exit codes and the rendered output on stdout
"""

from __future__ import annotations

import json

import pytest

from notify_service.cli.main import cli


@pytest.mark.unit
class TestConfigValidate:
    """config validate."""

    def test_valid_document(self, cli_runner, document_file):
        result = cli_runner.invoke(cli, ["config", "validate", str(document_file)])

        assert result.exit_code == 0
        assert "2 languages, 2 events" in result.output

    def test_invalid_document(self, cli_runner, write_file):
        path = write_file("bad.yaml", "languages:\n  - code: en\n")

        result = cli_runner.invoke(cli, ["config", "validate", str(path)])

        assert result.exit_code == 1
        assert 'language "en" should be uppercased' in result.output

    def test_all_violations(self, cli_runner, write_file):
        path = write_file(
            "bad.yaml",
            "languages: [{code: en}, {code: de}]\nevents: []\n",
        )

        result = cli_runner.invoke(cli, ["config", "validate", "--all", str(path)])

        assert result.exit_code == 1
        assert '"en"' in result.output
        assert '"de"' in result.output

    def test_missing_file(self, cli_runner, tmp_path):
        result = cli_runner.invoke(cli, ["config", "validate", str(tmp_path / "missing.yaml")])

        assert result.exit_code == 1

    def test_default_path_from_settings(self, cli_runner, document_file, monkeypatch):
        monkeypatch.setenv("NOTIFY_CONFIG_FILE", str(document_file))

        result = cli_runner.invoke(cli, ["config", "validate"])

        assert result.exit_code == 0


@pytest.mark.unit
class TestConfigShow:
    """config show."""

    def test_json(self, cli_runner, document_file):
        result = cli_runner.invoke(cli, ["config", "show", "--format", "json", str(document_file)])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["amqp"] == {"exchange": "notifications", "tag": "notify-service"}
        assert data["events"][1]["templates"]["EN"]["template_path"] == "invoice.en.tmpl"

    def test_table(self, cli_runner, document_file):
        result = cli_runner.invoke(cli, ["config", "show", str(document_file)])

        assert result.exit_code == 0
        assert "[signup] key=user.signup" in result.output
        assert "invoice.fr.tmpl" in result.output


@pytest.mark.unit
class TestRender:
    """render."""

    def _invoke(self, cli_runner, document_file, *args):
        return cli_runner.invoke(
            cli,
            ["render", "--config", str(document_file), *args],
            env={"NOTIFY_TEMPLATE_DIR": str(document_file.parent)},
        )

    def test_inline_template(self, cli_runner, document_file):
        result = self._invoke(
            cli_runner,
            document_file,
            "--event", "signup", "--language", "fr", "--data", '{"Name": "Ada"}',
        )

        assert result.exit_code == 0
        assert result.stdout == "Bonjour Ada"

    def test_file_template(self, cli_runner, document_file):
        result = self._invoke(
            cli_runner,
            document_file,
            "--event", "invoice", "--language", "EN", "--data", '{"Name": "Ada", "Number": 7}',
        )

        assert result.exit_code == 0
        assert result.stdout == "Invoice 7 for Ada"

    def test_unknown_language(self, cli_runner, document_file):
        result = self._invoke(cli_runner, document_file, "--event", "signup", "--language", "de")

        assert result.exit_code == 1
        assert "not configured" in result.output

    def test_unknown_event(self, cli_runner, document_file):
        result = self._invoke(cli_runner, document_file, "--event", "nope", "--language", "en")

        assert result.exit_code == 1

    def test_missing_render_data(self, cli_runner, document_file):
        result = self._invoke(cli_runner, document_file, "--event", "signup", "--language", "en")

        assert result.exit_code == 1
        assert "Name" in result.output

    def test_invalid_json_data(self, cli_runner, document_file):
        result = self._invoke(
            cli_runner, document_file, "--event", "signup", "--language", "en", "--data", "{",
        )

        assert result.exit_code == 1
