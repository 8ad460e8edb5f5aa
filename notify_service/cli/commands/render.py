"""Template rendering commands."""

import json
from pathlib import Path
import sys

import click

from notify_service.cli.commands.config import read_configuration, resolve_config_path
from notify_service.cli.utils import error
from notify_service.core.exceptions import RenderError
from notify_service.core.settings import get_notify_settings
from notify_service.features.notifications.templates import TemplateRenderer


@click.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Notification configuration document (defaults to NOTIFY_CONFIG_FILE)",
)
@click.option("--event", "event_name", required=True, help="Event name")
@click.option("--language", required=True, help="Language code (case-insensitive)")
@click.option(
    "--data",
    default="{}",
    help="Render data as a JSON object",
)
def render(config_path: Path | None, event_name: str, language: str, data: str) -> None:
    """Render an event's template for a language to stdout."""
    settings = get_notify_settings()
    configuration = read_configuration(resolve_config_path(config_path))

    try:
        render_data = json.loads(data)
    except json.JSONDecodeError as exc:
        error(f"--data is not valid JSON: {exc}")
        sys.exit(1)

    if not configuration.contains_language(language):
        error(f'language "{language}" is not configured')
        sys.exit(1)

    event = configuration.find_event(event_name)
    if event is None:
        error(f'event "{event_name}" is not configured')
        sys.exit(1)

    renderer = TemplateRenderer(base_dir=settings.template_dir, autoescape=settings.autoescape)
    try:
        output = renderer.render_event(event, language, render_data)
    except RenderError as exc:
        error(exc.detail)
        sys.exit(1)

    click.echo(output, nl=False)
