"""Configuration management commands."""

import json
from pathlib import Path
import sys

import click
import yaml

from notify_service.cli.utils import error, info, section, success
from notify_service.core.schemas.config import Configuration, TemplateSource
from notify_service.core.settings import get_notify_settings
from notify_service.core.validators import Validator

config_path_argument = click.argument(
    "path",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path),
)


def resolve_config_path(path: Path | None) -> Path:
    """Return ``path`` or the configured default document."""
    return path if path is not None else get_notify_settings().config_file


def read_configuration(path: Path, collect_all: bool = False) -> Configuration:
    """Validate the document at ``path``, exiting with status 1 on failure."""
    try:
        with path.open("rb") as stream:
            result = Validator(collect_all=collect_all).validate(stream)
    except OSError as exc:
        error(f"Cannot read {path}: {exc}")
        sys.exit(1)

    if not result.ok or result.configuration is None:
        for violation in result.errors:
            error(f"{path}: {violation.detail}")
        sys.exit(1)

    return result.configuration


@click.group(name="config")
def config() -> None:
    """Notification configuration commands."""


@config.command()
@config_path_argument
@click.option(
    "--all",
    "collect_all",
    is_flag=True,
    help="Report every violation instead of stopping at the first",
)
def validate(path: Path | None, collect_all: bool) -> None:
    """Validate a notification configuration document."""
    path = resolve_config_path(path)
    collect_all = collect_all or get_notify_settings().collect_all_errors

    info(f"Validating {path}...")
    configuration = read_configuration(path, collect_all=collect_all)
    success(
        f"{path} is valid: {len(configuration.languages)} languages, "
        f"{len(configuration.events)} events",
    )


@config.command()
@config_path_argument
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml", "table"]),
    default="table",
    help="Output format",
)
def show(path: Path | None, output_format: str) -> None:
    """Display a validated notification configuration."""
    configuration = read_configuration(resolve_config_path(path))

    if output_format == "json":
        click.echo(json.dumps(configuration.model_dump(mode="json", by_alias=True), indent=2))
        return

    if output_format == "yaml":
        click.echo(yaml.safe_dump(configuration.model_dump(mode="json", by_alias=True), sort_keys=False))
        return

    section("AMQP")
    click.echo(f"  {'exchange':30} = {configuration.bus.exchange_name}")
    click.echo(f"  {'tag':30} = {configuration.bus.consumer_tag}")

    section("LANGUAGES")
    for language in configuration.languages:
        click.echo(f"  {language.code:30} = {language.name}")

    section("EVENTS")
    for event in configuration.events:
        click.echo(f"\n[{event.name}] key={event.routing_key}")
        for code, source in sorted(event.templates.items()):
            click.echo(f"  {code:30} = {_describe_source(source)}")


def _describe_source(source: TemplateSource) -> str:
    origin = "inline" if source.has_inline else source.path
    return f"{source.subject!r} ({origin})"
