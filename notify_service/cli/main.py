"""Main CLI entry point for notify-service commands."""

import click

from notify_service.cli.commands import config, render
from notify_service.infra.logging.config import setup_logging


@click.group()
@click.version_option(version="0.1.0", prog_name="notify-service")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """notify-service CLI - validate and render notification configuration.

    \b
    Commands:
      config     Validate or display the notification document
      render     Render an event template for a language

    \b
    Quick Start:
      notify-service config validate conf/notifications.yaml
      notify-service render --event signup --language en --data '{"Name": "Ada"}'
    """
    ctx.ensure_object(dict)
    setup_logging()


cli.add_command(config.config)
cli.add_command(render.render)


def main() -> None:
    """Main entry point for the CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
