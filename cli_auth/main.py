"""CLI entry point for cli-auth."""

import sys

import click
import structlog
from pydantic import ValidationError

from cli_auth import __version__
from cli_auth.cli.auth import auth_group
from cli_auth.config.settings import CliAuthSettings
from cli_auth.utils.logging_config import VALID_LEVELS, configure_logging

log = structlog.get_logger(__name__)


@click.group()
@click.option("--tool", default=None, help="Tool identifier used to locate auth.json (env: CLI_AUTH_TOOL_NAME)")
@click.option(
    "--log-level",
    type=click.Choice(VALID_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (env: CLI_AUTH_LOG_LEVEL)",
)
@click.version_option(__version__, prog_name="cli-auth")
@click.pass_context
def cli(ctx: click.Context, tool: str | None, log_level: str | None) -> None:
    """cli-auth: inspect a command-line tool's stored credentials."""
    try:
        settings = CliAuthSettings()
    except ValidationError as e:
        click.echo(f"Error: Invalid configuration: {e}", err=True)
        sys.exit(1)

    configure_logging(log_level or settings.log_level, json_logs=settings.json_logs)

    tool_name = tool or settings.tool_name
    log.debug("cli_started", tool_name=tool_name)
    ctx.obj = {"settings": settings, "tool_name": tool_name}


cli.add_command(auth_group)


if __name__ == "__main__":
    cli()
