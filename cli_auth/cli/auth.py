"""CLI commands for inspecting the stored credentials.

This module provides the ``cli-auth auth`` command group. It never logs in or
out; it only shows where ``auth.json`` lives and what it currently holds.

Commands:
    - path: Print the resolved credentials file path
    - show: Load and summarize the stored credentials (token masked)

Example:
    Inspect the credentials::

        $ cli-auth auth path
        $ cli-auth auth path --candidates
        $ cli-auth --tool com.vercel.cli auth show
"""

import sys
from datetime import datetime, timezone

import click

from cli_auth.credentials import (
    Credentials,
    CredentialsError,
    CredentialsStore,
    CredentialsValidationError,
    candidate_config_dirs,
    is_directory,
)
from cli_auth.utils.logging_config import get_logger

log = get_logger(__name__)


@click.group(name="auth")
def auth_group():
    """Inspect the locally stored authentication state.

    Examples:

        # Show where auth.json is read from and written to
        cli-auth auth path

        # Summarize the stored credentials
        cli-auth auth show
    """
    pass


@auth_group.command(name="path")
@click.option("--candidates", is_flag=True, help="List every candidate directory in priority order")
@click.pass_context
def show_path(ctx: click.Context, candidates: bool):
    """Print the path of the credentials file."""
    tool_name = ctx.obj["tool_name"]
    store = CredentialsStore(tool_name)

    if candidates:
        for candidate in candidate_config_dirs(tool_name):
            marker = click.style("exists", fg="green") if is_directory(candidate) else "missing"
            click.echo(f"{candidate} ({marker})")
        click.echo()

    click.echo(str(store.config_path))


@auth_group.command(name="show")
@click.option("--show-token", is_flag=True, help="Show full token value (default: masked)")
@click.pass_context
def show_credentials(ctx: click.Context, show_token: bool):
    """Load and summarize the stored credentials."""
    store = CredentialsStore(ctx.obj["tool_name"])

    try:
        credentials = store.get()
    except CredentialsError as e:
        log.debug("credentials_load_failed", path=str(store.config_path), exc_info=True)
        click.echo(click.style(f"Error: {e.message}", fg="red"), err=True)
        if isinstance(e, CredentialsValidationError):
            for violation in e.violations:
                click.echo(f"  - {violation}", err=True)
        if e.suggestion:
            click.echo(click.style(f"Suggestion: {e.suggestion}", fg="yellow"), err=True)
        sys.exit(1)

    click.echo(f"Credentials: {store.config_path}")
    if credentials.token is None:
        click.echo("Token: (none)")
    elif show_token:
        click.echo(f"Token: {credentials.token}")
    else:
        click.echo(f"Token: {_mask(credentials.token)}")
    click.echo(f"Refresh token: {'present' if credentials.refresh_token else 'absent'}")
    click.echo(f"Expires: {_describe_expiry(credentials)}")


# Helper functions


def _mask(value: str) -> str:
    """Mask all but the first and last four characters of ``value``.

    Example:
        >>> _mask("abcd1234efgh")
        'abcd****efgh'
    """
    if len(value) > 8:
        return value[:4] + "*" * (len(value) - 8) + value[-4:]
    return "*" * len(value)


def _describe_expiry(credentials: Credentials, now: float | None = None) -> str:
    """Render ``expiresAt`` as an ISO timestamp with its validity."""
    if credentials.expires_at is None:
        return "unknown"

    try:
        when = datetime.fromtimestamp(credentials.expires_at, tz=timezone.utc).isoformat()
    except (OverflowError, OSError, ValueError):
        when = str(credentials.expires_at)

    status = "expired" if credentials.is_expired(now) else "valid"
    return f"{when} ({status})"
