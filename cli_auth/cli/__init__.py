"""CLI commands for cli-auth.

The CLI is built using Click with the entry point ``cli-auth``.

Key Commands:
    auth (cli_auth.cli.auth):
        Command group for inspecting the stored credentials file.
"""

from cli_auth.cli.auth import auth_group

__all__ = ["auth_group"]
