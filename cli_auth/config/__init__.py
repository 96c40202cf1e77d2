"""Configuration for the cli-auth command-line surface.

Example:
    >>> from cli_auth.config import CliAuthSettings
    >>> settings = CliAuthSettings()
    >>> settings.tool_name
    'com.vercel.cli'
"""

from cli_auth.config.settings import CliAuthSettings

__all__ = ["CliAuthSettings"]
