"""cli-auth: local credentials storage for command-line tools."""

from cli_auth.credentials import Credentials, CredentialsStore

__version__ = "0.1.0"

__all__ = ["Credentials", "CredentialsStore", "__version__"]
