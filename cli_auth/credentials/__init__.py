"""Credentials file handling for the CLI's authentication state.

``auth.json`` lives in the first existing candidate directory (see
:mod:`cli_auth.credentials.paths`) and is read and written through
:class:`CredentialsStore`.

Example:
    >>> from cli_auth.credentials import CredentialsStore
    >>> store = CredentialsStore("com.vercel.cli")
    >>> store.config_path
    PosixPath('/home/user/.local/share/com.vercel.cli/auth.json')
"""

from cli_auth.exceptions import (
    CredentialsError,
    CredentialsIOError,
    CredentialsNotFoundError,
    CredentialsValidationError,
    MalformedCredentialsError,
)

from .models import Credentials, FieldViolation
from .paths import (
    CREDENTIALS_FILENAME,
    candidate_config_dirs,
    is_directory,
    platform_data_dirs,
    resolve_config_dir,
    resolve_config_path,
)
from .store import CredentialsStore

__all__ = [
    "CREDENTIALS_FILENAME",
    "Credentials",
    "CredentialsError",
    "CredentialsIOError",
    "CredentialsNotFoundError",
    "CredentialsStore",
    "CredentialsValidationError",
    "FieldViolation",
    "MalformedCredentialsError",
    "candidate_config_dirs",
    "is_directory",
    "platform_data_dirs",
    "resolve_config_dir",
    "resolve_config_path",
]
