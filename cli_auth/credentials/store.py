"""File-backed store for the CLI's authentication state.

Security Model:
- Plain JSON, no encryption at rest
- File permissions are 600 (user read/write only)
- No locking: concurrent writers race and the last write wins

Events are logged at debug level through structlog. Programs embedding the
store should configure structlog (see cli_auth.utils.logging_config);
unconfigured structlog prints every level to stdout.
"""

import contextlib
import json
import os
import tempfile
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import structlog
from pydantic import ValidationError

from cli_auth.exceptions import (
    CredentialsIOError,
    CredentialsNotFoundError,
    CredentialsValidationError,
    MalformedCredentialsError,
)

from .models import Credentials, FieldViolation
from .paths import DataDirsProvider, resolve_config_path

log = structlog.get_logger(__name__)

REAUTH_SUGGESTION = "Log in again to recreate the credentials file"


class CredentialsStore:
    """Read and write ``auth.json`` for a single tool.

    The file location is resolved once, when the store is created. Every
    ``get()`` re-reads the file, so changes made by other processes are seen.

    ``update()`` writes exactly the document it is given; it does not merge
    with what is already stored. Callers wanting a partial update should
    ``get()``, merge, then ``update()``.

    Example:
        >>> store = CredentialsStore("com.vercel.cli")
        >>> store.update({"token": "abc", "expiresAt": 1700000000})
        >>> store.get().token
        'abc'
    """

    def __init__(
        self,
        tool_name: str,
        *,
        home: Path | None = None,
        data_dirs: DataDirsProvider | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            tool_name: Identifier used to compute the platform data directories
            home: Home directory override (for the legacy ``~/.now`` lookup)
            data_dirs: Provider of platform data directories for an identifier
            (defaults to platform_data_dirs)
        """
        self.tool_name = tool_name
        self._config_path = resolve_config_path(
            tool_name,
            home=home,
            data_dirs=data_dirs,
        )

    @property
    def config_path(self) -> Path:
        """Absolute path of the credentials file."""
        return self._config_path

    def get(self) -> Credentials:
        """Load and validate the stored credentials.

        Returns:
            The validated credentials document

        Raises:
            CredentialsNotFoundError: If the file does not exist
            MalformedCredentialsError: If the file is not valid JSON
            CredentialsValidationError: If the document has the wrong shape
            CredentialsIOError: If the file exists but cannot be read
        """
        path = self._config_path
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise CredentialsNotFoundError(
                "Credentials file not found",
                path=path,
                suggestion="Log in to create it",
            ) from e
        except UnicodeDecodeError as e:
            raise MalformedCredentialsError(
                "Credentials file is not valid UTF-8 text", path=path, suggestion=REAUTH_SUGGESTION
            ) from e
        except OSError as e:
            raise CredentialsIOError(f"Failed to read credentials: {e}", path=path) from e

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise MalformedCredentialsError(
                f"Credentials file is not valid JSON: {e.msg} at line {e.lineno} column {e.colno}",
                path=path,
                suggestion=REAUTH_SUGGESTION,
            ) from e

        try:
            credentials = Credentials.model_validate(data)
        except ValidationError as e:
            violations = FieldViolation.from_validation_error(e)
            raise CredentialsValidationError(
                "Credentials file has an invalid format",
                violations=violations,
                path=path,
                suggestion=REAUTH_SUGGESTION,
            ) from e

        log.debug("credentials_read", path=str(path), fields=sorted(credentials.model_fields_set))
        return credentials

    def update(self, partial: Mapping[str, Any] | Credentials) -> None:
        """Persist ``partial`` as the whole credentials document.

        If ``skipWrite`` is set the call returns without validating or
        touching the filesystem. The outgoing document is not validated.

        Args:
            partial: Credentials mapping (wire keys) or a Credentials model

        Raises:
            CredentialsIOError: If the directory or file cannot be written
        """
        if isinstance(partial, Credentials):
            skip_write = partial.skip_write
            document = partial.to_document()
        else:
            skip_write = partial.get("skipWrite")
            document = dict(partial)

        if skip_write:
            log.debug("credentials_write_skipped", path=str(self._config_path))
            return

        try:
            payload = json.dumps(document, indent=2, ensure_ascii=False) + "\n"
        except (TypeError, ValueError) as e:
            raise CredentialsIOError(f"Credentials are not JSON serializable: {e}") from e

        path = self._config_path
        temp_file: Path | None = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)

            # mkstemp creates a uniquely named file with mode 0600
            fd, temp_name = tempfile.mkstemp(dir=path.parent, prefix=".auth.", suffix=".tmp")
            temp_file = Path(temp_name)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)

            os.replace(temp_file, path)
        except OSError as e:
            if temp_file is not None:
                with contextlib.suppress(OSError):
                    temp_file.unlink()
            raise CredentialsIOError(f"Failed to write credentials: {e}", path=path) from e

        log.debug("credentials_written", path=str(path), fields=sorted(document))
