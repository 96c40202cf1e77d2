"""Custom exception hierarchy for cli-auth.

Exception Hierarchy:
    CliAuthError (base)
    └── CredentialsError
        ├── CredentialsNotFoundError
        ├── MalformedCredentialsError
        ├── CredentialsValidationError
        └── CredentialsIOError

Example Usage:
    >>> from cli_auth.exceptions import CredentialsNotFoundError
    >>> try:
    ...     credentials = store.get()
    ... except CredentialsNotFoundError:
    ...     credentials = run_device_flow()
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cli_auth.credentials.models import FieldViolation


class CliAuthError(Exception):
    """Base exception for all cli-auth errors.

    Attributes:
        message: Human-readable error description
    """

    def __init__(self, message: str) -> None:
        """Initialize exception.

        Args:
            message: Error message
        """
        self.message = message
        super().__init__(message)


class CredentialsError(CliAuthError):
    """Credentials file errors.

    Base class for every failure reading or writing ``auth.json``.

    Attributes:
        message: Human-readable error description
        path: The credentials file involved, if known
        suggestion: Optional suggestion for resolution
    """

    def __init__(
        self,
        message: str,
        path: Path | None = None,
        suggestion: str | None = None,
    ) -> None:
        """Initialize exception.

        Args:
            message: Error message
            path: The credentials file involved
            suggestion: Optional suggestion for resolution
        """
        self.path = path
        self.suggestion = suggestion

        full_message = message
        if path:
            full_message = f"{message} (path: {path})"
        if suggestion:
            full_message = f"{full_message}\nSuggestion: {suggestion}"

        super().__init__(full_message)
        # super() stored the decorated message
        self.message = message


class CredentialsNotFoundError(CredentialsError):
    """The credentials file does not exist."""

    pass


class MalformedCredentialsError(CredentialsError):
    """The credentials file is not valid JSON."""

    pass


class CredentialsValidationError(CredentialsError):
    """The credentials file parsed but does not match the expected shape.

    Attributes:
        violations: One entry per offending field
    """

    def __init__(
        self,
        message: str,
        violations: list[FieldViolation],
        path: Path | None = None,
        suggestion: str | None = None,
    ) -> None:
        """Initialize exception.

        Args:
            message: Error message
            violations: Field-level validation failures
            path: The credentials file involved
            suggestion: Optional suggestion for resolution
        """
        self.violations = violations
        details = "; ".join(str(v) for v in violations)
        if details:
            message = f"{message}: {details}"
        super().__init__(message, path=path, suggestion=suggestion)

    @property
    def fields(self) -> list[str]:
        """Names of the fields that failed validation."""
        return [v.field for v in self.violations]


class CredentialsIOError(CredentialsError):
    """Reading or writing the credentials file failed at the OS level."""

    pass
