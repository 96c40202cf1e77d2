"""Pydantic model for the persisted credentials document.

The document is a single flat JSON object. Keys use the camelCase names the
file has always used; unknown keys are rejected.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

NonEmptyStr = Annotated[str, Field(min_length=1)]


class Credentials(BaseModel):
    """Authentication state stored in ``auth.json``.

    Example:
        >>> creds = Credentials.model_validate({"token": "abc", "expiresAt": 1700000000})
        >>> creds.to_document()
        {'token': 'abc', 'expiresAt': 1700000000}
    """

    model_config = ConfigDict(extra="forbid", strict=True)

    token: str | None = Field(
        default=None,
        description="Access token obtained using the OAuth device authorization flow",
    )
    refresh_token: NonEmptyStr | None = Field(
        default=None,
        alias="refreshToken",
        description="Refresh token obtained using the OAuth device authorization flow",
    )
    expires_at: int | float | None = Field(
        default=None,
        alias="expiresAt",
        description="Absolute time (epoch seconds) when the token expires",
    )
    skip_write: bool | None = Field(
        default=None,
        alias="skipWrite",
        description="Skip persisting these credentials in CredentialsStore.update",
    )
    note: str | None = Field(default=None, alias="// Note")
    docs: str | None = Field(default=None, alias="// Docs")

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        """Reject explicit ``null``; optional keys are omitted, never null."""
        if value is None:
            raise ValueError("null is not allowed, omit the key instead")
        return value

    def to_document(self) -> dict[str, Any]:
        """Return the JSON mapping for this model, keeping only fields that were set."""
        return self.model_dump(by_alias=True, exclude_unset=True)

    def is_expired(self, now: float | None = None) -> bool:
        """Optimistically check whether the access token has expired.

        Credentials without ``expiresAt`` are never considered expired; the
        server is the final authority.

        Args:
            now: Current epoch seconds (defaults to ``time.time()``)
        """
        if self.expires_at is None:
            return False
        if now is None:
            now = time.time()
        return self.expires_at <= now


@dataclass(frozen=True)
class FieldViolation:
    """A single field that failed validation."""

    field: str
    message: str
    value: Any = None

    @classmethod
    def from_pydantic(cls, error: dict[str, Any]) -> FieldViolation:
        """Build a violation from one entry of ``ValidationError.errors()``.

        Only the top-level key is kept; union errors add the branch type
        (``expiresAt.int``) to the location.
        """
        loc = error.get("loc") or ()
        field = str(loc[0]) if loc else "<root>"
        return cls(field=field, message=error.get("msg", "invalid value"), value=error.get("input"))

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> list[FieldViolation]:
        """Collapse a pydantic error into one violation per offending key."""
        by_field: dict[str, FieldViolation] = {}
        for error in exc.errors():
            violation = cls.from_pydantic(error)
            seen = by_field.get(violation.field)
            if seen is None:
                by_field[violation.field] = violation
            elif violation.message not in seen.message:
                by_field[violation.field] = cls(
                    field=seen.field,
                    message=f"{seen.message} or {violation.message}",
                    value=seen.value,
                )
        return list(by_field.values())

    def __str__(self) -> str:
        return f"{self.field}: {self.message} (got {self.value!r})"
