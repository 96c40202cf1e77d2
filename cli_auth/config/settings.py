"""
Configuration using pydantic-settings.

Values come from ``CLI_AUTH_*`` environment variables and can be overridden
by command-line options. The credentials store itself takes no configuration
beyond the tool name its caller passes in.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_TOOL_NAME = "com.vercel.cli"


class CliAuthSettings(BaseSettings):
    """Settings for the ``cli-auth`` command."""

    model_config = SettingsConfigDict(
        env_prefix="CLI_AUTH_",
        case_sensitive=False,
    )

    tool_name: str = Field(
        default=DEFAULT_TOOL_NAME,
        min_length=1,
        description="Identifier used to locate the tool's data directories",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Minimum log level",
    )
    json_logs: bool = Field(default=False, description="Render logs as JSON lines")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.upper()
        return value
