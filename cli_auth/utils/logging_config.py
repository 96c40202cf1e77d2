"""
Logging configuration using structlog for structured logging.

Logs go to stderr so command output on stdout stays clean. Token values are
redacted before rendering.
"""

import logging
import sys
from typing import Any

import structlog

VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
REDACTED = "***REDACTED***"
SENSITIVE_KEYS = ("token", "refresh_token", "refreshtoken", "secret", "password", "authorization")


def redact_sensitive_data(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Mask values whose key names look like credentials.

    Args:
        logger: The logger instance
        method_name: The name of the called method
        event_dict: The event dictionary to process

    Returns:
        The event dictionary with sensitive values replaced
    """
    for key, value in event_dict.items():
        if key == "event":
            continue
        if isinstance(value, str) and any(s in key.lower() for s in SENSITIVE_KEYS):
            event_dict[key] = REDACTED
    return event_dict


def configure_logging(log_level: str = "WARNING", json_logs: bool = False) -> None:
    """Configure structlog for the CLI.

    Args:
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Render JSON lines instead of console output

    Raises:
        ValueError: If an invalid logging level is provided
    """
    level = log_level.upper()
    if level not in VALID_LEVELS:
        raise ValueError(f"Invalid log level '{log_level}'. Must be one of: {', '.join(VALID_LEVELS)}")

    renderer: Any
    if json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            redact_sensitive_data,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> Any:
    """Get a logger instance.

    Args:
        name: Optional logger name (typically __name__ from calling module)

    Returns:
        A structlog logger instance

    Example:
        >>> log = get_logger(__name__)
        >>> log.info("credentials_written", path="/home/user/.local/share/now/auth.json")
    """
    return structlog.get_logger(name)
