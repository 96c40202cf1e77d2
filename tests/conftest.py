"""Pytest configuration and shared fixtures."""

from collections.abc import Callable
from pathlib import Path

import pytest
import structlog

from cli_auth.credentials import CredentialsStore

TOOL_NAME = "com.example.cli"


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo logging configuration done by CLI invocations."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def fake_home(tmp_path: Path) -> Path:
    """Temporary home directory."""
    home = tmp_path / "home"
    home.mkdir()
    return home


@pytest.fixture
def data_root(tmp_path: Path) -> Path:
    """Root under which the fake platform data directories live (not created)."""
    return tmp_path / "data"


@pytest.fixture
def fake_data_dirs(data_root: Path) -> Callable[[str], list[Path]]:
    """Platform data-directory provider rooted in a temporary directory.

    Mirrors the real provider: a user data directory first, then a site one.
    """

    def provider(app_name: str) -> list[Path]:
        return [data_root / "user" / app_name, data_root / "site" / app_name]

    return provider


@pytest.fixture
def store(fake_home: Path, fake_data_dirs: Callable[[str], list[Path]]) -> CredentialsStore:
    """CredentialsStore isolated from the real home and data directories."""
    return CredentialsStore(TOOL_NAME, home=fake_home, data_dirs=fake_data_dirs)
