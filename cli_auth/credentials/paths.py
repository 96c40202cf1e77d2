"""Resolution of the directory holding ``auth.json``.

Candidate directories, highest priority first:

1. The tool's own platform data directories
2. ``~/.now``, the legacy dotfile directory
3. The platform data directories of the legacy ``now`` identifier

The first candidate that already exists wins. When none exist, the tool's
primary data directory is returned so a fresh install creates it there.
"""

import os
import stat
from collections.abc import Callable, Sequence
from pathlib import Path

import structlog
from platformdirs import PlatformDirs

log = structlog.get_logger(__name__)

CREDENTIALS_FILENAME = "auth.json"
LEGACY_APP_NAME = "now"
LEGACY_HOME_DIRNAME = ".now"

DataDirsProvider = Callable[[str], Sequence[Path]]


def platform_data_dirs(app_name: str) -> list[Path]:
    """Return the data directories for ``app_name`` on this platform.

    The user data directory comes first, followed by any site-wide data
    directories (``$XDG_DATA_DIRS`` on Linux).

    Args:
        app_name: Application identifier (e.g., 'com.vercel.cli')

    Returns:
        Non-empty list of candidate directories
    """
    dirs = PlatformDirs(appname=app_name, appauthor=False, multipath=True)
    candidates = [Path(dirs.user_data_dir)]
    candidates.extend(Path(p) for p in dirs.site_data_dir.split(os.pathsep) if p)
    return candidates


def is_directory(path: Path) -> bool:
    """Return whether ``path`` is an existing directory.

    Symlinks are not followed. Any error while inspecting the path means it
    is not a usable directory.
    """
    try:
        return stat.S_ISDIR(os.lstat(path).st_mode)
    except (OSError, ValueError):
        return False


def _home_dir() -> Path:
    # expanduser never raises; it returns "~" unchanged when no home is known
    return Path(os.path.expanduser("~"))


def candidate_config_dirs(
    tool_name: str,
    home: Path | None = None,
    data_dirs: DataDirsProvider | None = None,
) -> list[Path]:
    """Return every directory considered for ``auth.json``, in priority order."""
    home = home if home is not None else _home_dir()
    data_dirs = data_dirs or platform_data_dirs
    return [
        *data_dirs(tool_name),
        home / LEGACY_HOME_DIRNAME,
        *data_dirs(LEGACY_APP_NAME),
    ]


def resolve_config_dir(
    tool_name: str,
    *,
    home: Path | None = None,
    data_dirs: DataDirsProvider | None = None,
    is_dir: Callable[[Path], bool] = is_directory,
) -> Path:
    """Pick the directory that should hold the credentials file.

    Never creates directories and never raises for missing paths.

    Args:
        tool_name: Identifier passed to the platform data-directory convention
        home: Home directory (defaults to the current user's)
        data_dirs: Provider of platform data directories for an identifier
            (defaults to platform_data_dirs)
        is_dir: Existence check for a candidate directory

    Returns:
        The first existing candidate, or the tool's primary data directory

    Raises:
        ValueError: If ``data_dirs`` returns no directories for ``tool_name``
    """
    data_dirs = data_dirs or platform_data_dirs
    tool_dirs = list(data_dirs(tool_name))
    if not tool_dirs:
        raise ValueError(f"No data directories for {tool_name!r}; the provider must return at least one")
    primary = tool_dirs[0]
    for candidate in candidate_config_dirs(tool_name, home=home, data_dirs=data_dirs):
        if is_dir(candidate):
            log.debug("config_dir_resolved", path=str(candidate), existing=True)
            return candidate

    log.debug("config_dir_resolved", path=str(primary), existing=False)
    return primary


def resolve_config_path(
    tool_name: str,
    *,
    home: Path | None = None,
    data_dirs: DataDirsProvider | None = None,
    is_dir: Callable[[Path], bool] = is_directory,
) -> Path:
    """Return the full path of ``auth.json`` for ``tool_name``."""
    config_dir = resolve_config_dir(tool_name, home=home, data_dirs=data_dirs, is_dir=is_dir)
    return config_dir / CREDENTIALS_FILENAME
