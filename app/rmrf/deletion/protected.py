"""Protected filesystem paths that should never be deleted.

This module defines path patterns for locations whose removal would
wreck the system or the user's home, and which the deletion operator
refuses outright. Users can extend the list through the
``protected_patterns`` setting in the config file.
"""

import fnmatch
import os
from collections.abc import Iterable
from pathlib import Path

from rmrf.core.paths import get_config_dir

# Protected filesystem path patterns (glob-style).
# Patterns starting with ~ are expanded to the user's home directory
# before matching. Patterns starting with / are matched as-is.
PROTECTED_PATH_PATTERNS: list[str] = [
    # Filesystem root and home
    "/",
    "~",
    "/home",
    "/root",
    # Top-level system directories
    "/bin",
    "/boot",
    "/dev",
    "/etc",
    "/lib",
    "/lib64",
    "/proc",
    "/sbin",
    "/sys",
    "/usr",
    "/var",
    # SSH and security
    "~/.ssh",
    "~/.ssh/*",
    "~/.gnupg",
    "~/.gnupg/*",
    # rmrf itself
    "~/.config/rmrf",
]


def _normalize(path: str | os.PathLike[str]) -> str:
    """Turn a path into an absolute, normalized string without resolving symlinks."""
    return os.path.normpath(os.path.abspath(os.path.expanduser(os.fspath(path))))


def is_protected_path(
    path: str | os.PathLike[str],
    extra_patterns: Iterable[str] = (),
) -> bool:
    """Check if a filesystem path is protected and should not be deleted.

    Relative paths are made absolute against the current directory first,
    so ``.`` inside the home directory is recognised as the home directory.
    The active config directory (which follows XDG_CONFIG_HOME) is always
    protected along with its contents.
    Patterns using ~ notation are expanded to the actual home directory
    before comparison using fnmatch for glob-style matching.

    Args:
        path: Filesystem path to check.
        extra_patterns: Additional user-configured patterns.

    Returns:
        True if the path matches any protected pattern, False otherwise.
    """
    if not os.fspath(path):
        # Names no node; the deletion itself reports it as not found
        return False

    home = str(Path.home())
    target = _normalize(path)
    config_dir = str(get_config_dir())

    for pattern in [*PROTECTED_PATH_PATTERNS, config_dir, f"{config_dir}/*", *extra_patterns]:
        expanded = home + pattern[1:] if pattern.startswith("~") else pattern

        if fnmatch.fnmatch(target, expanded):
            return True

    return False
