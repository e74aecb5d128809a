"""Deletion error taxonomy.

Every failure the deletion engine reports is a DeletionError. Operating
system errors are mapped onto three kinds: the path does not exist, access
was refused, or some other I/O failure. The original OSError is kept as
the exception's ``__cause__``.
"""

import errno
import os


class DeletionError(Exception):
    """Base exception for recursive deletion failures.

    Attributes:
        path: Path of the node whose operation failed.
    """

    kind = "io_error"

    def __init__(self, path: str, message: str) -> None:
        super().__init__(message)
        self.path = path


class PathNotFoundError(DeletionError):
    """Raised when a path does not exist."""

    kind = "not_found"


class PathPermissionError(DeletionError):
    """Raised when the operating system refuses access to a path."""

    kind = "permission_denied"


class DeletionIOError(DeletionError):
    """Raised for any other operating-system-level failure."""

    kind = "io_error"


def error_from_os_error(path: str | os.PathLike[str], exc: OSError) -> DeletionError:
    """Map an OSError raised for ``path`` onto the deletion error taxonomy.

    Args:
        path: Path the failing operation was issued against.
        exc: The original operating system error.

    Returns:
        DeletionError subclass instance with ``__cause__`` set to ``exc``.
    """
    path_str = os.fspath(path)
    reason = exc.strerror or str(exc)

    error: DeletionError
    if isinstance(exc, FileNotFoundError):
        error = PathNotFoundError(path_str, f"No such file or directory: {path_str}")
    elif isinstance(exc, PermissionError) or exc.errno == errno.EPERM:
        error = PathPermissionError(path_str, f"Permission denied: {path_str}")
    else:
        error = DeletionIOError(path_str, f"{reason}: {path_str}")

    error.__cause__ = exc
    return error
