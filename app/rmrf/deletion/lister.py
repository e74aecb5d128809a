"""Directory listing."""

import os

from rmrf.deletion.backend import DEFAULT_BACKEND, FilesystemBackend
from rmrf.deletion.errors import error_from_os_error


async def list_entries(
    path: str | os.PathLike[str],
    backend: FilesystemBackend | None = None,
) -> tuple[str, ...]:
    """List the immediate entries of a directory.

    Entries are returned in whatever order the operating system yields
    them. No sorting is performed.

    Args:
        path: Directory to list.
        backend: Filesystem backend to query. Defaults to the OS backend.

    Returns:
        Immutable sequence of entry names relative to ``path``.

    Raises:
        PathNotFoundError: If the directory no longer exists.
        PathPermissionError: If the directory cannot be read.
        DeletionIOError: For any other failure, including ``path`` not
            being a directory.
    """
    fs = backend or DEFAULT_BACKEND
    path_str = os.fspath(path)

    try:
        names = await fs.listdir(path_str)
    except OSError as e:
        raise error_from_os_error(path_str, e) from e

    return tuple(names)
