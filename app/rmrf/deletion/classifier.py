"""Path classification.

Determines whether a path is a regular file, a directory or something
else. Symlinks are never followed: a link is classified as OTHER even
when it points at a directory, so the engine removes the link itself
and never traverses into its target.
"""

import os
import stat

from rmrf.deletion.backend import DEFAULT_BACKEND, FilesystemBackend
from rmrf.deletion.errors import error_from_os_error
from rmrf.deletion.models import PathKind


def kind_from_mode(mode: int) -> PathKind:
    """Map an ``st_mode`` value onto a PathKind.

    Args:
        mode: Mode bits as returned by lstat.

    Returns:
        FILE for regular files, DIRECTORY for directories, OTHER otherwise.
    """
    if stat.S_ISDIR(mode):
        return PathKind.DIRECTORY
    if stat.S_ISREG(mode):
        return PathKind.FILE
    return PathKind.OTHER


async def classify(
    path: str | os.PathLike[str],
    backend: FilesystemBackend | None = None,
) -> PathKind:
    """Classify a filesystem path.

    The result is computed fresh on every call and never cached.

    Args:
        path: Path to classify.
        backend: Filesystem backend to query. Defaults to the OS backend.

    Returns:
        PathKind of the node at ``path``.

    Raises:
        PathNotFoundError: If the path does not exist.
        PathPermissionError: If access to the path is refused.
        DeletionIOError: For any other operating system failure.
    """
    fs = backend or DEFAULT_BACKEND
    path_str = os.fspath(path)

    try:
        st = await fs.lstat(path_str)
    except OSError as e:
        raise error_from_os_error(path_str, e) from e

    return kind_from_mode(st.st_mode)
