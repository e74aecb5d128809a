"""Recursive deletion engine.

Removes a file or the contents of a directory tree, one filesystem
operation at a time. Entries of a directory are processed strictly in
listing order; the first error aborts the traversal and propagates to
the caller, leaving any remaining entries untouched. Nothing is retried
or rolled back.

By default directory nodes are emptied but left in place. With
``prune=True`` each directory is also removed once its children are
gone, which gives the usual ``rm -rf`` result.
"""

import logging
import os

from rmrf.deletion.backend import DEFAULT_BACKEND, FilesystemBackend
from rmrf.deletion.classifier import classify
from rmrf.deletion.errors import error_from_os_error
from rmrf.deletion.lister import list_entries
from rmrf.deletion.models import DeletionOutcome, DeletionStats, PathKind

logger = logging.getLogger(__name__)


class _Deletion:
    """State of one top-level deletion call.

    Attributes:
        _fs: Filesystem backend used for every operation.
        _prune: Whether emptied directories are removed as well.
        _stats: Counters owned by this call.
    """

    def __init__(self, fs: FilesystemBackend, prune: bool, stats: DeletionStats) -> None:
        self._fs = fs
        self._prune = prune
        self._stats = stats

    async def remove(self, path: str) -> None:
        kind = await classify(path, self._fs)

        if kind is PathKind.DIRECTORY:
            await self._remove_directory(path)
        else:
            await self._unlink(path)

    async def _remove_directory(self, path: str) -> None:
        pending = await list_entries(path, self._fs)

        # An error raised by a child leaves the rest of pending untouched
        for entry in pending:
            await self.remove(os.path.join(path, entry))

        self._stats.directories_emptied += 1

        if self._prune:
            try:
                await self._fs.rmdir(path)
            except OSError as e:
                raise error_from_os_error(path, e) from e
            self._stats.directories_removed += 1
            logger.debug("Removed directory %s", path)

    async def _unlink(self, path: str) -> None:
        try:
            await self._fs.unlink(path)
        except OSError as e:
            raise error_from_os_error(path, e) from e
        self._stats.files_removed += 1
        logger.debug("Unlinked %s", path)


async def delete(
    path: str | os.PathLike[str],
    *,
    prune: bool = False,
    backend: FilesystemBackend | None = None,
    stats: DeletionStats | None = None,
) -> DeletionOutcome:
    """Recursively delete a file or the contents of a directory tree.

    Args:
        path: File or directory to delete.
        prune: If True, also remove each directory after emptying it.
        backend: Filesystem backend to use. Defaults to the OS backend.
        stats: Counters to accumulate into. A fresh instance is used if
            None; pass your own to inspect progress after a failure.

    Returns:
        DeletionOutcome describing the completed call.

    Raises:
        PathNotFoundError: If a node does not exist when it is reached.
        PathPermissionError: If the operating system refuses an operation.
        DeletionIOError: For any other operating system failure.
    """
    path_str = os.fspath(path)
    call_stats = stats if stats is not None else DeletionStats()

    await _Deletion(backend or DEFAULT_BACKEND, prune, call_stats).remove(path_str)

    logger.info(
        "Deleted %s (%d file(s), %d directory node(s))",
        path_str,
        call_stats.files_removed,
        call_stats.directories_removed,
    )
    return DeletionOutcome(path=path_str, stats=call_stats)
