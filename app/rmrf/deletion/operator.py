"""Batch deletion operator.

Runs one independent recursive deletion per input path and reports a
result record for each, with protected path checking up front. A failure
on one path never stops the remaining paths.
"""

import asyncio
import logging
from collections.abc import Iterable

from rmrf.deletion.backend import FilesystemBackend
from rmrf.deletion.engine import delete
from rmrf.deletion.errors import DeletionError
from rmrf.deletion.models import DeletionResult, DeletionStats
from rmrf.deletion.protected import is_protected_path

logger = logging.getLogger(__name__)


class DeletionOperator:
    """Deletes filesystem paths recursively, one top-level call per path.

    Attributes:
        _prune: If True, directory nodes are removed after being emptied.
        _protected_patterns: User patterns checked on top of the built-in list.
        _backend: Filesystem backend handed to the engine (None for the OS).
    """

    def __init__(
        self,
        *,
        prune: bool = False,
        protected_patterns: Iterable[str] = (),
        backend: FilesystemBackend | None = None,
    ) -> None:
        """Initialize the DeletionOperator.

        Args:
            prune: If True, remove directories as well as their contents.
            protected_patterns: Extra glob patterns that must never be deleted.
            backend: Filesystem backend override, mainly for tests.
        """
        self._prune = prune
        self._protected_patterns = tuple(protected_patterns)
        self._backend = backend

    @property
    def prune(self) -> bool:
        """Check if emptied directories are removed."""
        return self._prune

    def delete(self, paths: list[str]) -> list[DeletionResult]:
        """Delete multiple filesystem paths and return results.

        Each path is checked against protected patterns before deletion.
        Protected paths are skipped with an error result. The others are
        deleted in order, each with its own event loop run.

        Args:
            paths: Filesystem paths to delete.

        Returns:
            List of DeletionResult, one per input path.
        """
        results: list[DeletionResult] = []

        for path in paths:
            if self._is_protected(path):
                logger.warning("Refusing to delete protected path %s", path)
                results.append(
                    DeletionResult(
                        path=path,
                        success=False,
                        error=f"Protected path cannot be deleted: {path}",
                        error_kind="protected",
                    )
                )
                continue

            results.append(asyncio.run(self.delete_one(path)))

        return results

    async def delete_one(self, path: str) -> DeletionResult:
        """Delete a single path without the protected path check.

        Args:
            path: Filesystem path to delete.

        Returns:
            DeletionResult indicating success or the first failure.
        """
        stats = DeletionStats()

        try:
            await delete(path, prune=self._prune, backend=self._backend, stats=stats)
        except DeletionError as e:
            logger.info("Deletion of %s stopped: %s", path, e)
            return DeletionResult(
                path=path,
                success=False,
                error=str(e),
                error_kind=e.kind,
                files_removed=stats.files_removed,
                directories_removed=stats.directories_removed,
            )

        return DeletionResult(
            path=path,
            success=True,
            files_removed=stats.files_removed,
            directories_removed=stats.directories_removed,
        )

    def _is_protected(self, path: str) -> bool:
        """Check if a path is protected from deletion.

        Args:
            path: Filesystem path to check.

        Returns:
            True if the path matches a built-in or configured pattern.
        """
        return is_protected_path(path, self._protected_patterns)
