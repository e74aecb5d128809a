"""Test doubles for the filesystem backend."""

import os

from rmrf.deletion.backend import FilesystemBackend


class RecordingBackend(FilesystemBackend):
    """Real filesystem backend that records calls and injects failures.

    Listings are sorted so tests can reason about "before" and "after"
    positions in a directory's entry order.

    Attributes:
        calls: (operation, path) tuples in the order they were issued.
        failures: Maps (operation, path) to the OSError to raise instead
            of performing the operation.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []
        self.failures: dict[tuple[str, str], OSError] = {}

    def fail(self, operation: str, path: str | os.PathLike[str], error: OSError) -> None:
        """Make ``operation`` on ``path`` raise ``error``."""
        self.failures[(operation, os.fspath(path))] = error

    def ops(self, operation: str) -> list[str]:
        """Return the paths ``operation`` was issued against."""
        return [path for op, path in self.calls if op == operation]

    def _record(self, operation: str, path: str) -> None:
        self.calls.append((operation, path))
        error = self.failures.get((operation, path))
        if error is not None:
            raise error

    async def lstat(self, path: str) -> os.stat_result:
        self._record("lstat", path)
        return await super().lstat(path)

    async def listdir(self, path: str) -> list[str]:
        self._record("listdir", path)
        return sorted(await super().listdir(path))

    async def unlink(self, path: str) -> None:
        self._record("unlink", path)
        await super().unlink(path)

    async def rmdir(self, path: str) -> None:
        self._record("rmdir", path)
        await super().rmdir(path)
