"""Awaitable filesystem primitives.

The deletion engine never touches ``os`` directly. It goes through a
FilesystemBackend, whose methods run the blocking system call in a worker
thread so the event loop stays free for unrelated work. Subclasses can
wrap these methods to count operations or inject failures.
"""

import asyncio
import os


class FilesystemBackend:
    """Operating system filesystem primitives as coroutines.

    All methods raise the OSError produced by the underlying call
    unchanged; mapping onto the deletion error taxonomy is left to
    the callers.
    """

    async def lstat(self, path: str) -> os.stat_result:
        """Stat a path without following a trailing symlink."""
        return await asyncio.to_thread(os.lstat, path)

    async def listdir(self, path: str) -> list[str]:
        """List the names in a directory, in operating system order."""
        return await asyncio.to_thread(os.listdir, path)

    async def unlink(self, path: str) -> None:
        """Remove a file, symlink or special file."""
        await asyncio.to_thread(os.unlink, path)

    async def rmdir(self, path: str) -> None:
        """Remove an empty directory."""
        await asyncio.to_thread(os.rmdir, path)


# Shared stateless instance used when callers don't supply their own
DEFAULT_BACKEND = FilesystemBackend()
