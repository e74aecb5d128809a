"""Deletion domain models.

This module defines the data structures shared by the classifier, the
recursive deletion engine and the batch operator: the kind of a
filesystem node, per-call counters, and the records handed back to
callers.
"""

from dataclasses import dataclass, field
from enum import Enum


class PathKind(str, Enum):
    """Kind of a filesystem node, as seen without following symlinks.

    Attributes:
        FILE: Regular file.
        DIRECTORY: Directory (never a symlink to one).
        OTHER: Symlink, FIFO, socket, device or any other special file.
    """

    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


@dataclass(slots=True)
class DeletionStats:
    """Counters for one top-level deletion call.

    Attributes:
        files_removed: Number of unlink operations performed.
        directories_emptied: Number of directories whose entries were all removed.
        directories_removed: Number of directory nodes removed (prune mode only).
    """

    files_removed: int = 0
    directories_emptied: int = 0
    directories_removed: int = 0


@dataclass(frozen=True, slots=True)
class DeletionOutcome:
    """Successful completion of a top-level deletion call.

    Attributes:
        path: Path the call was issued for.
        stats: Operation counters accumulated during the call.
    """

    path: str
    stats: DeletionStats = field(default_factory=DeletionStats)


@dataclass(frozen=True, slots=True)
class DeletionResult:
    """Result of deleting a single path through the DeletionOperator.

    Attributes:
        path: Path that was operated on, as given by the caller.
        success: Whether the whole tree was processed without error.
        error: Error message if the operation failed, None otherwise.
        error_kind: Machine-readable failure kind (not_found,
            permission_denied, io_error, protected), None on success.
        files_removed: Number of files unlinked before completion or failure.
        directories_removed: Number of directory nodes removed.
    """

    path: str
    success: bool
    error: str | None = None
    error_kind: str | None = None
    files_removed: int = 0
    directories_removed: int = 0

    def __post_init__(self) -> None:
        """Validate result consistency after initialization."""
        if self.success and self.error is not None:
            msg = "Successful result cannot carry an error"
            raise ValueError(msg)

    @property
    def failed(self) -> bool:
        """Check if the deletion failed."""
        return not self.success
