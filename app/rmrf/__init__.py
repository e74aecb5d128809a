"""rmrf - recursive forced delete for files and directory trees."""

from rmrf.deletion import (
    DeletionError,
    DeletionOperator,
    DeletionOutcome,
    DeletionResult,
    PathKind,
    delete,
)

__version__ = "0.1.0"

__all__ = [
    "DeletionError",
    "DeletionOperator",
    "DeletionOutcome",
    "DeletionResult",
    "PathKind",
    "__version__",
    "delete",
]
