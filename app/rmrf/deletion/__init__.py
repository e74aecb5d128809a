"""Recursive deletion module.

This module provides path classification, directory listing, the
recursive deletion engine and the batch operator built on top of it.
"""

from rmrf.deletion.backend import FilesystemBackend
from rmrf.deletion.classifier import classify
from rmrf.deletion.engine import delete
from rmrf.deletion.errors import (
    DeletionError,
    DeletionIOError,
    PathNotFoundError,
    PathPermissionError,
    error_from_os_error,
)
from rmrf.deletion.lister import list_entries
from rmrf.deletion.models import DeletionOutcome, DeletionResult, DeletionStats, PathKind
from rmrf.deletion.operator import DeletionOperator
from rmrf.deletion.protected import PROTECTED_PATH_PATTERNS, is_protected_path

__all__ = [
    "PROTECTED_PATH_PATTERNS",
    "DeletionError",
    "DeletionIOError",
    "DeletionOperator",
    "DeletionOutcome",
    "DeletionResult",
    "DeletionStats",
    "FilesystemBackend",
    "PathKind",
    "PathNotFoundError",
    "PathPermissionError",
    "classify",
    "delete",
    "error_from_os_error",
    "is_protected_path",
    "list_entries",
]
