"""Utility modules for rmrf.

This module exports commonly used utility functions.
"""

from rmrf.utils.formatting import (
    console,
    err_console,
    format_count,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from rmrf.utils.logging import configure_logging

__all__ = [
    "configure_logging",
    "console",
    "err_console",
    "format_count",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
