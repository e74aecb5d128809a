"""CLI commands for rmrf.

This package contains all subcommand implementations.
"""

from rmrf.cli.commands import config, delete

__all__ = ["config", "delete"]
