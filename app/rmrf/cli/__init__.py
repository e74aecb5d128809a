"""CLI package for rmrf.

This package contains the Typer application and all subcommands.
"""

from rmrf.cli.main import app

__all__ = ["app"]
