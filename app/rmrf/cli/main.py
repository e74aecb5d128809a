"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from pathlib import Path
from typing import Annotated

import typer

from rmrf import __version__
from rmrf.cli.commands import config, delete
from rmrf.core.config import ConfigError, load_config
from rmrf.utils.formatting import print_error
from rmrf.utils.logging import configure_logging

# Create main Typer app
app = typer.Typer(
    name="rmrf",
    help="Recursively delete files and directory trees.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"rmrf version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log every filesystem operation.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Read settings from this file instead of ~/.config/rmrf/config.toml.",
            dir_okay=False,
        ),
    ] = None,
) -> None:
    """rmrf - Recursively delete files and directory trees.

    Works like a forced recursive delete. By default directories are
    emptied but left in place; pass --prune to remove them as well.
    """
    configure_logging(verbose=verbose, quiet=quiet)

    try:
        settings = load_config(config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["settings"] = settings
    ctx.obj["config_path"] = config_path


# Register commands
app.command("delete")(delete.delete_paths)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
