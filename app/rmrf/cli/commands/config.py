"""Configuration commands.

Shows the effective configuration and writes a default config file.
"""

from typing import Annotated

import typer
from rich.table import Table

from rmrf.cli.settings import get_config_file, get_settings
from rmrf.core.config import ConfigError, RmrfConfig, save_config
from rmrf.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or initialize the rmrf configuration.",
    no_args_is_help=True,
)


@app.command()
def show(ctx: typer.Context) -> None:
    """Show the effective configuration."""
    settings = get_settings(ctx)

    table = Table(
        title="rmrf Configuration",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Setting", no_wrap=True)
    table.add_column("Value")

    table.add_row("prune_directories", str(settings.prune_directories).lower())
    table.add_row("output_format", settings.output_format)
    table.add_row(
        "protected_patterns",
        ", ".join(settings.protected_patterns) or "[muted](none)[/muted]",
    )

    console.print(table)
    print_info(f"Config file: {get_config_file(ctx)}")


@app.command()
def init(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file with default settings."""
    config_path = get_config_file(ctx)

    if config_path.exists() and not force:
        print_info(f"Config file already exists: {config_path} (use --force to overwrite)")
        return

    try:
        saved = save_config(RmrfConfig(), config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")
