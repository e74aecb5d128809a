"""Delete command implementation.

Recursively removes each given path, one independent deletion per path,
and reports the outcome for every path.
"""

import json
from enum import Enum
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from rmrf.cli.settings import get_settings
from rmrf.deletion.models import DeletionResult
from rmrf.deletion.operator import DeletionOperator
from rmrf.utils.formatting import console, format_count, print_error, print_success


class OutputFormat(str, Enum):
    """Output format options for deletion results."""

    TABLE = "table"
    JSON = "json"


def delete_paths(
    ctx: typer.Context,
    paths: Annotated[
        list[str],
        typer.Argument(help="Files or directories to delete.", show_default=False),
    ],
    prune: Annotated[
        bool | None,
        typer.Option(
            "--prune/--keep-dirs",
            help="Remove directories after emptying them, or leave them in place.",
            show_default=False,
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat | None,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
            show_default=False,
        ),
    ] = None,
) -> None:
    """Recursively delete files and directory trees."""
    settings = get_settings(ctx)

    effective_prune = settings.prune_directories if prune is None else prune
    effective_format = output_format or OutputFormat(settings.output_format)

    operator = DeletionOperator(
        prune=effective_prune,
        protected_patterns=settings.protected_patterns,
    )
    results = operator.delete(paths)

    quiet = bool(ctx.obj and ctx.obj.get("quiet"))

    if effective_format == OutputFormat.JSON:
        _print_json(results)
    elif not quiet or any(r.failed for r in results):
        _print_results(results)

    if any(r.failed for r in results):
        raise typer.Exit(code=1)


# === Private helper functions ===


def _print_results(results: list[DeletionResult]) -> None:
    """Display deletion results as a Rich table followed by a summary."""
    table = Table(
        title="Deletion Results",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Status", width=8, justify="center")
    table.add_column("Path", no_wrap=True)
    table.add_column("Files", justify="right", width=8)
    table.add_column("Dirs", justify="right", width=8)
    table.add_column("Message")

    for result in results:
        if result.success:
            status = "[success]OK[/success]"
            path = f"[removed]{escape(result.path)}[/removed]"
            message = ""
        else:
            status = "[error]FAIL[/error]"
            path = escape(result.path)
            message = result.error or "Unknown error"

        table.add_row(
            status,
            path,
            str(result.files_removed),
            str(result.directories_removed),
            f"[muted]{escape(message)}[/muted]",
        )

    console.print(table)

    failed = [r for r in results if r.failed]
    removed = sum(r.files_removed for r in results)
    if not failed:
        print_success(
            f"Deleted {format_count(len(results), 'path')} "
            f"({format_count(removed, 'file')} removed)."
        )
    else:
        print_error(
            f"{format_count(len(failed), 'path')} failed, "
            f"{len(results) - len(failed)} succeeded."
        )


def _print_json(results: list[DeletionResult]) -> None:
    """Display deletion results as JSON."""
    data = [
        {
            "path": r.path,
            "success": r.success,
            "error": r.error,
            "error_kind": r.error_kind,
            "files_removed": r.files_removed,
            "directories_removed": r.directories_removed,
        }
        for r in results
    ]
    console.print_json(json.dumps(data))
