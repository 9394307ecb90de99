"""Remove command for deleting directory trees.

Provides the `rmdirctl rm` command, which removes every given path
recursively and reports a result per path.
"""

from typing import Annotated

import typer
from rich.table import Table

from rmdirctl.cli.types import require_config
from rmdirctl.remover.models import RemovalOutcome, RemovalResult
from rmdirctl.remover.operator import DirectoryRemover
from rmdirctl.utils.formatting import (
    console,
    print_error,
    print_info,
    print_success,
    print_warning,
)


def remove(
    ctx: typer.Context,
    paths: Annotated[
        list[str],
        typer.Argument(help="Paths to remove recursively."),
    ],
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            "-n",
            help="Check every path without deleting anything.",
        ),
    ] = False,
) -> None:
    """Remove directories and everything beneath them.

    Paths that do not exist are treated as already removed. Exits with
    a non-zero code if any path could not be removed.

    Examples:
        rmdirctl rm build dist            # Remove two trees
        rmdirctl rm --dry-run build       # Check only
    """
    config = require_config(ctx)
    quiet = bool((ctx.obj or {}).get("quiet"))

    remover = DirectoryRemover.from_config(config, dry_run=dry_run)
    results = remover.remove_all(paths)

    if not quiet:
        _print_removal_results(results)

    for result in results:
        if result.error is not None:
            print_error(str(result.error))

    if any(not r.success for r in results):
        raise typer.Exit(code=1)


# === Private helper functions ===


def _print_removal_results(results: list[RemovalResult]) -> None:
    """Display removal results."""
    table = Table(
        title="Removal Results",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Path", style="bold")
    table.add_column("Status", width=18)
    table.add_column("Details", style="dim")

    for r in results:
        if not r.success:
            status = f"[error]{r.outcome.value.replace('_', ' ')}[/]"
            detail = r.phase.value if r.phase else ""
        elif r.dry_run and r.outcome == RemovalOutcome.REMOVED:
            status = "[info]dry-run[/]"
            detail = "Would remove"
        elif r.outcome == RemovalOutcome.REMOVED:
            status = "[removed]removed[/]"
            detail = ""
        else:
            status = "[absent]already absent[/]"
            detail = ""
        table.add_row(r.path, status, detail)

    console.print(table)

    success_count = sum(1 for r in results if r.success)
    fail_count = len(results) - success_count

    if fail_count:
        print_warning(f"{success_count} succeeded, {fail_count} failed")
    elif any(r.dry_run for r in results):
        print_info(f"Dry-run: {success_count} path(s) checked, nothing removed.")
    else:
        print_success(f"All {success_count} path(s) removed.")
