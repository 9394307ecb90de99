"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.logging import RichHandler

from rmdirctl import __version__
from rmdirctl.cli.commands import config, remove
from rmdirctl.utils.formatting import err_console

# Create main Typer app
app = typer.Typer(
    name="rmdirctl",
    help="Recursively remove directories, idempotently.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"rmdirctl version {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    """Route rmdirctl log records to stderr through Rich."""
    package_logger = logging.getLogger("rmdirctl")
    package_logger.handlers.clear()
    package_logger.addHandler(RichHandler(console=err_console, show_path=False))
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


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
            help="Enable debug logging.",
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
            help="Path to config file.",
            dir_okay=False,
        ),
    ] = None,
) -> None:
    """rmdirctl - Recursively remove directories, idempotently.

    Paths that are already gone count as removed; paths that exist but
    are not writable are reported as permission denied.
    """
    _configure_logging(verbose)

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = config_path


# Register commands
app.command(name="rm")(remove.remove)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
