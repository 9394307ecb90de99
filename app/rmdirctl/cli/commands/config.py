"""Configuration commands.

Provides commands to locate, display and initialize the rmdirctl
configuration file.
"""

from typing import Annotated

import typer

from rmdirctl.cli.types import get_config_path_option, require_config
from rmdirctl.core.config import ConfigError, RemoverConfig, save_config
from rmdirctl.core.paths import get_config_path
from rmdirctl.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show and initialize configuration.",
    no_args_is_help=True,
)


@app.command()
def path(ctx: typer.Context) -> None:
    """Print the configuration file path."""
    console.print(str(get_config_path_option(ctx) or get_config_path()))


@app.command()
def show(ctx: typer.Context) -> None:
    """Show the effective configuration."""
    config = require_config(ctx)
    console.print(f"[header]max_workers[/] = {config.max_workers}")
    if config.protected_paths:
        console.print("[header]protected_paths[/]")
        for pattern in config.protected_paths:
            console.print(f"  - {pattern}")
    else:
        console.print("[header]protected_paths[/] = [muted](none)[/]")


@app.command()
def init(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file with default settings."""
    config_path = get_config_path_option(ctx) or get_config_path()

    if config_path.exists() and not force:
        print_error(f"Config already exists: {config_path}")
        print_info("Use --force to overwrite.")
        raise typer.Exit(code=1)

    try:
        saved = save_config(RemoverConfig(), config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")
