"""Shared types and utilities for CLI commands.

This module provides helpers used across multiple CLI command modules
to avoid code duplication.
"""

from pathlib import Path

import typer

from rmdirctl.core.config import ConfigError, RemoverConfig, load_config
from rmdirctl.utils.formatting import print_error


def get_config_path_option(ctx: typer.Context) -> Path | None:
    """Get the --config override stored by the main callback, if any."""
    obj = ctx.obj or {}
    return obj.get("config_path")


def require_config(ctx: typer.Context) -> RemoverConfig:
    """Load the remover configuration or exit with an error.

    Args:
        ctx: Typer context carrying the global --config option.

    Returns:
        Validated RemoverConfig (defaults if no config file exists).

    Raises:
        typer.Exit: If the config file is invalid or unreadable.
    """
    try:
        return load_config(get_config_path_option(ctx))
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
