"""CLI commands for rmdirctl.

This package contains all subcommand implementations.
"""

from rmdirctl.cli.commands import config, remove

__all__ = ["config", "remove"]
