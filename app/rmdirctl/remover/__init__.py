"""Recursive directory removal.

This module provides the DirectoryRemover, its outcome and result
models, the error hierarchy, and the guard against removing the
filesystem root or other protected paths.
"""

from rmdirctl.remover.errors import (
    InvalidArgumentError,
    PermissionDeniedError,
    RemovalError,
    RemovalFailedError,
)
from rmdirctl.remover.models import RemovalOutcome, RemovalPhase, RemovalResult
from rmdirctl.remover.operator import MAX_RETRIES, DirectoryRemover, rmdir
from rmdirctl.remover.protected import check_removable, is_protected_path, is_root_path

__all__ = [
    "MAX_RETRIES",
    "DirectoryRemover",
    "InvalidArgumentError",
    "PermissionDeniedError",
    "RemovalError",
    "RemovalFailedError",
    "RemovalOutcome",
    "RemovalPhase",
    "RemovalResult",
    "check_removable",
    "is_protected_path",
    "is_root_path",
    "rmdir",
]
