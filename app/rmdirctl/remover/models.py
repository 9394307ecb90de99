"""Removal domain models.

Defines the terminal outcomes of a removal, the phases in which a
removal can fail, and the per-path result record used for reporting.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rmdirctl.remover.errors import RemovalError


class RemovalOutcome(str, Enum):
    """Terminal outcome of removing a single path.

    Attributes:
        REMOVED: The path existed and was deleted together with its contents.
        ALREADY_ABSENT: The path did not exist, or vanished before it could be deleted.
        PERMISSION_DENIED: The path exists but is not writable.
        FAILED: The path could not be removed for another reason.
    """

    REMOVED = "removed"
    ALREADY_ABSENT = "already_absent"
    PERMISSION_DENIED = "permission_denied"
    FAILED = "failed"

    @property
    def is_success(self) -> bool:
        """Check if the path is guaranteed absent after this outcome."""
        return self in (RemovalOutcome.REMOVED, RemovalOutcome.ALREADY_ABSENT)


class RemovalPhase(str, Enum):
    """Step of the removal procedure in which an error occurred.

    Attributes:
        GUARD: Argument validation, before any filesystem access.
        EXISTENCE: Probing whether the path exists.
        PERMISSION: Probing whether the path is writable.
        DELETE: The recursive delete itself.
    """

    GUARD = "guard"
    EXISTENCE = "existence check"
    PERMISSION = "permission check"
    DELETE = "delete"


@dataclass(frozen=True, slots=True)
class RemovalResult:
    """Result of removing a single path.

    Attributes:
        path: Path as given by the caller.
        outcome: Terminal outcome of the removal.
        error: The raised RemovalError when the outcome is not a success.
        dry_run: Whether the delete step was skipped.
    """

    path: str
    outcome: RemovalOutcome
    error: RemovalError | None = None
    dry_run: bool = False

    @property
    def success(self) -> bool:
        """Check if the path is absent (or would be, for a dry run)."""
        return self.outcome.is_success

    @property
    def phase(self) -> RemovalPhase | None:
        """Phase in which the removal failed, None on success."""
        return self.error.phase if self.error is not None else None
