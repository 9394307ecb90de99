"""Removal error hierarchy.

Every error names the offending path and the phase that failed, and
chains the underlying OSError as ``__cause__``.
"""

from rmdirctl.remover.models import RemovalOutcome, RemovalPhase


class RemovalError(Exception):
    """Base exception for removal failures.

    Attributes:
        path: Path whose removal failed.
        phase: Phase of the removal procedure that failed.
        cause: Underlying low-level error, if any.
    """

    outcome = RemovalOutcome.FAILED

    def __init__(
        self,
        message: str,
        path: str,
        phase: RemovalPhase,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.path = path
        self.phase = phase
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        message = f"{super().__str__()} ({self.phase.value})"
        if self.cause is not None:
            return f"{message}: {self.cause}"
        return message


class InvalidArgumentError(RemovalError, ValueError):
    """Raised for an empty path or a protected path such as the filesystem root."""

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message, path, RemovalPhase.GUARD)


class PermissionDeniedError(RemovalError):
    """Raised when the path exists but cannot be written to."""

    outcome = RemovalOutcome.PERMISSION_DENIED


class RemovalFailedError(RemovalError):
    """Raised when the path exists and is writable but could not be removed."""
