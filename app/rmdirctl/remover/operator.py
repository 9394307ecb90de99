"""Recursive directory removal.

Removes directory trees (and plain files or symlinks) so that the path is
guaranteed absent afterwards. A path that does not exist, or that vanishes
at any point during the procedure, counts as successfully removed.
"""

import errno
import logging
import os
import shutil
import stat
import time
from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor

from rmdirctl.core.config import RemoverConfig
from rmdirctl.remover.errors import (
    PermissionDeniedError,
    RemovalError,
    RemovalFailedError,
)
from rmdirctl.remover.models import RemovalOutcome, RemovalPhase, RemovalResult
from rmdirctl.remover.protected import check_removable

logger = logging.getLogger(__name__)

# Bounded retry budget for transient failures during the delete step
MAX_RETRIES = 10
RETRY_DELAY = 0.1

# Errors caused by concurrent activity inside the tree being removed
TRANSIENT_ERRNOS = frozenset({errno.EBUSY, errno.ENOTEMPTY, errno.EMFILE, errno.ENFILE})

PathArg = str | os.PathLike[str]


class DirectoryRemover:
    """Removes one or more paths recursively.

    Each path goes through the same steps: guard, existence check,
    permission check, delete. Paths are independent of each other and
    are removed concurrently when more than one is given.

    Attributes:
        _max_workers: Upper bound on paths removed in parallel.
        _protected_patterns: Extra glob patterns refused like the filesystem root.
        _dry_run: If True, run guards and checks but skip the delete.
    """

    def __init__(
        self,
        max_workers: int = 4,
        protected_patterns: Iterable[str] = (),
        dry_run: bool = False,
    ) -> None:
        """Initialize the DirectoryRemover.

        Args:
            max_workers: Maximum number of paths removed concurrently.
            protected_patterns: Extra glob patterns that must never be removed.
            dry_run: If True, report what would be removed without removing.
        """
        self._max_workers = max(1, max_workers)
        self._protected_patterns = tuple(protected_patterns)
        self._dry_run = dry_run

    @classmethod
    def from_config(cls, config: RemoverConfig, dry_run: bool = False) -> "DirectoryRemover":
        """Create a remover from the user configuration."""
        return cls(
            max_workers=config.max_workers,
            protected_patterns=config.protected_paths,
            dry_run=dry_run,
        )

    def remove(self, paths: PathArg | Iterable[PathArg]) -> list[RemovalOutcome]:
        """Remove one or more paths, failing if any of them fails.

        Every path is attempted even when another one fails. Afterwards
        the error of the first failed path (in input order) is raised.

        In dry-run mode the outcomes are hypothetical: REMOVED means the
        path would be removed, and it still exists afterwards.

        Args:
            paths: A single path or an iterable of paths.

        Returns:
            One RemovalOutcome per input path, in input order.

        Raises:
            RemovalError: The first failure among the given paths.
        """
        results = self.remove_all(paths)
        for result in results:
            if result.error is not None:
                raise result.error
        return [result.outcome for result in results]

    def remove_all(self, paths: PathArg | Iterable[PathArg]) -> list[RemovalResult]:
        """Remove one or more paths and return a result for each.

        Unlike remove(), failures are reported in the results instead of
        being raised.

        Args:
            paths: A single path or an iterable of paths.

        Returns:
            One RemovalResult per input path, in input order.
        """
        path_list = _as_path_list(paths)

        if len(path_list) <= 1 or self._max_workers == 1:
            return [self._remove_single(path) for path in path_list]

        workers = min(self._max_workers, len(path_list))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="rmdirctl") as executor:
            return list(executor.map(self._remove_single, path_list))

    def remove_path(self, path: PathArg) -> RemovalOutcome:
        """Remove a single path and everything beneath it.

        Args:
            path: Path to remove.

        Returns:
            REMOVED if the path was deleted, ALREADY_ABSENT if it did not
            exist or vanished during the procedure. In dry-run mode
            REMOVED only means the path would be deleted.

        Raises:
            InvalidArgumentError: If the path is empty, a filesystem root,
                or protected. The filesystem is not touched.
            PermissionDeniedError: If the path exists but is not writable.
            RemovalFailedError: If the path could not be removed otherwise.
        """
        path = os.fspath(path)
        check_removable(path, self._protected_patterns)

        try:
            st = os.lstat(path)
        except (FileNotFoundError, NotADirectoryError):
            logger.debug("Already absent: %s", path)
            return RemovalOutcome.ALREADY_ABSENT
        except PermissionError as e:
            raise PermissionDeniedError(
                f"unable to check existence of: {path}", path, RemovalPhase.EXISTENCE, e
            ) from e
        except OSError as e:
            raise RemovalFailedError(
                f"unable to check existence of: {path}", path, RemovalPhase.EXISTENCE, e
            ) from e

        # Permission bits of a symlink are never consulted, only the link is unlinked
        is_link = stat.S_ISLNK(st.st_mode)
        if not is_link and not os.access(path, os.W_OK):
            if not _lexists(path):
                logger.debug("Vanished during permission check: %s", path)
                return RemovalOutcome.ALREADY_ABSENT
            cause = PermissionError(errno.EACCES, os.strerror(errno.EACCES), path)
            raise PermissionDeniedError(
                f"unable to remove the non-writable directory: {path}",
                path,
                RemovalPhase.PERMISSION,
                cause,
            )

        if self._dry_run:
            logger.info("Dry-run: would remove %s", path)
            return RemovalOutcome.REMOVED

        try:
            _delete(path, is_dir=stat.S_ISDIR(st.st_mode))
        except FileNotFoundError:
            logger.debug("Vanished during delete: %s", path)
            return RemovalOutcome.ALREADY_ABSENT
        except OSError as e:
            raise RemovalFailedError(
                f"failed to remove the accessible and writable directory: {path}",
                path,
                RemovalPhase.DELETE,
                e,
            ) from e

        logger.debug("Removed %s", path)
        return RemovalOutcome.REMOVED

    def _remove_single(self, path: str) -> RemovalResult:
        """Remove a single path, capturing any RemovalError in the result."""
        try:
            outcome = self.remove_path(path)
        except RemovalError as e:
            return RemovalResult(path=path, outcome=e.outcome, error=e, dry_run=self._dry_run)
        return RemovalResult(path=path, outcome=outcome, dry_run=self._dry_run)


def rmdir(
    paths: PathArg | Iterable[PathArg],
    protected_patterns: Iterable[str] = (),
) -> None:
    """Remove one or more directory trees.

    Args:
        paths: A single path or an iterable of paths.
        protected_patterns: Extra glob patterns that must never be removed.

    Raises:
        RemovalError: The first failure among the given paths.
    """
    DirectoryRemover(protected_patterns=protected_patterns).remove(paths)


def _as_path_list(paths: PathArg | Iterable[PathArg]) -> list[str]:
    """Normalise a single path or an iterable of paths to a list of strings."""
    if isinstance(paths, (str, os.PathLike)):
        return [os.fspath(paths)]
    return [os.fspath(p) for p in paths]


def _lexists(path: str) -> bool:
    """Check if a path exists without following symlinks.

    Errors other than "not found" count as existing, so that the caller
    reports them instead of treating the path as gone.
    """
    try:
        os.lstat(path)
    except (FileNotFoundError, NotADirectoryError):
        return False
    except OSError:
        return True
    return True


def _delete(path: str, is_dir: bool) -> None:
    """Delete a path, retrying transient failures.

    Directories (but not symlinks to directories) are removed with
    shutil.rmtree; entries beneath the path that disappear mid-walk are
    skipped. Files and symlinks are unlinked.

    Args:
        path: Path to delete.
        is_dir: Whether the path is a real directory.

    Raises:
        FileNotFoundError: If the path itself disappeared.
        OSError: If deletion failed after exhausting the retry budget.
    """
    attempt = 0
    while True:
        try:
            if is_dir:
                shutil.rmtree(path, onexc=_skip_vanished_children(path))
            else:
                os.unlink(path)
            return
        except OSError as e:
            if e.errno not in TRANSIENT_ERRNOS or attempt >= MAX_RETRIES:
                raise
            attempt += 1
            logger.debug("Retrying removal of %s (%d/%d): %s", path, attempt, MAX_RETRIES, e)
            time.sleep(RETRY_DELAY * attempt)


def _skip_vanished_children(
    root: str,
) -> Callable[[Callable[..., object], str, BaseException], None]:
    """Build an rmtree error handler that ignores entries removed concurrently."""

    def onexc(_func: Callable[..., object], p: str, exc: BaseException) -> None:
        if isinstance(exc, FileNotFoundError) and os.fspath(p) != root:
            return
        raise exc

    return onexc
