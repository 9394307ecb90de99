"""Guards against removing paths that must never be removed.

The filesystem root (and the empty string) is always refused. Callers
may add further glob patterns, e.g. from the user configuration.
Nothing in this module touches the filesystem.
"""

import fnmatch
import os
from collections.abc import Iterable
from pathlib import Path

from rmdirctl.remover.errors import InvalidArgumentError


def is_root_path(path: str) -> bool:
    """Check if a path denotes a filesystem root.

    Relative paths are made absolute against the working directory and
    normalised lexically, so ``//``, ``/tmp/..`` and ``..`` run from
    ``/tmp`` are all treated as ``/``. Symlinks are not resolved.

    Args:
        path: Filesystem path to check.

    Returns:
        True if the path is a filesystem root.
    """
    normalized = os.path.abspath(path)
    anchor = Path(normalized).anchor
    return bool(anchor) and normalized == anchor


def is_protected_path(path: str, patterns: Iterable[str] = ()) -> bool:
    """Check if a path matches any of the given protected glob patterns.

    Patterns starting with ~ are expanded to the user's home directory
    before matching. The path is made absolute and normalised, but
    symlinks are not resolved.

    Args:
        path: Filesystem path to check.
        patterns: Glob-style patterns (fnmatch).

    Returns:
        True if the path matches a protected pattern, False otherwise.
    """
    home = str(Path.home())
    normalized = os.path.abspath(path)

    for pattern in patterns:
        expanded = home + pattern[1:] if pattern.startswith("~") else pattern

        if fnmatch.fnmatch(normalized, os.path.normpath(expanded)):
            return True

    return False


def check_removable(path: str, patterns: Iterable[str] = ()) -> None:
    """Reject paths that must never be removed.

    Args:
        path: Filesystem path the caller wants removed.
        patterns: Extra protected glob patterns.

    Raises:
        InvalidArgumentError: If the path is empty, a filesystem root,
            or matches a protected pattern.
    """
    if path == "":
        raise InvalidArgumentError("will not remove an empty path", path)
    if is_root_path(path):
        raise InvalidArgumentError(f"will not remove root directory: {path}", path)
    if is_protected_path(path, patterns):
        raise InvalidArgumentError(f"will not remove protected path: {path}", path)
