"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture
def nested_tree(tmp_path: Path) -> Path:
    """A directory with files and subdirectories several levels deep."""
    root = tmp_path / "tree"
    (root / "a" / "b" / "c").mkdir(parents=True)
    (root / "empty").mkdir()
    (root / "top.txt").write_text("top")
    (root / "a" / "one.txt").write_text("one")
    (root / "a" / "b" / "two.txt").write_text("two")
    (root / "a" / "b" / "c" / "three.txt").write_text("three")
    return root


@pytest.fixture
def readonly_dir(tmp_path: Path) -> Iterator[Path]:
    """A non-writable directory containing one file.

    Write permission is restored on teardown so tmp_path can be cleaned.
    """
    target = tmp_path / "locked"
    target.mkdir()
    (target / "keep.txt").write_text("content")
    target.chmod(0o555)
    try:
        yield target
    finally:
        target.chmod(0o755)


@pytest.fixture
def isolated_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at an empty temporary directory."""
    config_home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home

