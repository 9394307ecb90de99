"""Remover configuration and settings.

Configuration is stored in ~/.config/rmdirctl/config.toml and controls
which extra paths are guarded against removal and how many paths are
removed in parallel. The retry budget for transient failures is fixed
and deliberately absent from this model.
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from rmdirctl.core.paths import get_config_path

logger = logging.getLogger(__name__)


class RemoverConfig(BaseModel):
    """Configuration for DirectoryRemover.

    Attributes:
        protected_paths: Extra glob patterns that must never be removed.
            Patterns starting with ~ are expanded to the home directory.
        max_workers: Maximum number of paths removed concurrently.
    """

    model_config = ConfigDict(extra="forbid")

    protected_paths: Annotated[
        list[str],
        Field(description="Glob patterns that are refused like the filesystem root"),
    ] = []
    max_workers: Annotated[
        int,
        Field(ge=1, le=64, description="Parallel removals (1-64)"),
    ] = 4


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> RemoverConfig:
    """Load remover configuration from a TOML file.

    A missing file is not an error: defaults are returned.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated RemoverConfig object.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or doesn't match the schema.
    """
    config_path = path or get_config_path()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        logger.debug("No config file at %s, using defaults", config_path)
        return RemoverConfig()
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    try:
        return RemoverConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e


def save_config(config: RemoverConfig, path: Path | None = None) -> Path:
    """Save remover configuration to a TOML file.

    The file is written to a temporary sibling first and then moved into
    place with os.replace().

    Args:
        config: The RemoverConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(config.model_dump(), f)
        os.replace(tmp_path, config_path)
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config {config_path}: {e}") from e

    return config_path
