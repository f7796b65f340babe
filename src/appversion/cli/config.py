"""Configuration loading from appversion.toml or pyproject.toml."""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from ..exceptions import ConfigError
from ..version import Version

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "appversion.toml"
PYPROJECT_FILENAME = "pyproject.toml"


class AppVersionConfig(BaseModel):
    """Settings read from the ``[appversion]`` or ``[tool.appversion]`` table.

    Attributes:
        current: The project's current version, if configured.
    """

    model_config = ConfigDict(extra="forbid")

    current: Version | None = None


def find_config_file(directory: Path | None = None) -> Path | None:
    """Find the configuration file for a directory.

    ``appversion.toml`` takes precedence over ``pyproject.toml``. A
    ``pyproject.toml`` without a ``[tool.appversion]`` table is ignored.

    Args:
        directory: Directory to search. Defaults to the current directory.

    Returns:
        Path to the configuration file, or None if there is none.
    """
    directory = directory or Path.cwd()

    config_file = directory / CONFIG_FILENAME
    if config_file.is_file():
        return config_file

    pyproject = directory / PYPROJECT_FILENAME
    if pyproject.is_file() and _extract_table(_read_toml(pyproject)) is not None:
        return pyproject

    return None


def load_config(config_path: Path | None = None) -> AppVersionConfig:
    """Load configuration.

    Args:
        config_path: Explicit path to a TOML file. If omitted, the current
            directory is searched with find_config_file.

    Returns:
        The loaded configuration. Empty if no configuration file was found.

    Raises:
        ConfigError: If the file is missing, is not valid TOML, or holds
            invalid settings.
    """
    if config_path is None:
        config_path = find_config_file()
        if config_path is None:
            logger.debug("No configuration file found in %s", Path.cwd())
            return AppVersionConfig()
    elif not config_path.is_file():
        raise ConfigError(f"Config file not found: {config_path}")

    logger.debug("Loading configuration from %s", config_path)
    table = _extract_table(_read_toml(config_path)) or {}

    try:
        return AppVersionConfig.model_validate(table)
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}"
            for error in e.errors()
        )
        raise ConfigError(f"Invalid configuration in {config_path}: {details}") from e


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e


def _extract_table(data: dict[str, Any]) -> dict[str, Any] | None:
    """Get the appversion table from parsed TOML.

    Looks at ``[appversion]`` first, then ``[tool.appversion]``.
    """
    if "appversion" in data:
        return _as_table(data["appversion"], "[appversion]")
    tool = data.get("tool")
    if isinstance(tool, dict) and "appversion" in tool:
        return _as_table(tool["appversion"], "[tool.appversion]")
    return None


def _as_table(value: Any, name: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ConfigError(f"{name} must be a table, got {type(value).__name__}")
    return value
