"""Config file I/O operations.

This module provides functions for loading and saving config.toml with
validation through the Pydantic models in emplace.models.config.
"""

import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any

import tomli_w
from pydantic import ValidationError

from emplace.core.paths import get_config_path
from emplace.models.config import Config


class ConfigError(Exception):
    """Base exception for config-related errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


class ConfigValidationError(ConfigError):
    """Raised when the config content is invalid."""


def load_config(path: Path | None = None) -> Config:
    """Load and validate the config from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated Config object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigValidationError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return Config.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid config content: {e}") from e


def save_config(config: Config, path: Path | None = None) -> Path:
    """Save the config to a TOML file.

    The file is written to a temporary file in the same directory first and
    then moved into place with os.replace().

    Args:
        config: The Config object to save.
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
            tomli_w.dump(_config_to_dict(config), f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def config_exists(path: Path | None = None) -> bool:
    """Check if a config file exists.

    Args:
        path: Path to check. If None, uses the default config path.
    """
    return (path or get_config_path()).exists()


def _config_to_dict(config: Config) -> dict[str, Any]:
    """Convert a Config to a dictionary suitable for TOML serialization."""
    return {
        "repo_directory": str(config.repo_directory),
        "repo": {
            "url": config.repo.url,
            "branch": config.repo.branch,
            "file": config.repo.file,
        },
    }


def require_config(config_path: Path | None = None) -> Config:
    """Load the config, asking for the repository URL on first use.

    This is a convenience wrapper around load_config() for CLI commands.
    A missing config starts the first-run setup, any other problem prints
    a user-friendly message and exits.

    Args:
        config_path: Optional custom config path.

    Returns:
        Loaded or newly created Config.

    Raises:
        typer.Exit: If the config cannot be loaded or saved.
    """
    import typer

    from emplace.models.config import RepoConfig
    from emplace.utils.formatting import print_error, print_info

    path = config_path or get_config_path()
    try:
        return load_config(path)
    except ConfigNotFoundError:
        print_info(f"No configuration found at {path}.")
    except ConfigError as e:
        print_error(f"Failed to load config: {e}")
        raise typer.Exit(code=1) from e

    url = typer.prompt("The URL of the git repository you (want to) store the mirrors in")
    try:
        config = Config(repo=RepoConfig(url=url))
        save_config(config, path)
    except ValidationError as e:
        print_error(f"Invalid repository URL: {e}")
        raise typer.Exit(code=1) from e
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_info(f"Configuration saved to {path}.")
    return config
