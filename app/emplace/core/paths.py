"""XDG-compliant path management for emplace.

This module provides standardized paths following the XDG Base Directory
Specification for configuration and the local mirror checkout.

XDG defaults:
- Config: ~/.config/emplace/
- Data: ~/.local/share/emplace/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "emplace"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/emplace/ (or XDG_CONFIG_HOME/emplace/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_data_dir() -> Path:
    """Get the data directory path.

    Returns:
        Path to ~/.local/share/emplace/ (or XDG_DATA_HOME/emplace/).
    """
    return _get_xdg_dir("XDG_DATA_HOME", ".local/share")


def get_config_path() -> Path:
    """Get the configuration file path.

    Returns:
        Path to ~/.config/emplace/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_theme_path() -> Path:
    """Get the user theme override path.

    Returns:
        Path to ~/.config/emplace/theme.toml.
    """
    return get_config_dir() / "theme.toml"


def get_default_repo_dir() -> Path:
    """Get the default checkout directory of the mirror repository.

    Returns:
        Path to ~/.local/share/emplace/repo/.
    """
    return get_data_dir() / "repo"
