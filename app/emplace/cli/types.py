"""Shared types for CLI commands."""

from enum import Enum


class OutputFormat(str, Enum):
    """Output formats for listing commands."""

    TABLE = "table"
    JSON = "json"


class ShellChoice(str, Enum):
    """Shells a hook script can be generated for."""

    BASH = "bash"
    ZSH = "zsh"
    FISH = "fish"
