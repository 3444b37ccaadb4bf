"""Declarative grammar of a package manager's command line.

This module defines the immutable building blocks every package manager
module combines into a PackageManagerDescriptor: how its install command
looks, which flags carry values, which flags must be remembered and how
to check whether a package is already installed.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class HostOS(Enum):
    """Operating system family the command line is interpreted for."""

    POSIX = "posix"
    WINDOWS = "windows"

    @classmethod
    def current(cls) -> HostOS:
        """Return the host family of the running interpreter."""
        if sys.platform.startswith("win") or os.name == "nt":
            return cls.WINDOWS
        return cls.POSIX


# Executable suffixes a command may be typed with on Windows
WINDOWS_SUFFIXES: tuple[str, ...] = (".exe", ".cmd")


# =============================================================================
# Capture flags
# =============================================================================


@dataclass(frozen=True, slots=True)
class Single:
    """Flag without a value, recorded verbatim when present.

    Attributes:
        flag: The flag as typed (e.g., '--user', '+nightly').
    """

    flag: str


@dataclass(frozen=True, slots=True)
class FixedValue:
    """Flag that is only recorded together with one specific value.

    The value token is consumed when it matches. On a mismatch the token
    is left in place and is read as a regular argument afterwards.

    Attributes:
        flag: The flag as typed (e.g., '-t').
        value: The only value that makes the flag worth recording.
    """

    flag: str
    value: str


@dataclass(frozen=True, slots=True)
class DynamicValue:
    """Flag recorded together with whatever token follows it.

    Attributes:
        flag: The flag as typed (e.g., '--branch').
    """

    flag: str


CaptureFlag = Single | FixedValue | DynamicValue


# =============================================================================
# Installed checks
# =============================================================================


@dataclass(frozen=True, slots=True)
class Script:
    """Shell script whose exit code tells whether a package is installed.

    Attributes:
        template: Script text, '{name}' is replaced by the package name.
    """

    template: str

    def render(self, name: str) -> str:
        """Return the script for a concrete package name."""
        return self.template.format(name=name)


@dataclass(frozen=True, slots=True)
class PathExists:
    """Filesystem path whose existence tells whether a package is installed.

    Attributes:
        template: Path text, '{name}' is replaced and '~' is expanded.
    """

    template: str

    def render(self, name: str) -> Path:
        """Return the path for a concrete package name."""
        return Path(self.template.format(name=name)).expanduser()


@dataclass(frozen=True, slots=True)
class AssumeInstalled:
    """Marker for managers that cannot report installed state."""


InstalledCheck = Script | PathExists | AssumeInstalled


# =============================================================================
# Descriptor
# =============================================================================


@dataclass(frozen=True, slots=True)
class PackageManagerDescriptor:
    """Static description of one package manager's install grammar.

    Descriptors are pure configuration: they hold no state and are shared
    by every recognition call in the process.

    Attributes:
        full_name: Human-readable label (e.g., 'Advanced Package Tool').
        commands: Words that invoke the manager (e.g., 'apt', 'apt-get').
        sub_commands: Words or phrases that mark the install action.
        install_command: Command used later to reinstall a package.
        needs_root: Whether reinstalling needs privilege escalation.
        installed_check: How to test whether a package is installed.
        windows_installed_check: Replacement check used on Windows hosts.
        known_flags_with_values: Flags that consume the following token.
        capture_flags: Flags retained alongside the package name.
        invalidating_flags: Flags that disqualify the whole line.
    """

    full_name: str
    commands: tuple[str, ...]
    sub_commands: tuple[str, ...]
    install_command: str
    needs_root: bool
    installed_check: InstalledCheck
    windows_installed_check: InstalledCheck | None = field(default=None)
    known_flags_with_values: tuple[str, ...] = field(default=())
    capture_flags: tuple[CaptureFlag, ...] = field(default=())
    invalidating_flags: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        """Validate descriptor data after initialization."""
        if not self.full_name:
            msg = "Package manager name cannot be empty"
            raise ValueError(msg)
        if not self.commands:
            msg = f"{self.full_name}: at least one command is required"
            raise ValueError(msg)
        if not self.sub_commands:
            msg = f"{self.full_name}: at least one sub-command is required"
            raise ValueError(msg)
        if not self.install_command:
            msg = f"{self.full_name}: install command cannot be empty"
            raise ValueError(msg)

        words = (*self.commands, *self.sub_commands, *self.known_flags_with_values)
        if any(not word.strip() for word in (*words, *self.invalidating_flags)):
            msg = f"{self.full_name}: command words and flags cannot be blank"
            raise ValueError(msg)
        if any(any(c.isspace() for c in command) for command in self.commands):
            msg = f"{self.full_name}: commands must be single words"
            raise ValueError(msg)

        for capture in self.capture_flags:
            if not capture.flag.startswith(("-", "+")):
                msg = f"{self.full_name}: capture flag {capture.flag!r} must start with '-' or '+'"
                raise ValueError(msg)

    def commands_for(self, host: HostOS | None = None) -> tuple[str, ...]:
        """Return the command words as they can be typed on a host.

        On Windows every command may also be typed with an executable
        suffix, POSIX hosts only know the bare names.

        Args:
            host: Target host family. If None, uses the running host.

        Returns:
            Tuple of command words, bare names first.
        """
        host = host or HostOS.current()
        if host is not HostOS.WINDOWS:
            return self.commands

        variants = [
            f"{command}{suffix}" for command in self.commands for suffix in WINDOWS_SUFFIXES
        ]
        return (*self.commands, *variants)

    def installed_check_for(self, host: HostOS | None = None) -> InstalledCheck:
        """Return the installed check to use on a host.

        Args:
            host: Target host family. If None, uses the running host.

        Returns:
            The Windows-specific check when one is declared and the host is
            Windows, the default check otherwise.
        """
        host = host or HostOS.current()
        if host is HostOS.WINDOWS and self.windows_installed_check is not None:
            return self.windows_installed_check
        return self.installed_check
