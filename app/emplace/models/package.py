"""Package models for recognized installs and the mirror file.

A Package is one install recognized on a command line. A PackageSet is
the ordered collection stored in the mirror repository.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from functools import total_ordering
from typing import Any

from emplace.managers import PackageManager
from emplace.models.descriptor import HostOS


@total_ordering
@dataclass(frozen=True, slots=True)
class Package:
    """Represents a package recognized on an install command line.

    Attributes:
        source: Package manager the package was installed with.
        name: Package name as typed (e.g., 'ripgrep', 'nixos.hello').
        flags: Captured flags, each either a bare flag or 'flag value'.
    """

    source: PackageManager
    name: str
    flags: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        """Validate package data after initialization."""
        if not self.name:
            msg = "Package name cannot be empty"
            raise ValueError(msg)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Package):
            return NotImplemented
        return self.sort_key < other.sort_key

    @property
    def full_command(self) -> str:
        """Return the captured flags followed by the name."""
        return " ".join((*self.flags, self.name))

    @property
    def full_name(self) -> str:
        """Return the command together with the manager's name."""
        return f"{self.full_command} ({self.source.full_name})"

    @property
    def sort_key(self) -> tuple[str, str]:
        """Key used to order packages in a set."""
        return (self.full_command, self.source.value)

    def install_command(self, host: HostOS | None = None) -> str:
        """Return the command that reinstalls this package.

        Args:
            host: Target host family. If None, uses the running host.

        Returns:
            Install command, prefixed with sudo when the manager needs root
            and the host is POSIX.
        """
        host = host or HostOS.current()
        descriptor = self.source.descriptor
        parts = [descriptor.install_command, *self.flags, self.name]
        if descriptor.needs_root and host is HostOS.POSIX:
            parts.insert(0, "sudo")
        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "source": self.source.value,
            "name": self.name,
            "flags": list(self.flags),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Package:
        """Create a package from its mirror file representation.

        Raises:
            ValueError: If the source is unknown or a field is malformed.
        """
        if not isinstance(data, dict):
            msg = f"Package entry must be an object, got {data!r}"
            raise ValueError(msg)
        try:
            source = PackageManager(data["source"])
            name = data["name"]
            flags = data.get("flags", [])
        except KeyError as e:
            msg = f"Package entry is missing field {e}"
            raise ValueError(msg) from e

        if not isinstance(name, str) or not isinstance(flags, list):
            msg = f"Malformed package entry: {data!r}"
            raise ValueError(msg)
        if not all(isinstance(flag, str) for flag in flags):
            msg = f"Package flags must be strings: {data!r}"
            raise ValueError(msg)
        return cls(source=source, name=name, flags=tuple(flags))


class PackageSet:
    """Ordered collection of packages.

    Example:
        >>> found = PackageSet.from_line("sudo apt install ripgrep")
        >>> new = found.difference(stored)
        >>> stored = stored.merge(new)
    """

    __slots__ = ("_packages",)

    def __init__(self, packages: Iterable[Package] = ()) -> None:
        self._packages: tuple[Package, ...] = tuple(packages)

    def __iter__(self) -> Iterator[Package]:
        return iter(self._packages)

    def __len__(self) -> int:
        return len(self._packages)

    def __contains__(self, package: object) -> bool:
        return package in self._packages

    def __getitem__(self, index: int) -> Package:
        return self._packages[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PackageSet):
            return NotImplemented
        return self._packages == other._packages

    def __hash__(self) -> int:
        return hash(self._packages)

    def __repr__(self) -> str:
        return f"PackageSet({list(self._packages)!r})"

    @property
    def packages(self) -> tuple[Package, ...]:
        """Return the packages in their current order."""
        return self._packages

    @classmethod
    def from_line(cls, line: str, host: HostOS | None = None) -> PackageSet:
        """Recognize every package installed by a command line."""
        from emplace.core.recognizer import recognize

        return cls(recognize(line, host))

    def merge(self, other: Iterable[Package]) -> PackageSet:
        """Return the union of both sets, sorted and without duplicates.

        Args:
            other: Packages to add to this set.

        Returns:
            New PackageSet sorted by full command, then manager.
        """
        merged: list[Package] = []
        for package in sorted((*self._packages, *other)):
            if merged and merged[-1] == package:
                continue
            merged.append(package)
        return PackageSet(merged)

    def difference(self, existing: Iterable[Package]) -> PackageSet:
        """Return the packages that do not occur in an existing set."""
        known = set(existing)
        return PackageSet(package for package in self._packages if package not in known)

    def commit_message(self) -> str:
        """Return the mirror repository commit message for these packages.

        Raises:
            ValueError: If the set is empty.
        """
        if not self._packages:
            msg = "Cannot create a commit message without packages"
            raise ValueError(msg)
        if len(self._packages) == 1:
            return f'Emplace - mirror package "{self._packages[0].full_name}"'
        return f"Emplace - mirror {len(self._packages)} packages"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {"packages": [package.to_dict() for package in self._packages]}

    def to_json(self) -> str:
        """Serialize to the mirror file format."""
        return json.dumps(self.to_dict(), indent=2) + "\n"

    @classmethod
    def from_json(cls, text: str) -> PackageSet:
        """Parse the mirror file format.

        An empty document is read as an empty set.

        Raises:
            ValueError: If the document is not a valid mirror file.
        """
        if not text.strip():
            return cls()

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            msg = f"Invalid mirror file: {e}"
            raise ValueError(msg) from e

        if not isinstance(data, dict) or not isinstance(data.get("packages", []), list):
            msg = "Mirror file must be an object with a 'packages' list"
            raise ValueError(msg)
        return cls(Package.from_dict(entry) for entry in data.get("packages", []))
