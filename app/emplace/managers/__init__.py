"""Supported package managers.

Every manager is a member of the closed PackageManager enumeration and is
bound to exactly one PackageManagerDescriptor, declared in its own module
next to this one.
"""

from enum import Enum

from emplace.managers import (
    apt,
    brew,
    cargo,
    cargo_binstall,
    chocolatey,
    dnf,
    gem,
    go,
    guix,
    nix,
    npm,
    pacman,
    paru,
    pip,
    pip3,
    pkg,
    rua,
    rustup,
    scoop,
    snap,
    yay,
    zypper,
)
from emplace.models.descriptor import PackageManagerDescriptor


class PackageManager(Enum):
    """Enumeration of supported package managers.

    Members iterate in declaration order, which is also the order in which
    recognition results of different managers are reported.
    """

    APT = "apt"
    BREW = "brew"
    CARGO = "cargo"
    CARGO_BINSTALL = "cargo-binstall"
    CHOCOLATEY = "chocolatey"
    DNF = "dnf"
    GEM = "gem"
    GO = "go"
    GUIX = "guix"
    NIX = "nix"
    NPM = "npm"
    PACMAN = "pacman"
    PARU = "paru"
    PIP = "pip"
    PIP3 = "pip3"
    PKG = "pkg"
    RUA = "rua"
    RUSTUP = "rustup"
    SCOOP = "scoop"
    SNAP = "snap"
    YAY = "yay"
    ZYPPER = "zypper"

    @property
    def descriptor(self) -> PackageManagerDescriptor:
        """Return the grammar descriptor bound to this manager."""
        return _REGISTRY[self]

    @property
    def full_name(self) -> str:
        """Return the human-readable manager name."""
        return _REGISTRY[self].full_name


_REGISTRY: dict[PackageManager, PackageManagerDescriptor] = {
    PackageManager.APT: apt.DESCRIPTOR,
    PackageManager.BREW: brew.DESCRIPTOR,
    PackageManager.CARGO: cargo.DESCRIPTOR,
    PackageManager.CARGO_BINSTALL: cargo_binstall.DESCRIPTOR,
    PackageManager.CHOCOLATEY: chocolatey.DESCRIPTOR,
    PackageManager.DNF: dnf.DESCRIPTOR,
    PackageManager.GEM: gem.DESCRIPTOR,
    PackageManager.GO: go.DESCRIPTOR,
    PackageManager.GUIX: guix.DESCRIPTOR,
    PackageManager.NIX: nix.DESCRIPTOR,
    PackageManager.NPM: npm.DESCRIPTOR,
    PackageManager.PACMAN: pacman.DESCRIPTOR,
    PackageManager.PARU: paru.DESCRIPTOR,
    PackageManager.PIP: pip.DESCRIPTOR,
    PackageManager.PIP3: pip3.DESCRIPTOR,
    PackageManager.PKG: pkg.DESCRIPTOR,
    PackageManager.RUA: rua.DESCRIPTOR,
    PackageManager.RUSTUP: rustup.DESCRIPTOR,
    PackageManager.SCOOP: scoop.DESCRIPTOR,
    PackageManager.SNAP: snap.DESCRIPTOR,
    PackageManager.YAY: yay.DESCRIPTOR,
    PackageManager.ZYPPER: zypper.DESCRIPTOR,
}

_missing = [manager.name for manager in PackageManager if manager not in _REGISTRY]
if _missing:
    msg = f"Package managers without a descriptor: {', '.join(_missing)}"
    raise RuntimeError(msg)


def all_command_words() -> tuple[str, ...]:
    """Return every bare command word of every manager, deduplicated.

    Returns:
        Command words in manager declaration order.
    """
    words: dict[str, None] = {}
    for manager in PackageManager:
        for command in manager.descriptor.commands:
            words.setdefault(command, None)
    return tuple(words)


__all__ = ["PackageManager", "all_command_words"]
