"""Unit tests for package models.

Tests for Package and PackageSet.
"""

import json

import pytest
from emplace.managers import PackageManager
from emplace.models.descriptor import HostOS
from emplace.models.package import Package, PackageSet


class TestPackage:
    """Tests for Package dataclass."""

    def test_minimal_package(self) -> None:
        """Package can be created without flags."""
        pkg = Package(source=PackageManager.APT, name="vim")
        assert pkg.flags == ()
        assert pkg.full_command == "vim"

    def test_empty_name_raises(self) -> None:
        """Empty package name raises ValueError."""
        with pytest.raises(ValueError, match="name cannot be empty"):
            Package(source=PackageManager.APT, name="")

    def test_full_command_puts_flags_first(self) -> None:
        """Flags precede the name in the full command."""
        pkg = Package(PackageManager.CARGO, "https://x.git", ("--git", "--branch 3.x"))
        assert pkg.full_command == "--git --branch 3.x https://x.git"

    def test_full_name(self) -> None:
        """Full name appends the manager name."""
        pkg = Package(PackageManager.PIP, "test", ("--user",))
        assert pkg.full_name == "--user test (Python Pip)"

    def test_equality_includes_flags(self) -> None:
        """Packages differing only in flags are different."""
        assert Package(PackageManager.PIP, "a") != Package(PackageManager.PIP, "a", ("--user",))
        assert Package(PackageManager.PIP, "a") == Package(PackageManager.PIP, "a")

    def test_ordering_by_full_command_then_source(self) -> None:
        """Packages order by full command, then manager value."""
        pip = Package(PackageManager.PIP, "requests")
        pip3 = Package(PackageManager.PIP3, "requests")
        apt = Package(PackageManager.APT, "zsh")
        assert sorted([apt, pip3, pip]) == [pip, pip3, apt]

    def test_install_command_with_sudo_on_posix(self) -> None:
        """Root managers are prefixed with sudo on POSIX."""
        pkg = Package(PackageManager.APT, "vim", ("-t experimental",))
        assert pkg.install_command(HostOS.POSIX) == "sudo apt-get install -y -t experimental vim"

    def test_install_command_without_sudo_on_windows(self) -> None:
        """Windows hosts never prefix sudo."""
        pkg = Package(PackageManager.SCOOP, "git")
        assert pkg.install_command(HostOS.WINDOWS) == "cmd /c scoop install git"

    def test_install_command_without_root(self) -> None:
        """Managers without root need no prefix."""
        pkg = Package(PackageManager.CARGO, "ripgrep")
        assert pkg.install_command(HostOS.POSIX) == "cargo install --quiet ripgrep"

    def test_dict_round_trip(self) -> None:
        """Packages survive dictionary conversion."""
        pkg = Package(PackageManager.CARGO_BINSTALL, "tool", ("--version 1.0",))
        data = pkg.to_dict()
        assert data == {"source": "cargo-binstall", "name": "tool", "flags": ["--version 1.0"]}
        assert Package.from_dict(data) == pkg

    def test_from_dict_defaults_flags(self) -> None:
        """Missing flags mean no flags."""
        assert Package.from_dict({"source": "apt", "name": "vim"}).flags == ()

    @pytest.mark.parametrize(
        "data",
        [
            {"name": "vim"},
            {"source": "aptitude", "name": "vim"},
            {"source": "apt", "name": 3},
            {"source": "apt", "name": "vim", "flags": "--user"},
            {"source": "apt", "name": "vim", "flags": [1]},
            ["apt", "vim"],
        ],
    )
    def test_from_dict_rejects_malformed(self, data: object) -> None:
        """Malformed entries raise ValueError."""
        with pytest.raises(ValueError):
            Package.from_dict(data)  # type: ignore[arg-type]


class TestPackageSet:
    """Tests for PackageSet."""

    @pytest.fixture
    def stored(self) -> PackageSet:
        """Set as read from a mirror file."""
        return PackageSet(
            [
                Package(PackageManager.APT, "fzf"),
                Package(PackageManager.CARGO, "ripgrep"),
            ]
        )

    def test_merge_sorts_and_deduplicates(self, stored: PackageSet) -> None:
        """Merging keeps one copy of each package in order."""
        extra = [Package(PackageManager.APT, "bat"), Package(PackageManager.APT, "fzf")]
        merged = stored.merge(extra)
        assert [p.name for p in merged] == ["bat", "fzf", "ripgrep"]

    def test_merge_keeps_same_name_from_other_manager(self, stored: PackageSet) -> None:
        """Equal names from different managers are both kept."""
        merged = stored.merge([Package(PackageManager.BREW, "fzf")])
        assert len(merged) == 3

    def test_merge_does_not_modify_operands(self, stored: PackageSet) -> None:
        """merge returns a new set."""
        stored.merge([Package(PackageManager.APT, "bat")])
        assert len(stored) == 2

    def test_merge_with_nothing_is_idempotent(self) -> None:
        """Merging nothing sorts and deduplicates once, then changes nothing."""
        bat = Package(PackageManager.APT, "bat")
        zsh = Package(PackageManager.APT, "zsh")
        unsorted = PackageSet([zsh, bat, zsh])

        once = unsorted.merge([])

        assert list(once) == [bat, zsh]
        assert once.merge([]) == once

    def test_merge_with_itself_keeps_cardinality(self) -> None:
        """Merging a set with itself keeps one copy of each distinct package."""
        bat = Package(PackageManager.APT, "bat")
        zsh = Package(PackageManager.APT, "zsh")
        packages = PackageSet([zsh, bat, bat])

        assert len(packages.merge(packages)) == 2

    def test_difference(self, stored: PackageSet) -> None:
        """Only packages not already stored remain."""
        found = PackageSet([Package(PackageManager.APT, "fzf"), Package(PackageManager.APT, "jq")])
        assert list(found.difference(stored)) == [Package(PackageManager.APT, "jq")]

    def test_from_line(self) -> None:
        """Sets can be built from a command line."""
        result = PackageSet.from_line("sudo apt install vim", HostOS.POSIX)
        assert list(result) == [Package(PackageManager.APT, "vim")]

    def test_commit_message_single(self) -> None:
        """A single package is named in the commit message."""
        packages = PackageSet([Package(PackageManager.APT, "vim")])
        assert packages.commit_message() == 'Emplace - mirror package "vim (Advanced Package Tool)"'

    def test_commit_message_multiple(self, stored: PackageSet) -> None:
        """Several packages are counted in the commit message."""
        assert stored.commit_message() == "Emplace - mirror 2 packages"

    def test_commit_message_empty_raises(self) -> None:
        """Empty sets have nothing to commit."""
        with pytest.raises(ValueError, match="without packages"):
            PackageSet().commit_message()

    def test_json_format(self, stored: PackageSet) -> None:
        """Mirror files hold a packages list."""
        data = json.loads(stored.to_json())
        assert data == {
            "packages": [
                {"source": "apt", "name": "fzf", "flags": []},
                {"source": "cargo", "name": "ripgrep", "flags": []},
            ]
        }
        assert PackageSet.from_json(stored.to_json()) == stored

    def test_from_json_empty_document(self) -> None:
        """An empty mirror file is an empty set."""
        assert len(PackageSet.from_json("")) == 0

    @pytest.mark.parametrize("text", ["{", "[]", '{"packages": {}}'])
    def test_from_json_invalid(self, text: str) -> None:
        """Invalid mirror files raise ValueError."""
        with pytest.raises(ValueError):
            PackageSet.from_json(text)

    def test_container_protocol(self, stored: PackageSet) -> None:
        """Sets support len, membership and indexing."""
        assert len(stored) == 2
        assert Package(PackageManager.APT, "fzf") in stored
        assert stored[1].name == "ripgrep"
        assert bool(PackageSet()) is False
