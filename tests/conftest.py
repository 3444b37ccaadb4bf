"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest
from emplace.managers import PackageManager
from emplace.models.config import Config, RepoConfig
from emplace.models.package import Package, PackageSet


@pytest.fixture
def config(tmp_path: Path) -> Config:
    """Config pointing at a checkout inside the test directory."""
    return Config(
        repo_directory=tmp_path / "repo",
        repo=RepoConfig(url="https://example.com/mirror.git"),
    )


@pytest.fixture
def stored_packages() -> PackageSet:
    """Packages as stored in a mirror file."""
    return PackageSet(
        [
            Package(PackageManager.CARGO, "https://example.com/x.git", ("--git",)),
            Package(PackageManager.APT, "fzf"),
            Package(PackageManager.PIP, "requests", ("--user",)),
        ]
    )


@pytest.fixture
def mock_mirror_file() -> str:
    """Sample mirror file content."""
    return """{
  "packages": [
    {"source": "apt", "name": "fzf", "flags": []},
    {"source": "cargo", "name": "ripgrep", "flags": ["+nightly"]}
  ]
}
"""


@pytest.fixture
def mock_bash_history() -> str:
    """Sample bash history."""
    return """sudo apt install linux-perf-5.6
cargo flamegraph --example basic
sudo nvim /etc/sysctl.conf
fg
"""


@pytest.fixture
def mock_zsh_history() -> str:
    """Sample zsh extended history."""
    return """: 1610989572:0;sudo apt install test
: 1610989580:0;cargo install test
: 1610989590:0;ls -la
"""


@pytest.fixture
def mock_fish_history() -> str:
    """Sample fish history."""
    return """- cmd: sudo apt install fzf
  when: 1610989572
- cmd: sudo apt -qq install meld
  when: 1610989573
- cmd: cd ~
  when: 1610989574
"""
