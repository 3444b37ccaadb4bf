"""Unit tests for the mirror repository."""

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from emplace.core.repo import MirrorRepo, RepoError
from emplace.managers import PackageManager
from emplace.models.config import Config
from emplace.models.package import Package, PackageSet


@pytest.fixture
def mock_git():
    """Patch every git call made by the repository."""
    with patch("emplace.core.repo.git") as mock:
        for name in ("clone_single_branch", "pull", "add_file", "commit_all", "push"):
            getattr(mock, name).return_value = True
        yield mock


@pytest.fixture
def repo(config: Config, mock_git: MagicMock) -> MirrorRepo:
    """Repository whose checkout already exists."""
    (config.repo_directory / ".git").mkdir(parents=True)
    return MirrorRepo.open(config)


class TestOpen:
    """Tests for MirrorRepo.open."""

    def test_clones_missing_checkout(self, config: Config, mock_git: MagicMock) -> None:
        """A missing checkout is created and cloned."""
        MirrorRepo.open(config)

        assert config.repo_directory.is_dir()
        mock_git.clone_single_branch.assert_called_once_with(
            config.repo_directory, config.repo.url, "master"
        )
        mock_git.pull.assert_not_called()

    def test_pulls_existing_checkout(self, repo: MirrorRepo, mock_git: MagicMock) -> None:
        """An existing checkout is updated."""
        mock_git.pull.assert_called_once_with(repo.path, "master")
        mock_git.clone_single_branch.assert_not_called()

    def test_failed_pull_is_not_fatal(self, config: Config, mock_git: MagicMock) -> None:
        """The local state stays usable when updating fails."""
        (config.repo_directory / ".git").mkdir(parents=True)
        mock_git.pull.return_value = False

        assert MirrorRepo.open(config).path == config.repo_directory

    def test_failed_clone_raises(self, config: Config, mock_git: MagicMock) -> None:
        """A failed clone raises RepoError."""
        mock_git.clone_single_branch.return_value = False

        with pytest.raises(RepoError, match="Failed to clone"):
            MirrorRepo.open(config)

    def test_missing_git_raises(self, config: Config, mock_git: MagicMock) -> None:
        """A missing git binary raises RepoError."""
        mock_git.clone_single_branch.side_effect = FileNotFoundError("git")

        with pytest.raises(RepoError):
            MirrorRepo.open(config)


class TestReadWrite:
    """Tests for reading and writing the mirror file."""

    def test_missing_file_is_empty(self, repo: MirrorRepo) -> None:
        """Nothing mirrored yet reads as an empty set."""
        assert len(repo.read()) == 0

    def test_read_mirror_file(self, repo: MirrorRepo, mock_mirror_file: str) -> None:
        """The mirror file is parsed into packages."""
        repo.mirror_path.write_text(mock_mirror_file)

        packages = repo.read()

        assert [p.name for p in packages] == ["fzf", "ripgrep"]
        assert packages[1].flags == ("+nightly",)

    def test_corrupt_file_raises(self, repo: MirrorRepo) -> None:
        """Unparseable mirror files raise RepoError."""
        repo.mirror_path.write_text("{not json")

        with pytest.raises(RepoError):
            repo.read()

    def test_write_then_read(self, repo: MirrorRepo, stored_packages: PackageSet) -> None:
        """Written packages read back unchanged."""
        repo.write(stored_packages)

        assert repo.read() == stored_packages


class TestMirror:
    """Tests for MirrorRepo.mirror."""

    def test_mirror_merges_and_publishes(
        self, repo: MirrorRepo, mock_git: MagicMock, mock_mirror_file: str
    ) -> None:
        """New packages are merged into the file, committed and pushed."""
        repo.mirror_path.write_text(mock_mirror_file)
        new = PackageSet([Package(PackageManager.APT, "bat")])

        merged = repo.mirror(new)

        assert [p.name for p in merged] == ["ripgrep", "bat", "fzf"]
        assert repo.read() == merged
        mock_git.add_file.assert_called_once_with(repo.path, ".emplace")
        mock_git.commit_all.assert_called_once_with(
            repo.path, 'Emplace - mirror package "bat (Advanced Package Tool)"'
        )
        mock_git.push.assert_called_once_with(repo.path)

    def test_mirror_empty_set_raises(self, repo: MirrorRepo, mock_git: MagicMock) -> None:
        """Mirroring nothing is an error and touches nothing."""
        with pytest.raises(ValueError):
            repo.mirror(PackageSet())

        assert not repo.mirror_path.exists()
        mock_git.commit_all.assert_not_called()

    def test_failed_push_raises(self, repo: MirrorRepo, mock_git: MagicMock) -> None:
        """A rejected push raises RepoError."""
        mock_git.push.return_value = False

        with pytest.raises(RepoError, match="push"):
            repo.mirror(PackageSet([Package(PackageManager.APT, "bat")]))

    def test_git_timeout_raises(self, repo: MirrorRepo, mock_git: MagicMock) -> None:
        """Hanging git commands raise RepoError."""
        mock_git.push.side_effect = subprocess.TimeoutExpired("git", 300)

        with pytest.raises(RepoError):
            repo.mirror(PackageSet([Package(PackageManager.APT, "bat")]))


class TestClean:
    """Tests for MirrorRepo.clean."""

    def test_clean_removes_packages(
        self, repo: MirrorRepo, mock_git: MagicMock, stored_packages: PackageSet
    ) -> None:
        """The leftover set replaces the file."""
        repo.write(stored_packages)
        leftover = PackageSet(stored_packages.packages[:1])

        assert repo.clean(leftover) == 2
        assert repo.read() == leftover
        mock_git.commit_all.assert_called_once_with(
            repo.path, "Emplace - stop mirroring 2 packages"
        )

    def test_clean_without_change(
        self, repo: MirrorRepo, mock_git: MagicMock, stored_packages: PackageSet
    ) -> None:
        """Nothing is committed when all packages stay."""
        repo.write(stored_packages)

        assert repo.clean(stored_packages) == 0
        mock_git.commit_all.assert_not_called()


def test_custom_mirror_file(tmp_path: Path, mock_git: MagicMock) -> None:
    """The mirror file location follows the config."""
    config = Config.model_validate(
        {"repo_directory": str(tmp_path), "repo": {"url": "x", "file": "sub/list.json"}}
    )
    repo = MirrorRepo(config)
    repo.write(PackageSet([Package(PackageManager.NPM, "typescript")]))

    assert (tmp_path / "sub" / "list.json").exists()
