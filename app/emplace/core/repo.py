"""Mirror repository management.

The mirror repository is a git checkout holding a single JSON file with
every package recorded so far. Each change is committed and pushed right
away so other machines can pick it up.
"""

import logging
import subprocess
from pathlib import Path

from emplace.core import git
from emplace.models.config import Config
from emplace.models.package import PackageSet

logger = logging.getLogger(__name__)


class RepoError(Exception):
    """Raised when the mirror repository cannot be read or updated."""


class MirrorRepo:
    """Local checkout of the mirror repository.

    Example:
        >>> repo = MirrorRepo.open(config)
        >>> stored = repo.read()
        >>> repo.mirror(PackageSet.from_line("sudo apt install ripgrep"))
    """

    def __init__(self, config: Config) -> None:
        self._config = config

    @property
    def path(self) -> Path:
        """Directory of the local checkout."""
        return self._config.repo_directory

    @property
    def mirror_path(self) -> Path:
        """Path of the mirror file in the checkout."""
        return self._config.mirror_path

    @classmethod
    def open(cls, config: Config) -> "MirrorRepo":
        """Open the local checkout, cloning it first if it doesn't exist.

        An existing checkout is brought up to date with the remote. A failed
        update is only logged, the local state is still usable.

        Raises:
            RepoError: If the repository cannot be cloned.
        """
        repo = cls(config)
        try:
            if (repo.path / ".git").exists():
                logger.info("Opening existing repo %s", repo.path)
                if not git.pull(repo.path, config.repo.branch):
                    logger.warning("Could not update %s from %s", repo.path, config.repo.url)
            else:
                logger.info("Cloning %s to %s", config.repo.url, repo.path)
                repo.path.mkdir(parents=True, exist_ok=True)
                if not git.clone_single_branch(repo.path, config.repo.url, config.repo.branch):
                    raise RepoError(f"Failed to clone {config.repo.url} into {repo.path}")
        except (OSError, subprocess.TimeoutExpired) as e:
            raise RepoError(f"Failed to open repository {repo.path}: {e}") from e
        return repo

    def read(self) -> PackageSet:
        """Read the mirrored packages.

        A missing mirror file means nothing has been mirrored yet.

        Raises:
            RepoError: If the file cannot be read or is not a mirror file.
        """
        try:
            text = self.mirror_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return PackageSet()
        except OSError as e:
            raise RepoError(f"Failed to read {self.mirror_path}: {e}") from e

        try:
            return PackageSet.from_json(text)
        except ValueError as e:
            raise RepoError(f"{self.mirror_path}: {e}") from e

    def write(self, packages: PackageSet) -> None:
        """Replace the mirror file with a set of packages.

        Raises:
            RepoError: If the file cannot be written.
        """
        try:
            self.mirror_path.parent.mkdir(parents=True, exist_ok=True)
            self.mirror_path.write_text(packages.to_json(), encoding="utf-8")
        except OSError as e:
            raise RepoError(f"Failed to write {self.mirror_path}: {e}") from e

    def mirror(self, packages: PackageSet) -> PackageSet:
        """Add packages to the mirror file, commit and push.

        Args:
            packages: Newly recognized packages, must not be empty.

        Returns:
            The complete set now stored in the mirror file.

        Raises:
            RepoError: If writing or any git step fails.
        """
        message = packages.commit_message()
        merged = self.read().merge(packages)
        self.write(merged)
        self._publish(message)
        return merged

    def clean(self, leftover: PackageSet) -> int:
        """Replace the mirrored packages with the ones left after a cleanup.

        Args:
            leftover: Packages that stay mirrored.

        Returns:
            Number of packages no longer mirrored.

        Raises:
            RepoError: If writing or any git step fails.
        """
        removed = len(self.read()) - len(leftover)
        if removed <= 0:
            logger.debug("Nothing to clean in %s", self.mirror_path)
            return 0

        self.write(leftover)
        self._publish(f"Emplace - stop mirroring {removed} packages")
        return removed

    def _publish(self, message: str) -> None:
        """Stage the mirror file, commit it and push."""
        try:
            logger.info("Committing with message %r", message)
            if not git.add_file(self.path, self._config.repo.file):
                raise RepoError(f"Failed to stage {self._config.repo.file}")
            if not git.commit_all(self.path, message):
                raise RepoError("Failed to commit the mirror file")
            logger.info("Pushing to remote")
            if not git.push(self.path):
                raise RepoError(f"Failed to push to {self._config.repo.url}")
        except (OSError, subprocess.TimeoutExpired) as e:
            raise RepoError(f"Failed to run git: {e}") from e
