"""Thin wrappers around the git command line.

Every function runs one git invocation inside a directory and reports
whether it succeeded. Output is captured and only logged at debug level.
"""

import logging
from pathlib import Path

from emplace.utils.shell import run_command

logger = logging.getLogger(__name__)

# Network operations may wait on credentials or slow remotes
GIT_TIMEOUT = 300.0


def _git(directory: Path, *args: str) -> bool:
    """Run git with arguments in a directory.

    Raises:
        FileNotFoundError: If git is not installed.
        subprocess.TimeoutExpired: If git exceeds GIT_TIMEOUT.
    """
    command = ["git", *args]
    logger.debug("Calling %r in %s", " ".join(command), directory)
    result = run_command(command, timeout=GIT_TIMEOUT, cwd=directory)
    if not result.success:
        logger.debug("git %s failed (%d): %s", args[0], result.returncode, result.stderr.strip())
    return result.success


def clone_single_branch(directory: Path, url: str, branch: str) -> bool:
    """Clone one branch of a remote into an existing, empty directory."""
    success = _git(directory, "clone", "--single-branch", "--branch", branch, url, ".")
    if not success:
        logger.error(
            "Cloning failed, clone manually with: git clone --single-branch --branch %s %s %s",
            branch,
            url,
            directory,
        )
    return success


def pull(directory: Path, branch: str) -> bool:
    """Fetch a branch and merge it, preferring the remote side on conflicts."""
    if not _git(directory, "fetch", "--no-tags", "--no-recurse-submodules", "origin", branch):
        return False
    return _git(directory, "merge", "--strategy-option", "theirs", f"origin/{branch}")


def add_file(directory: Path, file: str) -> bool:
    """Stage a file."""
    return _git(directory, "add", file)


def commit_all(directory: Path, message: str) -> bool:
    """Commit every tracked change with a message."""
    return _git(directory, "commit", "-am", message)


def push(directory: Path) -> bool:
    """Push the current branch to its upstream."""
    return _git(directory, "push")
