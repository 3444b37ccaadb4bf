"""Checks against the local system for mirrored packages.

A package is offered for installation only when its manager is available
on this machine and the package is not installed yet.
"""

import logging
import subprocess

from emplace.managers import PackageManager
from emplace.models.descriptor import HostOS, PathExists, Script
from emplace.models.package import Package
from emplace.utils.shell import command_exists, run_command, shell_args

logger = logging.getLogger(__name__)

# Some managers query remote indexes to answer
CHECK_TIMEOUT = 120.0


class InstalledCheckError(Exception):
    """Raised when an installed check cannot be executed at all."""


def manager_is_available(manager: PackageManager, host: HostOS | None = None) -> bool:
    """Check whether any command of a manager is on the PATH.

    Args:
        manager: Manager to look for.
        host: Target host family. If None, uses the running host.
    """
    return any(command_exists(cmd) for cmd in manager.descriptor.commands_for(host))


def package_is_installed(package: Package, host: HostOS | None = None) -> bool:
    """Check whether a package is already installed.

    Args:
        package: Package to check.
        host: Target host family. If None, uses the running host.

    Returns:
        True if the manager reports the package as installed.

    Raises:
        InstalledCheckError: If the check script cannot be started or times out.
    """
    host = host or HostOS.current()
    check = package.source.descriptor.installed_check_for(host)

    if isinstance(check, PathExists):
        return check.render(package.name).exists()
    if not isinstance(check, Script):  # AssumeInstalled
        return True

    script = check.render(package.name)
    logger.debug("Checking %s with %r", package.full_name, script)
    try:
        result = run_command(shell_args(script, host), timeout=CHECK_TIMEOUT)
    except (OSError, subprocess.TimeoutExpired) as e:
        raise InstalledCheckError(f"Failed to run {script!r}: {e}") from e
    return result.success
