"""Install command implementation.

Installs mirrored packages that are missing on this machine.
"""

from typing import Annotated

import typer
from rich.markup import escape

from emplace.cli.display import select_packages
from emplace.core.config import require_config
from emplace.core.installed import InstalledCheckError, manager_is_available, package_is_installed
from emplace.core.repo import MirrorRepo, RepoError
from emplace.models.descriptor import HostOS
from emplace.models.package import Package, PackageSet
from emplace.utils.formatting import (
    console,
    format_package,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from emplace.utils.shell import run_interactive, shell_args


def _missing_packages(packages: PackageSet, host: HostOS) -> PackageSet:
    """Keep packages whose manager is available and that are not installed.

    Packages whose installed check cannot run are skipped with a warning.
    """
    missing: list[Package] = []
    managers = {pkg.source for pkg in packages}
    available = {manager: manager_is_available(manager, host) for manager in managers}

    for pkg in packages:
        if not available[pkg.source]:
            continue
        try:
            if not package_is_installed(pkg, host):
                missing.append(pkg)
        except InstalledCheckError as e:
            print_warning(f"Skipping {pkg.full_name}: {e}")
    return PackageSet(missing)


def install(
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            "-n",
            help="Print the install commands without running them.",
        ),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option(
            "--yes",
            "-y",
            help="Install every missing package without asking.",
        ),
    ] = False,
) -> None:
    """Install mirrored packages that are missing on this machine.

    Only packages whose package manager is available are offered.

    Examples:
        emplace install --dry-run
        emplace install --yes
    """
    host = HostOS.current()
    config = require_config()
    try:
        packages = MirrorRepo.open(config).read()
    except RepoError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_info("Checking which packages haven't been installed yet...")
    missing = _missing_packages(packages, host)
    if not missing:
        print_success("Nothing to install.")
        return

    if not yes:
        missing = select_packages(missing, "Select the packages you want to install", "all")
        if not missing:
            print_info("Nothing selected.")
            return

    failed = 0
    for pkg in missing:
        command = pkg.install_command(host)
        if dry_run:
            console.print(f"[command]{escape(command)}[/]", highlight=False)
            continue

        console.print(f"\nInstalling {format_package(pkg)}")
        try:
            returncode = run_interactive(shell_args(command, host))
        except OSError as e:
            print_error(f"Cannot run {command!r}: {e}")
            returncode = -1

        if returncode == 0:
            print_success("Installed successfully")
        else:
            print_error(f"Installation failed: {command}")
            failed += 1

    if dry_run:
        print_info("\nDry-run mode: No changes were made.")
    elif failed:
        raise typer.Exit(code=1)
