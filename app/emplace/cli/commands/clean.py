"""Clean command implementation.

Stops mirroring packages selected by the user.
"""

from typing import Annotated

import typer

from emplace.cli.display import print_package_list, select_packages
from emplace.core.config import require_config
from emplace.core.repo import MirrorRepo, RepoError
from emplace.utils.formatting import print_error, print_info, print_success


def clean(
    yes: Annotated[
        bool,
        typer.Option(
            "--yes",
            "-y",
            help="Skip the confirmation prompt.",
        ),
    ] = False,
) -> None:
    """Stop mirroring selected packages.

    The packages stay installed, they are only removed from the mirror file.

    Examples:
        emplace clean
    """
    config = require_config()
    try:
        repo = MirrorRepo.open(config)
        packages = repo.read()
    except RepoError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if not packages:
        print_info("No packages have been added yet.")
        return

    selected = select_packages(packages, "Select the packages you want to stop mirroring")
    if not selected:
        print_info("Nothing selected.")
        return

    if not yes:
        print_package_list(selected)
        if not typer.confirm(f"\nStop mirroring {len(selected)} package(s)?", default=False):
            print_info("Aborted.")
            raise typer.Exit(code=0)

    try:
        removed = repo.clean(packages.difference(selected))
    except RepoError as e:
        print_error(f"Failed to update the mirror: {e}")
        raise typer.Exit(code=1) from e

    print_success(f"Stopped mirroring {removed} package(s).")
