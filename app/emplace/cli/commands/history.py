"""History command implementation.

Imports packages from an existing shell history file.
"""

from pathlib import Path
from typing import Annotated

import typer

from emplace.cli.display import confirm_mirror, select_packages
from emplace.core.config import require_config
from emplace.core.history import filter_lines, read_history
from emplace.core.repo import MirrorRepo, RepoError
from emplace.models.package import PackageSet
from emplace.utils.formatting import print_error, print_info, print_success


def history(
    path: Annotated[
        Path,
        typer.Argument(
            help="Shell history file (e.g. ~/.bash_history).",
            dir_okay=False,
        ),
    ],
    yes: Annotated[
        bool,
        typer.Option(
            "--yes",
            "-y",
            help="Mirror every package found without asking.",
        ),
    ] = False,
) -> None:
    """Mirror packages installed in a shell history file.

    Bash, zsh (including extended history) and fish history files are
    understood.

    Examples:
        emplace history ~/.bash_history
        emplace history ~/.zsh_history --yes
        emplace history ~/.local/share/fish/fish_history
    """
    path = path.expanduser()
    try:
        lines = read_history(path)
    except OSError as e:
        print_error(f"Cannot read history file {path}: {e}")
        raise typer.Exit(code=1) from e

    found = PackageSet().merge(filter_lines(lines))
    if not found:
        print_info("No package installs found in the history.")
        return

    config = require_config()
    try:
        repo = MirrorRepo.open(config)
        new = found.difference(repo.read())
    except RepoError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if not new:
        print_info("Every package in the history is already mirrored.")
        return

    if not yes:
        new = select_packages(new, "Select packages to mirror")
        if not new:
            print_info("Nothing selected.")
            return
        if not confirm_mirror(new):
            return

    try:
        repo.mirror(new)
    except RepoError as e:
        print_error(f"Failed to mirror: {e}")
        raise typer.Exit(code=1) from e

    print_success(f"Mirrored {len(new)} package(s).")
