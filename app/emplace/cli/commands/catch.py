"""Catch command implementation.

Called by the shell hook after every command. Recognized installs that are
not mirrored yet are offered for mirroring.
"""

from typing import Annotated

import typer

from emplace.cli.display import confirm_mirror
from emplace.core.config import require_config
from emplace.core.recognizer import detects, recognize
from emplace.core.repo import MirrorRepo, RepoError
from emplace.models.descriptor import HostOS
from emplace.models.package import PackageSet
from emplace.utils.formatting import print_error, print_success


def catch(
    line: Annotated[
        list[str],
        typer.Argument(help="The command line that was executed."),
    ],
) -> None:
    """Mirror the packages installed by a command line.

    Lines that don't install anything return immediately, so the command is
    cheap enough to run after every command in an interactive shell.

    Examples:
        emplace catch "sudo apt install ripgrep"
        emplace catch cargo install --git https://github.com/x/y
    """
    text = " ".join(line)
    host = HostOS.current()

    # Quick check so the terminal doesn't stall on unrelated commands
    if not detects(text, host):
        return

    found = PackageSet().merge(recognize(text, host))
    if not found:
        return

    config = require_config()
    try:
        repo = MirrorRepo.open(config)
        new = found.difference(repo.read())
    except RepoError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if not new:
        return

    if not confirm_mirror(new):
        return

    try:
        repo.mirror(new)
    except RepoError as e:
        print_error(f"Failed to mirror: {e}")
        raise typer.Exit(code=1) from e

    print_success(f"Mirrored {len(new)} package(s).")
