"""Init command implementation.

Prints the hook script that connects a shell to `emplace catch`.
"""

import shutil
from typing import Annotated

import typer

from emplace.cli.types import ShellChoice
from emplace.core.shell_init import init_script


def _executable() -> str:
    """Locate the emplace executable the hook should call."""
    return shutil.which("emplace") or "emplace"


def init(
    shell: Annotated[
        ShellChoice,
        typer.Argument(help="Shell to generate the hook for.", case_sensitive=False),
    ],
) -> None:
    """Print the shell hook script.

    Add the output to your shell's startup file:

    Examples:
        echo 'eval "$(emplace init bash)"' >> ~/.bashrc
        echo 'eval "$(emplace init zsh)"' >> ~/.zshrc
        echo 'emplace init fish | source' >> ~/.config/fish/config.fish
    """
    typer.echo(init_script(shell.value, _executable()), nl=False)
