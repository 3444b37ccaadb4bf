"""Main CLI application entry point.

Defines the Typer application, global options and logging setup.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from emplace import __version__
from emplace.cli.commands import catch, clean, history, init, install, show
from emplace.utils.formatting import console, err_console

# Create main Typer app
app = typer.Typer(
    name="emplace",
    help="Mirror installed software across machines.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"emplace version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route library logging through Rich on stderr.

    Args:
        verbose: Log everything from DEBUG up instead of warnings only.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=verbose, rich_tracebacks=True)],
        force=True,
    )


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
) -> None:
    """emplace - mirror the packages you install across machines.

    Hook emplace into your shell and every package installed with one of
    the supported package managers is recorded in a git repository, ready
    to be installed on your next machine.
    """
    configure_logging(verbose)
    console.quiet = quiet

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet


# Register commands
# Unquoted lines may carry -h for the package manager
app.command(
    name="catch",
    context_settings={"ignore_unknown_options": True, "help_option_names": ["--help"]},
)(catch.catch)
app.command(name="history")(history.history)
app.command(name="init")(init.init)
app.command(name="install")(install.install)
app.command(name="clean")(clean.clean)
app.command(name="show")(show.show)


if __name__ == "__main__":
    app()
