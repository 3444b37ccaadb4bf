"""Show command implementation.

Lists the packages stored in the mirror repository.
"""

import json
from typing import Annotated

import typer

from emplace.cli.types import OutputFormat
from emplace.core.config import require_config
from emplace.core.repo import MirrorRepo, RepoError
from emplace.utils.formatting import (
    console,
    create_package_table,
    format_package_row,
    print_error,
    print_info,
)


def show(
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format: table or json.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """Show the mirrored packages.

    Examples:
        emplace show
        emplace show --format json
    """
    config = require_config()
    try:
        packages = MirrorRepo.open(config).read()
    except RepoError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if output_format is OutputFormat.JSON:
        typer.echo(json.dumps(packages.to_dict(), indent=2))
        return

    if not packages:
        print_info("No packages have been mirrored yet.")
        return

    table = create_package_table()
    for index, pkg in enumerate(packages, start=1):
        table.add_row(*format_package_row(index, pkg))
    console.print(table)
    print_info(f"{len(packages)} package(s) mirrored in {config.repo.url}")
