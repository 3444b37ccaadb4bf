"""Shared display and selection helpers for CLI commands.

Commands that act on several packages show them as a numbered list and
let the user pick a subset by number.
"""

import re

import typer

from emplace.models.package import Package, PackageSet
from emplace.utils.formatting import console, format_package, print_warning

_RANGE = re.compile(r"^(\d+)-(\d+)$")

SELECTION_HINT = "Numbers or ranges (e.g. 1 3-5), 'all' or 'none'"


def print_package_list(packages: PackageSet, numbered: bool = False) -> None:
    """Print packages one per line.

    Args:
        packages: Packages to print.
        numbered: Prefix each line with its one-based index instead of a dash.
    """
    for index, pkg in enumerate(packages, start=1):
        marker = f"[muted]{index:>3})[/]" if numbered else "-"
        console.print(f"{marker} {format_package(pkg)}")


def confirm_mirror(packages: PackageSet) -> bool:
    """Show packages about to be mirrored and ask for confirmation."""
    print_package_list(packages)
    if len(packages) == 1:
        return typer.confirm("Mirror this command?", default=True)
    return typer.confirm(f"Mirror these {len(packages)} commands?", default=True)


def parse_selection(answer: str, count: int) -> list[int]:
    """Parse a selection of one-based indices.

    Accepts 'all', 'none', an empty answer (none), and numbers or ranges
    separated by spaces or commas, e.g. '1 3-5,7'.

    Args:
        answer: Text typed by the user.
        count: Number of selectable items.

    Returns:
        Sorted, unique zero-based indices.

    Raises:
        ValueError: If a number is out of range or not understood.
    """
    answer = answer.strip().lower()
    if answer == "all":
        return list(range(count))
    if answer in ("", "none"):
        return []

    selected: set[int] = set()
    for part in re.split(r"[\s,]+", answer):
        match = _RANGE.match(part)
        if match:
            first, last = int(match.group(1)), int(match.group(2))
        elif part.isdigit():
            first = last = int(part)
        else:
            msg = f"Not a number or range: {part!r}"
            raise ValueError(msg)

        if first < 1 or last > count or first > last:
            msg = f"Selection {part!r} is outside 1-{count}"
            raise ValueError(msg)
        selected.update(range(first - 1, last))
    return sorted(selected)


def select_packages(packages: PackageSet, prompt: str, default: str = "none") -> PackageSet:
    """Let the user pick packages from a numbered list.

    Args:
        packages: Packages to choose from.
        prompt: Question shown above the list.
        default: Answer used when the user just presses enter.

    Returns:
        The selected packages in list order.
    """
    console.print(f"[bold_header]{prompt}[/]")
    print_package_list(packages, numbered=True)

    while True:
        answer: str = typer.prompt(SELECTION_HINT, default=default)
        try:
            indices = parse_selection(answer, len(packages))
        except ValueError as e:
            print_warning(str(e))
            continue
        selected: list[Package] = [packages[index] for index in indices]
        return PackageSet(selected)
