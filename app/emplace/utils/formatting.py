"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from emplace.core.theme import get_theme

if TYPE_CHECKING:
    from emplace.models.package import Package


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def format_package(pkg: Package) -> str:
    """Format a package with flags, name and manager as Rich markup.

    Args:
        pkg: The package to format.

    Returns:
        Markup like '[flag]--user[/] [package]test[/] [manager](Python Pip)[/]'.
    """
    parts = [f"[flag]{escape(flag)}[/]" for flag in pkg.flags]
    parts.append(f"[package]{escape(pkg.name)}[/]")
    parts.append(f"[manager]({escape(pkg.source.full_name)})[/]")
    return " ".join(parts)


def create_package_table(title: str = "Mirrored Packages") -> Table:
    """Create a pre-configured table for displaying packages.

    Args:
        title: Table title.

    Returns:
        Rich Table with Manager, Package and Flags columns.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
        row_styles=["", "on grey7"],
    )
    table.add_column("#", style="muted", justify="right")
    table.add_column("Manager", style="manager", no_wrap=True)
    table.add_column("Package", style="package", no_wrap=True)
    table.add_column("Flags", style="flag")
    return table


def format_package_row(index: int, pkg: Package) -> tuple[str, str, str, str]:
    """Format a package as a table row.

    Args:
        index: One-based position shown in the first column.
        pkg: The package to format.

    Returns:
        Tuple of (index, manager, name, flags).
    """
    return (str(index), pkg.source.value, escape(pkg.name), escape(" ".join(pkg.flags)))


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
