"""Package extraction from shell history files.

Supports plain bash history, zsh extended history (': <time>:<duration>;'
prefix) and fish history ('- cmd: ' prefix).
"""

import logging
import re
from collections.abc import Iterable
from pathlib import Path

from emplace.core.recognizer import recognize
from emplace.models.descriptor import HostOS
from emplace.models.package import Package

logger = logging.getLogger(__name__)

_ZSH_PREFIX = re.compile(r"^: \d+:\d+;")
_FISH_PREFIX = re.compile(r"^- cmd: ")


def normalize_line(line: str) -> str:
    """Collapse whitespace and strip shell-specific history prefixes."""
    line = " ".join(line.split())
    line = _ZSH_PREFIX.sub("", line, count=1)
    return _FISH_PREFIX.sub("", line, count=1)


def filter_lines(lines: Iterable[str], host: HostOS | None = None) -> list[Package]:
    """Extract the packages installed by history lines.

    Identical lines are only recognized once. Lines are processed in sorted
    order, so the result does not depend on when a command was run.

    Args:
        lines: Raw history lines.
        host: Target host family. If None, uses the running host.

    Returns:
        Recognized packages of all lines.
    """
    unique = sorted({normalize_line(line) for line in lines} - {""})
    packages: list[Package] = []
    for line in unique:
        packages.extend(recognize(line, host))
    logger.debug("Found %d package(s) in %d unique history line(s)", len(packages), len(unique))
    return packages


def read_history(path: Path) -> list[str]:
    """Read the lines of a history file.

    Undecodable bytes (zsh stores some characters metafied) are replaced
    instead of failing the whole import.

    Raises:
        OSError: If the file cannot be read.
    """
    return path.read_text(encoding="utf-8", errors="replace").splitlines()
