"""Recognition of package installs on shell command lines.

A line is first matched against every manager's command words. For each
matching manager the text after the command word is searched for an
install sub-command, then the remaining tokens are sorted into package
names, captured flags and noise according to the manager's descriptor.

Recognition never fails: a line that installs nothing yields no packages.
"""

import logging
import re
from collections.abc import Iterator
from functools import lru_cache

from emplace.managers import PackageManager
from emplace.models.descriptor import (
    DynamicValue,
    FixedValue,
    HostOS,
    PackageManagerDescriptor,
    Single,
)
from emplace.models.package import Package

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _token_pattern(word: str) -> re.Pattern[str]:
    """Match a word standing as its own whitespace-delimited token."""
    return re.compile(rf"(?<!\S){re.escape(word)}(?!\S)")


@lru_cache(maxsize=None)
def _command_pattern(command: str) -> re.Pattern[str]:
    """Match a command word followed by at least one argument separator."""
    return re.compile(rf"(?<!\S){re.escape(command)}\s")


@lru_cache(maxsize=None)
def _sub_command_pattern(sub_command: str) -> re.Pattern[str]:
    """Match a sub-command whose words may be separated by any whitespace."""
    words = r"\s+".join(re.escape(word) for word in sub_command.split())
    return re.compile(rf"(?<!\S){words}(?!\S)")


def detects(line: str, host: HostOS | None = None) -> bool:
    """Check whether a line invokes any known package manager.

    Args:
        line: Raw shell command line.
        host: Target host family. If None, uses the running host.

    Returns:
        True if a command word of some manager appears as a whole token.
    """
    return next(candidates(line, host), None) is not None


def candidates(line: str, host: HostOS | None = None) -> Iterator[PackageManager]:
    """Yield every manager whose command word appears in a line.

    Managers sharing a command word (cargo and cargo-binstall) are all
    yielded, in enumeration order.
    """
    host = host or HostOS.current()
    for manager in PackageManager:
        commands = manager.descriptor.commands_for(host)
        if any(_token_pattern(command).search(line) for command in commands):
            yield manager


def extract(manager: PackageManager, line: str, host: HostOS | None = None) -> list[Package]:
    """Extract the packages a line installs with one manager.

    Args:
        manager: Manager whose grammar is applied.
        line: Raw shell command line.
        host: Target host family. If None, uses the running host.

    Returns:
        Recognized packages in the order they appear, each carrying every
        flag captured on the line. Empty when the line is not an install
        or carries an invalidating flag.
    """
    descriptor = manager.descriptor
    packages: list[Package] = []

    for command in descriptor.commands_for(host or HostOS.current()):
        match = _command_pattern(command).search(line)
        if match is None:
            continue

        arguments = _strip_sub_command(descriptor, line[match.end() :])
        if arguments is None:
            continue

        parsed = _parse_arguments(descriptor, arguments.split())
        if parsed is None:
            logger.debug("Invalidating flag for %s in %r", manager.value, line)
            return []

        names, flags = parsed
        packages.extend(Package(source=manager, name=name, flags=flags) for name in names)

    return packages


def recognize(line: str, host: HostOS | None = None) -> list[Package]:
    """Extract packages for every candidate manager of a line.

    Args:
        line: Raw shell command line.
        host: Target host family. If None, uses the running host.

    Returns:
        Packages of all candidates concatenated in enumeration order.
    """
    host = host or HostOS.current()
    packages: list[Package] = []
    for manager in candidates(line, host):
        packages.extend(extract(manager, line, host))
    if packages:
        logger.debug("Recognized %d package(s) in %r", len(packages), line)
    return packages


def _strip_sub_command(descriptor: PackageManagerDescriptor, arguments: str) -> str | None:
    """Remove the first declared sub-command found in the arguments.

    Only that one occurrence is removed, later repetitions of the same word
    are read as ordinary arguments.

    Returns:
        The arguments without the sub-command, or None if none occurs.
    """
    for sub_command in descriptor.sub_commands:
        match = _sub_command_pattern(sub_command).search(arguments)
        if match is not None:
            return f"{arguments[: match.start()]} {arguments[match.end() :]}"
    return None


def _parse_arguments(
    descriptor: PackageManagerDescriptor,
    tokens: list[str],
) -> tuple[list[str], tuple[str, ...]] | None:
    """Sort argument tokens into package names and captured flags.

    Returns:
        Tuple of (names, flags), or None if an invalidating flag occurs.
    """
    names: list[str] = []
    flags: list[str] = []

    index = 0
    while index < len(tokens):
        token = tokens[index]
        index += 1

        if token.startswith(("-", "+")):
            if token in descriptor.invalidating_flags:
                return None

            capture = next((c for c in descriptor.capture_flags if c.flag == token), None)
            if capture is not None:
                following = tokens[index] if index < len(tokens) else None
                if isinstance(capture, Single):
                    flags.append(token)
                elif isinstance(capture, FixedValue):
                    # A different value stays in place as a regular argument
                    if following == capture.value:
                        flags.append(f"{token} {following}")
                        index += 1
                elif isinstance(capture, DynamicValue) and following is not None:
                    flags.append(f"{token} {following}")
                    index += 1
            elif token in descriptor.known_flags_with_values:
                index += 1
        elif token[0].isalnum():
            names.append(token)

    return names, tuple(flags)
