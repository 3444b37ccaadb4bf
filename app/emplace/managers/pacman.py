"""Pacman package manager descriptor.

Value-taking flags follow https://archlinux.org/pacman/pacman.8.html.
"""

from emplace.models.descriptor import PackageManagerDescriptor, Script

PACMAN_FLAGS_WITH_VALUES: tuple[str, ...] = (
    "-b",
    "--dbpath",
    "-r",
    "--root",
    "--arch",
    "--cachedir",
    "--color",
    "--config",
    "--gpgdir",
    "--hookdir",
    "--logfile",
    "--sysroot",
    "--assume-installed",
    "--print-format",
    "--ignore",
    "--ignoregroup",
    "--overwrite",
    "-o",
    "--owns",
    "-s",
    "--search",
    "--asdeps",
    "--asexplicit",
)

DESCRIPTOR = PackageManagerDescriptor(
    full_name="Pacman",
    commands=("pacman",),
    sub_commands=("-S",),
    install_command="pacman -S --noconfirm --quiet",
    needs_root=True,
    installed_check=Script("pacman -Q {name}"),
    known_flags_with_values=PACMAN_FLAGS_WITH_VALUES,
)
