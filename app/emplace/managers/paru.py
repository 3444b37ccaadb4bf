"""Paru AUR helper descriptor."""

from emplace.managers.pacman import PACMAN_FLAGS_WITH_VALUES
from emplace.models.descriptor import PackageManagerDescriptor, Script

DESCRIPTOR = PackageManagerDescriptor(
    full_name="Paru",
    commands=("paru",),
    sub_commands=("-S",),
    install_command="paru -S --noconfirm --quiet",
    needs_root=True,
    installed_check=Script("paru -Q {name}"),
    known_flags_with_values=(
        *PACMAN_FLAGS_WITH_VALUES,
        "--clonedir",
        "--makepkg",
        "--makepkgconf",
        "--pacman",
        "--pacman-conf",
        "--git",
        "--gitflags",
        "--gpg",
        "--gpgflags",
        "--fm",
        "--asp",
        "--mflags",
        "--bat",
        "--batflags",
        "--sudo",
        "--sudoflags",
        "--chrootflags",
        "--completioninterval",
        "--sortby",
        "--searchby",
        "--removemake",
        "--limit",
        "--redownload",
        "--rebuild",
        "--sudoloop",
        "--localrepo",
        "--chroot",
        "--sign",
        "--signdb",
    ),
)
