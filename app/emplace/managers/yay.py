"""Yay AUR helper descriptor.

Yay escalates on its own and refuses to run as root.
"""

from emplace.models.descriptor import PackageManagerDescriptor, Script

DESCRIPTOR = PackageManagerDescriptor(
    full_name="Yay",
    commands=("yay",),
    sub_commands=("-S",),
    install_command="yay -S --noconfirm --quiet",
    needs_root=False,
    installed_check=Script("yay -Q {name}"),
)
