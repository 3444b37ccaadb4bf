"""Snap package manager descriptor."""

from emplace.models.descriptor import PackageManagerDescriptor, Script

DESCRIPTOR = PackageManagerDescriptor(
    full_name="Snap",
    commands=("snap",),
    sub_commands=("install",),
    install_command="snap install",
    needs_root=True,
    installed_check=Script("snap list {name}"),
)
