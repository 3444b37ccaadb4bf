"""RUA AUR helper descriptor."""

from emplace.models.descriptor import PackageManagerDescriptor, Script

DESCRIPTOR = PackageManagerDescriptor(
    full_name="RUA",
    commands=("rua",),
    sub_commands=("install",),
    install_command="rua install",
    needs_root=False,
    installed_check=Script("rua search {name}"),
)
