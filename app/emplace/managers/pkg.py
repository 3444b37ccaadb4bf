"""FreeBSD pkg package manager descriptor."""

from emplace.models.descriptor import DynamicValue, PackageManagerDescriptor, Script

DESCRIPTOR = PackageManagerDescriptor(
    full_name="Pkg",
    commands=("pkg",),
    sub_commands=("install",),
    install_command="pkg install -y",
    needs_root=True,
    installed_check=Script("pkg info -e {name}"),
    capture_flags=(
        DynamicValue("--repository"),
        DynamicValue("-r"),
    ),
)
