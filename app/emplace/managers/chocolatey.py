"""Chocolatey package manager descriptor (Windows)."""

from emplace.models.descriptor import PackageManagerDescriptor, Script

DESCRIPTOR = PackageManagerDescriptor(
    full_name="Chocolatey",
    commands=("choco",),
    sub_commands=("install",),
    install_command="choco install -y",
    needs_root=True,
    installed_check=Script(
        "choco feature enable --name=\"'useEnhancedExitCodes'\" && "
        "choco search -le --no-color {name}"
    ),
)
