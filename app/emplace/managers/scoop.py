"""Scoop package manager descriptor (Windows)."""

from emplace.models.descriptor import PackageManagerDescriptor, Script

DESCRIPTOR = PackageManagerDescriptor(
    full_name="Scoop",
    commands=("scoop",),
    sub_commands=("install",),
    install_command="cmd /c scoop install",
    needs_root=True,
    installed_check=Script("scoop list | findstr {name}"),
)
