"""npm package manager descriptor."""

from emplace.models.descriptor import PackageManagerDescriptor, Script

DESCRIPTOR = PackageManagerDescriptor(
    full_name="Node Package Manager",
    commands=("npm",),
    sub_commands=("install",),
    install_command="npm install -g",
    needs_root=False,
    installed_check=Script("npm list --depth=0 -g | grep -q {name}"),
    windows_installed_check=Script("npm list --depth=0 -g | findstr {name}"),
)
