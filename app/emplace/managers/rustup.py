"""Rustup component descriptor.

Only `rustup component add` is an install, toolchains are out of scope.
"""

from emplace.models.descriptor import DynamicValue, PackageManagerDescriptor, Script

DESCRIPTOR = PackageManagerDescriptor(
    full_name="Rustup Rust",
    commands=("rustup",),
    sub_commands=("component add",),
    install_command="rustup component add",
    needs_root=False,
    installed_check=Script("rustup component list | grep -q {name}"),
    windows_installed_check=Script("rustup component list | findstr {name}"),
    capture_flags=(
        DynamicValue("--target"),
        DynamicValue("--toolchain"),
    ),
)
