"""Nix package manager descriptor.

nix-env marks installs with a flag instead of a word, so the
sub-commands here are the install flags themselves.
"""

from emplace.models.descriptor import DynamicValue, PackageManagerDescriptor, Script

DESCRIPTOR = PackageManagerDescriptor(
    full_name="Nix",
    commands=("nix-env",),
    sub_commands=("-i", "--install", "-iA"),
    install_command="nix-env -iA -g",
    needs_root=False,
    installed_check=Script("nix-env -q | grep -q {name}"),
    capture_flags=(DynamicValue("-f"),),
)
