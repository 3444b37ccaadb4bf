"""Zypper package manager descriptor.

openSUSE ships zin and zinr as shorthands, both are treated as
invocation words of zypper itself.
"""

from emplace.models.descriptor import PackageManagerDescriptor, Script

DESCRIPTOR = PackageManagerDescriptor(
    full_name="Command-line interface to ZYpp system management library",
    commands=("zypper", "zin", "zinr"),
    sub_commands=("install", "in", "inr"),
    install_command="zypper install -y",
    needs_root=True,
    installed_check=Script("zypper info {name}"),
    known_flags_with_values=("-c", "--config", "-q", "--quiet"),
)
