"""APT package manager descriptor.

Debian's Advanced Package Tool, typed either as apt or apt-get.
"""

from emplace.models.descriptor import FixedValue, PackageManagerDescriptor, Script

DESCRIPTOR = PackageManagerDescriptor(
    full_name="Advanced Package Tool",
    commands=("apt", "apt-get"),
    sub_commands=("install",),
    install_command="apt-get install -y",
    needs_root=True,
    installed_check=Script("dpkg -s {name}"),
    known_flags_with_values=("-c", "--config-file", "-o", "--option", "-q", "--quiet"),
    # Packages pulled from experimental must be reinstalled from there too
    capture_flags=(FixedValue("-t", "experimental"),),
)
