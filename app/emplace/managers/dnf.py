"""DNF package manager descriptor.

yum is accepted as an alias, Fedora and RHEL symlink it to dnf.
"""

from emplace.models.descriptor import PackageManagerDescriptor, Script

DESCRIPTOR = PackageManagerDescriptor(
    full_name="Dandified YUM",
    commands=("dnf", "yum"),
    sub_commands=("install",),
    install_command="dnf install -y",
    needs_root=True,
    installed_check=Script("dnf info {name}"),
)
