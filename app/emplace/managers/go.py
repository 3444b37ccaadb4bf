"""Go modules descriptor."""

from emplace.models.descriptor import PackageManagerDescriptor, Script

DESCRIPTOR = PackageManagerDescriptor(
    full_name="Go",
    commands=("go",),
    sub_commands=("get",),
    install_command="go get -u",
    needs_root=False,
    installed_check=Script("go list ... | grep -q {name}"),
)
