"""pip3 package manager descriptor."""

from emplace.models.descriptor import PackageManagerDescriptor, Script, Single

DESCRIPTOR = PackageManagerDescriptor(
    full_name="Python 3 Pip",
    commands=("pip3",),
    sub_commands=("install",),
    install_command="pip3 install -q",
    needs_root=True,
    installed_check=Script("pip3 show -q {name}"),
    capture_flags=(Single("--user"),),
    invalidating_flags=("-r",),
)
