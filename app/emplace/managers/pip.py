"""pip package manager descriptor.

Requirement files (`-r`) are project state, not something to mirror.
"""

from emplace.models.descriptor import PackageManagerDescriptor, Script, Single

DESCRIPTOR = PackageManagerDescriptor(
    full_name="Python Pip",
    commands=("pip",),
    sub_commands=("install",),
    install_command="pip install -q",
    needs_root=True,
    installed_check=Script("pip show -q {name}"),
    capture_flags=(Single("--user"),),
    invalidating_flags=("-r",),
)
