"""Cargo package manager descriptor.

Covers `cargo install`. Crates installed from a local checkout with
`--path` cannot be reinstalled elsewhere and are never recorded.
"""

from emplace.models.descriptor import DynamicValue, PackageManagerDescriptor, Script, Single

DESCRIPTOR = PackageManagerDescriptor(
    full_name="Cargo Rust",
    commands=("cargo",),
    sub_commands=("install",),
    install_command="cargo install --quiet",
    needs_root=False,
    installed_check=Script("cargo install --list | grep 'v[0-9]' | grep -q {name}"),
    windows_installed_check=Script("cargo install --list | findstr {name}"),
    known_flags_with_values=("-Z", "--version", "-j", "--jobs"),
    capture_flags=(
        Single("--git"),
        DynamicValue("--branch"),
        Single("+nightly"),
        Single("+stable"),
        Single("+beta"),
        Single("--no-default-features"),
        DynamicValue("--features"),
    ),
    invalidating_flags=("--path",),
)
