"""cargo-binstall package manager descriptor.

Shares the `cargo` command word with plain Cargo but is only recognized
through its own `binstall` sub-command.
"""

from emplace.models.descriptor import DynamicValue, PackageManagerDescriptor, Script, Single

DESCRIPTOR = PackageManagerDescriptor(
    full_name="Cargo B(inary)Install",
    commands=("cargo",),
    sub_commands=("binstall",),
    install_command="cargo binstall --quiet",
    needs_root=False,
    installed_check=Script("cargo install --list | grep 'v[0-9]' | grep -q {name}"),
    windows_installed_check=Script("cargo install --list | findstr {name}"),
    known_flags_with_values=(
        "--log-level",
        "--github-token",
        "--root-certificates",
        "--min-tls-version",
        "--registry",
        "--index",
        "--root",
        "--install-path",
        "--disable-strategies",
        "--strategies",
        "--rate-limit",
        "--pkg-url",
        "--pkg-fmt",
        "--bin-dir",
        "--manifest-path",
    ),
    capture_flags=(
        Single("--git"),
        DynamicValue("--version"),
        DynamicValue("--targets"),
    ),
)
