"""GNU Guix package manager descriptor."""

from emplace.models.descriptor import DynamicValue, PackageManagerDescriptor, Script

DESCRIPTOR = PackageManagerDescriptor(
    full_name="GNU Guix",
    commands=("guix",),
    sub_commands=("install",),
    install_command="guix install",
    needs_root=False,
    installed_check=Script('guix package --list-installed="^{name}$"'),
    known_flags_with_values=(
        "-L",
        "--load-path",
        "-v",
        "--verbosity",
        "--max-silent-time",
        "-c",
        "--cores",
        "-M",
        "--max-jobs",
        "--debug",
    ),
    capture_flags=(
        DynamicValue("-p"),
        DynamicValue("--profile"),
    ),
)
