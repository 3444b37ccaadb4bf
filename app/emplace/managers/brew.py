"""Homebrew package manager descriptor."""

from emplace.models.descriptor import PackageManagerDescriptor, Script, Single

DESCRIPTOR = PackageManagerDescriptor(
    full_name="Homebrew",
    commands=("brew",),
    sub_commands=("install",),
    install_command="brew install",
    needs_root=False,
    installed_check=Script("brew list {name}"),
    known_flags_with_values=("--env", "--cc"),
    capture_flags=(
        Single("--cask"),
        Single("--devel"),
        Single("--HEAD"),
        Single("--fetch-HEAD"),
    ),
)
