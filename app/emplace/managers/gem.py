"""RubyGems package manager descriptor."""

from emplace.models.descriptor import DynamicValue, PackageManagerDescriptor, Script

DESCRIPTOR = PackageManagerDescriptor(
    full_name="Ruby Gem",
    commands=("gem",),
    sub_commands=("install",),
    install_command="gem install",
    needs_root=False,
    installed_check=Script("gem -i {name}"),
    known_flags_with_values=(
        "-n",
        "--bindir",
        "--document",
        "--build-root",
        "-P",
        "--trust-policy",
        "-g",
        "--file",
        "--without",
        "-s",
        "--source",
        "-B",
        "--bulk-threshold",
        "-p",
        "--http-proxy",
        "--config-file",
    ),
    capture_flags=(
        DynamicValue("-i"),
        DynamicValue("--install-dir"),
        DynamicValue("--platform"),
        DynamicValue("-v"),
        DynamicValue("--version"),
    ),
)
