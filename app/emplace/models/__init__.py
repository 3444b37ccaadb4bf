"""Data models for emplace.

Only the descriptor building blocks are re-exported here. Package models
depend on the manager registry and are imported from their own module.
"""

from emplace.models.descriptor import (
    AssumeInstalled,
    CaptureFlag,
    DynamicValue,
    FixedValue,
    HostOS,
    InstalledCheck,
    PackageManagerDescriptor,
    PathExists,
    Script,
    Single,
)

__all__ = [
    "AssumeInstalled",
    "CaptureFlag",
    "DynamicValue",
    "FixedValue",
    "HostOS",
    "InstalledCheck",
    "PackageManagerDescriptor",
    "PathExists",
    "Script",
    "Single",
]
