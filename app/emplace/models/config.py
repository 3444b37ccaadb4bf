"""Configuration models for emplace.

This module defines the Pydantic models representing config.toml, which
tells emplace where the mirror repository lives.
"""

from pathlib import Path, PurePosixPath
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from emplace.core.paths import get_default_repo_dir


class RepoConfig(BaseModel):
    """Remote mirror repository settings.

    Attributes:
        url: Git remote the mirror file is pushed to.
        branch: Branch holding the mirror file.
        file: Mirror file path relative to the repository root.
    """

    model_config = ConfigDict(extra="forbid")

    url: Annotated[str, Field(min_length=1, description="Git remote URL")]
    branch: Annotated[str, Field(min_length=1, description="Mirror branch")] = "master"
    file: Annotated[str, Field(min_length=1, description="Mirror file in the repository")] = (
        ".emplace"
    )

    @field_validator("url", "branch")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject values that are only whitespace."""
        if not v.strip():
            msg = "value cannot be blank"
            raise ValueError(msg)
        return v.strip()

    @field_validator("file")
    @classmethod
    def validate_relative_file(cls, v: str) -> str:
        """Ensure the mirror file stays inside the repository."""
        path = PurePosixPath(v)
        if path.is_absolute() or ".." in path.parts:
            msg = f"mirror file must be a relative path inside the repository: {v}"
            raise ValueError(msg)
        return v


class Config(BaseModel):
    """Complete emplace configuration.

    Attributes:
        repo_directory: Local checkout of the mirror repository.
        repo: Remote repository settings.
    """

    model_config = ConfigDict(extra="forbid")

    repo_directory: Annotated[
        Path,
        Field(default_factory=get_default_repo_dir, description="Local mirror checkout"),
    ]
    repo: Annotated[RepoConfig, Field(description="Mirror repository settings")]

    @field_validator("repo_directory")
    @classmethod
    def expand_repo_directory(cls, v: Path) -> Path:
        """Expand '~' in the checkout directory."""
        return v.expanduser()

    @property
    def mirror_path(self) -> Path:
        """Path of the mirror file inside the local checkout."""
        return self.repo_directory / self.repo.file
