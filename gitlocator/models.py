"""Value types shared by the resolver, parser and URL builder."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator


class Provenance(Enum):
    """Hosting provider a remote URL belongs to."""

    UNKNOWN = "unknown"
    GITHUB = "github"
    GITLAB = "gitlab"


class LocatorConfig(BaseModel):
    """Names the locator looks for on disk and in the repository config."""

    model_config = ConfigDict(frozen=True)

    git_dir_name: str = ".git"
    remote_name: str = "origin"

    @field_validator("git_dir_name", "remote_name")
    @classmethod
    def _plain_name(cls, value: str) -> str:
        if not value or "/" in value or os.sep in value:
            raise ValueError("must be a non-empty name without path separators")
        return value


DEFAULT_CONFIG = LocatorConfig()


@dataclass(frozen=True)
class RemoteDescriptor:
    provenance: Provenance
    host: str
    organization: str
    repository: str


@dataclass(frozen=True)
class RepoLocation:
    """Repository root and the start directory relative to it."""

    root: str
    subdirectory: str = ""


@dataclass(frozen=True)
class ResolvedLocation:
    remote: RemoteDescriptor
    branch: str
    subdirectory: str
    url: str
    clean: bool
