"""Find the repository root enclosing a working directory."""

from __future__ import annotations

import logging
import os
from typing import Union

from gitlocator.errors import RepoNotFoundError
from gitlocator.models import DEFAULT_CONFIG, LocatorConfig, RepoLocation


LOGGER = logging.getLogger("gitlocator.repo_root")

PathLike = Union[str, os.PathLike]


def get_subdirectory(root: str, path: str) -> str:
    """Return the part of ``path`` below ``root`` without a leading separator."""

    return path[len(root):].lstrip("/" + os.sep)


def resolve_repo_root(start_path: PathLike, config: LocatorConfig = DEFAULT_CONFIG) -> RepoLocation:
    """Walk upward from ``start_path`` to the nearest directory holding a git dir.

    Only a directory named ``config.git_dir_name`` counts; a plain file of that
    name (worktrees, submodules) is skipped. The filesystem root is checked
    too before giving up.
    """

    start = os.path.abspath(os.fspath(start_path))
    candidate = start
    while True:
        marker = os.path.join(candidate, config.git_dir_name)
        if os.path.isdir(marker):
            LOGGER.debug("Found %s in %s", config.git_dir_name, candidate)
            return RepoLocation(root=candidate, subdirectory=get_subdirectory(candidate, start))

        parent = os.path.dirname(candidate)
        if parent == candidate:
            raise RepoNotFoundError(start)
        LOGGER.debug("No %s in %s, trying %s", config.git_dir_name, candidate, parent)
        candidate = parent
