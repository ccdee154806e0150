"""Locate the web page for the directory a developer is working in.

``GitLocation`` is the capability callers depend on. ``GitLocal`` backs it
with a local clone opened through GitPython; other backends (for example a
hosting API that needs no clone) can implement the same two methods.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from git import Repo

from gitlocator.canonical_url import build
from gitlocator.errors import RemoteNotFoundError, UnsupportedRemoteError
from gitlocator.models import DEFAULT_CONFIG, LocatorConfig, Provenance, RemoteDescriptor, ResolvedLocation
from gitlocator.remote_uri import parse_remote
from gitlocator.repo_root import PathLike, resolve_repo_root


LOGGER = logging.getLogger("gitlocator.locator")


class GitLocation(ABC):
    @abstractmethod
    def get_url(self) -> str:
        """Canonical web URL of the tracked branch and subdirectory."""

    @abstractmethod
    def is_clean(self) -> bool:
        """Whether the working tree has no uncommitted changes."""


class GitLocal(GitLocation):
    """``GitLocation`` backed by a local working tree."""

    def __init__(self, repo: Repo, subdirectory: str, config: LocatorConfig = DEFAULT_CONFIG) -> None:
        self.repo = repo
        self.subdirectory = subdirectory
        self.config = config

    def remote_uri(self) -> str:
        """Return the first URL configured for the tracked remote."""

        name = self.config.remote_name
        reader = self.repo.config_reader()
        section = f'remote "{name}"'
        if not reader.has_section(section) or not reader.has_option(section, "url"):
            raise RemoteNotFoundError(name)
        urls = reader.get_values(section, "url")
        if not urls:
            raise RemoteNotFoundError(name)
        return str(urls[0])

    def branch(self) -> str:
        head = self.repo.head
        if head.is_detached:
            # a commit id is a valid tree reference on both hosts
            LOGGER.debug("HEAD is detached, using commit %s", head.commit.hexsha)
            return head.commit.hexsha
        return self.repo.active_branch.name

    def remote(self) -> RemoteDescriptor:
        uri = self.remote_uri()
        descriptor = parse_remote(uri)
        if descriptor.provenance is Provenance.UNKNOWN:
            raise UnsupportedRemoteError(descriptor.host)
        return descriptor

    def _tree_url(self, remote: RemoteDescriptor, branch: str) -> str:
        return build(
            remote.provenance,
            remote.host,
            remote.organization,
            remote.repository,
            branch,
            self.subdirectory,
        )

    def resolve(self) -> ResolvedLocation:
        """Collect remote, branch, URL and cleanliness in one snapshot."""

        remote = self.remote()
        branch = self.branch()
        return ResolvedLocation(
            remote=remote,
            branch=branch,
            subdirectory=self.subdirectory,
            url=self._tree_url(remote, branch),
            clean=self.is_clean(),
        )

    def get_url(self) -> str:
        return self._tree_url(self.remote(), self.branch())

    def is_clean(self) -> bool:
        return not self.repo.is_dirty(untracked_files=True)


def new_git_locator(cwd: PathLike, config: LocatorConfig = DEFAULT_CONFIG) -> GitLocation:
    """Open the repository enclosing ``cwd``.

    GitPython errors raised while opening the repository propagate as-is.
    """

    location = resolve_repo_root(cwd, config)
    LOGGER.debug("Opening repository at %s (subdirectory %r)", location.root, location.subdirectory)
    repo = Repo(location.root)
    return GitLocal(repo, location.subdirectory, config)
