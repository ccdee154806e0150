"""Failure kinds raised while locating a repository's web URL."""

from __future__ import annotations


class LocatorError(Exception):
    """Base class for failures in the locate pipeline."""

    stage = "locate"


class RepoNotFoundError(LocatorError):
    stage = "repository root"

    def __init__(self, start_path: str) -> None:
        super().__init__(f"git repository not found at or above {start_path}")
        self.start_path = start_path


class RemoteNotFoundError(LocatorError):
    stage = "remote"

    def __init__(self, remote_name: str) -> None:
        super().__init__(f"remote {remote_name!r} not found or has no URLs")
        self.remote_name = remote_name


class MalformedRemoteURIError(LocatorError):
    stage = "remote URL"

    def __init__(self, uri: str) -> None:
        super().__init__(f"cannot parse remote URL {uri!r}")
        self.uri = uri


class UnsupportedRemoteError(LocatorError):
    stage = "remote URL"

    def __init__(self, host: str) -> None:
        super().__init__(f"unsupported remote repository host {host!r}")
        self.host = host
