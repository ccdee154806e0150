"""Format browsable tree URLs for GitHub and GitLab repositories."""

from __future__ import annotations

import os

from gitlocator.errors import UnsupportedRemoteError
from gitlocator.models import Provenance


SSH_ALIAS_SEGMENT = "-ssh."


def canonical_host(host: str) -> str:
    """Map an SSH-only alias such as ``gitlab-ssh.example.com`` to its web host."""

    return host.replace(SSH_ALIAS_SEGMENT, ".", 1)


def _url_path(subdirectory: str) -> str:
    if os.sep != "/":
        subdirectory = subdirectory.replace(os.sep, "/")
    return subdirectory


def build(provenance: Provenance, host: str, org: str, repo: str, branch: str, subdirectory: str) -> str:
    path = _url_path(subdirectory)
    if provenance is Provenance.GITHUB:
        return f"https://{host}/{org}/{repo}/tree/{branch}/{path}"
    if provenance is Provenance.GITLAB:
        return f"https://{canonical_host(host)}/{org}/{repo}/-/tree/{branch}/{path}"
    raise UnsupportedRemoteError(host)
