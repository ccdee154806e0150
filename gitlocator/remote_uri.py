"""Classify git remote URLs by hosting provider and split them into parts.

Two remote shapes are understood::

    git@<host>:<org>/<repo>[.git]
    https://<host>/<org>/<repo>[.git]

GitHub and GitLab remotes share these shapes, so a single pattern serves
both providers. Everything after the organization (GitLab subgroups
included) is kept as the repository path.
"""

from __future__ import annotations

import logging
import re
from typing import Tuple

from gitlocator.errors import MalformedRemoteURIError
from gitlocator.models import Provenance, RemoteDescriptor


LOGGER = logging.getLogger("gitlocator.remote_uri")

# First match wins.
PROVENANCE_MARKERS: Tuple[Tuple[str, Provenance], ...] = (
    ("github.com", Provenance.GITHUB),
    ("gitlab.com", Provenance.GITLAB),
    # SSH-only alias used by self-hosted GitLab instances
    ("gitlab-ssh", Provenance.GITLAB),
)

REMOTE_PATTERN = re.compile(
    r"(?P<prefix>git@|https://(?:[^@/]+@)?)"
    r"(?P<host>[^:/@]+)[:/]"
    r"(?P<org>[^/]+)/"
    r"(?P<repo>.+?)"
    r"(?:\.git)?/?$"
)


def classify(uri: str) -> Provenance:
    for marker, provenance in PROVENANCE_MARKERS:
        if marker in uri:
            return provenance
    return Provenance.UNKNOWN


def decompose(uri: str) -> Tuple[str, str, str]:
    """Return ``(host, organization, repository)`` for a remote URL."""

    match = REMOTE_PATTERN.search(uri)
    if match is None:
        raise MalformedRemoteURIError(uri)
    return match.group("host"), match.group("org"), match.group("repo")


def parse_remote(uri: str) -> RemoteDescriptor:
    host, org, repo = decompose(uri)
    provenance = classify(uri)
    LOGGER.debug("Parsed %s as %s host=%s org=%s repo=%s", uri, provenance.value, host, org, repo)
    return RemoteDescriptor(provenance=provenance, host=host, organization=org, repository=repo)
