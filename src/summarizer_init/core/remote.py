"""Repository URL helpers for the secrets page."""

from __future__ import annotations

import re
from typing import Protocol

GITHUB_BASE_URL = "https://github.com"

# owner/repo as accepted by the manual fallback prompt.
_SLUG_RE = re.compile(r"^[a-zA-Z_-]+/[a-zA-Z-]+$")
_SCP_SSH_RE = re.compile(r"^git@(?P<host>[^:/]+):(?P<path>.+)$")
_SSH_URL_RE = re.compile(r"^ssh://(?:[^@/]+@)?(?P<host>[^/:]+)(?::\d+)?/(?P<path>.+)$")
_USERINFO_RE = re.compile(r"^(?P<scheme>https?://)[^/@]+@")


class RemoteSource(Protocol):
    def remote_url(self, remote: str = "origin") -> str: ...


def use_https(url: str) -> str:
    """Normalize a git remote URL into the repository's HTTPS web URL.

    ``git@github.com:owner/repo.git`` and ``ssh://git@github.com/owner/repo``
    both become ``https://github.com/owner/repo``. Credentials embedded in
    HTTPS remotes are dropped.
    """
    candidate = url.strip()
    for pattern in (_SCP_SSH_RE, _SSH_URL_RE):
        match = pattern.match(candidate)
        if match:
            candidate = f"https://{match.group('host')}/{match.group('path')}"
            break
    candidate = _USERINFO_RE.sub(r"\g<scheme>", candidate)
    candidate = candidate.rstrip("/")
    if candidate.endswith(".git"):
        candidate = candidate[: -len(".git")]
    return candidate


def validate_repo_slug(value: str) -> bool | str:
    if _SLUG_RE.match(value.strip()):
        return True
    return "Use the format owner/repo (e.g. some-user/fluffy-potato)"


def repo_url_from_slug(slug: str) -> str:
    candidate = slug.strip()
    if validate_repo_slug(candidate) is not True:
        raise ValueError(f"invalid repository name: {slug!r}")
    return f"{GITHUB_BASE_URL}/{candidate}"


def infer_repo_url(source: RemoteSource) -> str:
    """Read the ``origin`` remote and return its HTTPS URL.

    Propagates :class:`RemoteURLError` from *source*.
    """
    return use_https(source.remote_url())


def secrets_page_url(repo_url: str) -> str:
    return f"{repo_url.rstrip('/')}/settings/secrets/actions/new"


__all__ = [
    "GITHUB_BASE_URL",
    "RemoteSource",
    "infer_repo_url",
    "repo_url_from_slug",
    "secrets_page_url",
    "use_https",
    "validate_repo_slug",
]
