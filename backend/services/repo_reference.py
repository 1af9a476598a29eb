"""
Repository Reference Service - Parse hosting URLs and build display links
"""

from __future__ import annotations

import logging
import re

from models.git import Provider, RepositoryReference
from services.errors import UnrecognizedReference

logger = logging.getLogger(__name__)

PROVIDER_PATTERNS: dict[Provider, re.Pattern] = {
    Provider.GITHUB: re.compile(r"^(?:www\.)?github\.com/([^/]+)/([^/]+)(?:/.*)?$"),
    Provider.GITLAB: re.compile(r"^(?:www\.)?gitlab\.com/([^/]+)/([^/]+)(?:/.*)?$"),
}

PROVIDER_HOSTS: dict[Provider, str] = {
    Provider.GITHUB: "https://github.com",
    Provider.GITLAB: "https://gitlab.com",
}


def _normalize(url: str) -> str:
    """Drop protocol, trailing .git and trailing slash"""
    normalized = re.sub(r"^https?://", "", url.strip())
    normalized = re.sub(r"\.git$", "", normalized)
    return re.sub(r"/$", "", normalized)


def parse_reference(url: str) -> RepositoryReference | None:
    """Parse github.com/owner/repo or gitlab.com/owner/repo; None when unrecognized"""
    normalized = _normalize(url)
    if not normalized:
        return None

    for provider, pattern in PROVIDER_PATTERNS.items():
        match = pattern.match(normalized)
        if match:
            owner, repo = match.group(1), match.group(2)
            return RepositoryReference(provider=provider, owner=owner, repo=re.sub(r"\.git$", "", repo))

    logger.debug("Unrecognized repository URL: %r", url)
    return None


def require_reference(url: str) -> RepositoryReference:
    """Like parse_reference, but raise for unrecognized URLs"""
    reference = parse_reference(url)
    if reference is None:
        raise UnrecognizedReference(
            "Invalid repo URL. Use github.com/owner/repo or gitlab.com/owner/repo"
        )
    return reference


def repository_url(reference: RepositoryReference) -> str:
    return f"{PROVIDER_HOSTS[reference.provider]}/{reference.owner}/{reference.repo}"


def commit_url(reference: RepositoryReference, sha: str) -> str:
    """Web link to a commit on the reference's provider"""
    if reference.provider == Provider.GITLAB:
        return f"{repository_url(reference)}/-/commit/{sha}"
    return f"{repository_url(reference)}/commit/{sha}"
