"""Repository reference and commit rendering models"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel


class Provider(str, Enum):
    GITHUB = "github"
    GITLAB = "gitlab"


class FileStatus(str, Enum):
    ADDED = "added"
    REMOVED = "removed"
    RENAMED = "renamed"
    MODIFIED = "modified"


class LineKind(str, Enum):
    ADDED = "added"
    REMOVED = "removed"
    NEUTRAL = "neutral"


class RepositoryReference(BaseModel):
    """Owner and repo of a hosted repository"""

    provider: Provider
    owner: str
    repo: str


class PatchLine(BaseModel):
    """A single rendered line of a patch hunk"""

    kind: LineKind
    text: str


class FileDiffEntry(BaseModel):
    """One changed file of a commit"""

    path: str
    status: FileStatus = FileStatus.MODIFIED
    patch_text: str = ""
    additions: int | None = None
    deletions: int | None = None
    lines: list[PatchLine] = []


class CommitSummary(BaseModel):
    """Display-ready view of a commit JSON document"""

    sha: str
    short_sha: str
    message: str
    title: str  # first line of message
    author_name: str | None = None
    author_login: str | None = None
    date: str | None = None
    html_url: str | None = None
    files: list[FileDiffEntry] = []
    additions: int = 0
    deletions: int = 0


class ReferenceRequest(BaseModel):
    """Request to parse a repository URL"""

    url: str


class ReferenceResult(BaseModel):
    """Parsed reference with display links"""

    reference: RepositoryReference
    repository_url: str


class ReferenceResponse(BaseModel):
    """Parse result, or the reason there is none"""

    result: ReferenceResult | None = None
    error: str | None = None


class CommitRenderRequest(BaseModel):
    """Already fetched commit JSON, plus the GitLab diff list when it came separately"""

    commit: dict[str, Any]
    gitlab_diff: list[dict[str, Any]] | None = None
    repository_url: str | None = None


class CommitRenderResponse(BaseModel):
    """Rendered commit, or the reason there is none"""

    result: CommitSummary | None = None
    commit_url: str | None = None
    error: str | None = None
