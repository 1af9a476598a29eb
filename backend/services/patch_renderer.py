"""
Patch Renderer Service - Classify changed files and render patch text

Works on commit JSON that has already been fetched from the hosting API.
"""

from __future__ import annotations

import logging
from typing import Any

from models.git import CommitSummary, FileDiffEntry, FileStatus, LineKind, PatchLine

logger = logging.getLogger(__name__)

SHORT_SHA_LENGTH = 7


def _mapping(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _text(value: Any) -> str | None:
    """Strings pass through; numbers, lists and the like count as absent"""
    return value if isinstance(value, str) else None


def short_sha(sha: str) -> str:
    return sha[:SHORT_SHA_LENGTH]


def classify_file(entry: dict[str, Any]) -> FileStatus:
    """Status field when it is a known status, otherwise modified"""
    status = entry.get("status")
    try:
        return FileStatus(status)
    except ValueError:
        return FileStatus.MODIFIED


def file_path(entry: dict[str, Any]) -> str:
    return (
        _text(entry.get("filename"))
        or _text(entry.get("new_path"))
        or _text(entry.get("old_path"))
        or "unknown"
    )


def classify_line(line: str) -> LineKind:
    if line.startswith("+") and not line.startswith("+++"):
        return LineKind.ADDED
    if line.startswith("-") and not line.startswith("---"):
        return LineKind.REMOVED
    return LineKind.NEUTRAL


def render_patch(patch_text: str) -> list[PatchLine]:
    """One PatchLine per newline-separated line; empty lines render as a single blank"""
    if not patch_text:
        return []
    return [PatchLine(kind=classify_line(line), text=line or " ") for line in patch_text.split("\n")]


def count_changes(patch_text: str) -> tuple[int, int]:
    """(additions, deletions) counted from patch lines"""
    additions = deletions = 0
    for line in patch_text.split("\n"):
        kind = classify_line(line)
        if kind == LineKind.ADDED:
            additions += 1
        elif kind == LineKind.REMOVED:
            deletions += 1
    return additions, deletions


def build_entry(entry: dict[str, Any]) -> FileDiffEntry:
    """FileDiffEntry from a GitHub-style `files` item"""
    patch_text = _text(entry.get("patch")) or ""
    return FileDiffEntry(
        path=file_path(entry),
        status=classify_file(entry),
        patch_text=patch_text,
        additions=entry.get("additions"),
        deletions=entry.get("deletions"),
        lines=render_patch(patch_text),
    )


def normalize_gitlab_diff(item: dict[str, Any]) -> FileDiffEntry:
    """FileDiffEntry from a GitLab commit diff record"""
    patch_text = _text(item.get("diff")) or ""
    additions, deletions = count_changes(patch_text)

    if item.get("new_file"):
        status = FileStatus.ADDED
    elif item.get("deleted_file"):
        status = FileStatus.REMOVED
    elif item.get("renamed_file"):
        status = FileStatus.RENAMED
    else:
        status = FileStatus.MODIFIED

    return FileDiffEntry(
        path=file_path(item),
        status=status,
        patch_text=patch_text,
        additions=additions,
        deletions=deletions,
        lines=render_patch(patch_text),
    )


def summarize_commit(
    commit: dict[str, Any],
    gitlab_diff: list[dict[str, Any]] | None = None,
) -> CommitSummary:
    """Display view of a commit. GitLab sends its diff list separately."""
    sha = _text(commit.get("sha")) or _text(commit.get("id")) or ""
    details = _mapping(commit.get("commit"))
    commit_author = _mapping(details.get("author"))
    account = _mapping(commit.get("author"))

    # GitLab puts message and author at the top level
    message = _text(details.get("message")) or _text(commit.get("message")) or ""
    author_name = _text(commit_author.get("name")) or _text(commit.get("author_name"))
    date = _text(commit_author.get("date")) or _text(commit.get("authored_date"))

    if gitlab_diff is not None:
        files = [normalize_gitlab_diff(item) for item in gitlab_diff if isinstance(item, dict)]
    else:
        files = [build_entry(entry) for entry in commit.get("files") or [] if isinstance(entry, dict)]

    summary = CommitSummary(
        sha=sha,
        short_sha=short_sha(sha),
        message=message,
        title=message.split("\n", 1)[0],
        author_name=author_name,
        author_login=_text(account.get("login")),
        date=date,
        html_url=_text(commit.get("html_url")) or _text(commit.get("web_url")),
        files=files,
        additions=sum(f.additions or 0 for f in files),
        deletions=sum(f.deletions or 0 for f in files),
    )
    logger.debug("Rendered commit %s with %d files", summary.short_sha, len(files))
    return summary
