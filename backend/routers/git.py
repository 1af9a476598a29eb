"""Repository and commit rendering API endpoints"""

from __future__ import annotations

import logging

from fastapi import APIRouter
from pydantic import ValidationError

from models.git import (
    CommitRenderRequest,
    CommitRenderResponse,
    ReferenceRequest,
    ReferenceResponse,
    ReferenceResult,
)
from services.errors import ToolError
from services.patch_renderer import summarize_commit
from services.repo_reference import commit_url, parse_reference, repository_url, require_reference

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/reference", response_model=ReferenceResponse)
async def parse_repository_reference(request: ReferenceRequest) -> ReferenceResponse:
    """Parse a github.com / gitlab.com repository URL"""
    try:
        reference = require_reference(request.url)
    except ToolError as e:
        return ReferenceResponse(error=str(e))

    return ReferenceResponse(
        result=ReferenceResult(reference=reference, repository_url=repository_url(reference))
    )


@router.post("/commit/render", response_model=CommitRenderResponse)
async def render_commit(request: CommitRenderRequest) -> CommitRenderResponse:
    """Render an already fetched commit: file statuses and patch lines"""
    try:
        summary = summarize_commit(request.commit, request.gitlab_diff)
    except (ValidationError, TypeError) as e:
        logger.warning("Malformed commit JSON: %s", e)
        return CommitRenderResponse(error="Malformed commit data")

    link = summary.html_url
    if request.repository_url and summary.sha:
        reference = parse_reference(request.repository_url)
        if reference is not None:
            link = commit_url(reference, summary.sha)

    return CommitRenderResponse(result=summary, commit_url=link)
