"""Diff checker API endpoints"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException
from starlette.concurrency import run_in_threadpool

from models.diff import DiffRequest, DiffResponse
from services.config_manager import ConfigManager
from services.diff_generator import DEFAULT_MAX_TOKENS, DiffGenerator
from services.errors import InputTooLarge

router = APIRouter()


@router.post("", response_model=DiffResponse)
async def diff_texts(request: DiffRequest) -> DiffResponse:
    """Compare two texts line by line or word by word"""
    max_tokens = ConfigManager.get_instance().get_int_setting("diff", "maxTokens", DEFAULT_MAX_TOKENS)
    diff_generator = DiffGenerator(max_tokens=max_tokens)

    try:
        segments, stats = await run_in_threadpool(
            diff_generator.compare, request.before, request.after, request.granularity
        )
    except InputTooLarge as e:
        raise HTTPException(status_code=413, detail=str(e))

    return DiffResponse(segments=segments, stats=stats)
