"""Hash generator API endpoints"""

from __future__ import annotations

from fastapi import APIRouter, File, UploadFile
from starlette.concurrency import run_in_threadpool

from core.validation import read_upload
from models.hash import HashResponse, HashTextRequest
from services.config_manager import ConfigManager
from services.errors import DigestFailure
from services.hash_pipeline import compute_digests

router = APIRouter()

DEFAULT_MAX_UPLOAD_BYTES = 10 * 1024 * 1024


async def _hash(data: str | bytes, size: int, filename: str | None = None) -> HashResponse:
    try:
        digests = await run_in_threadpool(compute_digests, data)
    except DigestFailure as e:
        # All or nothing: no partial digest set is returned
        return HashResponse(size=size, filename=filename, error=str(e))

    return HashResponse(
        digests={algorithm: digest.value for algorithm, digest in digests.items()},
        size=size,
        filename=filename,
    )


@router.post("/text", response_model=HashResponse)
async def hash_text(request: HashTextRequest) -> HashResponse:
    """Digest the UTF-8 bytes of a text"""
    return await _hash(request.text, len(request.text.encode("utf-8")))


@router.post("/file", response_model=HashResponse)
async def hash_file(file: UploadFile = File(...)) -> HashResponse:
    """Digest the raw bytes of an uploaded file"""
    max_bytes = ConfigManager.get_instance().get_int_setting(
        "hash", "maxUploadBytes", DEFAULT_MAX_UPLOAD_BYTES
    )
    data = await read_upload(file, max_bytes)
    return await _hash(data, len(data), file.filename)
