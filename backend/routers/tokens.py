"""Token decoder API endpoints"""

from __future__ import annotations

from fastapi import APIRouter

from models.token import TokenRequest, TokenResponse
from services.errors import ToolError
from services.token_decoder import decode

router = APIRouter()


@router.post("/decode", response_model=TokenResponse)
async def decode_token(request: TokenRequest) -> TokenResponse:
    """Decode header and payload. The signature is not verified."""
    try:
        return TokenResponse(result=decode(request.token))
    except ToolError as e:
        return TokenResponse(error=str(e))
