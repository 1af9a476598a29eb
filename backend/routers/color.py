"""Color converter API endpoints"""

from __future__ import annotations

from fastapi import APIRouter

from models.color import ColorRequest, ColorResponse
from services.color_converter import parse_hex
from services.errors import ToolError

router = APIRouter()


@router.post("/convert", response_model=ColorResponse)
async def convert_color(request: ColorRequest) -> ColorResponse:
    """Convert a hex color to RGB and HSL"""
    try:
        return ColorResponse(result=parse_hex(request.hex))
    except ToolError as e:
        return ColorResponse(error=str(e))
