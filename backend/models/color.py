"""Color converter data models"""

from __future__ import annotations

from pydantic import BaseModel, Field


class HSL(BaseModel):
    """Hue in degrees, saturation and lightness in percent"""

    h: int = Field(ge=0, le=360)
    s: int = Field(ge=0, le=100)
    l: int = Field(ge=0, le=100)


class Color(BaseModel):
    """A parsed color with its derived representations"""

    r: int = Field(ge=0, le=255)
    g: int = Field(ge=0, le=255)
    b: int = Field(ge=0, le=255)
    hex: str  # "#rrggbb", always lowercase
    hsl: HSL


class ColorRequest(BaseModel):
    """Request to convert a hex color"""

    hex: str


class ColorResponse(BaseModel):
    """Conversion result, or the reason there is none"""

    result: Color | None = None
    error: str | None = None
