"""
Color Converter Service - Hex, RGB and HSL conversion
"""

from __future__ import annotations

import logging
import re
from decimal import ROUND_HALF_UP, Decimal

from models.color import HSL, Color
from services.errors import InvalidFormat

logger = logging.getLogger(__name__)

HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def _round(value: float) -> int:
    """Round half away from zero (round() would round half to even)"""
    return int(Decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def hex_to_rgb(text: str) -> tuple[int, int, int]:
    """Parse '#abc', 'abc', '#aabbcc' or 'aabbcc' into an (r, g, b) tuple"""
    match = HEX_PATTERN.match(text.strip())
    if not match:
        raise InvalidFormat("Invalid hex color. Use #rgb or #rrggbb")

    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)

    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Format channels as lowercase '#rrggbb'"""
    for channel in (r, g, b):
        if not 0 <= channel <= 255:
            raise InvalidFormat(f"Channel value out of range: {channel}")
    return f"#{r:02x}{g:02x}{b:02x}"


def rgb_to_hsl(r: int, g: int, b: int) -> HSL:
    """Convert 0-255 channels to HSL (degrees, percent, percent)"""
    rn, gn, bn = r / 255, g / 255, b / 255
    high = max(rn, gn, bn)
    low = min(rn, gn, bn)
    lightness = (high + low) / 2

    if high == low:
        # Achromatic
        return HSL(h=0, s=0, l=_round(lightness * 100))

    d = high - low
    saturation = d / (2 - high - low) if lightness > 0.5 else d / (high + low)

    if high == rn:
        hue = (gn - bn) / d + (6 if gn < bn else 0)
    elif high == gn:
        hue = (bn - rn) / d + 2
    else:
        hue = (rn - gn) / d + 4
    hue /= 6

    return HSL(h=_round(hue * 360), s=_round(saturation * 100), l=_round(lightness * 100))


def parse_hex(text: str) -> Color:
    """Parse hex text and derive all representations"""
    r, g, b = hex_to_rgb(text)
    color = Color(r=r, g=g, b=b, hex=rgb_to_hex(r, g, b), hsl=rgb_to_hsl(r, g, b))
    logger.debug("Converted %r to %s", text, color.hex)
    return color
