"""Token decoder data models"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel


class ExpiryState(str, Enum):
    VALID = "valid"
    EXPIRED = "expired"
    UNKNOWN = "unknown"


class Expiry(BaseModel):
    """Expiry status evaluated from the exp claim"""

    state: ExpiryState
    seconds_remaining: int | None = None
    label: str | None = None  # None when there is nothing to show


class DecodedToken(BaseModel):
    """Decoded header and payload of a compact token (signature not verified)"""

    header: Any
    payload: Any
    expiry: Expiry
    timestamps: dict[str, str] = {}  # numeric time claims as UTC ISO-8601


class TokenRequest(BaseModel):
    """Request to decode a token"""

    token: str


class TokenResponse(BaseModel):
    """Decode result, or the reason there is none"""

    result: DecodedToken | None = None
    error: str | None = None
