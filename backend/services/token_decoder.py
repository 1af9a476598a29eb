"""
Token Decoder Service - Inspect compact (JWT-style) tokens

Decoding only. The signature segment is ignored and nothing here says
whether a token can be trusted.
"""

from __future__ import annotations

import base64
import binascii
import json
import logging
import math
import re
import time
from datetime import datetime, timezone
from typing import Any

from models.token import DecodedToken, Expiry, ExpiryState
from services.errors import DecodeFailure, InvalidFormat

logger = logging.getLogger(__name__)

TOKEN_PATTERN = re.compile(r"^[^.]+\.[^.]+\.[^.]+$")
TIME_CLAIMS = ("iat", "nbf", "exp")


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return isinstance(value, int) or math.isfinite(value)


def base64url_decode(segment: str) -> bytes:
    """Decode base64url, tolerating missing padding"""
    normalized = segment.replace("-", "+").replace("_", "/")
    normalized += "=" * (-len(normalized) % 4)
    return base64.b64decode(normalized, validate=True)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def decode_segment(segment: str, name: str) -> Any:
    """base64url -> UTF-8 -> strict JSON (no NaN or Infinity)"""
    try:
        text = base64url_decode(segment).decode("utf-8")
        return json.loads(text, parse_constant=_reject_constant)
    except (binascii.Error, ValueError) as e:
        # UnicodeDecodeError and JSONDecodeError are both ValueErrors
        raise DecodeFailure(f"Could not decode {name}: {e}") from e


def format_duration(seconds: int) -> str:
    """Human readable duration, e.g. '1h 2m 5s'"""
    minutes, secs = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    days, hours = divmod(hours, 24)
    parts = [f"{days}d"] if days else []
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}m")
    if secs or not parts:
        parts.append(f"{secs}s")
    return " ".join(parts)


def evaluate_expiry(payload: Any, now: int) -> Expiry:
    """Compare a numeric exp claim against now (whole seconds)"""
    exp = payload.get("exp") if isinstance(payload, dict) else None
    if not _is_number(exp):
        return Expiry(state=ExpiryState.UNKNOWN)

    exp = int(exp)
    if exp < now:
        return Expiry(
            state=ExpiryState.EXPIRED,
            label=f"Expired {format_duration(now - exp)} ago",
        )
    remaining = exp - now
    return Expiry(
        state=ExpiryState.VALID,
        seconds_remaining=remaining,
        label=f"Valid ({format_duration(remaining)} remaining)",
    )


def claim_timestamps(payload: Any) -> dict[str, str]:
    """Render numeric iat/nbf/exp claims as UTC ISO-8601"""
    if not isinstance(payload, dict):
        return {}
    timestamps = {}
    for claim in TIME_CLAIMS:
        value = payload.get(claim)
        if not _is_number(value):
            continue
        try:
            timestamps[claim] = datetime.fromtimestamp(value, tz=timezone.utc).isoformat()
        except (OverflowError, OSError, ValueError):
            logger.debug("Claim %s out of range: %r", claim, value)
    return timestamps


def decode(token: str, now: int | None = None) -> DecodedToken:
    """Decode header and payload of a three-part token"""
    token = token.strip()
    if not TOKEN_PATTERN.match(token):
        raise InvalidFormat("Invalid token format. Expected three dot-separated segments")

    header_part, payload_part, _signature = token.split(".")
    header = decode_segment(header_part, "header")
    payload = decode_segment(payload_part, "payload")

    if now is None:
        now = int(time.time())

    return DecodedToken(
        header=header,
        payload=payload,
        expiry=evaluate_expiry(payload, now),
        timestamps=claim_timestamps(payload),
    )
