"""Hash pipeline data models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class HashAlgorithm(str, Enum):
    MD5 = "MD5"
    SHA1 = "SHA-1"
    SHA256 = "SHA-256"
    SHA384 = "SHA-384"
    SHA512 = "SHA-512"


class Digest(BaseModel):
    """One digest of the input"""

    algorithm: HashAlgorithm
    value: str  # lowercase hex


class HashTextRequest(BaseModel):
    """Request to hash a piece of text"""

    text: str


class HashResponse(BaseModel):
    """All digests of one input, or none of them"""

    digests: dict[HashAlgorithm, str] = {}
    size: int | None = None  # bytes hashed
    filename: str | None = None
    error: str | None = None
