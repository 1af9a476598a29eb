"""Models module - Pydantic data models"""

from .color import HSL, Color, ColorRequest, ColorResponse
from .diff import DiffRequest, DiffResponse, DiffSegment, DiffStats, Granularity, SegmentKind
from .git import (
    CommitRenderRequest,
    CommitRenderResponse,
    CommitSummary,
    FileDiffEntry,
    FileStatus,
    LineKind,
    PatchLine,
    Provider,
    ReferenceRequest,
    ReferenceResponse,
    ReferenceResult,
    RepositoryReference,
)
from .hash import Digest, HashAlgorithm, HashResponse, HashTextRequest
from .token import DecodedToken, Expiry, ExpiryState, TokenRequest, TokenResponse

__all__ = [
    # Color models
    "HSL",
    "Color",
    "ColorRequest",
    "ColorResponse",
    # Diff models
    "DiffRequest",
    "DiffResponse",
    "DiffSegment",
    "DiffStats",
    "Granularity",
    "SegmentKind",
    # Git models
    "CommitRenderRequest",
    "CommitRenderResponse",
    "CommitSummary",
    "FileDiffEntry",
    "FileStatus",
    "LineKind",
    "PatchLine",
    "Provider",
    "ReferenceRequest",
    "ReferenceResponse",
    "ReferenceResult",
    "RepositoryReference",
    # Hash models
    "Digest",
    "HashAlgorithm",
    "HashResponse",
    "HashTextRequest",
    # Token models
    "DecodedToken",
    "Expiry",
    "ExpiryState",
    "TokenRequest",
    "TokenResponse",
]
