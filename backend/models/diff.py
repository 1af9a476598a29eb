"""Diff-related data models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class Granularity(str, Enum):
    LINES = "lines"
    WORDS = "words"


class SegmentKind(str, Enum):
    UNCHANGED = "unchanged"
    ADDED = "added"
    REMOVED = "removed"


class DiffSegment(BaseModel):
    """A maximal run of tokens sharing one kind"""

    value: str
    kind: SegmentKind


class DiffStats(BaseModel):
    """Token counts per segment kind"""

    added: int = 0
    removed: int = 0
    unchanged: int = 0


class DiffRequest(BaseModel):
    """Request to compare two texts"""

    before: str
    after: str
    granularity: Granularity = Granularity.LINES


class DiffResponse(BaseModel):
    """Complete diff result"""

    segments: list[DiffSegment] = []
    stats: DiffStats | None = None
    error: str | None = None
