"""
Diff Generator Service - Line and word level text diffs
"""

from __future__ import annotations

import logging
import re

from models.diff import DiffSegment, DiffStats, Granularity, SegmentKind
from services.errors import InputTooLarge

logger = logging.getLogger(__name__)

LINE_TOKEN = re.compile(r"[^\n]*\n|[^\n]+")
WORD_TOKEN = re.compile(r"\w+|\s+|[^\w\s]")

DEFAULT_MAX_TOKENS = 50_000


def tokenize(text: str, granularity: Granularity) -> list[str]:
    """Split text into tokens that concatenate back to the text"""
    pattern = LINE_TOKEN if granularity == Granularity.LINES else WORD_TOKEN
    return pattern.findall(text)


class DiffGenerator:
    """Generate minimal edit scripts between two texts"""

    def __init__(self, max_tokens: int = DEFAULT_MAX_TOKENS):
        self.max_tokens = max_tokens

    def diff(
        self,
        before: str,
        after: str,
        granularity: Granularity = Granularity.LINES,
    ) -> list[DiffSegment]:
        """Compute segments such that removed+unchanged rebuild `before`
        and added+unchanged rebuild `after`"""
        segments, _ = self.compare(before, after, granularity)
        return segments

    def compare(
        self,
        before: str,
        after: str,
        granularity: Granularity = Granularity.LINES,
    ) -> tuple[list[DiffSegment], DiffStats]:
        """Diff segments together with per-kind token counts"""
        original = tokenize(before, granularity)
        modified = tokenize(after, granularity)

        # Trim common prefix and suffix; only the changed middle is searched
        prefix = 0
        while prefix < len(original) and prefix < len(modified) and original[prefix] == modified[prefix]:
            prefix += 1
        suffix = 0
        while (
            suffix < len(original) - prefix
            and suffix < len(modified) - prefix
            and original[-1 - suffix] == modified[-1 - suffix]
        ):
            suffix += 1

        middle_a = original[prefix : len(original) - suffix]
        middle_b = modified[prefix : len(modified) - suffix]
        if len(middle_a) > self.max_tokens or len(middle_b) > self.max_tokens:
            raise InputTooLarge(
                f"Too many changed {granularity.value} to compare (limit {self.max_tokens})"
            )

        ops: list[tuple[SegmentKind, str]] = [(SegmentKind.UNCHANGED, t) for t in original[:prefix]]
        ops.extend(self._align(middle_a, middle_b))
        ops.extend((SegmentKind.UNCHANGED, t) for t in original[len(original) - suffix :])

        segments = self._merge(ops)
        stats = DiffStats()
        for kind, _ in ops:
            setattr(stats, kind.value, getattr(stats, kind.value) + 1)
        logger.debug(
            "Diffed %d/%d %s into %d segments",
            len(original),
            len(modified),
            granularity.value,
            len(segments),
        )
        return segments, stats

    def _align(self, original: list[str], modified: list[str]) -> list[tuple[SegmentKind, str]]:
        """Shortest edit script between two token lists (Myers, linear space)"""
        # Tokens missing from the other side can never be matched
        in_original, in_modified = set(original), set(modified)
        keep_a = [i for i, token in enumerate(original) if token in in_modified]
        keep_b = [j for j, token in enumerate(modified) if token in in_original]

        pairs: list[tuple[int, int]] = []
        self._collect_matches(
            [original[i] for i in keep_a], [modified[j] for j in keep_b], 0, 0, pairs
        )

        ops: list[tuple[SegmentKind, str]] = []
        i = j = 0
        for x, y in pairs:
            next_i, next_j = keep_a[x], keep_b[y]
            ops.extend((SegmentKind.REMOVED, t) for t in original[i:next_i])
            ops.extend((SegmentKind.ADDED, t) for t in modified[j:next_j])
            ops.append((SegmentKind.UNCHANGED, original[next_i]))
            i, j = next_i + 1, next_j + 1
        ops.extend((SegmentKind.REMOVED, t) for t in original[i:])
        ops.extend((SegmentKind.ADDED, t) for t in modified[j:])
        return ops

    def _collect_matches(
        self,
        a: list[str],
        b: list[str],
        a_offset: int,
        b_offset: int,
        pairs: list[tuple[int, int]],
    ):
        """Append index pairs of a longest common subsequence of a and b, in order"""
        start = 0
        while start < len(a) and start < len(b) and a[start] == b[start]:
            pairs.append((a_offset + start, b_offset + start))
            start += 1
        end_a, end_b = len(a), len(b)
        while end_a > start and end_b > start and a[end_a - 1] == b[end_b - 1]:
            end_a -= 1
            end_b -= 1
        tail = [(a_offset + end_a + n, b_offset + end_b + n) for n in range(len(a) - end_a)]

        middle_a, middle_b = a[start:end_a], b[start:end_b]
        if middle_a and middle_b:
            split = self._middle_snake(middle_a, middle_b)
            if split is not None:
                x, y = split
                a_offset, b_offset = a_offset + start, b_offset + start
                self._collect_matches(middle_a[:x], middle_b[:y], a_offset, b_offset, pairs)
                self._collect_matches(middle_a[x:], middle_b[y:], a_offset + x, b_offset + y, pairs)
        pairs.extend(tail)

    @staticmethod
    def _middle_snake(a: list[str], b: list[str]) -> tuple[int, int] | None:
        """Point where the forward and reverse searches for the shortest edit
        path meet. The path is split there and both halves are solved
        recursively, so memory stays linear. None means no token matches."""
        n, m = len(a), len(b)
        max_d = (n + m + 1) // 2
        offset = max_d
        size = 2 * max_d + 2
        # forward[offset + k]: furthest x on diagonal k = x - y from the top left
        # backward[offset + k]: the same, walking from the bottom right
        forward = [-1] * size
        forward[offset + 1] = 0
        backward = forward[:]
        delta = n - m
        # An odd delta means the forward search makes the final overlapping move
        front = delta % 2 != 0
        k1_start = k1_end = k2_start = k2_end = 0

        for d in range(max_d):
            for k1 in range(-d + k1_start, d + 1 - k1_end, 2):
                k1_offset = offset + k1
                if k1 == -d or (k1 != d and forward[k1_offset - 1] < forward[k1_offset + 1]):
                    x1 = forward[k1_offset + 1]
                else:
                    x1 = forward[k1_offset - 1] + 1
                y1 = x1 - k1
                while x1 < n and y1 < m and a[x1] == b[y1]:
                    x1 += 1
                    y1 += 1
                forward[k1_offset] = x1
                if x1 > n:
                    k1_end += 2
                elif y1 > m:
                    k1_start += 2
                elif front:
                    k2_offset = offset + delta - k1
                    if 0 <= k2_offset < size and backward[k2_offset] != -1:
                        if x1 >= n - backward[k2_offset]:
                            return x1, y1

            for k2 in range(-d + k2_start, d + 1 - k2_end, 2):
                k2_offset = offset + k2
                if k2 == -d or (k2 != d and backward[k2_offset - 1] < backward[k2_offset + 1]):
                    x2 = backward[k2_offset + 1]
                else:
                    x2 = backward[k2_offset - 1] + 1
                y2 = x2 - k2
                while x2 < n and y2 < m and a[n - x2 - 1] == b[m - y2 - 1]:
                    x2 += 1
                    y2 += 1
                backward[k2_offset] = x2
                if x2 > n:
                    k2_end += 2
                elif y2 > m:
                    k2_start += 2
                elif not front:
                    k1_offset = offset + delta - k2
                    if 0 <= k1_offset < size and forward[k1_offset] != -1:
                        x1 = forward[k1_offset]
                        if x1 >= n - x2:
                            return x1, x1 - (k1_offset - offset)
        return None

    def _merge(self, ops: list[tuple[SegmentKind, str]]) -> list[DiffSegment]:
        """Group tokens into maximal runs, removed before added in each change block"""
        segments: list[DiffSegment] = []
        removed: list[str] = []
        added: list[str] = []
        unchanged: list[str] = []

        def flush_changes():
            if removed:
                segments.append(DiffSegment(value="".join(removed), kind=SegmentKind.REMOVED))
                removed.clear()
            if added:
                segments.append(DiffSegment(value="".join(added), kind=SegmentKind.ADDED))
                added.clear()

        for kind, token in ops:
            if kind == SegmentKind.UNCHANGED:
                flush_changes()
                unchanged.append(token)
                continue
            if unchanged:
                segments.append(DiffSegment(value="".join(unchanged), kind=SegmentKind.UNCHANGED))
                unchanged.clear()
            (removed if kind == SegmentKind.REMOVED else added).append(token)

        flush_changes()
        if unchanged:
            segments.append(DiffSegment(value="".join(unchanged), kind=SegmentKind.UNCHANGED))
        return segments

