"""Tests for the line/word diff engine."""

import pytest

from models.diff import Granularity, SegmentKind
from services.diff_generator import DiffGenerator, tokenize
from services.errors import InputTooLarge


@pytest.fixture
def generator():
    return DiffGenerator()


def rebuild(segments, kinds):
    return "".join(s.value for s in segments if s.kind in kinds)


def as_tuples(segments):
    return [(s.kind, s.value) for s in segments]


def test_both_empty(generator):
    assert generator.diff("", "") == []


def test_identical_text_is_one_unchanged_segment(generator):
    text = "alpha\nbeta\ngamma"
    assert as_tuples(generator.diff(text, text)) == [(SegmentKind.UNCHANGED, text)]
    assert as_tuples(generator.diff(text, text, Granularity.WORDS)) == [(SegmentKind.UNCHANGED, text)]


def test_one_side_empty(generator):
    assert as_tuples(generator.diff("", "new\n")) == [(SegmentKind.ADDED, "new\n")]
    assert as_tuples(generator.diff("old\n", "")) == [(SegmentKind.REMOVED, "old\n")]


def test_changed_line(generator):
    segments = generator.diff("a\nb\nc\n", "a\nx\nc\n")

    assert as_tuples(segments) == [
        (SegmentKind.UNCHANGED, "a\n"),
        (SegmentKind.REMOVED, "b\n"),
        (SegmentKind.ADDED, "x\n"),
        (SegmentKind.UNCHANGED, "c\n"),
    ]


def test_missing_trailing_newline_counts_as_change(generator):
    segments = generator.diff("a\nb", "a\nb\n")

    assert as_tuples(segments) == [
        (SegmentKind.UNCHANGED, "a\n"),
        (SegmentKind.REMOVED, "b"),
        (SegmentKind.ADDED, "b\n"),
    ]


def test_ties_consume_original_first(generator):
    segments = generator.diff("a\nb\n", "b\na\n")

    assert as_tuples(segments) == [
        (SegmentKind.REMOVED, "a\n"),
        (SegmentKind.UNCHANGED, "b\n"),
        (SegmentKind.ADDED, "a\n"),
    ]


def test_word_insertion_preserves_whitespace(generator):
    segments = generator.diff("hello world", "hello there world", Granularity.WORDS)

    assert as_tuples(segments) == [
        (SegmentKind.UNCHANGED, "hello "),
        (SegmentKind.ADDED, "there "),
        (SegmentKind.UNCHANGED, "world"),
    ]


def test_word_tokens_cover_punctuation():
    assert tokenize("a, b!", Granularity.WORDS) == ["a", ",", " ", "b", "!"]
    assert tokenize("x\n\ny", Granularity.LINES) == ["x\n", "\n", "y"]


@pytest.mark.parametrize(
    "before,after",
    [
        ("one\ntwo\nthree\n", "zero\none\nthree\nfour\n"),
        ("the quick brown fox", "the slow brown dog jumps"),
        ("", "only after"),
        ("  spaced   out\t", "spaced\tout  "),
        ("a\nb\na\nb\n", "b\na\nb\na\n"),
    ],
)
@pytest.mark.parametrize("granularity", [Granularity.LINES, Granularity.WORDS])
def test_segments_rebuild_both_inputs(generator, before, after, granularity):
    segments = generator.diff(before, after, granularity)

    assert rebuild(segments, {SegmentKind.REMOVED, SegmentKind.UNCHANGED}) == before
    assert rebuild(segments, {SegmentKind.ADDED, SegmentKind.UNCHANGED}) == after
    # Maximal runs: no two neighbours share a kind
    assert all(x.kind != y.kind for x, y in zip(segments, segments[1:]))


def test_diff_is_deterministic(generator):
    before, after = "a b c a b", "c b a b c"
    first = generator.diff(before, after, Granularity.WORDS)
    assert generator.diff(before, after, Granularity.WORDS) == first


def test_edit_script_is_minimal(generator):
    # LCS of ABCBDAB / BDCABA has length 4
    before = "\n".join("ABCBDAB") + "\n"
    after = "\n".join("BDCABA") + "\n"
    _, stats = generator.compare(before, after)

    assert stats.unchanged == 4
    assert stats.removed == 3
    assert stats.added == 2


def test_stats_count_tokens(generator):
    _, stats = generator.compare("a\nb\n", "a\nc\n")
    assert (stats.added, stats.removed, stats.unchanged) == (1, 1, 1)


def test_token_limit_applies_to_changed_middle():
    generator = DiffGenerator(max_tokens=2)

    # Shared prefix and suffix do not count against the limit
    segments = generator.diff("p\np\np\nx\ns\ns\n", "p\np\np\ny\ns\ns\n")
    assert len(segments) == 4

    with pytest.raises(InputTooLarge):
        generator.diff("a\nb\nc\n", "x\ny\nz\n")


def test_large_fully_changed_input(generator):
    before = "".join(f"a{i}\n" for i in range(2500))
    after = "".join(f"b{i}\n" for i in range(2500))

    segments, stats = generator.compare(before, after)

    assert as_tuples(segments) == [(SegmentKind.REMOVED, before), (SegmentKind.ADDED, after)]
    assert rebuild(segments, {SegmentKind.REMOVED, SegmentKind.UNCHANGED}) == before
    assert rebuild(segments, {SegmentKind.ADDED, SegmentKind.UNCHANGED}) == after
    assert (stats.removed, stats.added, stats.unchanged) == (2500, 2500, 0)


def test_large_input_with_scattered_edits(generator):
    lines = [f"line {i}\n" for i in range(3000)]
    edited = [f"edited {i}\n" if i % 3 == 0 else line for i, line in enumerate(lines)]
    before, after = "".join(lines), "".join(edited)

    segments, stats = generator.compare(before, after)

    assert rebuild(segments, {SegmentKind.REMOVED, SegmentKind.UNCHANGED}) == before
    assert rebuild(segments, {SegmentKind.ADDED, SegmentKind.UNCHANGED}) == after
    assert (stats.removed, stats.added, stats.unchanged) == (1000, 1000, 2000)


def test_repeated_tokens_stay_minimal(generator):
    before = "x\ny\n" * 300
    after = "y\nx\n" * 300

    _, stats = generator.compare(before, after)

    # Shifting the sequence by one token is the cheapest script
    assert (stats.removed, stats.added, stats.unchanged) == (1, 1, 599)
