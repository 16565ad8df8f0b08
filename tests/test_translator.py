from __future__ import annotations

import logging

import pytest

from sidediff.hunks import Hunk
from sidediff.spans import Alignment, Span, validate_alignments
from sidediff.translator import align_from_hunks


def test_single_hunk_in_the_middle() -> None:
    result = align_from_hunks([Hunk(2, 1, 2, 1)], 5, 5)
    assert result == [
        Alignment(Span(0, 2), Span(0, 2), changed=False),
        Alignment(Span(2, 3), Span(2, 3), changed=True),
        Alignment(Span(3, 5), Span(3, 5), changed=False),
    ]


def test_hunk_with_different_sizes() -> None:
    result = align_from_hunks([Hunk(0, 2, 0, 3)], 3, 4)
    assert result == [
        Alignment(Span(0, 2), Span(0, 3), changed=True),
        Alignment(Span(2, 3), Span(3, 4), changed=False),
    ]


def test_multiple_hunks() -> None:
    result = align_from_hunks([Hunk(1, 1, 1, 1), Hunk(4, 1, 4, 1)], 6, 6)
    assert [a.changed for a in result] == [False, True, False, True, False]
    assert [(a.before.start, a.before.end) for a in result] == [
        (0, 1),
        (1, 2),
        (2, 4),
        (4, 5),
        (5, 6),
    ]


def test_exhaustive_coverage_with_growing_hunks() -> None:
    hunks = [Hunk(2, 2, 2, 3), Hunk(6, 1, 7, 2)]
    result = align_from_hunks(hunks, 9, 11)
    assert validate_alignments(result, 9, 11) == []


def test_hunk_at_start_and_end() -> None:
    assert align_from_hunks([Hunk(0, 1, 0, 1)], 3, 3) == [
        Alignment(Span(0, 1), Span(0, 1), changed=True),
        Alignment(Span(1, 3), Span(1, 3), changed=False),
    ]
    assert align_from_hunks([Hunk(2, 1, 2, 1)], 3, 3) == [
        Alignment(Span(0, 2), Span(0, 2), changed=False),
        Alignment(Span(2, 3), Span(2, 3), changed=True),
    ]


def test_pure_insertion_hunk() -> None:
    result = align_from_hunks([Hunk(3, 0, 3, 2)], 5, 7)
    assert result == [
        Alignment(Span(0, 3), Span(0, 3), changed=False),
        Alignment(Span(3, 3), Span(3, 5), changed=True),
        Alignment(Span(3, 5), Span(5, 7), changed=False),
    ]


def test_no_hunks_added_file() -> None:
    assert align_from_hunks([], 0, 2) == [Alignment(Span(0, 0), Span(0, 2), changed=True)]


def test_no_hunks_deleted_file() -> None:
    assert align_from_hunks([], 2, 0) == [Alignment(Span(0, 2), Span(0, 0), changed=True)]


def test_no_hunks_with_content_is_a_noop_diff() -> None:
    assert align_from_hunks([], 4, 4) == [Alignment(Span(0, 4), Span(0, 4), changed=False)]


def test_both_empty() -> None:
    assert align_from_hunks([], 0, 0) == []


def test_mismatched_gap_is_accepted_and_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="sidediff.translator")
    result = align_from_hunks([Hunk(2, 1, 3, 1)], 4, 5)

    # Each side keeps its own gap bounds; nothing is raised.
    assert result[0] == Alignment(Span(0, 2), Span(0, 3), changed=False)
    assert result[1] == Alignment(Span(2, 3), Span(3, 4), changed=True)
    assert result[2] == Alignment(Span(3, 4), Span(4, 5), changed=False)
    assert "gap sizes differ" in caplog.text

    # Adjacency and coverage still hold; only the unchanged-length law breaks.
    assert validate_alignments(result, 4, 5) == [
        "alignment 0: unchanged spans differ in length (2 vs 3)"
    ]


def test_hunks_are_not_resorted() -> None:
    hunks = [Hunk(4, 1, 4, 1), Hunk(1, 1, 1, 1)]
    result = align_from_hunks(hunks, 6, 6)
    # Out-of-order input breaks adjacency; the translator does not repair it.
    assert validate_alignments(result, 6, 6) != []
