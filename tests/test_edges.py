from __future__ import annotations

from sidediff.edges import edge_alignments, synthesize_hunks
from sidediff.hunks import HunkLine, LineKind
from sidediff.spans import Alignment, Span


def test_edge_alignments_cases() -> None:
    assert edge_alignments(0, 0) == []
    assert edge_alignments(0, 3) == [Alignment(Span(0, 0), Span(0, 3), changed=True)]
    assert edge_alignments(2, 0) == [Alignment(Span(0, 2), Span(0, 0), changed=True)]
    assert edge_alignments(1, 1) is None


def test_synthesize_added_file() -> None:
    (hunk,) = synthesize_hunks([], ["a", "b"])
    assert (hunk.old_start, hunk.old_lines, hunk.new_start, hunk.new_lines) == (0, 0, 0, 2)
    assert hunk.header == "@@ -0,0 +1,2 @@"
    assert hunk.lines == (
        HunkLine(LineKind.ADDED, "a", None, 1),
        HunkLine(LineKind.ADDED, "b", None, 2),
    )


def test_synthesize_deleted_file() -> None:
    (hunk,) = synthesize_hunks(["a"], [])
    assert (hunk.old_start, hunk.old_lines, hunk.new_start, hunk.new_lines) == (0, 1, 0, 0)
    assert hunk.lines == (HunkLine(LineKind.REMOVED, "a", 1, None),)


def test_synthesize_nothing_when_both_or_neither_side_has_lines() -> None:
    assert synthesize_hunks([], []) == []
    assert synthesize_hunks(["a"], ["b"]) == []
