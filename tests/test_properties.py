"""
Property-based tests for the alignment producers and the pane builder.

Small alphabets keep duplicate lines common, which is where greedy matching
gets interesting.
"""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from sidediff.filediff import hunks_from_alignments
from sidediff.hunks import Hunk
from sidediff.matcher import align
from sidediff.panes import build
from sidediff.spans import Alignment, validate_alignments
from sidediff.translator import align_from_hunks

# ============================================================
# Strategies (Input Generation)
# ============================================================

line_lists = st.lists(st.sampled_from(["a", "b", "c", "", "d e"]), max_size=25)


@st.composite
def hunk_layouts(draw):
    """Ordered, non-overlapping hunks with matching unchanged gaps, plus both lengths."""
    hunks: list[Hunk] = []
    before_pos = after_pos = 0
    for _ in range(draw(st.integers(min_value=0, max_value=6))):
        gap = draw(st.integers(min_value=0, max_value=5))
        old_lines = draw(st.integers(min_value=0, max_value=4))
        new_lines = draw(st.integers(min_value=0 if old_lines else 1, max_value=4))
        hunks.append(Hunk(before_pos + gap, old_lines, after_pos + gap, new_lines))
        before_pos = before_pos + gap + old_lines
        after_pos = after_pos + gap + new_lines
    tail = draw(st.integers(min_value=0, max_value=5))
    return hunks, before_pos + tail, after_pos + tail


def _text(lines: list[str]) -> str:
    return "".join(line + "\n" for line in lines)


def _unchanged_content_matches(
    alignments: list[Alignment], before: list[str], after: list[str]
) -> bool:
    return all(
        before[a.before.start : a.before.end] == after[a.after.start : a.after.end]
        for a in alignments
        if not a.changed
    )


# ============================================================
# Content matcher
# ============================================================


@given(line_lists, line_lists)
def test_content_alignments_are_well_formed(before: list[str], after: list[str]) -> None:
    alignments = align(before, after)
    assert validate_alignments(alignments, len(before), len(after)) == []
    assert _unchanged_content_matches(alignments, before, after)


@given(line_lists)
def test_identical_input_is_one_unchanged_alignment(lines: list[str]) -> None:
    alignments = align(lines, lines)
    if not lines:
        assert alignments == []
    else:
        assert len(alignments) == 1
        assert not alignments[0].changed


@given(line_lists, line_lists)
def test_hunk_round_trip_reproduces_content_alignments(
    before: list[str], after: list[str]
) -> None:
    alignments = align(before, after)
    hunks = hunks_from_alignments(alignments)
    assert align_from_hunks(hunks, len(before), len(after)) == alignments


# ============================================================
# Hunk translator
# ============================================================


@given(hunk_layouts())
def test_translated_alignments_are_well_formed(layout) -> None:
    hunks, before_len, after_len = layout
    alignments = align_from_hunks(hunks, before_len, after_len)
    assert validate_alignments(alignments, before_len, after_len) == []
    changed = [
        (a.before.start, len(a.before), a.after.start, len(a.after))
        for a in alignments
        if a.changed
    ]
    assert changed == [(h.old_start, h.old_lines, h.new_start, h.new_lines) for h in hunks]


# ============================================================
# Pane builder
# ============================================================


@given(line_lists, line_lists)
def test_panes_cover_both_files_contiguously(before: list[str], after: list[str]) -> None:
    hunks = hunks_from_alignments(align(before, after))
    before_pane, after_pane, ranges = build(_text(before), _text(after), hunks)

    assert [line.content for line in before_pane] == before
    assert [line.content for line in after_pane] == after
    assert [line.lineno for line in before_pane] == list(range(1, len(before) + 1))
    assert [line.lineno for line in after_pane] == list(range(1, len(after) + 1))

    b = a = 0
    for rng in ranges:
        assert rng.before.start == b
        assert rng.after.start == a
        b, a = rng.before.end, rng.after.end
        if not rng.changed:
            assert len(rng.before) == len(rng.after)
            left = [line.content for line in before_pane[rng.before.start : rng.before.end]]
            right = [line.content for line in after_pane[rng.after.start : rng.after.end]]
            assert left == right
    assert (b, a) == (len(before_pane), len(after_pane))
