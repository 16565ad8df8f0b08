"""Edge cases shared by every producer: empty sides and hunk-less diffs."""

from __future__ import annotations

from collections.abc import Sequence

from sidediff.hunks import Hunk, HunkLine, LineKind
from sidediff.spans import Alignment, Span


def edge_alignments(before_len: int, after_len: int) -> list[Alignment] | None:
    """Return the alignment list when a side is empty, or None otherwise.

    - both empty: nothing to align (`[]`)
    - before empty: one changed alignment covering the whole after side
    - after empty: one changed alignment covering the whole before side
    """

    if before_len == 0 and after_len == 0:
        return []
    if before_len == 0:
        return [Alignment(before=Span(0, 0), after=Span(0, after_len), changed=True)]
    if after_len == 0:
        return [Alignment(before=Span(0, before_len), after=Span(0, 0), changed=True)]
    return None


def synthesize_hunks(before_lines: Sequence[str], after_lines: Sequence[str]) -> list[Hunk]:
    """Build a single all-added or all-removed hunk for a pure addition/deletion.

    Returns `[]` when both sides have lines (or neither does).
    """

    if not before_lines and after_lines:
        n = len(after_lines)
        return [
            Hunk(
                old_start=0,
                old_lines=0,
                new_start=0,
                new_lines=n,
                header=f"@@ -0,0 +1,{n} @@",
                lines=tuple(
                    HunkLine(LineKind.ADDED, text, old_lineno=None, new_lineno=i + 1)
                    for i, text in enumerate(after_lines)
                ),
            )
        ]

    if before_lines and not after_lines:
        n = len(before_lines)
        return [
            Hunk(
                old_start=0,
                old_lines=n,
                new_start=0,
                new_lines=0,
                header=f"@@ -1,{n} +0,0 @@",
                lines=tuple(
                    HunkLine(LineKind.REMOVED, text, old_lineno=i + 1, new_lineno=None)
                    for i, text in enumerate(before_lines)
                ),
            )
        ]

    return []
