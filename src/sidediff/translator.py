"""Translate an externally computed hunk list into an alignment list.

Hunk positions are authoritative: changed regions are copied verbatim and the
unchanged regions between them are filled in. Hunks are trusted to be ordered
and non-overlapping; nothing here re-sorts or re-validates them.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sidediff.edges import edge_alignments
from sidediff.hunks import Hunk
from sidediff.spans import Alignment, Span

logger = logging.getLogger("sidediff.translator")


def align_from_hunks(hunks: Sequence[Hunk], before_len: int, after_len: int) -> list[Alignment]:
    """Build alignments from 0-indexed hunks plus the two sequences' lengths."""

    if not hunks:
        edge = edge_alignments(before_len, after_len)
        if edge is not None:
            return edge
        # No hunks but content on both sides: a no-op diff (e.g. mode change).
        return [Alignment(before=Span(0, before_len), after=Span(0, after_len), changed=False)]

    if before_len == 0 and after_len == 0:
        return []

    out: list[Alignment] = []
    before_pos = 0
    after_pos = 0

    for hunk in hunks:
        if before_pos < hunk.old_start or after_pos < hunk.new_start:
            before_gap = hunk.old_start - before_pos
            after_gap = hunk.new_start - after_pos
            if before_gap != after_gap:
                logger.debug(
                    "Unchanged gap sizes differ before hunk %r: before=%d after=%d",
                    hunk.header or (hunk.old_start, hunk.new_start),
                    before_gap,
                    after_gap,
                )
            out.append(
                Alignment(
                    before=Span(before_pos, max(before_pos, hunk.old_start)),
                    after=Span(after_pos, max(after_pos, hunk.new_start)),
                    changed=False,
                )
            )

        out.append(
            Alignment(
                before=Span(hunk.old_start, hunk.old_end),
                after=Span(hunk.new_start, hunk.new_end),
                changed=True,
            )
        )
        before_pos = hunk.old_end
        after_pos = hunk.new_end

    if before_pos < before_len or after_pos < after_len:
        if before_len - before_pos != after_len - after_pos:
            logger.debug(
                "Unchanged tail sizes differ: before=%d after=%d",
                before_len - before_pos,
                after_len - after_pos,
            )
        out.append(
            Alignment(
                before=Span(before_pos, max(before_pos, before_len)),
                after=Span(after_pos, max(after_pos, after_len)),
                changed=False,
            )
        )

    return out
