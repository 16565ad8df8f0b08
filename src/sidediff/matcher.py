"""Content matcher: align two line sequences without an external differ.

The algorithm is greedy block matching followed by a monotonicity filter:

1. Index every after-line by content.
2. Scan before-lines left to right. For each, claim the smallest unused
   after-position with the same content and extend the match forward while
   lines agree and after-positions are still unused.
3. Blocks come out increasing in before-position but not necessarily in
   after-position. A forward pass keeps a block only if it starts at or past
   the after-end of the last kept block; the earliest-scanned block wins.
4. Gaps between kept blocks become changed alignments, blocks become
   unchanged ones.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from sidediff.edges import edge_alignments
from sidediff.spans import Alignment, Span


@dataclass(frozen=True, slots=True)
class MatchBlock:
    before_start: int
    after_start: int
    length: int

    @property
    def before_end(self) -> int:
        return self.before_start + self.length

    @property
    def after_end(self) -> int:
        return self.after_start + self.length


@dataclass(slots=True)
class _ScanState:
    """Accumulator threaded through the greedy scan."""

    used: list[bool]
    # Per-content index into its position list; everything before it is used.
    cursors: dict[str, int] = field(default_factory=dict)
    blocks: list[MatchBlock] = field(default_factory=list)

    def first_unused(self, positions: list[int], line: str) -> int | None:
        k = self.cursors.get(line, 0)
        while k < len(positions) and self.used[positions[k]]:
            k += 1
        self.cursors[line] = k
        if k < len(positions):
            return positions[k]
        return None


def _index_lines(lines: Sequence[str]) -> dict[str, list[int]]:
    index: dict[str, list[int]] = {}
    for pos, line in enumerate(lines):
        index.setdefault(line, []).append(pos)
    return index


def find_matching_blocks(before: Sequence[str], after: Sequence[str]) -> list[MatchBlock]:
    """Greedy matched blocks in increasing before-order (after-order not guaranteed)."""

    index = _index_lines(after)
    state = _ScanState(used=[False] * len(after))

    i = 0
    while i < len(before):
        positions = index.get(before[i])
        j = state.first_unused(positions, before[i]) if positions else None
        if j is None:
            i += 1
            continue

        length = 0
        while (
            i + length < len(before)
            and j + length < len(after)
            and not state.used[j + length]
            and before[i + length] == after[j + length]
        ):
            state.used[j + length] = True
            length += 1

        state.blocks.append(MatchBlock(before_start=i, after_start=j, length=length))
        i += length

    return state.blocks


def filter_monotonic(blocks: Sequence[MatchBlock]) -> list[MatchBlock]:
    """Drop blocks that would rewind the after-position (earliest block wins)."""

    kept: list[MatchBlock] = []
    after_end = 0
    for block in blocks:
        if block.after_start >= after_end:
            kept.append(block)
            after_end = block.after_end
    return kept


def blocks_to_alignments(
    blocks: Sequence[MatchBlock], before_len: int, after_len: int
) -> list[Alignment]:
    """Turn doubly-monotonic blocks into a coverage-complete alignment list."""

    out: list[Alignment] = []
    before_pos = 0
    after_pos = 0

    for block in blocks:
        if block.before_start > before_pos or block.after_start > after_pos:
            out.append(
                Alignment(
                    before=Span(before_pos, block.before_start),
                    after=Span(after_pos, block.after_start),
                    changed=True,
                )
            )

        prev = out[-1] if out else None
        if prev is not None and not prev.changed:
            # Touching unchanged blocks read as one run.
            out[-1] = Alignment(
                before=Span(prev.before.start, block.before_end),
                after=Span(prev.after.start, block.after_end),
                changed=False,
            )
        else:
            out.append(
                Alignment(
                    before=Span(block.before_start, block.before_end),
                    after=Span(block.after_start, block.after_end),
                    changed=False,
                )
            )

        before_pos = block.before_end
        after_pos = block.after_end

    if before_pos < before_len or after_pos < after_len:
        out.append(
            Alignment(
                before=Span(before_pos, before_len),
                after=Span(after_pos, after_len),
                changed=True,
            )
        )

    return out


def align(before: Sequence[str], after: Sequence[str]) -> list[Alignment]:
    """Align two line sequences by content. Never fails; `[]` when both are empty."""

    edge = edge_alignments(len(before), len(after))
    if edge is not None:
        return edge

    blocks = filter_monotonic(find_matching_blocks(before, after))
    return blocks_to_alignments(blocks, len(before), len(after))
