"""Row mapping between the two panes, for synchronized scrolling.

Pure functions over pane ranges; the GUI owns the actual scroll positions.
Unchanged ranges map rows 1:1, changed ranges map them proportionally, and
the sync anchor sits a fraction of the way down the viewport so context above
the current change stays visible.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Literal

from sidediff.config import ScrollConfig
from sidediff.panes import PaneRange
from sidediff.spans import Span

Side = Literal["before", "after"]


def _spans(rng: PaneRange, side: Side) -> tuple[Span, Span]:
    if side == "before":
        return rng.before, rng.after
    return rng.after, rng.before


def find_range(row: int, ranges: Sequence[PaneRange], side: Side) -> PaneRange | None:
    """Return the range containing `row` on `side` (the last range if past the end)."""

    for rng in ranges:
        span = rng.before if side == "before" else rng.after
        if row < span.end:
            return rng
    return ranges[-1] if ranges else None


def transfer_row(row: int, rng: PaneRange, side: Side) -> int:
    """Map a row on `side` to the corresponding row on the other pane."""

    source, target = _spans(rng, side)

    if source.start == row:
        return target.start
    if source.end == row:
        return target.end
    if source.end < row:
        return row - source.end + target.end

    if source.is_empty() or target.is_empty():
        return target.start

    ratio = (row - source.start) / len(source)
    return min(target.start + math.floor(ratio * len(target)), target.end - 1)


def sync_scroll_top(
    scroll_top: float,
    viewport_height: float,
    ranges: Sequence[PaneRange],
    side: Side,
    *,
    target_scroll_top: float | None = None,
    config: ScrollConfig | None = None,
) -> float | None:
    """Compute the other pane's scroll offset for a scroll on `side`.

    Returns None when there is nothing to sync, or when `target_scroll_top`
    is already within the configured threshold of the computed offset.
    """

    cfg = config or ScrollConfig()
    if not ranges:
        return None

    anchor_offset = viewport_height * cfg.anchor_fraction
    source_y = scroll_top + anchor_offset
    source_row = math.floor(source_y / cfg.line_height)
    sub_row_offset = source_y % cfg.line_height

    rng = find_range(source_row, ranges, side)
    if rng is None:
        return None
    target_row = transfer_row(source_row, rng, side)

    source_span, target_span = _spans(rng, side)
    if len(target_span) > 0 and len(source_span) > 0:
        adjusted = sub_row_offset * (len(target_span) / len(source_span))
    elif not rng.changed:
        adjusted = sub_row_offset
    else:
        # Changed region with nothing on the other side: hold still.
        adjusted = 0.0

    result = max(0.0, target_row * cfg.line_height + adjusted - anchor_offset)
    if target_scroll_top is not None and abs(target_scroll_top - result) <= cfg.scroll_threshold:
        return None
    return result


def line_boundary(ranges: Sequence[PaneRange], side: Side, line_index: int) -> tuple[bool, bool]:
    """Return `(is_start, is_end)` for a pane row relative to changed regions.

    An empty span marks its insertion point with a single start boundary on
    the row at `span.start`.
    """

    for rng in ranges:
        if not rng.changed:
            continue
        span = rng.before if side == "before" else rng.after

        if span.is_empty():
            if line_index == span.start:
                return True, False
            continue

        if line_index == span.start:
            return True, line_index == span.end - 1
        if line_index == span.end - 1:
            return False, True

    return False, False
