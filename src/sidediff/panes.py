"""Side-by-side pane building.

Transforms hunks plus full file content into two render-ready panes and a
range mapping between them:

- two line arrays (before/after) carrying 1-indexed source line numbers
- ranges pairing corresponding regions of the two arrays, used for scroll
  sync and the connectors drawn between panes

Ranges index the pane arrays, not source line numbers: the two panes can have
different lengths, and it is rows of those arrays the UI has to line up.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from sidediff.content import split_lines
from sidediff.edges import synthesize_hunks
from sidediff.hunks import Hunk, HunkLine, LineKind
from sidediff.spans import Span

logger = logging.getLogger("sidediff.panes")


@dataclass(frozen=True, slots=True)
class PaneLine:
    kind: LineKind
    lineno: int  # 1-indexed line number in the source file
    content: str


@dataclass(frozen=True, slots=True)
class SourceLines:
    """1-indexed inclusive source lines of a changed region.

    The old side is None for a pure addition, the new side for a pure deletion.
    """

    old_start: int | None
    old_end: int | None
    new_start: int | None
    new_end: int | None


@dataclass(frozen=True, slots=True)
class PaneRange:
    before: Span
    after: Span
    changed: bool
    source_lines: SourceLines | None = None


Panes = tuple[list[PaneLine], list[PaneLine], list[PaneRange]]


class _PaneBuilder:
    def __init__(self, before_src: Sequence[str], after_src: Sequence[str]) -> None:
        self.before_src = before_src
        self.after_src = after_src
        self.before: list[PaneLine] = []
        self.after: list[PaneLine] = []
        self.ranges: list[PaneRange] = []
        # Current position in the source files (0-indexed).
        self.before_idx = 0
        self.after_idx = 0

    def copy_unchanged(self, until_before: int, until_after: int) -> None:
        """Copy unchanged lines up to (not including) the given source positions."""

        until_before = min(until_before, len(self.before_src))
        until_after = min(until_after, len(self.after_src))
        before_start = len(self.before)
        after_start = len(self.after)

        while self.before_idx < until_before and self.after_idx < until_after:
            self._push_before(LineKind.CONTEXT, self.before_idx + 1)
            self._push_after(LineKind.CONTEXT, self.after_idx + 1)

        if len(self.before) > before_start:
            self.ranges.append(
                PaneRange(
                    before=Span(before_start, len(self.before)),
                    after=Span(after_start, len(self.after)),
                    changed=False,
                )
            )

        if self.before_idx >= until_before and self.after_idx >= until_after:
            return

        # Only reachable when hunks disagree with the content; keep the extra
        # lines visible and unchanged ranges balanced.
        logger.debug(
            "Unpaired unchanged lines: before=%d after=%d",
            max(0, until_before - self.before_idx),
            max(0, until_after - self.after_idx),
        )
        before_start = len(self.before)
        after_start = len(self.after)
        while self.before_idx < until_before:
            self._push_before(LineKind.CONTEXT, self.before_idx + 1)
        while self.after_idx < until_after:
            self._push_after(LineKind.CONTEXT, self.after_idx + 1)
        self.ranges.append(
            PaneRange(
                before=Span(before_start, len(self.before)),
                after=Span(after_start, len(self.after)),
                changed=True,
                source_lines=_source_lines(
                    self.before[before_start:], self.after[after_start:]
                ),
            )
        )

    def add_hunk(self, hunk: Hunk) -> None:
        self.before_idx = max(self.before_idx, hunk.old_start)
        self.after_idx = max(self.after_idx, hunk.new_start)

        pending_removed: list[PaneLine] = []
        pending_added: list[PaneLine] = []

        for line in hunk.lines or self._lines_from_content(hunk):
            if line.kind == LineKind.CONTEXT:
                self._flush(pending_removed, pending_added)
                old_no = line.old_lineno or self.before_idx + 1
                new_no = line.new_lineno or self.after_idx + 1
                before_start = len(self.before)
                after_start = len(self.after)
                self.before.append(PaneLine(LineKind.CONTEXT, old_no, line.content))
                self.after.append(PaneLine(LineKind.CONTEXT, new_no, line.content))
                self.ranges.append(
                    PaneRange(
                        before=Span(before_start, len(self.before)),
                        after=Span(after_start, len(self.after)),
                        changed=False,
                    )
                )
                self.before_idx = old_no
                self.after_idx = new_no
            elif line.kind == LineKind.REMOVED:
                old_no = line.old_lineno or self.before_idx + 1
                pending_removed.append(PaneLine(LineKind.REMOVED, old_no, line.content))
                self.before_idx = old_no
            elif line.kind == LineKind.ADDED:
                new_no = line.new_lineno or self.after_idx + 1
                pending_added.append(PaneLine(LineKind.ADDED, new_no, line.content))
                self.after_idx = new_no

        self._flush(pending_removed, pending_added)
        self.before_idx = max(self.before_idx, hunk.old_end)
        self.after_idx = max(self.after_idx, hunk.new_end)

    def _lines_from_content(self, hunk: Hunk) -> list[HunkLine]:
        lines = [
            HunkLine(LineKind.REMOVED, text, old_lineno=hunk.old_start + k + 1)
            for k, text in enumerate(self.before_src[hunk.old_start : hunk.old_end])
        ]
        lines.extend(
            HunkLine(LineKind.ADDED, text, new_lineno=hunk.new_start + k + 1)
            for k, text in enumerate(self.after_src[hunk.new_start : hunk.new_end])
        )
        return lines

    def _flush(self, pending_removed: list[PaneLine], pending_added: list[PaneLine]) -> None:
        """Emit pending removed/added lines as a single changed range."""

        if not pending_removed and not pending_added:
            return

        before_start = len(self.before)
        after_start = len(self.after)
        self.before.extend(pending_removed)
        self.after.extend(pending_added)
        self.ranges.append(
            PaneRange(
                before=Span(before_start, len(self.before)),
                after=Span(after_start, len(self.after)),
                changed=True,
                source_lines=_source_lines(pending_removed, pending_added),
            )
        )
        pending_removed.clear()
        pending_added.clear()

    def _push_before(self, kind: LineKind, lineno: int) -> None:
        self.before.append(PaneLine(kind, lineno, self.before_src[self.before_idx]))
        self.before_idx += 1

    def _push_after(self, kind: LineKind, lineno: int) -> None:
        self.after.append(PaneLine(kind, lineno, self.after_src[self.after_idx]))
        self.after_idx += 1


def _source_lines(removed: Sequence[PaneLine], added: Sequence[PaneLine]) -> SourceLines:
    return SourceLines(
        old_start=removed[0].lineno if removed else None,
        old_end=removed[-1].lineno if removed else None,
        new_start=added[0].lineno if added else None,
        new_end=added[-1].lineno if added else None,
    )


def build(
    before_content: str | None,
    after_content: str | None,
    hunks: Sequence[Hunk],
) -> Panes:
    """Build `(before_pane, after_pane, ranges)` from full content and hunks.

    `None` content means the file does not exist on that side (pure addition
    or deletion); its pane simply stays empty.
    """

    before_src = split_lines(before_content) if before_content is not None else []
    after_src = split_lines(after_content) if after_content is not None else []

    if not hunks:
        hunks = synthesize_hunks(before_src, after_src)

    builder = _PaneBuilder(before_src, after_src)
    for hunk in hunks:
        builder.copy_unchanged(hunk.old_start, hunk.new_start)
        builder.add_hunk(hunk)
    builder.copy_unchanged(len(before_src), len(after_src))

    return builder.before, builder.after, builder.ranges
