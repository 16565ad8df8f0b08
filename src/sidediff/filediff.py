"""File-level assembly: everything a dual-pane viewer needs for one file.

This is the boundary between materialized file content and the engine. It
classifies binary blobs (the engine never sees them), derives the file
status, and runs both the alignment producer and the pane builder so their
outputs describe the same edit.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

from sidediff.config import SidediffConfig, default_config
from sidediff.content import decode_text, is_binary, split_lines
from sidediff.errors import SidediffInputError
from sidediff.hunks import Hunk, HunkLine
from sidediff.panes import PaneLine, PaneRange, build
from sidediff.spans import Alignment, Span
from sidediff.strategy import choose_strategy

logger = logging.getLogger("sidediff.filediff")

FileStatus = Literal["added", "deleted", "modified", "renamed"]


@dataclass(frozen=True, slots=True)
class DiffSide:
    path: str | None
    lines: list[PaneLine]


@dataclass(frozen=True, slots=True)
class FileDiff:
    path: str
    status: FileStatus
    is_binary: bool
    before: DiffSide
    after: DiffSide
    hunks: list[Hunk]
    ranges: list[PaneRange]
    alignments: list[Alignment]

    def to_json(self) -> dict[str, object]:
        """Return a JSON-serializable dict."""
        return {
            "path": self.path,
            "status": self.status,
            "is_binary": self.is_binary,
            "before": _side_json(self.before),
            "after": _side_json(self.after),
            "hunks": [_hunk_json(h) for h in self.hunks],
            "ranges": [_range_json(r) for r in self.ranges],
            "alignments": [
                {
                    "before": _span_json(a.before),
                    "after": _span_json(a.after),
                    "changed": a.changed,
                }
                for a in self.alignments
            ],
        }


def _span_json(span: Span) -> dict[str, int]:
    return {"start": span.start, "end": span.end}


def _side_json(side: DiffSide) -> dict[str, object]:
    return {
        "path": side.path,
        "lines": [
            {"line_type": str(line.kind), "lineno": line.lineno, "content": line.content}
            for line in side.lines
        ],
    }


def _hunk_line_json(line: HunkLine) -> dict[str, object]:
    return {
        "line_type": str(line.kind),
        "old_lineno": line.old_lineno,
        "new_lineno": line.new_lineno,
        "content": line.content,
    }


def _hunk_json(hunk: Hunk) -> dict[str, object]:
    return {
        "old_start": hunk.old_start,
        "old_lines": hunk.old_lines,
        "new_start": hunk.new_start,
        "new_lines": hunk.new_lines,
        "header": hunk.header,
        "lines": [_hunk_line_json(line) for line in hunk.lines],
    }


def _range_json(rng: PaneRange) -> dict[str, object]:
    out: dict[str, object] = {
        "before": _span_json(rng.before),
        "after": _span_json(rng.after),
        "changed": rng.changed,
    }
    if rng.source_lines is not None:
        sl = rng.source_lines
        out["source_lines"] = {
            "old_start": sl.old_start,
            "old_end": sl.old_end,
            "new_start": sl.new_start,
            "new_end": sl.new_end,
        }
    return out


def hunks_from_alignments(alignments: Sequence[Alignment]) -> list[Hunk]:
    """Line-less hunks for the changed alignments, in order."""

    return [
        Hunk(
            old_start=a.before.start,
            old_lines=len(a.before),
            new_start=a.after.start,
            new_lines=len(a.after),
        )
        for a in alignments
        if a.changed
    ]


def _looks_binary(blob: bytes | str | None, sniff_bytes: int) -> bool:
    if blob is None:
        return False
    if isinstance(blob, bytes):
        return is_binary(blob, sniff_bytes=sniff_bytes)
    return "\0" in blob[:sniff_bytes]


def _as_text(blob: bytes | str | None) -> str | None:
    if blob is None or isinstance(blob, str):
        return blob
    return decode_text(blob)


def _status(
    path: str, before: object | None, after: object | None, before_path: str | None
) -> FileStatus:
    if before is None:
        return "added"
    if after is None:
        return "deleted"
    if before_path is not None and before_path != path:
        return "renamed"
    return "modified"


def build_file_diff(
    path: str,
    before: bytes | str | None,
    after: bytes | str | None,
    *,
    hunks: Sequence[Hunk] | None = None,
    before_path: str | None = None,
    config: SidediffConfig | None = None,
) -> FileDiff:
    """Assemble a FileDiff from the two sides' content.

    `None` means the file is absent on that side. `hunks`, when given, are
    0-indexed and authoritative; otherwise the content matcher decides.
    """

    if before is None and after is None:
        raise SidediffInputError(f"File {path!r} is absent on both sides.")

    cfg = config or default_config()
    status = _status(path, before, after, before_path)
    old_path = (before_path or path) if before is not None else None
    new_path = path if after is not None else None

    sniff = cfg.engine.binary_sniff_bytes
    if _looks_binary(before, sniff) or _looks_binary(after, sniff):
        logger.debug("Binary content in %s; skipping alignment", path)
        return FileDiff(
            path=path,
            status=status,
            is_binary=True,
            before=DiffSide(path=old_path, lines=[]),
            after=DiffSide(path=new_path, lines=[]),
            hunks=[],
            ranges=[],
            alignments=[],
        )

    before_text = _as_text(before)
    after_text = _as_text(after)
    before_lines = split_lines(before_text) if before_text is not None else []
    after_lines = split_lines(after_text) if after_text is not None else []

    strategy = choose_strategy(hunks, mode=cfg.engine.strategy)  # type: ignore[arg-type]
    logger.debug("Aligning %s with %s", path, strategy.name)
    alignments = strategy.align(before_lines, after_lines)

    pane_hunks = list(hunks) if hunks is not None else hunks_from_alignments(alignments)
    before_pane, after_pane, ranges = build(before_text, after_text, pane_hunks)

    return FileDiff(
        path=path,
        status=status,
        is_binary=False,
        before=DiffSide(path=old_path, lines=before_pane),
        after=DiffSide(path=new_path, lines=after_pane),
        hunks=pane_hunks,
        ranges=ranges,
        alignments=alignments,
    )
