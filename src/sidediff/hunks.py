"""Hunk input types and adapters that turn differ output into hunk lists.

Everything downstream works on 0-indexed hunk starts. Unified-diff text and
callback-style differs report 1-indexed starts, so conversion happens here,
at the boundary, and nowhere else.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import StrEnum

from sidediff.errors import HunkParseError


class LineKind(StrEnum):
    CONTEXT = "context"
    ADDED = "added"
    REMOVED = "removed"


@dataclass(frozen=True, slots=True)
class HunkLine:
    """One line inside a hunk, with optional 1-indexed source line numbers."""

    kind: LineKind
    content: str
    old_lineno: int | None = None
    new_lineno: int | None = None


@dataclass(frozen=True, slots=True)
class Hunk:
    """A contiguous changed block: `[old_start, old_start+old_lines)` -> `[new_start, ...)`.

    Starts are 0-indexed. `lines` is optional; producers that only know the
    four integers leave it empty.
    """

    old_start: int
    old_lines: int
    new_start: int
    new_lines: int
    header: str = ""
    lines: tuple[HunkLine, ...] = ()

    @property
    def old_end(self) -> int:
        return self.old_start + self.old_lines

    @property
    def new_end(self) -> int:
        return self.new_start + self.new_lines


_HEADER_RE = re.compile(r"^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@(.*)$")

# Origins a differ uses for "no newline at end of file" bookkeeping; they are
# not lines of either file.
_EOF_ORIGINS = frozenset({"=", ">", "<", "\\"})


def to_zero_indexed(start: int, count: int) -> int:
    """Convert a differ's 1-indexed hunk start to a 0-indexed position.

    With a zero count the differ names the line *before* the insertion point,
    which is already the 0-indexed position of the insertion.
    """

    if count == 0:
        return start
    return max(start - 1, 0)


def parse_hunk_header(line: str) -> Hunk:
    """Parse `@@ -a,b +c,d @@ ...` into a line-less 0-indexed Hunk."""

    m = _HEADER_RE.match(line.rstrip("\r\n"))
    if m is None:
        raise HunkParseError(f"Invalid hunk header: {line!r}")

    old_start = int(m.group(1))
    old_lines = int(m.group(2)) if m.group(2) is not None else 1
    new_start = int(m.group(3))
    new_lines = int(m.group(4)) if m.group(4) is not None else 1

    if (old_start == 0 and old_lines > 0) or (new_start == 0 and new_lines > 0):
        raise HunkParseError(f"Hunk header starts at line 0 with lines to cover: {line!r}")

    return Hunk(
        old_start=to_zero_indexed(old_start, old_lines),
        old_lines=old_lines,
        new_start=to_zero_indexed(new_start, new_lines),
        new_lines=new_lines,
        header=line.rstrip("\r\n"),
    )


def _strip_eol(content: str) -> str:
    return content.rstrip("\n").rstrip("\r")


def parse_unified_diff(text: str) -> list[Hunk]:
    """Parse the hunks of a single-file unified diff.

    File headers (`diff --git`, `index`, `---`, `+++`) are skipped. Hunk bodies
    are consumed by their header counts, so removed lines that happen to start
    with `--` are never mistaken for headers.
    """

    hunks: list[Hunk] = []
    raw_lines = text.split("\n")
    if raw_lines and raw_lines[-1] == "":
        raw_lines.pop()

    i = 0
    while i < len(raw_lines):
        raw = raw_lines[i]
        i += 1
        if not raw.startswith("@@"):
            continue

        header = parse_hunk_header(raw)
        old_left = header.old_lines
        new_left = header.new_lines
        old_no = header.old_start
        new_no = header.new_start
        body: list[HunkLine] = []

        while old_left > 0 or new_left > 0:
            if i >= len(raw_lines):
                raise HunkParseError(f"Truncated hunk body after {header.header!r}")
            raw = _strip_eol(raw_lines[i])
            i += 1

            origin, content = (raw[:1], raw[1:]) if raw else (" ", "")
            if origin == "\\":
                continue
            if origin == " ":
                old_no += 1
                new_no += 1
                old_left -= 1
                new_left -= 1
                body.append(HunkLine(LineKind.CONTEXT, content, old_no, new_no))
            elif origin == "-":
                old_no += 1
                old_left -= 1
                body.append(HunkLine(LineKind.REMOVED, content, old_no, None))
            elif origin == "+":
                new_no += 1
                new_left -= 1
                body.append(HunkLine(LineKind.ADDED, content, None, new_no))
            else:
                raise HunkParseError(f"Unexpected line in hunk body: {raw!r}")

            if old_left < 0 or new_left < 0:
                raise HunkParseError(f"Hunk body longer than its header: {header.header!r}")

        hunks.append(
            Hunk(
                old_start=header.old_start,
                old_lines=header.old_lines,
                new_start=header.new_start,
                new_lines=header.new_lines,
                header=header.header,
                lines=tuple(body),
            )
        )

    return hunks


@dataclass
class _PendingHunk:
    old_start: int
    old_lines: int
    new_start: int
    new_lines: int
    header: str
    lines: list[HunkLine] = field(default_factory=list)


class HunkCollector:
    """Accumulate hunks from a callback-style differ into an ordered list.

    Feed it from the differ's hunk/line callbacks, then call `finish()`. Starts
    passed to `on_hunk` are the differ's 1-indexed values.
    """

    def __init__(self) -> None:
        self._hunks: list[Hunk] = []
        self._current: _PendingHunk | None = None

    def on_hunk(
        self,
        old_start: int,
        old_lines: int,
        new_start: int,
        new_lines: int,
        header: str | bytes = "",
    ) -> None:
        self._finalize()
        if isinstance(header, bytes):
            header = header.decode("utf-8", errors="replace")
        self._current = _PendingHunk(
            old_start=to_zero_indexed(old_start, old_lines),
            old_lines=old_lines,
            new_start=to_zero_indexed(new_start, new_lines),
            new_lines=new_lines,
            header=_strip_eol(header),
        )

    def on_line(
        self,
        origin: str,
        content: str | bytes,
        old_lineno: int | None = None,
        new_lineno: int | None = None,
    ) -> None:
        if self._current is None or origin in _EOF_ORIGINS:
            return
        if isinstance(content, bytes):
            content = content.decode("utf-8", errors="replace")

        if origin == "+":
            kind = LineKind.ADDED
        elif origin == "-":
            kind = LineKind.REMOVED
        else:
            kind = LineKind.CONTEXT

        self._current.lines.append(
            HunkLine(kind, _strip_eol(content), old_lineno=old_lineno, new_lineno=new_lineno)
        )

    def finish(self) -> list[Hunk]:
        self._finalize()
        return list(self._hunks)

    def _finalize(self) -> None:
        cur = self._current
        self._current = None
        # Line-less hunks carry nothing renderable; drop them.
        if cur is None or not cur.lines:
            return
        self._hunks.append(
            Hunk(
                old_start=cur.old_start,
                old_lines=cur.old_lines,
                new_start=cur.new_start,
                new_lines=cur.new_lines,
                header=cur.header,
                lines=tuple(cur.lines),
            )
        )
