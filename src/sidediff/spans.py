"""Half-open line spans and the before/after alignments built from them."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open interval `[start, end)` over 0-indexed line positions."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"invalid span [{self.start}, {self.end})")

    def __len__(self) -> int:
        return self.end - self.start

    def is_empty(self) -> bool:
        return self.start == self.end


@dataclass(frozen=True, slots=True)
class Alignment:
    before: Span
    after: Span
    changed: bool


def validate_alignments(
    alignments: Sequence[Alignment], before_len: int, after_len: int
) -> list[str]:
    """Check an alignment list against the structural invariants.

    Checks:
    - coverage: before spans tile `[0, before_len)`, after spans tile `[0, after_len)`
    - adjacency: each span starts where the previous one on that side ended
    - unchanged spans have the same length on both sides
    - a zero-length span only appears on one side of a changed alignment

    Returns a list of problems (empty means valid).
    """

    problems: list[str] = []

    if not alignments:
        if before_len or after_len:
            problems.append(
                f"no alignments for non-empty input (before={before_len}, after={after_len})"
            )
        return problems

    before_pos = 0
    after_pos = 0
    for idx, a in enumerate(alignments):
        if a.before.start != before_pos:
            problems.append(
                f"alignment {idx}: before starts at {a.before.start}, expected {before_pos}"
            )
        if a.after.start != after_pos:
            problems.append(
                f"alignment {idx}: after starts at {a.after.start}, expected {after_pos}"
            )
        if not a.changed and len(a.before) != len(a.after):
            problems.append(
                f"alignment {idx}: unchanged spans differ in length "
                f"({len(a.before)} vs {len(a.after)})"
            )
        if a.before.is_empty() and a.after.is_empty():
            problems.append(f"alignment {idx}: both spans are empty")
        elif not a.changed and (a.before.is_empty() or a.after.is_empty()):
            problems.append(f"alignment {idx}: unchanged alignment has an empty span")
        before_pos = a.before.end
        after_pos = a.after.end

    if before_pos != before_len:
        problems.append(f"before covered up to {before_pos}, expected {before_len}")
    if after_pos != after_len:
        problems.append(f"after covered up to {after_pos}, expected {after_len}")

    return problems
