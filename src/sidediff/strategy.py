from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Literal

from sidediff.errors import SidediffInputError
from sidediff.hunks import Hunk
from sidediff.matcher import align
from sidediff.spans import Alignment
from sidediff.translator import align_from_hunks

StrategyMode = Literal["auto", "content", "hunks"]


class AlignmentStrategy(ABC):
    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def align(self, before: Sequence[str], after: Sequence[str]) -> list[Alignment]:
        """Align two line sequences (returns a coverage-complete alignment list)."""


class ContentMatch(AlignmentStrategy):
    """Guess the correspondence from line content alone."""

    def align(self, before: Sequence[str], after: Sequence[str]) -> list[Alignment]:
        return align(before, after)


class HunkDerived(AlignmentStrategy):
    """Trust an externally computed hunk list; content is only used for lengths."""

    def __init__(self, hunks: Sequence[Hunk]) -> None:
        self.hunks = tuple(hunks)

    def align(self, before: Sequence[str], after: Sequence[str]) -> list[Alignment]:
        return align_from_hunks(self.hunks, len(before), len(after))


def choose_strategy(
    hunks: Sequence[Hunk] | None, *, mode: StrategyMode = "auto"
) -> AlignmentStrategy:
    """Pick a strategy: hunks when available (even an empty list), content otherwise."""

    if mode == "content":
        return ContentMatch()
    if mode == "hunks":
        if hunks is None:
            raise SidediffInputError("strategy 'hunks' requires a hunk list")
        return HunkDerived(hunks)
    if mode != "auto":
        raise SidediffInputError(f"unknown strategy: {mode!r}")
    if hunks is not None:
        return HunkDerived(hunks)
    return ContentMatch()
