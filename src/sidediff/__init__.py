from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from sidediff.errors import (
    HunkParseError,
    SidediffConfigError,
    SidediffError,
    SidediffInputError,
)
from sidediff.filediff import DiffSide, FileDiff, build_file_diff
from sidediff.hunks import Hunk, HunkCollector, HunkLine, LineKind, parse_unified_diff
from sidediff.matcher import align
from sidediff.panes import PaneLine, PaneRange, SourceLines, build
from sidediff.spans import Alignment, Span, validate_alignments
from sidediff.strategy import AlignmentStrategy, ContentMatch, HunkDerived, choose_strategy
from sidediff.translator import align_from_hunks


def _package_version() -> str:
    try:
        return version("sidediff")
    except PackageNotFoundError:
        # Running from a source checkout, or otherwise not installed.
        return "0.0.0"


__version__ = _package_version()

__all__ = [
    "Alignment",
    "AlignmentStrategy",
    "ContentMatch",
    "DiffSide",
    "FileDiff",
    "Hunk",
    "HunkCollector",
    "HunkDerived",
    "HunkLine",
    "HunkParseError",
    "LineKind",
    "PaneLine",
    "PaneRange",
    "SidediffConfigError",
    "SidediffError",
    "SidediffInputError",
    "SourceLines",
    "Span",
    "__version__",
    "align",
    "align_from_hunks",
    "build",
    "build_file_diff",
    "choose_strategy",
    "parse_unified_diff",
    "validate_alignments",
]
