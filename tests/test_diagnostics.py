"""Tests for sidediff.diagnostics: violation reports and actionable hints."""

from __future__ import annotations

from sidediff.diagnostics import format_error_with_hint, format_hint, format_violations
from sidediff.errors import (
    HunkParseError,
    SidediffConfigError,
    SidediffError,
    SidediffInputError,
)

# --- format_violations ---


def test_format_violations_single_file() -> None:
    result = format_violations({"src/a.py": ["alignment 1: both spans are empty"]})
    assert "Alignment invariants violated in 1 file(s):" in result
    assert "src/a.py:" in result
    assert "- alignment 1: both spans are empty" in result


def test_format_violations_sorted_and_skips_clean_files() -> None:
    result = format_violations(
        {
            "b.txt": ["before covered up to 3, expected 4"],
            "a.txt": ["alignment 0: before starts at 1, expected 0"],
            "clean.txt": [],
        }
    )
    assert "in 2 file(s)" in result
    assert "clean.txt" not in result
    assert result.index("a.txt") < result.index("b.txt")
    assert result.endswith("\n")


def test_format_violations_empty_returns_empty() -> None:
    assert format_violations({}) == ""
    assert format_violations({"a.txt": []}) == ""


# --- format_hint ---


def test_hint_for_missing_config() -> None:
    exc = SidediffConfigError("Could not find sidediff.toml by walking upward from start path.")
    hint = format_hint(exc)
    assert hint is not None
    assert "version = 1" in hint


def test_hint_for_bad_strategy() -> None:
    exc = SidediffConfigError(
        "Invalid config: engine.strategy must be one of auto, content, hunks."
    )
    assert format_hint(exc) == "use one of: auto, content, hunks"


def test_hint_for_other_config_error_is_none() -> None:
    assert format_hint(SidediffConfigError("Unsupported config version: 2 (expected 1).")) is None


def test_hint_for_hunk_parse_error() -> None:
    hint = format_hint(HunkParseError("Invalid hunk header: '@@ nope'"))
    assert hint is not None
    assert "unified diff" in hint


def test_hint_for_missing_hunk_list() -> None:
    hint = format_hint(SidediffInputError("strategy 'hunks' requires a hunk list"))
    assert hint is not None
    assert "engine.strategy" in hint


def test_no_hint_for_unknown_errors() -> None:
    assert format_hint(SidediffError("boom")) is None
    assert format_hint(ValueError("boom")) is None


# --- format_error_with_hint ---


def test_error_with_hint() -> None:
    exc = SidediffInputError("strategy 'hunks' requires a hunk list")
    result = format_error_with_hint(exc)
    assert result.startswith("error: strategy 'hunks' requires a hunk list")
    assert "\nhint: " in result


def test_error_without_hint() -> None:
    assert format_error_with_hint(SidediffError("boom")) == "error: boom"


def test_error_with_empty_message_uses_repr() -> None:
    assert format_error_with_hint(SidediffError()) == "error: SidediffError()"
