"""Human-readable reports for invariant violations and errors.

Keep this module small and dependency-light: it only depends on the error
hierarchy.
"""

from __future__ import annotations

from sidediff.errors import (
    HunkParseError,
    SidediffConfigError,
    SidediffInputError,
)


def format_violations(problems: dict[str, list[str]]) -> str:
    """Format per-file alignment invariant violations (files sorted by path)."""
    failing = {path: errs for path, errs in problems.items() if errs}
    if not failing:
        return ""
    lines = [f"Alignment invariants violated in {len(failing)} file(s):\n"]
    for path in sorted(failing):
        lines.append(f"  {path}:")
        for err in failing[path]:
            lines.append(f"    - {err}")
        lines.append("")
    return "\n".join(lines).rstrip() + "\n"


def format_hint(exc: BaseException) -> str | None:
    """Return an actionable hint for a known error, or None."""
    msg = str(exc)

    if isinstance(exc, SidediffConfigError):
        if "sidediff.toml" in msg and "find" in msg.lower():
            return "create a sidediff.toml containing `version = 1` at the project root"
        if "engine.strategy" in msg:
            return "use one of: auto, content, hunks"
        return None

    if isinstance(exc, HunkParseError):
        return "pass the output of a single-file unified diff (e.g. `git diff -U0 -- <path>`)"

    if isinstance(exc, SidediffInputError) and "hunk list" in msg:
        return "supply hunks or switch engine.strategy to `auto` or `content`"

    return None


def format_error_with_hint(exc: BaseException) -> str:
    """Format error message + optional hint."""
    msg = (str(exc) or repr(exc)).strip()
    result = f"error: {msg}"
    hint = format_hint(exc)
    if hint:
        result += f"\nhint: {hint}"
    return result
