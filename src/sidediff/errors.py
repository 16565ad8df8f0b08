"""sidediff exception hierarchy.

Keep this module small and dependency-free: it is imported broadly across the
project and by tests. The alignment producers themselves never raise for
well-formed input; these errors belong to the boundary helpers.
"""


class SidediffError(Exception):
    """Base exception for all sidediff errors."""


class SidediffConfigError(SidediffError):
    """Raised for invalid user configuration."""


class SidediffInputError(SidediffError):
    """Raised when a boundary helper is called with unusable input."""


class HunkParseError(SidediffError):
    """Raised when unified-diff text cannot be parsed into hunks."""
