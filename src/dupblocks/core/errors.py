"""Common dupblocks-specific exceptions."""


class DupBlocksValueError(ValueError):
    """Raised when dupblocks detects invalid user-provided data."""


class SeedOrderError(DupBlocksValueError):
    """Raised when a seed pair is reversed, overlapping, or uneven in length."""


class RangeLengthMismatchError(AssertionError):
    """Raised when two ranges of different lengths are scored against each other.

    Growth keeps both ranges the same length, so this always points at a bug in
    range construction and is never handled.
    """


__all__ = ["DupBlocksValueError", "RangeLengthMismatchError", "SeedOrderError"]
