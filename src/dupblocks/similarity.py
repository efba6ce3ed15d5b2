"""Line and line-range similarity scoring.

Lines are compared with the Jaro similarity after trimming surrounding
whitespace. Ranges are compared by the arithmetic mean of their per-line
scores, which is the single admission test used both when seeding a match and
when growing one.
"""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache

from rapidfuzz.distance import Jaro

from dupblocks.core import LineRange, RangeLengthMismatchError

__all__ = ["line_similarity", "mean_range_similarity", "range_similarity"]


@lru_cache(maxsize=65536)
def _jaro(a: str, b: str) -> float:
    return Jaro.similarity(a, b)


def line_similarity(a: str, b: str) -> float:
    """Return the Jaro similarity of two lines in ``[0, 1]`` (1.0 means identical)."""
    return _jaro(a.strip(), b.strip())


def mean_range_similarity(
    range1: LineRange,
    range2: LineRange,
    lines: Sequence[str],
) -> float:
    """Mean line similarity of two equal-length ranges, compared position by position."""
    if range1.length != range2.length:
        raise RangeLengthMismatchError(f"Invalid ranges {range1!r} and {range2!r}.")
    total = 0.0
    for line1, line2 in zip(range1.slice(lines), range2.slice(lines)):
        total += line_similarity(line1, line2)
    return total / range1.line_count


def range_similarity(
    range1: LineRange,
    range2: LineRange,
    lines: Sequence[str],
    threshold: float,
) -> bool:
    """Return ``True`` when the two ranges are more similar than ``threshold``.

    Raises
    ------
    RangeLengthMismatchError
        If the ranges differ in length.
    """
    return mean_range_similarity(range1, range2, lines) > threshold
