"""Range growth: expand a seed match outward while it stays similar.

A seed is a pair of single-line ranges whose lines are similar. Each round of
growth tries to prepend one line to both ranges and then to append one line to
both ranges, re-scoring the whole block each time. Growth stops as soon as a
round fails on either side, and the ranges reached at that point form a leaf.

Every pair grown to is remembered in the visited set. When growth from a new
seed reaches a pair that is already there, the same block has been found from
another seed and the seed is abandoned without a leaf.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from dupblocks.core import Leaf, LineRange
from dupblocks.similarity import range_similarity

__all__ = [
    "GrowthOutcome",
    "Position",
    "StepResult",
    "add_row",
    "grow_at_position",
    "grow_ranges",
    "is_degenerate",
]


class Position(str, Enum):
    """Side of a range that a growth step extends."""

    START = "start"
    END = "end"


class StepResult(str, Enum):
    GREW = "grew"
    BLOCKED = "blocked"
    ALREADY_VISITED = "already_visited"


class GrowthOutcome(str, Enum):
    """Terminal state of growing a single seed."""

    LEAF = "leaf"
    ABORTED = "aborted"
    DEGENERATE = "degenerate"


def add_row(line_range: LineRange, position: Position) -> LineRange:
    """Return ``line_range`` extended by one line at ``position``."""
    if position is Position.START:
        return LineRange(line_range.start - 1, line_range.end)
    return LineRange(line_range.start, line_range.end + 1)


def is_degenerate(range1: LineRange, range2: LineRange) -> bool:
    """Whether the two ranges touch, i.e. are pieces of one contiguous run."""
    return abs(range1.end - range2.start) == 1 or abs(range1.start - range2.end) == 1


def _can_grow(range1: LineRange, range2: LineRange, position: Position, n_lines: int) -> bool:
    if position is Position.START:
        return range1.start >= 1 and range2.start >= 1
    last = n_lines - 1
    return range1.end < last and range2.end < last


def grow_at_position(
    range1: LineRange,
    range2: LineRange,
    lines: Sequence[str],
    threshold: float,
    visited: set[Leaf],
    position: Position,
    n_lines: int | None = None,
) -> tuple[StepResult, LineRange, LineRange]:
    """Try to extend both ranges by one line at ``position``.

    Returns the step result together with the ranges to continue from. On
    ``GREW`` these are the extended ranges, which have been added to
    ``visited``; otherwise they are the inputs unchanged.
    """
    if n_lines is None:
        n_lines = len(lines)
    if not _can_grow(range1, range2, position, n_lines):
        return StepResult.BLOCKED, range1, range2

    trial1 = add_row(range1, position)
    trial2 = add_row(range2, position)
    if not range_similarity(trial1, trial2, lines, threshold):
        return StepResult.BLOCKED, range1, range2

    candidate = (trial1, trial2)
    if candidate in visited:
        return StepResult.ALREADY_VISITED, range1, range2
    visited.add(candidate)
    return StepResult.GREW, trial1, trial2


def grow_ranges(
    range1: LineRange,
    range2: LineRange,
    lines: Sequence[str],
    threshold: float,
    visited: set[Leaf],
    leaves: list[Leaf],
) -> GrowthOutcome:
    """Grow a seed pair to its largest similar surrounding block.

    ``visited`` and ``leaves`` are shared across all seeds of a scan and are
    updated in place. At most one leaf is appended per call.
    """
    if is_degenerate(range1, range2):
        return GrowthOutcome.DEGENERATE

    n_lines = len(lines)
    while True:
        grew_both = True
        for position in (Position.START, Position.END):
            result, range1, range2 = grow_at_position(
                range1, range2, lines, threshold, visited, position, n_lines
            )
            if result is StepResult.ALREADY_VISITED:
                return GrowthOutcome.ABORTED
            if result is StepResult.BLOCKED:
                grew_both = False
        if not grew_both:
            break

    leaves.append((range1, range2))
    return GrowthOutcome.LEAF
