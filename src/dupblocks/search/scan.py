"""Whole-document scan: seed every similar line pair and grow it."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

from dupblocks.core import Leaf, LineRange, SeedOrderError
from dupblocks.report import filter_leaves
from dupblocks.search.growth import GrowthOutcome, grow_ranges
from dupblocks.similarity import line_similarity

__all__ = [
    "ProgressSink",
    "ScanSession",
    "ScanStats",
    "find_duplicate_blocks",
    "total_pairs",
]


class ProgressSink(Protocol):
    """Invoked after each row of the pairwise scan with the pairs it covered."""

    def __call__(self, advance: int, /) -> None:  # pragma: no cover - interface only
        ...


def total_pairs(n_lines: int) -> int:
    """Number of ``(i, j)`` pairs with ``i < j`` over ``n_lines`` lines."""
    return n_lines * (n_lines - 1) // 2 if n_lines > 1 else 0


@dataclass(slots=True)
class ScanStats:
    """Counters collected over one scan."""

    pairs_compared: int = 0
    seeds: int = 0
    outcomes: Counter[GrowthOutcome] = field(default_factory=Counter)

    def as_dict(self) -> dict[str, int]:
        data = {"pairs_compared": self.pairs_compared, "seeds": self.seeds}
        for outcome in GrowthOutcome:
            data[outcome.value] = self.outcomes.get(outcome, 0)
        return data


@dataclass(slots=True)
class ScanSession:
    """State of a single document scan.

    Parameters
    ----------
    lines:
        Document lines, untrimmed.
    threshold:
        Similarity a line pair (and later a grown block) must strictly exceed.

    The visited set and the leaves list live for the whole scan and are shared
    by every seed, so a block reachable from several seeds is reported once.
    """

    lines: Sequence[str]
    threshold: float
    visited: set[Leaf] = field(default_factory=set)
    leaves: list[Leaf] = field(default_factory=list)
    stats: ScanStats = field(default_factory=ScanStats)

    @property
    def n_lines(self) -> int:
        return len(self.lines)

    def grow(self, range1: LineRange, range2: LineRange) -> GrowthOutcome:
        """Grow one seed pair, recording any leaf in ``self.leaves``."""
        if range1.length != range2.length:
            raise SeedOrderError(
                f"Seed ranges must have equal length (got {range1!r} and {range2!r})"
            )
        if range1.end >= range2.start:
            raise SeedOrderError(
                f"First seed range must precede the second (got {range1!r} and {range2!r})"
            )
        if range2.end >= self.n_lines:
            raise SeedOrderError(f"Seed {range2!r} exceeds document of {self.n_lines} lines")
        outcome = grow_ranges(
            range1, range2, self.lines, self.threshold, self.visited, self.leaves
        )
        self.stats.seeds += 1
        self.stats.outcomes[outcome] += 1
        return outcome

    def scan(self, progress: ProgressSink | None = None) -> list[Leaf]:
        """Compare every line pair and grow those above the threshold.

        Returns the leaves in discovery order.
        """
        trimmed = [line.strip() for line in self.lines]
        n_lines = len(trimmed)
        for i in range(n_lines):
            line1 = trimmed[i]
            for j in range(i + 1, n_lines):
                if line_similarity(line1, trimmed[j]) > self.threshold:
                    self.grow(LineRange.single(i), LineRange.single(j))
            row_pairs = n_lines - i - 1
            self.stats.pairs_compared += row_pairs
            if progress is not None and row_pairs:
                progress(row_pairs)
        return self.leaves


def find_duplicate_blocks(
    lines: Sequence[str],
    threshold: float = 0.9,
    *,
    min_block_length: int = 5,
) -> list[Leaf]:
    """Scan ``lines`` and return the matches spanning at least ``min_block_length`` steps."""
    session = ScanSession(lines=lines, threshold=threshold)
    return filter_leaves(session.scan(), min_block_length)
