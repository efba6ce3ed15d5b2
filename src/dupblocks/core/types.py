from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class LineRange:
    """Inclusive ``[start, end]`` interval over zero-based line indices."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0:
            raise ValueError("start must be >= 0")
        if self.end < self.start:
            raise ValueError("end must be >= start")

    @classmethod
    def single(cls, index: int) -> "LineRange":
        return cls(index, index)

    @property
    def length(self) -> int:
        return self.end - self.start

    @property
    def line_count(self) -> int:
        return self.end - self.start + 1

    def slice(self, lines: Sequence[str]) -> Sequence[str]:
        return lines[self.start : self.end + 1]


Leaf = tuple[LineRange, LineRange]
