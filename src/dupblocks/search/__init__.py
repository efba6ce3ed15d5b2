"""Duplicate-block search: seed scanning and range growth."""

from .growth import (
    GrowthOutcome,
    Position,
    StepResult,
    add_row,
    grow_at_position,
    grow_ranges,
    is_degenerate,
)
from .scan import ProgressSink, ScanSession, ScanStats, find_duplicate_blocks, total_pairs

__all__ = [
    "GrowthOutcome",
    "Position",
    "ProgressSink",
    "ScanSession",
    "ScanStats",
    "StepResult",
    "add_row",
    "find_duplicate_blocks",
    "grow_at_position",
    "grow_ranges",
    "is_degenerate",
    "total_pairs",
]
