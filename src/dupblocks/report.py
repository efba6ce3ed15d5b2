"""Filtering and rendering of discovered matches."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from dupblocks.core import Leaf

SEPARATOR = "------"
DEFAULT_MIN_BLOCK_LENGTH = 5

__all__ = [
    "DEFAULT_MIN_BLOCK_LENGTH",
    "SEPARATOR",
    "filter_leaves",
    "match_record",
    "matches_payload",
    "render_match",
    "render_report",
]


def filter_leaves(leaves: Iterable[Leaf], min_block_length: int = DEFAULT_MIN_BLOCK_LENGTH) -> list[Leaf]:
    """Keep leaves whose ranges span at least ``min_block_length`` (``end - start``)."""
    return [leaf for leaf in leaves if leaf[1].length >= min_block_length]


def render_match(lines: Sequence[str], leaf: Leaf) -> str:
    """Render one match as both blocks verbatim followed by closing separators."""
    range1, range2 = leaf
    parts = [
        "\n".join(range1.slice(lines)),
        SEPARATOR,
        "\n".join(range2.slice(lines)),
        SEPARATOR,
        SEPARATOR,
    ]
    return "\n".join(parts)


def render_report(lines: Sequence[str], leaves: Iterable[Leaf]) -> str:
    """Render every match in discovery order; empty string when there are none."""
    return "\n".join(render_match(lines, leaf) for leaf in leaves)


def match_record(lines: Sequence[str], leaf: Leaf, *, include_text: bool = True) -> dict[str, Any]:
    range1, range2 = leaf
    record: dict[str, Any] = {
        "range1": {"start": range1.start, "end": range1.end},
        "range2": {"start": range2.start, "end": range2.end},
        "line_count": range1.line_count,
    }
    if include_text:
        record["text1"] = list(range1.slice(lines))
        record["text2"] = list(range2.slice(lines))
    return record


def matches_payload(
    lines: Sequence[str],
    leaves: Sequence[Leaf],
    *,
    document: str | None = None,
    threshold: float | None = None,
    min_block_length: int | None = None,
    include_text: bool = True,
) -> dict[str, Any]:
    """Build a JSON-serialisable summary of reported matches."""

    return {
        "document": document,
        "line_count": len(lines),
        "threshold": threshold,
        "min_block_length": min_block_length,
        "match_count": len(leaves),
        "matches": [match_record(lines, leaf, include_text=include_text) for leaf in leaves],
    }
