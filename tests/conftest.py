from __future__ import annotations

import pytest

BLOCK = ["aaaa", "bbbb", "cccc", "dddd", "eeee", "ffff", "gggg"]


@pytest.fixture
def example_lines() -> list[str]:
    return ["abc", "def", "abc", "deg"]


@pytest.fixture
def two_block_lines() -> list[str]:
    """Seven distinct lines repeated twice, framed by unrelated single-character lines."""
    return ["#", *BLOCK, "%", *BLOCK, "&"]
