"""Core types and errors shared across dupblocks modules."""

from .errors import DupBlocksValueError, RangeLengthMismatchError, SeedOrderError
from .types import Leaf, LineRange

__all__ = [
    "DupBlocksValueError",
    "Leaf",
    "LineRange",
    "RangeLengthMismatchError",
    "SeedOrderError",
]
