"""Near-duplicate block detection for line-oriented text documents."""

from dupblocks.core import DupBlocksValueError, LineRange, RangeLengthMismatchError, SeedOrderError
from dupblocks.search import GrowthOutcome, ScanSession, find_duplicate_blocks

__version__ = "0.1.0"

__all__ = [
    "DupBlocksValueError",
    "GrowthOutcome",
    "LineRange",
    "RangeLengthMismatchError",
    "ScanSession",
    "SeedOrderError",
    "find_duplicate_blocks",
    "__version__",
]
