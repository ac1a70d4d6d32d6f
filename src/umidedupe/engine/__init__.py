"""UMI-aware duplicate set iteration and run orchestration.

This package provides the iterator that refines positional duplicate sets by
UMI, adapters for upstream sources, and a file-to-file runner.
"""

from umidedupe.engine.config import RunConfig, RunResult
from umidedupe.engine.iterator import UmiAwareDuplicateSetIterator
from umidedupe.engine.runner import run_umi_split
from umidedupe.engine.source import DuplicateSetSource, IterableSource

__all__ = [
    "DuplicateSetSource",
    "IterableSource",
    "RunConfig",
    "RunResult",
    "UmiAwareDuplicateSetIterator",
    "run_umi_split",
]
