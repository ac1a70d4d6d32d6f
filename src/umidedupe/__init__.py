"""UMI-aware refinement of positional duplicate sets.

This package provides:
- Data models (umidedupe.models) — records and duplicate sets
- Clustering (umidedupe.clustering) — Hamming-distance UMI clustering
- Engine (umidedupe.engine) — UMI-aware duplicate set iterator and runner
- Parsing (umidedupe.parse) — JSONL interchange of duplicate sets
- Audit (umidedupe.audit) — structured event logging
- CLI (umidedupe.cli) — command-line interface
- Public API (umidedupe.api) — high-level convenience functions
"""

__version__ = "0.1.0"
__license__ = "MIT"

from umidedupe.api import split_duplicate_sets, split_file
from umidedupe.clustering import UmiClusteringConfig, get_edit_distance, split_by_umi
from umidedupe.engine import UmiAwareDuplicateSetIterator
from umidedupe.errors import (
    InputFormatError,
    IteratorExhaustedError,
    MissingUmiError,
    UmiDedupeError,
    UmiLengthMismatchError,
)
from umidedupe.models import DuplicateSet, Record, TaggedRecord

__all__ = [
    "__version__",
    "__license__",
    "DuplicateSet",
    "InputFormatError",
    "IteratorExhaustedError",
    "MissingUmiError",
    "Record",
    "TaggedRecord",
    "UmiAwareDuplicateSetIterator",
    "UmiClusteringConfig",
    "UmiDedupeError",
    "UmiLengthMismatchError",
    "get_edit_distance",
    "split_by_umi",
    "split_duplicate_sets",
    "split_file",
]
