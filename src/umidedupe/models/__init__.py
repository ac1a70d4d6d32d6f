"""Shared data types for umidedupe.

Domain-specific types live closer to their consumers:
- Clustering configuration and metrics → umidedupe.clustering.models
- Audit types → umidedupe.audit.models
"""

from umidedupe.models.records import DuplicateSet, Record, TaggedRecord

__all__ = [
    "Record",
    "TaggedRecord",
    "DuplicateSet",
]
