"""UMI-aware iterator over duplicate sets.

Wraps an upstream source of positional duplicate sets and yields the finer
groups obtained by clustering each set's UMIs. One upstream set may fan out
into several downstream sets.
"""

from collections import deque
from typing import Any

from umidedupe.audit.logger import AuditLogger
from umidedupe.clustering.metrics import UmiMetrics
from umidedupe.clustering.models import UmiClusteringConfig
from umidedupe.clustering.umi_splitter import distinct_umis, split_by_umi
from umidedupe.engine.source import DuplicateSetSource
from umidedupe.errors import IteratorExhaustedError
from umidedupe.models import DuplicateSet

__all__ = ["UmiAwareDuplicateSetIterator"]


class UmiAwareDuplicateSetIterator:
    """Iterator splitting upstream duplicate sets by UMI.

    Nothing happens until the caller pulls. Each call to ``next()`` either
    serves a pending group or pulls exactly one upstream set and splits it.

    Attributes
    ----------
    config : UmiClusteringConfig
        Clustering configuration, fixed for the iterator's lifetime.
    metrics : UmiMetrics
        Counters updated for every upstream set processed.
    sets_processed : int
        Number of upstream sets pulled so far.
    """

    def __init__(
        self,
        source: DuplicateSetSource,
        config: UmiClusteringConfig | None = None,
        logger: AuditLogger | None = None,
    ) -> None:
        """Initialize iterator.

        Parameters
        ----------
        source : DuplicateSetSource
            Upstream duplicate sets.
        config : UmiClusteringConfig | None, optional
            Clustering configuration. If None, uses defaults.
        logger : AuditLogger | None, optional
            Audit logger for per-set events. If None, no logging.
        """
        self._source = source
        self.config = config if config is not None else UmiClusteringConfig()
        self._logger = logger
        self._pending: deque[DuplicateSet] = deque()
        self._closed = False
        self.metrics = UmiMetrics()
        self.sets_processed = 0

    def has_next(self) -> bool:
        """Return True if a pending group exists or upstream has more sets."""
        return bool(self._pending) or self._source.has_next()

    def __iter__(self) -> "UmiAwareDuplicateSetIterator":
        return self

    def __next__(self) -> DuplicateSet:
        if not self._pending:
            if not self._source.has_next():
                raise IteratorExhaustedError("No more duplicate sets")
            self._process(next(self._source))
        return self._pending.popleft()

    def close(self) -> None:
        """Close the upstream source; groups already returned stay valid."""
        if self._closed:
            return
        self._closed = True
        self._source.close()

    def __enter__(self) -> "UmiAwareDuplicateSetIterator":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def _process(self, duplicate_set: DuplicateSet) -> None:
        groups = split_by_umi(duplicate_set, self.config)

        self.sets_processed += 1
        self.metrics.update(duplicate_set, groups, self.config.umi_tag)
        if self._logger:
            self._log_split(duplicate_set, groups)

        self._pending.extend(groups)

    def _log_split(self, duplicate_set: DuplicateSet, groups: list[DuplicateSet]) -> None:
        umi_tag = self.config.umi_tag
        missing = sum(1 for rec in duplicate_set if rec.get_string_attribute(umi_tag) is None)
        if missing:
            self._logger.umi_missing_fallback(
                duplicate_set.set_id, records=len(duplicate_set), missing=missing
            )
        elif len(groups) > 1:
            self._logger.duplicate_set_split(
                duplicate_set.set_id,
                records=len(duplicate_set),
                distinct_umis=len(distinct_umis(duplicate_set.records, umi_tag)),
                groups=len(groups),
            )
