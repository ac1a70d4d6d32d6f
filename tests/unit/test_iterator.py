"""Tests for the UMI-aware duplicate set iterator."""

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from umidedupe.audit import AuditLogger
from umidedupe.clustering import UmiClusteringConfig
from umidedupe.engine import IterableSource, UmiAwareDuplicateSetIterator
from umidedupe.errors import IteratorExhaustedError, UmiLengthMismatchError
from umidedupe.models import DuplicateSet


class _CountingSource(IterableSource):
    """IterableSource that records pulls and closes."""

    def __init__(self, duplicate_sets: list[DuplicateSet]) -> None:
        super().__init__(duplicate_sets)
        self.pulls = 0
        self.closes = 0

    def __next__(self) -> DuplicateSet:
        self.pulls += 1
        return super().__next__()

    def close(self) -> None:
        self.closes += 1
        super().close()


def _iterator(
    sets: list[DuplicateSet],
    **config: object,
) -> tuple[UmiAwareDuplicateSetIterator, _CountingSource]:
    source = _CountingSource(sets)
    return UmiAwareDuplicateSetIterator(source, UmiClusteringConfig(**config)), source


@pytest.mark.unit
def test_iterator_fans_out_one_set(make_set: Callable[..., DuplicateSet]) -> None:
    """Test one upstream set yields each of its UMI groups in turn."""
    iterator, source = _iterator([make_set(["AAAA", "AAAA", "AAAT", "GGGG"])])

    assert iterator.has_next()
    first = next(iterator)
    assert source.pulls == 1
    second = next(iterator)
    assert source.pulls == 1

    assert [len(first), len(second)] == [3, 1]
    assert not iterator.has_next()


@pytest.mark.unit
def test_iterator_pulls_lazily(make_set: Callable[..., DuplicateSet]) -> None:
    """Test nothing is pulled until next() and only one set per refill."""
    iterator, source = _iterator([make_set(["AAAA"]), make_set(["CCCC"])])

    assert iterator.has_next()
    assert source.pulls == 0

    next(iterator)
    assert source.pulls == 1
    assert iterator.sets_processed == 1


@pytest.mark.unit
def test_iterator_preserves_upstream_order(make_set: Callable[..., DuplicateSet]) -> None:
    """Test groups from earlier sets come before groups from later sets."""
    sets = [
        make_set(["AAAA", "TTTT"], set_id="s1"),
        make_set(["CCCC"], set_id="s2"),
        make_set(["GGGG", None], set_id="s3"),
    ]
    iterator, _ = _iterator(sets, max_edit_distance_to_join=0)

    ids = [group.set_id for group in iterator]

    assert ids == ["s1/1", "s1/2", "s2/1", "s3"]


@pytest.mark.unit
def test_iterator_exhausted_raises(make_set: Callable[..., DuplicateSet]) -> None:
    """Test next() past the end raises IteratorExhaustedError."""
    iterator, _ = _iterator([make_set(["AAAA"])])
    next(iterator)

    assert not iterator.has_next()
    with pytest.raises(IteratorExhaustedError):
        next(iterator)


@pytest.mark.unit
def test_iterator_exhausted_error_is_stop_iteration() -> None:
    """Test the exhaustion error ends for-loops like StopIteration."""
    iterator, _ = _iterator([])

    assert list(iterator) == []
    with pytest.raises(StopIteration):
        next(iterator)


@pytest.mark.unit
def test_iterator_close_is_idempotent(make_set: Callable[..., DuplicateSet]) -> None:
    """Test close() closes upstream once and keeps yielded groups valid."""
    iterator, source = _iterator([make_set(["AAAA", "AAAT"]), make_set(["CCCC"])])
    group = next(iterator)

    iterator.close()
    iterator.close()

    assert source.closes == 1
    assert len(group) == 2


@pytest.mark.unit
def test_iterator_context_manager_closes(make_set: Callable[..., DuplicateSet]) -> None:
    """Test leaving the with-block closes the source."""
    iterator, source = _iterator([make_set(["AAAA"])])

    with iterator as it:
        next(it)

    assert source.closes == 1


@pytest.mark.unit
def test_iterator_error_installs_nothing(make_set: Callable[..., DuplicateSet]) -> None:
    """Test a failing set propagates and leaves the buffer empty."""
    iterator, _ = _iterator([make_set(["AAAA", "AAA"]), make_set(["CCCC"])])

    with pytest.raises(UmiLengthMismatchError):
        next(iterator)

    assert iterator.sets_processed == 0
    group = next(iterator)
    assert group.records[0].get_string_attribute("RX") == "CCCC"


@pytest.mark.unit
def test_iterator_default_config() -> None:
    """Test the iterator falls back to default configuration."""
    iterator = UmiAwareDuplicateSetIterator(IterableSource([]))

    assert iterator.config == UmiClusteringConfig()


@pytest.mark.unit
def test_iterator_updates_metrics(make_set: Callable[..., DuplicateSet]) -> None:
    """Test metrics reflect every processed upstream set."""
    iterator, _ = _iterator([make_set(["AAAA", "GGGG"]), make_set([None])])

    list(iterator)

    assert iterator.metrics.duplicate_sets_with_umi == 1
    assert iterator.metrics.duplicate_sets_without_umi == 1
    assert iterator.metrics.inferred_unique_umis == 2


@pytest.mark.unit
def test_iterator_logs_split_and_fallback(
    tmp_path: Path,
    make_set: Callable[..., DuplicateSet],
) -> None:
    """Test split and fallback events reach the audit log."""
    log_path = tmp_path / "events.jsonl"
    sets = [
        make_set(["AAAA", "GGGG"], set_id="split"),
        make_set(["AAAA", None], set_id="fallback"),
        make_set(["AAAA", "AAAT"], set_id="single"),
    ]

    with AuditLogger(run_id="run", log_path=log_path) as logger:
        iterator = UmiAwareDuplicateSetIterator(IterableSource(sets), logger=logger)
        list(iterator)

    with log_path.open() as f:
        events = [json.loads(line) for line in f]

    assert [(e["event"], e["set_id"]) for e in events] == [
        ("duplicate_set_split", "split"),
        ("umi_missing_fallback", "fallback"),
    ]
    assert events[0]["data"] == {"records": 2, "distinct_umis": 2, "groups": 2}
    assert events[0]["level"] == "DEBUG"
    assert events[1]["data"] == {"records": 2, "records_missing_umi": 1}
    assert events[1]["level"] == "WARN"
