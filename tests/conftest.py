"""Pytest configuration and fixtures for test suite."""

import sys
from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

# Add src directory to path for imports
SRC_PATH = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_PATH))

from umidedupe.models import DuplicateSet, TaggedRecord  # noqa: E402


@pytest.fixture
def make_record() -> Callable[..., TaggedRecord]:
    """Factory for records carrying an optional UMI in the RX attribute."""
    counter = iter(range(1_000_000))

    def _factory(
        umi: str | None = None,
        *,
        name: str | None = None,
        umi_tag: str = "RX",
        **attributes: str,
    ) -> TaggedRecord:
        attrs = dict(attributes)
        if umi is not None:
            attrs[umi_tag] = umi
        return TaggedRecord(name=name or f"read_{next(counter):03d}", attributes=attrs)

    return _factory


@pytest.fixture
def make_set(make_record: Callable[..., TaggedRecord]) -> Callable[..., DuplicateSet]:
    """Factory for duplicate sets from a list of UMIs (None = no UMI)."""

    def _factory(
        umis: Sequence[str | None],
        *,
        set_id: str | None = None,
        umi_tag: str = "RX",
    ) -> DuplicateSet:
        return DuplicateSet(
            records=[make_record(umi, umi_tag=umi_tag) for umi in umis],
            set_id=set_id,
        )

    return _factory

