"""Upstream sources of positional duplicate sets."""

from collections.abc import Iterable, Iterator
from typing import Protocol, runtime_checkable

from umidedupe.errors import IteratorExhaustedError
from umidedupe.models import DuplicateSet

__all__ = ["DuplicateSetSource", "IterableSource"]


@runtime_checkable
class DuplicateSetSource(Protocol):
    """Closeable, pull-based sequence of duplicate sets."""

    def has_next(self) -> bool:
        """Return True if another duplicate set is available."""
        ...

    def __next__(self) -> DuplicateSet:
        """Return the next duplicate set."""
        ...

    def close(self) -> None:
        """Release resources held by the source."""
        ...


class IterableSource:
    """Adapt any iterable of duplicate sets to :class:`DuplicateSetSource`.

    Keeps a one-element look-ahead so that :meth:`has_next` can be answered
    without handing out an element.
    """

    _EMPTY = object()

    def __init__(self, duplicate_sets: Iterable[DuplicateSet]) -> None:
        """Initialize source.

        Parameters
        ----------
        duplicate_sets : Iterable[DuplicateSet]
            Duplicate sets in upstream order. If the resulting iterator has a
            ``close`` method it is called by :meth:`close`.
        """
        self._iterator: Iterator[DuplicateSet] = iter(duplicate_sets)
        self._lookahead: object = self._EMPTY
        self._closed = False

    def has_next(self) -> bool:
        """Return True if another duplicate set is available."""
        if self._lookahead is not self._EMPTY:
            return True
        if self._closed:
            return False
        try:
            self._lookahead = next(self._iterator)
        except StopIteration:
            return False
        return True

    def __iter__(self) -> "IterableSource":
        return self

    def __next__(self) -> DuplicateSet:
        if not self.has_next():
            raise IteratorExhaustedError("No more duplicate sets in source")
        duplicate_set = self._lookahead
        self._lookahead = self._EMPTY
        return duplicate_set  # type: ignore[return-value]

    def close(self) -> None:
        """Close the wrapped iterator; safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        self._lookahead = self._EMPTY
        close = getattr(self._iterator, "close", None)
        if close is not None:
            close()
