"""Record and duplicate-set data models for umidedupe.

Records are owned by whatever produced them (an alignment reader, a JSONL
file, a test). The clustering engine only reads and writes named string
attributes on them, so any object satisfying :class:`Record` can be used.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

__all__ = ["Record", "TaggedRecord", "DuplicateSet"]


@runtime_checkable
class Record(Protocol):
    """A read alignment exposing named string attributes."""

    def get_string_attribute(self, key: str) -> str | None:
        """Return the attribute value stored under ``key``, or None if absent."""
        ...

    def set_string_attribute(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        ...


@dataclass(eq=False)
class TaggedRecord:
    """In-memory record with a name and a string attribute store.

    Equality is identity: two records with the same name and attributes are
    still distinct reads.

    Attributes
    ----------
    name : str
        Read name.
    attributes : dict[str, str]
        Attribute store keyed by tag name (e.g., "RX" for the UMI).
    """

    name: str
    attributes: dict[str, str] = field(default_factory=dict)

    def get_string_attribute(self, key: str) -> str | None:
        """Return attribute value or None if the record lacks ``key``."""
        return self.attributes.get(key)

    def set_string_attribute(self, key: str, value: str) -> None:
        """Set attribute value in place."""
        self.attributes[key] = value

    def to_dict(self) -> dict[str, Any]:
        """Convert record to dictionary for JSON serialization.

        Returns
        -------
        dict[str, Any]
            Dictionary with ``name`` and ``attributes``.
        """
        return {"name": self.name, "attributes": dict(self.attributes)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TaggedRecord":
        """Reconstruct a TaggedRecord from a dictionary.

        Parameters
        ----------
        data : dict[str, Any]
            Dictionary (e.g. from JSON) with ``name`` and optional ``attributes``.

        Returns
        -------
        TaggedRecord
            Reconstructed record.
        """
        return cls(name=data["name"], attributes=dict(data.get("attributes", {})))


class DuplicateSet:
    """Ordered, mutable collection of records that are duplicates by position.

    Attributes
    ----------
    set_id : str | None
        Optional label (e.g., the shared alignment coordinates).
    records : list[Record]
        Member records in insertion order.
    """

    def __init__(
        self,
        records: Iterable[Record] | None = None,
        set_id: str | None = None,
    ) -> None:
        """Initialize duplicate set.

        Parameters
        ----------
        records : Iterable[Record] | None, optional
            Initial members.
        set_id : str | None, optional
            Optional label.
        """
        self.set_id = set_id
        self.records: list[Record] = list(records) if records is not None else []

    def add(self, record: Record) -> None:
        """Append a record to the set."""
        self.records.append(record)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    def __contains__(self, record: object) -> bool:
        return any(member is record for member in self.records)

    def __repr__(self) -> str:
        return f"DuplicateSet(set_id={self.set_id!r}, size={len(self.records)})"
