"""JSONL writer for duplicate sets."""

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any, TextIO

from umidedupe.models import DuplicateSet, Record

__all__ = ["duplicate_set_to_dict", "write_duplicate_set", "write_jsonl"]


def duplicate_set_to_dict(duplicate_set: DuplicateSet) -> dict[str, Any]:
    """Convert a duplicate set to its JSONL representation.

    Records must provide ``to_dict()``; foreign record types that do not
    are serialized with ``name`` only.
    """
    return {
        "set_id": duplicate_set.set_id,
        "records": [_record_to_dict(record) for record in duplicate_set.records],
    }


def _record_to_dict(record: Record) -> dict[str, Any]:
    to_dict = getattr(record, "to_dict", None)
    if to_dict is not None:
        return to_dict()
    return {"name": str(getattr(record, "name", record))}


def write_duplicate_set(duplicate_set: DuplicateSet, handle: TextIO) -> None:
    """Write one duplicate set as a single JSON line to an open handle."""
    json_str = json.dumps(
        duplicate_set_to_dict(duplicate_set),
        ensure_ascii=False,
        sort_keys=True,
        separators=(",", ":"),
    )
    handle.write(json_str + "\n")


def write_jsonl(duplicate_sets: Iterable[DuplicateSet], path: str | Path) -> int:
    """Write duplicate sets to a JSONL file, one per line.

    Parameters
    ----------
    duplicate_sets : Iterable[DuplicateSet]
        Sets to write; consumed lazily.
    path : str | Path
        Output file path.

    Returns
    -------
    int
        Number of sets written.
    """
    file_path = Path(path)
    count = 0
    with file_path.open("w", encoding="utf-8", newline="\n") as f:
        for duplicate_set in duplicate_sets:
            write_duplicate_set(duplicate_set, f)
            count += 1
    return count
