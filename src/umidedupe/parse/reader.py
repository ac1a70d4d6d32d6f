"""Streaming reader for duplicate sets stored as JSONL."""

import json
from pathlib import Path
from typing import Any

from jsonschema import ValidationError

from umidedupe.errors import InputFormatError
from umidedupe.models import DuplicateSet, TaggedRecord
from umidedupe.parse.schema import duplicate_set_validator

__all__ = ["DuplicateSetReader", "parse_duplicate_set"]


def parse_duplicate_set(data: dict[str, Any]) -> DuplicateSet:
    """Build a DuplicateSet from an already validated JSON object."""
    return DuplicateSet(
        records=[TaggedRecord.from_dict(item) for item in data["records"]],
        set_id=data.get("set_id"),
    )


class DuplicateSetReader:
    """Read one duplicate set per line from a JSONL file.

    Lines are decoded and schema-validated lazily, one per ``next()`` call.
    Blank lines are skipped.

    Attributes
    ----------
    path : Path
        Input file path.
    line_number : int
        1-based number of the last line read.
    """

    def __init__(self, path: str | Path) -> None:
        """Open ``path`` for reading.

        Raises
        ------
        FileNotFoundError
            If the file does not exist.
        """
        self.path = Path(path)
        if not self.path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        self.line_number = 0
        self._validator = duplicate_set_validator()
        self._file = self.path.open("rb")

    def __iter__(self) -> "DuplicateSetReader":
        return self

    def __next__(self) -> DuplicateSet:
        if self._file.closed:
            raise StopIteration
        for line in self._file:
            self.line_number += 1
            if line.strip():
                return self._decode(line)
        raise StopIteration

    def _decode(self, raw: bytes) -> DuplicateSet:
        try:
            line = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InputFormatError(f"invalid UTF-8: {e.reason}", self.line_number) from e

        try:
            data = json.loads(line)
        except json.JSONDecodeError as e:
            raise InputFormatError(f"invalid JSON: {e.msg}", self.line_number) from e

        try:
            self._validator.validate(data)
        except ValidationError as e:
            raise InputFormatError(f"schema violation: {e.message}", self.line_number) from e

        return parse_duplicate_set(data)

    def close(self) -> None:
        """Close the underlying file handle."""
        if not self._file.closed:
            self._file.close()

    def __enter__(self) -> "DuplicateSetReader":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
