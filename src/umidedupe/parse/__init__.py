"""JSONL interchange of duplicate sets.

One duplicate set per line::

    {"set_id": "chr1:1000:+", "records": [{"name": "read1", "attributes": {"RX": "ACGT"}}]}
"""

from umidedupe.parse.reader import DuplicateSetReader, parse_duplicate_set
from umidedupe.parse.schema import DUPLICATE_SET_SCHEMA
from umidedupe.parse.writer import duplicate_set_to_dict, write_duplicate_set, write_jsonl

__all__ = [
    "DUPLICATE_SET_SCHEMA",
    "DuplicateSetReader",
    "duplicate_set_to_dict",
    "parse_duplicate_set",
    "write_duplicate_set",
    "write_jsonl",
]
