"""Common utility functions for umidedupe."""

from umidedupe.utils.hashing import calculate_file_sha256, format_sha256
from umidedupe.utils.timestamps import get_iso_timestamp

__all__ = [
    "get_iso_timestamp",
    "calculate_file_sha256",
    "format_sha256",
]
