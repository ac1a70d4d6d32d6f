"""Exception types raised by umidedupe."""

__all__ = [
    "UmiDedupeError",
    "UmiLengthMismatchError",
    "MissingUmiError",
    "IteratorExhaustedError",
    "InputFormatError",
]


class UmiDedupeError(Exception):
    """Base class for all umidedupe errors."""


class UmiLengthMismatchError(UmiDedupeError):
    """Raised when two UMIs of different lengths are compared.

    Indicates malformed upstream data: UMIs within one duplicate set are
    expected to share a single fixed length.
    """

    def __init__(self, umi_a: str, umi_b: str) -> None:
        """Initialize length mismatch error.

        Parameters
        ----------
        umi_a : str
            First UMI.
        umi_b : str
            Second UMI.
        """
        super().__init__(f"Barcode {umi_a} and {umi_b} do not have matching lengths.")
        self.umi_a = umi_a
        self.umi_b = umi_b


class MissingUmiError(UmiDedupeError):
    """Raised when a null UMI reaches the comparison primitive."""


class IteratorExhaustedError(UmiDedupeError, StopIteration):
    """Raised when the next duplicate set is requested from an exhausted iterator."""


class InputFormatError(UmiDedupeError):
    """Raised when a duplicate-set line cannot be decoded or validated."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        """Initialize input format error.

        Parameters
        ----------
        message : str
            Error message.
        line_number : int | None, optional
            1-based line number of the offending input line.
        """
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number
