"""Edit distance between fixed-length UMIs."""

from umidedupe.errors import MissingUmiError, UmiLengthMismatchError

__all__ = ["get_edit_distance"]


def get_edit_distance(umi_a: str | None, umi_b: str | None) -> int:
    """Count mismatched positions between two equal-length UMIs.

    This is the Hamming distance: substitutions only, no insertions or
    deletions.

    Parameters
    ----------
    umi_a : str | None
        First UMI.
    umi_b : str | None
        Second UMI.

    Returns
    -------
    int
        Number of positions at which the UMIs differ.

    Raises
    ------
    MissingUmiError
        If either UMI is None.
    UmiLengthMismatchError
        If the UMIs have different lengths.
    """
    if umi_a is None or umi_b is None:
        raise MissingUmiError(
            "Attempt to compare two incomparable UMIs. At least one of the UMIs was null."
        )
    if len(umi_a) != len(umi_b):
        raise UmiLengthMismatchError(umi_a, umi_b)

    return sum(1 for base_a, base_b in zip(umi_a, umi_b, strict=True) if base_a != base_b)
