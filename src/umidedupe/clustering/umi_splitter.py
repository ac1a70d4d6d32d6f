"""Split a duplicate set into sub-groups of mutually close UMIs."""

from collections import Counter
from collections.abc import Iterable

from umidedupe.clustering.components import build_adjacency, label_components
from umidedupe.clustering.models import UmiClusteringConfig
from umidedupe.models import DuplicateSet, Record

__all__ = [
    "split_by_umi",
    "has_all_umis",
    "distinct_umis",
    "most_common_umi",
    "assign_inferred_umi",
]


def split_by_umi(duplicate_set: DuplicateSet, config: UmiClusteringConfig) -> list[DuplicateSet]:
    """Partition a duplicate set by single-linkage clustering of its UMIs.

    If any record lacks the UMI attribute the set is returned unsplit, as
    the only element of the result. Otherwise distinct UMIs are linked when
    their Hamming distance is at most ``config.max_edit_distance_to_join``
    and every record joins the group of its UMI's connected component.

    When ``config.add_inferred_umi`` is set, records are annotated in place
    with the most common UMI of their group.

    Parameters
    ----------
    duplicate_set : DuplicateSet
        Records sharing alignment coordinates.
    config : UmiClusteringConfig
        Clustering configuration.

    Returns
    -------
    list[DuplicateSet]
        Non-empty list of sub-groups, numbered by component.

    Raises
    ------
    UmiLengthMismatchError
        If two UMIs in the set have different lengths.
    """
    if not duplicate_set.records or not has_all_umis(duplicate_set.records, config.umi_tag):
        return [duplicate_set]

    umis = distinct_umis(duplicate_set.records, config.umi_tag)
    adjacency = build_adjacency(umis, config.max_edit_distance_to_join)
    labels, n_components = label_components(adjacency)
    label_by_umi = dict(zip(umis, labels, strict=True))

    groups = [
        DuplicateSet(set_id=_child_set_id(duplicate_set.set_id, number))
        for number in range(1, n_components + 1)
    ]
    for record in duplicate_set.records:
        umi = record.get_string_attribute(config.umi_tag)
        groups[label_by_umi[umi] - 1].add(record)

    if config.add_inferred_umi:
        for group in groups:
            assign_inferred_umi(group, config.umi_tag, config.inferred_umi_tag)

    return groups


def has_all_umis(records: Iterable[Record], umi_tag: str) -> bool:
    """Check that every record carries the UMI attribute."""
    return all(record.get_string_attribute(umi_tag) is not None for record in records)


def distinct_umis(records: Iterable[Record], umi_tag: str) -> list[str]:
    """Return the distinct UMIs of ``records`` in lexicographic order."""
    return sorted({record.get_string_attribute(umi_tag) for record in records})


def most_common_umi(records: Iterable[Record], umi_tag: str) -> str:
    """Return the most frequent UMI among ``records``.

    Ties are broken by taking the lexicographically smallest UMI.

    Parameters
    ----------
    records : Iterable[Record]
        Records that all carry the UMI attribute.
    umi_tag : str
        Attribute holding the UMI.

    Returns
    -------
    str
        Most frequent UMI.

    Raises
    ------
    ValueError
        If ``records`` is empty.
    """
    counts = Counter(record.get_string_attribute(umi_tag) for record in records)
    if not counts:
        raise ValueError("Cannot infer a UMI from an empty group")
    return min(counts, key=lambda umi: (-counts[umi], umi))


def assign_inferred_umi(group: DuplicateSet, umi_tag: str, inferred_umi_tag: str) -> str:
    """Write the group's most common UMI onto every member record.

    Records are modified in place; no copies are made.

    Returns
    -------
    str
        The inferred UMI.
    """
    inferred = most_common_umi(group.records, umi_tag)
    for record in group.records:
        record.set_string_attribute(inferred_umi_tag, inferred)
    return inferred


def _child_set_id(parent_id: str | None, number: int) -> str | None:
    if parent_id is None:
        return None
    return f"{parent_id}/{number}"
