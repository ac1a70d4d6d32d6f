"""Running UMI metrics accumulated over processed duplicate sets."""

from dataclasses import asdict, dataclass
from typing import Any

from umidedupe.clustering.distance import get_edit_distance
from umidedupe.clustering.umi_splitter import distinct_umis, has_all_umis, most_common_umi
from umidedupe.models import DuplicateSet

__all__ = ["UmiMetrics"]


@dataclass
class UmiMetrics:
    """Counters describing the UMIs seen while splitting duplicate sets.

    Attributes
    ----------
    duplicate_sets_with_umi : int
        Input sets in which every record carried a UMI.
    duplicate_sets_without_umi : int
        Input sets passed through unsplit because a UMI was missing.
    records_with_umi : int
        Records belonging to sets with UMIs.
    observed_unique_umis : int
        Sum over sets of the number of distinct observed UMIs.
    inferred_unique_umis : int
        Sum over sets of the number of UMI groups produced.
    observed_base_errors : int
        Sum over records of the Hamming distance between the record's UMI
        and the most common UMI of its group.
    umi_bases : int
        Total number of UMI bases observed.
    """

    duplicate_sets_with_umi: int = 0
    duplicate_sets_without_umi: int = 0
    records_with_umi: int = 0
    observed_unique_umis: int = 0
    inferred_unique_umis: int = 0
    observed_base_errors: int = 0
    umi_bases: int = 0

    def update(self, duplicate_set: DuplicateSet, groups: list[DuplicateSet], umi_tag: str) -> None:
        """Account for one input set and the groups it was split into.

        Parameters
        ----------
        duplicate_set : DuplicateSet
            The input set.
        groups : list[DuplicateSet]
            Output of the splitter for ``duplicate_set``.
        umi_tag : str
            Attribute holding the UMI.
        """
        if not duplicate_set.records or not has_all_umis(duplicate_set.records, umi_tag):
            self.duplicate_sets_without_umi += 1
            return

        self.duplicate_sets_with_umi += 1
        self.records_with_umi += len(duplicate_set)
        self.observed_unique_umis += len(distinct_umis(duplicate_set.records, umi_tag))
        self.inferred_unique_umis += len(groups)

        for group in groups:
            consensus = most_common_umi(group.records, umi_tag)
            for record in group.records:
                umi = record.get_string_attribute(umi_tag)
                self.umi_bases += len(umi)
                self.observed_base_errors += get_edit_distance(umi, consensus)

    @property
    def mean_umi_length(self) -> float:
        """Average UMI length over records with UMIs."""
        if not self.records_with_umi:
            return 0.0
        return self.umi_bases / self.records_with_umi

    @property
    def umi_base_error_rate(self) -> float:
        """Fraction of UMI bases disagreeing with their group's inferred UMI."""
        if not self.umi_bases:
            return 0.0
        return self.observed_base_errors / self.umi_bases

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary including derived values."""
        data = asdict(self)
        data["mean_umi_length"] = self.mean_umi_length
        data["umi_base_error_rate"] = self.umi_base_error_rate
        return data
