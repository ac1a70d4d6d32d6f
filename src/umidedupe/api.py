"""Public API for UMI-aware refinement of duplicate sets.

This module provides the main public API for umidedupe, enabling:
- Splitting in-memory duplicate sets by UMI
- Running the file-to-file split on JSONL duplicate sets
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING

from umidedupe.clustering.models import (
    DEFAULT_INFERRED_UMI_TAG,
    DEFAULT_UMI_TAG,
    UmiClusteringConfig,
)
from umidedupe.engine.iterator import UmiAwareDuplicateSetIterator
from umidedupe.engine.source import IterableSource
from umidedupe.errors import UmiDedupeError
from umidedupe.models import DuplicateSet

if TYPE_CHECKING:
    from umidedupe.engine.config import RunResult

__all__ = [
    "split_duplicate_sets",
    "split_file",
]


def split_duplicate_sets(
    duplicate_sets: Iterable[DuplicateSet],
    *,
    max_edit_distance_to_join: int = 1,
    add_inferred_umi: bool = True,
    umi_tag: str = DEFAULT_UMI_TAG,
    inferred_umi_tag: str = DEFAULT_INFERRED_UMI_TAG,
) -> list[DuplicateSet]:
    """Split positional duplicate sets into UMI-refined groups.

    Parameters
    ----------
    duplicate_sets : Iterable[DuplicateSet]
        Positional duplicate sets.
    max_edit_distance_to_join : int, optional
        Largest Hamming distance at which UMIs are joined, by default 1.
    add_inferred_umi : bool, optional
        Annotate records with their group's most common UMI, by default True.
    umi_tag : str, optional
        Attribute holding the UMI, by default "RX".
    inferred_umi_tag : str, optional
        Attribute receiving the inferred UMI, by default "MI".

    Returns
    -------
    list[DuplicateSet]
        Refined groups in upstream order.

    Raises
    ------
    UmiLengthMismatchError
        If UMIs within one set have different lengths.

    Examples
    --------
        >>> from umidedupe import DuplicateSet, TaggedRecord, split_duplicate_sets
        >>> reads = [TaggedRecord(f"r{i}", {"RX": umi}) for i, umi in enumerate(["AAAA", "GGGG"])]
        >>> [len(g) for g in split_duplicate_sets([DuplicateSet(reads)])]
        [1, 1]
    """
    config = UmiClusteringConfig(
        max_edit_distance_to_join=max_edit_distance_to_join,
        add_inferred_umi=add_inferred_umi,
        umi_tag=umi_tag,
        inferred_umi_tag=inferred_umi_tag,
    )
    with UmiAwareDuplicateSetIterator(IterableSource(duplicate_sets), config) as iterator:
        return list(iterator)


def split_file(
    input_path: str | Path,
    output_path: str | Path,
    *,
    max_edit_distance_to_join: int = 1,
    add_inferred_umi: bool = True,
    umi_tag: str = DEFAULT_UMI_TAG,
    inferred_umi_tag: str = DEFAULT_INFERRED_UMI_TAG,
    events_path: str | Path | None = None,
    metrics_path: str | Path | None = None,
) -> RunResult:
    """Split every duplicate set of a JSONL file by UMI.

    Parameters
    ----------
    input_path : str | Path
        JSONL file with one duplicate set per line.
    output_path : str | Path
        JSONL file to write refined sets to.
    max_edit_distance_to_join : int, optional
        Largest Hamming distance at which UMIs are joined, by default 1.
    add_inferred_umi : bool, optional
        Annotate records with their group's most common UMI, by default True.
    umi_tag : str, optional
        Attribute holding the UMI, by default "RX".
    inferred_umi_tag : str, optional
        Attribute receiving the inferred UMI, by default "MI".
    events_path : str | Path | None, optional
        JSONL audit log path.
    metrics_path : str | Path | None, optional
        JSON metrics report path.

    Returns
    -------
    RunResult
        Run statistics and output file paths.

    Raises
    ------
    FileNotFoundError
        If input path does not exist.
    UmiDedupeError
        If the run fails.
    """
    from umidedupe.engine import RunConfig, run_umi_split

    input_path_obj = Path(input_path)
    if not input_path_obj.exists():
        raise FileNotFoundError(f"Input path not found: {input_path}")

    config = RunConfig(
        clustering=UmiClusteringConfig(
            max_edit_distance_to_join=max_edit_distance_to_join,
            add_inferred_umi=add_inferred_umi,
            umi_tag=umi_tag,
            inferred_umi_tag=inferred_umi_tag,
        ),
        events_path=Path(events_path) if events_path is not None else None,
        metrics_path=Path(metrics_path) if metrics_path is not None else None,
    )

    result = run_umi_split(input_path_obj, Path(output_path), config=config)

    if not result.success:
        raise UmiDedupeError(f"UMI split failed: {result.error_message}")

    return result
