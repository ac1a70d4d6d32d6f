"""UMI clustering of positional duplicate sets.

Distinct UMIs of a duplicate set are linked when their Hamming distance is
within a threshold; connected components of that graph become the refined
duplicate groups.
"""

from umidedupe.clustering.components import build_adjacency, label_components
from umidedupe.clustering.distance import get_edit_distance
from umidedupe.clustering.metrics import UmiMetrics
from umidedupe.clustering.models import (
    DEFAULT_INFERRED_UMI_TAG,
    DEFAULT_UMI_TAG,
    UmiClusteringConfig,
)
from umidedupe.clustering.umi_splitter import (
    assign_inferred_umi,
    most_common_umi,
    split_by_umi,
)

__all__ = [
    "DEFAULT_INFERRED_UMI_TAG",
    "DEFAULT_UMI_TAG",
    "UmiClusteringConfig",
    "UmiMetrics",
    "assign_inferred_umi",
    "build_adjacency",
    "get_edit_distance",
    "label_components",
    "most_common_umi",
    "split_by_umi",
]
