"""Configuration for UMI-aware splitting of duplicate sets."""

from dataclasses import asdict, dataclass
from typing import Any

DEFAULT_UMI_TAG = "RX"
DEFAULT_INFERRED_UMI_TAG = "MI"


@dataclass(frozen=True)
class UmiClusteringConfig:
    """Configuration for clustering the UMIs of one duplicate set.

    Attributes
    ----------
    max_edit_distance_to_join : int
        Largest Hamming distance at which two UMIs join the same cluster,
        by default 1.
    add_inferred_umi : bool
        Write the most common UMI of each cluster onto its records,
        by default True.
    umi_tag : str
        Attribute holding the observed UMI, by default "RX".
    inferred_umi_tag : str
        Attribute receiving the inferred UMI, by default "MI".
    """

    max_edit_distance_to_join: int = 1
    add_inferred_umi: bool = True
    umi_tag: str = DEFAULT_UMI_TAG
    inferred_umi_tag: str = DEFAULT_INFERRED_UMI_TAG

    def __post_init__(self) -> None:
        """Validate configuration."""
        if isinstance(self.max_edit_distance_to_join, bool) or not isinstance(
            self.max_edit_distance_to_join, int
        ):
            raise ValueError(
                "max_edit_distance_to_join must be an integer, "
                f"got {self.max_edit_distance_to_join!r}"
            )
        if self.max_edit_distance_to_join < 0:
            raise ValueError(
                f"max_edit_distance_to_join must be >= 0, got {self.max_edit_distance_to_join}"
            )
        if not self.umi_tag:
            raise ValueError("umi_tag must be a non-empty string")
        if self.add_inferred_umi and not self.inferred_umi_tag:
            raise ValueError("inferred_umi_tag must be a non-empty string")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)
