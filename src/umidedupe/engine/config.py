"""Run configuration and result dataclasses."""

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from umidedupe.clustering.models import UmiClusteringConfig


@dataclass
class RunConfig:
    """Configuration for a file-to-file UMI split run.

    Attributes
    ----------
    clustering : UmiClusteringConfig
        UMI clustering configuration.
    events_path : Path | None
        JSONL audit log path. If None, no events are written.
    metrics_path : Path | None
        JSON metrics report path. If None, metrics are only returned.
    track_execution_time : bool
        Record wall-clock time in the result.
    """

    clustering: UmiClusteringConfig = field(default_factory=UmiClusteringConfig)
    events_path: Path | None = None
    metrics_path: Path | None = None
    track_execution_time: bool = False

    def __post_init__(self) -> None:
        """Normalize paths and validate."""
        if not isinstance(self.clustering, UmiClusteringConfig):
            raise ValueError(
                f"clustering must be a UmiClusteringConfig, got {type(self.clustering).__name__}"
            )
        if self.events_path is not None:
            self.events_path = Path(self.events_path)
        if self.metrics_path is not None:
            self.metrics_path = Path(self.metrics_path)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        data = asdict(self)
        data["events_path"] = str(self.events_path) if self.events_path is not None else None
        data["metrics_path"] = str(self.metrics_path) if self.metrics_path is not None else None
        return data


@dataclass
class RunResult:
    """Results from a UMI split run.

    Attributes
    ----------
    success : bool
        Whether the run completed successfully.
    sets_in : int
        Positional duplicate sets read.
    sets_out : int
        UMI-refined duplicate sets written.
    records : int
        Records written.
    metrics : dict[str, Any]
        UMI metrics (see ``UmiMetrics.to_dict``).
    output_files : dict[str, str]
        Map of artifact type to file path.
    execution_time_seconds : float | None
        Wall-clock time if tracked.
    error_message : str | None
        Error message if failed.
    """

    success: bool
    sets_in: int
    sets_out: int
    records: int
    metrics: dict[str, Any]
    output_files: dict[str, str]
    execution_time_seconds: float | None = None
    error_message: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)
