"""File-to-file UMI split runner.

Reads positional duplicate sets from JSONL, splits each by UMI and writes
the refined sets back to JSONL, with an optional audit trail and metrics
report.
"""

import json
import sys
import time
import traceback
from pathlib import Path

from umidedupe.audit.helpers import (
    generate_run_id,
    get_dependency_versions,
    get_package_version,
    get_platform_info,
    get_python_version,
)
from umidedupe.audit.logger import AuditLogger
from umidedupe.engine.config import RunConfig, RunResult
from umidedupe.engine.iterator import UmiAwareDuplicateSetIterator
from umidedupe.engine.source import IterableSource
from umidedupe.parse.reader import DuplicateSetReader
from umidedupe.parse.writer import write_duplicate_set
from umidedupe.utils import calculate_file_sha256

__all__ = ["run_umi_split"]

_STAGE = "umi_split"


def run_umi_split(
    input_path: Path | str,
    output_path: Path | str,
    config: RunConfig | None = None,
    logger: AuditLogger | None = None,
) -> RunResult:
    """Split every duplicate set of a JSONL file by UMI.

    Parameters
    ----------
    input_path : Path | str
        JSONL file with one positional duplicate set per line.
    output_path : Path | str
        JSONL file receiving one UMI-refined set per line.
    config : RunConfig | None, optional
        Run configuration. If None, uses defaults.
    logger : AuditLogger | None, optional
        Audit logger. If None and ``config.events_path`` is set, a logger is
        opened on that path for the duration of the run.

    Returns
    -------
    RunResult
        Run statistics; ``success`` is False and ``error_message`` is set
        if any step failed.

    Examples
    --------
        >>> from umidedupe.engine import run_umi_split
        >>> result = run_umi_split("sets.jsonl", "split.jsonl")
        >>> if result.success:
        ...     print(f"{result.sets_in} sets -> {result.sets_out} sets")
    """
    input_path = Path(input_path)
    output_path = Path(output_path)

    if config is None:
        config = RunConfig()

    owns_logger = logger is None and config.events_path is not None
    if owns_logger:
        try:
            logger = AuditLogger(run_id=generate_run_id(), log_path=config.events_path)
        except OSError as e:
            return _failure(
                f"Cannot open events log {config.events_path}: {type(e).__name__}: {e}",
                0,
                0,
                0,
                time.perf_counter(),
                config,
                None,
            )

    try:
        return _run(input_path, output_path, config, logger)
    finally:
        if owns_logger:
            logger.close()


def _run(
    input_path: Path,
    output_path: Path,
    config: RunConfig,
    logger: AuditLogger | None,
) -> RunResult:
    start_time = time.perf_counter()

    if logger:
        logger.run_started(
            command=sys.argv,
            parameters={
                "input_path": str(input_path),
                "output_path": str(output_path),
                "config": config.to_dict(),
                "environment": {
                    "python_version": get_python_version(),
                    "platform": get_platform_info(),
                    "package_version": get_package_version(),
                    "dependencies": get_dependency_versions(["click", "jsonschema"]),
                },
            },
        )

    if not input_path.exists():
        return _failure(
            f"Input path does not exist: {input_path}", 0, 0, 0, start_time, config, logger
        )

    sets_out = 0
    records = 0
    iterator: UmiAwareDuplicateSetIterator | None = None
    # Output only appears under its final name once every set was written.
    partial_path = output_path.with_name(output_path.name + ".partial")

    try:
        if logger:
            logger.stage_started(_STAGE)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        source = IterableSource(DuplicateSetReader(input_path))
        with (
            UmiAwareDuplicateSetIterator(source, config.clustering, logger) as iterator,
            partial_path.open("w", encoding="utf-8", newline="\n") as f,
        ):
            for group in iterator:
                write_duplicate_set(group, f)
                sets_out += 1
                records += len(group)

        metrics = iterator.metrics.to_dict()
        output_files = {"duplicate_sets": str(output_path)}

        if config.metrics_path is not None:
            config.metrics_path.parent.mkdir(parents=True, exist_ok=True)
            with config.metrics_path.open("w", encoding="utf-8") as f:
                json.dump(metrics, f, indent=2, sort_keys=True)
            output_files["metrics"] = str(config.metrics_path)

        partial_path.replace(output_path)

        duration = time.perf_counter() - start_time
        if logger:
            logger.stage_finished(
                _STAGE,
                duration_seconds=duration,
                counters={
                    "sets_in": iterator.sets_processed,
                    "sets_out": sets_out,
                    "records": records,
                },
            )
            logger.artifact_written(
                str(output_path),
                calculate_file_sha256(output_path),
                stage=_STAGE,
                set_count=sets_out,
            )
            logger.run_finished("success", duration, sets_processed=iterator.sets_processed)

        return RunResult(
            success=True,
            sets_in=iterator.sets_processed,
            sets_out=sets_out,
            records=records,
            metrics=metrics,
            output_files=output_files,
            execution_time_seconds=duration if config.track_execution_time else None,
        )

    except Exception as e:
        error_msg = f"{type(e).__name__}: {e}"
        partial_path.unlink(missing_ok=True)
        if logger:
            logger.error(
                type(e).__name__,
                str(e),
                stage=_STAGE,
                traceback=traceback.format_exc(),
            )
        sets_in = iterator.sets_processed if iterator is not None else 0
        return _failure(error_msg, sets_in, sets_out, records, start_time, config, logger)


def _failure(
    message: str,
    sets_in: int,
    sets_out: int,
    records: int,
    start_time: float,
    config: RunConfig,
    logger: AuditLogger | None,
) -> RunResult:
    duration = time.perf_counter() - start_time
    if logger:
        logger.run_finished("failed", duration, sets_processed=sets_in)
    return RunResult(
        success=False,
        sets_in=sets_in,
        sets_out=sets_out,
        records=records,
        metrics={},
        output_files={},
        execution_time_seconds=duration if config.track_execution_time else None,
        error_message=message,
    )
