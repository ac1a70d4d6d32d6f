"""Command-line interface for umidedupe.

Provides CLI commands for UMI-aware refinement of duplicate sets.
"""

import importlib.metadata
import sys
from pathlib import Path

import click

from umidedupe.clustering.models import DEFAULT_INFERRED_UMI_TAG, DEFAULT_UMI_TAG

__all__ = ["cli"]

try:
    __version__ = importlib.metadata.version("umidedupe")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.1.0"  # Fallback for development


@click.group()
@click.version_option(version=__version__, prog_name="umidedupe")
def cli() -> None:
    """UMI-aware refinement of positional duplicate sets.

    Use 'umidedupe COMMAND --help' for command-specific help.
    """


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    required=True,
    help="Output JSONL file path",
)
@click.option(
    "--max-edit-distance",
    "-d",
    type=click.IntRange(min=0),
    default=1,
    show_default=True,
    help="Largest Hamming distance at which two UMIs are joined",
)
@click.option(
    "--add-inferred-umi/--no-add-inferred-umi",
    default=True,
    show_default=True,
    help="Annotate records with the most common UMI of their group",
)
@click.option(
    "--umi-tag",
    default=DEFAULT_UMI_TAG,
    show_default=True,
    help="Attribute holding the observed UMI",
)
@click.option(
    "--inferred-umi-tag",
    default=DEFAULT_INFERRED_UMI_TAG,
    show_default=True,
    help="Attribute receiving the inferred UMI",
)
@click.option(
    "--events",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write a JSONL audit log to this path",
)
@click.option(
    "--metrics",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write UMI metrics as JSON to this path",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)
def split(
    input_path: str,
    output: str,
    max_edit_distance: int,
    add_inferred_umi: bool,
    umi_tag: str,
    inferred_umi_tag: str,
    events: str | None,
    metrics: str | None,
    verbose: bool,
) -> None:
    """Split the duplicate sets in INPUT_PATH by UMI.

    INPUT_PATH is a JSONL file with one positional duplicate set per line.
    Each set is split into groups of reads whose UMIs are linked through
    Hamming distances of at most --max-edit-distance. Sets containing a
    read without a UMI are written unchanged.

    Examples
    --------
        umidedupe split sets.jsonl -o split.jsonl
        umidedupe split sets.jsonl -o split.jsonl -d 0 --metrics umi_metrics.json
    """
    from umidedupe.clustering.models import UmiClusteringConfig
    from umidedupe.engine import RunConfig, run_umi_split

    if verbose:
        click.echo("Splitting duplicate sets by UMI...", err=True)
        click.echo(f"  Input: {input_path}", err=True)
        click.echo(f"  Output: {output}", err=True)
        click.echo(f"  Max edit distance: {max_edit_distance}", err=True)
        click.echo(f"  UMI tag: {umi_tag}", err=True)
        if add_inferred_umi:
            click.echo(f"  Inferred UMI tag: {inferred_umi_tag}", err=True)

    try:
        config = RunConfig(
            clustering=UmiClusteringConfig(
                max_edit_distance_to_join=max_edit_distance,
                add_inferred_umi=add_inferred_umi,
                umi_tag=umi_tag,
                inferred_umi_tag=inferred_umi_tag,
            ),
            events_path=Path(events) if events else None,
            metrics_path=Path(metrics) if metrics else None,
        )

        result = run_umi_split(Path(input_path), Path(output), config=config)

        if not result.success:
            click.secho(f"✗ Split failed: {result.error_message}", fg="red", err=True)
            sys.exit(1)

        if verbose:
            click.echo("\nResults:", err=True)
            click.echo(f"  Duplicate sets in: {result.sets_in}", err=True)
            click.echo(f"  Duplicate sets out: {result.sets_out}", err=True)
            click.echo(f"  Records: {result.records}", err=True)
            click.echo(
                f"  Sets without UMI: {result.metrics.get('duplicate_sets_without_umi', 0)}",
                err=True,
            )
            click.echo("\nOutputs:", err=True)
            for name, path in result.output_files.items():
                click.echo(f"  {name}: {path}", err=True)

        click.secho(
            f"✓ Split {result.sets_in} duplicate sets into {result.sets_out} "
            f"({result.records} records) -> {output}",
            fg="green",
        )

    except Exception as e:
        click.secho(f"✗ Error: {e}", fg="red", err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()
