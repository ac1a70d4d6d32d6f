"""Tests for CLI module."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from umidedupe.cli.main import cli

_FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"


@pytest.fixture
def runner() -> CliRunner:
    """Provide Click test CLI runner."""
    return CliRunner()


def _read_sets(path: Path) -> list[dict]:
    with path.open() as f:
        return [json.loads(line) for line in f if line.strip()]


# ---------------------------------------------------------------------------
# Top-level CLI
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_cli_version_flag(runner: CliRunner) -> None:
    """Test --version flag outputs version string."""
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert "umidedupe" in result.output


@pytest.mark.unit
def test_cli_help(runner: CliRunner) -> None:
    """Test --help output lists commands."""
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "split" in result.output


@pytest.mark.unit
def test_cli_invalid_command(runner: CliRunner) -> None:
    """Test invalid command returns non-zero exit code."""
    result = runner.invoke(cli, ["invalid-command"])

    assert result.exit_code != 0


# ---------------------------------------------------------------------------
# split command
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_split_help(runner: CliRunner) -> None:
    """Test split command help lists its options."""
    result = runner.invoke(cli, ["split", "--help"])

    assert result.exit_code == 0
    assert "--max-edit-distance" in result.output
    assert "--umi-tag" in result.output


@pytest.mark.unit
def test_split_requires_output(runner: CliRunner) -> None:
    """Test missing --output is a usage error."""
    result = runner.invoke(cli, ["split", str(_FIXTURES_DIR / "duplicate_sets.jsonl")])

    assert result.exit_code == 2


@pytest.mark.unit
def test_split_rejects_negative_distance(runner: CliRunner, tmp_path: Path) -> None:
    """Test a negative edit distance is rejected by option parsing."""
    result = runner.invoke(
        cli,
        [
            "split",
            str(_FIXTURES_DIR / "duplicate_sets.jsonl"),
            "-o",
            str(tmp_path / "out.jsonl"),
            "--max-edit-distance",
            "-1",
        ],
    )

    assert result.exit_code == 2


@pytest.mark.integration
def test_split_file(runner: CliRunner, tmp_path: Path) -> None:
    """Test split command writes refined sets."""
    output = tmp_path / "out.jsonl"

    result = runner.invoke(
        cli, ["split", str(_FIXTURES_DIR / "duplicate_sets.jsonl"), "-o", str(output)]
    )

    assert result.exit_code == 0, result.output
    assert "Split 4 duplicate sets into 5" in result.output
    sets = _read_sets(output)
    assert [s["set_id"] for s in sets] == [
        "chr1:1000:+/1",
        "chr1:1000:+/2",
        "chr1:2500:-/1",
        "chr2:40:+",
        "chr3:77:+/1",
    ]
    assert sets[0]["records"][0]["attributes"] == {"RX": "AAAA", "MI": "AAAA"}
    assert sets[4]["records"][0]["attributes"]["XX"] == "keep"


@pytest.mark.integration
def test_split_threshold_zero_no_inferred(runner: CliRunner, tmp_path: Path) -> None:
    """Test -d 0 and --no-add-inferred-umi are honoured."""
    output = tmp_path / "out.jsonl"

    result = runner.invoke(
        cli,
        [
            "split",
            str(_FIXTURES_DIR / "duplicate_sets.jsonl"),
            "-o",
            str(output),
            "-d",
            "0",
            "--no-add-inferred-umi",
        ],
    )

    assert result.exit_code == 0, result.output
    sets = _read_sets(output)
    assert len(sets) == 8
    for dup_set in sets:
        for record in dup_set["records"]:
            assert "MI" not in record["attributes"]


@pytest.mark.integration
def test_split_verbose_writes_metrics_and_events(runner: CliRunner, tmp_path: Path) -> None:
    """Test --verbose, --metrics and --events outputs."""
    output = tmp_path / "out.jsonl"
    metrics = tmp_path / "metrics.json"
    events = tmp_path / "events.jsonl"

    result = runner.invoke(
        cli,
        [
            "split",
            str(_FIXTURES_DIR / "duplicate_sets.jsonl"),
            "-o",
            str(output),
            "--metrics",
            str(metrics),
            "--events",
            str(events),
            "-v",
        ],
    )

    assert result.exit_code == 0, result.output
    assert "Duplicate sets in: 4" in result.output
    assert json.loads(metrics.read_text())["duplicate_sets_without_umi"] == 1
    event_names = [e["event"] for e in _read_sets(events)]
    assert event_names[0] == "run_started"
    assert event_names[-1] == "run_finished"


@pytest.mark.integration
def test_split_malformed_input_exits_1(runner: CliRunner, tmp_path: Path) -> None:
    """Test malformed JSONL yields exit code 1 and an error message."""
    bad = tmp_path / "bad.jsonl"
    bad.write_text('{"records": "nope"}\n')

    result = runner.invoke(cli, ["split", str(bad), "-o", str(tmp_path / "out.jsonl")])

    assert result.exit_code == 1
    assert "InputFormatError" in result.output


@pytest.mark.integration
def test_split_mixed_lengths_exits_1(runner: CliRunner, tmp_path: Path) -> None:
    """Test UMIs of different lengths in one set fail the run."""
    bad = tmp_path / "bad.jsonl"
    bad.write_text(
        json.dumps(
            {
                "records": [
                    {"name": "r1", "attributes": {"RX": "AAAA"}},
                    {"name": "r2", "attributes": {"RX": "AAAAT"}},
                ]
            }
        )
        + "\n"
    )

    result = runner.invoke(cli, ["split", str(bad), "-o", str(tmp_path / "out.jsonl")])

    assert result.exit_code == 1
    assert "UmiLengthMismatchError" in result.output


@pytest.mark.integration
def test_split_unwritable_events_exits_1(runner: CliRunner, tmp_path: Path) -> None:
    """Test an events path below a regular file exits 1 instead of raising."""
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    output = tmp_path / "out.jsonl"

    result = runner.invoke(
        cli,
        [
            "split",
            str(_FIXTURES_DIR / "duplicate_sets.jsonl"),
            "-o",
            str(output),
            "--events",
            str(blocker / "ev.jsonl"),
        ],
    )

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Cannot open events log" in result.output
    assert not output.exists()
