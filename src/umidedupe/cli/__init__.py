"""Command-line interface for umidedupe."""

from umidedupe.cli.main import cli

__all__ = ["cli"]
