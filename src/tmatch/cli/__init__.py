"""CLI entry point for tmatch."""

from . import cli as cli_module


def run() -> None:
    """Entry point for the tmatch CLI."""
    cli_module.cli()
