"""Command line interface for cli-grid."""

from cli_grid.cli.main import main

__all__ = ["main"]
