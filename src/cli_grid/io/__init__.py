"""File I/O for grid descriptions and rendered output."""

from cli_grid.io.reader import GridFormatError, load, loads
from cli_grid.io.writer import save, write_text

__all__ = ["GridFormatError", "load", "loads", "save", "write_text"]
