"""Core data structures for grid layout."""

from cli_grid.core.align import HAlign, VAlign
from cli_grid.core.cell import Cell
from cli_grid.core.grid import Grid
from cli_grid.core.options import Options, resolve
from cli_grid.core.row import Row

__all__ = ["HAlign", "VAlign", "Cell", "Row", "Grid", "Options", "resolve"]
