"""
cli-grid: column based text grids for the terminal

Lay out text in rows of cells that span one or more fixed-width
columns, with per-cell alignment, multi-line content and nesting.

Quick Start:
    >>> import cli_grid as cg
    >>> grid = (cg.grid([
    ...         cg.Row([cg.Cell("1", 1), cg.Cell("1", 1), cg.Cell("1", 1)]),
    ...         cg.Row([cg.Cell("2", 2), cg.Cell("1", 1)]),
    ...         cg.Row([cg.Cell("3", 3)]),
    ...     ])
    ...     .default_blank_char('.')
    ...     .column_width(5)
    ...     .build())
    >>> print(grid, end="")
    1.... 1.... 1....
    2.......... 1....
    3................

Features:
    - Cells spanning several columns, absorbing the paddings between them
    - Left, right, center and fill horizontal alignment
    - Top, middle and bottom vertical alignment of multi-line cells
    - Defaults cascading from cell to row to grid
    - Nesting by using a rendered grid as a cell's content
    - JSON grid descriptions and a ``cli-grid`` command
"""

__version__ = "0.1.0"

from typing import Iterable

# Core types
from cli_grid.core.align import HAlign, VAlign
from cli_grid.core.cell import Cell
from cli_grid.core.grid import Grid
from cli_grid.core.options import Options
from cli_grid.core.row import Row

# Rendering
from cli_grid.render.text import TextRenderer

# Convenience functions
from cli_grid.io.reader import GridFormatError, load, loads
from cli_grid.io.writer import save

# Creation
from cli_grid.create.builder import CellBuilder, GridBuilder, RowBuilder


def grid(rows: Iterable[Row] = ()) -> GridBuilder:
    """Start building a grid with a fluent builder API."""
    return GridBuilder(rows)


def row(cells: Iterable[Cell] = ()) -> RowBuilder:
    """Start building a row with a fluent builder API."""
    return RowBuilder(cells)


def cell(content: str = "", col_span: int | None = None) -> CellBuilder:
    """Start building a cell with a fluent builder API."""
    return CellBuilder(content, col_span)


__all__ = [
    # Version
    "__version__",
    # Core types
    "HAlign",
    "VAlign",
    "Cell",
    "Row",
    "Grid",
    "Options",
    "TextRenderer",
    # I/O
    "GridFormatError",
    "load",
    "loads",
    "save",
    # Creation
    "grid",
    "row",
    "cell",
    "CellBuilder",
    "RowBuilder",
    "GridBuilder",
]
