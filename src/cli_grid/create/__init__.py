"""Tools for assembling grids programmatically."""

from cli_grid.create.builder import CellBuilder, GridBuilder, RowBuilder

__all__ = ["CellBuilder", "RowBuilder", "GridBuilder"]
