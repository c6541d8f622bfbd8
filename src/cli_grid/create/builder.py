"""Fluent builder API for assembling cells, rows and grids."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Optional, TypeVar

from cli_grid.core.align import HAlign, VAlign
from cli_grid.core.cell import Cell
from cli_grid.core.grid import Grid
from cli_grid.core.options import Options, check_blank_char, check_col_span, check_layout
from cli_grid.core.row import Row

LayoutBuilderT = TypeVar("LayoutBuilderT", bound="_LayoutBuilder")


class CellBuilder:
    """
    Fluent API for configuring a single cell.

    Example:
        >>> cell = (CellBuilder("total", 2)
        ...     .h_align(HAlign.RIGHT)
        ...     .blank_char('.')
        ...     .build())
    """

    def __init__(self, content: str = "", col_span: Optional[int] = None):
        check_col_span(col_span)
        self._content = content
        self._col_span = col_span
        self._h_align: Optional[HAlign] = None
        self._v_align: Optional[VAlign] = None
        self._blank_char: Optional[str] = None

    def content(self, content: str) -> "CellBuilder":
        """Replace the cell content."""
        self._content = content
        return self

    def col_span(self, col_span: int) -> "CellBuilder":
        """Set the number of columns the cell covers."""
        check_col_span(col_span)
        self._col_span = col_span
        return self

    def h_align(self, h_align: HAlign) -> "CellBuilder":
        self._h_align = h_align
        return self

    def v_align(self, v_align: VAlign) -> "CellBuilder":
        self._v_align = v_align
        return self

    def blank_char(self, blank_char: str) -> "CellBuilder":
        """Set the character used for empty space inside the cell."""
        check_blank_char(blank_char)
        self._blank_char = blank_char
        return self

    def build(self) -> Cell:
        """Build and return the cell."""
        return Cell(
            content=self._content,
            col_span=self._col_span,
            h_align=self._h_align,
            v_align=self._v_align,
            blank_char=self._blank_char,
        )


class _LayoutBuilder:
    """Setters shared by the row and grid builders."""

    def __init__(self) -> None:
        self._options = Options()
        self._column_width: Optional[int] = None
        self._padding_size: Optional[int] = None

    def default_col_span(self: LayoutBuilderT, col_span: int) -> LayoutBuilderT:
        """Set the span used by cells that do not set their own."""
        check_col_span(col_span)
        self._options = replace(self._options, col_span=col_span)
        return self

    def default_h_align(self: LayoutBuilderT, h_align: HAlign) -> LayoutBuilderT:
        self._options = replace(self._options, h_align=h_align)
        return self

    def default_v_align(self: LayoutBuilderT, v_align: VAlign) -> LayoutBuilderT:
        self._options = replace(self._options, v_align=v_align)
        return self

    def default_blank_char(self: LayoutBuilderT, blank_char: str) -> LayoutBuilderT:
        self._options = replace(self._options, blank_char=blank_char)
        return self

    def column_width(self: LayoutBuilderT, column_width: int) -> LayoutBuilderT:
        """Set the width of a single column, in characters."""
        check_layout(column_width, None)
        self._column_width = column_width
        return self

    def padding_size(self: LayoutBuilderT, padding_size: int) -> LayoutBuilderT:
        """Set the number of spaces between adjacent columns."""
        check_layout(None, padding_size)
        self._padding_size = padding_size
        return self


class RowBuilder(_LayoutBuilder):
    """
    Fluent API for configuring a row.

    Example:
        >>> row = (RowBuilder([Cell("a", 1), Cell("b", 2)])
        ...     .default_h_align(HAlign.CENTER)
        ...     .column_width(5)
        ...     .build())
    """

    def __init__(self, cells: Iterable[Cell] = ()):
        super().__init__()
        self._cells = tuple(cells)

    def cells(self, cells: Iterable[Cell]) -> "RowBuilder":
        """Replace the cells of the row."""
        self._cells = tuple(cells)
        return self

    def build(self) -> Row:
        """Build and return the row."""
        return Row(
            cells=self._cells,
            default_options=self._options,
            column_width=self._column_width,
            padding_size=self._padding_size,
        )


class GridBuilder(_LayoutBuilder):
    """
    Fluent API for configuring a grid.

    Example:
        >>> grid = (GridBuilder([
        ...         Row([Cell("1", 1), Cell("1", 1)]),
        ...         Row([Cell("2", 2)]),
        ...     ])
        ...     .default_blank_char('.')
        ...     .column_width(4)
        ...     .build())
        >>> print(grid)
        1... 1...
        2........
        <BLANKLINE>
    """

    def __init__(self, rows: Iterable[Row] = ()):
        super().__init__()
        self._rows = tuple(rows)

    def rows(self, rows: Iterable[Row]) -> "GridBuilder":
        """Replace the rows of the grid."""
        self._rows = tuple(rows)
        return self

    def row(self, row: Row) -> "GridBuilder":
        """Append a row."""
        self._rows += (row,)
        return self

    def build(self) -> Grid:
        """Build and return the grid."""
        return Grid(
            rows=self._rows,
            default_options=self._options,
            column_width=self._column_width,
            padding_size=self._padding_size,
        )
