"""Render rows and grids to aligned plain text."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from cli_grid.core.align import (
    DEFAULT_BLANK_CHAR,
    DEFAULT_COL_SPAN,
    DEFAULT_COLUMN_WIDTH,
    DEFAULT_H_ALIGN,
    DEFAULT_PADDING_SIZE,
    DEFAULT_V_ALIGN,
    HAlign,
    VAlign,
)
from cli_grid.core.options import Options, resolve

if TYPE_CHECKING:
    from cli_grid.core.grid import Grid
    from cli_grid.core.row import Row

logger = logging.getLogger(__name__)


def split_lines(content: str) -> list[str]:
    """
    Split cell content into lines.

    Lines end at '\\n'. One '\\r' at the end of any line is dropped, the
    last line included even when no '\\n' follows it, so a stray carriage
    return never reaches the terminal. A final terminator does not open
    another line, so the rendered output of a grid splits into exactly as
    many lines as it has terminators. Empty content is a single empty line.
    """
    lines = content.split('\n')
    if len(lines) > 1 and lines[-1] == '':
        lines.pop()
    return [line[:-1] if line.endswith('\r') else line for line in lines]


def cell_width(col_span: int, column_width: int, padding_size: int) -> int:
    """Width of a cell spanning ``col_span`` columns, inner paddings included."""
    return col_span * column_width + padding_size * (col_span - 1)


def pad(h_align: HAlign, text: str, width: int, blank_char: str) -> str:
    """
    Fit one line of text into exactly ``width`` characters.

    Text at least as long as the width is truncated; shorter text is
    aligned with ``blank_char`` or, for FILL, repeated.
    """
    length = len(text)
    if length >= width:
        return text[:width]

    blanks = width - length
    if h_align is HAlign.LEFT:
        return text + blank_char * blanks
    if h_align is HAlign.RIGHT:
        return blank_char * blanks + text
    if h_align is HAlign.CENTER:
        left = blanks // 2
        return blank_char * left + text + blank_char * (blanks - left)
    if h_align is HAlign.FILL:
        if length == 0:
            raise ValueError(f"Cannot fill a cell of width {width} with empty content")
        return (text * (width // length + 1))[:width]
    raise ValueError(f"Unknown horizontal alignment: {h_align!r}")


def line_slot(v_align: VAlign, line_count: int, max_lines: int, line_index: int) -> Optional[int]:
    """
    Map an output line index to one of the cell's own lines.

    Returns None when the cell has no content on that output line.
    """
    if v_align is VAlign.TOP:
        start = 0
    elif v_align is VAlign.BOTTOM:
        start = max_lines - line_count
    elif v_align is VAlign.MIDDLE:
        start = (max_lines - line_count) // 2
    else:
        raise ValueError(f"Unknown vertical alignment: {v_align!r}")

    if start <= line_index < start + line_count:
        return line_index - start
    return None


def col_line(
    h_align: HAlign,
    v_align: VAlign,
    width: int,
    lines: list[str],
    max_lines: int,
    line_index: int,
    blank_char: str,
) -> str:
    """Render one cell's contribution to a single output line."""
    index = line_slot(v_align, len(lines), max_lines, line_index)
    if index is None:
        return blank_char * width
    return pad(h_align, lines[index], width, blank_char)


class TextRenderer:
    """
    Render Rows and Grids to plain text.

    Each visual line is terminated by a newline. Cells are joined by
    ``padding_size`` spaces; spanned cells absorb the paddings between
    the columns they cover.
    """

    def render_row(
        self,
        row: Row,
        default_options: Options,
        column_width: Optional[int] = None,
        padding_size: Optional[int] = None,
    ) -> str:
        """Render a row using the enclosing grid's fallbacks."""
        column_width = resolve(column_width, row.column_width, default=DEFAULT_COLUMN_WIDTH)
        padding_size = resolve(padding_size, row.padding_size, default=DEFAULT_PADDING_SIZE)

        cols_lines = [split_lines(cell.content) for cell in row.cells]
        max_lines = max((len(lines) for lines in cols_lines), default=0)
        logger.debug(
            "Rendering row: %d cells, %d lines, column width %d, padding %d",
            len(row.cells), max_lines, column_width, padding_size,
        )

        row_opts = row.default_options
        gap = ' ' * padding_size
        output: list[str] = []

        for line_index in range(max_lines):
            parts: list[str] = []
            for cell, lines in zip(row.cells, cols_lines):
                col_span = resolve(
                    cell.col_span, row_opts.col_span, default_options.col_span,
                    default=DEFAULT_COL_SPAN,
                )
                h_align = resolve(
                    cell.h_align, row_opts.h_align, default_options.h_align,
                    default=DEFAULT_H_ALIGN,
                )
                v_align = resolve(
                    cell.v_align, row_opts.v_align, default_options.v_align,
                    default=DEFAULT_V_ALIGN,
                )
                blank_char = resolve(
                    cell.blank_char, row_opts.blank_char, default_options.blank_char,
                    default=DEFAULT_BLANK_CHAR,
                )
                width = cell_width(col_span, column_width, padding_size)
                parts.append(
                    col_line(h_align, v_align, width, lines, max_lines, line_index, blank_char)
                )
            output.append(gap.join(parts) + '\n')

        return ''.join(output)

    def render_grid(self, grid: Grid) -> str:
        """Render every row of the grid in order."""
        logger.debug("Rendering grid with %d rows", len(grid.rows))
        return ''.join(
            self.render_row(
                row,
                grid.default_options,
                grid.column_width,
                grid.padding_size,
            )
            for row in grid.rows
        )
