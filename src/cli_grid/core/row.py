"""Row - a horizontal run of cells rendered together."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterable, Optional

from cli_grid.core.cell import Cell
from cli_grid.core.options import Options, check_layout

if TYPE_CHECKING:
    from cli_grid.create.builder import RowBuilder


@dataclass(frozen=True, slots=True)
class Row:
    """
    An ordered sequence of cells plus row level defaults.

    ``column_width`` and ``padding_size`` are only used when the
    enclosing grid leaves them unset.
    """
    cells: tuple[Cell, ...] = ()
    default_options: Options = field(default_factory=Options)
    column_width: Optional[int] = None
    padding_size: Optional[int] = None

    def __post_init__(self) -> None:
        # Accept any iterable but keep the row immutable
        object.__setattr__(self, "cells", tuple(self.cells))
        check_layout(self.column_width, self.padding_size)

    @classmethod
    def empty(cls, col_span: int = 1) -> Row:
        """Create a row holding a single empty cell."""
        return cls((Cell.empty(col_span),))

    @classmethod
    def fill(cls, content: str, col_span: int = 1) -> Row:
        """Create a row holding a single fill cell."""
        return cls((Cell.fill(content, col_span),))

    @staticmethod
    def builder(cells: Iterable[Cell] = ()) -> RowBuilder:
        """Start a fluent builder for a row."""
        from cli_grid.create.builder import RowBuilder
        return RowBuilder(cells)

    def render(
        self,
        default_options: Optional[Options] = None,
        column_width: Optional[int] = None,
        padding_size: Optional[int] = None,
    ) -> str:
        """
        Render this row to text, one terminated line per visual line.

        The arguments are the enclosing grid's values; when omitted the
        row renders on its own using its own options.
        """
        from cli_grid.render.text import TextRenderer
        return TextRenderer().render_row(
            self,
            self.default_options if default_options is None else default_options,
            column_width,
            padding_size,
        )

    def __str__(self) -> str:
        return self.render()

    def to_dict(self) -> dict[str, Any]:
        """Serialize cells and the set layout values."""
        data: dict[str, Any] = {"cells": [cell.to_dict() for cell in self.cells]}
        if not self.default_options.is_empty():
            data["defaults"] = self.default_options.to_dict()
        if self.column_width is not None:
            data["column_width"] = self.column_width
        if self.padding_size is not None:
            data["padding_size"] = self.padding_size
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Row:
        """Deserialize from dictionary."""
        return cls(
            cells=tuple(Cell.from_dict(c) for c in data.get("cells", [])),
            default_options=Options.from_dict(data.get("defaults", {})),
            column_width=data.get("column_width"),
            padding_size=data.get("padding_size"),
        )
