"""Grid - a vertical stack of rows sharing layout defaults."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterable, Optional

from cli_grid.core.options import Options, check_layout
from cli_grid.core.row import Row

if TYPE_CHECKING:
    from cli_grid.create.builder import GridBuilder


@dataclass(frozen=True, slots=True)
class Grid:
    """
    Top level of the layout model.

    The grid's ``default_options``, ``column_width`` and ``padding_size``
    are handed to every row as fallbacks. Rendering is a pure text
    transformation, so ``str(grid)`` can be used as the content of a
    cell in another grid.
    """
    rows: tuple[Row, ...] = ()
    default_options: Options = field(default_factory=Options)
    column_width: Optional[int] = None
    padding_size: Optional[int] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "rows", tuple(self.rows))
        check_layout(self.column_width, self.padding_size)

    @staticmethod
    def builder(rows: Iterable[Row] = ()) -> GridBuilder:
        """Start a fluent builder for a grid."""
        from cli_grid.create.builder import GridBuilder
        return GridBuilder(rows)

    def render(self) -> str:
        """Render all rows to text."""
        from cli_grid.render.text import TextRenderer
        return TextRenderer().render_grid(self)

    def __str__(self) -> str:
        return self.render()

    def to_dict(self) -> dict[str, Any]:
        """Serialize rows and the set layout values."""
        data: dict[str, Any] = {}
        if self.column_width is not None:
            data["column_width"] = self.column_width
        if self.padding_size is not None:
            data["padding_size"] = self.padding_size
        if not self.default_options.is_empty():
            data["defaults"] = self.default_options.to_dict()
        data["rows"] = [row.to_dict() for row in self.rows]
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Grid:
        """Deserialize from dictionary."""
        return cls(
            rows=tuple(Row.from_dict(r) for r in data.get("rows", [])),
            default_options=Options.from_dict(data.get("defaults", {})),
            column_width=data.get("column_width"),
            padding_size=data.get("padding_size"),
        )
