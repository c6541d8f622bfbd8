"""Cell - atomic unit of the grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

from cli_grid.core.align import HAlign, VAlign
from cli_grid.core.options import check_blank_char, check_col_span

if TYPE_CHECKING:
    from cli_grid.create.builder import CellBuilder


@dataclass(frozen=True, slots=True)
class Cell:
    """
    A piece of text placed in one or more grid columns.

    The content may span several lines, including the rendered output
    of another grid. Unset options fall back to the row defaults, then
    to the grid defaults, then to the system defaults.
    """
    content: str = ""
    col_span: Optional[int] = None
    h_align: Optional[HAlign] = None
    v_align: Optional[VAlign] = None
    blank_char: Optional[str] = None

    def __post_init__(self) -> None:
        check_col_span(self.col_span)
        check_blank_char(self.blank_char)

    @classmethod
    def empty(cls, col_span: int = 1) -> Cell:
        """Create a cell without content."""
        return cls("", col_span)

    @classmethod
    def fill(cls, content: str, col_span: int = 1) -> Cell:
        """Create a cell that repeats its content across its width."""
        return cls(content, col_span, h_align=HAlign.FILL)

    @staticmethod
    def builder(content: str = "", col_span: Optional[int] = None) -> CellBuilder:
        """Start a fluent builder for a cell."""
        from cli_grid.create.builder import CellBuilder
        return CellBuilder(content, col_span)

    def to_dict(self) -> dict[str, Any]:
        """Serialize content and the set options."""
        data: dict[str, Any] = {"content": self.content}
        if self.col_span is not None:
            data["col_span"] = self.col_span
        if self.h_align is not None:
            data["h_align"] = self.h_align.value
        if self.v_align is not None:
            data["v_align"] = self.v_align.value
        if self.blank_char is not None:
            data["blank_char"] = self.blank_char
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any] | str) -> Cell:
        """Deserialize from dictionary, or from a bare content string."""
        if isinstance(data, str):
            return cls(data)
        h_align = data.get("h_align")
        v_align = data.get("v_align")
        return cls(
            content=data.get("content", ""),
            col_span=data.get("col_span"),
            h_align=HAlign(h_align) if h_align is not None else None,
            v_align=VAlign(v_align) if v_align is not None else None,
            blank_char=data.get("blank_char"),
        )
