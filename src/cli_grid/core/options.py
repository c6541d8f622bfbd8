"""Options - fallback layout values shared by rows and grids."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, TypeVar

from cli_grid.core.align import HAlign, VAlign

T = TypeVar("T")


def resolve(*candidates: Optional[T], default: T) -> T:
    """
    Return the first candidate that is set, else ``default``.

    Candidates are ordered from most to least specific, e.g.
    ``resolve(cell.h_align, row_opts.h_align, grid_opts.h_align,
    default=DEFAULT_H_ALIGN)``.
    """
    for value in candidates:
        if value is not None:
            return value
    return default


def check_col_span(col_span: Optional[int]) -> None:
    """Reject column spans below 1."""
    if col_span is not None and col_span < 1:
        raise ValueError(f"Column span must be at least 1, got {col_span}")


def check_blank_char(blank_char: Optional[str]) -> None:
    """Reject blank characters that are not a single codepoint."""
    if blank_char is not None and len(blank_char) != 1:
        raise ValueError(f"Blank character must be a single character, got {blank_char!r}")


def check_layout(column_width: Optional[int], padding_size: Optional[int]) -> None:
    """Reject column widths below 1 and negative paddings."""
    if column_width is not None and column_width < 1:
        raise ValueError(f"Column width must be at least 1, got {column_width}")
    if padding_size is not None and padding_size < 0:
        raise ValueError(f"Padding size cannot be negative, got {padding_size}")


@dataclass(frozen=True, slots=True)
class Options:
    """
    Default cell options attached to a Row or a Grid.

    Every field is optional; unset fields fall through to the next,
    less specific level.
    """
    col_span: Optional[int] = None
    h_align: Optional[HAlign] = None
    v_align: Optional[VAlign] = None
    blank_char: Optional[str] = None

    def __post_init__(self) -> None:
        check_col_span(self.col_span)
        check_blank_char(self.blank_char)

    def is_empty(self) -> bool:
        """Check if no option is set."""
        return (
            self.col_span is None
            and self.h_align is None
            and self.v_align is None
            and self.blank_char is None
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize the set options only."""
        data: dict[str, Any] = {}
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
    def from_dict(cls, data: dict[str, Any]) -> Options:
        """Deserialize from dictionary."""
        h_align = data.get("h_align")
        v_align = data.get("v_align")
        return cls(
            col_span=data.get("col_span"),
            h_align=HAlign(h_align) if h_align is not None else None,
            v_align=VAlign(v_align) if v_align is not None else None,
            blank_char=data.get("blank_char"),
        )
