"""Alignment enums and the system-wide layout defaults."""

from enum import Enum


class HAlign(str, Enum):
    """Horizontal alignment of a cell's content."""
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"
    FILL = "fill"  # Repeat content to cover the whole cell width


class VAlign(str, Enum):
    """Vertical alignment of a cell's lines within its row."""
    TOP = "top"
    BOTTOM = "bottom"
    MIDDLE = "middle"


# Fallbacks used when neither cell, row nor grid set a value
DEFAULT_COL_SPAN = 1
DEFAULT_H_ALIGN = HAlign.LEFT
DEFAULT_V_ALIGN = VAlign.TOP
DEFAULT_BLANK_CHAR = ' '
DEFAULT_COLUMN_WIDTH = 1
DEFAULT_PADDING_SIZE = 1
