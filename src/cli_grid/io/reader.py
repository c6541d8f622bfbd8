"""
Load grids from JSON descriptions.

Example document:
{
  "column_width": 5,
  "defaults": {"h_align": "center", "blank_char": "."},
  "rows": [
    {"cells": [{"content": "a", "col_span": 2}, "b"]},
    {"cells": [{"content": {"grid": {"rows": [{"cells": ["x", "y"]}]}}}]}
  ]
}

A bare string stands for a cell with that content. A ``{"grid": ...}``
content is rendered first and embedded as plain multi-line text.
"""

import json
from pathlib import Path
from typing import Any

from cli_grid.core.grid import Grid


class GridFormatError(ValueError):
    """Raised when a grid description cannot be turned into a Grid."""

    def __init__(self, message: str, where: str = "$"):
        super().__init__(f"{where}: {message}")
        self.where = where


def load(path: str | Path) -> Grid:
    """Load a grid description from a JSON file."""
    path = Path(path)
    with open(path, 'rb') as f:
        data = f.read()
    try:
        text = data.decode('utf-8')
    except UnicodeDecodeError as e:
        raise GridFormatError(f"Not valid UTF-8 (byte {e.start})") from e
    return loads(text)


def loads(text: str) -> Grid:
    """Parse a grid description from a JSON string."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise GridFormatError(f"Invalid JSON ({e.msg} at line {e.lineno})") from e
    return _grid(data, "$")


_INT_FIELDS = ("col_span", "column_width", "padding_size")
_STR_FIELDS = ("blank_char", "h_align", "v_align")


def _check_fields(data: dict[str, Any], where: str) -> None:
    """Reject option values of the wrong JSON type."""
    for name in _INT_FIELDS:
        value = data.get(name)
        # bool is an int subclass but never a valid size
        if value is not None and (not isinstance(value, int) or isinstance(value, bool)):
            raise GridFormatError(f"Expected an integer, got {value!r}", f"{where}.{name}")
    for name in _STR_FIELDS:
        value = data.get(name)
        if value is not None and not isinstance(value, str):
            raise GridFormatError(f"Expected a string, got {value!r}", f"{where}.{name}")


def _layout(data: dict[str, Any], where: str) -> dict[str, Any]:
    """Validate the layout fields shared by grids and rows."""
    _check_fields(data, where)
    defaults = data.get("defaults", {})
    if not isinstance(defaults, dict):
        raise GridFormatError("Expected a defaults object", f"{where}.defaults")
    _check_fields(defaults, f"{where}.defaults")
    return dict(data)


def _grid(data: Any, where: str) -> Grid:
    if not isinstance(data, dict):
        raise GridFormatError("Expected a grid object", where)
    rows = data.get("rows", [])
    if not isinstance(rows, list):
        raise GridFormatError("Expected a list of rows", f"{where}.rows")

    normalized = _layout(data, where)
    normalized["rows"] = [_row(r, f"{where}.rows[{i}]") for i, r in enumerate(rows)]
    try:
        return Grid.from_dict(normalized)
    except (ValueError, TypeError) as e:
        raise GridFormatError(str(e), where) from e


def _row(data: Any, where: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise GridFormatError("Expected a row object", where)
    cells = data.get("cells", [])
    if not isinstance(cells, list):
        raise GridFormatError("Expected a list of cells", f"{where}.cells")

    normalized = _layout(data, where)
    normalized["cells"] = [_cell(c, f"{where}.cells[{i}]") for i, c in enumerate(cells)]
    return normalized


def _cell(data: Any, where: str) -> dict[str, Any] | str:
    if isinstance(data, str):
        return data
    if not isinstance(data, dict):
        raise GridFormatError("Expected a string or a cell object", where)
    _check_fields(data, where)

    content = data.get("content", "")
    if isinstance(content, dict):
        if "grid" not in content:
            raise GridFormatError("Nested content must be a {\"grid\": ...} object", f"{where}.content")
        # Nested grids are embedded as their rendered text
        nested_where = f"{where}.content.grid"
        nested = _grid(content["grid"], nested_where)
        try:
            content = nested.render()
        except ValueError as e:
            raise GridFormatError(str(e), nested_where) from e
    elif not isinstance(content, str):
        raise GridFormatError("Cell content must be a string", f"{where}.content")

    normalized = dict(data)
    normalized["content"] = content
    return normalized
