"""Shared fixtures for grid tests."""

import json
from pathlib import Path

import pytest

from cli_grid import Cell, Grid, HAlign, Row


@pytest.fixture
def ones_row() -> Row:
    """Two single-column cells holding '1'."""
    return Row([Cell("1", 1), Cell("1", 1)])


@pytest.fixture
def inner_grid() -> Grid:
    """A 3x2 grid of centered '1's, meant to be nested in another grid."""
    return (
        Grid.builder([
            Row([Cell("1", 1), Cell("1", 1)]),
            Row([Cell("1", 1), Cell("1", 1)]),
            Row([Cell("1", 1), Cell("1", 1)]),
        ])
        .default_h_align(HAlign.CENTER)
        .default_blank_char('-')
        .column_width(3)
        .build()
    )


@pytest.fixture
def grid_file(tmp_path: Path) -> Path:
    """A JSON grid description on disk."""
    path = tmp_path / "grid.json"
    path.write_text(json.dumps({
        "column_width": 3,
        "defaults": {"blank_char": "."},
        "rows": [
            {"cells": ["1", "1"]},
            {"cells": [{"content": "2", "col_span": 2}]},
        ],
    }), encoding="utf-8")
    return path
