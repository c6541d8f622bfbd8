"""Tests for the fluent builder API."""

import pytest

import cli_grid as cg
from cli_grid import Cell, HAlign, Options, Row, VAlign
from cli_grid.create.builder import CellBuilder, GridBuilder, RowBuilder


class TestCellBuilder:
    """Tests for CellBuilder."""

    def test_build_all_options(self) -> None:
        cell = (
            CellBuilder("x", 2)
            .h_align(HAlign.CENTER)
            .v_align(VAlign.BOTTOM)
            .blank_char('~')
            .build()
        )
        assert cell == Cell("x", 2, HAlign.CENTER, VAlign.BOTTOM, '~')

    def test_content_and_span_replaced(self) -> None:
        cell = Cell.builder("a", 1).content("b").col_span(3).build()
        assert cell.content == "b"
        assert cell.col_span == 3

    def test_zero_span_fails_fast(self) -> None:
        with pytest.raises(ValueError):
            CellBuilder("a", 0)
        with pytest.raises(ValueError):
            CellBuilder("a").col_span(0)

    def test_bad_blank_char(self) -> None:
        with pytest.raises(ValueError):
            CellBuilder("a").blank_char("ab")


class TestRowBuilder:
    """Tests for RowBuilder."""

    def test_defaults_and_layout(self) -> None:
        row = (
            Row.builder([Cell("a")])
            .default_col_span(2)
            .default_h_align(HAlign.RIGHT)
            .default_v_align(VAlign.MIDDLE)
            .default_blank_char('.')
            .column_width(4)
            .padding_size(0)
            .build()
        )
        assert row.default_options == Options(2, HAlign.RIGHT, VAlign.MIDDLE, '.')
        assert row.column_width == 4
        assert row.padding_size == 0

    def test_cells_replaced(self) -> None:
        row = RowBuilder([Cell("a")]).cells([Cell("b"), Cell("c")]).build()
        assert [c.content for c in row.cells] == ["b", "c"]

    def test_invalid_values_fail_fast(self) -> None:
        with pytest.raises(ValueError):
            RowBuilder().default_col_span(0)
        with pytest.raises(ValueError):
            RowBuilder().column_width(0)
        with pytest.raises(ValueError):
            RowBuilder().padding_size(-1)
        with pytest.raises(ValueError):
            RowBuilder().default_blank_char("")

    def test_builder_is_reusable(self) -> None:
        builder = RowBuilder([Cell("a")]).column_width(2)
        first = builder.build()
        second = builder.column_width(3).build()
        assert first.column_width == 2
        assert second.column_width == 3


class TestGridBuilder:
    """Tests for GridBuilder."""

    def test_build_and_render(self) -> None:
        grid = (
            GridBuilder([Row([Cell("1", 1), Cell("1", 1)])])
            .row(Row([Cell("2", 2)]))
            .default_blank_char('.')
            .column_width(4)
            .build()
        )
        assert len(grid.rows) == 2
        assert str(grid) == "1... 1...\n2........\n"

    def test_rows_replaced(self) -> None:
        grid = GridBuilder([Row.empty()]).rows([Row.fill("*", 1)]).build()
        assert grid.rows == (Row.fill("*", 1),)

    def test_package_helpers(self) -> None:
        grid = (
            cg.grid([
                cg.row([cg.cell("a", 1).build(), cg.cell("b").build()])
                .default_h_align(HAlign.RIGHT)
                .build(),
            ])
            .column_width(3)
            .build()
        )
        assert grid.render() == "  a   b\n"
