"""Tests for the command line interface."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from cli_grid.cli.app import create_app
from cli_grid.core.grid import Grid
from cli_grid.render.text import TextRenderer

runner = CliRunner()


class TestRenderCommand:
    """Tests for `cli-grid render`."""

    def test_render_to_stdout(self, grid_file: Path) -> None:
        result = runner.invoke(create_app(), ["render", str(grid_file)])
        assert result.exit_code == 0
        assert "1.. 1..\n2......\n" in result.stdout

    def test_overrides(self, grid_file: Path) -> None:
        result = runner.invoke(
            create_app(),
            ["render", str(grid_file), "-w", "2", "-p", "0", "-b", "_"],
        )
        assert result.exit_code == 0
        assert "1_1_\n2___\n" in result.stdout

    def test_render_to_file(self, grid_file: Path, tmp_path: Path) -> None:
        out = tmp_path / "out.txt"
        result = runner.invoke(create_app(), ["render", str(grid_file), "-o", str(out)])
        assert result.exit_code == 0
        assert out.read_text(encoding="utf-8") == "1.. 1..\n2......\n"

    def test_missing_file(self, tmp_path: Path) -> None:
        result = runner.invoke(create_app(), ["render", str(tmp_path / "nope.json")])
        assert result.exit_code == 1

    def test_invalid_description(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"rows": [{"cells": [{"content": "a", "col_span": 0}]}]}))
        result = runner.invoke(create_app(), ["render", str(path)])
        assert result.exit_code == 1

    def test_invalid_override(self, grid_file: Path) -> None:
        result = runner.invoke(create_app(), ["render", str(grid_file), "-w", "0"])
        assert result.exit_code == 1


class TestRenderErrors:
    """Unusable input files exit with status 1 instead of a traceback."""

    def _assert_clean_failure(self, args: list[str]) -> None:
        result = runner.invoke(create_app(), args)
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)

    def test_not_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_bytes(b'{"rows": [{"cells": ["\xff"]}]}')
        self._assert_clean_failure(["render", str(path)])

    def test_directory(self, tmp_path: Path) -> None:
        self._assert_clean_failure(["render", str(tmp_path)])

    def test_float_column_width(self, tmp_path: Path) -> None:
        path = tmp_path / "float.json"
        path.write_text(json.dumps({"column_width": 2.5, "rows": [{"cells": ["a"]}]}))
        self._assert_clean_failure(["render", str(path)])

    def test_string_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "defaults.json"
        path.write_text(json.dumps({"defaults": "x", "rows": []}))
        self._assert_clean_failure(["render", str(path)])

    def test_nested_fill_of_empty_content(self, tmp_path: Path) -> None:
        inner = {"rows": [{"cells": [{"content": "", "h_align": "fill"}]}]}
        path = tmp_path / "nested.json"
        path.write_text(json.dumps({"rows": [{"cells": [{"content": {"grid": inner}}]}]}))
        self._assert_clean_failure(["render", str(path)])

    def test_unwritable_output(self, grid_file: Path, tmp_path: Path) -> None:
        self._assert_clean_failure(["render", str(grid_file), "-o", str(tmp_path)])


class TestRenderOutput:
    """Tests for writing rendered output."""

    def test_renders_once_when_saving(
        self, grid_file: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        calls: list[int] = []
        original = TextRenderer.render_grid

        def counting_render_grid(self: TextRenderer, grid: Grid) -> str:
            calls.append(1)
            return original(self, grid)

        monkeypatch.setattr(TextRenderer, "render_grid", counting_render_grid)
        out = tmp_path / "out.txt"
        result = runner.invoke(create_app(), ["render", str(grid_file), "-o", str(out)])
        assert result.exit_code == 0
        assert len(calls) == 1
        assert out.read_text(encoding="utf-8") == "1.. 1..\n2......\n"


class TestExampleCommand:
    """Tests for `cli-grid example`."""

    def test_prints_nested_grid(self) -> None:
        result = runner.invoke(create_app(), ["example"])
        assert result.exit_code == 0
        assert "..--1-- --1--.." in result.stdout
        assert result.stdout.count("\n") == 5
