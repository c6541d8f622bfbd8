"""Typer CLI application."""

import logging
from dataclasses import replace
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from cli_grid.core.align import HAlign, VAlign
from cli_grid.core.cell import Cell
from cli_grid.core.grid import Grid
from cli_grid.core.row import Row


def example_grid() -> Grid:
    """A small demonstration grid with another grid nested in its middle cell."""
    nested = (
        Grid.builder([
            Row([Cell("1", 1), Cell("1", 1)]),
            Row([Cell("1", 1), Cell("1", 1)]),
            Row([Cell("1", 1), Cell("1", 1)]),
        ])
        .default_h_align(HAlign.CENTER)
        .default_blank_char('-')
        .column_width(5)
        .build()
    )
    return (
        Grid.builder([
            Row([Cell("2", 2), Cell("1", 1)]),
            Row([Cell("1", 1), Cell(str(nested), 1), Cell("1", 1)]),
            Row([Cell("3", 3)]),
        ])
        .default_h_align(HAlign.CENTER)
        .default_v_align(VAlign.MIDDLE)
        .default_blank_char('.')
        .column_width(15)
        .build()
    )


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="cli-grid",
        help="Render column based text grids for the terminal.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    err_console = Console(stderr=True)

    @app.command()
    def render(
        path: Annotated[Path, typer.Argument(help="JSON grid description")],
        output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Write to file instead of stdout")] = None,
        column_width: Annotated[Optional[int], typer.Option("--column-width", "-w", help="Override the grid column width")] = None,
        padding: Annotated[Optional[int], typer.Option("--padding", "-p", help="Override the grid padding size")] = None,
        blank_char: Annotated[Optional[str], typer.Option("--blank-char", "-b", help="Override the grid blank character")] = None,
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log layout details")] = False,
    ) -> None:
        """Render a grid described in a JSON file."""
        from cli_grid.io import GridFormatError, load, write_text

        if verbose:
            logging.basicConfig(level=logging.DEBUG, format='%(levelname)s: %(message)s')

        try:
            grid = load(path)
        except FileNotFoundError:
            err_console.print(f"[red]File not found: {path}[/]")
            raise typer.Exit(1)
        except GridFormatError as e:
            err_console.print(f"[red]Invalid grid description in {path}: {escape(str(e))}[/]")
            raise typer.Exit(1)
        except OSError as e:
            err_console.print(f"[red]Cannot read {path}: {escape(e.strerror or str(e))}[/]")
            raise typer.Exit(1)

        try:
            if column_width is not None or padding is not None:
                grid = replace(
                    grid,
                    column_width=column_width if column_width is not None else grid.column_width,
                    padding_size=padding if padding is not None else grid.padding_size,
                )
            if blank_char is not None:
                grid = replace(
                    grid,
                    default_options=replace(grid.default_options, blank_char=blank_char),
                )
            text = grid.render()
        except ValueError as e:
            err_console.print(f"[red]Cannot render {path}: {escape(str(e))}[/]")
            raise typer.Exit(1)

        if output is None:
            typer.echo(text, nl=False)
        else:
            try:
                write_text(text, output)
            except OSError as e:
                err_console.print(f"[red]Cannot write {output}: {escape(e.strerror or str(e))}[/]")
                raise typer.Exit(1)
            err_console.print(f"[green]Rendered {path} → {output}[/]")

    @app.command()
    def example() -> None:
        """Print a demonstration grid."""
        typer.echo(str(example_grid()), nl=False)

    return app
