"""Save rendered grids."""

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cli_grid.core.grid import Grid


def write_text(text: str, path: str | Path, encoding: str = "utf-8") -> None:
    """Write already rendered text to disk, keeping its line terminators."""
    path = Path(path)
    with open(path, 'w', encoding=encoding, newline='') as f:
        f.write(text)


def save(grid: "Grid", path: str | Path, encoding: str = "utf-8") -> None:
    """Render a grid and write the text to disk."""
    write_text(grid.render(), path, encoding=encoding)
