"""Renderers for outputting grids as text."""

from cli_grid.render.text import TextRenderer

__all__ = ["TextRenderer"]
