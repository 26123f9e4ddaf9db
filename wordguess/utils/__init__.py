"""Text rendering helpers."""

from .grid_visualizer import render_tile, render_grid, render_keyboard, render_status, render_state

__all__ = [
    "render_tile",
    "render_grid",
    "render_keyboard",
    "render_status",
    "render_state",
]
