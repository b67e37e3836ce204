"""Character-based plot of items and their centre of gravity."""

from __future__ import annotations

import math
import sys
from collections.abc import Iterable
from typing import TextIO

from polarcog.geometry import Item, PolarCoord, _to_cartesian

GRID_WIDTH = 60
GRID_HEIGHT = 30
_CENTER_X = GRID_WIDTH // 2
_CENTER_Y = GRID_HEIGHT // 2
_CIRCLE_STEP = 0.05

LEGEND = (
    "Legend: '+' = Center (0,0), '.' = Circle Boundary, '1-9' = Item Number, "
    "'#' = Item (10+), 'X' = Center of Gravity"
)


def _grid_cell(x: float, y: float, max_radius: float) -> tuple[int, int] | None:
    """Map world coordinates to (row, column), or None when off the grid."""
    col = int((x / max_radius) * (GRID_WIDTH // 2 - 1) + _CENTER_X)
    row = int((-y / max_radius) * (GRID_HEIGHT // 2 - 1) + _CENTER_Y)
    if 0 <= col < GRID_WIDTH and 0 <= row < GRID_HEIGHT:
        return row, col
    return None


def _circle_angles():
    angle = 0.0
    while angle < 2 * math.pi:
        yield angle
        angle += _CIRCLE_STEP


def render_polar_plot(items: Iterable[Item], cog: PolarCoord, max_radius: float) -> str:
    """Return the plot grid as text, one line per row."""
    if max_radius == 0:
        raise ValueError("max_radius must be non-zero")

    grid = [[" "] * GRID_WIDTH for _ in range(GRID_HEIGHT)]
    grid[_CENTER_Y][_CENTER_X] = "+"

    for angle in _circle_angles():
        cell = _grid_cell(max_radius * math.cos(angle), max_radius * math.sin(angle), max_radius)
        if cell is not None:
            row, col = cell
            if grid[row][col] == " ":
                grid[row][col] = "."

    for index, item in enumerate(items):
        cell = _grid_cell(*_to_cartesian(item.location), max_radius)
        if cell is not None:
            row, col = cell
            if grid[row][col] != "X":
                grid[row][col] = str(index + 1) if index < 9 else "#"

    cell = _grid_cell(*_to_cartesian(cog), max_radius)
    if cell is not None:
        row, col = cell
        grid[row][col] = "X"

    return "\n".join("".join(row) for row in grid)


def draw_polar_plot(
    items: Iterable[Item], cog: PolarCoord, max_radius: float, out: TextIO | None = None
) -> None:
    """Write the framed plot and its legend to *out* (standard output by default)."""
    stream = sys.stdout if out is None else out
    grid = render_polar_plot(items, cog, max_radius)
    stream.write("\n--- Polar Plot ---\n")
    stream.write(grid + "\n")
    stream.write("------------------\n")
    stream.write(LEGEND + "\n")