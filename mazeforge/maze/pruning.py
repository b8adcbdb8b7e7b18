"""Structural cleanup passes run between sculpting and goal selection.

These passes seal the outer ring, close pockets the sculptors left unreachable,
and open the exit through the right border once a goal row is known.
"""
from __future__ import annotations

from typing import List

from .grid import START, Grid, grid_dims


def normalize_borders(grid: Grid) -> None:
    """Close the outer ring, then re-open the start cell."""
    width, height = grid_dims(grid)
    for x in range(width):
        grid[x][0] = False
        grid[x][height - 1] = False
    for y in range(height):
        grid[0][y] = False
        grid[width - 1][y] = False
    sx, sy = START
    grid[sx][sy] = True


def prune_unreachable(grid: Grid, dist: List[List[int]]) -> int:
    """Close open interior cells the search never reached. Returns cells closed.

    Reachability changes, so callers must search again afterwards.
    """
    width, height = grid_dims(grid)
    closed = 0
    for y in range(1, height - 1):
        for x in range(1, width - 1):
            if grid[x][y] and dist[x][y] < 0:
                grid[x][y] = False
                closed += 1
    return closed


def carve_exit_corridor(grid: Grid, x: int, y: int) -> None:
    """Force a straight corridor on row ``y`` from ``x`` to the last interior column."""
    width, _ = grid_dims(grid)
    for xx in range(x, width - 1):
        grid[xx][y] = True


def open_exit(grid: Grid, goal_y: int) -> None:
    width, _ = grid_dims(grid)
    grid[width - 1][goal_y] = True


__all__ = ["normalize_borders", "prune_unreachable", "carve_exit_corridor", "open_exit"]
