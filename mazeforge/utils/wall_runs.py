"""Compaction of closed grid cells into pixel-space wall rectangles.

Strategy:
  - Scan the grid row by row, left to right.
  - Each maximal run of consecutive closed cells on a row becomes one
    rectangle one cell tall.
  - Runs never merge vertically, so every closed cell is covered by exactly
    one rectangle and no rectangle covers an open cell.

Limitations:
  - Output is not minimal; a solid block of N rows yields N rectangles.
"""

from __future__ import annotations

from typing import List, Sequence

from mazeforge.maze.level import Rect


def build_walls_from_open(grid: Sequence[Sequence[bool]], cell_size: int) -> List[Rect]:
    """Return wall rectangles for every closed cell of a column-major grid.

    Args:
        grid: Column-major open grid (``grid[x][y]``, ``True`` = walkable).
        cell_size: Pixel size of one cell.

    Returns:
        Rectangles ordered by row then by starting column.
    """
    width = len(grid)
    height = len(grid[0]) if width else 0
    walls: List[Rect] = []
    for y in range(height):
        x = 0
        while x < width:
            if grid[x][y]:
                x += 1
                continue
            start = x
            while x < width and not grid[x][y]:
                x += 1
            walls.append(Rect(start * cell_size, y * cell_size, (x - start) * cell_size, cell_size))
    return walls
