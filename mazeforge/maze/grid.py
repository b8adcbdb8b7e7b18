"""Grid primitives shared by every generation stage.

Grids are column-major (``grid[x][y]``) like the rest of the codebase; ``True``
marks an open (walkable) cell.
"""
from __future__ import annotations

from typing import List, NamedTuple, Optional, Tuple

# Fixed pixel size of one fine grid cell.
CELL_SIZE = 20
# Fixed start cell for every level.
START: Tuple[int, int] = (1, 1)
START_RADIUS = 8

Coord2D = Tuple[int, int]
Grid = List[List[bool]]


class Direction(NamedTuple):
    dx: int
    dy: int
    code: str


RIGHT = Direction(1, 0, "R")
LEFT = Direction(-1, 0, "L")
DOWN = Direction(0, 1, "D")
UP = Direction(0, -1, "U")

# Scan order matters: carving, BFS tie-breaks and path geometry depend on it.
DIRS: Tuple[Direction, ...] = (RIGHT, LEFT, DOWN, UP)
DIR_BY_DELTA = {(d.dx, d.dy): d for d in DIRS}


def create_grid(width: int, height: int, fill=False) -> list:
    return [[fill for _ in range(height)] for _ in range(width)]


def grid_dims(grid) -> Tuple[int, int]:
    return len(grid), len(grid[0])


def grid_cells_for(size: int, cell_size: int = CELL_SIZE) -> int:
    """Number of cells per side for a board of ``size`` pixels.

    Even counts drop one cell so the lattice maps exactly onto the grid
    (``cells == 2 * nodes + 1``).
    """
    cells = size // cell_size
    if cells % 2 == 0:
        cells -= 1
    return cells


def direction_between(a: Coord2D, b: Coord2D) -> Optional[Direction]:
    return DIR_BY_DELTA.get((b[0] - a[0], b[1] - a[1]))


def count_open(grid: Grid) -> int:
    return sum(1 for column in grid for cell in column if cell)


def render_ascii(grid: Grid, marks: Optional[dict] = None) -> str:
    """Text preview: ``#`` wall, ``.`` open, plus optional ``{(x, y): char}`` marks."""
    width, height = grid_dims(grid)
    marks = marks or {}
    rows = []
    for y in range(height):
        rows.append(
            "".join(marks.get((x, y)) or ("." if grid[x][y] else "#") for x in range(width))
        )
    return "\n".join(rows)


__all__ = [
    "CELL_SIZE",
    "START",
    "START_RADIUS",
    "Coord2D",
    "Grid",
    "Direction",
    "RIGHT",
    "LEFT",
    "DOWN",
    "UP",
    "DIRS",
    "create_grid",
    "grid_dims",
    "grid_cells_for",
    "direction_between",
    "count_open",
    "render_ascii",
]
