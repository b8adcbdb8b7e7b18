"""Structural checks over a finished level, for diagnostics scripts and tests."""
from __future__ import annotations

from typing import Any, Dict, List

from .connectivity import bfs
from .grid import START, grid_dims
from .level import LevelOutput


def analyze(level: LevelOutput) -> Dict[str, List[Any]]:
    """Return lists of offending cells / rects per invariant (empty lists = clean).

    Keys:
      unreachable_cells  open interior cells the start cannot reach
      open_border_cells  open border cells other than the exit
      exit_closed        ``[exit]`` when the exit cell is not open
      goal_off_column    ``[goal]`` when the goal is not on the last interior column
      walls_on_open      wall rects that cover an open cell
      uncovered_walls    closed cells no wall rect covers
    """
    grid = [list(column) for column in level.grid]
    width, height = grid_dims(grid)
    cs = level.cell_size
    gx, gy = level.goal_cell
    exit_cell = (width - 1, gy)

    reached = bfs(grid, START).reachable()
    unreachable = [
        (x, y)
        for x in range(1, width - 1)
        for y in range(1, height - 1)
        if grid[x][y] and (x, y) not in reached
    ]
    open_border = [
        (x, y)
        for x in range(width)
        for y in range(height)
        if (x in (0, width - 1) or y in (0, height - 1)) and grid[x][y] and (x, y) != exit_cell
    ]

    covered = set()
    walls_on_open = []
    for rect in level.walls:
        cells = [
            (x, rect.y // cs)
            for x in range(rect.x // cs, (rect.x + rect.width) // cs)
        ]
        if any(grid[x][y] for x, y in cells):
            walls_on_open.append(tuple(rect))
        covered.update(cells)
    uncovered = [
        (x, y) for x in range(width) for y in range(height)
        if not grid[x][y] and (x, y) not in covered
    ]

    return {
        "unreachable_cells": unreachable,
        "open_border_cells": open_border,
        "exit_closed": [] if grid[exit_cell[0]][exit_cell[1]] else [exit_cell],
        "goal_off_column": [] if gx == width - 2 else [(gx, gy)],
        "walls_on_open": walls_on_open,
        "uncovered_walls": uncovered,
    }


def is_clean(report: Dict[str, List[Any]]) -> bool:
    return all(not v for v in report.values())
