"""Core structural generation phases: lattice carving and loop injection."""
from __future__ import annotations

from typing import List, NamedTuple, Optional, Tuple

from .grid import DIRS, Direction, Grid, create_grid, grid_dims
from .rng import SequenceGenerator, pick_weighted


class _Node(NamedTuple):
    x: int
    y: int
    dir: Optional[Direction]


class _Option(NamedTuple):
    nx: int
    ny: int
    dir: Direction
    weight: float


def _sign(v: int) -> int:
    return (v > 0) - (v < 0)


def carve_perfect_maze(
    width: int,
    height: int,
    seed: int,
    bias_x: float = 1.0,
    bias_y: float = 1.0,
    straightness: float = 1.0,
) -> Tuple[Grid, SequenceGenerator]:
    """Carve a perfect maze with a biased iterative depth-first search.

    Lattice node ``(x, y)`` lives at fine cell ``(1 + 2x, 1 + 2y)``. Neighbour
    weights use ``bias_x`` / ``bias_y`` by axis and are multiplied by
    ``straightness`` when the move continues the direction that reached the
    current node. Returns the grid plus the still-live random stream so later
    phases keep consuming it.
    """
    rng = SequenceGenerator(seed)
    grid = create_grid(width, height, False)
    nodes_w = (width - 1) // 2
    nodes_h = (height - 1) // 2
    visited = create_grid(nodes_w, nodes_h, False)

    stack: List[_Node] = [_Node(0, 0, None)]
    visited[0][0] = True
    grid[1][1] = True

    while stack:
        current = stack[-1]
        options: List[_Option] = []
        for d in DIRS:
            nx, ny = current.x + d.dx, current.y + d.dy
            if nx < 0 or ny < 0 or nx >= nodes_w or ny >= nodes_h:
                continue
            if visited[nx][ny]:
                continue
            weight = bias_x if d.dx != 0 else bias_y
            if current.dir is not None and current.dir.code == d.code:
                weight *= straightness
            options.append(_Option(nx, ny, d, weight))

        if not options:
            stack.pop()
            continue

        chosen = pick_weighted(options, rng)
        cx, cy = 1 + current.x * 2, 1 + current.y * 2
        tx, ty = 1 + chosen.nx * 2, 1 + chosen.ny * 2
        grid[cx + _sign(tx - cx)][cy + _sign(ty - cy)] = True
        grid[tx][ty] = True
        visited[chosen.nx][chosen.ny] = True
        stack.append(_Node(chosen.nx, chosen.ny, chosen.dir))

    return grid, rng


def add_loops(grid: Grid, rng: SequenceGenerator, amount: int) -> int:
    """Open closed cells that bridge two open cells two apart; returns cells opened.

    ``amount`` is a sampling budget, not a guaranteed count.
    """
    width, height = grid_dims(grid)
    opened = 0
    for _ in range(amount):
        x = 1 + int(rng() * (width - 2))
        y = 1 + int(rng() * (height - 2))
        if grid[x][y]:
            continue
        horizontal = grid[x - 1][y] and grid[x + 1][y]
        vertical = grid[x][y - 1] and grid[x][y + 1]
        if horizontal or vertical:
            grid[x][y] = True
            opened += 1
    return opened


__all__ = ["carve_perfect_maze", "add_loops"]
