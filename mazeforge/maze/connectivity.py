"""Connectivity utilities: breadth-first search from the start cell.

Distances are measured over open cells strictly inside the border. The queue is
a plain list walked by index, and neighbours are scanned in the fixed
Right, Left, Down, Up order so predecessor trees are reproducible.
"""
from __future__ import annotations

from typing import List, NamedTuple, Optional, Set

from .grid import DIRS, Coord2D, Grid, create_grid, grid_dims


class SearchResult(NamedTuple):
    dist: List[List[int]]
    prev: List[List[Optional[Coord2D]]]

    def reachable(self) -> Set[Coord2D]:
        return {
            (x, y)
            for x, column in enumerate(self.dist)
            for y, d in enumerate(column)
            if d >= 0
        }

    def farthest(self) -> tuple:
        """Return ``(x, y, distance)`` of the farthest cell, scanning rows top-down.

        Starts from the start cell at distance 0; only strictly greater
        distances replace the current pick.
        """
        width, height = len(self.dist), len(self.dist[0])
        best = (1, 1, 0)
        for y in range(1, height - 1):
            for x in range(1, width - 1):
                d = self.dist[x][y]
                if d > best[2]:
                    best = (x, y, d)
        return best


def bfs(grid: Grid, start: Coord2D) -> SearchResult:
    width, height = grid_dims(grid)
    dist = create_grid(width, height, -1)
    prev = create_grid(width, height, None)

    sx, sy = start
    queue = [(sx, sy)]
    head = 0
    dist[sx][sy] = 0

    while head < len(queue):
        cx, cy = queue[head]
        head += 1
        for d in DIRS:
            nx, ny = cx + d.dx, cy + d.dy
            if nx < 1 or ny < 1 or nx >= width - 1 or ny >= height - 1:
                continue
            if not grid[nx][ny] or dist[nx][ny] != -1:
                continue
            dist[nx][ny] = dist[cx][cy] + 1
            prev[nx][ny] = (cx, cy)
            queue.append((nx, ny))

    return SearchResult(dist, prev)


__all__ = ["SearchResult", "bfs"]
