"""Goal selection and start-to-goal path analysis."""
from __future__ import annotations

from typing import List, NamedTuple, Optional, Sequence, Tuple

from .grid import DOWN, RIGHT, Coord2D, Grid, direction_between, grid_dims

CENTER_PENALTY = 0.35


class PathIntegrityError(RuntimeError):
    """Raised when consecutive path cells are not orthogonal neighbours."""


class Goal(NamedTuple):
    x: int
    y: int
    score: float
    distance: int


class PathMetrics(NamedTuple):
    length: int
    turns: int
    right_down_only: bool
    right_down_one_turn: bool
    directions: Tuple[str, ...] = ()


def find_goal_near_right(grid: Grid, dist: List[List[int]]) -> Optional[Goal]:
    """Pick the exit cell on the last interior column.

    Score is ``distance - 0.35 * |y - height / 2|``: far from the start but not
    hugging a corner. Returns None when nothing on that column is reachable.
    """
    width, height = grid_dims(grid)
    x = width - 2
    best: Optional[Goal] = None
    for y in range(1, height - 1):
        if not grid[x][y]:
            continue
        d = dist[x][y]
        if d < 0:
            continue
        score = d - abs(y - height / 2) * CENTER_PENALTY
        if best is None or score > best.score:
            best = Goal(x, y, score, d)
    return best


def reconstruct_path(prev, start: Coord2D, goal: Coord2D) -> List[Coord2D]:
    """Walk predecessors back from ``goal``; returned path starts at ``start``."""
    path: List[Coord2D] = []
    cursor: Optional[Coord2D] = (goal[0], goal[1])
    while cursor is not None:
        path.append(cursor)
        if cursor == tuple(start):
            break
        cursor = prev[cursor[0]][cursor[1]]
    path.reverse()
    return path


def analyze_path(path: Sequence[Coord2D]) -> PathMetrics:
    if len(path) < 2:
        return PathMetrics(len(path), 0, True, True)

    codes = []
    for a, b in zip(path, path[1:]):
        d = direction_between(a, b)
        if d is None:
            raise PathIntegrityError(f"non-adjacent path step {a} -> {b}")
        codes.append(d.code)

    turns = sum(1 for p, c in zip(codes, codes[1:]) if p != c)
    right_down_only = all(c in (RIGHT.code, DOWN.code) for c in codes)
    return PathMetrics(
        length=len(path),
        turns=turns,
        right_down_only=right_down_only,
        right_down_one_turn=right_down_only and turns <= 1,
        directions=tuple(codes),
    )


__all__ = [
    "CENTER_PENALTY",
    "Goal",
    "PathMetrics",
    "PathIntegrityError",
    "find_goal_near_right",
    "reconstruct_path",
    "analyze_path",
]
