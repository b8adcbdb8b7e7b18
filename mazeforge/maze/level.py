"""Immutable generation results handed to the renderer and physics layer."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .grid import render_ascii


class Rect(tuple):
    """Pixel-space axis-aligned rectangle ``(x, y, width, height)``."""

    __slots__ = ()

    def __new__(cls, x: int, y: int, width: int, height: int):
        return super().__new__(cls, (x, y, width, height))

    x = property(lambda self: self[0])
    y = property(lambda self: self[1])
    width = property(lambda self: self[2])
    height = property(lambda self: self[3])

    def to_dict(self) -> Dict[str, int]:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


@dataclass(frozen=True)
class StartPoint:
    x: float
    y: float
    radius: int

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y, "radius": self.radius}


@dataclass(frozen=True)
class LevelOutput:
    id: Optional[int]
    name: str
    difficulty: str
    size: int
    cell_size: int
    walls: Tuple[Rect, ...]
    start: StartPoint
    goal: Rect
    seed: int = 0
    # Final open grid (column-major); kept for previews and invariant checks.
    grid: Tuple[Tuple[bool, ...], ...] = field(default=(), repr=False, compare=False)
    metrics: Dict[str, Any] = field(default_factory=dict, compare=False)

    @property
    def goal_cell(self) -> Tuple[int, int]:
        return (self.goal.x // self.cell_size, self.goal.y // self.cell_size)

    @property
    def grid_cells(self) -> int:
        return self.size // self.cell_size

    def preview(self) -> str:
        """ASCII map with ``S`` start, ``G`` goal and ``E`` exit marked."""
        cs = self.cell_size
        gx, gy = self.goal_cell
        marks = {
            (int(self.start.x) // cs, int(self.start.y) // cs): "S",
            (gx, gy): "G",
            (len(self.grid) - 1, gy): "E",
        }
        return render_ascii(self.grid, marks)

    def to_dict(self, include_metrics: bool = False) -> Dict[str, Any]:
        data = {
            "id": self.id,
            "name": self.name,
            "difficulty": self.difficulty,
            "size": self.size,
            "cellSize": self.cell_size,
            "walls": [w.to_dict() for w in self.walls],
            "start": self.start.to_dict(),
            "goal": self.goal.to_dict(),
        }
        if include_metrics:
            data["metrics"] = dict(self.metrics)
        return data


__all__ = ["Rect", "StartPoint", "LevelOutput"]
