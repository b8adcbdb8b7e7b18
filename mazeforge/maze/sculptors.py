"""Terrain sculpting passes applied after base carving.

Each sculptor mutates the grid in place and draws from the shared random stream,
so the order in which they run is part of a level's identity. Sculptors do not
respect the outer border on their own; ``normalize_borders`` runs afterwards.

Profiles bundle sculptors under the names used by the level catalog.
"""
from __future__ import annotations

import math
from enum import Enum
from functools import partial
from typing import Callable, Iterable, Tuple

from .grid import Grid, grid_dims
from .rng import SequenceGenerator

# (radius factor, blocked sector start, blocked sector end) per relic ring
RELIC_RINGS = ((0.72, 0.8, 1.7), (0.55, 3.3, 4.1), (0.37, 5.2, 5.8))
RELIC_ANGLE_STEP = 0.03
RELIC_ARENA_FACTOR = 0.42


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def carve_room(grid: Grid, x: int, y: int, w: int, h: int) -> None:
    width, height = grid_dims(grid)
    for yy in range(y, y + h):
        for xx in range(x, x + w):
            if 0 < xx < width - 1 and 0 < yy < height - 1:
                grid[xx][yy] = True


def add_chambers(grid: Grid, rng: SequenceGenerator, amount: int, min_size: int, max_size: int) -> None:
    """Carve ``amount`` rectangular rooms with sides in ``[min_size, max_size]``."""
    width, height = grid_dims(grid)
    span = max_size - min_size + 1
    for _ in range(amount):
        room_w = min_size + math.floor(rng() * span)
        room_h = min_size + math.floor(rng() * span)
        x = 2 + math.floor(rng() * max(1, width - room_w - 3))
        y = 2 + math.floor(rng() * max(1, height - room_h - 3))
        carve_room(grid, x, y, room_w, room_h)


def add_rune_cross(grid: Grid, rng: SequenceGenerator) -> None:
    """Open a mostly solid cross through the centre (each cell kept with 82% odds)."""
    width, height = grid_dims(grid)
    mid_x = width // 2
    mid_y = height // 2
    for x in range(2, width - 2):
        if rng() > 0.18:
            grid[x][mid_y] = True
    for y in range(2, height - 2):
        if rng() > 0.18:
            grid[mid_x][y] = True


def add_serpent_cuts(grid: Grid, rng: SequenceGenerator, bands: int) -> None:
    """Wandering left-to-right trenches, one per evenly spaced band."""
    width, height = grid_dims(grid)
    for band in range(bands):
        y = 2 + math.floor((height - 4) * ((band + 1) / (bands + 1)))
        for x in range(2, width - 2):
            if rng() > 0.22:
                grid[x][y] = True
            if rng() > 0.66:
                y += 1 if rng() > 0.5 else -1
                y = max(2, min(height - 3, y))


def add_circular_relics(grid: Grid, rng: SequenceGenerator) -> None:
    """Close everything outside a central arena, then stamp three broken rings."""
    width, height = grid_dims(grid)
    cx = width // 2
    cy = height // 2
    max_r = min(width, height) * RELIC_ARENA_FACTOR

    for y in range(1, height - 1):
        for x in range(1, width - 1):
            dx = x - cx
            dy = y - cy
            if math.sqrt(dx * dx + dy * dy) > max_r:
                grid[x][y] = False

    two_pi = math.pi * 2
    for factor, gap_start, gap_end in RELIC_RINGS:
        radius = max_r * factor
        angle = 0.0
        while angle < two_pi:
            if not (gap_start < angle < gap_end):
                x = _round_half_up(cx + math.cos(angle) * radius)
                y = _round_half_up(cy + math.sin(angle) * radius)
                # sample only for in-bounds points
                if 1 < x < width - 2 and 1 < y < height - 2 and rng() > 0.08:
                    grid[x][y] = True
            angle += RELIC_ANGLE_STEP


SculptStep = Callable[[Grid, SequenceGenerator], None]


class Profile(Enum):
    """Named terrain profiles; each member carries the sculpt steps it composes."""

    CITADEL = ("citadel", (partial(add_chambers, amount=3, min_size=3, max_size=4),))
    CRYPT = (
        "crypt",
        (add_rune_cross, partial(add_chambers, amount=2, min_size=2, max_size=3)),
    )
    SERPENT = ("serpent", (partial(add_serpent_cuts, bands=3),))
    FORTRESS = (
        "fortress",
        (partial(add_chambers, amount=5, min_size=3, max_size=5), add_rune_cross),
    )
    RINGS = ("rings", (add_circular_relics, partial(add_serpent_cuts, bands=2)))

    def __init__(self, label: str, steps: Tuple[SculptStep, ...]):
        self.label = label
        self.steps = steps

    @classmethod
    def from_name(cls, name: str) -> "Profile":
        key = str(name).strip().lower()
        for member in cls:
            if member.label == key:
                return member
        raise KeyError(name)

    def apply(self, grid: Grid, rng: SequenceGenerator) -> None:
        for step in self.steps:
            step(grid, rng)


def apply_profiles(grid: Grid, rng: SequenceGenerator, profiles: Iterable[Profile]) -> None:
    for profile in profiles:
        profile.apply(grid, rng)


PROFILE_NAMES = tuple(p.label for p in Profile)

__all__ = [
    "carve_room",
    "add_chambers",
    "add_rune_cross",
    "add_serpent_cuts",
    "add_circular_relics",
    "Profile",
    "PROFILE_NAMES",
    "apply_profiles",
]
