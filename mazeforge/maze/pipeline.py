"""Pipeline orchestration for level generation.

Runs the ordered carve / sculpt / search phases for up to ``MAX_ATTEMPTS``
derived seeds and keeps the first layout that clears the difficulty
thresholds. When every attempt is rejected a fixed-seed fallback layout is
produced instead, so ``build()`` always returns a playable level.
"""
from __future__ import annotations

import os
import time
from typing import Any, Dict, List, Optional, Tuple

from flask import current_app, has_app_context

from mazeforge.logging_utils import get_logger
from mazeforge.utils.wall_runs import build_walls_from_open

from .config import LevelConfig
from .connectivity import SearchResult, bfs
from .generator import add_loops, carve_perfect_maze
from .grid import CELL_SIZE, START, START_RADIUS, Grid, count_open
from .level import LevelOutput, Rect, StartPoint
from .metrics import init_metrics
from .paths import Goal, PathMetrics, analyze_path, find_goal_near_right, reconstruct_path
from .pruning import carve_exit_corridor, normalize_borders, open_exit, prune_unreachable
from .rng import MASK32
from .sculptors import apply_profiles

MAX_ATTEMPTS = 280
ATTEMPT_SEED_STRIDE = 97
# One extra loop sample per this many rejected attempts.
LOOP_GROWTH_EVERY = 20
FALLBACK_SEED_OFFSET = 991
FALLBACK_EXTRA_LOOPS = 8

log = get_logger("mazeforge.maze")


def _env_flag(name: str, default: bool) -> bool:
    if name not in os.environ:
        return default
    return os.environ.get(name, "").lower() not in {"0", "false", "no", ""}


class LevelBuilder:
    """Build one level from a validated ``LevelConfig``.

    After ``build()`` the builder exposes the final ``grid``, the chosen
    ``goal`` cell and the ``path_metrics`` of the start-to-goal route
    alongside the returned ``LevelOutput``.
    """

    def __init__(self, config: LevelConfig, enable_metrics: Optional[bool] = None):
        self.config = config
        if enable_metrics is None:
            enable_metrics = _env_flag("MAZE_ENABLE_GENERATION_METRICS", True)
            # Flask app config overrides the environment inside a request/app context
            if has_app_context() and "MAZE_ENABLE_GENERATION_METRICS" in current_app.config:
                enable_metrics = bool(current_app.config.get("MAZE_ENABLE_GENERATION_METRICS"))
        self.enable_metrics = enable_metrics
        self.metrics: Dict[str, Any] = init_metrics() if enable_metrics else {}
        self._phase_times: Dict[str, int] = {}
        self.grid: Optional[Grid] = None
        self.goal: Optional[Tuple[int, int]] = None
        self.path_metrics: Optional[PathMetrics] = None

    @property
    def grid_cells(self) -> int:
        return self.config.grid_cells

    def _phase(self, label, fn, *a, **k):
        if not self.enable_metrics:
            return fn(*a, **k)
        ps = time.perf_counter()
        r = fn(*a, **k)
        pe = time.perf_counter()
        # summed across attempts
        self._phase_times[label] = self._phase_times.get(label, 0) + int((pe - ps) * 1000)
        return r

    def _bump(self, key: str, amount) -> None:
        if self.enable_metrics:
            self.metrics[key] += amount

    def _search_and_prune(self, grid: Grid) -> SearchResult:
        first = self._phase("bfs", bfs, grid, START)
        pruned = self._phase("prune", prune_unreachable, grid, first.dist)
        self._bump("cells_pruned", pruned)
        return self._phase("bfs", bfs, grid, START)

    def _attempt(self, attempt: int) -> Optional[Tuple[Grid, Goal, PathMetrics]]:
        cfg = self.config
        size = self.grid_cells
        seed = (cfg.seed + attempt * ATTEMPT_SEED_STRIDE) & MASK32
        grid, rng = self._phase(
            "carve", carve_perfect_maze, size, size, seed,
            cfg.bias_x, cfg.bias_y, cfg.straightness,
        )
        opened = self._phase("loops", add_loops, grid, rng, cfg.loop_count + attempt // LOOP_GROWTH_EVERY)
        self._bump("loops_opened", opened)
        self._phase("sculpt", apply_profiles, grid, rng, cfg.profiles)
        normalize_borders(grid)

        search = self._search_and_prune(grid)
        goal = self._phase("goal", find_goal_near_right, grid, search.dist)
        if goal is None:
            log.debug(event="level_attempt_rejected", level_id=cfg.id, attempt=attempt, reason="no_goal")
            return None

        path = reconstruct_path(search.prev, START, (goal.x, goal.y))
        metrics = analyze_path(path)
        reason = None
        if metrics.length < cfg.min_path_length:
            reason = "short_path"
        elif metrics.turns < cfg.min_turns:
            reason = "few_turns"
        elif metrics.right_down_one_turn:
            reason = "trivial_route"
        if reason:
            log.debug(
                event="level_attempt_rejected", level_id=cfg.id, attempt=attempt,
                reason=reason, length=metrics.length, turns=metrics.turns,
            )
            return None
        return grid, goal, metrics

    def _fallback(self) -> Tuple[Grid, Tuple[int, int], PathMetrics]:
        cfg = self.config
        size = self.grid_cells
        grid, rng = self._phase(
            "carve", carve_perfect_maze, size, size, cfg.seed + FALLBACK_SEED_OFFSET,
            cfg.bias_x, cfg.bias_y, cfg.straightness,
        )
        opened = self._phase("loops", add_loops, grid, rng, cfg.loop_count + FALLBACK_EXTRA_LOOPS)
        self._bump("loops_opened", opened)
        normalize_borders(grid)

        search = self._search_and_prune(grid)
        goal = find_goal_near_right(grid, search.dist)
        if goal is not None:
            cell = (goal.x, goal.y)
        else:
            fx, fy, _ = search.farthest()
            carve_exit_corridor(grid, fx, fy)
            cell = (size - 2, fy)
            if self.enable_metrics:
                self.metrics["fallback_corridor"] = True
            # corridor cells were never searched
            search = bfs(grid, START)
        path = reconstruct_path(search.prev, START, cell)
        return grid, cell, analyze_path(path)

    def build(self) -> LevelOutput:
        cfg = self.config
        start = time.perf_counter()
        accepted: Optional[Tuple[Grid, Goal, PathMetrics]] = None
        attempt = -1
        for attempt in range(MAX_ATTEMPTS):
            accepted = self._attempt(attempt)
            if accepted is not None:
                break
        attempts = attempt + 1

        if accepted is not None:
            grid, goal, path_metrics = accepted
            goal_cell = (goal.x, goal.y)
            log.info(
                event="level_accepted", level_id=cfg.id, seed=cfg.seed, attempt=attempt,
                length=path_metrics.length, turns=path_metrics.turns,
            )
        else:
            grid, goal_cell, path_metrics = self._fallback()
            log.info(
                event="level_fallback", level_id=cfg.id, seed=cfg.seed, attempts=attempts,
                length=path_metrics.length, turns=path_metrics.turns,
            )
        open_exit(grid, goal_cell[1])
        walls = self._phase("walls", build_walls_from_open, grid, CELL_SIZE)

        self.grid = grid
        self.goal = goal_cell
        self.path_metrics = path_metrics

        if self.enable_metrics:
            self.metrics["attempts"] = attempts
            self.metrics["accepted_attempt"] = attempt if accepted is not None else -1
            self.metrics["fallback_used"] = accepted is None
            self.metrics["path_length"] = path_metrics.length
            self.metrics["turns"] = path_metrics.turns
            self.metrics["walls"] = len(walls)
            self.metrics["open_cells"] = count_open(grid)
            self.metrics["runtime_ms"] = int((time.perf_counter() - start) * 1000)
            self.metrics["phase_ms"] = dict(self._phase_times)

        return self._to_output(grid, goal_cell, walls)

    def _to_output(self, grid: Grid, goal_cell: Tuple[int, int], walls: List[Rect]) -> LevelOutput:
        cfg = self.config
        cs = CELL_SIZE
        sx, sy = START
        return LevelOutput(
            id=cfg.id,
            name=cfg.name,
            difficulty=cfg.difficulty,
            size=len(grid) * cs,
            cell_size=cs,
            walls=tuple(walls),
            start=StartPoint(sx * cs + cs / 2, sy * cs + cs / 2, START_RADIUS),
            goal=Rect(goal_cell[0] * cs, goal_cell[1] * cs, cs, cs),
            seed=cfg.seed,
            grid=tuple(tuple(column) for column in grid),
            metrics=dict(self.metrics),
        )


def build_level(config: LevelConfig, enable_metrics: Optional[bool] = None) -> LevelOutput:
    return LevelBuilder(config, enable_metrics=enable_metrics).build()


__all__ = [
    "MAX_ATTEMPTS",
    "ATTEMPT_SEED_STRIDE",
    "FALLBACK_SEED_OFFSET",
    "FALLBACK_EXTRA_LOOPS",
    "LevelBuilder",
    "build_level",
]
