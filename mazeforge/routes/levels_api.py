"""
project: MazeForge
module: levels_api.py
License: MIT

Level catalog and generation API routes.

Catalog levels are generated on demand and memoised in a small in-process
cache keyed by their config. Custom levels are generated from a JSON config
posted to ``/api/levels/generate``.
"""

import hashlib
import os
import random
import threading

from flask import Blueprint, Response, current_app, jsonify, request

from mazeforge.logging_utils import get_logger
from mazeforge.maze import (
    LEVEL_DEFS,
    PROFILE_NAMES,
    LevelConfig,
    LevelConfigError,
    LevelOutput,
    build_level,
    get_level_config,
    level_configs,
)
from mazeforge.maze.rng import MASK32

log = get_logger("mazeforge.api")

bp_levels = Blueprint("levels", __name__)

# Simple in-process cache LevelConfig -> LevelOutput. Guarded by a lock because the
# dev server serves requests on threads.
_level_cache = {}
_level_cache_lock = threading.Lock()
_LEVEL_CACHE_MAX = 32  # small LRU-ish manual cap


def _cache_disabled() -> bool:
    if "MAZE_DISABLE_CACHE" in current_app.config:
        return bool(current_app.config["MAZE_DISABLE_CACHE"])
    return os.environ.get("MAZE_DISABLE_CACHE") == "1"


def get_cached_level(config: LevelConfig) -> LevelOutput:
    if _cache_disabled():
        return build_level(config)
    with _level_cache_lock:
        level = _level_cache.get(config)
        if level is not None:
            return level
    level = build_level(config)
    with _level_cache_lock:
        _level_cache[config] = level
        if len(_level_cache) > _LEVEL_CACHE_MAX:
            first_key = next(iter(_level_cache.keys()))
            if first_key != config:
                _level_cache.pop(first_key, None)
    return level


def clear_level_cache() -> None:
    with _level_cache_lock:
        _level_cache.clear()


def _coerce_seed(payload_seed):
    """Convert provided seed (int or str) into an unsigned 32-bit int."""
    if payload_seed is None or isinstance(payload_seed, bool):
        return random.randint(1, 1_000_000)
    if isinstance(payload_seed, int):
        return payload_seed & MASK32
    if isinstance(payload_seed, str):
        s = payload_seed.strip()
        if not s:
            return random.randint(1, 1_000_000)
        if s.isdigit():
            return int(s) & MASK32
        h = hashlib.sha256(s.encode("utf-8")).digest()
        return int.from_bytes(h[:4], "big")
    raise LevelConfigError(f"seed must be an integer or string (got {type(payload_seed).__name__})")


def _level_or_404(level_id: int):
    cfg = get_level_config(level_id)
    if cfg is None:
        return None, (jsonify({"error": "level not found"}), 404)
    return cfg, None


@bp_levels.route("/api/levels")
def list_levels():
    """Catalog summary: ``{"levels": [{id, name, difficulty, size, profile}]}``."""
    levels = [
        {
            "id": d["id"],
            "name": d["name"],
            "difficulty": d["difficulty"],
            "size": d["size"],
            "profile": d["profile"],
        }
        for d in LEVEL_DEFS
    ]
    return jsonify({"levels": levels})


@bp_levels.route("/api/levels/<int:level_id>")
def get_level(level_id: int):
    cfg, err = _level_or_404(level_id)
    if err:
        return err
    level = get_cached_level(cfg)
    include_metrics = request.args.get("metrics") in ("1", "true", "yes")
    return jsonify(level.to_dict(include_metrics=include_metrics))


@bp_levels.route("/api/levels/<int:level_id>/metrics")
def get_level_metrics(level_id: int):
    cfg, err = _level_or_404(level_id)
    if err:
        return err
    level = get_cached_level(cfg)
    return jsonify({"id": level.id, "seed": level.seed, "metrics": level.metrics})


@bp_levels.route("/api/levels/<int:level_id>/preview")
def get_level_preview(level_id: int):
    cfg, err = _level_or_404(level_id)
    if err:
        return err
    level = get_cached_level(cfg)
    return Response(level.preview() + "\n", mimetype="text/plain")


@bp_levels.route("/api/levels/generate", methods=["POST"])
def generate_level():
    """Generate a custom level.

    Body JSON: a level config in catalog (camelCase) or snake_case keys. When
    ``level`` names a catalog id, that level's config is the base and the other
    keys override it. ``seed`` may be an int, a numeric string or any string
    (hashed); omitted => random.

    Response: level JSON with ``metrics`` and the resolved ``seed``.
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "expected a JSON object"}), 400
    base = {}
    if "level" in data:
        level_id = data["level"]
        valid_id = isinstance(level_id, int) and not isinstance(level_id, bool)
        cfg = get_level_config(level_id) if valid_id else None
        if cfg is None:
            return jsonify({"error": "level not found"}), 404
        base = cfg.to_dict()
    merged = {**base, **{k: v for k, v in data.items() if k != "level"}}
    try:
        merged["seed"] = _coerce_seed(merged.get("seed"))
        config = LevelConfig.from_dict(merged)
    except LevelConfigError as exc:
        log.warn(event="level_config_rejected", error=str(exc))
        return jsonify({"error": str(exc)}), 400
    level = get_cached_level(config)
    payload = level.to_dict(include_metrics=True)
    payload["seed"] = level.seed
    return jsonify(payload)


@bp_levels.route("/api/levels/profiles")
def list_profiles():
    used = sorted({name for cfg in level_configs() for name in cfg.profile_names})
    return jsonify({"profiles": list(PROFILE_NAMES), "in_catalog": used})
