import dataclasses
import importlib.util
import json
import os

import pytest

from mazeforge.maze import LevelConfigError, build_level
from mazeforge.maze.debug_checks import analyze, is_clean

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


def _load_script():
    path = os.path.join(ROOT, "scripts", "diagnose_levels.py")
    spec = importlib.util.spec_from_file_location("diagnose_levels", path)
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)
    return mod


def test_generated_level_is_clean(small_config):
    report = analyze(build_level(small_config))
    assert is_clean(report), report


def test_open_border_and_missing_wall_detected(small_config):
    level = build_level(small_config)
    grid = [list(col) for col in level.grid]
    grid[0][3] = True
    broken = dataclasses.replace(level, grid=tuple(tuple(c) for c in grid))
    report = analyze(broken)
    assert report["open_border_cells"] == [(0, 3)]
    # the stale wall list still covers the opened cell
    assert report["walls_on_open"]
    assert not is_clean(report)


def test_unreachable_pocket_detected(small_config):
    level = build_level(small_config)
    grid = [list(col) for col in level.grid]
    # wall off everything around the start cell
    grid[2][1] = False
    grid[1][2] = False
    broken = dataclasses.replace(level, grid=tuple(tuple(c) for c in grid))
    report = analyze(broken)
    assert report["unreachable_cells"]
    assert report["uncovered_walls"]


def test_diagnose_script_reports_json(capsys):
    mod = _load_script()
    assert mod.main(["--level", "1", "1401", "7"]) == 0
    data = json.loads(capsys.readouterr().out)
    seeds = [r["seed"] for r in data["results"]]
    assert seeds == [1401, 7]
    assert all(r["ok"] for r in data["results"])
    assert data["results"][0]["path_length"] == 69


def test_diagnose_script_unknown_level(capsys):
    mod = _load_script()
    with pytest.raises(SystemExit) as exc:
        mod.main(["--level", "0"])
    assert exc.value.code == 2
    assert "unknown level id 0" in capsys.readouterr().err


def test_run_for_seed_unknown_level():
    mod = _load_script()
    with pytest.raises(LevelConfigError, match="unknown level id 404"):
        mod.run_for_seed(404, 1)
