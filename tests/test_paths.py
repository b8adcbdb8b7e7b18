import pytest

from mazeforge.maze.connectivity import bfs
from mazeforge.maze.paths import (
    CENTER_PENALTY,
    PathIntegrityError,
    analyze_path,
    find_goal_near_right,
    reconstruct_path,
)

from tests.maze_test_utils import grid_from_rows


def _dist_grid(w, h, values):
    dist = [[-1] * h for _ in range(w)]
    for (x, y), d in values.items():
        dist[x][y] = d
    return dist


def test_goal_prefers_score_not_raw_distance():
    grid = [[True] * 7 for _ in range(7)]
    dist = _dist_grid(7, 7, {(5, 1): 10, (5, 3): 10, (5, 5): 11})
    goal = find_goal_near_right(grid, dist)
    assert (goal.x, goal.y) == (5, 5)
    assert goal.distance == 11
    assert goal.score == pytest.approx(11 - 1.5 * CENTER_PENALTY)


def test_goal_penalises_distance_from_centre_row():
    grid = [[True] * 7 for _ in range(7)]
    dist = _dist_grid(7, 7, {(5, 1): 10, (5, 3): 10})
    goal = find_goal_near_right(grid, dist)
    assert (goal.x, goal.y) == (5, 3)


def test_goal_first_maximum_wins():
    grid = [[True] * 7 for _ in range(7)]
    # rows 3 and 4 are both half a cell from the centre line
    dist = _dist_grid(7, 7, {(5, 3): 10, (5, 4): 10})
    goal = find_goal_near_right(grid, dist)
    assert goal.y == 3


def test_goal_ignores_closed_and_unreached_cells():
    grid = [[True] * 7 for _ in range(7)]
    grid[5][2] = False
    dist = _dist_grid(7, 7, {(5, 2): 50, (4, 3): 40})
    assert find_goal_near_right(grid, dist) is None


def test_reconstruct_and_analyze_real_path():
    grid = grid_from_rows([
        "#######",
        "#...###",
        "###.###",
        "###...#",
        "#######",
    ])
    res = bfs(grid, (1, 1))
    path = reconstruct_path(res.prev, (1, 1), (5, 3))
    assert path[0] == (1, 1) and path[-1] == (5, 3)
    assert len(path) == res.dist[5][3] + 1
    m = analyze_path(path)
    assert m.length == 7
    assert m.directions == ("R", "R", "D", "D", "R", "R")
    assert m.turns == 2
    assert m.right_down_only
    assert not m.right_down_one_turn


def test_straight_and_single_bend_paths_are_trivial():
    straight = analyze_path([(1, 1), (2, 1), (3, 1)])
    assert straight.turns == 0 and straight.right_down_one_turn
    bend = analyze_path([(1, 1), (2, 1), (2, 2), (2, 3)])
    assert bend.turns == 1 and bend.right_down_one_turn


def test_any_left_or_up_step_is_not_trivial():
    m = analyze_path([(1, 2), (2, 2), (2, 1), (3, 1)])
    assert m.directions == ("R", "U", "R")
    assert not m.right_down_only
    assert not m.right_down_one_turn


def test_short_paths():
    assert tuple(analyze_path([(1, 1)]))[:4] == (1, 0, True, True)
    assert tuple(analyze_path([]))[:4] == (0, 0, True, True)


def test_non_adjacent_step_raises():
    with pytest.raises(PathIntegrityError):
        analyze_path([(1, 1), (3, 1)])
    with pytest.raises(PathIntegrityError):
        analyze_path([(1, 1), (2, 2)])
