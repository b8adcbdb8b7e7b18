import pytest

from mazeforge.maze.generator import add_loops, carve_perfect_maze
from mazeforge.maze.rng import SequenceGenerator

from tests.maze_test_utils import closed_grid, open_adjacency_edges, open_cells, reachable_from


@pytest.mark.parametrize("size,seed", [(5, 1), (9, 2), (19, 1401), (29, 3137)])
def test_perfect_maze_is_spanning_tree(size, seed):
    grid, _ = carve_perfect_maze(size, size, seed)
    nodes = ((size - 1) // 2) ** 2
    cells = open_cells(grid)
    # nodes plus one connector per tree edge
    assert len(cells) == 2 * nodes - 1
    assert reachable_from(grid, (1, 1)) == cells
    # a connected graph with V-1 edges has no cycles
    assert open_adjacency_edges(grid) == len(cells) - 1


def test_every_lattice_node_open_and_pillars_closed():
    grid, _ = carve_perfect_maze(19, 19, 99)
    for x in range(19):
        for y in range(19):
            if x % 2 == 1 and y % 2 == 1:
                assert grid[x][y], f"node cell {(x, y)} closed"
            if x % 2 == 0 and y % 2 == 0:
                assert not grid[x][y], f"pillar {(x, y)} opened"


def test_border_untouched_by_carver():
    grid, _ = carve_perfect_maze(15, 15, 5)
    for i in range(15):
        assert not grid[i][0] and not grid[i][14]
        assert not grid[0][i] and not grid[14][i]


def test_same_seed_same_maze_and_stream():
    g1, r1 = carve_perfect_maze(19, 19, 1401, 1.2, 1.08, 1.1)
    g2, r2 = carve_perfect_maze(19, 19, 1401, 1.2, 1.08, 1.1)
    assert g1 == g2
    assert r1() == r2()


def test_returned_stream_is_live():
    _, rng = carve_perfect_maze(9, 9, 3)
    assert isinstance(rng, SequenceGenerator)
    # carving consumed samples, so the stream is past its first value
    assert rng() != SequenceGenerator(3)()


def _connector_counts(grid):
    w = len(grid)
    horizontal = sum(1 for x in range(2, w - 1, 2) for y in range(1, w - 1, 2) if grid[x][y])
    vertical = sum(1 for x in range(1, w - 1, 2) for y in range(2, w - 1, 2) if grid[x][y])
    return horizontal, vertical


def test_axis_bias_shapes_corridors():
    h_heavy, v_light = _connector_counts(carve_perfect_maze(29, 29, 10, bias_x=8.0, bias_y=1.0)[0])
    h_light, v_heavy = _connector_counts(carve_perfect_maze(29, 29, 10, bias_x=1.0, bias_y=8.0)[0])
    assert h_heavy > v_light
    assert v_heavy > h_light


def test_add_loops_opens_only_bridges():
    grid, rng = carve_perfect_maze(19, 19, 1401)
    before = [col[:] for col in grid]
    opened = add_loops(grid, rng, 40)
    new = {(x, y) for x in range(19) for y in range(19) if grid[x][y] and not before[x][y]}
    assert len(new) == opened
    for x, y in new:
        horizontal = before[x - 1][y] and before[x + 1][y]
        vertical = before[x][y - 1] and before[x][y + 1]
        assert horizontal or vertical, f"{(x, y)} opened without bridging"
        assert 1 <= x <= 17 and 1 <= y <= 17


def test_add_loops_creates_cycles():
    grid, rng = carve_perfect_maze(19, 19, 1401)
    opened = add_loops(grid, rng, 60)
    assert opened > 0
    cells = open_cells(grid)
    assert open_adjacency_edges(grid) > len(cells) - 1


def test_add_loops_draws_two_samples_per_try():
    rng = SequenceGenerator(5)
    ref = SequenceGenerator(5)
    add_loops(closed_grid(9, 9), rng, 7)
    for _ in range(14):
        ref()
    assert rng() == ref()


def test_add_loops_zero_amount_is_noop():
    grid, rng = carve_perfect_maze(9, 9, 8)
    snapshot = [col[:] for col in grid]
    assert add_loops(grid, rng, 0) == 0
    assert grid == snapshot
