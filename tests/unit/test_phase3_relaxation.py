# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
Phase 3 — Relaxation engine tests.
Relaxed fields are checked against a brute-force BFS for the step-count
metrics and against hand-computed values for the Euclidean metric.
"""

import math
from collections import deque

import numpy as np
import pytest

from dijkmap.models.field import Metric

BAD = -2147483648
MIN = 0
MAX = 2147483647
SQRT2 = math.sqrt(2)

MAZE = (
    "##########\n"
    "#x...#...#\n"
    "#.##.#.#.#\n"
    "#..#...#.#\n"
    "##.#####.#\n"
    "#........#\n"
    "#.####.#x#\n"
    "##########\n"
)

# Two regions joined only by the diagonal (2,1)-(3,2)
DIAGONAL_ONLY = (
    "######\n"
    "#@.#x#\n"
    "#.##.#\n"
    "##...#\n"
    "######\n"
)


# ─── Helpers ─────────────────────────────────────────────────────────────────

def _rows(text: str) -> list[str]:
    return [line for line in text.split("\n") if line]


def _raw_grid(text: str, dtype=np.int64) -> np.ndarray:
    costs = {"#": BAD, "x": MIN}
    return np.array(
        [[costs.get(ch, MAX) for ch in row] for row in _rows(text)], dtype=dtype
    )


def _bfs_distances(text: str, diagonal: bool) -> dict[tuple[int, int], int]:
    """Reference step counts from every goal, walls impassable."""
    rows = _rows(text)
    n_rows, n_cols = len(rows), len(rows[0])
    offsets = [(0, -1), (0, 1), (-1, 0), (1, 0)]
    if diagonal:
        offsets += [(-1, -1), (-1, 1), (1, -1), (1, 1)]

    dist: dict[tuple[int, int], int] = {}
    queue: deque[tuple[int, int]] = deque()
    for r in range(n_rows):
        for c in range(n_cols):
            if rows[r][c] == "x":
                dist[(r, c)] = 0
                queue.append((r, c))

    while queue:
        r, c = queue.popleft()
        for dr, dc in offsets:
            nr, nc = r + dr, c + dc
            if not (0 <= nr < n_rows and 0 <= nc < n_cols):
                continue
            if rows[nr][nc] == "#" or (nr, nc) in dist:
                continue
            dist[(nr, nc)] = dist[(r, c)] + 1
            queue.append((nr, nc))
    return dist


def _expected_grid(text: str, diagonal: bool) -> list[list[int]]:
    rows = _rows(text)
    dist = _bfs_distances(text, diagonal)
    return [
        [BAD if ch == "#" else dist.get((r, c), MAX) for c, ch in enumerate(row)]
        for r, row in enumerate(rows)
    ]


# ─── Convergence ─────────────────────────────────────────────────────────────

def test_open_3x3_cardinal_scenario():
    from dijkmap.modules.relaxation import relax

    grid = _raw_grid("...\n...\n..x")
    iterations = relax(grid, MIN, MAX, BAD, Metric.CARDINAL)

    assert grid.tolist() == [[4, 3, 2], [3, 2, 1], [2, 1, 0]]
    assert iterations == 5


@pytest.mark.parametrize(
    "metric, diagonal",
    [(Metric.CARDINAL, False), (Metric.UNIFORM_8WAY, True)],
)
def test_maze_matches_bfs(metric, diagonal):
    from dijkmap.modules.relaxation import relax

    grid = _raw_grid(MAZE)
    relax(grid, MIN, MAX, BAD, metric)
    assert grid.tolist() == _expected_grid(MAZE, diagonal)


def test_cardinal_leaves_diagonal_region_unconnected():
    from dijkmap.modules.relaxation import relax

    grid = _raw_grid(DIAGONAL_ONLY)
    relax(grid, MIN, MAX, BAD, Metric.CARDINAL)

    assert grid[1, 1] == MAX
    assert grid[1, 2] == MAX
    assert grid[2, 1] == MAX
    assert grid[3, 2] == 4
    assert grid.tolist() == _expected_grid(DIAGONAL_ONLY, diagonal=False)


def test_uniform_8way_connects_diagonal_region():
    from dijkmap.modules.relaxation import relax

    grid = _raw_grid(DIAGONAL_ONLY)
    relax(grid, MIN, MAX, BAD, Metric.UNIFORM_8WAY)

    assert grid[1, 1] == 5
    assert grid.tolist() == _expected_grid(DIAGONAL_ONLY, diagonal=True)


def test_no_goal_leaves_everything_unreached():
    from dijkmap.modules.relaxation import relax

    grid = _raw_grid("...\n.#.")
    iterations = relax(grid, MIN, MAX, BAD, Metric.CARDINAL)
    assert iterations == 1
    assert grid.tolist() == [[MAX, MAX, MAX], [MAX, BAD, MAX]]


# ─── Euclidean Metric ────────────────────────────────────────────────────────

def test_euclidean_center_goal():
    from dijkmap.modules.relaxation import relax

    grid = _raw_grid("...\n.x.\n...", dtype=np.float64)
    iterations = relax(grid, MIN, MAX, BAD, Metric.EUCLIDEAN_8WAY)

    expected = [[SQRT2, 1, SQRT2], [1, 0, 1], [SQRT2, 1, SQRT2]]
    np.testing.assert_allclose(grid, expected)
    assert iterations == 2


def test_euclidean_corner_goal():
    from dijkmap.modules.relaxation import relax

    grid = _raw_grid("...\n...\n..x", dtype=np.float64)
    iterations = relax(grid, MIN, MAX, BAD, Metric.EUCLIDEAN_8WAY)

    expected = np.array([
        [2 * SQRT2, 1 + SQRT2, 2],
        [1 + SQRT2, SQRT2, 1],
        [2, 1, 0],
    ])
    np.testing.assert_allclose(grid, expected)
    assert iterations == 3


def test_euclidean_corridor_is_step_count():
    from dijkmap.modules.relaxation import relax

    grid = _raw_grid("x...", dtype=np.float64)
    relax(grid, MIN, MAX, BAD, Metric.EUCLIDEAN_8WAY)
    np.testing.assert_allclose(grid, [[0, 1, 2, 3]])


def test_euclidean_requires_float_grid():
    from dijkmap.modules.relaxation import relax

    with pytest.raises(TypeError):
        relax(_raw_grid("x."), MIN, MAX, BAD, Metric.EUCLIDEAN_8WAY)


# ─── Invariants ──────────────────────────────────────────────────────────────

@pytest.mark.parametrize("metric", list(Metric))
def test_sentinels_never_change(metric):
    from dijkmap.modules.relaxation import relax

    dtype = np.float64 if metric.is_euclidean else np.int64
    grid = _raw_grid(MAZE, dtype=dtype)
    walls = grid == BAD
    goals = grid == MIN

    relax(grid, MIN, MAX, BAD, metric)
    assert np.all(grid[walls] == BAD)
    assert np.all(grid[goals] == MIN)


@pytest.mark.parametrize("metric", list(Metric))
def test_magnitudes_never_increase_across_sweeps(metric):
    from dijkmap.modules.relaxation import relax_sweep

    dtype = np.float64 if metric.is_euclidean else np.int64
    grid = _raw_grid(MAZE, dtype=dtype)
    previous = np.abs(grid)
    changed = True
    while changed:
        changed = relax_sweep(grid, MIN, MAX, BAD, metric)
        current = np.abs(grid)
        assert np.all(current <= previous)
        previous = current


@pytest.mark.parametrize("metric", list(Metric))
def test_relaxing_converged_grid_is_noop(metric):
    from dijkmap.modules.relaxation import relax

    dtype = np.float64 if metric.is_euclidean else np.int64
    grid = _raw_grid(MAZE, dtype=dtype)
    relax(grid, MIN, MAX, BAD, metric)
    snapshot = grid.copy()

    assert relax(grid, MIN, MAX, BAD, metric) == 1
    np.testing.assert_array_equal(grid, snapshot)


def test_sign_is_preserved():
    from dijkmap.modules.relaxation import relax

    grid = np.array([[MIN, -MAX, -MAX, MAX]], dtype=np.int64)
    iterations = relax(grid, MIN, MAX, BAD, Metric.CARDINAL)
    assert grid.tolist() == [[0, -1, -2, 3]]
    assert iterations == 4


def test_unconnected_iff_max_cost():
    from dijkmap.modules.relaxation import relax

    text = "x.#..\n..#.."
    grid = _raw_grid(text)
    relax(grid, MIN, MAX, BAD, Metric.UNIFORM_8WAY)
    dist = _bfs_distances(text, diagonal=True)

    for r, row in enumerate(_rows(text)):
        for c, ch in enumerate(row):
            if ch == "#":
                continue
            assert (grid[r, c] == MAX) == ((r, c) not in dist)


# ─── Field Helpers ───────────────────────────────────────────────────────────

def test_reset_field_keeps_sentinels_only():
    from dijkmap.models.field import Field
    from dijkmap.modules.relaxation import relax_field, reset_field

    field = Field(grid=_raw_grid("x.#."))
    relax_field(field, Metric.CARDINAL)
    assert field.to_list() == [[0, 1, BAD, MAX]]

    reset_field(field)
    assert field.to_list() == [[0, MAX, BAD, MAX]]
