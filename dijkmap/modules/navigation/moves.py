# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
DijkMap — Move Selection
Downhill move queries over a relaxed field, the randomized best-move
tie-break, and greedy path extraction.

Tie-break:
  Candidates are shuffled with the caller's random generator and then
  stably sorted by value, so equal-cost moves are chosen uniformly
  instead of by neighbor iteration order. Seed the generator for
  reproducible paths.

Path extraction stops at a goal or on a plateau with no strictly lower
neighbor. A 4way-relaxed field can leave regions joined only by a
diagonal unconnected; the path then stalls and is returned as-is.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np

from dijkmap.models.field import Adjacency, Coord, Field, Move
from dijkmap.modules.adjacency.neighbors import adjacent_cells
from dijkmap.utils.logger import get_logger

log = get_logger(__name__)


def next_moves(
    field: Field,
    row: int,
    col: int,
    adjacency: Adjacency = Adjacency.ALL,
    value: Any = None,
) -> list[Move]:
    """
    Return the neighbors of (row, col) that are strictly lower than value.

    Args:
        field:     Relaxed field
        row, col:  Cell to move from
        adjacency: Neighbor model
        value:     Value to compare against; defaults to the cell's own

    Returns:
        ((row, col), value) pairs in no particular order; empty when the
        cell is already at or below min_cost.

    Raises:
        BoundsError: (row, col) outside the field.
    """
    field.check_bounds(row, col)
    if value is None:
        value = field.grid[row, col].item()
    if value <= field.min_cost:
        return []

    grid = field.grid
    moves: list[Move] = []
    for r, c in adjacent_cells(row, col, field.max_row, field.max_col, adjacency):
        v = grid[r, c].item()
        if v < value and v != field.bad_cost:
            moves.append(((r, c), v))
    return moves


def pick_best(moves: Sequence[Move], rng: np.random.Generator) -> Coord | None:
    """Shuffle, stable-sort by value, and return the lowest coordinate."""
    if not moves:
        return None
    shuffled = [moves[i] for i in rng.permutation(len(moves))]
    shuffled.sort(key=lambda move: move[1])
    return shuffled[0][0]


def next_best(
    field: Field,
    row: int,
    col: int,
    rng: np.random.Generator,
    adjacency: Adjacency = Adjacency.ALL,
) -> Coord | None:
    """Return a lowest-valued downhill neighbor, or None if there is none."""
    return pick_best(next_moves(field, row, col, adjacency), rng)


def path_best(
    field: Field,
    row: int,
    col: int,
    rng: np.random.Generator,
    adjacency: Adjacency = Adjacency.ALL,
) -> list[Coord]:
    """
    Follow next_best from (row, col) until no downhill move remains.

    Returns:
        Visited coordinates in order, excluding the start cell.
    """
    path: list[Coord] = []
    step = next_best(field, row, col, rng, adjacency)
    while step is not None:
        path.append(step)
        row, col = step
        step = next_best(field, row, col, rng, adjacency)

    if field.grid[row, col] != field.min_cost:
        log.debug(
            "path_stalled",
            end=(row, col),
            end_value=field.grid[row, col].item(),
            length=len(path),
        )
    return path
