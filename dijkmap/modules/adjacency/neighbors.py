# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
DijkMap — Neighbor Strategies
Pure functions giving the in-bounds neighbors of a cell under one of
three connectivity models.

  CARDINAL  N, S, E, W                    edge weight 1
  DIAGONAL  NW, NE, SW, SE                edge weight 1 or sqrt(2)
  ALL       union of the two

Neighbors outside the grid are omitted (no wraparound). The order of
returned neighbors is an implementation detail; shuffle before using it
to break ties.
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np

from dijkmap.models.field import Adjacency, Coord

SQRT2 = math.sqrt(2)

# (row_delta, col_delta)
CARDINAL_OFFSETS: tuple[Coord, ...] = ((0, -1), (0, 1), (-1, 0), (1, 0))
DIAGONAL_OFFSETS: tuple[Coord, ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))

_OFFSETS: dict[Adjacency, tuple[Coord, ...]] = {
    Adjacency.CARDINAL: CARDINAL_OFFSETS,
    Adjacency.DIAGONAL: DIAGONAL_OFFSETS,
    Adjacency.ALL: CARDINAL_OFFSETS + DIAGONAL_OFFSETS,
}


def neighbor_offsets(adjacency: Adjacency) -> tuple[Coord, ...]:
    return _OFFSETS[Adjacency(adjacency)]


def weighted_offsets(
    adjacency: Adjacency,
    euclidean: bool = False,
) -> list[tuple[int, int, float]]:
    """
    Return (row_delta, col_delta, edge_weight) triples.
    Diagonal steps weigh sqrt(2) when euclidean, otherwise everything
    weighs 1. Cardinal offsets always come first.
    """
    diagonal_weight = SQRT2 if euclidean else 1
    return [
        (dr, dc, diagonal_weight if dr and dc else 1)
        for dr, dc in neighbor_offsets(adjacency)
    ]


def adjacent_cells(
    row: int,
    col: int,
    max_row: int,
    max_col: int,
    adjacency: Adjacency = Adjacency.ALL,
) -> list[Coord]:
    """Return in-bounds neighbor coordinates of (row, col)."""
    cells = []
    for dr, dc in neighbor_offsets(adjacency):
        r, c = row + dr, col + dc
        if 0 <= r <= max_row and 0 <= c <= max_col:
            cells.append((r, c))
    return cells


def adjacent_values(
    grid: np.ndarray,
    row: int,
    col: int,
    max_row: int,
    max_col: int,
    adjacency: Adjacency = Adjacency.ALL,
) -> list[Any]:
    """Return the values of the in-bounds neighbors of (row, col)."""
    return [
        grid[r, c].item()
        for r, c in adjacent_cells(row, col, max_row, max_col, adjacency)
    ]
