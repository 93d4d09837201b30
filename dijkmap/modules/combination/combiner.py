# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
DijkMap — Field Combiner
Weighted merge of a primary field with any number of other fields, either
over the whole grid or only around one cell to pick a single move.

Combined cost of a cell:
  combined = own_value × own_weight + Σ other_value[i] × weights[i]

Rules:
  - Veto: if the primary field or ANY other field holds bad_cost at a cell,
    the combined cell is bad_cost regardless of weights
  - A field without a matching weight still vetoes but adds nothing
  - Sentinels are compared against the primary field's bad_cost
  - Negative weights (or negative cell values) turn attraction into
    repulsion; combined values may change sign

This can create local minimums a greedy walker cannot leave.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from dijkmap.errors import ShapeError
from dijkmap.models.field import Adjacency, Coord, Field, Move
from dijkmap.modules.navigation.moves import next_moves, pick_best
from dijkmap.utils.logger import get_logger

log = get_logger(__name__)


def _check_shapes(field: Field, others: Sequence[Field]) -> None:
    for i, other in enumerate(others):
        if other.shape != field.shape:
            raise ShapeError(
                f"field {i} has shape {other.shape}, expected {field.shape}"
            )


def _weighted(others: Sequence[Field], weights: Sequence[float]) -> list[tuple[Field, float]]:
    """Pair each other field with its weight; unweighted fields are dropped."""
    return list(zip(others, weights))


def combine_fields(
    field: Field,
    others: Sequence[Field],
    weights: Sequence[float],
    own_weight: float = 1,
) -> Field:
    """
    Build a new Field from the weighted sum of field and others.
    No input is mutated.

    Raises:
        ShapeError: an other field's shape differs from field's.
    """
    _check_shapes(field, others)
    bad_cost = field.bad_cost

    veto = field.grid == bad_cost
    for other in others:
        veto |= other.grid == bad_cost

    combined = field.grid * own_weight
    for other, weight in _weighted(others, weights):
        combined = combined + other.grid * weight
    combined = np.where(veto, bad_cost, combined).astype(combined.dtype)

    log.debug(
        "fields_combined",
        n_fields=len(others) + 1,
        n_weighted=min(len(others), len(weights)),
        vetoed=int(veto.sum()),
    )
    return Field(
        grid=combined,
        bad_cost=bad_cost,
        min_cost=field.min_cost,
        max_cost=field.max_cost,
    )


def best_combined_move(
    field: Field,
    row: int,
    col: int,
    others: Sequence[Field],
    weights: Sequence[float],
    rng: np.random.Generator,
    own_weight: float = 1,
    adjacency: Adjacency = Adjacency.ALL,
) -> Coord | None:
    """
    Pick the neighbor of (row, col) with the lowest combined cost.

    Only the current cell and the neighbors offered by next_moves (any
    non-wall neighbor below max_cost) are combined. The current cell must
    not be a goal or vetoed.

    Returns:
        Coordinate of a best move, or None when no veto-free neighbor has
        a combined cost strictly below the current cell's.
    """
    _check_shapes(field, others)
    field.check_bounds(row, col)
    bad_cost = field.bad_cost
    weighted = _weighted(others, weights)

    current = field.grid[row, col].item()
    if current <= field.min_cost:
        return None
    if any(other.grid[row, col] == bad_cost for other in others):
        return None
    current = current * own_weight + sum(
        other.grid[row, col].item() * weight for other, weight in weighted
    )

    candidates = next_moves(field, row, col, adjacency, value=field.max_cost)
    better: list[Move] = []
    for (r, c), value in candidates:
        if any(other.grid[r, c] == bad_cost for other in others):
            continue
        cost = value * own_weight + sum(
            other.grid[r, c].item() * weight for other, weight in weighted
        )
        if cost < current:
            better.append(((r, c), cost))

    return pick_best(better, rng)
