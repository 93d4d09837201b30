# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
DijkMap — Relaxation Engine
Reduces a raw cost grid (goals, walls, and unreached floor) to a
distance-like potential by repeated whole-grid sweeps.

Algorithm:
  1. Sweep every cell; stop after the first sweep that changes nothing
  2. Walls (bad_cost) and goals (min_cost) are never touched
  3. For every other cell, compare its magnitude with the smallest
     magnitude among its non-wall neighbors ("best")
  4. Step-count metrics (4way, 8way):
       if |value| >= best + 2   →   value = best + 1
     Euclidean 8way (each neighbor carries its edge weight):
       if |value| >  best + √2  →   value = best + edge weight of best
  5. The sign of the cell is restored after the update

Each sweep reads the grid as it stood before the sweep (Jacobi style) and
writes all updates at once. Magnitudes only ever shrink and are bounded
below by min_cost, so the loop terminates. Cells that no goal can reach
keep max_cost.

Sign convention:
  Only the magnitude of a cell is relaxed. A negative cell stays negative,
  which lets one field carry attracting (positive) and repelling
  (negative) regions through later weighted combination.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from dijkmap.models.field import Adjacency, Field, Metric
from dijkmap.modules.adjacency.neighbors import SQRT2, weighted_offsets
from dijkmap.utils.logger import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class RelaxationPolicy:
    """Adjacency, edge weighting, and update threshold of one metric."""
    adjacency: Adjacency
    euclidean: bool

    def needs_update(self, magnitude: np.ndarray, best: np.ndarray) -> np.ndarray:
        if self.euclidean:
            return magnitude > best + SQRT2
        # Written as a difference so large max_cost values cannot overflow
        return magnitude - best >= 2


POLICIES: dict[Metric, RelaxationPolicy] = {
    Metric.CARDINAL: RelaxationPolicy(Adjacency.CARDINAL, euclidean=False),
    Metric.UNIFORM_8WAY: RelaxationPolicy(Adjacency.ALL, euclidean=False),
    Metric.EUCLIDEAN_8WAY: RelaxationPolicy(Adjacency.ALL, euclidean=True),
}


def _shifted(values: np.ndarray, dr: int, dc: int, fill) -> np.ndarray:
    """
    Return an array whose cell (r, c) holds values[r + dr, c + dc],
    or fill where that neighbor lies outside the grid.
    """
    n_rows, n_cols = values.shape
    out = np.full_like(values, fill)
    dst_r0, dst_r1 = max(0, -dr), n_rows - max(0, dr)
    dst_c0, dst_c1 = max(0, -dc), n_cols - max(0, dc)
    if dst_r1 <= dst_r0 or dst_c1 <= dst_c0:
        return out
    out[dst_r0:dst_r1, dst_c0:dst_c1] = values[
        dst_r0 + dr:dst_r1 + dr, dst_c0 + dc:dst_c1 + dc
    ]
    return out


def relax_sweep(
    grid: np.ndarray,
    min_cost,
    max_cost,
    bad_cost,
    metric: Metric = Metric.CARDINAL,
) -> bool:
    """
    Run one sweep over grid in place.

    Returns:
        True if any cell changed, False for a stable sweep.
    """
    policy = POLICIES[Metric(metric)]

    walls = grid == bad_cost
    frozen = walls | (grid == min_cost)
    magnitude = np.abs(grid)
    # Walls are skipped as neighbors; max_cost can never win the minimum
    neighbor_magnitude = np.where(walls, max_cost, magnitude).astype(grid.dtype)

    best = np.full_like(grid, max_cost)
    best_weight = np.zeros_like(grid)
    for dr, dc, weight in weighted_offsets(policy.adjacency, policy.euclidean):
        candidate = _shifted(neighbor_magnitude, dr, dc, max_cost)
        # Strict comparison keeps the earlier (cardinal) edge on ties
        better = candidate < best
        best = np.where(better, candidate, best)
        best_weight = np.where(better, weight, best_weight)

    update = ~frozen & policy.needs_update(magnitude, best)
    if not update.any():
        return False

    relaxed = best + best_weight
    grid[update] = np.where(grid < 0, -relaxed, relaxed)[update]
    return True


def relax(
    grid: np.ndarray,
    min_cost,
    max_cost,
    bad_cost,
    metric: Metric = Metric.CARDINAL,
) -> int:
    """
    Sweep grid in place until stable.

    Args:
        grid:     Cost matrix; float64 is required for the Euclidean metric
        min_cost: Goal sentinel
        max_cost: Unreached sentinel
        bad_cost: Wall sentinel
        metric:   4way, 8way, or 8way_euclid

    Returns:
        Number of sweeps performed, including the final stable one.
    """
    metric = Metric(metric)
    if metric.is_euclidean and not np.issubdtype(grid.dtype, np.floating):
        raise TypeError("the Euclidean metric needs a floating point grid")

    iterations = 0
    while True:
        iterations += 1
        if not relax_sweep(grid, min_cost, max_cost, bad_cost, metric):
            break

    log.debug(
        "relaxation_complete",
        metric=metric.value,
        iterations=iterations,
        shape=grid.shape,
    )
    return iterations


def relax_field(field: Field, metric: Metric = Metric.CARDINAL) -> int:
    """Relax a Field in place using its own sentinels."""
    return relax(field.grid, field.min_cost, field.max_cost, field.bad_cost, metric)


def reset_field(field: Field) -> None:
    """Return every non-sentinel cell of field to max_cost, in place."""
    grid = field.grid
    keep = (grid == field.bad_cost) | (grid == field.min_cost)
    grid[~keep] = field.max_cost
