# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
DijkMap — Field Data Models
The potential field (a rectangular numpy matrix plus its three sentinel
costs) and the small enums that select how the field is relaxed and
walked.

Sentinels:
  bad_cost  impassable cell, never changed by relaxation
  min_cost  goal cell, never changed by relaxation
  max_cost  unreached floor; a cell still holding it after relaxation
            has no route to any goal
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Callable, Sequence
from enum import Enum
from typing import Any

import numpy as np
import pydantic
from pydantic import BaseModel, ConfigDict

from dijkmap.errors import BoundsError, CellValueError, ShapeError

Coord = tuple[int, int]
# ((row, col), value) as returned by move queries
Move = tuple[Coord, Any]


class Metric(str, Enum):
    CARDINAL = "4way"
    UNIFORM_8WAY = "8way"
    EUCLIDEAN_8WAY = "8way_euclid"

    @property
    def is_euclidean(self) -> bool:
        return self is Metric.EUCLIDEAN_8WAY

    @property
    def dtype(self) -> type:
        """Cell dtype: integers for step-count metrics, reals for Euclidean."""
        return np.float64 if self.is_euclidean else np.int64


class Adjacency(str, Enum):
    CARDINAL = "cardinal"
    DIAGONAL = "diagonal"
    ALL = "all"


class Field(BaseModel):
    """
    A potential field over a rectangular grid.
    The grid is owned by this model; clone() it before handing
    it to anything that may mutate it.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    # numpy (R × C), int64 or float64
    grid: Any = pydantic.Field(..., description="np.ndarray cost matrix")
    # Fractional sentinels are only storable in float64 (Euclidean) grids
    bad_cost: int | float = pydantic.Field(-2147483648, description="Impassable sentinel")
    min_cost: int | float = pydantic.Field(0, description="Goal sentinel")
    max_cost: int | float = pydantic.Field(2147483647, description="Unreached sentinel")

    @classmethod
    def from_symbols(
        cls,
        symbols: Sequence[Sequence[Any]] | None,
        cost_fn: Callable[[Any, Any], Any],
        context: Any,
        *,
        bad_cost: int | float,
        min_cost: int | float,
        max_cost: int | float,
        dtype: type = np.int64,
    ) -> Field:
        """
        Build a raw (unrelaxed) field by applying cost_fn(context, symbol)
        to every symbol of a rectangular grid.

        Raises:
            ShapeError: grid absent, empty, or rows of unequal length.
            CellValueError: cost_fn returned something that is not a
                finite number storable in dtype.
        """
        if symbols is None or isinstance(symbols, str) or len(symbols) == 0:
            raise ShapeError("no valid grid supplied")
        n_cols = _row_length(symbols[0])
        if not n_cols:
            raise ShapeError("no valid grid supplied")

        for r, row in enumerate(symbols):
            if _row_length(row) != n_cols:
                raise ShapeError(f"unexpected column count at row {r}")

        grid = np.empty((len(symbols), n_cols), dtype=dtype)
        for r, row in enumerate(symbols):
            for c, symbol in enumerate(row):
                try:
                    grid[r, c] = coerce_cell(cost_fn(context, symbol), dtype)
                except CellValueError as exc:
                    raise CellValueError(
                        f"cost of {symbol!r} at row {r} col {c}: {exc}"
                    ) from exc

        return cls(grid=grid, bad_cost=bad_cost, min_cost=min_cost, max_cost=max_cost)

    # ─── Shape ───────────────────────────────────────────────────────────────

    @property
    def shape(self) -> tuple[int, int]:
        return self.grid.shape

    @property
    def n_rows(self) -> int:
        return self.grid.shape[0]

    @property
    def n_cols(self) -> int:
        return self.grid.shape[1]

    @property
    def max_row(self) -> int:
        return self.grid.shape[0] - 1

    @property
    def max_col(self) -> int:
        return self.grid.shape[1] - 1

    def check_bounds(self, row: int, col: int) -> None:
        if row < 0 or row > self.max_row:
            raise BoundsError(f"row {row} out of bounds")
        if col < 0 or col > self.max_col:
            raise BoundsError(f"col {col} out of bounds")

    # ─── Access ──────────────────────────────────────────────────────────────

    def value(self, row: int, col: int) -> Any:
        """Return the cell value as a plain Python number."""
        self.check_bounds(row, col)
        return self.grid[row, col].item()

    def values(self, *points: Coord) -> list[Any]:
        return [self.value(r, c) for r, c in points]

    def unconnected(self) -> list[Coord]:
        """Cells that relaxation could not connect to any goal."""
        rows, cols = np.nonzero(self.grid == self.max_cost)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def clone(self) -> Field:
        """Deep copy with an independently owned grid."""
        return Field(
            grid=self.grid.copy(),
            bad_cost=self.bad_cost,
            min_cost=self.min_cost,
            max_cost=self.max_cost,
        )

    def to_list(self) -> list[list[Any]]:
        return self.grid.tolist()


def _row_length(row: Any) -> int | None:
    """Column count of a row, or None when the row is not a sequence."""
    if row is None:
        return None
    try:
        return len(row)
    except TypeError:
        return None


def coerce_cell(value: Any, dtype: Any) -> Any:
    """
    Convert value to the Python number a grid of dtype would store.
    Integer grids truncate toward zero.

    Raises:
        CellValueError: value is not a finite real number, or does not
            fit in dtype.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise CellValueError(f"value must be a number, got {value!r}")
    # Python ints are unbounded; only the dtype range check applies to them
    if not isinstance(value, numbers.Integral) and not math.isfinite(value):
        raise CellValueError(f"value must be finite, got {value!r}")

    if not np.issubdtype(dtype, np.integer):
        try:
            return float(value)
        except OverflowError:
            raise CellValueError(
                f"value {value} does not fit in {np.dtype(dtype).name}"
            ) from None

    value = int(value)
    info = np.iinfo(dtype)
    if not info.min <= value <= info.max:
        raise CellValueError(f"value {value} does not fit in {np.dtype(dtype).name}")
    return value
