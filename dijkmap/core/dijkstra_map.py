# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
DijkMap — Dijkstra Map
The object callers hold: owns the current Field, the sentinel costs, the
cost function, the relaxation metric, the move adjacency, and the random
generator used for tie-breaks. Every operation delegates to the modules.

Lifecycle:
  map()        symbols → costs → relaxed Field (replaces any previous one)
  update()     write cells in place, no relaxation
  recalc()     reset non-sentinel cells to max_cost, relax again
  normalize()  relax the current cells without resetting
  rebuild()    same options, re-mapped from the original grid or text
  clone()      rebuild() with a deep copy of the current Field

Not thread-safe: callers serialize access to one map themselves.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

import numpy as np

from dijkmap.config import Settings, get_settings
from dijkmap.errors import CellValueError, ShapeError, StateError
from dijkmap.models.field import Adjacency, Coord, Field, Metric, Move, coerce_cell
from dijkmap.modules.combination.combiner import best_combined_move, combine_fields
from dijkmap.modules.navigation.moves import next_best, next_moves, path_best
from dijkmap.modules.relaxation.engine import relax_field, reset_field
from dijkmap.modules.textgrid.textgrid import (
    default_cost_fn,
    parse_grid,
    serialize_grid,
)
from dijkmap.utils.logger import get_logger

log = get_logger(__name__)

CostFn = Callable[[Any, Any], Any]


class DijkstraMap:
    """
    A numeric grid of distances to the nearest goal plus the operations
    that build, mutate, walk, and combine it.

    Usage:
        dm = DijkstraMap(text=level)
        dm.next_best(1, 6)
        dm.update((2, 7, dm.bad_cost)).recalc()
    """

    def __init__(
        self,
        grid: Sequence[Sequence[Any]] | None = None,
        text: str | None = None,
        *,
        bad_cost: int | float | None = None,
        min_cost: int | float | None = None,
        max_cost: int | float | None = None,
        metric: Metric | str | None = None,
        move_adjacency: Adjacency | str | None = None,
        cost_fn: CostFn | None = None,
        rng: np.random.Generator | None = None,
        settings: Settings | None = None,
    ) -> None:
        if grid is not None and text is not None:
            raise ShapeError("cannot have both grid and text arguments")

        settings = settings if settings is not None else get_settings()
        self._options: dict[str, Any] = {
            "grid": grid,
            "text": text,
            "bad_cost": bad_cost,
            "min_cost": min_cost,
            "max_cost": max_cost,
            "metric": metric,
            "move_adjacency": move_adjacency,
            "cost_fn": cost_fn,
            "rng": rng,
            "settings": settings,
        }

        self.bad_cost = settings.bad_cost if bad_cost is None else bad_cost
        self.min_cost = settings.min_cost if min_cost is None else min_cost
        self.max_cost = settings.max_cost if max_cost is None else max_cost
        self.metric = Metric(metric or settings.metric)
        if not self.metric.is_euclidean:
            for name in ("bad_cost", "min_cost", "max_cost"):
                if not float(getattr(self, name)).is_integer():
                    raise CellValueError(
                        f"{name} must be an integer for the {self.metric.value} metric"
                    )
        self.move_adjacency = Adjacency(move_adjacency or settings.move_adjacency)
        self.cost_fn: CostFn = cost_fn or default_cost_fn
        self.rng = rng if rng is not None else np.random.default_rng(settings.rng_seed)
        self.line_delimiter = settings.line_delimiter
        self.field_delimiter = settings.field_delimiter

        self.field: Field | None = None
        self.iterations = 0

        if grid is not None:
            self.map(grid)
        elif text is not None:
            self.map(self.str2map(text))

    # ─── Construction ────────────────────────────────────────────────────────

    def str2map(self, text: str, line_delimiter: str | None = None) -> list[list[str]]:
        """Split a text level into a grid suitable for map()."""
        return parse_grid(text, line_delimiter or self.line_delimiter)

    def map(self, grid: Sequence[Sequence[Any]]) -> DijkstraMap:
        """
        Convert grid symbols to costs with cost_fn, relax, and keep the
        result as the current field.

        Raises:
            ShapeError: grid absent, empty, or ragged.
            CellValueError: cost_fn returned a value the grid cannot store.
        """
        field = Field.from_symbols(
            grid,
            self.cost_fn,
            self,
            bad_cost=self.bad_cost,
            min_cost=self.min_cost,
            max_cost=self.max_cost,
            dtype=self.metric.dtype,
        )
        iterations = relax_field(field, self.metric)
        self.field = field
        self.iterations = iterations

        log.info(
            "field_mapped",
            rows=field.n_rows,
            cols=field.n_cols,
            metric=self.metric.value,
            iterations=iterations,
        )
        return self

    def rebuild(self) -> DijkstraMap:
        """
        New map built from the same constructor arguments. A map constructed
        from a grid or text is mapped again from it; later map() calls and
        updates are not carried over.
        """
        return DijkstraMap(**self._options)

    def clone(self) -> DijkstraMap:
        """rebuild() plus an independent copy of the current field."""
        twin = self.rebuild()
        if self.field is not None:
            twin.field = self.field.clone()
            twin.iterations = self.iterations
        return twin

    # ─── Field Access ────────────────────────────────────────────────────────

    def _require_field(self) -> Field:
        if self.field is None:
            raise StateError("field not set; call map() first")
        return self.field

    @property
    def grid(self) -> np.ndarray:
        return self._require_field().grid

    def values(self, *points: Coord) -> list[Any]:
        """Values at the given (row, col) points."""
        return self._require_field().values(*points)

    def unconnected(self) -> list[Coord]:
        """
        Open cells with no route to any goal, i.e. still at max_cost.
        Only meaningful right after map() or recalc().
        """
        return self._require_field().unconnected()

    def each_cell(self, fn: Callable[[np.ndarray, int, int, DijkstraMap], Any]) -> DijkstraMap:
        """Call fn(grid, row, col, self) for every cell; results are ignored."""
        if not callable(fn):
            raise TypeError("need a callable")
        field = self._require_field()
        for r in range(field.n_rows):
            for c in range(field.n_cols):
                fn(field.grid, r, c, self)
        return self

    def to_tsv(self, grid: Sequence[Sequence[Any]] | None = None) -> str:
        """Tab-separated dump of grid, or of the current field."""
        if grid is None:
            grid = self._require_field().grid
        return serialize_grid(grid, self.field_delimiter, self.line_delimiter)

    # ─── Mutation ────────────────────────────────────────────────────────────

    def update(self, *entries: tuple[int, int, Any]) -> DijkstraMap:
        """
        Write (row, col, value) entries without relaxing. Every entry is
        validated before the first write.

        Raises:
            BoundsError: row or col outside the field.
            CellValueError: value is not a finite number, or is out of
                range for the grid dtype.
        """
        field = self._require_field()
        dtype = field.grid.dtype

        writes = []
        for row, col, value in entries:
            field.check_bounds(row, col)
            writes.append((row, col, coerce_cell(value, dtype)))

        for row, col, value in writes:
            field.grid[row, col] = value

        log.debug("cells_updated", count=len(writes))
        return self

    def normalize(self) -> DijkstraMap:
        """Relax the current field as it stands."""
        field = self._require_field()
        self.iterations = relax_field(field, self.metric)
        return self

    def recalc(self) -> DijkstraMap:
        """Reset every non-goal, non-wall cell to max_cost and relax again."""
        field = self._require_field()
        reset_field(field)
        self.iterations = relax_field(field, self.metric)

        log.info(
            "field_recalculated",
            metric=self.metric.value,
            iterations=self.iterations,
            unconnected=len(field.unconnected()),
        )
        return self

    # ─── Movement ────────────────────────────────────────────────────────────

    def next_moves(
        self,
        row: int,
        col: int,
        value: Any = None,
        adjacency: Adjacency | str | None = None,
    ) -> list[Move]:
        """Neighbors strictly lower than value (default: the cell's own)."""
        return next_moves(
            self._require_field(), row, col, self._adjacency(adjacency), value
        )

    def next_best(
        self,
        row: int,
        col: int,
        adjacency: Adjacency | str | None = None,
    ) -> Coord | None:
        return next_best(
            self._require_field(), row, col, self.rng, self._adjacency(adjacency)
        )

    def path_best(
        self,
        row: int,
        col: int,
        adjacency: Adjacency | str | None = None,
    ) -> list[Coord]:
        return path_best(
            self._require_field(), row, col, self.rng, self._adjacency(adjacency)
        )

    def _adjacency(self, adjacency: Adjacency | str | None) -> Adjacency:
        return Adjacency(adjacency) if adjacency is not None else self.move_adjacency

    # ─── Combination ─────────────────────────────────────────────────────────

    def field_with(
        self,
        others: Sequence[DijkstraMap | Field],
        weights: Sequence[float],
        own_weight: float = 1,
    ) -> Field:
        """New Field combining this map with others; see combine_fields."""
        return combine_fields(
            self._require_field(), _fields_of(others), weights, own_weight
        )

    def next_with(
        self,
        row: int,
        col: int,
        others: Sequence[DijkstraMap | Field],
        weights: Sequence[float],
        own_weight: float = 1,
    ) -> Coord | None:
        """Best next step under the weighted combination of maps."""
        return best_combined_move(
            self._require_field(),
            row,
            col,
            _fields_of(others),
            weights,
            self.rng,
            own_weight=own_weight,
            adjacency=self.move_adjacency,
        )


def _fields_of(others: Sequence[DijkstraMap | Field]) -> list[Field]:
    fields = []
    for other in others:
        if isinstance(other, DijkstraMap):
            other = other._require_field()
        fields.append(other)
    return fields
