# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
DijkMap — Text Grids
Stateless helpers around the map: text level → symbol grid, symbol →
cost, and grid → delimited text for diagnostics.

Default symbols:
  #   wall  → bad_cost
  x   goal  → min_cost
  *   floor → max_cost (anything else)
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from dijkmap.errors import ShapeError


def parse_grid(text: str | None, line_delimiter: str = "\n") -> list[list[str]]:
    """
    Split a text level into rows of single characters.
    Trailing empty lines are dropped so a closing newline adds no row;
    rectangularity is checked later, when the grid is mapped.
    """
    if text is None:
        raise ShapeError("no string given")
    lines = text.split(line_delimiter)
    while lines and lines[-1] == "":
        lines.pop()
    return [list(line) for line in lines]


def default_cost_fn(context: Any, symbol: Any) -> int:
    """Map # to bad_cost, x to min_cost, and everything else to max_cost."""
    if symbol == "#":
        return context.bad_cost
    if symbol == "x":
        return context.min_cost
    return context.max_cost


def _format_value(value: Any) -> str:
    if hasattr(value, "item"):
        value = value.item()
    return str(value)


def serialize_grid(
    grid: Sequence[Sequence[Any]],
    field_delimiter: str = "\t",
    line_delimiter: str = "\n",
) -> str:
    """Join cells with field_delimiter; every row ends with line_delimiter."""
    return "".join(
        field_delimiter.join(_format_value(v) for v in row) + line_delimiter
        for row in grid
    )
