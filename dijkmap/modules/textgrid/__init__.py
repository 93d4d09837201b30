# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
DijkMap — Text Grid Module
Public API for text level parsing, default costs, and serialisation.
"""

from dijkmap.modules.textgrid.textgrid import (
    default_cost_fn,
    parse_grid,
    serialize_grid,
)

__all__ = [
    "parse_grid",
    "default_cost_fn",
    "serialize_grid",
]
