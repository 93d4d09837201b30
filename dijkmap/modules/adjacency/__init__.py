# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
DijkMap — Adjacency Module
Public API for the neighbor strategies.
"""

from dijkmap.modules.adjacency.neighbors import (
    CARDINAL_OFFSETS,
    DIAGONAL_OFFSETS,
    SQRT2,
    adjacent_cells,
    adjacent_values,
    neighbor_offsets,
    weighted_offsets,
)

__all__ = [
    "SQRT2",
    "CARDINAL_OFFSETS",
    "DIAGONAL_OFFSETS",
    "neighbor_offsets",
    "weighted_offsets",
    "adjacent_cells",
    "adjacent_values",
]
