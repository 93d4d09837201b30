# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
DijkMap — Navigation Module
Public API for move queries and path extraction.
"""

from dijkmap.modules.navigation.moves import (
    next_best,
    next_moves,
    path_best,
    pick_best,
)

__all__ = [
    "next_moves",
    "pick_best",
    "next_best",
    "path_best",
]
