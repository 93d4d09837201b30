# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
DijkMap — Combination Module
Public API for weighted multi-field merging.
"""

from dijkmap.modules.combination.combiner import (
    best_combined_move,
    combine_fields,
)

__all__ = [
    "combine_fields",
    "best_combined_move",
]
