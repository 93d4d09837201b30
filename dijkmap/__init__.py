# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
DijkMap — Dijkstra-map influence fields for grid pathfinding and steering.
"""

from dijkmap.core.dijkstra_map import DijkstraMap
from dijkmap.errors import BoundsError, CellValueError, ShapeError, StateError
from dijkmap.models.field import Adjacency, Field, Metric

__version__ = "1.0.0"

__all__ = [
    "DijkstraMap",
    "Field",
    "Metric",
    "Adjacency",
    "ShapeError",
    "StateError",
    "BoundsError",
    "CellValueError",
]
