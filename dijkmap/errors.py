# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
DijkMap — Error Types
Every failure is a caller contract violation and is raised before the
field is touched. Each error subclasses the closest builtin so callers
can catch either the specific or the generic kind.
"""


class ShapeError(ValueError):
    """Raised when a grid is absent, empty, ragged, or shaped unlike its peers."""


class StateError(RuntimeError):
    """Raised when an operation needs a field but none has been mapped yet."""


class BoundsError(IndexError):
    """Raised when a row or column lies outside the field."""


class CellValueError(ValueError):
    """Raised when an update supplies a non-numeric cell value."""
