# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
DijkMap — Relaxation Module
Public API for the convergence engine.
"""

from dijkmap.modules.relaxation.engine import (
    POLICIES,
    RelaxationPolicy,
    relax,
    relax_field,
    relax_sweep,
    reset_field,
)

__all__ = [
    "RelaxationPolicy",
    "POLICIES",
    "relax_sweep",
    "relax",
    "relax_field",
    "reset_field",
]
