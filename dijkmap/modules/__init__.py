# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
DijkMap — Modules
Adjacency, relaxation, navigation, combination, and text grid stages.
Import from the individual subpackages.
"""
