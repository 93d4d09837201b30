# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
DijkMap — Library Configuration
All settings are loaded from environment variables with roguelike-friendly
defaults. Override via .env, environment, or DijkstraMap keyword arguments.
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ─── Sentinel Costs ──────────────────────────────────────────────────────
    # INT_MIN / INT_MAX so real distances never collide with the sentinels
    # Fractional values are accepted only with the 8way_euclid metric
    bad_cost: int | float = -2147483648
    min_cost: int | float = 0
    max_cost: int | float = 2147483647

    # ─── Relaxation ──────────────────────────────────────────────────────────
    # 4way as in Brogue; 8way treats diagonals as one step; 8way_euclid
    # charges sqrt(2) per diagonal step
    metric: Literal["4way", "8way", "8way_euclid"] = "4way"

    # ─── Movement ────────────────────────────────────────────────────────────
    # Neighbor model used by next_moves / next_best / path_best / next_with
    move_adjacency: Literal["all", "cardinal", "diagonal"] = "all"

    # ─── Text Grids ──────────────────────────────────────────────────────────
    line_delimiter: str = "\n"
    field_delimiter: str = "\t"

    # ─── Tie-break Random Source ─────────────────────────────────────────────
    # None draws fresh OS entropy for every new map
    rng_seed: int | None = None

    # ─── Logging ─────────────────────────────────────────────────────────────
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached singleton Settings instance."""
    return Settings()
