"""Lights Out puzzle package."""

from .config import GameConfig, resolve_config
from .game import (
    InvalidCoordinate,
    LightsOutGame,
    has_won,
    initialize,
    lit_cells,
    lit_count,
    toggle_around,
)

__all__ = [
    "GameConfig",
    "InvalidCoordinate",
    "LightsOutGame",
    "has_won",
    "initialize",
    "lit_cells",
    "lit_count",
    "resolve_config",
    "toggle_around",
]
