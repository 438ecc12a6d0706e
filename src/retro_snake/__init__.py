# src/retro_snake/__init__.py
"""Single-player Snake on a square grid, drawn with pygame."""

from .game import GameState, advance, new_game_state, request_direction, spawn_food
from .session import GameSession

__all__ = ["GameState", "GameSession", "advance", "new_game_state", "request_direction", "spawn_food"]
