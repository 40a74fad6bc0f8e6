"""
Domain entities for the Battlesnake decision engine.

This module contains the per-turn game entities that are independent of
transport concerns (HTTP, configuration, etc.).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, DIRECTION_ORDER, FALLBACK_MOVE,
)
from .snake import Position, Snake
from .game_state import Board, GameState, InvalidGameStateError
from .geometry import manhattan_distance, next_position, in_bounds

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'DIRECTION_ORDER', 'FALLBACK_MOVE',
    'Position', 'Snake',
    'Board', 'GameState', 'InvalidGameStateError',
    'manhattan_distance', 'next_position', 'in_bounds',
]
