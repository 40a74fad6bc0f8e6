"""
Player implementations for the Battlesnake move server.

This module contains the player abstraction and the heuristic move selector
together with its strategies and policy variants.
"""

from .base import Player
from .heuristic_player import HeuristicPlayer, MoveDecision, MovePolicy
from .strategies import (
    TurnContext,
    MoveStrategy,
    PursuitStrategy,
    ForagingStrategy,
    ExploreStrategy,
    closest_move,
)
from .variant_registry import get_policy, list_variants, AVAILABLE_VARIANTS

__all__ = [
    'Player',
    'HeuristicPlayer',
    'MoveDecision',
    'MovePolicy',
    'TurnContext',
    'MoveStrategy',
    'PursuitStrategy',
    'ForagingStrategy',
    'ExploreStrategy',
    'closest_move',
    'get_policy',
    'list_variants',
    'AVAILABLE_VARIANTS',
]
