"""
Move strategies evaluated in priority order by HeuristicPlayer.

Each strategy looks at the same TurnContext and either proposes a direction
or abstains by returning None.
"""

import random
from dataclasses import dataclass
from typing import List, Optional, Sequence

from domain.constants import DIRECTION_ORDER
from domain.game_state import GameState
from domain.geometry import manhattan_distance
from domain.snake import Position
from services.safety import SafeMove
from services.threat import ThreatAssessment


@dataclass
class TurnContext:
    game_state: GameState
    safe_moves: List[SafeMove]
    threat: ThreatAssessment
    food: List[Position]


def closest_move(
    safe_moves: Sequence[SafeMove],
    target: Position,
    tie_break: Sequence[str] = DIRECTION_ORDER,
) -> Optional[str]:
    """
    Pick the safe move whose resulting cell is nearest to ``target``.
    Equal distances go to whichever direction comes first in ``tie_break``.
    """
    if not safe_moves:
        return None
    rank = {direction: i for i, direction in enumerate(tie_break)}
    best = min(
        safe_moves,
        key=lambda move: (manhattan_distance(move[1], target), rank.get(move[0], len(rank))),
    )
    return best[0]


class MoveStrategy:
    name = "base"

    def propose(self, context: TurnContext) -> Optional[str]:
        raise NotImplementedError


class PursuitStrategy(MoveStrategy):
    """Close in on the opponent head picked by the aggression policy."""

    name = "pursuit"

    def __init__(self, tie_break: Sequence[str] = DIRECTION_ORDER):
        self.tie_break = tuple(tie_break)

    def propose(self, context: TurnContext) -> Optional[str]:
        target = context.threat.target
        if target is None:
            return None
        return closest_move(context.safe_moves, target.head, self.tie_break)


class ForagingStrategy(MoveStrategy):
    """Head for the nearest uncontested food."""

    name = "foraging"

    def __init__(self, tie_break: Sequence[str] = DIRECTION_ORDER):
        self.tie_break = tuple(tie_break)

    def propose(self, context: TurnContext) -> Optional[str]:
        if not context.food:
            return None
        return closest_move(context.safe_moves, context.food[0], self.tie_break)


class ExploreStrategy(MoveStrategy):
    """Uniform random safe move. Only non-deterministic branch."""

    name = "explore"

    def __init__(self, rng: random.Random):
        self.rng = rng

    def propose(self, context: TurnContext) -> Optional[str]:
        if not context.safe_moves:
            return None
        direction, _ = self.rng.choice(context.safe_moves)
        return direction
