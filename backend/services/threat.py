"""
Threat assessor: ranks opponents by how close their heads are to ours and
decides whether we should go after one of them.

The activation rule is a replaceable AggressionPolicy so the same engine can
run the proximity variant, the "biggest snake on the board" variant, or no
aggression at all.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from domain.constants import DEFAULT_PURSUIT_DISTANCE
from domain.geometry import manhattan_distance
from domain.snake import Position, Snake

RankedOpponent = Tuple[Snake, int]


def rank_opponents(head: Position, snakes: Iterable[Snake], own_id: str) -> List[RankedOpponent]:
    """Opponents with their head distance, nearest first (stable on ties)."""
    ranked = [
        (snake, manhattan_distance(head, snake.head))
        for snake in snakes
        if snake.snake_id != own_id
    ]
    ranked.sort(key=lambda item: item[1])
    return ranked


class AggressionPolicy:
    """
    Decides which opponent head, if any, to pursue this turn.
    """

    name = "base"

    def select_target(self, you: Snake, ranked: List[RankedOpponent]) -> Optional[Snake]:
        raise NotImplementedError


class ProximityAggression(AggressionPolicy):
    """
    Pursue the nearest opponent when it is within ``max_distance`` and
    strictly shorter than us.
    """

    name = "proximity"

    def __init__(self, max_distance: int = DEFAULT_PURSUIT_DISTANCE):
        if max_distance < 0:
            raise ValueError(f"max_distance must be non-negative, got {max_distance}")
        self.max_distance = max_distance

    def select_target(self, you: Snake, ranked: List[RankedOpponent]) -> Optional[Snake]:
        if not ranked:
            return None
        nearest, distance = ranked[0]
        if distance <= self.max_distance and nearest.length < you.length:
            return nearest
        return None


class LargestSnakeAggression(AggressionPolicy):
    """
    Pursue the nearest opponent, however far away, while we are strictly the
    longest snake on the board.
    """

    name = "largest"

    def select_target(self, you: Snake, ranked: List[RankedOpponent]) -> Optional[Snake]:
        if not ranked:
            return None
        if all(you.length > snake.length for snake, _ in ranked):
            return ranked[0][0]
        return None


class NoAggression(AggressionPolicy):
    name = "none"

    def select_target(self, you: Snake, ranked: List[RankedOpponent]) -> Optional[Snake]:
        return None


@dataclass
class ThreatAssessment:
    ranked: List[RankedOpponent]
    target: Optional[Snake] = None

    @property
    def pursuit_active(self) -> bool:
        return self.target is not None


def assess_threat(you: Snake, snakes: Iterable[Snake], policy: AggressionPolicy) -> ThreatAssessment:
    ranked = rank_opponents(you.head, snakes, you.snake_id)
    return ThreatAssessment(ranked=ranked, target=policy.select_target(you, ranked))
