"""
Heuristic player - the move selector.

Per turn it filters the four moves for immediate safety, assesses nearby
opponents, ranks uncontested food, and then asks its strategies in order:

1. no safe move   -> fixed fallback direction (fail-open, never raises)
2. pursuit        -> chase a smaller nearby opponent's head
3. foraging       -> step towards the nearest uncontested food
4. explore        -> random safe move from the injected random source

Nothing is kept between calls, so one instance may serve a single request
or many; concurrent games never share state through it.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from domain.constants import DIRECTION_ORDER, FALLBACK_MOVE, VALID_MOVES
from domain.game_state import GameState
from services.foraging import rank_reachable_food
from services.safety import compute_safe_moves
from services.threat import AggressionPolicy, ProximityAggression, assess_threat
from .base import Player
from .strategies import (
    ExploreStrategy,
    ForagingStrategy,
    MoveStrategy,
    PursuitStrategy,
    TurnContext,
)

logger = logging.getLogger(__name__)

NO_SAFE_MOVE = "no_safe_move"


@dataclass
class MovePolicy:
    """
    Tunable knobs of the selector.

    Attributes:
        aggression: rule deciding when to pursue an opponent head
        tie_break: direction order used when candidate moves are equally close
        fallback_move: returned when no safe move exists
    """
    aggression: AggressionPolicy = field(default_factory=ProximityAggression)
    tie_break: Sequence[str] = DIRECTION_ORDER
    fallback_move: str = FALLBACK_MOVE

    def __post_init__(self):
        if self.fallback_move not in VALID_MOVES:
            raise ValueError(f"Invalid fallback move '{self.fallback_move}'")
        if set(self.tie_break) != VALID_MOVES or len(self.tie_break) != len(VALID_MOVES):
            raise ValueError(f"tie_break must list each direction once, got {self.tie_break!r}")


@dataclass
class MoveDecision:
    move: str
    reason: str


class HeuristicPlayer(Player):
    """
    Composes safety, threat and foraging signals into a single move.
    """

    def __init__(self, policy: Optional[MovePolicy] = None, rng: Optional[random.Random] = None):
        self.policy = policy or MovePolicy()
        self.rng = rng or random.Random()
        self.strategies: List[MoveStrategy] = [
            PursuitStrategy(self.policy.tie_break),
            ForagingStrategy(self.policy.tie_break),
            ExploreStrategy(self.rng),
        ]

    def decide(self, game_state: GameState) -> MoveDecision:
        you = game_state.you
        board = game_state.board

        safe_moves = compute_safe_moves(you.head, board, board.snakes)
        if not safe_moves:
            logger.info(
                f"Turn {game_state.turn}: no safe move for {you.snake_id}, "
                f"falling back to {self.policy.fallback_move}"
            )
            return MoveDecision(self.policy.fallback_move, NO_SAFE_MOVE)

        context = TurnContext(
            game_state=game_state,
            safe_moves=safe_moves,
            threat=assess_threat(you, board.snakes, self.policy.aggression),
            food=rank_reachable_food(you.head, board.food, board.snakes, you.snake_id),
        )

        for strategy in self.strategies:
            move = strategy.propose(context)
            if move is not None:
                return MoveDecision(move, strategy.name)

        # ExploreStrategy answers whenever safe_moves is non-empty
        raise RuntimeError(
            f"No strategy proposed a move from {len(safe_moves)} safe moves"
        )

    def get_move(self, game_state: GameState) -> str:
        return self.decide(game_state).move
