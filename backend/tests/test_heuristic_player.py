"""
Tests for the heuristic move selector, its strategies and policy variants.
"""

import pytest
import random
import sys
import os
from unittest.mock import Mock

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import Board, GameState, Position, Snake, UP, DOWN, LEFT, RIGHT, VALID_MOVES
from players import (
    HeuristicPlayer,
    MovePolicy,
    closest_move,
    get_policy,
    list_variants,
    AVAILABLE_VARIANTS,
)
from services.safety import compute_safe_moves
from services.threat import LargestSnakeAggression, NoAggression, ProximityAggression


def make_state(you_body, opponents=None, food=(), width=11, height=11, turn=0):
    you = Snake("you", you_body)
    others = tuple(Snake(snake_id, body) for snake_id, body in (opponents or {}).items())
    board = Board(
        width=width,
        height=height,
        snakes=(you,) + others,
        food=tuple(Position(*f) for f in food),
    )
    return GameState(board=board, you=you, turn=turn)


class TestMoveSelectorScenarios:
    """End-to-end decisions on small hand-built boards."""

    def test_moves_towards_only_food(self):
        """11x11, no opponents, head (5,5), food (5,6) -> down."""
        state = make_state([(5, 5), (5, 4)], food=[(5, 6)])

        decision = HeuristicPlayer(rng=random.Random(0)).decide(state)

        assert decision.move == DOWN
        assert decision.reason == "foraging"

    def test_corner_without_signals_explores_safely(self):
        """Head at (0,0), nothing to chase -> right or down, never up or left."""
        state = make_state([(0, 0)])
        seen = set()

        for seed in range(50):
            decision = HeuristicPlayer(rng=random.Random(seed)).decide(state)
            assert decision.reason == "explore"
            seen.add(decision.move)

        assert seen == {RIGHT, DOWN}

    def test_pursues_adjacent_smaller_opponent(self):
        """A smaller head at distance 1 beats the food signal."""
        state = make_state(
            [(5, 5), (5, 6), (5, 7)],
            opponents={"prey": [(6, 5), (7, 5)]},
            food=[(3, 5)],
        )
        player = HeuristicPlayer(rng=random.Random(0))
        target = Position(6, 5)
        safe = compute_safe_moves(state.you.head, state.board, state.board.snakes)
        best = min(abs(p.x - target.x) + abs(p.y - target.y) for _, p in safe)

        decision = player.decide(state)

        assert decision.reason == "pursuit"
        # up (5,4) and left (4,5) are both two away; up wins the tie
        assert decision.move == UP
        chosen = dict(safe)[decision.move]
        assert abs(chosen.x - target.x) + abs(chosen.y - target.y) == best

    def test_enclosed_snake_returns_fallback(self):
        """No safe move -> fixed fallback, no exception."""
        state = make_state([(0, 0), (0, 1)], width=1, height=2)

        decision = HeuristicPlayer(rng=random.Random(0)).decide(state)

        assert decision.move == UP
        assert decision.reason == "no_safe_move"

    def test_enclosed_snake_uses_configured_fallback(self):
        """The fallback direction comes from the policy."""
        state = make_state([(0, 0), (0, 1)], width=1, height=2)
        player = HeuristicPlayer(policy=MovePolicy(fallback_move=LEFT), rng=random.Random(0))

        assert player.get_move(state) == LEFT


class TestMoveSelectorPriorities:
    """Ordering between pursuit, foraging and exploring."""

    def test_foraging_tie_break_uses_direction_order(self):
        """down and right are both one away from (6,6); down comes first."""
        state = make_state([(5, 5)], food=[(6, 6)])

        assert HeuristicPlayer(rng=random.Random(0)).get_move(state) == DOWN

    def test_custom_tie_break_order(self):
        """A different tie-break order changes the winner."""
        state = make_state([(5, 5)], food=[(6, 6)])
        policy = MovePolicy(tie_break=(RIGHT, DOWN, UP, LEFT))

        assert HeuristicPlayer(policy=policy, rng=random.Random(0)).get_move(state) == RIGHT

    def test_contested_food_falls_through_to_explore(self):
        """Food an opponent reaches first is ignored."""
        state = make_state(
            [(0, 0)],
            opponents={"big": [(10, 9), (10, 8), (10, 7)]},
            food=[(10, 10)],
        )
        rng = Mock()
        rng.choice.side_effect = lambda moves: moves[-1]

        decision = HeuristicPlayer(rng=rng).decide(state)

        assert decision.reason == "explore"
        assert decision.move == RIGHT
        rng.choice.assert_called_once()

    def test_food_only_policy_ignores_prey(self):
        """With aggression disabled the snake keeps foraging."""
        state = make_state(
            [(5, 5), (5, 6), (5, 7)],
            opponents={"prey": [(6, 5), (7, 5)]},
            food=[(3, 5)],
        )
        player = HeuristicPlayer(policy=MovePolicy(aggression=NoAggression()), rng=random.Random(0))

        decision = player.decide(state)

        assert decision.reason == "foraging"
        assert decision.move == LEFT

    def test_largest_policy_chases_distant_head(self):
        """While strictly longest, the nearest head is chased from afar."""
        state = make_state(
            [(1, 1), (1, 2), (1, 3), (1, 4)],
            opponents={"small": [(8, 1), (9, 1)]},
            food=[(1, 0)],
        )
        player = HeuristicPlayer(
            policy=MovePolicy(aggression=LargestSnakeAggression()),
            rng=random.Random(0),
        )

        decision = player.decide(state)

        assert decision.reason == "pursuit"
        assert decision.move == RIGHT

    def test_same_state_gives_same_move_outside_explore(self):
        """Pursuit and foraging ignore the random source."""
        pursuit_state = make_state(
            [(5, 5), (5, 6), (5, 7)],
            opponents={"prey": [(6, 5), (7, 5)]},
        )
        forage_state = make_state([(5, 5)], food=[(2, 8)])

        for state in (pursuit_state, forage_state):
            moves = {HeuristicPlayer(rng=random.Random(seed)).get_move(state) for seed in range(20)}
            assert len(moves) == 1

    def test_seeded_explore_is_reproducible(self):
        """The same seed replays the same random choice."""
        state = make_state([(5, 5)])

        first = [HeuristicPlayer(rng=random.Random(3)).get_move(state) for _ in range(5)]

        assert len(set(first)) == 1

    def test_does_not_mutate_game_state(self):
        """Deciding leaves the snapshot untouched."""
        state = make_state([(5, 5), (5, 6)], opponents={"b": [(1, 1)]}, food=[(2, 2)])
        before = (state.board, state.you.body, state.turn)

        HeuristicPlayer(rng=random.Random(0)).get_move(state)

        assert (state.board, state.you.body, state.turn) == before

    def test_output_is_always_a_safe_move(self):
        """Whenever a safe move exists, the choice is one of them."""
        rng = random.Random(11)
        for _ in range(200):
            cells = [(x, y) for x in range(7) for y in range(7)]
            rng.shuffle(cells)
            you_body = cells[:rng.randint(1, 4)]
            opponents = {"b": cells[5:5 + rng.randint(1, 5)], "c": cells[12:12 + rng.randint(1, 5)]}
            food = cells[20:20 + rng.randint(0, 3)]
            state = make_state(you_body, opponents=opponents, food=food, width=7, height=7)
            safe = compute_safe_moves(state.you.head, state.board, state.board.snakes)

            move = HeuristicPlayer(rng=random.Random(rng.random())).get_move(state)

            assert move in VALID_MOVES
            if safe:
                assert move in dict(safe)


class TestClosestMove:
    """Tests for the closest_move helper."""

    def test_empty_moves_abstain(self):
        assert closest_move([], Position(0, 0)) is None

    def test_picks_minimum_distance(self):
        moves = [(UP, Position(5, 4)), (LEFT, Position(4, 5))]
        assert closest_move(moves, Position(0, 5)) == LEFT


class TestMovePolicy:
    """Tests for MovePolicy validation."""

    def test_defaults(self):
        policy = MovePolicy()
        assert isinstance(policy.aggression, ProximityAggression)
        assert tuple(policy.tie_break) == (UP, DOWN, LEFT, RIGHT)
        assert policy.fallback_move == UP

    def test_invalid_fallback_rejected(self):
        with pytest.raises(ValueError):
            MovePolicy(fallback_move="north")

    def test_incomplete_tie_break_rejected(self):
        with pytest.raises(ValueError):
            MovePolicy(tie_break=(UP, DOWN, LEFT))


class TestVariantRegistry:
    """Tests for the policy variant registry."""

    def test_default_variant_is_proximity(self):
        policy = get_policy(None)
        assert isinstance(policy.aggression, ProximityAggression)
        assert policy.aggression.max_distance == 2

    def test_pursuit_distance_is_passed_through(self):
        assert get_policy("proximity", pursuit_distance=5).aggression.max_distance == 5

    def test_keys_are_normalized(self):
        assert isinstance(get_policy("  FOOD_ONLY ").aggression, NoAggression)
        assert isinstance(get_policy("largest").aggression, LargestSnakeAggression)

    def test_unknown_variant_raises(self):
        with pytest.raises(ValueError, match="Unknown policy variant"):
            get_policy("berserk")

    def test_list_variants_matches_registry(self):
        assert [v["key"] for v in list_variants()] == AVAILABLE_VARIANTS


class TestStrategyChain:
    """Tests for the strategy list itself."""

    def test_silent_strategy_list_raises(self):
        """A chain that never answers is reported, not hidden behind the fallback."""
        state = make_state([(5, 5)])
        player = HeuristicPlayer(rng=random.Random(0))
        player.strategies = []

        with pytest.raises(RuntimeError, match="No strategy proposed a move"):
            player.decide(state)
