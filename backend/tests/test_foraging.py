"""
Tests for the foraging planner.
"""

import random
import sys
import os

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import Position, Snake, manhattan_distance
from services.foraging import rank_reachable_food


class TestRankReachableFood:
    """Tests for rank_reachable_food."""

    def test_sorts_by_distance(self):
        """Closest food first when nobody contests it."""
        you = Snake("you", [(5, 5)])
        food = [Position(0, 0), Position(5, 7), Position(6, 5)]

        assert rank_reachable_food(you.head, food, [you], "you") == [
            Position(6, 5), Position(5, 7), Position(0, 0),
        ]

    def test_drops_food_an_opponent_reaches_first(self):
        """Strictly closer opponent heads win the race."""
        you = Snake("you", [(5, 5)])
        other = Snake("b", [(0, 1)])
        food = [Position(0, 0), Position(6, 5)]

        assert rank_reachable_food(you.head, food, [you, other], "you") == [Position(6, 5)]

    def test_equal_distance_counts_as_reachable(self):
        """Ties with an opponent do not exclude food."""
        you = Snake("you", [(2, 0)])
        other = Snake("b", [(6, 0)])
        food = [Position(4, 0)]

        assert rank_reachable_food(you.head, food, [you, other], "you") == [Position(4, 0)]

    def test_no_food(self):
        """An empty food list yields nothing."""
        you = Snake("you", [(5, 5)])
        assert rank_reachable_food(you.head, [], [you], "you") == []

    def test_no_returned_food_has_a_closer_opponent(self):
        """Random boards never return contested food."""
        rng = random.Random(7)
        for _ in range(200):
            you = Snake("you", [(rng.randrange(11), rng.randrange(11))])
            others = [Snake(f"s{i}", [(rng.randrange(11), rng.randrange(11))]) for i in range(3)]
            food = [Position(rng.randrange(11), rng.randrange(11)) for _ in range(5)]

            ranked = rank_reachable_food(you.head, food, [you] + others, "you")

            distances = [manhattan_distance(you.head, f) for f in ranked]
            assert distances == sorted(distances)
            for f in ranked:
                ours = manhattan_distance(you.head, f)
                assert all(manhattan_distance(o.head, f) >= ours for o in others)
