"""
Foraging planner: food we can reach no later than any opponent.
"""

from typing import Iterable, List

from domain.geometry import manhattan_distance
from domain.snake import Position, Snake


def rank_reachable_food(
    head: Position,
    food: Iterable[Position],
    snakes: Iterable[Snake],
    own_id: str,
) -> List[Position]:
    """
    Rank food cells by Manhattan distance from ``head``.

    A food cell is dropped when some opponent head is strictly closer to it
    than ours. Equal distance still counts as reachable. Ties in distance
    keep the order the host listed the food in.
    """
    opponent_heads = [s.head for s in snakes if s.snake_id != own_id]

    reachable = []
    for target in food:
        ours = manhattan_distance(head, target)
        if any(manhattan_distance(other, target) < ours for other in opponent_heads):
            continue
        reachable.append((ours, target))

    reachable.sort(key=lambda item: item[0])
    return [target for _, target in reachable]
