"""
Safety filter: which of the four cardinal moves survive the next step.

This is a one-step model. Every body segment, tails included, is treated as
an obstacle even though a tail normally vacates its cell next turn, and the
simultaneous moves of other snakes are not simulated. Head-to-head losses and
some dead ends are therefore possible; the filter only guarantees we never
step into a wall or onto a segment that is occupied right now.
"""

from typing import Iterable, List, Set, Tuple

from domain.constants import DIRECTION_ORDER
from domain.game_state import Board
from domain.geometry import in_bounds, next_position
from domain.snake import Position, Snake

SafeMove = Tuple[str, Position]


def occupied_cells(snakes: Iterable[Snake]) -> Set[Position]:
    """Every cell covered by any snake segment."""
    return {segment for snake in snakes for segment in snake.body}


def is_position_safe(pos: Position, board: Board, occupied: Set[Position]) -> bool:
    return in_bounds(pos, board.width, board.height) and pos not in occupied


def compute_safe_moves(head: Position, board: Board, snakes: Iterable[Snake]) -> List[SafeMove]:
    """
    Return (direction, resulting position) for each move that stays on the
    board and does not land on any snake body, our own included.

    Results come back in the stable up/down/left/right order.
    """
    occupied = occupied_cells(snakes)
    safe_moves: List[SafeMove] = []
    for direction in DIRECTION_ORDER:
        pos = next_position(head, direction)
        if is_position_safe(pos, board, occupied):
            safe_moves.append((direction, pos))
    return safe_moves
