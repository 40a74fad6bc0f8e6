"""
Grid geometry helpers shared by the decision services.
"""

from .constants import DIRECTION_DELTAS
from .snake import Position


def manhattan_distance(a: Position, b: Position) -> int:
    """Return |dx| + |dy| between two grid positions."""
    return abs(a.x - b.x) + abs(a.y - b.y)


def next_position(pos: Position, direction: str) -> Position:
    """Position reached by moving one cell from ``pos`` in ``direction``."""
    dx, dy = DIRECTION_DELTAS[direction]
    return Position(pos.x + dx, pos.y + dy)


def in_bounds(pos: Position, width: int, height: int) -> bool:
    return 0 <= pos.x < width and 0 <= pos.y < height
