"""
Snake entity for the decision engine.
"""

from typing import Iterable, NamedTuple, Tuple


class Position(NamedTuple):
    """A grid cell. (0, 0) is the top-left corner."""
    x: int
    y: int


class Snake:
    """
    Represents a snake on the board for a single turn.

    Attributes:
        snake_id: identifier assigned by the game host
        body: tuple of Position from head at index 0 to tail at the end
    """

    def __init__(self, snake_id: str, body: Iterable[Tuple[int, int]]):
        self.snake_id = snake_id
        self.body: Tuple[Position, ...] = tuple(Position(*segment) for segment in body)
        if not self.body:
            raise ValueError(f"Snake '{snake_id}' must have at least one body segment")

    @property
    def head(self) -> Position:
        """Return the head position (first element)."""
        return self.body[0]

    @property
    def length(self) -> int:
        return len(self.body)

    def __repr__(self):
        return f"<Snake id={self.snake_id!r}, head={tuple(self.head)}, length={self.length}>"
