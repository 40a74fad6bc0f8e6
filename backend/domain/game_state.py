"""
GameState entity - a validated snapshot of one turn.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .geometry import in_bounds
from .snake import Position, Snake


class InvalidGameStateError(ValueError):
    """Raised when an inbound move request cannot be turned into a GameState."""


@dataclass(frozen=True)
class Board:
    width: int
    height: int
    snakes: Tuple[Snake, ...] = ()
    food: Tuple[Position, ...] = field(default_factory=tuple)


class GameState:
    """
    A snapshot of the game at a specific turn, as seen by our snake.

    Attributes:
        board: Board with dimensions, every live snake and all food
        you: the Snake we are controlling (also present in board.snakes)
        turn: turn counter reported by the game host
        game_id: optional game identifier, used only for logging
    """

    def __init__(self, board: Board, you: Snake, turn: int = 0, game_id: Optional[str] = None):
        self.board = board
        self.you = you
        self.turn = turn
        self.game_id = game_id

    @property
    def opponents(self) -> List[Snake]:
        return [s for s in self.board.snakes if s.snake_id != self.you.snake_id]

    @classmethod
    def from_request(cls, payload: Dict[str, Any]) -> "GameState":
        """
        Build a GameState from a /move request body.

        Raises:
            InvalidGameStateError: if required fields are missing or any
                coordinate falls outside the board.
        """
        if not isinstance(payload, dict):
            raise InvalidGameStateError("Request body must be a JSON object")

        board_data = payload.get("board")
        you_data = payload.get("you")
        if not isinstance(board_data, dict):
            raise InvalidGameStateError("Missing 'board'")
        if not isinstance(you_data, dict):
            raise InvalidGameStateError("Missing 'you'")

        width = _parse_dimension(board_data, "width")
        height = _parse_dimension(board_data, "height")

        you = _parse_snake(you_data, width, height)

        snakes = []
        seen_you = False
        for snake_data in _get_list(board_data, "snakes"):
            snake = _parse_snake(snake_data, width, height)
            if snake.snake_id == you.snake_id:
                seen_you = True
            snakes.append(snake)
        # Our own body is always an obstacle, even if the host omitted it
        if not seen_you:
            snakes.append(you)

        food = tuple(_parse_position(f, width, height) for f in _get_list(board_data, "food"))

        turn = payload.get("turn", 0)
        if not isinstance(turn, int) or isinstance(turn, bool):
            raise InvalidGameStateError(f"Invalid turn: {turn!r}")

        game = payload.get("game") or {}
        game_id = game.get("id") if isinstance(game, dict) else None

        return cls(
            board=Board(width=width, height=height, snakes=tuple(snakes), food=food),
            you=you,
            turn=turn,
            game_id=game_id,
        )

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        T = snake body
        Y = our head
        0,1,2... = opponent heads (roster order)
        (0,0) is the top left, matching the move directions.
        """
        board = [['.' for _ in range(self.board.width)] for _ in range(self.board.height)]

        for fx, fy in self.board.food:
            board[fy][fx] = 'F'

        for i, snake in enumerate(self.opponents):
            for pos_idx, (x, y) in enumerate(snake.body):
                board[y][x] = str(i % 10) if pos_idx == 0 else 'T'

        for pos_idx, (x, y) in enumerate(self.you.body):
            board[y][x] = 'Y' if pos_idx == 0 else 'T'

        result = [f"{y:2d} {' '.join(row)}" for y, row in enumerate(board)]
        result.append("   " + " ".join(str(i % 10) for i in range(self.board.width)))
        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState turn={self.turn}, you={self.you.snake_id!r}, "
            f"snakes={len(self.board.snakes)}, food={len(self.board.food)}>"
        )


def _get_list(data: Dict[str, Any], key: str) -> List[Any]:
    """Optional list field; absent or null reads as empty."""
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise InvalidGameStateError(f"'{key}' must be a list, got {value!r}")
    return value


def _parse_dimension(board_data: Dict[str, Any], key: str) -> int:
    value = board_data.get(key)
    if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
        raise InvalidGameStateError(f"Board {key} must be a positive integer, got {value!r}")
    return value


def _parse_position(data: Any, width: int, height: int) -> Position:
    if not isinstance(data, dict):
        raise InvalidGameStateError(f"Invalid coordinate: {data!r}")
    x, y = data.get("x"), data.get("y")
    for value in (x, y):
        if not isinstance(value, int) or isinstance(value, bool):
            raise InvalidGameStateError(f"Invalid coordinate: {data!r}")
    pos = Position(x, y)
    if not in_bounds(pos, width, height):
        raise InvalidGameStateError(f"Coordinate {tuple(pos)} outside {width}x{height} board")
    return pos


def _parse_snake(data: Any, width: int, height: int) -> Snake:
    if not isinstance(data, dict) or "id" not in data:
        raise InvalidGameStateError("Snake entry is missing 'id'")
    body = [_parse_position(segment, width, height) for segment in _get_list(data, "body")]
    if not body:
        raise InvalidGameStateError(f"Snake '{data['id']}' has an empty body")
    return Snake(str(data["id"]), body)
