"""
Base player interface for the move server.
"""

from domain.game_state import GameState


class Player:
    """
    Base class/interface for player logic.

    A player is built for one request and returns a move for the snake
    described by ``game_state.you``.
    """

    def get_move(self, game_state: GameState) -> str:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of: "up", "down", "left", "right"
        """
        raise NotImplementedError
