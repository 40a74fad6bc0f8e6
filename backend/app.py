import logging
import random
from typing import Any, Optional

from flask import Flask, jsonify, request
from flask_cors import CORS

from config import ServerConfig, load_config
from domain.game_state import GameState, InvalidGameStateError
from players.heuristic_player import HeuristicPlayer
from players.variant_registry import get_policy

logger = logging.getLogger(__name__)


def _game_id(body: Any) -> Optional[str]:
    """Game id from a start or end body, if it carries one."""
    if not isinstance(body, dict):
        return None
    game = body.get("game")
    return game.get("id") if isinstance(game, dict) else None


def create_app(config: Optional[ServerConfig] = None) -> Flask:
    config = config or load_config()
    logging.basicConfig(level=config.log_level)

    # Fail at startup on an unknown variant rather than on the first move
    policy = get_policy(config.policy_variant, config.pursuit_distance)
    logger.info(
        f"Using policy variant '{config.policy_variant}' "
        f"(aggression={policy.aggression.name}, pursuit_distance={config.pursuit_distance})"
    )

    app = Flask(__name__)
    app.config["SNAKE_CONFIG"] = config
    CORS(app, resources={r"/*": {"origins": config.cors_origins}})

    def make_rng(game_state: GameState) -> random.Random:
        # A configured seed makes every turn of every game replayable
        if config.random_seed is None:
            return random.Random()
        return random.Random(f"{config.random_seed}:{game_state.game_id}:{game_state.turn}")

    @app.route("/", methods=["GET"])
    def info():
        """Battlesnake v1 info endpoint with the snake's appearance."""
        snake = config.snake
        return jsonify({
            "apiversion": "1",
            "author": snake.author,
            "color": snake.color,
            "head": snake.head,
            "tail": snake.tail,
            "version": snake.version,
        })

    @app.route("/ping", methods=["GET"])
    def ping():
        """Liveness probe."""
        return "pong", 200

    @app.route("/start", methods=["POST"])
    def start():
        """Return the display configuration for a new game."""
        logger.info(f"Game started: {_game_id(request.get_json(silent=True))}")
        snake = config.snake
        return jsonify({
            "color": snake.color,
            "headType": snake.head,
            "tailType": snake.tail,
        })

    @app.route("/move", methods=["POST"])
    def move():
        """
        Decide one move for the snake in the request.

        Malformed snapshots get a 400; anything that goes wrong inside the
        engine is logged and answered with the fallback move, since a missing
        answer costs the turn anyway.
        """
        try:
            game_state = GameState.from_request(request.get_json(silent=True))
        except InvalidGameStateError as error:
            logger.warning(f"Rejected move request: {error}")
            return jsonify({"error": str(error)}), 400

        try:
            player = HeuristicPlayer(policy=policy, rng=make_rng(game_state))
            decision = player.decide(game_state)
        except Exception as error:
            logger.error(f"Error deciding move for turn {game_state.turn}: {error}")
            return jsonify({"move": policy.fallback_move})

        logger.info(f"Turn {game_state.turn}: {decision.move} ({decision.reason})")
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Board:\n%s", game_state.print_board())
        return jsonify({"move": decision.move})

    @app.route("/end", methods=["POST"])
    def end():
        """Acknowledge the end of a game."""
        logger.info(f"Game ended: {_game_id(request.get_json(silent=True))}")
        return "ok", 200

    return app


if __name__ == "__main__":
    server_config = load_config()
    create_app(server_config).run(host="0.0.0.0", port=server_config.port, debug=server_config.debug)
