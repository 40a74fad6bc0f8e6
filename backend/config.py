"""
Server configuration, read from the environment (and a local .env file).

Appearance values are only consumed by the info and /start endpoints; the
decision engine gets nothing from here except its policy settings.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

from domain.constants import DEFAULT_PURSUIT_DISTANCE

load_dotenv()


@dataclass(frozen=True)
class SnakeConfig:
    author: str = ""
    color: str = "#00FF00"
    head: str = "fang"
    tail: str = "round-bum"
    version: str = "0.1.0"


@dataclass(frozen=True)
class ServerConfig:
    port: int = 3000
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    policy_variant: str = "proximity"
    pursuit_distance: int = DEFAULT_PURSUIT_DISTANCE
    random_seed: Optional[int] = None
    snake: SnakeConfig = field(default_factory=SnakeConfig)


def _get_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def _get_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def load_config() -> ServerConfig:
    """
    Build the ServerConfig from environment variables.

    Raises:
        ValueError: If a numeric variable cannot be parsed or is negative.
    """
    origins_env = os.getenv("CORS_ALLOWED_ORIGINS")
    if origins_env:
        origins = [o.strip() for o in origins_env.split(",") if o.strip()]
    else:
        origins = ["*"]

    pursuit_distance = _get_int("SNAKE_PURSUIT_DISTANCE", DEFAULT_PURSUIT_DISTANCE)
    if pursuit_distance < 0:
        raise ValueError(f"SNAKE_PURSUIT_DISTANCE must be non-negative, got {pursuit_distance}")

    snake = SnakeConfig(
        author=os.getenv("SNAKE_AUTHOR", SnakeConfig.author),
        color=os.getenv("SNAKE_COLOR", SnakeConfig.color),
        head=os.getenv("SNAKE_HEAD", SnakeConfig.head),
        tail=os.getenv("SNAKE_TAIL", SnakeConfig.tail),
        version=os.getenv("SNAKE_VERSION", SnakeConfig.version),
    )

    return ServerConfig(
        port=_get_int("PORT", 3000),
        debug=_get_bool("FLASK_DEBUG"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        cors_origins=origins,
        policy_variant=os.getenv("SNAKE_POLICY", "proximity"),
        pursuit_distance=pursuit_distance,
        random_seed=_get_int("SNAKE_RANDOM_SEED", None),
        snake=snake,
    )
