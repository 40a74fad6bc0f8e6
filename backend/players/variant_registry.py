"""
Registry for move policy variants.

Maps variant keys to factories building a MovePolicy. The three keys are the
strategies the snake has shipped with over time: food only, aggression while
we are the biggest snake, and aggression against nearby smaller snakes.
To add a variant, write a factory here and add an entry to POLICY_VARIANTS.
"""

from typing import Callable, Dict, List, Optional

from domain.constants import DEFAULT_PURSUIT_DISTANCE
from services.threat import LargestSnakeAggression, NoAggression, ProximityAggression
from .heuristic_player import MovePolicy

DEFAULT_VARIANT = "proximity"


def _food_only_policy(pursuit_distance: int) -> MovePolicy:
    return MovePolicy(aggression=NoAggression())


def _largest_policy(pursuit_distance: int) -> MovePolicy:
    return MovePolicy(aggression=LargestSnakeAggression())


def _proximity_policy(pursuit_distance: int) -> MovePolicy:
    return MovePolicy(aggression=ProximityAggression(max_distance=pursuit_distance))


# Registry: maps variant key -> factory taking the pursuit distance
POLICY_VARIANTS: Dict[str, Callable[[int], MovePolicy]] = {
    "food_only": _food_only_policy,
    "largest": _largest_policy,
    "proximity": _proximity_policy,
}

# Canonical list of available variant keys
AVAILABLE_VARIANTS = list(POLICY_VARIANTS.keys())


def get_policy(
    variant_key: Optional[str] = None,
    pursuit_distance: int = DEFAULT_PURSUIT_DISTANCE,
) -> MovePolicy:
    """
    Build the MovePolicy for a given variant key.

    Args:
        variant_key: One of AVAILABLE_VARIANTS. If None or empty, returns the default.
        pursuit_distance: Head distance threshold for the proximity variant.

    Raises:
        ValueError: If variant_key is not recognized.
    """
    if not variant_key or variant_key.strip() == "":
        variant_key = DEFAULT_VARIANT

    variant_key = variant_key.strip().lower()

    if variant_key not in POLICY_VARIANTS:
        available = ", ".join(AVAILABLE_VARIANTS)
        raise ValueError(
            f"Unknown policy variant '{variant_key}'. Available variants: {available}"
        )

    return POLICY_VARIANTS[variant_key](pursuit_distance)


def list_variants() -> List[Dict[str, str]]:
    """
    Return metadata about all available policy variants.
    """
    return [
        {"key": "food_only", "description": "Nearest uncontested food, otherwise a random safe move"},
        {"key": "largest", "description": "Chase the nearest head while we are strictly the longest snake"},
        {"key": "proximity", "description": "Chase a smaller snake whose head is within the pursuit distance"},
    ]
