"""
Per-turn decision services: safety filtering, threat assessment and foraging.
"""

from .safety import compute_safe_moves, occupied_cells
from .threat import (
    AggressionPolicy,
    ProximityAggression,
    LargestSnakeAggression,
    NoAggression,
    ThreatAssessment,
    rank_opponents,
    assess_threat,
)
from .foraging import rank_reachable_food

__all__ = [
    'compute_safe_moves', 'occupied_cells',
    'AggressionPolicy', 'ProximityAggression', 'LargestSnakeAggression', 'NoAggression',
    'ThreatAssessment', 'rank_opponents', 'assess_threat',
    'rank_reachable_food',
]
