"""
Game constants for the Battlesnake move server.
"""

# Movement directions (lowercase, as the Battlesnake API expects them)
UP = "up"
DOWN = "down"
LEFT = "left"
RIGHT = "right"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Stable order used to break distance ties
DIRECTION_ORDER = (UP, DOWN, LEFT, RIGHT)

# Step offsets; y grows downwards, so "up" decreases y
DIRECTION_DELTAS = {
    UP:    (0, -1),
    DOWN:  (0, 1),
    LEFT:  (-1, 0),
    RIGHT: (1, 0),
}

# Returned when no survivable move exists
FALLBACK_MOVE = UP

# Nearest-opponent distance at which pursuit may kick in
DEFAULT_PURSUIT_DISTANCE = 2
