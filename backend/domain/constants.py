"""
Game constants for SnakeBrain.
"""

# Movement directions (Battlesnake wire values)
UP = "up"
DOWN = "down"
LEFT = "left"
RIGHT = "right"
VALID_MOVES = (UP, DOWN, LEFT, RIGHT)

# Move emitted when nothing is legal
DEFAULT_MOVE = UP

# Rules
MAX_HEALTH = 100
HAZARD_STEP_COST = 16
CONSTRICTOR_RULESET = "constrictor"
STANDARD_RULESET = "standard"

# Search thresholds
BOX_THRESHOLD = 0.3
CONNECTION_THRESHOLD = 0.5
DEGREE_THRESHOLD = 2
CRITICAL_HEALTH = 10
EVASION_RADIUS = 2.0
