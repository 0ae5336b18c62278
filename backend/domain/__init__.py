"""
Domain entities for the SnakeBrain decision core.

This module contains the board entities that are independent of
infrastructure concerns (HTTP transport, configuration, etc.).
"""

from .constants import UP, DOWN, LEFT, RIGHT, VALID_MOVES, DEFAULT_MOVE
from .coord import Coord, DIRECTION_VECTORS, direction_between
from .flags import Occupancy, is_free
from .snake import Snake
from .game_state import GameState

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'DEFAULT_MOVE',
    'Coord', 'DIRECTION_VECTORS', 'direction_between',
    'Occupancy', 'is_free',
    'Snake',
    'GameState',
]
