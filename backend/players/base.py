"""
Player interface: one snapshot in, one direction out.
"""

from typing import Optional

from domain.game_state import GameState
from domain.snake import Snake


class Player:
    """
    Base class for move deciders.

    A player is bound to a snake id; when none is given it plays whichever
    snake the snapshot marks as "you".
    """

    def __init__(self, snake_id: Optional[str] = None):
        self.snake_id = snake_id

    def find_self(self, game_state: GameState) -> Optional[Snake]:
        """Our snake in this snapshot, or None if it is not on the board."""
        return game_state.get_snake(self.snake_id or game_state.you_id)

    def get_move(self, game_state: GameState) -> str:
        """
        Return a move direction for the current snapshot.

        Returns:
            One of: "up", "down", "left", "right"
        """
        raise NotImplementedError
