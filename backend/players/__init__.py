"""
Player implementations for SnakeBrain.

This module contains the player abstraction and the Battlesnake
orchestrator that turns a board snapshot into a move.
"""

from .base import Player
from .battlesnake_player import BattlesnakePlayer, Decision, decide

__all__ = [
    'Player',
    'BattlesnakePlayer',
    'Decision',
    'decide',
]
