"""
Board index - a coordinate -> occupancy lookup rebuilt for every decision.
"""

from typing import Dict, Iterable

from domain.coord import Coord
from domain.flags import Occupancy
from domain.game_state import GameState

BoardIndex = Dict[Coord, Occupancy]


def _add_coords(index: BoardIndex, points: Iterable[Coord], value: Occupancy) -> None:
    for point in points:
        # some tiles are occupied by more than one entity
        existing = index.get(point)
        index[point] = value if existing is None else existing | value


def build_index(game_state: GameState) -> BoardIndex:
    """
    Build the occupancy index for a snapshot.

    Tiles that are not in the returned dict are empty.
    """
    index: BoardIndex = {}
    _add_coords(index, game_state.food, Occupancy.FOOD)
    for snake in game_state.snakes:
        _add_coords(index, snake.body, Occupancy.SNAKE)
    _add_coords(index, game_state.hazards, Occupancy.HAZARD)
    return index


def tile_flags(index: BoardIndex, tile: Coord) -> Occupancy:
    return index.get(tile, Occupancy.EMPTY)
