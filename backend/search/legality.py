"""
Tile legality - can our snake occupy a tile on its next move?
"""

from typing import Collection, List

from domain.coord import Coord, DIRECTION_VECTORS
from domain.flags import is_free
from domain.game_state import GameState
from domain.snake import Snake

from .board_index import BoardIndex, tile_flags


def _is_vacating_tail(tile: Coord, game_state: GameState) -> bool:
    """
    True when the only thing on `tile` is the tail of a snake that has not
    just eaten, so the tile will be empty once every snake moves.
    """
    vacating = False
    for snake in game_state.snakes:
        if tile not in snake.body:
            continue
        if tile in snake.body[:-1] or not snake.will_vacate_tail:
            return False
        vacating = True
    return vacating


def adjacent_to_bigger_head(tile: Coord, game_state: GameState, you: Snake) -> bool:
    """
    True if `tile` is within one step of the head of another snake that
    would win or tie a head-to-head collision with us.
    """
    for snake in game_state.snakes:
        if snake.id == you.id:
            continue
        if tile.distance(snake.head) <= 1.0 and snake.length >= you.length:
            return True
    return False


def can_enter(
    tile: Coord,
    game_state: GameState,
    index: BoardIndex,
    you: Snake,
    avoid_heads: bool = True,
) -> bool:
    """
    Decide whether `you` may move onto `tile` next turn.

    Args:
        tile: candidate tile
        game_state: current snapshot
        index: occupancy index built from the snapshot
        you: the snake that would move
        avoid_heads: veto tiles next to the head of an equal or longer snake

    Returns:
        False for off-board tiles, body segments (other than a vacating tail)
        and, when avoid_heads is set, contested tiles. True otherwise.
    """
    if not game_state.in_bounds(tile):
        return False

    if not is_free(tile_flags(index, tile)) and not _is_vacating_tail(tile, game_state):
        return False

    if avoid_heads and adjacent_to_bigger_head(tile, game_state, you):
        return False

    return True


def board_neighbors(tile: Coord, game_state: GameState) -> List[Coord]:
    """In-board cardinal neighbours of a tile, ignoring what is on them."""
    neighbors = []
    for vector in DIRECTION_VECTORS.values():
        candidate = tile + vector
        if game_state.in_bounds(candidate):
            neighbors.append(candidate)
    return neighbors


def legal_neighbors(
    tile: Coord,
    game_state: GameState,
    index: BoardIndex,
    you: Snake,
    avoid_heads: bool = True,
    excluded: Collection[Coord] = (),
) -> List[Coord]:
    return [
        candidate
        for candidate in (tile + vector for vector in DIRECTION_VECTORS.values())
        if candidate not in excluded and can_enter(candidate, game_state, index, you, avoid_heads)
    ]
