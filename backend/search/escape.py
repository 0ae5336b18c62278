"""
Entrapment detection and escape targeting.
"""

import logging
from collections import deque
from typing import List, Optional

from domain.coord import Coord
from domain.flags import Occupancy
from domain.game_state import GameState
from domain.snake import Snake

from .board_index import BoardIndex, tile_flags
from .connectivity import num_free_tiles
from .legality import board_neighbors, legal_neighbors

logger = logging.getLogger(__name__)


def inside_box(
    you: Snake,
    game_state: GameState,
    index: BoardIndex,
    box_threshold: float,
) -> bool:
    """
    Check whether our head is sealed inside a small region.

    Flood fills from the head and gives up as soon as more than
    `box_threshold` of the board's free tiles have been reached.

    Returns:
        True if the fill ran out of tiles first (we are boxed in).
    """
    total = num_free_tiles(game_state)
    if total <= 0:
        return True

    frontier = deque([you.head])
    visited = set()
    while frontier:
        current = frontier.popleft()
        for adj in legal_neighbors(current, game_state, index, you):
            if adj not in visited:
                visited.add(adj)
                frontier.append(adj)

        if len(visited) / total > box_threshold:
            return False

    return True


def find_blocking_tiles(game_state: GameState, index: BoardIndex, you: Snake) -> List[Coord]:
    """
    Snake segments that wall in the region around our head, in the order
    the fill reached them.
    """
    frontier = deque(board_neighbors(you.head, game_state))
    visited = {you.head, *frontier}
    blocking: List[Coord] = []

    while frontier:
        current = frontier.popleft()
        if tile_flags(index, current) & Occupancy.SNAKE:
            blocking.append(current)
            continue
        for adj in board_neighbors(current, game_state):
            if adj not in visited:
                visited.add(adj)
                frontier.append(adj)

    return blocking


def _tail_distance(tile: Coord, game_state: GameState) -> int:
    """Segments between `tile` and the tail of the snake that owns it."""
    for snake in game_state.snakes:
        if tile in snake.body:
            return len(snake.body) - snake.body.index(tile)
    return 0


def find_key_hole(game_state: GameState, index: BoardIndex, you: Snake) -> Optional[Coord]:
    """
    Given that we are trapped, find the tile that is our best bet to leave
    the region: the blocking segment closest to the tail of its snake.
    """
    blocking = find_blocking_tiles(game_state, index, you)
    if not blocking:
        return None

    key_hole = min(blocking, key=lambda tile: _tail_distance(tile, game_state))
    logger.debug("Key hole %s out of %d blocking tiles", key_hole, len(blocking))
    return key_hole
