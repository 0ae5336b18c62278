"""
Connectivity analysis - how much of the board stays reachable after a move.

Two neighbouring tiles "diverge" when the corner between them is blocked:
the snake may then be choosing between two regions that do not connect.
Only in that case is the (comparatively expensive) flood fill run for each
branch, and branches that keep too little of the board are dropped.
"""

import logging
from collections import deque
from itertools import combinations
from typing import Collection, Dict, FrozenSet, List, Optional, Sequence, Set, Tuple

from domain.coord import Coord
from domain.game_state import GameState
from domain.snake import Snake

from .board_index import BoardIndex
from .legality import can_enter, legal_neighbors

logger = logging.getLogger(__name__)

# (tile, blocked tiles, head veto) -> share of the board reachable
ConnectivityCache = Dict[Tuple[Coord, FrozenSet[Coord], bool], float]


def num_free_tiles(game_state: GameState) -> int:
    """Board area minus every tile covered by at least one snake segment."""
    occupied: Set[Coord] = set()
    for snake in game_state.snakes:
        occupied.update(snake.body)
    return game_state.width * game_state.height - len(occupied)


def percent_connected(
    tile: Coord,
    game_state: GameState,
    index: BoardIndex,
    you: Snake,
    excluded: Collection[Coord] = (),
    avoid_heads: bool = True,
) -> float:
    """
    Fraction of the board's free tiles reachable from `tile`.

    The fill counts `tile` itself and never steps onto an excluded tile.

    Returns:
        A value in [0, 1]; 0.0 when the board has no free tiles at all.
    """
    total = num_free_tiles(game_state)
    if total <= 0:
        return 0.0

    excluded = set(excluded)
    visited = {tile}
    frontier = deque([tile])
    while frontier:
        current = frontier.popleft()
        for adj in legal_neighbors(current, game_state, index, you, avoid_heads, excluded):
            if adj not in visited:
                visited.add(adj)
                frontier.append(adj)

    return min(1.0, len(visited) / total)


def tile_degree(
    tile: Coord,
    origin: Coord,
    game_state: GameState,
    index: BoardIndex,
    you: Snake,
    excluded: Collection[Coord] = (),
    avoid_heads: bool = True,
) -> int:
    """Number of ways out of `tile` once we have arrived from `origin`."""
    return sum(
        1
        for adj in legal_neighbors(tile, game_state, index, you, avoid_heads, excluded)
        if adj != origin
    )


def _closest_food_distance(tile: Coord, game_state: GameState) -> Optional[float]:
    if not game_state.food:
        return None
    return min(tile.distance(food) for food in game_state.food)


def _divergence_pairs(origin: Coord, tiles: Sequence[Coord]) -> List[Tuple[Coord, Coord]]:
    if len(tiles) == 3:
        # the three unit moves sum to the one direction without an opposite
        forward_vector = Coord(0, 0)
        for tile in tiles:
            forward_vector = forward_vector + (tile - origin)
        forward = origin + forward_vector
        if forward in tiles:
            return [(forward, side) for side in tiles if side != forward]
    return list(combinations(tiles, 2))


def is_divergent(
    origin: Coord,
    first: Coord,
    second: Coord,
    game_state: GameState,
    index: BoardIndex,
    you: Snake,
    excluded: Collection[Coord] = (),
    avoid_heads: bool = True,
) -> bool:
    """
    True when the corner joining two neighbours of `origin` cannot be used,
    so the two branches may lead to separate regions.
    """
    corner = origin + (first - origin) + (second - origin)
    if corner == origin or corner in excluded:
        return True
    return not can_enter(corner, game_state, index, you, avoid_heads)


def rank_candidates(
    origin: Coord,
    tiles: Sequence[Coord],
    game_state: GameState,
    index: BoardIndex,
    you: Snake,
    threshold: float,
    degree_threshold: int = 0,
    excluded: Collection[Coord] = (),
    strict: bool = False,
    evasive: bool = False,
    avoid_heads: bool = True,
    cache: Optional[ConnectivityCache] = None,
) -> List[Coord]:
    """
    Order candidate moves out of `origin`, best first.

    Args:
        origin: tile we are moving from
        tiles: legal neighbours of origin
        threshold: minimum connectivity for a branch at a divergence
        degree_threshold: minimum number of exits a tile must have
        excluded: tiles treated as blocked (the path we are about to lay down)
        strict: return [] instead of the full ranking when nothing qualifies
        evasive: prefer tiles far from food when breaking ties
        avoid_heads: apply the head-to-head veto while flood filling
        cache: flood fill results shared between calls of one search

    Returns:
        Qualified tiles ranked by connectivity, degree, centrality and
        (evasive only) food distance; the full ranked list when nothing
        qualifies and strict is False.
    """
    tiles = list(tiles)
    if not tiles:
        return []

    excluded = set(excluded)
    connectivity: Dict[Coord, float] = {tile: 1.0 for tile in tiles}

    divergent = any(
        is_divergent(origin, a, b, game_state, index, you, excluded, avoid_heads)
        for a, b in _divergence_pairs(origin, tiles)
    )
    if divergent:
        blocked = frozenset(excluded | {origin})
        for tile in tiles:
            key = (tile, blocked, avoid_heads)
            if cache is not None and key in cache:
                connectivity[tile] = cache[key]
                continue
            connectivity[tile] = percent_connected(
                tile, game_state, index, you, excluded=blocked, avoid_heads=avoid_heads
            )
            if cache is not None:
                cache[key] = connectivity[tile]
        logger.debug("Divergence at %s: %s", origin, connectivity)

    degree = {
        tile: tile_degree(tile, origin, game_state, index, you, excluded, avoid_heads)
        for tile in tiles
    }
    center_x, center_y = game_state.center

    def rank_key(tile: Coord):
        key = [
            -connectivity[tile],
            -degree[tile],
            (tile.x - center_x) ** 2 + (tile.y - center_y) ** 2,
        ]
        if evasive:
            food_distance = _closest_food_distance(tile, game_state)
            key.append(-(food_distance or 0.0))
        return key

    ranked = sorted(tiles, key=rank_key)
    qualified = [
        tile for tile in ranked
        if connectivity[tile] >= threshold and degree[tile] >= degree_threshold
    ]

    if qualified:
        return qualified
    return [] if strict else ranked
