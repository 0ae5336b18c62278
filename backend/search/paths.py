"""
Path search over the legality/connectivity substrate.

Every search records parent pointers in a dict and reports its result as a
path: the list of tiles after the start tile up to and including the goal.
An empty list means no path was found.
"""

import heapq
import itertools
import logging
from collections import deque
from typing import Dict, List, Optional, Sequence, Set

from domain.constants import HAZARD_STEP_COST
from domain.coord import Coord
from domain.flags import Occupancy
from domain.game_state import GameState
from domain.snake import Snake

from .board_index import BoardIndex, tile_flags
from .connectivity import ConnectivityCache, rank_candidates
from .legality import legal_neighbors

logger = logging.getLogger(__name__)

ParentMap = Dict[Coord, Coord]


def backtrack(tile: Coord, parents: ParentMap) -> List[Coord]:
    """
    Determine the path from the search root to `tile`.

    Args:
        tile: the goal tile
        parents: tiles mapped to the tile they were reached from

    Returns:
        The path without the root (usually our head), ending at `tile`.
    """
    path = [tile]
    current = tile
    while current in parents:
        current = parents[current]
        path.append(current)

    # drop the root node
    path.pop()
    path.reverse()
    return path


def future_body(path: Sequence[Coord], length: int) -> List[Coord]:
    """The tiles our body would cover after walking `path`."""
    return list(path[max(0, len(path) - length):])


def closest_food(tile: Coord, game_state: GameState) -> Optional[float]:
    if not game_state.food:
        return None
    return min(tile.distance(food) for food in game_state.food)


def _is_food(index: BoardIndex, tile: Coord) -> bool:
    return bool(tile_flags(index, tile) & Occupancy.FOOD)


def step_cost(index: BoardIndex, tile: Coord) -> int:
    if tile_flags(index, tile) & Occupancy.HAZARD:
        return HAZARD_STEP_COST
    return 1


def a_star(
    game_state: GameState,
    index: BoardIndex,
    you: Snake,
    connection_threshold: float,
    degree_threshold: int = 0,
) -> List[Coord]:
    """
    Shortest weighted path to a food we can reach before starving.

    Args:
        game_state: current snapshot
        index: occupancy index for the snapshot
        you: the searching snake
        connection_threshold: branches at a divergence must keep this share of the board
        degree_threshold: minimum number of exits for every tile on the path

    Returns:
        Path to the chosen food, or [] if no food is reachable within health.
    """
    if not game_state.food:
        return []

    counter = itertools.count()
    frontier = [(0.0, next(counter), you.head)]
    parents: ParentMap = {}
    cost_so_far: Dict[Coord, int] = {you.head: 0}
    expanded: Set[Coord] = set()
    connectivity_cache: ConnectivityCache = {}

    while frontier:
        _, _, current = heapq.heappop(frontier)
        # stale entry, the tile was already expanded at a lower cost
        if current in expanded:
            continue
        expanded.add(current)
        current_cost = cost_so_far[current]

        if current != you.head and _is_food(index, current) and current_cost < you.health:
            return backtrack(current, parents)

        # keep the path clear of where our own body will be
        excluded = future_body(backtrack(current, parents), you.length)
        candidates = legal_neighbors(current, game_state, index, you, excluded=excluded)
        adj_tiles = rank_candidates(
            current,
            candidates,
            game_state,
            index,
            you,
            connection_threshold,
            degree_threshold,
            excluded=excluded,
            strict=True,
            cache=connectivity_cache,
        )

        for tile in adj_tiles:
            if tile in expanded:
                continue
            new_cost = current_cost + step_cost(index, tile)
            previous = cost_so_far.get(tile)
            if previous is None or new_cost < previous:
                cost_so_far[tile] = new_cost
                parents[tile] = current
                priority = new_cost + (closest_food(tile, game_state) or 0.0)
                heapq.heappush(frontier, (priority, next(counter), tile))

    logger.debug("a_star: no food reachable within %d health", you.health)
    return []


def bfs_nearest_food(
    game_state: GameState,
    index: BoardIndex,
    you: Snake,
    avoid_heads: bool = True,
) -> List[Coord]:
    """
    Unweighted breadth-first search to the nearest food.

    Ignores connectivity; used as a last attempt to eat when starving.
    Food is accepted only when the step count is below our health.
    """
    parents: ParentMap = {}
    depth: Dict[Coord, int] = {you.head: 0}
    frontier = deque([you.head])

    while frontier:
        current = frontier.popleft()
        if current != you.head and _is_food(index, current) and depth[current] < you.health:
            return backtrack(current, parents)

        for tile in legal_neighbors(current, game_state, index, you, avoid_heads):
            if tile not in depth:
                depth[tile] = depth[current] + 1
                parents[tile] = current
                frontier.append(tile)

    return []


def dfs_long(
    goal: Coord,
    game_state: GameState,
    index: BoardIndex,
    you: Snake,
    connection_threshold: float = 0.0,
    degree_threshold: int = 0,
) -> List[Coord]:
    """
    Find a long path that ends next to (then on) `goal`.

    Greedy approximation of the longest path: depth first, always trying the
    neighbour farthest from the goal before the others. Every tile is visited
    at most once, so the search is bounded by the board area.

    Returns:
        A path whose last tile is `goal`, or [] if none was found.
    """
    parents: ParentMap = {}
    visited = {you.head}
    stack = [you.head]

    while stack:
        current = stack.pop()
        if current.distance(goal) <= 1.0:
            if current != goal:
                parents[goal] = current
            return backtrack(goal, parents)

        excluded = future_body(backtrack(current, parents), you.length)
        candidates = [
            tile for tile in legal_neighbors(current, game_state, index, you, excluded=excluded)
            if tile not in visited
        ]
        adj_tiles = rank_candidates(
            current,
            candidates,
            game_state,
            index,
            you,
            connection_threshold,
            degree_threshold,
            excluded=excluded,
        )
        adj_tiles.sort(key=lambda tile: goal.distance(tile), reverse=True)

        for tile in adj_tiles:
            visited.add(tile)
            parents[tile] = current
        # farthest-from-goal tile on top of the stack
        stack.extend(reversed(adj_tiles))

    return []
