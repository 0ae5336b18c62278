"""
Search algorithms used by the move orchestrator.

Everything here is a pure function of a GameState and the BoardIndex built
from it; nothing is cached between calls.
"""

from .board_index import BoardIndex, build_index, tile_flags
from .legality import can_enter, legal_neighbors, board_neighbors, adjacent_to_bigger_head
from .connectivity import num_free_tiles, percent_connected, rank_candidates, tile_degree
from .paths import backtrack, a_star, bfs_nearest_food, dfs_long
from .escape import inside_box, find_key_hole

__all__ = [
    'BoardIndex', 'build_index', 'tile_flags',
    'can_enter', 'legal_neighbors', 'board_neighbors', 'adjacent_to_bigger_head',
    'num_free_tiles', 'percent_connected', 'rank_candidates', 'tile_degree',
    'backtrack', 'a_star', 'bfs_nearest_food', 'dfs_long',
    'inside_box', 'find_key_hole',
]
