"""
Tests for the board index and tile legality rules.
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import Coord, GameState, Occupancy, Snake  # noqa: E402
from search import (  # noqa: E402
    board_neighbors,
    build_index,
    can_enter,
    legal_neighbors,
    tile_flags,
)


def make_state(snakes, food=(), hazards=(), width=11, height=11, you_id=None):
    return GameState(
        width=width,
        height=height,
        snakes=snakes,
        food=food,
        hazards=hazards,
        you_id=you_id or snakes[0].id,
    )


class TestBoardIndex:
    """Tests for build_index."""

    def test_flags_for_each_entity(self, load_board):
        game_state, you = load_board("food_behind_hazard")
        index = build_index(game_state)
        assert tile_flags(index, Coord(0, 10)) == Occupancy.FOOD
        assert tile_flags(index, Coord(4, 2)) == Occupancy.SNAKE

    def test_overlapping_entities_are_merged(self, load_board):
        """Food lying in a hazard carries both bits."""
        game_state, _ = load_board("food_behind_hazard")
        index = build_index(game_state)
        assert tile_flags(index, Coord(8, 4)) == Occupancy.FOOD | Occupancy.HAZARD

    def test_missing_tiles_are_empty(self, load_board):
        game_state, _ = load_board("food_behind_hazard")
        index = build_index(game_state)
        assert Coord(7, 7) not in index
        assert tile_flags(index, Coord(7, 7)) == Occupancy.EMPTY

    def test_stacked_segments_are_one_entry(self):
        snake = Snake("a", (Coord(1, 1), Coord(1, 1), Coord(1, 1)))
        index = build_index(make_state([snake]))
        assert index == {Coord(1, 1): Occupancy.SNAKE}


class TestCanEnter:
    """Tests for can_enter."""

    def test_avoid_wall(self, load_board):
        """A snake at the top edge cannot move up off the board."""
        game_state, you = load_board("avoid_wall")
        index = build_index(game_state)
        assert not can_enter(Coord(5, 11), game_state, index, you)

    @pytest.mark.parametrize("tile", [
        Coord(-1, 0), Coord(0, -1), Coord(11, 0), Coord(0, 11), Coord(-3, 20),
    ])
    def test_out_of_board_is_never_legal(self, load_board, tile):
        game_state, you = load_board("avoid_wall")
        index = build_index(game_state)
        assert not can_enter(tile, game_state, index, you)
        assert not can_enter(tile, game_state, index, you, avoid_heads=False)

    def test_avoid_other_snake_body(self, load_board):
        game_state, you = load_board("snake_tail")
        index = build_index(game_state)
        assert not can_enter(Coord(2, 6), game_state, index, you)
        assert can_enter(Coord(4, 6), game_state, index, you)

    def test_own_neck_is_blocked(self, load_board):
        game_state, you = load_board("avoid_wall")
        index = build_index(game_state)
        assert not can_enter(Coord(5, 9), game_state, index, you)

    def test_tail_of_fed_snake_is_blocked(self):
        """A snake at full health just ate, so its tail stays put."""
        other = Snake("other", (Coord(3, 3), Coord(3, 4), Coord(3, 5)), health=100)
        you = Snake("you", (Coord(5, 5), Coord(5, 4), Coord(5, 3)), health=90)
        game_state = make_state([you, other])
        index = build_index(game_state)
        assert not can_enter(Coord(3, 5), game_state, index, you)

    def test_tail_of_hungry_snake_is_free(self):
        other = Snake("other", (Coord(3, 3), Coord(3, 4), Coord(3, 5)), health=99)
        you = Snake("you", (Coord(5, 5), Coord(5, 4), Coord(5, 3)), health=90)
        game_state = make_state([you, other])
        index = build_index(game_state)
        assert can_enter(Coord(3, 5), game_state, index, you)

    def test_own_tail_follows_the_same_rule(self):
        you = Snake("you", (Coord(2, 2), Coord(2, 3), Coord(3, 3), Coord(3, 2)), health=70)
        game_state = make_state([you])
        index = build_index(game_state)
        assert can_enter(Coord(3, 2), game_state, index, you)

        fed = Snake("you", you.body, health=100)
        game_state = make_state([fed])
        assert not can_enter(Coord(3, 2), game_state, build_index(game_state), fed)

    def test_stacked_tail_is_blocked(self):
        """A tail that sits on another segment of the body is not vacated."""
        you = Snake("you", (Coord(5, 5), Coord(5, 4), Coord(5, 4)), health=99)
        game_state = make_state([you])
        index = build_index(game_state)
        assert not can_enter(Coord(5, 4), game_state, index, you)

    def test_non_tail_segment_never_legal(self):
        other = Snake("other", (Coord(3, 3), Coord(3, 4), Coord(3, 5)), health=10)
        you = Snake("you", (Coord(8, 8), Coord(8, 7)), health=10)
        game_state = make_state([you, other])
        index = build_index(game_state)
        assert not can_enter(Coord(3, 4), game_state, index, you)
        assert not can_enter(Coord(3, 4), game_state, index, you, avoid_heads=False)

    def test_avoid_head_to_head(self, load_board):
        """Equal-length snakes must not contest the same tile."""
        game_state, you = load_board("head_to_head")
        index = build_index(game_state)
        assert not can_enter(Coord(5, 5), game_state, index, you)
        assert can_enter(Coord(6, 4), game_state, index, you)

    def test_contested_tile_rejected_by_both_snakes(self, load_board):
        game_state, _ = load_board("head_to_head")
        index = build_index(game_state)
        for snake in game_state.snakes:
            assert not can_enter(Coord(5, 5), game_state, index, snake)

    def test_head_veto_can_be_relaxed(self, load_board):
        game_state, you = load_board("head_to_head")
        index = build_index(game_state)
        assert can_enter(Coord(5, 5), game_state, index, you, avoid_heads=False)

    def test_shorter_snake_head_is_not_a_threat(self):
        you = Snake("you", (Coord(5, 4), Coord(5, 3), Coord(5, 2), Coord(5, 1)), health=80)
        small = Snake("small", (Coord(4, 5), Coord(3, 5)), health=80)
        game_state = make_state([you, small])
        index = build_index(game_state)
        assert can_enter(Coord(5, 5), game_state, index, you)
        # the smaller snake sees us as a threat
        assert not can_enter(Coord(5, 5), game_state, index, small)


class TestNeighbors:
    """Tests for board_neighbors and legal_neighbors."""

    def test_head_at_wall_has_two_legal_moves(self, load_board):
        game_state, you = load_board("avoid_wall")
        index = build_index(game_state)
        adj = legal_neighbors(you.head, game_state, index, you)
        assert sorted(adj, key=lambda c: c.x) == [Coord(4, 10), Coord(6, 10)]

    def test_corner_board_neighbors(self):
        game_state = make_state([Snake("a", (Coord(5, 5),))])
        assert board_neighbors(Coord(0, 0), game_state) == [Coord(0, 1), Coord(1, 0)]

    def test_excluded_tiles_are_skipped(self, load_board):
        game_state, you = load_board("avoid_wall")
        index = build_index(game_state)
        adj = legal_neighbors(you.head, game_state, index, you, excluded={Coord(4, 10)})
        assert adj == [Coord(6, 10)]
