"""
Move orchestrator - sequences the searches into one decision per turn.

Tiers are tried in strict priority order and the first one that produces a
move wins:
  1) escape   - we are boxed in: run a long path toward the key hole
  2) feed     - weighted search to the nearest affordable food
  3) fallback - best-connected neighbour, first strict then relaxed
  4) default  - nothing is legal, forfeit with "up"
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from domain.constants import (
    BOX_THRESHOLD,
    CONNECTION_THRESHOLD,
    CONSTRICTOR_RULESET,
    CRITICAL_HEALTH,
    DEFAULT_MOVE,
    DEGREE_THRESHOLD,
    EVASION_RADIUS,
)
from domain.coord import Coord, direction_between
from domain.game_state import GameState
from domain.snake import Snake
from search import (
    BoardIndex,
    a_star,
    bfs_nearest_food,
    build_index,
    can_enter,
    dfs_long,
    find_key_hole,
    inside_box,
    legal_neighbors,
    rank_candidates,
)
from .base import Player

logger = logging.getLogger(__name__)

ESCAPE = "escape"
FEED = "feed"
STARVING = "starving"
FALLBACK = "fallback"
RISKY = "risky"
LAST_RESORT = "last_resort"


@dataclass
class Decision:
    direction: str
    state: str
    target: Optional[Coord] = None


class BattlesnakePlayer(Player):
    """
    Reactive player: every call rebuilds the board index from the snapshot
    and carries nothing over to the next turn. `last_decision` only reports
    how the most recent move was chosen.
    """

    def __init__(self, snake_id: Optional[str] = None):
        super().__init__(snake_id)
        self.last_decision: Optional[Decision] = None

    def get_move(self, game_state: GameState) -> str:
        decision = self.decide(game_state)
        self.last_decision = decision
        return decision.direction

    def decide(self, game_state: GameState) -> Decision:
        you = self.find_self(game_state)
        if you is None:
            logger.warning("Snake %s is not on the board, moving %s", self.snake_id, DEFAULT_MOVE)
            return Decision(DEFAULT_MOVE, LAST_RESORT)

        index = build_index(game_state)
        decision = (
            self._escape(game_state, index, you)
            or self._feed(game_state, index, you)
            or self._fallback(game_state, index, you)
            or Decision(DEFAULT_MOVE, LAST_RESORT)
        )

        logger.info(
            "MOVE %d: %s via %s%s",
            game_state.turn,
            decision.direction,
            decision.state,
            f" -> {decision.target}" if decision.target is not None else "",
        )
        return decision

    def _first_step(self, you: Snake, path: List[Coord], state: str) -> Optional[Decision]:
        if not path:
            return None
        direction = direction_between(you.head, path[0])
        if direction is None:
            return None
        return Decision(direction, state, path[-1])

    def _escape(self, game_state: GameState, index: BoardIndex, you: Snake) -> Optional[Decision]:
        if game_state.ruleset == CONSTRICTOR_RULESET:
            return None
        if not inside_box(you, game_state, index, BOX_THRESHOLD):
            return None

        key_hole = find_key_hole(game_state, index, you)
        if key_hole is None:
            logger.debug("Boxed in but nothing blocks the region")
            return None

        path = dfs_long(key_hole, game_state, index, you)
        # the head-to-head veto may have changed since the path was laid down
        if not path or not can_enter(path[0], game_state, index, you):
            logger.debug("No usable escape path toward %s", key_hole)
            return None
        return self._first_step(you, path, ESCAPE)

    def _feed(self, game_state: GameState, index: BoardIndex, you: Snake) -> Optional[Decision]:
        path = a_star(game_state, index, you, CONNECTION_THRESHOLD, DEGREE_THRESHOLD)
        decision = self._first_step(you, path, FEED)
        if decision is not None:
            return decision

        if you.health > CRITICAL_HEALTH:
            return None
        path = bfs_nearest_food(game_state, index, you)
        if path and can_enter(path[0], game_state, index, you):
            return self._first_step(you, path, STARVING)
        return None

    def _is_threatened(self, game_state: GameState, you: Snake) -> bool:
        """True when an equal or longer snake's head is close to ours."""
        return any(
            snake.id != you.id
            and snake.length >= you.length
            and snake.head.distance(you.head) <= EVASION_RADIUS
            for snake in game_state.snakes
        )

    def _fallback(self, game_state: GameState, index: BoardIndex, you: Snake) -> Optional[Decision]:
        candidates = legal_neighbors(you.head, game_state, index, you)
        ranked = rank_candidates(
            you.head,
            candidates,
            game_state,
            index,
            you,
            CONNECTION_THRESHOLD,
            DEGREE_THRESHOLD,
            strict=True,
            evasive=self._is_threatened(game_state, you),
        )
        if ranked:
            return Decision(direction_between(you.head, ranked[0]), FALLBACK, ranked[0])

        logger.debug("No safe neighbour, relaxing the head-to-head veto")
        candidates = legal_neighbors(you.head, game_state, index, you, avoid_heads=False)
        ranked = rank_candidates(
            you.head,
            candidates,
            game_state,
            index,
            you,
            0.0,
            0,
            avoid_heads=False,
        )
        if ranked:
            return Decision(direction_between(you.head, ranked[0]), RISKY, ranked[0])
        return None


def decide(game_state: GameState, self_id: Optional[str] = None) -> str:
    """
    Choose a move for `self_id` (defaults to the snapshot's own snake).

    Always returns one of "up", "down", "left", "right".
    """
    return BattlesnakePlayer(self_id or game_state.you_id).get_move(game_state)
