"""
GameState entity - a snapshot of the board for a single decision.
"""

from typing import Any, Dict, Iterable, Optional, Tuple

from .constants import STANDARD_RULESET
from .coord import Coord
from .snake import Snake


class GameState:
    """
    A snapshot of the game at a specific turn.

    Attributes:
        width, height: board dimensions
        food: tuple of Coord holding food
        hazards: tuple of Coord covered by hazard sauce
        snakes: tuple of every snake still on the board (including ours)
        you_id: id of the snake we are deciding for
        turn: turn number reported by the engine
        ruleset: ruleset name, e.g. 'standard' or 'constrictor'
        game_id: engine game id
        timeout: per-turn deadline in milliseconds
    """

    def __init__(
        self,
        width: int,
        height: int,
        snakes: Iterable[Snake],
        food: Iterable[Coord] = (),
        hazards: Iterable[Coord] = (),
        you_id: Optional[str] = None,
        turn: int = 0,
        ruleset: str = STANDARD_RULESET,
        game_id: str = "",
        timeout: int = 500,
    ):
        self.width = width
        self.height = height
        self.snakes: Tuple[Snake, ...] = tuple(snakes)
        self.food: Tuple[Coord, ...] = tuple(food)
        self.hazards: Tuple[Coord, ...] = tuple(hazards)
        self.you_id = you_id
        self.turn = turn
        self.ruleset = ruleset
        self.game_id = game_id
        self.timeout = timeout

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "GameState":
        """
        Build a GameState from a Battlesnake move request body.

        Args:
            payload: dict with 'board' (required), 'you', 'game' and 'turn'

        Returns:
            The parsed snapshot.

        Raises:
            ValueError: If the payload is missing required fields.
        """
        try:
            board = payload["board"]
            snakes = [Snake.from_dict(s) for s in board["snakes"]]
            food = [Coord.from_dict(f) for f in board.get("food", [])]
            hazards = [Coord.from_dict(h) for h in board.get("hazards", [])]
            width = int(board["width"])
            height = int(board["height"])
        except (KeyError, TypeError) as exc:
            raise ValueError(f"Malformed game state payload: missing {exc}") from exc

        game = payload.get("game") or {}
        ruleset = (game.get("ruleset") or {}).get("name") or STANDARD_RULESET
        you = payload.get("you") or {}

        return cls(
            width=width,
            height=height,
            snakes=snakes,
            food=food,
            hazards=hazards,
            you_id=you.get("id"),
            turn=int(payload.get("turn", 0)),
            ruleset=ruleset,
            game_id=str(game.get("id", "")),
            timeout=int(game.get("timeout", 500)),
        )

    def get_snake(self, snake_id: Optional[str]) -> Optional[Snake]:
        for snake in self.snakes:
            if snake.id == snake_id:
                return snake
        return None

    @property
    def you(self) -> Optional[Snake]:
        return self.get_snake(self.you_id)

    def in_bounds(self, tile: Coord) -> bool:
        return 0 <= tile.x < self.width and 0 <= tile.y < self.height

    @property
    def center(self) -> Tuple[float, float]:
        return ((self.width - 1) / 2.0, (self.height - 1) / 2.0)

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        H = hazard
        T = snake body
        0,1,2... = snake head (showing snake index)
        With (0,0) at bottom left and x-axis labels at bottom
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        for tile in self.hazards:
            board[tile.y][tile.x] = 'H'

        for tile in self.food:
            board[tile.y][tile.x] = 'F'

        # Heads last so a stacked tail never hides them
        for snake in self.snakes:
            for segment in snake.body[1:]:
                board[segment.y][segment.x] = 'T'
        for i, snake in enumerate(self.snakes):
            board[snake.head.y][snake.head.x] = str(i % 10)

        result = []
        for y in range(self.height - 1, -1, -1):
            result.append(f"{y:2d} {' '.join(board[y])}")

        result.append("   " + " ".join(str(i % 10) for i in range(self.width)))

        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState turn={self.turn}, size={self.width}x{self.height}, "
            f"snakes={len(self.snakes)}, food={len(self.food)}, ruleset={self.ruleset}>"
        )
