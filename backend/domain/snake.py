"""
Snake entity for the decision core.
"""

from typing import Any, Dict, Optional, Tuple

from .constants import MAX_HEALTH
from .coord import Coord


class Snake:
    """
    Represents a snake on the board.

    Attributes:
        id: unique snake identifier for the game
        name: display name
        health: 0-100, reset to 100 when the snake eats
        body: tuple of Coord from head at index 0 to tail at the end
        length: stored length (lags the body by one turn after eating)
    """

    def __init__(
        self,
        snake_id: str,
        body: Tuple[Coord, ...],
        health: int = MAX_HEALTH,
        length: Optional[int] = None,
        name: Optional[str] = None,
    ):
        self.id = snake_id
        self.name = name or snake_id
        self.health = health
        self.body = tuple(body)
        self.length = len(self.body) if length is None else length

    @property
    def head(self) -> Coord:
        """Return the head position (first element)."""
        return self.body[0]

    @property
    def tail(self) -> Coord:
        return self.body[-1]

    @property
    def will_vacate_tail(self) -> bool:
        """The tail tile frees up next turn unless the snake just ate."""
        return self.health < MAX_HEALTH

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Snake":
        body = tuple(Coord.from_dict(segment) for segment in data["body"])
        if not body:
            raise ValueError(f"Snake {data.get('id')!r} has an empty body")
        return cls(
            snake_id=str(data["id"]),
            body=body,
            health=int(data.get("health", MAX_HEALTH)),
            length=int(data.get("length", len(body))),
            name=data.get("name"),
        )

    def __eq__(self, other):
        return isinstance(other, Snake) and other.id == self.id

    def __hash__(self):
        return hash(self.id)

    def __repr__(self):
        return f"<Snake id={self.id} head={self.head} length={self.length} health={self.health}>"
