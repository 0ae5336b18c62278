"""
Coord value type - a board-relative (x, y) pair with (0,0) at bottom left.
"""

import math
from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class Coord:
    x: int
    y: int

    def __add__(self, other: "Coord") -> "Coord":
        return Coord(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Coord") -> "Coord":
        return Coord(self.x - other.x, self.y - other.y)

    def distance(self, other: "Coord") -> float:
        """Euclidean distance to another coordinate."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def manhattan(self, other: "Coord") -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    @classmethod
    def from_dict(cls, data: Dict[str, int]) -> "Coord":
        return cls(int(data["x"]), int(data["y"]))

    def to_dict(self) -> Dict[str, int]:
        return {"x": self.x, "y": self.y}

    def __repr__(self):
        return f"({self.x}, {self.y})"


ORIGIN = Coord(0, 0)

# Unit vectors, in the order moves are considered
DIRECTION_VECTORS: Dict[str, Coord] = {
    "up": Coord(0, 1),
    "down": Coord(0, -1),
    "left": Coord(-1, 0),
    "right": Coord(1, 0),
}


def direction_between(start: Coord, end: Coord):
    """
    Return the move name that takes `start` to the adjacent tile `end`,
    or None when the two tiles are not neighbours.
    """
    delta = end - start
    for name, vector in DIRECTION_VECTORS.items():
        if vector == delta:
            return name
    return None
