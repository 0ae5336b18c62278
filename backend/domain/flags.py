"""
Occupancy flags for a single board tile.

A tile can carry several flags at once (food lying in a hazard, for example),
so the board index stores the union of every entity sitting on it.
"""

from enum import Flag


class Occupancy(Flag):
    EMPTY = 0x01
    FOOD = 0x02
    ALLY = 0x04
    SNAKE = 0x08
    HAZARD = 0x10

    # Bits that stop a snake from moving onto the tile
    BLOCKING = SNAKE


def is_free(flags: Occupancy) -> bool:
    """A tile is free to enter by default when no blocking bit is set."""
    return not (flags & Occupancy.BLOCKING)
