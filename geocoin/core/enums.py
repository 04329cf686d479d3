"""Enumerations used throughout the game."""

from __future__ import annotations

from enum import Enum, IntEnum, unique


@unique
class Direction(IntEnum):
    """Cardinal movement directions, one tile per step."""

    NORTH = 0
    SOUTH = 1
    EAST = 2
    WEST = 3


# (d_lat, d_lng) in tiles for each direction
DIRECTION_OFFSETS: dict[int, tuple[int, int]] = {
    Direction.NORTH: (1, 0),
    Direction.SOUTH: (-1, 0),
    Direction.EAST: (0, 1),
    Direction.WEST: (0, -1),
}


@unique
class EventCategory(str, Enum):
    """Categories of gameplay events recorded in the session feed."""

    MOVE = "move"
    SPAWN = "spawn"
    COLLECT = "collect"
    DEPOSIT = "deposit"
    RESET = "reset"
    TRACKING = "tracking"
