"""Core value types, enumerations and grid constants."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

TILE_SIZE = 32
GRID_WIDTH = 32
GRID_HEIGHT = 30
SIMULATION_INTERVAL_MS = 100


@dataclass(frozen=True)
class Point:
    """A position on the grid; integer for cells, float for render positions."""

    x: float = 0
    y: float = 0

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)


class TankType(IntEnum):
    """Who owns a tank or a bullet."""

    PLAYER = 0
    ENEMY = 1


class EnemyType(Enum):
    """Kinds of enemy tanks."""

    BASIC = 0
    FAST = 1
    ARMORED = 2
    POWER = 3


class Direction(Enum):
    """Movement and firing directions."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


class TileType(Enum):
    """Kinds of map tiles."""

    EMPTY = 0
    BRICK = 1
    STEEL = 2
    FOREST = 3
    WATER = 4
    ICE = 5
    BASE = 6


_DELTAS = {
    Direction.UP: Point(0, -1),
    Direction.DOWN: Point(0, 1),
    Direction.LEFT: Point(-1, 0),
    Direction.RIGHT: Point(1, 0),
}


def direction_delta(direction: Direction) -> Point:
    """Return the one-cell step for a direction."""
    return _DELTAS[direction]