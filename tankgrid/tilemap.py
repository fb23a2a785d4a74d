"""A simple walls-and-floor grid used by agents and path finding."""

from __future__ import annotations

from enum import IntEnum

from tankgrid.types import Point


class MapTile(IntEnum):
    EMPTY = 0
    WALL = 1


class TileMap:
    """A grid bordered by walls, with a short test wall at row 6."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._tiles = [[MapTile.EMPTY] * width for _ in range(height)]

        for x in range(width):
            self.set_wall(Point(x, 0), True)
            self.set_wall(Point(x, height - 1), True)
        for y in range(height):
            self.set_wall(Point(0, y), True)
            self.set_wall(Point(width - 1, y), True)

        for x in range(4, 10):
            self.set_wall(Point(x, 6), True)

    def is_inside(self, p: Point) -> bool:
        return 0 <= p.x < self.width and 0 <= p.y < self.height

    def tile(self, p: Point) -> MapTile:
        """The tile at ``p``; anything outside the map counts as wall."""
        if not self.is_inside(p):
            return MapTile.WALL
        return self._tiles[p.y][p.x]

    def is_walkable(self, p: Point) -> bool:
        return self.tile(p) == MapTile.EMPTY

    def set_wall(self, p: Point, wall: bool) -> None:
        if not self.is_inside(p):
            return
        self._tiles[p.y][p.x] = MapTile.WALL if wall else MapTile.EMPTY