"""Base class for anything that has a position on the tile grid."""

from __future__ import annotations

import math

from tankgrid.types import Point


class GameObject:
    """An entity positioned in tile coordinates (fractional allowed)."""

    def __init__(self, position: Point = Point(0.0, 0.0)) -> None:
        self.position = Point(float(position.x), float(position.y))

    def cell(self) -> Point:
        """The integer cell containing the position."""
        return Point(math.floor(self.position.x), math.floor(self.position.y))

    def set_cell(self, cell: Point) -> None:
        self.position = Point(float(cell.x), float(cell.y))

    def center(self) -> Point:
        return self.position + Point(0.5, 0.5)

    def bounding_box(self) -> tuple[float, float, float, float]:
        """The occupied area as (left, top, width, height)."""
        return (self.position.x, self.position.y, 1.0, 1.0)

    def update(self, delta_ms: int) -> None:
        """Advance the object by ``delta_ms``; the base object does nothing."""