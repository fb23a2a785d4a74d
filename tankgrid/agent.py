"""Grid agents that follow paths or wander at random."""

from __future__ import annotations

import random
from typing import Iterable, Optional, Protocol

from tankgrid.types import Point


class WalkableGrid(Protocol):
    def is_walkable(self, p: Point) -> bool: ...


class Agent:
    """A logical tank that moves cell by cell along a path."""

    def __init__(self, x: int, y: int, grid: Optional[WalkableGrid]) -> None:
        self.grid = grid
        self.cell = Point(x, y)
        self.prev_cell = Point(x, y)
        self.path: list[Point] = []

    def set_path(self, path: Iterable[Point]) -> None:
        self.path = list(path)

    def update(self) -> None:
        """Take the next step of the path, if any."""
        if not self.path:
            return
        nxt = self.path.pop(0)
        self.move_to(nxt.x, nxt.y)

    def move_to(self, x: int, y: int) -> None:
        if self.grid is None:
            return
        nxt = Point(x, y)
        if not self.grid.is_walkable(nxt):
            return
        self.prev_cell = self.cell
        self.cell = nxt


_PATROL_STEPS = (Point(-1, 0), Point(1, 0), Point(0, -1), Point(0, 1))


class BotAgent(Agent):
    """An agent that follows its path and patrols randomly otherwise."""

    def __init__(
        self,
        x: int,
        y: int,
        grid: Optional[WalkableGrid],
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__(x, y, grid)
        self._rng = rng if rng is not None else random.Random()

    def update(self) -> None:
        if self.path:
            super().update()
            return
        self.patrol()

    def patrol(self) -> None:
        """Try a single step in a random direction."""
        if self.grid is None:
            return
        nxt = self.cell + _PATROL_STEPS[self._rng.randrange(4)]
        if not self.grid.is_walkable(nxt):
            return
        self.prev_cell = self.cell
        self.cell = nxt