"""Timer-driven controllers that steer and fire enemy tanks."""

from __future__ import annotations

import random
from typing import Optional

from tankgrid.enemy import EnemyTank
from tankgrid.types import Direction, direction_delta

TICK_MS = 16
_DIRECTIONS = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


class MovementController:
    """Picks a random direction and steps one cell at a fixed interval."""

    def __init__(self, interval_ms: int = 700, rng: Optional[random.Random] = None) -> None:
        self.timer_ms = 0
        self.interval_ms = interval_ms
        self._rng = rng if rng is not None else random.Random()

    def tick(self, tank: EnemyTank) -> None:
        self.timer_ms += TICK_MS
        if self.timer_ms < self.interval_ms:
            return
        self.timer_ms = 0
        tank.direction = _DIRECTIONS[self._rng.randrange(4)]
        tank.set_cell(tank.cell() + direction_delta(tank.direction))


class ShootingController:
    """Requests a shot whenever its reload cooldown has run out."""

    def __init__(self, reload_ms: int = 900) -> None:
        self.cooldown_ms = 0
        self.reload_ms = reload_ms

    def tick(self, tank: EnemyTank) -> None:
        if self.cooldown_ms > 0:
            self.cooldown_ms -= TICK_MS
            return
        self.cooldown_ms = self.reload_ms
        tank.request_fire()


class EnemyAI:
    """Runs the movement and shooting controllers together."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.movement = MovementController(rng=rng)
        self.shooting = ShootingController()

    def tick(self, tank: EnemyTank) -> None:
        self.movement.tick(tank)
        self.shooting.tick(tank)