"""Projectiles and the reload logic that creates them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from tankgrid.types import Direction, Point, TankType, direction_delta


class Bullet:
    """A projectile moving tile by tile, in sub-steps for smooth rendering."""

    # About 130 ms per tile: a shell covers two tiles while a basic tank covers one.
    DEFAULT_STEP_INTERVAL_MS = 130
    # Fewer sub-steps than a tank (8 versus 16) keep the shell visibly faster.
    STEPS_PER_TILE = 8

    def __init__(
        self,
        cell: Point,
        direction: Direction,
        owner_type: TankType,
        step_interval_ms: int = DEFAULT_STEP_INTERVAL_MS,
        can_pierce_steel: bool = False,
    ) -> None:
        self.cell = Point(cell.x, cell.y)
        self.direction = direction
        self.owner_type = owner_type
        self.step_interval_ms = step_interval_ms
        self.can_pierce_steel = can_pierce_steel
        self.alive = True
        self.spawn_explosion_on_destroy = True
        self._elapsed_ms = 0.0
        self._sub_step_interval_ms = step_interval_ms / self.STEPS_PER_TILE
        self._sub_tile_progress = 0
        start = Point(float(cell.x), float(cell.y))
        self.render_position = start
        self.previous_render_position = start

    def direction_delta(self) -> Point:
        return direction_delta(self.direction)

    def next_cell(self) -> Point:
        return self.cell + self.direction_delta()

    def visual_tile_position(self) -> Point:
        """The cell plus the fraction of the way to the next one."""
        progress = self._sub_tile_progress / self.STEPS_PER_TILE
        delta = self.direction_delta()
        return Point(
            float(self.cell.x) + delta.x * progress,
            float(self.cell.y) + delta.y * progress,
        )

    def update(self, delta_ms: int) -> None:
        if not self.alive:
            return

        self.previous_render_position = self.render_position
        self._elapsed_ms += float(delta_ms)
        if self._sub_step_interval_ms <= 0.0:
            self._update_render_position()
            return

        while self._elapsed_ms >= self._sub_step_interval_ms:
            self._elapsed_ms -= self._sub_step_interval_ms
            self._sub_tile_progress += 1
            if self._sub_tile_progress >= self.STEPS_PER_TILE:
                self._sub_tile_progress = 0
                self.cell = self.cell + self.direction_delta()
            self._update_render_position()

        self._update_render_position()

    def destroy(self, spawn_explosion: bool = True) -> None:
        self.spawn_explosion_on_destroy = spawn_explosion
        self.alive = False

    def _update_render_position(self) -> None:
        self.render_position = self.visual_tile_position()


@dataclass
class WeaponSystem:
    """Tracks reload time and fires bullets when loaded."""

    reload_ms: int = 500
    cooldown_ms: int = 0

    def tick(self, delta_ms: int) -> None:
        if self.cooldown_ms > 0:
            self.cooldown_ms = max(0, self.cooldown_ms - delta_ms)

    def can_shoot(self) -> bool:
        return self.cooldown_ms == 0

    def fire(
        self,
        cell: Point,
        direction: Direction,
        owner: TankType,
        bullet_step_interval_ms: int,
        can_pierce_steel: bool,
    ) -> Optional[Bullet]:
        """Return a bullet in the cell ahead, or None while reloading."""
        if not self.can_shoot():
            return None
        self.cooldown_ms = self.reload_ms
        return Bullet(
            cell + direction_delta(direction),
            direction,
            owner,
            bullet_step_interval_ms,
            can_pierce_steel,
        )