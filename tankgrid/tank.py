"""Common behaviour of player and enemy tanks."""

from __future__ import annotations

from typing import Optional

from tankgrid.bullet import Bullet, WeaponSystem
from tankgrid.gameobject import GameObject
from tankgrid.health import HealthSystem
from tankgrid.types import Direction, Point, TankType, direction_delta


class Tank(GameObject):
    """A tank with a cell, a facing, health, a weapon and sub-tile movement."""

    STEPS_PER_TILE = 16
    DEFAULT_TILES_PER_SECOND = 3.9
    DEFAULT_DELTA_MS = 16
    DESTRUCTION_DELAY_MS = 350

    def __init__(self, cell: Point) -> None:
        super().__init__(cell)
        self._cell = Point(cell.x, cell.y)
        self.tank_type = TankType.PLAYER
        self.direction = Direction.UP

        self.health = HealthSystem()
        self.health.set_max_health(1)
        self.health.lives = 1
        self.weapon = WeaponSystem(reload_ms=400)

        self._speed = self.DEFAULT_TILES_PER_SECOND
        self._step_interval_ms = 0
        self.step_accumulator_ms = 0
        self.sub_tile_progress = 0
        self.fire_requested = False
        self._destroyed = False
        self.destruction_timer_ms = 0

        self.render_position = Point(float(cell.x), float(cell.y))
        self.previous_render_position = self.render_position
        self.set_speed(self._speed)
        self.sync_render_positions(True)

    # --- position -------------------------------------------------------

    def cell(self) -> Point:
        return self._cell

    def set_cell(self, cell: Point) -> None:
        self._cell = Point(cell.x, cell.y)
        self.sync_render_positions(False)
        self.sub_tile_progress = 0

    def sync_render_positions(self, reset_previous: bool = True) -> None:
        self.render_position = Point(float(self._cell.x), float(self._cell.y))
        if reset_previous:
            self.previous_render_position = self.render_position
        self.position = self.render_position

    def update_render_position(self, direction: Direction) -> None:
        """Place the render position part of the way towards the next cell."""
        delta = direction_delta(direction)
        fraction = self.sub_tile_progress / self.STEPS_PER_TILE
        self.render_position = Point(
            float(self._cell.x) + delta.x * fraction,
            float(self._cell.y) + delta.y * fraction,
        )
        self.position = self.render_position

    def is_aligned_to_grid(self) -> bool:
        return self.sub_tile_progress == 0

    # --- speed ----------------------------------------------------------

    @property
    def speed(self) -> float:
        return self._speed

    @property
    def step_interval_ms(self) -> int:
        return self._step_interval_ms

    def set_speed(self, speed: float) -> None:
        """Set the speed in tiles per second."""
        self._speed = speed
        self._step_interval_ms = self.step_interval_ms_for_speed(speed)

    @classmethod
    def step_interval_ms_for_speed(cls, speed: float) -> int:
        """Milliseconds per sub-step for a speed in tiles per second; 0 means still."""
        if speed <= 0.0:
            return 0
        steps_per_second = speed * cls.STEPS_PER_TILE
        return max(1, int(1000 / steps_per_second))

    # --- destruction ----------------------------------------------------

    def is_destroyed(self) -> bool:
        return self._destroyed

    def is_destruction_finished(self) -> bool:
        return self._destroyed and self.destruction_timer_ms <= 0

    def mark_destroyed(self) -> None:
        if self._destroyed:
            return
        self._destroyed = True
        self.destruction_timer_ms = self.DESTRUCTION_DELAY_MS

    # --- combat ---------------------------------------------------------

    def request_fire(self) -> None:
        self.fire_requested = True

    def receive_damage(self, dmg: int) -> bool:
        """Apply damage; returns whether it was taken."""
        self.health.take_damage(dmg)
        return True

    def try_shoot(self) -> Optional[Bullet]:
        """Fire if a shot was requested and the weapon is loaded."""
        if self._destroyed or not self.fire_requested:
            return None
        self.fire_requested = False
        return self.weapon.fire(
            self.cell(),
            self.direction,
            self.tank_type,
            self.bullet_step_interval_ms(),
            self.bullet_can_pierce_steel(),
        )

    def bullet_step_interval_ms(self) -> int:
        return Bullet.DEFAULT_STEP_INTERVAL_MS

    def bullet_can_pierce_steel(self) -> bool:
        return False

    # --- update ---------------------------------------------------------

    def update(self) -> None:
        self.update_with_delta(self.DEFAULT_DELTA_MS)

    def update_with_delta(self, delta_ms: int) -> None:
        self.previous_render_position = self.render_position
        if self._destroyed:
            self.destruction_timer_ms -= delta_ms
            return
        self.weapon.tick(delta_ms)