"""The player's tank, driven by keyboard input and upgraded by stars."""

from __future__ import annotations

from typing import Any, Optional, Protocol

from tankgrid.tank import Tank
from tankgrid.types import Direction, Point, TankType, TileType, direction_delta

# Movement and bullet speeds follow the classic console game: the basic tank
# crosses a tile in roughly 256 ms, stars raise that pace, and bullets speed up.
_STAR_SPEEDS = {1: 4.5, 2: 5.2, 3: 5.8}
_STAR_BULLET_INTERVALS = {1: 110, 2: 95, 3: 85}


class InputSource(Protocol):
    def current_direction(self) -> Optional[Direction]: ...

    def consume_fire(self) -> bool: ...


class TileGrid(Protocol):
    def is_walkable(self, p: Point) -> bool: ...

    def tile(self, p: Point) -> Any: ...


def _should_slide_on_ice(grid: Optional[TileGrid], cell: Point, direction: Direction) -> bool:
    if grid is None:
        return False
    if grid.tile(cell).type != TileType.ICE:
        return False
    return grid.is_walkable(cell + direction_delta(direction))


class PlayerTank(Tank):
    """A tank steered by an input source, with star upgrades and a shield."""

    MAX_STARS = 3

    def __init__(
        self,
        cell: Point,
        input: Optional[InputSource] = None,
        map: Optional[TileGrid] = None,
    ) -> None:
        super().__init__(cell)
        self.input = input
        self.map = map
        self.stars = 0
        self.invincibility_timer_ms = 0
        self._sliding = False
        self.health.lives = 3
        self.tank_type = TankType.PLAYER
        self._apply_upgrades()

    # --- upgrades -------------------------------------------------------

    def add_star(self) -> None:
        if self.stars >= self.MAX_STARS:
            return
        self.stars += 1
        self._apply_upgrades()

    def can_pierce_steel(self) -> bool:
        return self.stars >= self.MAX_STARS

    def bullet_step_interval_ms(self) -> int:
        level = min(self.stars, self.MAX_STARS)
        if level in _STAR_BULLET_INTERVALS:
            return _STAR_BULLET_INTERVALS[level]
        return super().bullet_step_interval_ms()

    def bullet_can_pierce_steel(self) -> bool:
        return self.can_pierce_steel()

    def _movement_speed(self) -> float:
        return _STAR_SPEEDS.get(min(self.stars, self.MAX_STARS), self.DEFAULT_TILES_PER_SECOND)

    def _reload_time_ms(self) -> int:
        return 250 if self.stars >= 2 else 400

    def _apply_upgrades(self) -> None:
        self.set_speed(self._movement_speed())
        self.weapon.reload_ms = self._reload_time_ms()

    # --- shield ---------------------------------------------------------

    def receive_damage(self, dmg: int) -> bool:
        if self.is_invincible():
            return False
        return super().receive_damage(dmg)

    def activate_invincibility(self, duration_ms: int) -> None:
        self.invincibility_timer_ms = max(self.invincibility_timer_ms, duration_ms)

    def is_invincible(self) -> bool:
        return self.invincibility_timer_ms > 0

    def tick_bonus_effects(self, delta_ms: int) -> None:
        if self.invincibility_timer_ms <= 0:
            return
        self.invincibility_timer_ms = max(0, self.invincibility_timer_ms - delta_ms)

    # --- movement -------------------------------------------------------

    def update_with_delta(self, delta_ms: int) -> None:
        super().update_with_delta(delta_ms)

        if self.is_destroyed() or self.input is None:
            return

        desired = self.input.current_direction()
        if not self._sliding and desired is None:
            return

        if not self._sliding and desired is not None and self.is_aligned_to_grid():
            self.direction = desired

        if self.step_interval_ms <= 0:
            return

        self.step_accumulator_ms += delta_ms
        while self.step_accumulator_ms >= self.step_interval_ms:
            self.step_accumulator_ms -= self.step_interval_ms

            if self.sub_tile_progress == 0 and desired is not None and self.direction != desired:
                self.direction = desired

            next_cell = self.cell() + direction_delta(self.direction)
            if self.map is not None and not self.map.is_walkable(next_cell):
                self.step_accumulator_ms = 0
                self.sub_tile_progress = 0
                self._sliding = False
                self.update_render_position(self.direction)
                break

            self.sub_tile_progress += 1
            self.update_render_position(self.direction)

            if self.sub_tile_progress >= self.STEPS_PER_TILE:
                self.set_cell(next_cell)
                self._sliding = _should_slide_on_ice(self.map, self.cell(), self.direction)

        if self.input.consume_fire():
            self.request_fire()