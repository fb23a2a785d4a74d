"""Enemy tanks: per-type stats, timed firing and simple wandering."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Optional, Protocol

from tankgrid.tank import Tank
from tankgrid.types import Direction, EnemyType, Point, TankType, TileType, direction_delta

Color = tuple[int, int, int]

FIRE_JITTER_MS = 200
HIT_FEEDBACK_DURATION_MS = 120
HIT_FEEDBACK_COLOR: Color = (230, 230, 230)
FALLBACK_COLOR: Color = (100, 120, 180)

_OPPOSITE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class EnemyMap(Protocol):
    def is_inside(self, p: Point) -> bool: ...

    def is_walkable(self, p: Point) -> bool: ...

    def tile(self, p: Point) -> Any: ...


@dataclass(frozen=True)
class EnemyStats:
    """Movement, armour, firing and colouring of one enemy kind."""

    steps_per_tile: int = 0
    step_interval_ms: int = 0
    armor_hits: int = 1
    drops_bonus: bool = False
    fire_cooldown_ms: int = 1000
    base_color: Optional[Color] = None
    damaged_color: Optional[Color] = None


_STATS_TABLE = (
    EnemyStats(Tank.STEPS_PER_TILE, 16, 1, False, 1000, (100, 120, 180), (120, 140, 200)),
    EnemyStats(Tank.STEPS_PER_TILE, 12, 1, False, 1000, (180, 140, 120), (200, 160, 140)),
    EnemyStats(Tank.STEPS_PER_TILE, 16, 3, False, 1200, (90, 90, 120), (200, 170, 110)),
    EnemyStats(Tank.STEPS_PER_TILE, 16, 1, True, 1000, (120, 150, 90), (140, 170, 110)),
)


def stats_for_type(enemy_type: EnemyType) -> EnemyStats:
    """The stats of an enemy kind."""
    index = min(max(enemy_type.value, 0), len(_STATS_TABLE) - 1)
    return _STATS_TABLE[index]


def tiles_per_second_from_stats(stats: EnemyStats) -> float:
    """Movement speed implied by the stats, or the default speed if unset."""
    if stats.steps_per_tile <= 0 or stats.step_interval_ms <= 0:
        return Tank.DEFAULT_TILES_PER_SECOND
    return 1000.0 / (stats.steps_per_tile * stats.step_interval_ms)


class EnemyTank(Tank):
    """An enemy that wanders the map and fires on a jittered timer."""

    def __init__(
        self,
        cell: Point,
        enemy_type: EnemyType = EnemyType.BASIC,
        map: Optional[EnemyMap] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__(cell)
        self.map = map
        self.enemy_type = enemy_type
        self.stats = stats_for_type(enemy_type)
        self.frozen = False
        self.fire_elapsed_ms = 0
        self.fire_interval_ms = 1000
        self.move_elapsed_ms = 0
        self.move_interval_ms = 600
        self.hit_feedback_timer_ms = 0
        self._sliding = False
        self._rng = rng if rng is not None else random.Random()

        self.direction = Direction.DOWN
        self.tank_type = TankType.ENEMY
        self._apply_stats()
        self._reset_fire_interval()

    # --- stats ----------------------------------------------------------

    @property
    def max_armor_hits(self) -> int:
        return self.stats.armor_hits

    def armor_hits_remaining(self) -> int:
        return self.health.health

    def drops_bonus(self) -> bool:
        return self.stats.drops_bonus

    def _apply_stats(self) -> None:
        self.set_speed(tiles_per_second_from_stats(self.stats))
        self.fire_interval_ms = self.stats.fire_cooldown_ms
        self.weapon.reload_ms = self.stats.fire_cooldown_ms
        self.health.set_max_health(self.stats.armor_hits)
        self.health.lives = 1

    def _reset_fire_interval(self) -> None:
        jitter = max(0, FIRE_JITTER_MS)
        low = max(50, self.stats.fire_cooldown_ms - jitter)
        high = self.stats.fire_cooldown_ms + jitter + 1
        self.fire_interval_ms = self._rng.randrange(low, high)

    # --- damage feedback ------------------------------------------------

    def trigger_hit_feedback(self) -> None:
        self.hit_feedback_timer_ms = HIT_FEEDBACK_DURATION_MS

    def is_hit_feedback_active(self) -> bool:
        return self.hit_feedback_timer_ms > 0

    def receive_damage(self, dmg: int) -> bool:
        previous = self.health.health
        damaged = super().receive_damage(dmg)
        if damaged and self.health.health < previous and self.health.is_alive():
            self.trigger_hit_feedback()
        return damaged

    def current_color(self) -> Color:
        """Colour to draw the tank with, reflecting hits and armour damage."""
        if self.is_hit_feedback_active():
            return HIT_FEEDBACK_COLOR
        armor_damaged = (
            self.stats.armor_hits > 1 and self.health.health < self.stats.armor_hits
        )
        if armor_damaged and self.stats.damaged_color is not None:
            return self.stats.damaged_color
        if self.stats.base_color is not None:
            return self.stats.base_color
        return FALLBACK_COLOR

    # --- movement -------------------------------------------------------

    def _can_move(self, direction: Direction) -> bool:
        if self.map is None:
            return False
        nxt = self.cell() + direction_delta(direction)
        if not self.map.is_inside(nxt):
            return False
        return self.map.is_walkable(nxt)

    def _should_slide(self) -> bool:
        if self.map is None:
            return False
        if self.map.tile(self.cell()).type != TileType.ICE:
            return False
        return self.map.is_walkable(self.cell() + direction_delta(self.direction))

    def _try_move(self) -> None:
        if self.map is None:
            return
        available = [d for d in Direction if self._can_move(d)]
        if not available:
            return

        current = self.direction
        blocked = not self._can_move(current)
        if blocked or self._rng.randrange(100) < 25:
            candidates = list(available)
            # Avoid turning around when there is any other option.
            opposite = _OPPOSITE[self.direction]
            if len(candidates) > 1 and opposite in candidates:
                candidates.remove(opposite)
            current = candidates[self._rng.randrange(len(candidates))]

        self.direction = current
        self._sliding = self._should_slide()

    def update_with_delta(self, delta_ms: int) -> None:
        super().update_with_delta(delta_ms)

        if self.hit_feedback_timer_ms > 0:
            self.hit_feedback_timer_ms = max(0, self.hit_feedback_timer_ms - delta_ms)

        if self.is_destroyed() or self.frozen:
            return

        self.move_elapsed_ms += delta_ms
        self.fire_elapsed_ms += delta_ms
        if self.fire_elapsed_ms >= self.fire_interval_ms:
            self.request_fire()
            self.fire_elapsed_ms = 0
            self._reset_fire_interval()

        if self.step_interval_ms <= 0:
            return

        self.step_accumulator_ms += delta_ms
        while self.step_accumulator_ms >= self.step_interval_ms:
            self.step_accumulator_ms -= self.step_interval_ms

            wants_turn = (
                self.move_elapsed_ms >= self.move_interval_ms and not self._sliding
            ) or not self._can_move(self.direction)
            if self.is_aligned_to_grid() and wants_turn:
                self.move_elapsed_ms = 0
                self._try_move()

            next_cell = self.cell() + direction_delta(self.direction)
            if self.map is None or not self.map.is_walkable(next_cell):
                self.step_accumulator_ms = 0
                self.sub_tile_progress = 0
                self._sliding = False
                self.update_render_position(self.direction)
                # Force a fresh direction choice on the next aligned step.
                self.move_elapsed_ms = self.move_interval_ms
                break

            self.sub_tile_progress += 1
            self.update_render_position(self.direction)

            if self.sub_tile_progress >= self.STEPS_PER_TILE:
                self.set_cell(next_cell)
                self._sliding = self._should_slide()