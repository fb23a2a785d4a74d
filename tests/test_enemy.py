import random
from types import SimpleNamespace

import pytest

from tankgrid.enemy import (
    EnemyStats,
    EnemyTank,
    stats_for_type,
    tiles_per_second_from_stats,
)
from tankgrid.tank import Tank
from tankgrid.types import Direction, EnemyType, Point, TankType, TileType


class FakeMap:
    def __init__(self, walkable, ice=()):
        self.walkable = set(walkable)
        self.ice = set(ice)

    def is_inside(self, p):
        return 0 <= p.x < 20 and 0 <= p.y < 20

    def is_walkable(self, p):
        return p in self.walkable

    def tile(self, p):
        kind = TileType.ICE if p in self.ice else TileType.EMPTY
        return SimpleNamespace(type=kind)


def make(enemy_type=EnemyType.BASIC, map=None, seed=1, cell=Point(1, 1)):
    return EnemyTank(cell, enemy_type, map=map, rng=random.Random(seed))


def test_stats_table_values():
    basic = stats_for_type(EnemyType.BASIC)
    assert basic.armor_hits == 1
    assert basic.step_interval_ms == 16
    assert basic.fire_cooldown_ms == 1000
    assert stats_for_type(EnemyType.FAST).step_interval_ms == 12
    armored = stats_for_type(EnemyType.ARMORED)
    assert armored.armor_hits == 3
    assert armored.fire_cooldown_ms == 1200
    assert stats_for_type(EnemyType.POWER).drops_bonus is True
    assert basic.drops_bonus is False


def test_tiles_per_second_default_for_unset_stats():
    assert tiles_per_second_from_stats(EnemyStats()) == Tank.DEFAULT_TILES_PER_SECOND


@pytest.mark.parametrize("enemy_type", list(EnemyType))
def test_tiles_per_second_matches_step_timing(enemy_type):
    stats = stats_for_type(enemy_type)
    speed = tiles_per_second_from_stats(stats)
    assert speed * stats.steps_per_tile * stats.step_interval_ms == pytest.approx(1000.0)


def test_fast_enemy_is_faster_than_basic():
    assert make(EnemyType.FAST).speed > make(EnemyType.BASIC).speed


def test_initial_state():
    tank = make(EnemyType.ARMORED)
    assert tank.direction == Direction.DOWN
    assert tank.tank_type == TankType.ENEMY
    assert tank.armor_hits_remaining() == 3
    assert tank.max_armor_hits == 3
    assert tank.weapon.reload_ms == 1200
    assert 1000 <= tank.fire_interval_ms <= 1400
    assert tank.health.lives == 1


def test_power_enemy_drops_bonus():
    assert make(EnemyType.POWER).drops_bonus() is True
    assert make(EnemyType.BASIC).drops_bonus() is False


def test_hit_feedback_on_non_lethal_damage():
    tank = make(EnemyType.ARMORED)
    assert tank.receive_damage(1) is True
    assert tank.armor_hits_remaining() == 2
    assert tank.is_hit_feedback_active()
    assert tank.current_color() == (230, 230, 230)


def test_feedback_expires_and_damaged_color_shows():
    tank = make(EnemyType.ARMORED)
    tank.receive_damage(1)
    tank.update_with_delta(120)
    assert not tank.is_hit_feedback_active()
    assert tank.current_color() == stats_for_type(EnemyType.ARMORED).damaged_color


def test_lethal_damage_has_no_feedback():
    tank = make(EnemyType.BASIC)
    tank.receive_damage(1)
    assert not tank.health.is_alive()
    assert not tank.is_hit_feedback_active()


def test_undamaged_color_is_base_color():
    tank = make(EnemyType.FAST)
    assert tank.current_color() == stats_for_type(EnemyType.FAST).base_color


def test_trigger_hit_feedback():
    tank = make()
    tank.trigger_hit_feedback()
    assert tank.is_hit_feedback_active()


def test_fire_timer_requests_fire():
    tank = make()
    tank.update_with_delta(1500)
    assert tank.fire_requested is True
    bullet = tank.try_shoot()
    assert bullet.owner_type == TankType.ENEMY
    assert bullet.direction == Direction.DOWN
    assert bullet.cell == Point(1, 2)


def test_frozen_enemy_does_nothing():
    walk = FakeMap({Point(1, y) for y in range(1, 10)})
    tank = make(map=walk)
    tank.frozen = True
    tank.update_with_delta(5000)
    assert tank.fire_requested is False
    assert tank.cell() == Point(1, 1)


def test_moves_down_open_corridor():
    walk = FakeMap({Point(1, y) for y in range(1, 10)})
    tank = make(map=walk)
    tank.update_with_delta(tank.step_interval_ms * Tank.STEPS_PER_TILE)
    assert tank.cell() == Point(1, 2)
    assert tank.sub_tile_progress == 0


def test_partial_step_moves_render_position_only():
    walk = FakeMap({Point(1, y) for y in range(1, 10)})
    tank = make(map=walk)
    tank.update_with_delta(tank.step_interval_ms * 4)
    assert tank.cell() == Point(1, 1)
    assert tank.render_position.y > 1.0
    assert tank.render_position.x == 1.0


def test_blocked_tank_stays():
    walk = FakeMap({Point(1, 1)})
    tank = make(map=walk)
    tank.update_with_delta(tank.step_interval_ms * Tank.STEPS_PER_TILE)
    assert tank.cell() == Point(1, 1)
    assert tank.sub_tile_progress == 0


def test_blocked_tank_turns_to_only_open_direction():
    walk = FakeMap({Point(1, 1), Point(2, 1), Point(3, 1)})
    tank = make(map=walk)
    tank.update_with_delta(tank.step_interval_ms * Tank.STEPS_PER_TILE)
    assert tank.direction == Direction.RIGHT
    assert tank.cell() == Point(2, 1)


def test_destroyed_enemy_does_not_move():
    walk = FakeMap({Point(1, y) for y in range(1, 10)})
    tank = make(map=walk)
    tank.mark_destroyed()
    tank.update_with_delta(tank.step_interval_ms * Tank.STEPS_PER_TILE)
    assert tank.cell() == Point(1, 1)
    assert tank.fire_requested is False