import random

import pytest

from tankgrid.ai import EnemyAI, MovementController, ShootingController
from tankgrid.enemy import EnemyTank
from tankgrid.types import Direction, Point, direction_delta


class FixedRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, *args):
        return self.value


def make_tank():
    return EnemyTank(Point(5, 5), rng=random.Random(3))


def test_shooting_fires_on_first_tick():
    tank = make_tank()
    ShootingController().tick(tank)
    assert tank.fire_requested is True


def test_shooting_waits_for_reload():
    tank = make_tank()
    controller = ShootingController()
    controller.tick(tank)
    tank.fire_requested = False
    ticks = 0
    while not tank.fire_requested:
        controller.tick(tank)
        ticks += 1
        assert ticks < 1000
    assert ticks * 16 >= controller.reload_ms
    assert (ticks - 2) * 16 < controller.reload_ms


def test_movement_waits_for_interval():
    tank = make_tank()
    controller = MovementController(rng=random.Random(7))
    ticks = 0
    while tank.cell() == Point(5, 5):
        controller.tick(tank)
        ticks += 1
        assert ticks < 1000
    assert ticks * 16 >= controller.interval_ms
    assert (ticks - 1) * 16 < controller.interval_ms
    assert tank.cell() - Point(5, 5) == direction_delta(tank.direction)


@pytest.mark.parametrize(
    "roll, direction",
    [(0, Direction.UP), (1, Direction.DOWN), (2, Direction.LEFT), (3, Direction.RIGHT)],
)
def test_movement_roll_maps_to_direction(roll, direction):
    tank = make_tank()
    controller = MovementController(interval_ms=16, rng=FixedRng(roll))
    controller.tick(tank)
    assert tank.direction == direction
    assert tank.cell() == Point(5, 5) + direction_delta(direction)
    assert controller.timer_ms == 0


def test_enemy_ai_first_tick_fires_without_moving():
    tank = make_tank()
    ai = EnemyAI(rng=random.Random(1))
    ai.tick(tank)
    assert tank.fire_requested is True
    assert tank.cell() == Point(5, 5)


def test_enemy_ai_eventually_moves_one_cell():
    tank = make_tank()
    ai = EnemyAI(rng=random.Random(1))
    for _ in range(44):
        ai.tick(tank)
    moved = tank.cell() - Point(5, 5)
    assert abs(moved.x) + abs(moved.y) == 1
    assert moved == direction_delta(tank.direction)