import random

from tankgrid.agent import Agent, BotAgent
from tankgrid.pathfinding import find_path
from tankgrid.tilemap import TileMap
from tankgrid.types import Point


class _FixedRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, n):
        assert n == 4
        return self.value


def test_move_to_walkable_cell():
    agent = Agent(1, 1, TileMap(5, 5))
    agent.move_to(2, 1)
    assert agent.cell == Point(2, 1)
    assert agent.prev_cell == Point(1, 1)


def test_move_to_wall_is_ignored():
    agent = Agent(1, 1, TileMap(5, 5))
    agent.move_to(0, 1)
    assert agent.cell == Point(1, 1)
    assert agent.prev_cell == Point(1, 1)


def test_move_without_grid_is_ignored():
    agent = Agent(1, 1, None)
    agent.move_to(2, 1)
    assert agent.cell == Point(1, 1)


def test_update_follows_path_to_goal():
    grid = TileMap(7, 7)
    agent = Agent(1, 1, grid)
    path = find_path(grid, Point(1, 1), Point(5, 4))
    agent.set_path(path)
    for _ in path:
        agent.update()
    assert agent.cell == Point(5, 4)
    assert agent.path == []


def test_set_path_copies_input():
    agent = Agent(1, 1, TileMap(5, 5))
    path = [Point(2, 1)]
    agent.set_path(path)
    agent.update()
    assert path == [Point(2, 1)]
    assert agent.cell == Point(2, 1)


def test_bot_follows_path_before_patrolling():
    bot = BotAgent(2, 2, TileMap(5, 5), rng=_FixedRng(0))
    bot.set_path([Point(2, 3)])
    bot.update()
    assert bot.cell == Point(2, 3)


def test_bot_patrol_direction_codes():
    expected = {0: Point(1, 2), 1: Point(3, 2), 2: Point(2, 1), 3: Point(2, 3)}
    for code, cell in expected.items():
        bot = BotAgent(2, 2, TileMap(5, 5), rng=_FixedRng(code))
        bot.update()
        assert bot.cell == cell
        assert bot.prev_cell == Point(2, 2)


def test_bot_patrol_blocked_by_wall():
    bot = BotAgent(1, 1, TileMap(5, 5), rng=_FixedRng(0))
    bot.patrol()
    assert bot.cell == Point(1, 1)


def test_bot_random_walk_stays_on_walkable_cells():
    grid = TileMap(6, 6)
    bot = BotAgent(2, 2, grid, rng=random.Random(7))
    for _ in range(200):
        bot.update()
        assert grid.is_walkable(bot.cell)
        d = bot.cell - bot.prev_cell
        assert abs(d.x) + abs(d.y) in (0, 1)