# tankgrid

`tankgrid` is the model of a tank battle played on a tile grid. It has no user
interface of its own. It provides:

- tanks, bullets and weapons with sub-tile movement
- player upgrades and pick-up bonuses
- enemy tanks with per-type stats
- timer-driven enemy controllers
- session rules and state
- a walled grid with breadth-first pathfinding
- a level editor that saves and loads maps as plain text

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Modules

- `tankgrid.types` holds the shared types.
  - `Point` is a frozen dataclass that supports `+` and `-`.
  - The enumerations are `Direction`, `TankType`, `EnemyType` and `TileType`.
  - `direction_delta(direction)` returns the one-cell step for a direction.
  - The grid constants are `TILE_SIZE`, `GRID_WIDTH`, `GRID_HEIGHT` and `SIMULATION_INTERVAL_MS`.
- `tankgrid.state` holds the session rules and state.
  - `GameRules` gives the map size, lives, enemies per wave, waves and base cell.
  - `ScoreRules` gives the points awarded for events.
  - `GameState` tracks lives, enemy counters, score and mode. It offers `reset`, `enemies_to_spawn`, `is_game_over` and `is_victory`.
  - The enumerations are `GameMode` and `GameSessionState`.
- `tankgrid.loop` provides `GameLoop`.
  - It calls a tick callback every `interval_ms` milliseconds, on a background daemon thread, between `start()` and `stop()`.
  - It can also be used as a context manager.
  - `tick()` runs a single tick at once.
- `tankgrid.health` provides `HealthSystem`, which tracks hit points and lives.
- `tankgrid.gameobject` provides `GameObject`, the base for anything placed on the grid.
- `tankgrid.tilemap` provides `TileMap` and `MapTile`.
  - `TileMap` is a grid bordered by walls, with a short wall on row 6.
  - Cells outside the grid count as wall.
- `tankgrid.pathfinding` provides `find_path(grid, start, goal)`, a breadth-first search over any object with `is_walkable(point)`.
- `tankgrid.agent` provides `Agent` and `BotAgent`.
  - `Agent` steps along a path.
  - `BotAgent` takes a random step when it has no path.
- `tankgrid.bullet` provides `Bullet` and `WeaponSystem`. `WeaponSystem` handles reloading and creates bullets in the cell ahead.
- `tankgrid.tank` provides `Tank`, the common tank behaviour: facing, speed, destruction delay and firing.
- `tankgrid.player` provides `PlayerTank`.
  - It is steered by an input source with `current_direction()` and `consume_fire()`.
  - Stars raise its speed, its bullet speed and its reload rate. At three stars its bullets pierce steel.
  - A timed invincibility shield blocks damage while it lasts.
- `tankgrid.enemy` provides `EnemyTank`, `EnemyStats`, `stats_for_type` and `tiles_per_second_from_stats`.
  - Enemies wander, fire on a jittered timer and slide on ice.
  - They flash when hit and change colour when their armour is damaged.
- `tankgrid.bonus` provides `StarBonus`, `HelmetBonus`, `ClockBonus` and `GrenadeBonus`.
  - `apply(game, player)` takes any `game` object with `add_score_for_bonus()`, `freeze_enemies(duration_ms)` and `detonate_enemies()`.
- `tankgrid.ai` provides `EnemyAI`, `MovementController` and `ShootingController`, which steer and fire an enemy tank on fixed timers.
- `tankgrid.editor` provides `LevelEditor`, `MouseButton`, `tile_code`, `tile_type_from_code`, `default_player_spawn` and `default_enemy_spawns`.

## Pathfinding

```python
from tankgrid.tilemap import TileMap
from tankgrid.pathfinding import find_path
from tankgrid.types import Point

grid = TileMap(16, 12)
path = find_path(grid, Point(1, 1), Point(14, 10))
print(len(path), path[0], path[-1])
```

`find_path` returns the cells from `start` to `goal`, both included. It returns
an empty list in two cases: when `goal` cannot be reached, and when `goal` is
the same cell as `start`.

## Level editor

`LevelEditor` works on any map object that provides:

- a `size` of `(width, height)`
- `is_inside(point)`
- `tile(point)`, returning an object with a `.type` attribute that holds a `TileType`
- `set_tile(point, tile_type)`

```python
from types import SimpleNamespace

from tankgrid.editor import LevelEditor
from tankgrid.types import Point, TileType


class GridMap:
    def __init__(self, width, height):
        self.size = (width, height)
        self._tiles = {}

    def is_inside(self, p):
        return 0 <= p.x < self.size[0] and 0 <= p.y < self.size[1]

    def tile(self, p):
        return SimpleNamespace(type=self._tiles.get(p, TileType.EMPTY))

    def set_tile(self, p, tile_type):
        self._tiles[p] = tile_type


editor = LevelEditor(GridMap(13, 13), base_cell=Point(6, 12))
editor.place_tile(Point(3, 3), TileType.BRICK)
editor.export_tiles("level.txt")
editor.import_tiles("level.txt")
```

Keys and mouse buttons map to editing actions as follows:

- `handle_key("1")` to `handle_key("6")` select empty, brick, steel, forest, water and ice.
- With `ctrl=True`, `s` saves and `o` or `l` loads. These use the paths returned by `save_path_provider` and `load_path_provider`.
- `handle_mouse` paints the selected tile with `MouseButton.LEFT` and clears the cell with `MouseButton.RIGHT`. It converts the scene position to a cell of the map, scaled to fit and centred in the viewport.

Some cells are protected and are never painted:

- the player spawn next to the base
- the three enemy spawns on the second row
- the base itself

If a `GameState` is given, the editor only acts while its mode is
`GameMode.EDITING`.

### Level file format

The first line holds the width and height. One line follows for each row, with
the tile codes separated by spaces:

| code | tile   |
|------|--------|
| 0    | empty  |
| 1    | brick  |
| 2    | steel  |
| 3    | forest |
| 4    | water  |
| 5    | ice    |

The base and the protected cells are written as empty. When a file is loaded:

- tokens that are not integers and unknown codes are skipped
- rows and columns beyond the map are ignored
- cells the file leaves out are cleared
- the base is put back and the spawn cells are cleared

`export_tiles` and `import_tiles` raise `RuntimeError` when the editor has no
map.

## What the package does not do

The package does not include:

- a game session object that ties the pieces together. Nothing spawns enemy waves and bonuses, resolves collisions between bullets, tanks and tiles, or decides victory and defeat during play.
- a tile map type with brick, steel, water and similar tiles. The editor and the tanks take one that you supply.
- rendering, a window, keyboard handling, menus or sound.
- a command to run.

## Tests

```
pytest
```