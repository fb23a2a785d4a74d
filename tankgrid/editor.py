"""Tile editing of the current map, with protected spawn and base cells."""

from __future__ import annotations

import re
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Iterable, Optional, Protocol, Sequence, Union

from tankgrid.state import GameMode, GameState
from tankgrid.types import Point, TileType

Size = tuple[int, int]
PathLike = Union[str, Path]

_CODES = {
    TileType.EMPTY: 0,
    TileType.BRICK: 1,
    TileType.STEEL: 2,
    TileType.FOREST: 3,
    TileType.WATER: 4,
    TileType.ICE: 5,
    TileType.BASE: -1,
}
_TYPES_BY_CODE = {code: t for t, code in _CODES.items() if t is not TileType.BASE}

_KEY_TILES = {
    "1": TileType.EMPTY,
    "2": TileType.BRICK,
    "3": TileType.STEEL,
    "4": TileType.FOREST,
    "5": TileType.WATER,
    "6": TileType.ICE,
}

_INT_RE = re.compile(r"[+-]?\d+")


class MouseButton(Enum):
    LEFT = 0
    RIGHT = 1
    MIDDLE = 2


class EditableMap(Protocol):
    """What the editor needs from a map: its size and per-cell tile access."""

    size: Size

    def is_inside(self, p: Point) -> bool: ...

    def tile(self, p: Point) -> Any: ...

    def set_tile(self, p: Point, tile_type: TileType) -> None: ...


def tile_code(tile_type: TileType) -> int:
    """The number a tile kind is stored as in a map file; the base is -1."""
    return _CODES[tile_type]


def tile_type_from_code(code: int) -> Optional[TileType]:
    """The tile kind stored as ``code``, or None if it is not an editable tile."""
    return _TYPES_BY_CODE.get(code)


def _clamp(value: int, low: int, high: int) -> int:
    if value < low:
        return low
    if high < value:
        return high
    return value


def _inside(size: Size, p: Point) -> bool:
    width, height = size
    return 0 <= p.x < width and 0 <= p.y < height


def _bottom_center(size: Size) -> Point:
    width, height = size
    return Point(_clamp(width // 2, 0, width - 1), _clamp(height - 2, 0, height - 1))


def default_player_spawn(size: Size, base_cell: Point) -> Point:
    """Two cells left of the base, or the bottom centre if that is off the map."""
    left_of_base = Point(base_cell.x - 2, base_cell.y)
    if _inside(size, left_of_base):
        return left_of_base
    return _bottom_center(size)


def default_enemy_spawns(size: Size) -> tuple[Point, Point, Point]:
    """The left, centre and right spawn cells on the second row."""
    width, height = size
    max_x = max(0, width - 1)
    max_y = max(0, height - 1)
    y = _clamp(1, 0, max_y)
    left = _clamp(1, 0, max_x)
    center = _clamp(width // 2, 0, max_x)
    right = _clamp(width - 2, 0, max_x)
    return (Point(left, y), Point(center, y), Point(right, y))


def _parse_int(text: str) -> Optional[int]:
    if _INT_RE.fullmatch(text) is None:
        return None
    return int(text)


class LevelEditor:
    """Turns key presses and clicks into tile changes on the edited map."""

    def __init__(
        self,
        map: Optional[EditableMap] = None,
        base_cell: Point = Point(0, 0),
        state: Optional[GameState] = None,
        save_path_provider: Optional[Callable[[], Optional[PathLike]]] = None,
        load_path_provider: Optional[Callable[[], Optional[PathLike]]] = None,
    ) -> None:
        self.map = map
        self.base_cell = base_cell
        self.state = state
        self.save_path_provider = save_path_provider
        self.load_path_provider = load_path_provider
        self.selected_tile = TileType.BRICK

    # --- selection ------------------------------------------------------

    def is_active(self) -> bool:
        if self.map is None:
            return False
        return self.state is None or self.state.game_mode == GameMode.EDITING

    def select_tile(self, tile_type: TileType) -> None:
        """Choose the tile to paint; the base cannot be selected."""
        if tile_type is TileType.BASE:
            return
        self.selected_tile = tile_type

    def tile_for_key(self, key: str) -> TileType:
        """The tile a number key selects, or the current selection."""
        return _KEY_TILES.get(key, self.selected_tile)

    # --- input ----------------------------------------------------------

    def handle_key(self, key: str, ctrl: bool = False) -> bool:
        """Handle a key press; returns whether it was consumed."""
        if not self.is_active():
            return False

        lowered = key.lower()
        if ctrl and lowered == "s":
            self._save_current_map()
            return True
        if ctrl and lowered in ("o", "l"):
            self._load_map_from_file()
            return True

        next_type = self.tile_for_key(key)
        if next_type == self.selected_tile:
            return False
        self.selected_tile = next_type
        return True

    def handle_mouse(
        self, button: MouseButton, scene_pos: Point, viewport_size: Size
    ) -> bool:
        """Paint (left) or clear (right) the clicked cell; returns whether consumed."""
        if not self.is_active():
            return False
        if button not in (MouseButton.LEFT, MouseButton.RIGHT):
            return False

        cell = self.scene_to_cell(scene_pos, viewport_size)
        if cell is None:
            return False

        tile_type = TileType.EMPTY if button is MouseButton.RIGHT else self.selected_tile
        self.place_tile(cell, tile_type)
        return True

    def scene_to_cell(self, scene_pos: Point, viewport_size: Size) -> Optional[Point]:
        """Map a scene position to a cell of the map scaled to fit the viewport."""
        if self.map is None:
            return None
        view_w, view_h = viewport_size
        map_w, map_h = self.map.size
        if view_w <= 0 or view_h <= 0 or map_w <= 0 or map_h <= 0:
            return None

        scale = min(view_w / map_w, view_h / map_h)
        if scale <= 0.0:
            return None

        offset_x = (view_w - map_w * scale) / 2.0
        offset_y = (view_h - map_h * scale) / 2.0
        cell = Point(
            int((scene_pos.x - offset_x) / scale),
            int((scene_pos.y - offset_y) / scale),
        )
        if not self.map.is_inside(cell):
            return None
        return cell

    # --- editing --------------------------------------------------------

    def place_tile(self, cell: Point, tile_type: TileType) -> None:
        """Set a cell unless it is outside, protected, or involves the base."""
        if self.map is None or not self.map.is_inside(cell):
            return
        if self.is_protected_cell(cell):
            return
        if self.map.tile(cell).type is TileType.BASE or tile_type is TileType.BASE:
            return
        self.map.set_tile(cell, tile_type)

    def _player_candidates(self, size: Size) -> tuple[Point, Point, Point]:
        return (
            default_player_spawn(size, self.base_cell),
            Point(self.base_cell.x - 1, self.base_cell.y),
            _bottom_center(size),
        )

    def is_protected_cell(self, cell: Point) -> bool:
        """Whether the cell is the player spawn or an enemy spawn."""
        grid = self.map
        if grid is None or not grid.is_inside(cell):
            return False

        size = grid.size
        for candidate in self._player_candidates(size):
            if not grid.is_inside(candidate):
                continue
            if grid.tile(candidate).type is TileType.BASE:
                continue
            if cell == candidate:
                return True
            break

        return any(
            grid.is_inside(spawn) and cell == spawn for spawn in default_enemy_spawns(size)
        )

    def restore_protected_cells(self) -> None:
        """Put the base back and clear the spawn cells."""
        grid = self.map
        if grid is None:
            return
        size = grid.size
        if grid.is_inside(self.base_cell):
            grid.set_tile(self.base_cell, TileType.BASE)

        for candidate in self._player_candidates(size):
            if not grid.is_inside(candidate):
                continue
            if grid.tile(candidate).type is TileType.BASE:
                continue
            grid.set_tile(candidate, TileType.EMPTY)
            break

        for spawn in default_enemy_spawns(size):
            if not grid.is_inside(spawn):
                continue
            if grid.tile(spawn).type is TileType.BASE:
                continue
            grid.set_tile(spawn, TileType.EMPTY)

    def build_tile_matrix(self) -> list[list[int]]:
        """Tile codes row by row; the base and protected cells read as empty."""
        grid = self.map
        if grid is None:
            return []
        width, height = grid.size
        empty = tile_code(TileType.EMPTY)
        rows = []
        for y in range(height):
            row = []
            for x in range(width):
                cell = Point(x, y)
                tile_type = grid.tile(cell).type
                if tile_type is TileType.BASE or self.is_protected_cell(cell):
                    row.append(empty)
                else:
                    row.append(tile_code(tile_type))
            rows.append(row)
        return rows

    def apply_tile_data(self, rows: Iterable[Sequence[int]]) -> None:
        """Replace the editable cells with the given codes, then restore protected cells."""
        grid = self.map
        if grid is None:
            return
        width, height = grid.size

        for y in range(height):
            for x in range(width):
                cell = Point(x, y)
                if not self.is_protected_cell(cell):
                    grid.set_tile(cell, TileType.EMPTY)

        for y, row in zip(range(height), rows):
            for x, code in zip(range(width), row):
                cell = Point(x, y)
                if self.is_protected_cell(cell):
                    continue
                tile_type = tile_type_from_code(code)
                if tile_type is None or tile_type is TileType.BASE:
                    continue
                grid.set_tile(cell, tile_type)

        self.restore_protected_cells()

    # --- files ----------------------------------------------------------

    def _require_map(self) -> EditableMap:
        if self.map is None:
            raise RuntimeError("no map is being edited")
        return self.map

    def export_tiles(self, path: PathLike) -> None:
        """Write the map size and tile codes as whitespace-separated text."""
        width, height = self._require_map().size
        lines = [f"{width} {height}"]
        lines.extend(" ".join(str(code) for code in row) for row in self.build_tile_matrix())
        Path(path).write_text("\n".join(lines) + "\n", encoding="utf-8")

    def import_tiles(self, path: PathLike) -> None:
        """Read a map file written by :meth:`export_tiles` and apply it."""
        self._require_map()
        rows: list[list[int]] = []
        size_parsed = False

        with open(path, encoding="utf-8") as handle:
            for line in handle:
                parts = line.split()
                if not parts:
                    continue
                if not size_parsed and len(parts) >= 2:
                    width = _parse_int(parts[0])
                    height = _parse_int(parts[1])
                    if width is not None and height is not None and width > 0 and height > 0:
                        size_parsed = True
                        continue
                row = [v for v in (_parse_int(p) for p in parts) if v is not None]
                if row:
                    rows.append(row)

        self.apply_tile_data(rows)

    def _save_current_map(self) -> bool:
        if not self.is_active() or self.save_path_provider is None:
            return False
        path = self.save_path_provider()
        if not path:
            return False
        self.export_tiles(path)
        return True

    def _load_map_from_file(self) -> bool:
        if not self.is_active() or self.load_path_provider is None:
            return False
        path = self.load_path_provider()
        if not path:
            return False
        self.import_tiles(path)
        return True