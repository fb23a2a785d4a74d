"""Session rules and the mutable state of a running game."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from tankgrid.types import Point


class GameSessionState(Enum):
    """Outcome of the current session."""

    RUNNING = 0
    GAME_OVER = 1
    VICTORY = 2


class GameMode(Enum):
    """What the application is currently showing."""

    MAIN_MENU = 0
    PLAYING = 1
    PAUSED = 2
    GAME_OVER = 3
    EDITING = 4


@dataclass
class ScoreRules:
    """Points awarded for game events."""

    enemy_kill: int = 100
    bonus: int = 500
    stage_clear: int = 1000


@dataclass
class GameRules:
    """Parameters of a session: field size, lives and enemy waves."""

    map_size: tuple[int, int] = (32, 30)
    player_lives: int = 3
    enemies_per_wave: int = 4
    total_waves: int = 5
    base_cell: Point = Point(15, 28)
    score_rules: ScoreRules = field(default_factory=ScoreRules)


@dataclass
class GameState:
    """Lives, enemy counters, score and mode of the current game."""

    remaining_lives: int = 0
    remaining_enemies: int = 0
    alive_enemies: int = 0
    total_enemies: int = 0
    destroyed_enemies: int = 0
    score: int = 0
    base_destroyed: bool = False
    session_state: GameSessionState = GameSessionState.RUNNING
    game_mode: GameMode = GameMode.MAIN_MENU

    def reset(self, player_lives: int, enemies: int) -> None:
        """Start a fresh session."""
        self.remaining_lives = player_lives
        self.remaining_enemies = enemies
        self.total_enemies = enemies
        self.destroyed_enemies = 0
        self.alive_enemies = 0
        self.score = 0
        self.base_destroyed = False
        self.session_state = GameSessionState.RUNNING
        self.game_mode = GameMode.PLAYING

    def set_base_destroyed(self) -> None:
        self.base_destroyed = True

    def register_spawned_enemy(self) -> None:
        self.alive_enemies += 1

    def register_enemy_destroyed(self) -> None:
        if self.alive_enemies > 0:
            self.alive_enemies -= 1
        if self.remaining_enemies > 0:
            self.remaining_enemies -= 1
        self.destroyed_enemies += 1

    def register_player_lost_life(self) -> None:
        if self.remaining_lives > 0:
            self.remaining_lives -= 1

    def add_score(self, points: int) -> None:
        self.score += points

    def reset_score(self) -> None:
        self.score = 0

    def enemies_to_spawn(self) -> int:
        """Enemies still waiting to enter the field."""
        return max(0, self.remaining_enemies - self.alive_enemies)

    def is_game_over(self) -> bool:
        if self.game_mode in (GameMode.MAIN_MENU, GameMode.EDITING):
            return False
        return (
            self.session_state == GameSessionState.GAME_OVER
            or self.base_destroyed
            or self.remaining_lives <= 0
        )

    def is_victory(self) -> bool:
        return self.session_state == GameSessionState.VICTORY or (
            not self.base_destroyed
            and self.remaining_enemies == 0
            and self.remaining_lives > 0
        )