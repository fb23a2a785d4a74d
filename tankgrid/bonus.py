"""Pick-ups that appear on the map and apply an effect when collected."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Protocol

from tankgrid.gameobject import GameObject
from tankgrid.player import PlayerTank
from tankgrid.types import Point

TIMED_BONUS_DURATION_MS = 10000


class BonusType(Enum):
    STAR = 0
    HELMET = 1
    CLOCK = 2
    GRENADE = 3


class BonusHost(Protocol):
    """What a bonus needs from the running game."""

    def add_score_for_bonus(self) -> None: ...

    def freeze_enemies(self, duration_ms: int) -> None: ...

    def detonate_enemies(self) -> None: ...


class Bonus(GameObject, ABC):
    """A collectable item; it never blocks movement."""

    def __init__(self, cell: Point, bonus_type: BonusType) -> None:
        super().__init__(Point(float(cell.x), float(cell.y)))
        self.bonus_type = bonus_type
        self.collected = False

    def collect(self) -> None:
        self.collected = True

    @abstractmethod
    def apply(self, game: BonusHost, player: PlayerTank) -> None:
        """Apply the bonus effect to the game and the player."""

    def update(self, delta_ms: int) -> None:
        super().update(delta_ms)


class StarBonus(Bonus):
    """Upgrades the player's tank by one star."""

    def __init__(self, cell: Point) -> None:
        super().__init__(cell, BonusType.STAR)

    def apply(self, game: BonusHost, player: PlayerTank) -> None:
        player.add_star()
        game.add_score_for_bonus()


class HelmetBonus(Bonus):
    """Makes the player temporarily invincible."""

    def __init__(self, cell: Point) -> None:
        super().__init__(cell, BonusType.HELMET)

    def apply(self, game: BonusHost, player: PlayerTank) -> None:
        player.activate_invincibility(TIMED_BONUS_DURATION_MS)
        game.add_score_for_bonus()


class ClockBonus(Bonus):
    """Freezes all enemies for a while."""

    def __init__(self, cell: Point) -> None:
        super().__init__(cell, BonusType.CLOCK)

    def apply(self, game: BonusHost, player: PlayerTank) -> None:
        game.freeze_enemies(TIMED_BONUS_DURATION_MS)
        game.add_score_for_bonus()


class GrenadeBonus(Bonus):
    """Destroys every enemy on the field."""

    def __init__(self, cell: Point) -> None:
        super().__init__(cell, BonusType.GRENADE)

    def apply(self, game: BonusHost, player: PlayerTank) -> None:
        game.detonate_enemies()
        game.add_score_for_bonus()