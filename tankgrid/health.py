"""Hit points and lives of an entity."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class HealthSystem:
    """Tracks health points and remaining lives."""

    health: int = 1
    max_health: int = 1
    lives: int = 1

    def set_max_health(self, hp: int) -> None:
        """Set both the maximum and the current health."""
        self.health = hp
        self.max_health = hp

    def is_alive(self) -> bool:
        return self.health > 0 and self.lives > 0

    def take_damage(self, dmg: int) -> None:
        self.health -= dmg
        if self.health <= 0 and self.lives > 0:
            self.lives -= 1
            if self.lives > 0:
                self.health = self.max_health

    def restore_full_health(self) -> None:
        self.health = self.max_health