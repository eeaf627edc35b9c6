"""Health and lives of a player, reported to observers on death."""

from __future__ import annotations

from typing import Any

from minidig.component import Component
from minidig.observer import Event, Subject


class HealthComponent(Component, Subject):
    """Tracks health and remaining lives; losing all health costs a life."""

    def __init__(self, owner: Any, health: int = 1, lives: int = 5) -> None:
        super().__init__(owner)
        self._health = health
        self._lives = lives

    @property
    def health(self) -> int:
        return self._health

    @health.setter
    def health(self, value: int) -> None:
        self._health = value
        if self._health < 1:
            self.die()

    @property
    def lives(self) -> int:
        return self._lives

    def die(self) -> None:
        """Lose a life, restore health and tell observers."""
        self._lives -= 1
        self._health = 1
        self.notify(Event.DEATH)