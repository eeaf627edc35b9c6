"""A player's name and score, reported to observers when the score changes."""

from __future__ import annotations

from typing import Any

from minidig.component import Component
from minidig.observer import Event, Subject


class PlayerComponent(Component, Subject):
    """Holds the player's name and score."""

    def __init__(self, owner: Any, name: str) -> None:
        super().__init__(owner)
        self._name = name
        self._score = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def score(self) -> int:
        return self._score

    @score.setter
    def score(self, value: int) -> None:
        self._score = value
        self.notify(Event.SCORE)