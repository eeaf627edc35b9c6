"""Commands bound to an input and run against a game object."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Command(ABC):
    """An action triggered by a key scancode or gamepad button mask."""

    def __init__(self, input_value: int, using_gamepad: bool) -> None:
        self.input_value = input_value
        self.using_gamepad = using_gamepad

    @abstractmethod
    def execute(self, game_object: Any) -> None:
        """Perform the action on ``game_object``."""