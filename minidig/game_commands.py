"""The player's commands: moving, picking up points and losing a life."""

from __future__ import annotations

from typing import Any

from minidig.command import Command
from minidig.health import HealthComponent
from minidig.player import PlayerComponent


class Move(Command):
    """Shifts the actor by a fixed offset each time it runs."""

    def __init__(self, input_value: int, using_gamepad: bool, direction: tuple[float, float]) -> None:
        super().__init__(input_value, using_gamepad)
        dx, dy = direction
        self.direction = (float(dx), float(dy))

    def execute(self, game_object: Any) -> None:
        position = game_object.local_transform
        dx, dy = self.direction
        game_object.set_position(position.x + dx, position.y + dy)


class Pickup(Command):
    """Adds a fixed number of points to the actor's score."""

    def __init__(self, input_value: int, using_gamepad: bool, score_value: int) -> None:
        super().__init__(input_value, using_gamepad)
        self.score_value = score_value

    def execute(self, game_object: Any) -> None:
        player = game_object.get_component(PlayerComponent)
        if player is not None:
            player.score = player.score + self.score_value


class Suicide(Command):
    """Makes the actor lose a life."""

    def execute(self, game_object: Any) -> None:
        health = game_object.get_component(HealthComponent)
        if health is not None:
            health.die()