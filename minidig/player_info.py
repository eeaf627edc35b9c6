"""Keeps a text component showing a player's lives or score."""

from __future__ import annotations

from typing import Any

from minidig.component import Component
from minidig.health import HealthComponent
from minidig.observer import Event, Observer
from minidig.player import PlayerComponent
from minidig.text_component import TextComponent


class PlayerInfoComponent(Component, Observer):
    """Rewrites its owner's text when a player dies or scores."""

    def __init__(self, owner: Any) -> None:
        super().__init__(owner)

    def on_notify(self, entity: Any, event: Event) -> None:
        text = self.owner.get_component(TextComponent)
        if text is None:
            return
        if event is Event.DEATH:
            health = entity.get_component(HealthComponent)
            if health is not None:
                text.set_text(f"# lives: {health.lives}")
        elif event is Event.SCORE:
            player = entity.get_component(PlayerComponent)
            if player is not None:
                text.set_text(f"Score: {player.score}")