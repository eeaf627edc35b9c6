"""Components for the digger and the rock tiles of the level."""

from __future__ import annotations

from typing import Any, Optional

from minidig.component import Component
from minidig.hallways import HallwaysComponent


class DiggingComponent(Component):
    """Lets its owner dig tunnels into a hallway grid."""

    def __init__(self, owner: Any, hallways: Optional[HallwaysComponent]) -> None:
        super().__init__(owner)
        self.hallways = hallways

    def dig(self, from_location, to_location) -> None:
        """Dig from ``from_location`` into ``to_location`` if there is a grid to dig in."""
        if self.hallways is not None:
            self.hallways.dig(from_location, to_location)


class RockComponent(Component):
    """Marks a game object as a piece of rock in the level."""