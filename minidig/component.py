"""Base class for behaviour attached to game objects."""

from __future__ import annotations

from typing import Any


class Component:
    """Behaviour owned by one game object, updated and rendered with it."""

    def __init__(self, owner: Any) -> None:
        super().__init__()
        self._owner = owner
        self.to_be_deleted = False

    @property
    def owner(self) -> Any:
        """The game object this component belongs to."""
        return self._owner

    def update(self) -> None:
        """Advance the component by one frame."""

    def render(self) -> None:
        """Draw the component."""