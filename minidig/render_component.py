"""Component that draws a texture, or part of one, at its owner's position."""

from __future__ import annotations

from typing import Any, Optional

import pygame

from minidig.component import Component
from minidig.renderer import Renderer
from minidig.resources import ResourceManager, Texture2D


class RenderComponent(Component):
    """Draws a texture at the owner's world position."""

    def __init__(
        self,
        owner: Any,
        *,
        resources: Optional[ResourceManager] = None,
        renderer: Optional[Renderer] = None,
    ) -> None:
        super().__init__(owner)
        self._resources = resources
        self._renderer = renderer
        self._texture: Optional[Texture2D] = None
        self._box = pygame.Rect(0, 0, 0, 0)

    @property
    def texture(self) -> Optional[Texture2D]:
        return self._texture

    @property
    def box(self) -> pygame.Rect:
        """The source rectangle within the texture; empty means the whole texture."""
        return pygame.Rect(self._box)

    def set_texture(self, filename: str, box=None) -> None:
        """Use the texture in ``filename``, optionally only the ``box`` part of it."""
        resources = self._resources if self._resources is not None else ResourceManager.instance()
        self._texture = resources.load_texture(filename)
        self._box = pygame.Rect(0, 0, 0, 0) if box is None else pygame.Rect(box)

    def render(self) -> None:
        if self._texture is None:
            return
        renderer = self._renderer if self._renderer is not None else Renderer.instance()
        position = self.owner.world_transform
        if self._box.width == 0 or self._box.height == 0:
            renderer.render_texture(self._texture, position.x, position.y)
        else:
            destination = pygame.Rect(
                int(position.x), int(position.y), self._box.width, self._box.height
            )
            renderer.render_region(self._texture, self._box, destination)