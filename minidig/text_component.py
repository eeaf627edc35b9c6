"""Component that renders a line of text at its owner's position."""

from __future__ import annotations

from typing import Any, Optional

import pygame

from minidig.component import Component
from minidig.renderer import Renderer
from minidig.resources import Font, Texture2D

TEXT_COLOR = (255, 255, 255)


class TextComponent(Component):
    """White text, re-rendered to a texture whenever it changes."""

    def __init__(
        self,
        owner: Any,
        text: str,
        font: Font,
        *,
        renderer: Optional[Renderer] = None,
    ) -> None:
        super().__init__(owner)
        self._text = text
        self._font = font
        self._renderer = renderer
        self._texture: Optional[Texture2D] = None
        self._needs_update = True

    @property
    def text(self) -> str:
        return self._text

    @property
    def font(self) -> Font:
        return self._font

    @property
    def texture(self) -> Optional[Texture2D]:
        """The rendered text, or None before the first update."""
        return self._texture

    def update(self) -> None:
        """Render the text again if it changed since the last update."""
        if not self._needs_update:
            return
        try:
            surface = self._font.font.render(self._text, True, TEXT_COLOR)
        except pygame.error as exc:
            raise RuntimeError(f"Render text failed: {exc}") from exc
        self._texture = Texture2D(surface)
        self._needs_update = False

    def set_text(self, text: str) -> None:
        self._text = text
        self._needs_update = True

    def render(self) -> None:
        if self._texture is None:
            return
        renderer = self._renderer if self._renderer is not None else Renderer.instance()
        position = self.owner.world_transform
        renderer.render_texture(self._texture, position.x, position.y)