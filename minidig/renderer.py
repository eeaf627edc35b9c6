"""Drawing textures onto the game window."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import pygame

from minidig.scene import SceneManager, Singleton

if TYPE_CHECKING:
    from minidig.resources import Texture2D


class Renderer(Singleton):
    """Clears the window, renders every scene and copies textures onto the window."""

    def __init__(self, scene_manager: Optional[SceneManager] = None) -> None:
        self._window: Optional[pygame.Surface] = None
        self._scene_manager = scene_manager
        self.background_color = pygame.Color(0, 0, 0, 0)

    @classmethod
    def instance(cls) -> Renderer:
        """The shared renderer."""
        return super().instance()

    @property
    def window(self) -> Optional[pygame.Surface]:
        """The surface everything is drawn onto, or None before ``init``."""
        return self._window

    def init(self, window: pygame.Surface) -> None:
        """Start drawing onto ``window``."""
        if window is None:
            raise RuntimeError("Failed to create renderer: no window surface")
        self._window = window

    def _target(self) -> pygame.Surface:
        if self._window is None:
            raise RuntimeError("renderer is not initialised")
        return self._window

    def render(self) -> None:
        """Clear to the background colour, render all scenes and present the frame."""
        target = self._target()
        target.fill(self.background_color)
        scenes = self._scene_manager if self._scene_manager is not None else SceneManager.instance()
        scenes.render()
        if pygame.display.get_init() and pygame.display.get_surface() is target:
            pygame.display.flip()

    def destroy(self) -> None:
        """Stop drawing; ``init`` must be called again before rendering."""
        self._window = None

    def render_texture(
        self,
        texture: Texture2D,
        x: float,
        y: float,
        width: Optional[float] = None,
        height: Optional[float] = None,
    ) -> None:
        """Draw the whole texture at ``(x, y)``, stretched to ``width`` by ``height`` if given."""
        if (width is None) != (height is None):
            raise TypeError("width and height must be given together")
        target = self._target()
        surface = texture.surface
        if width is not None and height is not None:
            size = (int(width), int(height))
            if size != surface.get_size():
                surface = pygame.transform.scale(surface, size)
        target.blit(surface, (int(x), int(y)))

    def render_region(self, texture: Texture2D, src, dst) -> None:
        """Draw the ``src`` rectangle of ``texture`` into the ``dst`` rectangle of the window."""
        target = self._target()
        src_rect = pygame.Rect(src)
        dst_rect = pygame.Rect(dst)
        area = src_rect.clip(texture.surface.get_rect())
        if area.width == 0 or area.height == 0:
            return
        region = texture.surface.subsurface(area)
        if region.get_size() != dst_rect.size:
            region = pygame.transform.scale(region, dst_rect.size)
        target.blit(region, dst_rect.topleft)