"""Textures, fonts and the cache that loads them from the data directory."""

from __future__ import annotations

import weakref
from pathlib import Path
from typing import Union

import pygame

from minidig.scene import Singleton

PathLike = Union[str, Path]


class ResourceError(RuntimeError):
    """A texture or font could not be loaded."""


class Texture2D:
    """An image that can be drawn by the renderer."""

    def __init__(self, surface: pygame.Surface) -> None:
        if surface is None:
            raise ValueError("a texture needs a surface")
        self.surface = surface

    @classmethod
    def from_file(cls, path: PathLike) -> Texture2D:
        """Load an image file as a texture."""
        try:
            surface = pygame.image.load(str(path))
        except (pygame.error, OSError) as exc:
            raise ResourceError(f"Failed to load texture: {exc}") from exc
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            surface = surface.convert_alpha()
        return cls(surface)

    def size(self) -> tuple[int, int]:
        """The width and height in pixels."""
        return self.surface.get_size()


class Font:
    """A TrueType font opened at one point size."""

    def __init__(self, path: PathLike, size: int) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        self.path = Path(path)
        self.size = size
        try:
            self.font = pygame.font.Font(str(self.path), size)
        except (pygame.error, OSError) as exc:
            raise ResourceError(f"Failed to load font: {exc}") from exc


def _drop_unreferenced(cache: dict) -> None:
    refs = {key: weakref.ref(value) for key, value in cache.items()}
    cache.clear()
    for key, ref in refs.items():
        value = ref()
        if value is not None:
            cache[key] = value


class ResourceManager(Singleton):
    """Loads textures and fonts from the data directory, caching them by file name."""

    def __init__(self) -> None:
        self._data_path = Path()
        self._textures: dict[str, Texture2D] = {}
        self._fonts: dict[tuple[str, int], Font] = {}

    @classmethod
    def instance(cls) -> ResourceManager:
        """The shared resource manager."""
        return super().instance()

    @property
    def data_path(self) -> Path:
        return self._data_path

    @property
    def cached_textures(self) -> tuple[str, ...]:
        """Names of the textures currently cached."""
        return tuple(sorted(self._textures))

    @property
    def cached_fonts(self) -> tuple[tuple[str, int], ...]:
        """``(name, size)`` keys of the fonts currently cached."""
        return tuple(sorted(self._fonts))

    def init(self, data_path: PathLike) -> None:
        """Set the data directory and start font support."""
        self._data_path = Path(data_path)
        try:
            pygame.font.init()
        except pygame.error as exc:
            raise ResourceError(f"Failed to load support for fonts: {exc}") from exc

    def load_texture(self, file: str) -> Texture2D:
        """The texture in ``file``, loaded on first request."""
        full_path = self._data_path / file
        key = full_path.name
        if key not in self._textures:
            self._textures[key] = Texture2D.from_file(full_path)
        return self._textures[key]

    def load_font(self, file: str, size: int) -> Font:
        """The font in ``file`` at ``size`` points, loaded on first request."""
        if not 0 <= size <= 255:
            raise ValueError(f"font size {size} is outside 0..255")
        full_path = self._data_path / file
        key = (full_path.name, size)
        if key not in self._fonts:
            self._fonts[key] = Font(full_path, size)
        return self._fonts[key]

    def unload_unused_resources(self) -> None:
        """Forget every texture and font that nothing outside the cache still uses."""
        _drop_unreferenced(self._textures)
        _drop_unreferenced(self._fonts)