"""The grid of dug tunnels and how digging changes each tile."""

from __future__ import annotations

import enum
from typing import Any, Optional

import pygame

from minidig.component import Component
from minidig.renderer import Renderer
from minidig.resources import ResourceManager, Texture2D

TILE_SIZE = 16
HALLWAY_OPACITY = 128


class HallwayType(enum.Enum):
    """The shape of the tunnel in one tile."""

    TOPCLOSED = 0
    BOTTOMCLOSED = 1
    LEFTCLOSED = 2
    RIGHTCLOSED = 3
    VERTICALTHROUGH = 4
    HORIZONTALTHROUGH = 5
    LEFTTOPCORNER = 6
    RIGHTTOPCORNER = 7
    LEFTBOTTOMCORNER = 8
    RIGHTBOTTOMCORNER = 9
    CLEARED = 10
    FILLED = 11


H = HallwayType

# For each direction: how the tile dug into changes, then how it changes
# depending on the tile the digger came from.
_TARGET_RULES: dict[str, dict[HallwayType, HallwayType]] = {
    "right": {
        H.FILLED: H.RIGHTCLOSED,
        H.TOPCLOSED: H.RIGHTTOPCORNER,
        H.VERTICALTHROUGH: H.CLEARED,
        H.LEFTCLOSED: H.HORIZONTALTHROUGH,
        H.BOTTOMCLOSED: H.CLEARED,
        H.LEFTTOPCORNER: H.CLEARED,
        H.LEFTBOTTOMCORNER: H.CLEARED,
    },
    "left": {
        H.FILLED: H.LEFTCLOSED,
        H.TOPCLOSED: H.LEFTTOPCORNER,
        H.VERTICALTHROUGH: H.CLEARED,
        H.RIGHTCLOSED: H.HORIZONTALTHROUGH,
        H.BOTTOMCLOSED: H.CLEARED,
        H.RIGHTTOPCORNER: H.CLEARED,
        H.RIGHTBOTTOMCORNER: H.CLEARED,
    },
    "up": {
        H.FILLED: H.TOPCLOSED,
        H.BOTTOMCLOSED: H.VERTICALTHROUGH,
        H.HORIZONTALTHROUGH: H.CLEARED,
        H.LEFTCLOSED: H.LEFTTOPCORNER,
        H.RIGHTCLOSED: H.RIGHTTOPCORNER,
        H.LEFTBOTTOMCORNER: H.CLEARED,
        H.RIGHTBOTTOMCORNER: H.CLEARED,
    },
    "down": {
        H.FILLED: H.BOTTOMCLOSED,
        H.TOPCLOSED: H.VERTICALTHROUGH,
        H.HORIZONTALTHROUGH: H.CLEARED,
        H.LEFTCLOSED: H.LEFTBOTTOMCORNER,
        H.RIGHTCLOSED: H.RIGHTBOTTOMCORNER,
        H.LEFTTOPCORNER: H.CLEARED,
        H.RIGHTTOPCORNER: H.CLEARED,
    },
}

_ORIGIN_RULES: dict[str, dict[HallwayType, HallwayType]] = {
    "right": {
        H.TOPCLOSED: H.LEFTTOPCORNER,
        H.VERTICALTHROUGH: H.CLEARED,
        H.RIGHTCLOSED: H.HORIZONTALTHROUGH,
        H.BOTTOMCLOSED: H.LEFTBOTTOMCORNER,
        H.RIGHTTOPCORNER: H.CLEARED,
        H.RIGHTBOTTOMCORNER: H.CLEARED,
    },
    "left": {
        H.TOPCLOSED: H.RIGHTTOPCORNER,
        H.VERTICALTHROUGH: H.CLEARED,
        H.LEFTCLOSED: H.HORIZONTALTHROUGH,
        H.BOTTOMCLOSED: H.RIGHTBOTTOMCORNER,
        H.LEFTTOPCORNER: H.CLEARED,
        H.LEFTBOTTOMCORNER: H.CLEARED,
    },
    "up": {
        H.TOPCLOSED: H.VERTICALTHROUGH,
        H.HORIZONTALTHROUGH: H.CLEARED,
        H.LEFTCLOSED: H.LEFTBOTTOMCORNER,
        H.RIGHTCLOSED: H.RIGHTBOTTOMCORNER,
        H.LEFTTOPCORNER: H.CLEARED,
        H.RIGHTTOPCORNER: H.CLEARED,
    },
    "down": {
        H.BOTTOMCLOSED: H.VERTICALTHROUGH,
        H.HORIZONTALTHROUGH: H.CLEARED,
        H.LEFTCLOSED: H.LEFTTOPCORNER,
        H.RIGHTCLOSED: H.RIGHTTOPCORNER,
        H.LEFTBOTTOMCORNER: H.CLEARED,
        H.RIGHTBOTTOMCORNER: H.CLEARED,
    },
}

# Tiles of the starting level, as (row, column, type).
_START_LAYOUT = (
    (8, 12, H.LEFTTOPCORNER),
    (8, 13, H.RIGHTTOPCORNER),
    (9, 12, H.LEFTBOTTOMCORNER),
    (9, 13, H.RIGHTBOTTOMCORNER),
    (11, 12, H.CLEARED),
    (11, 13, H.CLEARED),
    (12, 12, H.CLEARED),
    (12, 13, H.CLEARED),
    (24, 12, H.VERTICALTHROUGH),
    (24, 13, H.HORIZONTALTHROUGH),
    (25, 12, H.LEFTCLOSED),
    (25, 13, H.RIGHTCLOSED),
)


def _tile_index(coordinate: float) -> int:
    """The tile holding a pixel coordinate, truncating toward zero."""
    value = int(coordinate)
    quotient = abs(value) // TILE_SIZE
    return -quotient if value < 0 else quotient


class HallwaysComponent(Component):
    """A grid of 16-pixel tiles recording where tunnels have been dug."""

    def __init__(
        self,
        owner: Any,
        width: int,
        height: int,
        *,
        resources: Optional[ResourceManager] = None,
        renderer: Optional[Renderer] = None,
    ) -> None:
        super().__init__(owner)
        self._resources = resources
        self._renderer = renderer
        self._texture: Optional[Texture2D] = None
        self._sources: dict[HallwayType, pygame.Rect] = {}
        self._grid: list[list[HallwayType]] = [
            [HallwayType.FILLED] * (width // TILE_SIZE) for _ in range(height // TILE_SIZE)
        ]

    @property
    def grid(self) -> tuple[tuple[HallwayType, ...], ...]:
        """The tiles, row by row."""
        return tuple(tuple(row) for row in self._grid)

    @property
    def texture(self) -> Optional[Texture2D]:
        return self._texture

    @property
    def sources(self) -> dict[HallwayType, pygame.Rect]:
        """A copy of the texture region used for each tile type."""
        return {kind: pygame.Rect(rect) for kind, rect in self._sources.items()}

    def tile(self, row: int, column: int) -> HallwayType:
        """The tile at ``row``, ``column``; IndexError outside the grid."""
        return self._grid[self._check_row(row)][self._check_column(row, column)]

    def _set_tile(self, row: int, column: int, kind: HallwayType) -> None:
        self._grid[self._check_row(row)][self._check_column(row, column)] = kind

    def _check_row(self, row: int) -> int:
        if not 0 <= row < len(self._grid):
            raise IndexError(f"row {row} is outside the hallway grid")
        return row

    def _check_column(self, row: int, column: int) -> int:
        if not 0 <= column < len(self._grid[row]):
            raise IndexError(f"column {column} is outside the hallway grid")
        return column

    def set_texture(self, filename: str) -> None:
        """Use the tiles in ``filename`` and lay out the starting tunnels."""
        resources = self._resources if self._resources is not None else ResourceManager.instance()
        self._texture = resources.load_texture(filename)
        for row, column, kind in _START_LAYOUT:
            self._set_tile(row, column, kind)

    def add_source(self, hallway_type: HallwayType, source) -> None:
        """Use the ``source`` region of the texture for ``hallway_type``; the first one given stays."""
        self._sources.setdefault(HallwayType(hallway_type), pygame.Rect(source))

    def dig(self, from_location, to_location) -> None:
        """Dig from the tile at ``from_location`` into the tile at ``to_location``."""
        if from_location.x == to_location.x:
            direction = "down" if from_location.y < to_location.y else "up"
        else:
            direction = "right" if from_location.x < to_location.x else "left"

        to_row, to_col = _tile_index(to_location.y), _tile_index(to_location.x)
        from_row, from_col = _tile_index(from_location.y), _tile_index(from_location.x)

        target = self.tile(to_row, to_col)
        replacement = _TARGET_RULES[direction].get(target)
        if replacement is not None:
            self._set_tile(to_row, to_col, replacement)

        origin = self.tile(from_row, from_col)
        replacement = _ORIGIN_RULES[direction].get(origin)
        if replacement is not None:
            self._set_tile(to_row, to_col, replacement)

    def render(self) -> None:
        """Draw every tile half transparent from its texture region."""
        if self._texture is None:
            raise RuntimeError("hallway texture has not been set")
        renderer = self._renderer if self._renderer is not None else Renderer.instance()
        self._texture.surface.set_alpha(HALLWAY_OPACITY)
        for row_index, row in enumerate(self._grid):
            for column_index, kind in enumerate(row):
                source = self._sources[kind]
                destination = pygame.Rect(
                    column_index * TILE_SIZE, row_index * TILE_SIZE, source.width, source.height
                )
                renderer.render_region(self._texture, pygame.Rect(source), destination)