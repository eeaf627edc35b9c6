"""Positions of game objects."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Transform:
    """A position in three dimensions."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @property
    def position(self) -> tuple[float, float, float]:
        """The position as an ``(x, y, z)`` tuple."""
        return (self.x, self.y, self.z)

    def set_position(self, x: float, y: float, z: float) -> None:
        """Move the transform to ``(x, y, z)``."""
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)