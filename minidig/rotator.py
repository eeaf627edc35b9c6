"""Component that turns its owner around the origin over time."""

from __future__ import annotations

import math
from typing import Any, Optional

from minidig.component import Component
from minidig.timing import FrameClock, shared_clock


class RotatorComponent(Component):
    """Rotates the owner's local position about the z axis by ``turn_rate`` degrees per millisecond."""

    def __init__(
        self,
        owner: Any,
        turn_rate: float,
        *,
        clock: Optional[FrameClock] = None,
    ) -> None:
        super().__init__(owner)
        self.turn_rate = turn_rate
        self._clock = clock if clock is not None else shared_clock

    def update(self) -> None:
        self.rotate()

    def rotate(self) -> None:
        """Turn the owner by the angle covered during the current frame."""
        angle = math.radians(self.turn_rate * self._clock.delta_time)
        position = self.owner.local_transform
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        x = position.x * cos_a - position.y * sin_a
        y = position.x * sin_a + position.y * cos_a
        self.owner.set_position(x, y)