"""Frame timing shared by the engine loop and time-based components."""

from __future__ import annotations

import time
from typing import Callable


class FrameClock:
    """Accumulates the whole milliseconds that passed during the current frame."""

    def __init__(self, now: Callable[[], float] = time.monotonic) -> None:
        self.now = now
        self.last_tick = now()
        self.delta_time = 0

    def advance(self) -> int:
        """Add the milliseconds since the last tick to ``delta_time`` and return it."""
        current = self.now()
        self.delta_time += int((current - self.last_tick) * 1000)
        self.last_tick = current
        return self.delta_time

    def reset(self) -> None:
        """Start a new frame with no time accumulated."""
        self.delta_time = 0


shared_clock = FrameClock()