"""Component that measures frames per second from the frame clock."""

from __future__ import annotations

import math
from typing import Any, Optional

from minidig.component import Component
from minidig.timing import FrameClock, shared_clock


class FPSComponent(Component):
    """Computes the frame rate each update and optionally writes it to a text component."""

    def __init__(
        self,
        owner: Any,
        text_component: Optional[Any] = None,
        *,
        clock: Optional[FrameClock] = None,
    ) -> None:
        super().__init__(owner)
        self.text_component = text_component
        self._clock = clock if clock is not None else shared_clock
        self._fps = 0.0

    @property
    def fps(self) -> float:
        """The frame rate measured at the last update."""
        return self._fps

    def update(self) -> None:
        delta = self._clock.delta_time
        self._fps = math.inf if delta == 0 else 1000.0 / delta
        if self.text_component is not None:
            self.text_component.set_text(f"{self._fps:f}")