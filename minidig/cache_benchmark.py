"""Timing strided passes over large arrays to show the effect of cache lines."""

from __future__ import annotations

import time
from typing import Any, Callable, Iterable, Optional, Sequence

import numpy as np
import pygame

from minidig.component import Component
from minidig.renderer import Renderer

ARRAY_LENGTH = 2 ** 26
STEP_LIMIT = 1024

GAME_OBJECT_3D = np.dtype([("transform", np.float32, (16,)), ("id", np.int32)])
GAME_OBJECT_3D_ALT = np.dtype([("transform", np.uintp), ("id", np.int32)])

PLOT_SIZE = 200
PLOT_GAP = 10
FRAME_COLOR = (128, 128, 128)
PRIMARY_COLOR = (0, 255, 0)
SECONDARY_COLOR = (255, 0, 0)


def time_strided_passes(array: Any, max_step: int = STEP_LIMIT) -> list[tuple[int, float]]:
    """Double every ``step``-th element for steps 1, 2, 4 ... ``max_step``.

    Returns ``(step, microseconds)`` for each pass, in order.
    """
    if max_step < 1:
        raise ValueError(f"max_step must be at least 1, not {max_step}")
    results = []
    step = 1
    while step <= max_step:
        start = time.perf_counter_ns()
        array[::step] *= 2
        end = time.perf_counter_ns()
        results.append((step, float((end - start) // 1000)))
        step *= 2
    return results


def average_runs(run_results: Iterable[Sequence[float]]) -> list[float]:
    """The element-wise mean of several equally long runs."""
    runs = [list(run) for run in run_results]
    if not runs:
        raise ValueError("there are no runs to average")
    length = len(runs[0])
    if any(len(run) != length for run in runs):
        raise ValueError("every run must have the same number of results")
    return [sum(column) / len(runs) for column in zip(*runs)]


def _plot(
    surface: pygame.Surface,
    frame: pygame.Rect,
    series: Sequence[Sequence[float]],
    colors: Sequence[tuple[int, int, int]],
    scale_max: float,
    thickness: int,
) -> None:
    pygame.draw.rect(surface, FRAME_COLOR, frame, 1)
    bottom = frame.bottom - 1
    span_y = frame.height - 1
    for values, color in zip(series, colors):
        if not values:
            continue
        count = len(values)
        points = []
        for position, value in enumerate(values):
            x = frame.left + (position * (frame.width - 1) / (count - 1) if count > 1 else 0)
            ratio = min(max(value / scale_max, 0.0), 1.0) if scale_max > 0 else 0.0
            points.append((round(x), round(bottom - ratio * span_y)))
        if len(points) == 1:
            pygame.draw.circle(surface, color, points[0], max(thickness, 1))
        else:
            pygame.draw.lines(surface, color, False, points, thickness)


class ThrashTheCacheComponent(Component):
    """Measures strided access over integers and over two game-object layouts, and plots it."""

    def __init__(
        self,
        owner: Any,
        *,
        array_length: int = ARRAY_LENGTH,
        max_step: int = STEP_LIMIT,
        renderer: Optional[Renderer] = None,
    ) -> None:
        super().__init__(owner)
        self.array_length = array_length
        self.max_step = max_step
        self.int_runs = 1
        self.object_runs = 1
        self.steps: list[float] = []
        self.int_average: list[float] = []
        self.standard_average: list[float] = []
        self.alt_average: list[float] = []
        self._renderer = renderer

    def _measure(self, runs: int, make_field: Callable[[], Any]) -> list[float]:
        self.steps.clear()
        run_results = []
        for run in range(runs):
            timings = time_strided_passes(make_field(), self.max_step)
            if run == 0:
                self.steps.extend(float(step) for step, _ in timings)
            run_results.append([elapsed for _, elapsed in timings])
        return average_runs(run_results)

    def thrash_int(self) -> None:
        """Time strided passes over a plain integer array."""
        self.int_average.clear()
        self.int_average.extend(
            self._measure(self.int_runs, lambda: np.zeros(self.array_length, dtype=np.int32))
        )

    def thrash_standard(self) -> None:
        """Time strided passes over game objects that hold their transform inline."""
        self.standard_average.clear()
        self.standard_average.extend(
            self._measure(
                self.object_runs,
                lambda: np.zeros(self.array_length, dtype=GAME_OBJECT_3D)["id"],
            )
        )

    def thrash_alt(self) -> None:
        """Time strided passes over game objects that hold a transform reference."""
        self.alt_average.clear()
        self.alt_average.extend(
            self._measure(
                self.object_runs,
                lambda: np.zeros(self.array_length, dtype=GAME_OBJECT_3D_ALT)["id"],
            )
        )

    def render(self) -> None:
        """Plot every measurement that has been taken, plus a comparison of both layouts."""
        renderer = self._renderer if self._renderer is not None else Renderer.instance()
        surface = renderer.window
        if surface is None:
            raise RuntimeError("renderer is not initialised")

        def frame(column: int, row: int) -> pygame.Rect:
            return pygame.Rect(
                column * (PLOT_SIZE + PLOT_GAP), row * (PLOT_SIZE + PLOT_GAP), PLOT_SIZE, PLOT_SIZE
            )

        if self.int_average:
            _plot(surface, frame(0, 0), [self.int_average], [PRIMARY_COLOR],
                  self.int_average[0], 2)
        if self.standard_average:
            _plot(surface, frame(1, 0), [self.standard_average], [PRIMARY_COLOR],
                  self.standard_average[0], 2)
        if self.alt_average:
            _plot(surface, frame(2, 0), [self.alt_average], [PRIMARY_COLOR],
                  self.alt_average[0], 2)
        if self.standard_average and self.alt_average:
            _plot(
                surface,
                frame(0, 1),
                [self.standard_average, self.alt_average],
                [PRIMARY_COLOR, SECONDARY_COLOR],
                self.standard_average[0],
                1,
            )