"""The engine: a window, its services and the main loop."""

from __future__ import annotations

import time
from pathlib import Path
from typing import Callable, Optional, Union

import pygame

from minidig.input_manager import InputManager
from minidig.renderer import Renderer
from minidig.resources import ResourceManager
from minidig.scene import SceneManager
from minidig.timing import FrameClock, shared_clock

WINDOW_TITLE = "Programming 4 assignment"
WINDOW_WIDTH = 640
WINDOW_HEIGHT = 480
DEFAULT_REFRESH_RATE = 60


def _print_sdl_version() -> None:
    major, minor, patch = pygame.get_sdl_version(linked=False)
    print(f"We compiled against SDL version {major}.{minor}.{patch} ...")
    major, minor, patch = pygame.get_sdl_version(linked=True)
    print(f"We are linking against SDL version {major}.{minor}.{patch}.")


class Minigin:
    """Opens the window, sets up rendering and resources, and runs the game loop."""

    def __init__(
        self,
        data_path: Union[str, Path],
        *,
        width: int = WINDOW_WIDTH,
        height: int = WINDOW_HEIGHT,
        title: str = WINDOW_TITLE,
        refresh_rate: int = DEFAULT_REFRESH_RATE,
        renderer: Optional[Renderer] = None,
        resources: Optional[ResourceManager] = None,
        scenes: Optional[SceneManager] = None,
        input_manager: Optional[InputManager] = None,
        clock: Optional[FrameClock] = None,
        sleep: Callable[[float], None] = time.sleep,
        verbose: bool = True,
    ) -> None:
        if refresh_rate <= 0:
            raise ValueError(f"refresh rate must be positive, not {refresh_rate}")
        if verbose:
            _print_sdl_version()
        try:
            pygame.display.init()
        except pygame.error as exc:
            raise RuntimeError(f"SDL_Init Error: {exc}") from exc
        try:
            self.window = pygame.display.set_mode((width, height))
        except pygame.error as exc:
            raise RuntimeError(f"SDL_CreateWindow Error: {exc}") from exc
        pygame.display.set_caption(title)

        self.refresh_rate = refresh_rate
        self.scenes = scenes if scenes is not None else SceneManager.instance()
        if renderer is None:
            renderer = Renderer(self.scenes) if scenes is not None else Renderer.instance()
        self.renderer = renderer
        self.resources = resources if resources is not None else ResourceManager.instance()
        self.input = input_manager if input_manager is not None else InputManager.instance()
        self.clock = clock if clock is not None else shared_clock
        self._sleep = sleep

        self.renderer.init(self.window)
        self.resources.init(data_path)

    def __enter__(self) -> Minigin:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def run(self, load: Callable[[], None]) -> None:
        """Call ``load`` once, then run frames until input asks to quit."""
        load()
        clock = self.clock
        clock.last_tick = clock.now()
        clock.reset()
        frame_ms = 1000 / self.refresh_rate
        running = True
        while running:
            clock.advance()
            if clock.delta_time < frame_ms:
                self._sleep(int(frame_ms - clock.delta_time) / 1000)
                clock.delta_time = 1000 // self.refresh_rate
            running = self.input.process_input()
            self.scenes.update()
            self.renderer.render()
            clock.reset()

    def close(self) -> None:
        """Stop rendering and close the window."""
        self.renderer.destroy()
        pygame.display.quit()