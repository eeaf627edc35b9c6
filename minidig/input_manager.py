"""Mapping keyboard and gamepad input to commands on game actors."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional

import pygame

from minidig.command import Command
from minidig.gamepad import Gamepad

EventSource = Callable[[], Iterable[Any]]


class InputManager:
    """Runs every bound command for each actor whose input device triggers it."""

    def __init__(self, event_source: Optional[EventSource] = None) -> None:
        self._event_source: EventSource = event_source if event_source is not None else pygame.event.get
        self._commands: list[Command] = []
        self._gamepads: list[Gamepad] = []
        self._actors: list[Any] = []
        self._held_scancodes: set[int] = set()

    @classmethod
    def instance(cls) -> "InputManager":
        """Return the shared instance, creating it on first use."""
        shared = cls.__dict__.get("_shared_instance")
        if shared is None:
            shared = cls()
            cls._shared_instance = shared
        return shared

    @property
    def commands(self) -> tuple[Command, ...]:
        return tuple(self._commands)

    @property
    def gamepads(self) -> tuple[Gamepad, ...]:
        return tuple(self._gamepads)

    @property
    def actors(self) -> tuple[Any, ...]:
        return tuple(self._actors)

    @property
    def actor_count(self) -> int:
        return len(self._actors)

    @property
    def held_scancodes(self) -> frozenset[int]:
        """Keyboard scancodes currently held down."""
        return frozenset(self._held_scancodes)

    def add_command(self, command_type: type[Command], *args: Any) -> Command:
        """Create a ``command_type`` from ``args``, bind it and return it."""
        if not (isinstance(command_type, type) and issubclass(command_type, Command)):
            raise TypeError(f"{command_type!r} is not a Command type")
        command = command_type(*args)
        self._commands.append(command)
        return command

    def add_gamepad(self, gamepad: Gamepad) -> None:
        """Add the input device of the actor at the same position."""
        self._gamepads.append(gamepad)

    def add_game_actor(self, actor: Any) -> None:
        self._actors.append(actor)

    def _pump_events(self) -> bool:
        keep_running = True
        for event in self._event_source():
            if event.type == pygame.QUIT:
                keep_running = False
            elif event.type == pygame.KEYDOWN:
                scancode = getattr(event, "scancode", None)
                if scancode is not None:
                    self._held_scancodes.add(scancode)
            elif event.type == pygame.KEYUP:
                self._held_scancodes.discard(getattr(event, "scancode", None))
        return keep_running

    def process_input(self) -> bool:
        """Handle pending events and run triggered commands; False once quitting."""
        keep_running = self._pump_events()
        if len(self._gamepads) < len(self._actors):
            raise RuntimeError("every game actor needs a gamepad entry")
        for actor, gamepad in zip(self._actors, self._gamepads):
            if gamepad.used:
                gamepad.update()
            for command in list(self._commands):
                if command.using_gamepad != gamepad.used:
                    continue
                if gamepad.used:
                    triggered = gamepad.is_pressed(command.input_value)
                else:
                    triggered = command.input_value in self._held_scancodes
                if triggered:
                    command.execute(actor)
        return keep_running