"""Gamepad button state, tracked frame by frame."""

from __future__ import annotations

import enum
from typing import Callable, Optional

import pygame

StateSource = Callable[[], Optional[int]]


class GamepadButton(enum.IntFlag):
    """Button bits of a gamepad state mask."""

    DPAD_UP = 0x0001
    DPAD_DOWN = 0x0002
    DPAD_LEFT = 0x0004
    DPAD_RIGHT = 0x0008
    START = 0x0010
    BACK = 0x0020
    LEFT_THUMB = 0x0040
    RIGHT_THUMB = 0x0080
    LEFT_SHOULDER = 0x0100
    RIGHT_SHOULDER = 0x0200
    A = 0x1000
    B = 0x2000
    X = 0x4000
    Y = 0x8000


# Button numbers of a standard controller as reported by the joystick module.
_JOYSTICK_BUTTONS = (
    GamepadButton.A,
    GamepadButton.B,
    GamepadButton.X,
    GamepadButton.Y,
    GamepadButton.LEFT_SHOULDER,
    GamepadButton.RIGHT_SHOULDER,
    GamepadButton.BACK,
    GamepadButton.START,
    GamepadButton.LEFT_THUMB,
    GamepadButton.RIGHT_THUMB,
)


class _JoystickReader:
    """Reads the button mask of one joystick, or None when it is not connected."""

    def __init__(self, index: int) -> None:
        self.index = index
        self._joystick: Optional[pygame.joystick.JoystickType] = None

    def __call__(self) -> Optional[int]:
        try:
            if not pygame.joystick.get_init():
                pygame.joystick.init()
            if self.index >= pygame.joystick.get_count():
                self._joystick = None
                return None
            if self._joystick is None:
                self._joystick = pygame.joystick.Joystick(self.index)
            return self._mask(self._joystick)
        except pygame.error:
            self._joystick = None
            return None

    @staticmethod
    def _mask(joystick: pygame.joystick.JoystickType) -> int:
        mask = 0
        for number, button in enumerate(_JOYSTICK_BUTTONS[: joystick.get_numbuttons()]):
            if joystick.get_button(number):
                mask |= button
        if joystick.get_numhats():
            x, y = joystick.get_hat(0)
            if y > 0:
                mask |= GamepadButton.DPAD_UP
            elif y < 0:
                mask |= GamepadButton.DPAD_DOWN
            if x < 0:
                mask |= GamepadButton.DPAD_LEFT
            elif x > 0:
                mask |= GamepadButton.DPAD_RIGHT
        return int(mask)


class Gamepad:
    """One controller: which buttons are held, and which changed this frame."""

    def __init__(
        self,
        index: int = 0,
        used: bool = False,
        *,
        state_source: Optional[StateSource] = None,
    ) -> None:
        self.index = index
        self.used = used
        self._read: StateSource = state_source if state_source is not None else _JoystickReader(index)
        self._buttons = 0
        self._pressed_this_frame = 0
        self._released_this_frame = 0

    @property
    def buttons(self) -> int:
        """The mask of buttons held at the last update."""
        return self._buttons

    def connected(self) -> bool:
        """Whether the controller can currently be read."""
        return self._read() is not None

    def update(self) -> None:
        """Read the controller and work out which buttons went down or up."""
        state = self._read()
        if state is None:
            return
        previous = self._buttons
        self._buttons = int(state)
        changes = self._buttons ^ previous
        self._pressed_this_frame = changes & self._buttons
        self._released_this_frame = changes & ~self._buttons

    def is_down_this_frame(self, button: int) -> bool:
        return bool(self._pressed_this_frame & int(button))

    def is_up_this_frame(self, button: int) -> bool:
        return bool(self._released_this_frame & int(button))

    def is_pressed(self, button: int) -> bool:
        return bool(self._buttons & int(button))