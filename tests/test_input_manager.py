import pygame
import pytest

from minidig.command import Command
from minidig.gamepad import Gamepad, GamepadButton
from minidig.gameobject import GameObject
from minidig.input_manager import InputManager


class Record(Command):
    def __init__(self, input_value, using_gamepad, log):
        super().__init__(input_value, using_gamepad)
        self.log = log

    def execute(self, game_object):
        self.log.append((self.input_value, game_object))


def events(*batches):
    remaining = list(batches)
    return lambda: remaining.pop(0) if remaining else []


def key_down(scancode):
    return pygame.event.Event(pygame.KEYDOWN, scancode=scancode)


def key_up(scancode):
    return pygame.event.Event(pygame.KEYUP, scancode=scancode)


def test_add_command_builds_and_returns_command():
    log = []
    manager = InputManager(event_source=events())
    command = manager.add_command(Record, 26, False, log)
    assert manager.commands == (command,)
    assert command.input_value == 26
    assert command.using_gamepad is False


def test_add_command_rejects_non_command_types():
    manager = InputManager(event_source=events())
    with pytest.raises(TypeError):
        manager.add_command(int, 1)


def test_held_key_runs_keyboard_command_each_frame():
    log = []
    manager = InputManager(event_source=events([key_down(26)], []))
    manager.add_command(Record, 26, False, log)
    actor = GameObject()
    manager.add_gamepad(Gamepad(0, used=False, state_source=lambda: None))
    manager.add_game_actor(actor)
    assert manager.process_input() is True
    assert manager.process_input() is True
    assert log == [(26, actor), (26, actor)]


def test_released_key_stops_command():
    log = []
    manager = InputManager(event_source=events([key_down(4)], [key_up(4)]))
    manager.add_command(Record, 4, False, log)
    manager.add_gamepad(Gamepad(state_source=lambda: None))
    manager.add_game_actor(GameObject())
    manager.process_input()
    manager.process_input()
    assert len(log) == 1
    assert manager.held_scancodes == frozenset()


def test_gamepad_command_runs_when_button_held():
    log = []
    manager = InputManager(event_source=events())
    manager.add_command(Record, int(GamepadButton.Y), True, log)
    manager.add_command(Record, int(GamepadButton.X), True, log)
    actor = GameObject()
    manager.add_gamepad(Gamepad(0, used=True, state_source=lambda: int(GamepadButton.Y)))
    manager.add_game_actor(actor)
    manager.process_input()
    assert log == [(int(GamepadButton.Y), actor)]


def test_commands_for_other_device_are_ignored():
    log = []
    manager = InputManager(event_source=events([key_down(26)]))
    manager.add_command(Record, 26, False, log)
    manager.add_gamepad(Gamepad(0, used=True, state_source=lambda: 0xFFFF))
    manager.add_game_actor(GameObject())
    manager.process_input()
    assert log == []


def test_each_actor_uses_its_own_gamepad():
    log = []
    manager = InputManager(event_source=events())
    manager.add_command(Record, int(GamepadButton.A), True, log)
    first, second = GameObject(), GameObject()
    manager.add_gamepad(Gamepad(0, used=True, state_source=lambda: 0))
    manager.add_gamepad(Gamepad(1, used=True, state_source=lambda: int(GamepadButton.A)))
    manager.add_game_actor(first)
    manager.add_game_actor(second)
    manager.process_input()
    assert log == [(int(GamepadButton.A), second)]
    assert manager.actor_count == 2


def test_quit_event_stops_processing():
    manager = InputManager(event_source=events([pygame.event.Event(pygame.QUIT)]))
    assert manager.process_input() is False


def test_actor_without_gamepad_is_an_error():
    manager = InputManager(event_source=events())
    manager.add_game_actor(GameObject())
    with pytest.raises(RuntimeError):
        manager.process_input()