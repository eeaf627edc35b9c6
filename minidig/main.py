"""The digging game: commands, level layout, player setup and the entry point."""

from __future__ import annotations

import argparse
from typing import Any, Optional, Sequence

import pygame

from minidig.digging import DiggingComponent, RockComponent
from minidig.engine import Minigin
from minidig.fps_component import FPSComponent
from minidig.game_commands import Move, Pickup, Suicide
from minidig.gamepad import Gamepad, GamepadButton
from minidig.gameobject import GameObject
from minidig.hallways import HallwaysComponent, HallwayType
from minidig.health import HealthComponent
from minidig.input_manager import InputManager
from minidig.player import PlayerComponent
from minidig.player_info import PlayerInfoComponent
from minidig.render_component import RenderComponent
from minidig.renderer import Renderer
from minidig.resources import ResourceManager
from minidig.scene import Scene, SceneManager
from minidig.text_component import TextComponent

TILES_TEXTURE = "DigDug_Tiles_Logos_Text.png"
SPRITES_TEXTURE = "DigDug_General_Sprites.png"
FONT_FILE = "Lingua.otf"
DEFAULT_DATA_PATH = "../Data/"

ROCK_TILE_SIZE = 8
LAYER_COUNT = 5
_LAYER_TILES = (
    pygame.Rect(73, 14, 8, 8),
    pygame.Rect(73, 32, 8, 8),
    pygame.Rect(64, 14, 8, 8),
    pygame.Rect(64, 23, 8, 8),
    pygame.Rect(64, 32, 8, 8),
)

_HALLWAY_SOURCES = (
    (HallwayType.TOPCLOSED, pygame.Rect(1, 99, 16, 16)),
    (HallwayType.BOTTOMCLOSED, pygame.Rect(19, 99, 16, 16)),
    (HallwayType.LEFTCLOSED, pygame.Rect(37, 99, 16, 16)),
    (HallwayType.RIGHTCLOSED, pygame.Rect(55, 99, 16, 16)),
    (HallwayType.VERTICALTHROUGH, pygame.Rect(73, 99, 16, 16)),
    (HallwayType.HORIZONTALTHROUGH, pygame.Rect(91, 99, 16, 16)),
    (HallwayType.LEFTTOPCORNER, pygame.Rect(109, 99, 16, 16)),
    (HallwayType.RIGHTTOPCORNER, pygame.Rect(127, 99, 16, 16)),
    (HallwayType.LEFTBOTTOMCORNER, pygame.Rect(145, 99, 16, 16)),
    (HallwayType.RIGHTBOTTOMCORNER, pygame.Rect(163, 99, 16, 16)),
    (HallwayType.CLEARED, pygame.Rect(163, 117, 16, 16)),
    (HallwayType.FILLED, pygame.Rect(181, 99, 16, 16)),
)

KEYBOARD_HELP = "Use WASD to move DigDug, C to inflict damage, Z and X to pick up points"
GAMEPAD_HELP = "Use the D-Pad to move DigDug, Y to inflict damage, X and B to pick up points"


def initialize_commands(input_manager: InputManager) -> None:
    """Bind movement, damage and pickup commands to the gamepad and the keyboard."""
    add = input_manager.add_command
    add(Move, int(GamepadButton.DPAD_UP), True, (0.0, -1.0))
    add(Move, int(GamepadButton.DPAD_DOWN), True, (0.0, 1.0))
    add(Move, int(GamepadButton.DPAD_LEFT), True, (-1.0, 0.0))
    add(Move, int(GamepadButton.DPAD_RIGHT), True, (1.0, 0.0))
    add(Move, pygame.KSCAN_W, False, (0.0, -2.0))
    add(Move, pygame.KSCAN_S, False, (0.0, 2.0))
    add(Move, pygame.KSCAN_A, False, (-2.0, 0.0))
    add(Move, pygame.KSCAN_D, False, (2.0, 0.0))
    add(Suicide, int(GamepadButton.Y), True)
    add(Suicide, pygame.KSCAN_C, False)
    add(Pickup, int(GamepadButton.X), True, 10)
    add(Pickup, pygame.KSCAN_Z, False, 10)
    add(Pickup, int(GamepadButton.B), True, 100)
    add(Pickup, pygame.KSCAN_X, False, 100)


def setup_player(
    texture_path: str,
    texture_rect: Any,
    start_pos: Sequence[float],
    name: str,
    uses_gamepad: bool,
    input_manager: InputManager,
    scene: Scene,
    font: Any,
    scoreboard: GameObject,
    hallways: Optional[GameObject],
) -> GameObject:
    """Create a player with its lives and score display, register it for input and return it."""
    lives_display = GameObject()
    lives_display.set_parent(scoreboard)
    lives_info = lives_display.add_component(PlayerInfoComponent)
    lives_display.set_position(0.0, 30.0)

    score_display = GameObject()
    score_display.set_parent(scoreboard)
    score_info = score_display.add_component(PlayerInfoComponent)
    score_display.set_position(0.0, 40.0)

    player = GameObject()
    player.add_component(RenderComponent).set_texture(texture_path, texture_rect)
    player.set_position(start_pos[0], start_pos[1])

    input_manager.add_gamepad(Gamepad(input_manager.actor_count, used=uses_gamepad))

    player_component = player.add_component(PlayerComponent, name)
    health = player.add_component(HealthComponent, 1, 8)
    lives_display.add_component(TextComponent, f"# lives: {health.lives}", font)
    score_display.add_component(TextComponent, f"Score: {player_component.score}", font)
    player_component.add_observer(score_info)
    health.add_observer(lives_info)

    grid = hallways.get_component(HallwaysComponent) if hallways is not None else None
    player.add_component(DiggingComponent, grid)

    scene.add(player)
    input_manager.add_game_actor(player)
    scene.add(lives_display)
    scene.add(score_display)
    return player


def setup_hallway_sources(game_object: GameObject) -> None:
    """Give the object's hallway grid its texture and the region for each tile type."""
    hallways = game_object.get_component(HallwaysComponent)
    if hallways is None:
        raise ValueError("game object has no hallways component")
    hallways.set_texture(TILES_TEXTURE)
    for kind, source in _HALLWAY_SOURCES:
        hallways.add_source(kind, source)


def setup_level(scene: Scene, width: int, height: int) -> GameObject:
    """Fill the level with layered rock tiles, add the hallway grid and return its object."""
    layer_thickness = height // LAYER_COUNT
    for row in range(0, height, ROCK_TILE_SIZE):
        layer = min(row // layer_thickness, LAYER_COUNT - 1) if layer_thickness > 0 else LAYER_COUNT - 1
        for column in range(0, width, ROCK_TILE_SIZE):
            rock = GameObject()
            rock.add_component(RenderComponent).set_texture(TILES_TEXTURE, _LAYER_TILES[layer])
            rock.add_component(RockComponent)
            rock.set_position(column, row)
            scene.add(rock)

    hallways = GameObject()
    hallways.add_component(HallwaysComponent, width, height)
    setup_hallway_sources(hallways)
    scene.add(hallways)
    return hallways


def load() -> None:
    """Build the demo scene: help text, level, player and frame counter."""
    scene = SceneManager.instance().create_scene("Demo")
    resources = ResourceManager.instance()
    resources.load_font(FONT_FILE, 36)
    small_font = resources.load_font(FONT_FILE, 12)
    input_manager = InputManager.instance()

    initialize_commands(input_manager)

    scoreboard = GameObject()
    scoreboard.set_position(0.0, 60.0)
    scene.add(scoreboard)

    gamepad_help = GameObject()
    gamepad_help.set_parent(scoreboard)
    gamepad_help.add_component(TextComponent, GAMEPAD_HELP, small_font)
    scene.add(gamepad_help)

    keyboard_help = GameObject()
    keyboard_help.set_parent(scoreboard)
    keyboard_help.add_component(TextComponent, KEYBOARD_HELP, small_font)
    keyboard_help.set_position(0.0, 10.0)
    scene.add(keyboard_help)

    window = Renderer.instance().window
    if window is None:
        raise RuntimeError("renderer is not initialised")
    width, height = window.get_size()
    hallways = setup_level(scene, width, height)

    setup_player(
        SPRITES_TEXTURE,
        pygame.Rect(1, 0, 14, 15),
        (170, 130),
        "Player 1",
        False,
        input_manager,
        scene,
        small_font,
        scoreboard,
        hallways,
    )

    fps_display = GameObject()
    text = fps_display.add_component(TextComponent, "here", small_font)
    fps_display.add_component(FPSComponent, text)
    scene.add(fps_display)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the game window and play until it is closed."""
    parser = argparse.ArgumentParser(prog="minidig", description="Dig tunnels underground.")
    parser.add_argument("--data", default=DEFAULT_DATA_PATH, help="directory holding textures and fonts")
    args = parser.parse_args(argv)
    with Minigin(args.data) as engine:
        engine.run(load)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())