# minidig

A small component-based 2D game engine built on pygame, with a tunnel
digging arcade game on top of it.

The engine keeps a tree of game objects (`minidig.gameobject.GameObject`).
Each object has a local and a world position and holds components that are
updated and rendered every frame. Scenes (`minidig.scene.Scene`) gather game
objects, and `SceneManager` drives every scene. `InputManager` maps keyboard
scancodes and gamepad button masks to commands, and `ResourceManager` loads
and caches textures and fonts from a data directory.

The game fills the playfield with five layers of earth, keeps a 16-pixel
grid of dug tunnels (`minidig.hallways.HallwaysComponent`), and keeps the
score and lives displays up to date through observers.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Playing

```
minidig --data path/to/data
```

`--data` names the directory that holds `DigDug_Tiles_Logos_Text.png`,
`DigDug_General_Sprites.png` and `Lingua.otf`; it defaults to `../Data/`,
relative to the current directory. The window is 640 by 480 and the game
runs until it is closed.

Keyboard controls:

- `W` `A` `S` `D`: move
- `C`: lose a life
- `Z`: pick up 10 points
- `X`: pick up 100 points

On a gamepad, the D-pad moves, `Y` costs a life, `X` picks up 10 points and
`B` picks up 100.

## Using the engine

```python
from minidig.engine import Minigin
from minidig.scene import SceneManager
from minidig.gameobject import GameObject
from minidig.text_component import TextComponent
from minidig.fps_component import FPSComponent
from minidig.resources import ResourceManager


def load():
    scene = SceneManager.instance().create_scene("Demo")
    font = ResourceManager.instance().load_font("Lingua.otf", 12)

    counter = GameObject()
    text = counter.add_component(TextComponent, "fps", font)
    counter.add_component(FPSComponent, text)
    scene.add(counter)


with Minigin("data/") as engine:
    engine.run(load)
```

`Minigin.run` calls `load` once and then loops: it measures the frame time
with `minidig.timing.FrameClock`, sleeps to hold the refresh rate (60 by
default), processes input, updates every scene and renders.

To write your own component, subclass `minidig.component.Component` and
override `update` or `render`. To be told of game events, subclass
`minidig.observer.Observer` and register it with a `Subject` such as
`HealthComponent` or `PlayerComponent`. To bind an action to a key or
button, subclass `minidig.command.Command` and register it with
`InputManager.instance().add_command(...)`.

Other components in the package:

- `RenderComponent`: draws a texture, or a region of one, at its owner's position.
- `RotatorComponent`: turns its owner around the origin over time.
- `ThrashTheCacheComponent` (`minidig.cache_benchmark`): times strided passes
  over large numpy arrays and plots the averages on the window.

## Limitations

- Moving the player does not dig: `DiggingComponent.dig` and
  `HallwaysComponent.dig` change the tunnel grid only when called directly.
- There are no enemies, rocks that fall, levels or game-over condition; the
  game is a playfield with a movable player, score and lives.
- Text is rendered in white only.