"""Component-based 2D game engine on pygame and a tunnel digging arcade game."""

__version__ = "0.1.0"