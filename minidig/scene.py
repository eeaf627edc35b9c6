"""Scenes of game objects and the manager that owns them."""

from __future__ import annotations

from typing import Any, ClassVar

from minidig.gameobject import GameObject


class Singleton:
    """Gives each subclass one lazily created shared instance."""

    _instances: ClassVar[dict[type, Any]] = {}

    @classmethod
    def instance(cls):
        """The shared instance of this class, created on first use."""
        try:
            return Singleton._instances[cls]
        except KeyError:
            created = Singleton._instances[cls] = cls()
            return created


class Scene:
    """A named, ordered collection of game objects."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._objects: list[GameObject] = []

    @property
    def objects(self) -> tuple[GameObject, ...]:
        return tuple(self._objects)

    def add(self, game_object: GameObject) -> None:
        self._objects.append(game_object)

    def remove(self, game_object: GameObject) -> None:
        """Remove every occurrence of ``game_object``."""
        self._objects = [o for o in self._objects if o is not game_object]

    def remove_all(self) -> None:
        self._objects.clear()

    def update(self) -> None:
        for game_object in list(self._objects):
            game_object.update()

    def render(self) -> None:
        for game_object in list(self._objects):
            game_object.render()


class SceneManager(Singleton):
    """Owns every scene and drives their updates and rendering."""

    def __init__(self) -> None:
        self._scenes: list[Scene] = []

    @classmethod
    def instance(cls) -> SceneManager:
        """The shared scene manager."""
        return super().instance()

    @property
    def scenes(self) -> tuple[Scene, ...]:
        return tuple(self._scenes)

    def create_scene(self, name: str) -> Scene:
        """Create, register and return a new scene."""
        scene = Scene(name)
        self._scenes.append(scene)
        return scene

    def update(self) -> None:
        for scene in list(self._scenes):
            scene.update()

    def render(self) -> None:
        for scene in list(self._scenes):
            scene.render()