"""Game objects: a transform, a place in the hierarchy and a set of components."""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Optional, TypeVar

from minidig.component import Component
from minidig.transform import Transform

C = TypeVar("C", bound=Component)


class GameObject:
    """An entity in a scene that owns components and may have a parent."""

    def __init__(self) -> None:
        self._parent: Optional[GameObject] = None
        self._children: list[GameObject] = []
        self._components: list[Component] = []
        self._local = Transform()
        self._world = Transform()
        self._world_outdated = True

    @property
    def parent(self) -> Optional[GameObject]:
        return self._parent

    @property
    def children(self) -> tuple[GameObject, ...]:
        return tuple(self._children)

    @property
    def components(self) -> tuple[Component, ...]:
        return tuple(self._components)

    @property
    def local_transform(self) -> Transform:
        """A copy of the position relative to the parent."""
        return replace(self._local)

    @property
    def world_transform(self) -> Transform:
        """A copy of the world position as of the last render."""
        return replace(self._world)

    def add_component(self, component_type: type[C], *args: Any, **kwargs: Any) -> C:
        """Create a ``component_type`` owned by this object and return it."""
        if not (isinstance(component_type, type) and issubclass(component_type, Component)):
            raise TypeError(f"{component_type!r} is not a Component type")
        component = component_type(self, *args, **kwargs)
        self._components.append(component)
        return component

    def get_component(self, component_type: type[C]) -> Optional[C]:
        """The first component that is a ``component_type``, or None."""
        return next((c for c in self._components if isinstance(c, component_type)), None)

    def has_component(self, component_type: type[Component]) -> bool:
        return any(isinstance(c, component_type) for c in self._components)

    def remove_component(self, component_type: type[Component]) -> None:
        """Mark every component of ``component_type`` for deletion."""
        for component in self._components:
            if isinstance(component, component_type):
                component.to_be_deleted = True

    def update(self) -> None:
        for component in list(self._components):
            component.update()

    def render(self) -> None:
        """Refresh the world position if needed, then render every component."""
        if self._world_outdated:
            x, y = self._local.x, self._local.y
            if self._parent is not None:
                parent_world = self._parent.world_transform
                x += parent_world.x
                y += parent_world.y
            self._world.set_position(x, y, 0.0)
            self._world_outdated = False
        for component in list(self._components):
            component.render()

    def set_position(self, x: float, y: float) -> None:
        """Move the object relative to its parent."""
        self._local.set_position(x, y, 0.0)
        self.set_world_transform_outdated()

    def set_parent(self, parent: GameObject) -> None:
        """Attach this object under ``parent``, shifting its local position."""
        if parent is self:
            return
        if parent is None:
            raise ValueError("parent must be a game object")
        new_world = parent.world_transform
        if self._parent is not None:
            old_world = self._parent.world_transform
            self._parent._remove_child(self)
            dx, dy, dz = (new_world.x - old_world.x, new_world.y - old_world.y,
                          new_world.z - old_world.z)
        else:
            dx, dy, dz = new_world.position
        parent._children.append(self)
        self._parent = parent
        self._local.set_position(self._local.x + dx, self._local.y + dy, self._local.z + dz)

    def cleanup_components(self) -> None:
        """Drop every component marked for deletion."""
        self._components = [c for c in self._components if not c.to_be_deleted]

    def set_world_transform_outdated(self) -> None:
        """Flag this object and all its descendants to recompute world positions."""
        self._world_outdated = True
        for child in self._children:
            child.set_world_transform_outdated()

    def _remove_child(self, child: GameObject) -> None:
        self._children = [c for c in self._children if c is not child]