"""Events, observers and subjects that notify them."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import Any


class Event(enum.Enum):
    """Things a subject can report."""

    DEATH = enum.auto()
    SCORE = enum.auto()


class Observer(ABC):
    """Receives events from subjects it is registered with."""

    @abstractmethod
    def on_notify(self, entity: Any, event: Event) -> None:
        """Handle ``event`` raised about ``entity``."""


class Subject:
    """Keeps a list of observers and notifies them of events."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._observers: list[Observer] = []

    @property
    def observers(self) -> tuple[Observer, ...]:
        """The registered observers, in registration order."""
        return tuple(self._observers)

    @property
    def subject_entity(self) -> Any:
        """The object passed to observers: a component's owner, otherwise the subject."""
        owner = getattr(self, "owner", None)
        return self if owner is None else owner

    def add_observer(self, observer: Observer) -> None:
        """Register ``observer``."""
        self._observers.append(observer)

    def remove_observer(self, observer: Observer) -> None:
        """Unregister every registration of ``observer``."""
        self._observers = [o for o in self._observers if o is not observer]

    def notify(self, event: Event) -> None:
        """Tell every observer that ``event`` happened."""
        entity = self.subject_entity
        for observer in list(self._observers):
            observer.on_notify(entity, event)