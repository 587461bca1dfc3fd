"""Collaborators the controller talks to.

The engine never draws, never performs an action's side effect and never
talks to a browser directly; hosts implement these classes.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from concurrent.futures import Future
from typing import Any, Callable, List, Optional

from .geometry import Vector2D
from .types import PageState


class Renderer(ABC):
    """Visual side of the ring. Slot indices are 0..7."""

    @abstractmethod
    def show_container(self) -> None:
        pass

    @abstractmethod
    def hide_container(self) -> None:
        pass

    @abstractmethod
    def move_container_by(self, movement: Vector2D) -> None:
        """Translate the ring by movement, in local coordinates."""
        pass

    @abstractmethod
    def set_icon(self, slot: int, icon: Optional[str]) -> None:
        """Show icon for slot, or hide the slot when icon is None."""
        pass

    @abstractmethod
    def set_marker_visible(self, slot: int, visible: bool) -> None:
        """Toggle the "has submenu" marker of slot."""
        pass

    @abstractmethod
    def set_label_text(self, slot: int, text: Optional[str]) -> None:
        """Show a label balloon for slot, or hide it when text is None."""
        pass


class PageStateProvider(ABC):
    """Answers page state queries asynchronously."""

    @abstractmethod
    def request_page_state(self, target: Any) -> "Future[PageState]":
        pass


EventHandler = Callable[[Any], None]


class EventSource(ABC):
    """Delivers input events of one document to subscribed handlers."""

    @abstractmethod
    def subscribe(self, handler: EventHandler) -> None:
        pass

    @abstractmethod
    def unsubscribe(self, handler: EventHandler) -> None:
        pass


class EventDispatcher(EventSource):
    """Plain in-process event source; ``dispatch`` fans an event out."""

    def __init__(self):
        self._handlers: List[EventHandler] = []

    def subscribe(self, handler: EventHandler) -> None:
        if handler not in self._handlers:
            self._handlers.append(handler)

    def unsubscribe(self, handler: EventHandler) -> None:
        if handler in self._handlers:
            self._handlers.remove(handler)

    @property
    def subscriber_count(self) -> int:
        return len(self._handlers)

    def dispatch(self, event: Any) -> Any:
        for handler in list(self._handlers):
            handler(event)
        return event
