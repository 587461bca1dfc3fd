"""Input events fed to the controller.

Hosts translate their native events into these records. Handlers mark an
event with ``prevent_default`` when the host must not run its own default
behavior (native context menu, text selection, ...).
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Optional

from .geometry import Vector2D


class EventKind(Enum):
    """Kinds of input events the state machine dispatches on."""
    POINTER_DOWN = auto()
    POINTER_UP = auto()
    POINTER_MOVE = auto()
    SCROLL = auto()
    KEY_DOWN = auto()
    KEY_UP = auto()
    CONTEXT_MENU = auto()


@dataclass
class Modifiers:
    ctrl: bool = False
    shift: bool = False
    alt: bool = False
    meta: bool = False


@dataclass
class InputEvent:
    """Common base for all input events."""
    kind: EventKind
    modifiers: Modifiers = field(default_factory=Modifiers)
    target: Optional[Any] = None
    default_prevented: bool = False
    propagation_stopped: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True
        self.propagation_stopped = True


@dataclass
class PointerEvent(InputEvent):
    """Pointer press, release or move, in client coordinates."""
    client_x: float = 0.0
    client_y: float = 0.0
    button: int = 0

    @property
    def client_position(self) -> Vector2D:
        return Vector2D(self.client_x, self.client_y)


@dataclass
class ScrollEvent(InputEvent):
    """Document scroll by (dx, dy) client pixels."""
    dx: float = 0.0
    dy: float = 0.0


@dataclass
class KeyEvent(InputEvent):
    key: str = ""


def pointer_down(x: float, y: float, button: int = 0, target: Any = None,
                 **mods: bool) -> PointerEvent:
    return PointerEvent(EventKind.POINTER_DOWN, Modifiers(**mods), target,
                        client_x=x, client_y=y, button=button)


def pointer_up(x: float, y: float, button: int = 0, **mods: bool) -> PointerEvent:
    return PointerEvent(EventKind.POINTER_UP, Modifiers(**mods),
                        client_x=x, client_y=y, button=button)


def pointer_move(x: float, y: float, **mods: bool) -> PointerEvent:
    return PointerEvent(EventKind.POINTER_MOVE, Modifiers(**mods),
                        client_x=x, client_y=y)


def scroll(dx: float, dy: float) -> ScrollEvent:
    return ScrollEvent(EventKind.SCROLL, dx=dx, dy=dy)


def key_down(key: str, **mods: bool) -> KeyEvent:
    return KeyEvent(EventKind.KEY_DOWN, Modifiers(**mods), key=key)


def key_up(key: str, **mods: bool) -> KeyEvent:
    return KeyEvent(EventKind.KEY_UP, Modifiers(**mods), key=key)


def context_menu() -> InputEvent:
    return InputEvent(EventKind.CONTEXT_MENU)
