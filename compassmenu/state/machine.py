"""Controller states - a tagged union instead of a class-per-state hierarchy."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import ClassVar, Union

from ..config import DEFAULT_OPEN_BUTTON


class StateTag(Enum):
    """Tags of the controller states."""
    INITIAL = auto()   # hidden, waiting for the open gesture
    PRESSED = auto()   # open button held, pointer not moved yet
    MOVED = auto()     # a button is held after moving; release activates
    RELEASED = auto()  # open button released without moving; click activates


@dataclass(frozen=True)
class Initial:
    tag: ClassVar[StateTag] = StateTag.INITIAL


@dataclass(frozen=True)
class Pressed:
    tag: ClassVar[StateTag] = StateTag.PRESSED


@dataclass(frozen=True)
class Moved:
    """Carries the button whose release activates the item."""
    starting_button: int = DEFAULT_OPEN_BUTTON
    tag: ClassVar[StateTag] = StateTag.MOVED


@dataclass(frozen=True)
class Released:
    tag: ClassVar[StateTag] = StateTag.RELEASED


ControllerState = Union[Initial, Pressed, Moved, Released]


def is_showing(state: ControllerState) -> bool:
    """True for every state in which the menu is visible."""
    return state.tag is not StateTag.INITIAL
