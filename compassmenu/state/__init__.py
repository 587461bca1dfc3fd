"""State management submodules for CompassMenu."""

from .machine import (
    StateTag, Initial, Pressed, Moved, Released, ControllerState, is_showing,
)
from .labels import LabelState
from .ring import RingState

__all__ = [
    'StateTag',
    'Initial',
    'Pressed',
    'Moved',
    'Released',
    'ControllerState',
    'is_showing',
    'LabelState',
    'RingState',
]
