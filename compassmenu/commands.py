"""Command Pattern for the menu state machine.

Transitions produce commands; the controller executes them in order. Each
command has an execute() method and optional can_execute() for guards.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .controller import PieMenuController

from .events import InputEvent, PointerEvent
from .state import ControllerState, is_showing
from .types import PRIMARY, SECONDARY


class Command(ABC):
    """Base class for all commands."""

    @abstractmethod
    def execute(self, controller: "PieMenuController") -> bool:
        """Execute the command. Returns True if action was taken."""
        pass

    def can_execute(self, controller: "PieMenuController") -> bool:
        """Check if command can be executed. Override for guards."""
        return True


# ═══════════════════════════════════════════════════════════════════════════
# State transitions
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class EnterState(Command):
    """Switch the controller to another state."""
    state: ControllerState

    def execute(self, controller: "PieMenuController") -> bool:
        controller.enter_state(self.state)
        return True


@dataclass
class OpenMenu(Command):
    """Open the ring for the context under the pointer."""
    event: PointerEvent

    def execute(self, controller: "PieMenuController") -> bool:
        controller.open_for_event(self.event)
        return True


@dataclass
class CloseMenu(Command):
    """Hide the ring and return to Initial without activating anything."""

    def execute(self, controller: "PieMenuController") -> bool:
        controller.close()
        return True


@dataclass
class ActivateAt(Command):
    """Activate the item under the release point, then close."""
    event: PointerEvent

    def execute(self, controller: "PieMenuController") -> bool:
        point = controller.to_local(self.event.client_position)
        activated = controller.activate_item_at(point)
        controller.close()
        return activated


# ═══════════════════════════════════════════════════════════════════════════
# Ring movement
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class FollowPointer(Command):
    """Follow the pointer and restart the label timer."""
    event: PointerEvent

    def can_execute(self, controller: "PieMenuController") -> bool:
        return is_showing(controller.state)

    def execute(self, controller: "PieMenuController") -> bool:
        if not self.can_execute(controller):
            return False
        controller.follow(controller.to_local(self.event.client_position))
        controller.reset_label_timer()
        return True


@dataclass
class ScrollBy(Command):
    """Shift the last pointer point by a document scroll and follow it once per frame."""
    dx: float
    dy: float

    def can_execute(self, controller: "PieMenuController") -> bool:
        return is_showing(controller.state)

    def execute(self, controller: "PieMenuController") -> bool:
        if not self.can_execute(controller):
            return False
        return controller.scroll_by(self.dx, self.dy)


# ═══════════════════════════════════════════════════════════════════════════
# Variants and native behavior
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class SetVariant(Command):
    """Select the primary or the secondary variant of every slot."""
    index: int

    def execute(self, controller: "PieMenuController") -> bool:
        return controller.set_variant(self.index)


def use_primary() -> SetVariant:
    return SetVariant(PRIMARY)


def use_secondary() -> SetVariant:
    return SetVariant(SECONDARY)


@dataclass
class PreventDefault(Command):
    """Keep the host from running its default handling of the event."""
    event: InputEvent

    def execute(self, controller: "PieMenuController") -> bool:
        self.event.prevent_default()
        return True
