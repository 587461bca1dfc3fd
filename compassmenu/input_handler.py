"""Input Handler - maps (state, input event) pairs to commands.

This is the transition function of the menu. It never mutates anything:
it looks the pair up in a table and returns the commands the controller
must execute. Pairs missing from the table fall back to the handlers shared
by every showing state; anything still unmatched is a no-op.
"""

from __future__ import annotations
from typing import Callable, Dict, List, Optional, Tuple

from .commands import (
    Command, EnterState, OpenMenu, CloseMenu, ActivateAt, FollowPointer,
    ScrollBy, PreventDefault, use_primary, use_secondary,
)
from .config import BUTTON_LEFT, BUTTON_RIGHT, KEY_ESCAPE
from .events import EventKind, InputEvent, KeyEvent, PointerEvent, ScrollEvent
from .state import ControllerState, Moved, Pressed, Released, StateTag, is_showing
from .types import MenuConfig

# A handler returns None to defer to the shared showing-state handler.
Handler = Callable[["InputHandler", ControllerState, InputEvent], Optional[List[Command]]]


class InputHandler:
    """Transition function of the controller, parameterized by the config."""

    def __init__(self, config: Optional[MenuConfig] = None):
        self.config = config or MenuConfig()

    # ─── Guards ──────────────────────────────────────────────────────────────

    def mouse_button(self, event: PointerEvent) -> int:
        """Button of the event. Ctrl + left counts as right when configured."""
        if (self.config.mac_ctrl_click and event.button == BUTTON_LEFT
                and event.modifiers.ctrl):
            return BUTTON_RIGHT
        return event.button

    def is_open_button(self, event: PointerEvent) -> bool:
        """True if the open button and the required modifiers are pressed."""
        cfg = self.config
        ctrl_guard = not cfg.require_ctrl or event.modifiers.ctrl
        shift_guard = not cfg.require_shift or event.modifiers.shift
        return self.mouse_button(event) == cfg.open_button and ctrl_guard and shift_guard

    def is_suppressed(self, event: PointerEvent) -> bool:
        """True if suppressing modifiers are held.

        With both suppress options set, only ctrl and shift together suppress
        the menu; otherwise any configured modifier does.
        """
        cfg = self.config
        by_ctrl = cfg.is_ctrl_suppress and event.modifiers.ctrl
        by_shift = cfg.is_shift_suppress and event.modifiers.shift
        if cfg.is_ctrl_suppress and cfg.is_shift_suppress:
            return by_ctrl and by_shift
        return by_ctrl or by_shift

    # ─── Dispatch ────────────────────────────────────────────────────────────

    def handle(self, state: ControllerState, event: InputEvent) -> List[Command]:
        commands = None
        handler = _TRANSITIONS.get((state.tag, event.kind))
        if handler is not None:
            commands = handler(self, state, event)
        if commands is None and is_showing(state):
            shared = _SHOWING.get(event.kind)
            if shared is not None:
                commands = shared(self, state, event)
        return commands or []

    # ─── Initial ─────────────────────────────────────────────────────────────

    def _initial_pointer_down(self, state, event: PointerEvent):
        if self.is_open_button(event) and not self.is_suppressed(event):
            return [OpenMenu(event), EnterState(Pressed()), PreventDefault(event)]
        return []

    # ─── Pressed ─────────────────────────────────────────────────────────────

    def _pressed_pointer_move(self, state, event: PointerEvent):
        return [EnterState(Moved(self.config.open_button)), FollowPointer(event)]

    def _pressed_scroll(self, state, event: ScrollEvent):
        return [EnterState(Moved(self.config.open_button)), ScrollBy(event.dx, event.dy)]

    def _pressed_pointer_up(self, state, event: PointerEvent):
        if self.mouse_button(event) == self.config.open_button:
            return [EnterState(Released()), PreventDefault(event)]
        return None

    # ─── Moved ───────────────────────────────────────────────────────────────

    def _moved_pointer_up(self, state: Moved, event: PointerEvent):
        if self.mouse_button(event) == state.starting_button:
            return [ActivateAt(event), PreventDefault(event)]
        return None

    # ─── Released ────────────────────────────────────────────────────────────

    def _released_pointer_down(self, state, event: PointerEvent):
        return [EnterState(Moved(self.mouse_button(event))), PreventDefault(event)]

    # ─── Any showing state ───────────────────────────────────────────────────

    def _showing_pointer_down(self, state, event: PointerEvent):
        return [use_secondary(), PreventDefault(event)]

    def _showing_pointer_up(self, state, event: PointerEvent):
        return [use_primary(), PreventDefault(event)]

    def _showing_pointer_move(self, state, event: PointerEvent):
        return [FollowPointer(event)]

    def _showing_scroll(self, state, event: ScrollEvent):
        return [ScrollBy(event.dx, event.dy)]

    def _showing_key_down(self, state, event: KeyEvent):
        if event.key == KEY_ESCAPE:
            return [CloseMenu(), PreventDefault(event)]
        if event.modifiers.alt:
            return [use_secondary(), PreventDefault(event)]
        return []

    def _showing_key_up(self, state, event: KeyEvent):
        if not event.modifiers.alt:
            return [use_primary(), PreventDefault(event)]
        return []

    def _showing_context_menu(self, state, event: InputEvent):
        return [PreventDefault(event)]


_TRANSITIONS: Dict[Tuple[StateTag, EventKind], Handler] = {
    (StateTag.INITIAL, EventKind.POINTER_DOWN): InputHandler._initial_pointer_down,
    (StateTag.PRESSED, EventKind.POINTER_MOVE): InputHandler._pressed_pointer_move,
    (StateTag.PRESSED, EventKind.SCROLL): InputHandler._pressed_scroll,
    (StateTag.PRESSED, EventKind.POINTER_UP): InputHandler._pressed_pointer_up,
    (StateTag.MOVED, EventKind.POINTER_UP): InputHandler._moved_pointer_up,
    (StateTag.RELEASED, EventKind.POINTER_DOWN): InputHandler._released_pointer_down,
}

_SHOWING: Dict[EventKind, Handler] = {
    EventKind.POINTER_DOWN: InputHandler._showing_pointer_down,
    EventKind.POINTER_UP: InputHandler._showing_pointer_up,
    EventKind.POINTER_MOVE: InputHandler._showing_pointer_move,
    EventKind.SCROLL: InputHandler._showing_scroll,
    EventKind.KEY_DOWN: InputHandler._showing_key_down,
    EventKind.KEY_UP: InputHandler._showing_key_up,
    EventKind.CONTEXT_MENU: InputHandler._showing_context_menu,
}
