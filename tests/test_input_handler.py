import pytest

from compassmenu.commands import (
    ActivateAt, CloseMenu, EnterState, FollowPointer, OpenMenu, PreventDefault,
    ScrollBy, SetVariant,
)
from compassmenu.events import (
    context_menu, key_down, key_up, pointer_down, pointer_move, pointer_up, scroll,
)
from compassmenu.input_handler import InputHandler
from compassmenu.state import Initial, Moved, Pressed, Released
from compassmenu.types import PRIMARY, SECONDARY, MenuConfig

SHOWING = [Pressed(), Moved(2), Released()]


def kinds(commands):
    return [type(c) for c in commands]


@pytest.fixture
def handler(config):
    return InputHandler(config)


def test_open_gesture(handler):
    event = pointer_down(10, 10, 2)
    commands = handler.handle(Initial(), event)
    assert kinds(commands) == [OpenMenu, EnterState, PreventDefault]
    assert commands[1].state == Pressed()
    # The handler only decides, it never touches the event
    assert not event.default_prevented


def test_wrong_button_does_not_open(handler):
    assert handler.handle(Initial(), pointer_down(10, 10, 0)) == []


@pytest.mark.parametrize("event", [
    pointer_up(0, 0, 2),
    pointer_move(0, 0),
    scroll(0, 10),
    key_down("Escape"),
    key_up("Alt"),
    context_menu(),
])
def test_initial_ignores_everything_but_pointer_down(handler, event):
    assert handler.handle(Initial(), event) == []
    assert not event.default_prevented


def test_shift_suppresses_by_default(handler):
    assert handler.handle(Initial(), pointer_down(0, 0, 2, shift=True)) == []


def test_suppression_needs_both_modifiers_when_both_flags_set():
    handler = InputHandler(MenuConfig(is_ctrl_suppress=True, is_shift_suppress=True,
                                      mac_ctrl_click=False))
    assert handler.handle(Initial(), pointer_down(0, 0, 2, ctrl=True)) != []
    assert handler.handle(Initial(), pointer_down(0, 0, 2, shift=True)) != []
    assert handler.handle(Initial(), pointer_down(0, 0, 2, ctrl=True, shift=True)) == []


def test_suppression_by_any_single_flag():
    handler = InputHandler(MenuConfig(is_ctrl_suppress=True, is_shift_suppress=False,
                                      mac_ctrl_click=False))
    assert handler.handle(Initial(), pointer_down(0, 0, 2, ctrl=True)) == []
    assert handler.handle(Initial(), pointer_down(0, 0, 2, shift=True)) != []


def test_required_modifiers():
    handler = InputHandler(MenuConfig(require_ctrl=True, require_shift=True,
                                      is_shift_suppress=False, mac_ctrl_click=False))
    assert handler.handle(Initial(), pointer_down(0, 0, 2, ctrl=True)) == []
    assert handler.handle(Initial(), pointer_down(0, 0, 2, ctrl=True, shift=True)) != []


def test_mac_ctrl_click_counts_as_right_button():
    handler = InputHandler(MenuConfig(mac_ctrl_click=True))
    assert handler.mouse_button(pointer_down(0, 0, 0, ctrl=True)) == 2
    assert handler.handle(Initial(), pointer_down(0, 0, 0, ctrl=True)) != []
    assert handler.handle(Initial(), pointer_down(0, 0, 0)) == []


def test_pressed_move_starts_drag(handler):
    event = pointer_move(50, 0)
    commands = handler.handle(Pressed(), event)
    assert commands == [EnterState(Moved(2)), FollowPointer(event)]


def test_pressed_scroll_starts_drag(handler):
    commands = handler.handle(Pressed(), scroll(0, 30))
    assert commands == [EnterState(Moved(2)), ScrollBy(0, 30)]


def test_pressed_release_of_open_button(handler):
    commands = handler.handle(Pressed(), pointer_up(0, 0, 2))
    assert kinds(commands) == [EnterState, PreventDefault]
    assert commands[0].state == Released()


def test_pressed_release_of_other_button_selects_primary(handler):
    commands = handler.handle(Pressed(), pointer_up(0, 0, 0))
    assert kinds(commands) == [SetVariant, PreventDefault]
    assert commands[0].index == PRIMARY


def test_moved_release_of_starting_button_activates(handler):
    event = pointer_up(40, 0, 0)
    commands = handler.handle(Moved(0), event)
    assert commands == [ActivateAt(event), PreventDefault(event)]


def test_moved_release_of_other_button_selects_primary(handler):
    commands = handler.handle(Moved(0), pointer_up(40, 0, 2))
    assert kinds(commands) == [SetVariant, PreventDefault]
    assert commands[0].index == PRIMARY


def test_released_press_remembers_button(handler):
    commands = handler.handle(Released(), pointer_down(0, 0, 1))
    assert kinds(commands) == [EnterState, PreventDefault]
    assert commands[0].state == Moved(1)


@pytest.mark.parametrize("state", [Pressed(), Moved(2)])
def test_press_while_showing_selects_secondary(handler, state):
    commands = handler.handle(state, pointer_down(0, 0, 0))
    assert kinds(commands) == [SetVariant, PreventDefault]
    assert commands[0].index == SECONDARY


@pytest.mark.parametrize("state", [Moved(2), Released()])
def test_move_while_showing_follows(handler, state):
    event = pointer_move(1, 2)
    assert handler.handle(state, event) == [FollowPointer(event)]


@pytest.mark.parametrize("state", [Moved(2), Released()])
def test_scroll_while_showing(handler, state):
    assert handler.handle(state, scroll(3, 4)) == [ScrollBy(3, 4)]


def test_released_pointer_up_selects_primary(handler):
    commands = handler.handle(Released(), pointer_up(0, 0, 2))
    assert kinds(commands) == [SetVariant, PreventDefault]


@pytest.mark.parametrize("state", SHOWING)
def test_escape_closes(handler, state):
    assert kinds(handler.handle(state, key_down("Escape"))) == [CloseMenu, PreventDefault]


@pytest.mark.parametrize("state", SHOWING)
def test_alt_selects_secondary_then_primary(handler, state):
    down = handler.handle(state, key_down("Alt", alt=True))
    assert kinds(down) == [SetVariant, PreventDefault]
    assert down[0].index == SECONDARY

    up = handler.handle(state, key_up("Alt"))
    assert kinds(up) == [SetVariant, PreventDefault]
    assert up[0].index == PRIMARY


def test_other_keys_are_ignored(handler):
    assert handler.handle(Moved(2), key_down("a")) == []
    # Alt still held while another key is released
    assert handler.handle(Moved(2), key_up("a", alt=True)) == []


@pytest.mark.parametrize("state", SHOWING)
def test_context_menu_suppressed_while_showing(handler, state):
    event = context_menu()
    assert kinds(handler.handle(state, event)) == [PreventDefault]
