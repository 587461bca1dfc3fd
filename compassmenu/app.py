"""Application - raylib demo host for the menu engine.

The Application class provides a clean, modular main loop that coordinates:
- Input polling (raylib mouse/keyboard -> engine events)
- Event dispatch to the PieMenuController
- Scheduler ticks (label timer, scroll coalescing, page state replies)
- Rendering (demo page + RaylibRenderer)
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import List, Optional, Tuple
import sys
import traceback

from .rl_compat import (
    rl, init_window, make_color as RL_Color, draw_text as RL_DrawText,
    set_clipboard_text,
)
from .config import (
    TARGET_FPS, WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, FONT_SIZE, PAGE_HEIGHT,
    BUTTON_LEFT, BUTTON_MIDDLE, BUTTON_RIGHT, KEY_ALT, KEY_ESCAPE,
    COLOR_PAGE_BG, COLOR_REGION, COLOR_REGION_TEXT,
)
from .controller import PieMenuController
from .dom import Document, Element
from .geometry import clamp
from .events import (
    Modifiers, pointer_down, pointer_up, pointer_move, scroll, key_down, key_up,
    context_menu,
)
from .interfaces import EventDispatcher
from .menus import build_default_catalog
from .page_state import StaticPageStateProvider, page_state_for
from .renderer import RaylibRenderer
from .scheduler import FrameScheduler
from .state import is_showing
from .logging import log, get_logger, increment_frame

SCROLL_STEP = 40.0

# raylib mouse button -> DOM button numbering
_BUTTONS: Tuple[Tuple[str, int], ...] = (
    ("MOUSE_BUTTON_LEFT", BUTTON_LEFT),
    ("MOUSE_BUTTON_RIGHT", BUTTON_RIGHT),
    ("MOUSE_BUTTON_MIDDLE", BUTTON_MIDDLE),
)


@dataclass
class Region:
    """A rectangle of the demo page and the element it stands for."""
    x: int
    y: int
    w: int
    h: int
    element: Element
    caption: str

    def contains(self, px: float, py: float) -> bool:
        return self.x <= px < self.x + self.w and self.y <= py < self.y + self.h


def build_demo_page(document: Document) -> Tuple[Element, List[Region]]:
    """Body element plus clickable regions mapped to link/image/text elements."""
    body = document.create_element("body")
    paragraph = document.create_element("p", body)
    link = document.create_element("a", paragraph, href="https://example.org/docs/")
    image = document.create_element("img", body, src="logo.png")
    image_link_anchor = document.create_element("a", body, href="https://example.org/")
    image_in_link = document.create_element("img", image_link_anchor, src="banner.png")
    text_input = document.create_element("input", body, type="text")
    video = document.create_element("video", body)
    textarea = document.create_element("textarea", body)

    regions = [
        Region(40, 40, 440, 120, paragraph, "Paragraph (page)"),
        Region(40, 200, 200, 60, link, "Link"),
        Region(280, 200, 200, 160, image, "Image"),
        Region(40, 300, 200, 60, image_in_link, "Image link"),
        Region(520, 40, 440, 60, text_input, "Text input"),
        Region(520, 140, 440, 220, video, "Video"),
        Region(40, 900, 440, 160, textarea, "Text area (scroll down)"),
    ]
    return body, regions


@dataclass
class Application:
    """
    Demo application orchestrator.

    Usage:
        app = Application()
        app.initialize()
        app.run()
    """

    document: Document = field(default_factory=Document)
    scheduler: FrameScheduler = field(default_factory=FrameScheduler)
    dispatcher: EventDispatcher = field(default_factory=EventDispatcher)
    renderer: RaylibRenderer = field(default_factory=RaylibRenderer)
    provider: StaticPageStateProvider = field(default_factory=lambda: StaticPageStateProvider(
        page_state_for("https://example.org/docs/guide/", "CompassMenu demo", is_first=True)
    ))
    controller: Optional[PieMenuController] = None
    running: bool = False

    body: Optional[Element] = None
    regions: List[Region] = field(default_factory=list)
    scroll_y: float = 0.0
    _last_mouse: Tuple[float, float] = (0.0, 0.0)
    _status: str = ""

    def initialize(self) -> bool:
        """Open the window and wire the controller. Returns True on success."""
        self.body, self.regions = build_demo_page(self.document)
        self.controller = PieMenuController(
            self.renderer,
            build_default_catalog(self.run_command),
            page_state_provider=self.provider,
            scheduler=self.scheduler,
        )
        if not self.controller.attach(self.dispatcher, self.document):
            return False

        init_window(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE)
        rl.SetTargetFPS(TARGET_FPS)
        # Escape belongs to the menu
        rl.SetExitKey(0)
        log("[APP] Application initialized")
        return True

    def run(self) -> None:
        """Run the main loop."""
        if self.controller is None and not self.initialize():
            return
        self.running = True
        log("[APP] Starting main loop")

        try:
            while self.running:
                self._frame()
        except Exception as e:
            log(f"[APP][CRITICAL] Unhandled exception: {e!r}")
            log(f"[APP][CRITICAL] Traceback:\n{traceback.format_exc()}")
        finally:
            self._cleanup()

    def stop(self) -> None:
        self.running = False

    # ═══════════════════════════════════════════════════════════════════════
    # Actions
    # ═══════════════════════════════════════════════════════════════════════

    def run_command(self, name: str, controller: PieMenuController) -> None:
        """Action sink: the demo only reports commands, copy ones hit the clipboard."""
        log(f"[APP] Command {name!r} in context {controller.context!r}")
        self._status = f"{name} ({controller.context})"

        if name == "copy_selection":
            set_clipboard_text(self.document.selection_text)
        elif name in ("copy_location", "copy_image_location"):
            target = controller.target
            url = target.get_attribute("href") or target.get_attribute("src") or ""
            if not url and target.parent is not None:
                url = target.parent.get_attribute("href") or ""
            set_clipboard_text(url)

    # ═══════════════════════════════════════════════════════════════════════
    # Frame
    # ═══════════════════════════════════════════════════════════════════════

    def _frame(self) -> None:
        if rl.WindowShouldClose():
            self.running = False
            return

        self._poll_input()
        self.scheduler.tick()

        rl.BeginDrawing()
        rl.ClearBackground(RL_Color(COLOR_PAGE_BG))
        self._draw_page()
        self.renderer.draw(self.controller.client_to_local.inverse())
        rl.EndDrawing()

        increment_frame()

    def target_at(self, x: float, y: float) -> Element:
        """Element under a window position."""
        for region in self.regions:
            if region.contains(x, y + self.scroll_y):
                return region.element
        return self.body

    def _modifiers(self) -> Modifiers:
        return Modifiers(
            ctrl=rl.IsKeyDown(rl.KEY_LEFT_CONTROL) or rl.IsKeyDown(rl.KEY_RIGHT_CONTROL),
            shift=rl.IsKeyDown(rl.KEY_LEFT_SHIFT) or rl.IsKeyDown(rl.KEY_RIGHT_SHIFT),
            alt=rl.IsKeyDown(rl.KEY_LEFT_ALT) or rl.IsKeyDown(rl.KEY_RIGHT_ALT),
        )

    def _poll_input(self) -> None:
        pos = rl.GetMousePosition()
        x, y = pos.x, pos.y
        mods = self._modifiers()
        mod_kwargs = dict(ctrl=mods.ctrl, shift=mods.shift, alt=mods.alt)
        dispatch = self.dispatcher.dispatch

        if (x, y) != self._last_mouse:
            self._last_mouse = (x, y)
            dispatch(pointer_move(x, y, **mod_kwargs))

        for rl_name, button in _BUTTONS:
            rl_button = getattr(rl, rl_name)
            if rl.IsMouseButtonPressed(rl_button):
                dispatch(pointer_down(x, y, button, self.target_at(x, y), **mod_kwargs))
            if rl.IsMouseButtonReleased(rl_button):
                dispatch(pointer_up(x, y, button, **mod_kwargs))
                if button == BUTTON_RIGHT and not dispatch(context_menu()).default_prevented:
                    log("[APP] Native context menu would open here")

        wheel = rl.GetMouseWheelMove()
        if wheel != 0.0:
            self._scroll_page(-wheel * SCROLL_STEP)

        if rl.IsKeyPressed(rl.KEY_LEFT_ALT) or rl.IsKeyPressed(rl.KEY_RIGHT_ALT):
            dispatch(key_down(KEY_ALT, **mod_kwargs))
        if rl.IsKeyReleased(rl.KEY_LEFT_ALT) or rl.IsKeyReleased(rl.KEY_RIGHT_ALT):
            dispatch(key_up(KEY_ALT, **dict(mod_kwargs, alt=False)))
        if rl.IsKeyPressed(rl.KEY_ESCAPE):
            event = dispatch(key_down(KEY_ESCAPE, **mod_kwargs))
            if not event.default_prevented:
                self.running = False

        # Demo toggles: selection and page loading
        if rl.IsKeyPressed(rl.KEY_S):
            if self.document.is_selection_collapsed:
                self.document.select("https://example.org/selected")
            else:
                self.document.clear_selection()
            log(f"[APP] Selection: {self.document.selection_text!r}")
        if rl.IsKeyPressed(rl.KEY_L):
            loading = not self.provider.state.is_loading
            self.provider.state = replace(self.provider.state, is_loading=loading)
            log(f"[APP] Page loading: {loading}")

    def _scroll_page(self, dy: float) -> None:
        new_y = clamp(self.scroll_y + dy, 0.0, max(0.0, PAGE_HEIGHT - WINDOW_HEIGHT))
        dy = new_y - self.scroll_y
        if dy == 0.0:
            return
        self.scroll_y = new_y
        if is_showing(self.controller.state):
            self.dispatcher.dispatch(scroll(0.0, dy))
        else:
            self.controller.track_scroll(0.0, dy)

    def _draw_page(self) -> None:
        region_color = RL_Color(COLOR_REGION)
        text_color = RL_Color(COLOR_REGION_TEXT)
        for region in self.regions:
            y = int(region.y - self.scroll_y)
            rl.DrawRectangle(region.x, y, region.w, region.h, region_color)
            RL_DrawText(region.caption, region.x + 8, y + 8, FONT_SIZE, text_color)

        state = self.provider.state
        help_text = (f"Right-drag: menu   Alt: secondary   S: selection "
                     f"[{'on' if self.document.selection_text else 'off'}]   "
                     f"L: loading [{'on' if state.is_loading else 'off'}]")
        RL_DrawText(help_text, 40, WINDOW_HEIGHT - 70, FONT_SIZE, text_color)
        if self._status:
            RL_DrawText(f"Last command: {self._status}", 40, WINDOW_HEIGHT - 40,
                        FONT_SIZE, text_color)

    def _cleanup(self) -> None:
        log("[APP] Starting cleanup")
        if self.controller is not None:
            self.controller.detach()
        self.scheduler.clear()
        try:
            log("[APP] Closing window")
            rl.CloseWindow()
        except Exception:
            pass
        log("[APP] Cleanup complete")


def main() -> None:
    log("[MAIN] Starting demo")
    for a in sys.argv[1:]:
        if a == "--quiet":
            # State transitions log on every gesture
            get_logger().mute("MENU")
        else:
            log(f"[ARGS] Ignoring argument: {a}")
    Application().run()


if __name__ == "__main__":
    main()
