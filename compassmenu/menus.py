"""The default menu catalog.

Actions only carry a command name: each one calls ``sink(name, controller)``
and the host decides what the command does.
"""

from __future__ import annotations
from typing import Any, Callable, Optional

from .catalog import CatalogBuilder, MenuCatalog
from .types import RingId, Variant

ActionSink = Callable[[str, Any], Any]


def _bind(sink: ActionSink, name: str) -> Callable[[Any], Any]:
    def action(controller: Any) -> Any:
        return sink(name, controller)

    action.__name__ = f"action_{name}"
    return action


def build_default_catalog(sink: ActionSink) -> MenuCatalog:
    """Build the page/selection/image/link/text/frame menus."""
    b = CatalogBuilder()

    def item(icon: str, label: str, *classes: str, command: Optional[str] = None) -> Variant:
        return Variant(icon=icon, label=label, action=_bind(sink, command or label),
                       classes=frozenset(classes))

    def submenu(icon: str, label: str, ring_id: RingId) -> Variant:
        return Variant(icon=icon, label=label, children=ring_id)

    # Shared sub-rings
    page_ring = b.add_ring(
        (item("#bookmark", "bookmark"),),
        None,
        (item("#save", "save_page"),),
        None,
        (item("#source", "page_source"),),
        None,
        (item("#info", "page_info"),),
        None,
    )
    page = (submenu("#page", "page", page_ring),)

    window_ring = b.add_ring(
        (item("#forward", "next_window"),),
        None,
        (item("#stop", "close_window"), item("#undo", "undo_close_window")),
        None,
        (item("#back", "previous_window"),),
        None,
        (item("#new", "new_window"), item("#new", "duplicate_window")),
        None,
    )
    window = (submenu("#window", "window", window_ring),)

    tab_ring = b.add_ring(
        (item("#forward", "next_tab"),),
        None,
        (item("#stop", "close_tab"), item("#undo", "undo_close_tab")),
        None,
        (item("#back", "previous_tab"),),
        None,
        (item("#new", "new_tab"), item("#new", "duplicate_tab")),
        None,
    )
    tab = (submenu("#tab", "tab", tab_ring),)

    # Navigation
    forward = (item("#forward", "forward", "forward"),
               item("#last", "last", "forward"))
    reload_or_stop = (item("#reload", "reload", "reload"),
                      item("#reload", "reload_without_cache", "reload"),
                      item("#stop", "stop", "stop"))
    back = (item("#back", "back", "back"),
            item("#first", "first", "back"))
    up = (item("#up", "up", "up"),
          item("#open_location", "open_location"))

    navigation_ring = b.add_ring(forward, page, reload_or_stop, None, back, window, up, tab)
    navigation_sub_ring = b.add_ring(forward, None, reload_or_stop, None, back, None, up, None)
    navigation_sub = (submenu("#navigation", "navigation", navigation_sub_ring),)

    selection_ring = b.add_ring(
        (item("#open_link", "open_selection", "open_selection"),
         item("#open_link", "open_selection_in_new_tab", "open_selection")),
        page,
        None,
        navigation_sub,
        (item("#search", "search_web"), item("#search", "search_web_in_new_tab")),
        window,
        (item("#copy", "copy_selection"),),
        tab,
    )

    view_image = (item("#open_link", "view_image"),
                  item("#open_link", "view_image_in_new_tab"))
    save_image = (item("#save", "save_image"),)
    copy_image_location = (item("#copy", "copy_image_location"),)

    image_ring = b.add_ring(view_image, page, save_image, navigation_sub,
                            None, window, copy_image_location, tab)
    image_sub_ring = b.add_ring(view_image, None, save_image, None,
                                None, page, copy_image_location, None)
    image_sub = (submenu("#image", "image", image_sub_ring),)

    open_in_tab = (item("#open_link", "open_link_in_new_tab"),)
    save_link = (item("#save", "save_link"),)
    open_in_window = (item("#open_link", "open_link_in_new_window"),)
    copy_location = (item("#copy", "copy_location"),)

    link_ring = b.add_ring(open_in_tab, page, save_link, navigation_sub,
                           open_in_window, window, copy_location, tab)
    image_link_ring = b.add_ring(open_in_tab, image_sub, save_link, navigation_sub,
                                 open_in_window, window, copy_location, tab)

    text_ring = b.add_ring(
        (item("#copy", "copy_text"),),
        page,
        (item("#paste", "paste_text"),),
        navigation_sub,
        (item("#cut", "cut_text"),),
        window,
        (item("#undo", "undo_text"), item("#redo", "redo_text")),
        tab,
    )

    frame_ring = b.add_ring(
        (item("#open_link", "view_frame"), item("#open_link", "view_frame_in_new_tab")),
        (item("#reload", "reload_frame"), item("#reload", "reload_frame_without_cache")),
        (item("#save", "save_frame"),),
        None,
        (item("#source", "frame_source"),),
        page,
        (item("#info", "frame_info"),),
        None,
    )
    frame = (submenu("#frame", "frame", frame_ring),)
    frame_navigation_ring = b.add_ring(forward, frame, reload_or_stop, None,
                                       back, window, up, tab)

    b.bind("page", navigation_ring)
    b.bind("selection", selection_ring)
    b.bind("image", image_ring)
    b.bind("imageLink", image_link_ring)
    b.bind("link", link_ring)
    b.bind("audio", navigation_ring)
    b.bind("video", navigation_ring)
    b.bind("text", text_ring)
    b.bind("frame", frame_navigation_ring)

    return b.build()
