"""Menu filters - pure transforms that adapt ring slots to the page state.

A filter takes ``(target, page_state, slot, config)`` and returns a new slot.
Filters must not mutate the slot they receive; returning ``None`` or an
empty tuple hides the slot. Mutating filters are a caller bug and are not
detected at runtime.
"""

from __future__ import annotations
from typing import Any, Callable, Iterable, Sequence, Tuple

from .types import ItemSlot, MenuConfig, MenuRing, PageState
from .urls import is_openable_url

MenuFilter = Callable[[Any, PageState, ItemSlot, MenuConfig], ItemSlot]


def hide_if_class_of(slot: ItemSlot, class_name: str) -> ItemSlot:
    """New slot without the variants tagged with class_name."""
    if not slot:
        return slot
    return tuple(v for v in slot if not v.has_class(class_name))


def hide_back_if_first(target: Any, page_state: PageState,
                       slot: ItemSlot, config: MenuConfig) -> ItemSlot:
    """Hide ``back`` variants when there is no previous history entry."""
    if page_state.is_first:
        return hide_if_class_of(slot, "back")
    return slot


def hide_forward_if_last(target: Any, page_state: PageState,
                         slot: ItemSlot, config: MenuConfig) -> ItemSlot:
    """Hide ``forward`` variants when there is no next history entry."""
    if page_state.is_last:
        return hide_if_class_of(slot, "forward")
    return slot


def hide_up_if_top(target: Any, page_state: PageState,
                   slot: ItemSlot, config: MenuConfig) -> ItemSlot:
    if page_state.is_top:
        return hide_if_class_of(slot, "up")
    return slot


def choose_reload_or_stop(target: Any, page_state: PageState,
                          slot: ItemSlot, config: MenuConfig) -> ItemSlot:
    """Keep ``stop`` while the page loads, ``reload`` otherwise."""
    if page_state.is_loading:
        return hide_if_class_of(slot, "reload")
    return hide_if_class_of(slot, "stop")


def _selection_text(target: Any) -> str:
    document = getattr(target, "owner_document", None)
    return getattr(document, "selection_text", "") or ""


def hide_open_selection_unless_url(target: Any, page_state: PageState,
                                   slot: ItemSlot, config: MenuConfig) -> ItemSlot:
    """Hide ``open_selection`` variants unless the selection is an openable URL."""
    if target is not None and is_openable_url(_selection_text(target)):
        return slot
    return hide_if_class_of(slot, "open_selection")


STANDARD_FILTERS: Tuple[MenuFilter, ...] = (
    hide_back_if_first,
    hide_forward_if_last,
    hide_up_if_top,
    choose_reload_or_stop,
    hide_open_selection_unless_url,
)


class FilterPipeline:
    """Ordered filters applied slot by slot, left to right."""

    def __init__(self, filters: Iterable[MenuFilter] = STANDARD_FILTERS):
        self._filters: Tuple[MenuFilter, ...] = tuple(filters)

    @property
    def filters(self) -> Tuple[MenuFilter, ...]:
        return self._filters

    def __len__(self) -> int:
        return len(self._filters)

    def with_filters(self, *filters: MenuFilter) -> FilterPipeline:
        """New pipeline with filters appended."""
        return FilterPipeline(self._filters + tuple(filters))

    def reordered(self, order: Sequence[int]) -> FilterPipeline:
        """New pipeline with filters in the given index order."""
        return FilterPipeline(self._filters[i] for i in order)

    def apply_slot(self, target: Any, page_state: PageState,
                   slot: ItemSlot, config: MenuConfig) -> ItemSlot:
        for menu_filter in self._filters:
            slot = menu_filter(target, page_state, slot, config)
        return slot if slot else None

    def apply(self, target: Any, page_state: PageState,
              ring: MenuRing, config: MenuConfig) -> MenuRing:
        return tuple(self.apply_slot(target, page_state, slot, config) for slot in ring)
