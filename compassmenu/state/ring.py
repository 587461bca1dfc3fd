"""Ring state - what the open ring shows and where it is."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Optional

from ..geometry import Vector2D
from ..types import (
    EMPTY_RING, PRIMARY, SECONDARY, ItemSlot, MenuRing, PageState, Variant,
    resolve_variant,
)


@dataclass
class RingState:
    """Current items, variant and position of the ring."""
    center: Vector2D = field(default_factory=Vector2D)
    # Unfiltered items of the current ring; re-filtered when page state arrives
    source_items: MenuRing = EMPTY_RING
    items: MenuRing = EMPTY_RING
    variant_index: int = PRIMARY
    target: Optional[Any] = None
    page_state: PageState = field(default_factory=PageState)
    last_point: Optional[Vector2D] = None
    visible: bool = False

    def slot(self, index: int) -> ItemSlot:
        return self.items[index]

    def variant(self, index: int) -> Optional[Variant]:
        """Displayed variant of a slot (secondary falls back to primary)."""
        return resolve_variant(self.items[index], self.variant_index)

    def set_variant_index(self, index: int) -> bool:
        """Select primary or secondary. Returns True if it changed."""
        if index not in (PRIMARY, SECONDARY):
            raise ValueError(f"variant index must be 0 or 1, got {index}")
        changed = index != self.variant_index
        self.variant_index = index
        return changed
