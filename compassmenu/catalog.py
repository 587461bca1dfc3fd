"""Menu catalog - an arena of read-only rings addressed by id.

Sub-rings shared by several parents (the page, window and tab menus appear in
almost every context) are stored once and referenced by ``RingId`` from each
parent variant. Nothing is copied or mutated after ``build()``.
"""

from __future__ import annotations
from typing import Dict, List, Mapping, Optional, Sequence

from .config import DEFAULT_CONTEXT
from .types import ItemSlot, MenuRing, RingId, Variant, make_ring
from .logging import log


class CatalogError(LookupError):
    """Raised for references to rings that do not exist."""


class MenuCatalog:
    """Read-only rings plus the context name -> top ring mapping."""

    def __init__(self, rings: Sequence[MenuRing], contexts: Mapping[str, RingId],
                 default_context: str = DEFAULT_CONTEXT):
        self._rings = tuple(rings)
        self._contexts = dict(contexts)
        if default_context not in self._contexts:
            raise CatalogError(f"default context {default_context!r} is not bound")
        self.default_context = default_context

    def __len__(self) -> int:
        return len(self._rings)

    @property
    def contexts(self) -> List[str]:
        return list(self._contexts)

    def ring(self, ring_id: RingId) -> MenuRing:
        if not 0 <= ring_id < len(self._rings):
            raise CatalogError(f"unknown ring id {ring_id}")
        return self._rings[ring_id]

    def context_ring_id(self, context: str) -> RingId:
        ring_id = self._contexts.get(context)
        if ring_id is None:
            log(f"[CATALOG] Unknown context {context!r}, using {self.default_context!r}")
            ring_id = self._contexts[self.default_context]
        return ring_id

    def context_ring(self, context: str) -> MenuRing:
        """Top ring for a context name (unknown names fall back to the default)."""
        return self._rings[self.context_ring_id(context)]

    def children_of(self, variant: Optional[Variant]) -> Optional[MenuRing]:
        if variant is None or variant.children is None:
            return None
        return self.ring(variant.children)

    def has_children(self, variant: Optional[Variant]) -> bool:
        """True if the variant opens a sub-ring with any content."""
        children = self.children_of(variant)
        return children is not None and any(children)


class CatalogBuilder:
    """Collects rings and context bindings, then freezes them into a catalog."""

    def __init__(self):
        self._rings: List[MenuRing] = []
        self._contexts: Dict[str, RingId] = {}

    def add_ring(self, *slots: ItemSlot) -> RingId:
        ring = make_ring(*slots)
        for slot in ring:
            for variant in slot or ():
                if variant.children is not None and not 0 <= variant.children < len(self._rings):
                    raise CatalogError(
                        f"variant {variant.label!r} refers to unknown ring {variant.children}"
                    )
        self._rings.append(ring)
        return len(self._rings) - 1

    def ring(self, ring_id: RingId) -> MenuRing:
        return self._rings[ring_id]

    def bind(self, context: str, ring_id: RingId) -> None:
        if not 0 <= ring_id < len(self._rings):
            raise CatalogError(f"unknown ring id {ring_id}")
        self._contexts[context] = ring_id

    def build(self, default_context: str = DEFAULT_CONTEXT) -> MenuCatalog:
        return MenuCatalog(self._rings, self._contexts, default_context)
