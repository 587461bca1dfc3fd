"""Minimal document model read by context predicates.

Hosts may pass any objects exposing the same attributes; these classes are
what the demo host and the tests use.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional


@dataclass(eq=False)
class Document:
    """A document (top level or inside a sub-frame)."""
    selection_text: str = ""
    # Element hosting this document in its parent; None for the top level
    frame_element: Optional["Element"] = None
    # Set on documents that must never show the menu (e.g. the menu itself)
    suppress_menu: bool = False

    @property
    def is_selection_collapsed(self) -> bool:
        return self.selection_text == ""

    def select(self, text: str) -> None:
        self.selection_text = text

    def clear_selection(self) -> None:
        self.selection_text = ""

    def create_element(self, tag: str, parent: Optional["Element"] = None,
                       **attributes: str) -> "Element":
        return Element(tag=tag, attributes=dict(attributes),
                       parent=parent, owner_document=self)


@dataclass(eq=False)
class Element:
    """An element node."""
    tag: str
    attributes: Dict[str, str] = field(default_factory=dict)
    parent: Optional["Element"] = None
    owner_document: Optional[Document] = None

    def __post_init__(self):
        self.tag = self.tag.lower()
        if self.owner_document is None and self.parent is not None:
            self.owner_document = self.parent.owner_document

    def get_attribute(self, name: str) -> Optional[str]:
        return self.attributes.get(name)

    def has_attribute(self, name: str) -> bool:
        return name in self.attributes

    def ancestors(self) -> Iterator["Element"]:
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def ancestors_or_self(self) -> Iterator["Element"]:
        yield self
        yield from self.ancestors()

    def __repr__(self) -> str:
        return f"<{self.tag} {self.attributes!r}>"
