"""Context detection - maps the node under the pointer to a context name.

Rules are evaluated in order and the first matching predicate wins. Every
predicate reads the node's own document, so nodes living in a sub-frame are
handled the same way as nodes of the top document.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence

from .config import DEFAULT_CONTEXT

Predicate = Callable[[Any], bool]


@dataclass(frozen=True)
class ContextRule:
    """A (predicate, context name) pair."""
    predicate: Predicate
    context: str


def _owner_document(node: Any) -> Any:
    return getattr(node, "owner_document", None) or node


def _is_link(node: Any) -> bool:
    return node.tag in ("a", "area") and node.has_attribute("href")


def is_selected(node: Any) -> bool:
    """True if the node's document has a non-collapsed selection."""
    document = _owner_document(node)
    return not document.is_selection_collapsed


def is_image_in_link(node: Any) -> bool:
    return node.tag == "img" and any(_is_link(a) for a in node.ancestors())


def is_in_link(node: Any) -> bool:
    return any(_is_link(a) for a in node.ancestors_or_self())


def tag_is(*tags: str) -> Predicate:
    """Predicate matching elements with one of the given tag names."""
    wanted = frozenset(t.lower() for t in tags)

    def predicate(node: Any) -> bool:
        return node.tag in wanted

    predicate.__name__ = f"tag_is_{'_'.join(sorted(wanted))}"
    return predicate


def is_text_input(node: Any) -> bool:
    if node.tag == "textarea":
        return True
    if node.tag == "input":
        input_type = (node.get_attribute("type") or "text").lower()
        return input_type in ("text", "password")
    return False


def is_in_frame(node: Any) -> bool:
    """True if the node's document is hosted by a frame element."""
    document = _owner_document(node)
    return getattr(document, "frame_element", None) is not None


DEFAULT_RULES: Sequence[ContextRule] = (
    ContextRule(is_selected, "selection"),
    ContextRule(is_image_in_link, "imageLink"),
    ContextRule(is_in_link, "link"),
    ContextRule(tag_is("img"), "image"),
    ContextRule(tag_is("audio"), "audio"),
    ContextRule(tag_is("video"), "video"),
    ContextRule(is_text_input, "text"),
    ContextRule(is_in_frame, "frame"),
)


class ContextDetector:
    """Ordered rule list; ``detect`` returns the first matching context."""

    def __init__(self, rules: Optional[Sequence[ContextRule]] = None,
                 default: str = DEFAULT_CONTEXT):
        self._rules: List[ContextRule] = list(DEFAULT_RULES if rules is None else rules)
        self.default = default

    @property
    def rules(self) -> List[ContextRule]:
        return list(self._rules)

    def add_rule(self, rule: ContextRule, index: Optional[int] = None) -> None:
        """Insert a rule; appended (lowest priority) when index is None."""
        if index is None:
            self._rules.append(rule)
        else:
            self._rules.insert(index, rule)

    def detect(self, node: Any) -> str:
        if node is None:
            return self.default
        for rule in self._rules:
            if rule.predicate(node):
                return rule.context
        return self.default
