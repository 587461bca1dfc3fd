"""Core data types for CompassMenu."""

from __future__ import annotations
import sys
from dataclasses import dataclass, field, fields, replace
from typing import Any, Callable, FrozenSet, Mapping, Optional, Tuple

from .config import (
    DEFAULT_OPEN_BUTTON, DEFAULT_REQUIRE_CTRL, DEFAULT_REQUIRE_SHIFT,
    DEFAULT_IS_CTRL_SUPPRESS, DEFAULT_IS_SHIFT_SUPPRESS,
    LABEL_DELAY_MS, SLOT_COUNT,
)

RingId = int

PRIMARY = 0
SECONDARY = 1


@dataclass(frozen=True)
class Variant:
    """Primary or secondary content of a menu slot.

    ``label`` is a label key; the controller maps it to display text.
    ``children`` is the id of a ring in the owning catalog.
    ``action`` receives the controller when the variant is activated.
    """
    icon: str
    label: str
    action: Optional[Callable[[Any], Any]] = field(default=None, compare=False)
    classes: FrozenSet[str] = frozenset()
    children: Optional[RingId] = None

    def has_class(self, class_name: str) -> bool:
        return class_name in self.classes


# A slot is a tuple of variants, or None for "no content at this position".
ItemSlot = Optional[Tuple[Variant, ...]]

# Always exactly SLOT_COUNT slots; index 0 is east, increasing clockwise.
MenuRing = Tuple[ItemSlot, ...]

EMPTY_RING: MenuRing = (None,) * SLOT_COUNT


def make_ring(*slots: ItemSlot) -> MenuRing:
    """Build a ring, padding missing trailing slots with None."""
    if len(slots) > SLOT_COUNT:
        raise ValueError(f"a ring has at most {SLOT_COUNT} slots, got {len(slots)}")
    normalized = tuple(tuple(s) if s else None for s in slots)
    return normalized + (None,) * (SLOT_COUNT - len(normalized))


def resolve_variant(slot: ItemSlot, variant_index: int) -> Optional[Variant]:
    """Variant shown for a slot, falling back to the primary one."""
    if not slot:
        return None
    if 0 <= variant_index < len(slot) and slot[variant_index] is not None:
        return slot[variant_index]
    return slot[PRIMARY]


@dataclass(frozen=True)
class PageState:
    """Page facts queried asynchronously when the menu opens."""
    is_first: bool = False
    is_last: bool = False
    is_top: bool = False
    is_loading: bool = False
    top_url: str = ""
    top_title: str = ""


# Add-on storage spelling -> MenuConfig field
_CONFIG_ALIASES = {
    "openButton": "open_button",
    "requireCtrl": "require_ctrl",
    "requireShift": "require_shift",
    "isCtrlSupress": "is_ctrl_suppress",
    "isCtrlSuppress": "is_ctrl_suppress",
    "isShiftSupress": "is_shift_suppress",
    "isShiftSuppress": "is_shift_suppress",
    "labelDelay": "label_delay_ms",
    "labelDelayMs": "label_delay_ms",
}


_TRUE_WORDS = ("true", "1", "yes", "on")
_FALSE_WORDS = ("false", "0", "no", "off", "")


def _parse_flag(name: str, value: Any) -> bool:
    """Boolean option from a bool, a number or a stored string like \"false\"."""
    if isinstance(value, str):
        word = value.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
        raise ValueError(f"option {name!r}: not a boolean: {value!r}")
    return bool(value)


@dataclass(frozen=True)
class MenuConfig:
    """Per-document menu options."""
    open_button: int = DEFAULT_OPEN_BUTTON
    require_ctrl: bool = DEFAULT_REQUIRE_CTRL
    require_shift: bool = DEFAULT_REQUIRE_SHIFT
    is_ctrl_suppress: bool = DEFAULT_IS_CTRL_SUPPRESS
    is_shift_suppress: bool = DEFAULT_IS_SHIFT_SUPPRESS
    label_delay_ms: int = LABEL_DELAY_MS
    # Ctrl + left button acts as the right button (macOS convention)
    mac_ctrl_click: bool = field(default_factory=lambda: sys.platform == "darwin")

    def __post_init__(self):
        if self.label_delay_ms < 0:
            raise ValueError(f"label_delay_ms must be >= 0, got {self.label_delay_ms}")

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> MenuConfig:
        """Build a config from stored options, ignoring unknown keys."""
        return cls().updated(**options)

    def updated(self, **changes: Any) -> MenuConfig:
        """Copy with the given options changed (either spelling accepted)."""
        known = {f.name for f in fields(self)}
        kwargs = {}
        for key, value in changes.items():
            name = _CONFIG_ALIASES.get(key, key)
            if name not in known:
                continue
            if name in ("open_button", "label_delay_ms"):
                value = int(value)
            else:
                value = _parse_flag(name, value)
            kwargs[name] = value
        return replace(self, **kwargs)
