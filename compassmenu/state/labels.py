"""Label state - visibility flag and the delayed-show timer."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from ..scheduler import TimerHandle


@dataclass
class LabelState:
    """Labels are either hidden or visible; a single timer reveals them."""
    visible: bool = False
    timer: Optional[TimerHandle] = None

    @property
    def timer_armed(self) -> bool:
        return self.timer is not None and self.timer.active

    def cancel_timer(self) -> bool:
        """Cancel the pending timer. Returns True if one was armed."""
        was_armed = self.timer_armed
        if self.timer is not None:
            self.timer.cancel()
        self.timer = None
        return was_armed

    def hide(self) -> None:
        self.visible = False
        self.cancel_timer()
