"""Frame scheduler - single-shot timers, per-frame callbacks and UI events.

Everything scheduled here runs inside ``tick()`` on the UI thread. ``post()``
is the only thread-safe entry point: worker threads use it to hand results
back to the UI thread.
"""

from __future__ import annotations
import heapq
import itertools
from collections import deque
from dataclasses import dataclass, field
from threading import Lock
from typing import Any, Callable, Deque, List, Optional, Tuple

from .logging import log_exception, now


@dataclass
class UIEvent:
    """A callback to be processed on the UI thread."""
    callback: Callable
    args: tuple


@dataclass
class TimerHandle:
    """Handle returned by ``call_later``; ``cancel()`` is idempotent."""
    deadline: float
    callback: Callable[[], Any] = field(repr=False)
    cancelled: bool = False
    fired: bool = False

    def cancel(self) -> None:
        self.cancelled = True

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.fired)


class FrameScheduler:
    """Cooperative scheduler driven by the host's frame loop."""

    def __init__(self, clock: Callable[[], float] = now):
        self._clock = clock
        self._timers: List[Tuple[float, int, TimerHandle]] = []
        self._seq = itertools.count()
        self._frame_callbacks: List[Callable[[], Any]] = []
        self.ui_events: Deque[UIEvent] = deque()
        self.ui_lock = Lock()

    def time(self) -> float:
        return self._clock()

    def call_later(self, delay_ms: float, callback: Callable[[], Any]) -> TimerHandle:
        handle = TimerHandle(deadline=self._clock() + delay_ms / 1000.0, callback=callback)
        heapq.heappush(self._timers, (handle.deadline, next(self._seq), handle))
        return handle

    def request_frame(self, callback: Callable[[], Any]) -> None:
        """Run callback once during the next tick."""
        self._frame_callbacks.append(callback)

    def post(self, callback: Callable, *args: Any) -> None:
        """Queue callback(*args) for the UI thread. Safe from any thread."""
        with self.ui_lock:
            self.ui_events.append(UIEvent(callback, args))

    @property
    def pending_timers(self) -> int:
        return sum(1 for _, _, h in self._timers if h.active)

    def poll_ui_events(self, max_events: int = 100) -> int:
        events_to_process = []
        with self.ui_lock:
            while self.ui_events and len(events_to_process) < max_events:
                events_to_process.append(self.ui_events.popleft())

        for event in events_to_process:
            self._run("[SCHED][UI_EVENT][ERR]", event.callback, *event.args)
        return len(events_to_process)

    def tick(self, current: Optional[float] = None) -> None:
        """Process UI events, frame callbacks and due timers, in that order."""
        t = self._clock() if current is None else current

        self.poll_ui_events()

        callbacks, self._frame_callbacks = self._frame_callbacks, []
        for callback in callbacks:
            self._run("[SCHED][FRAME][ERR]", callback)

        while self._timers and self._timers[0][0] <= t:
            _, _, handle = heapq.heappop(self._timers)
            if not handle.active:
                continue
            handle.fired = True
            self._run("[SCHED][TIMER][ERR]", handle.callback)

    def clear(self) -> None:
        """Drop every pending timer and frame callback."""
        for _, _, handle in self._timers:
            handle.cancel()
        self._timers.clear()
        self._frame_callbacks.clear()

    @staticmethod
    def _run(tag: str, callback: Callable, *args: Any) -> None:
        try:
            callback(*args)
        except Exception as e:
            log_exception(f"{tag} {e!r}")
