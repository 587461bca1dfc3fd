"""Tagged log lines with elapsed time and frame number.

Messages start with bracketed tags (``[MENU]``, ``[PAGESTATE][ERR]``). The
first tag selects the channel, and channels can be muted one by one.
"""

from __future__ import annotations
import re
import sys
import time
import traceback
from typing import Iterable, Optional, Set, TextIO

_TAG = re.compile(r"\[([A-Z_]+)\]")


def channel_of(msg: str) -> Optional[str]:
    """First tag of a message, without brackets; None for untagged messages."""
    match = _TAG.match(msg)
    return match.group(1) if match else None


class Logger:
    """Writes ``[elapsed s Fframe] msg`` lines; stdout unless a stream is given."""

    def __init__(self, stream: Optional[TextIO] = None, muted: Iterable[str] = ()):
        self._start_time: float = time.perf_counter()
        self._frame: int = 0
        self._stream = stream
        self._muted: Set[str] = set(muted)
        self.enabled: bool = True

    @property
    def frame(self) -> int:
        return self._frame

    @frame.setter
    def frame(self, value: int) -> None:
        self._frame = value

    def increment_frame(self) -> None:
        self._frame += 1

    @property
    def elapsed(self) -> float:
        return time.perf_counter() - self._start_time

    # ─── Channels ────────────────────────────────────────────────────────────

    def mute(self, *channels: str) -> None:
        self._muted.update(channels)

    def unmute(self, *channels: str) -> None:
        self._muted.difference_update(channels)

    def is_muted(self, msg: str) -> bool:
        return channel_of(msg) in self._muted

    # ─── Output ──────────────────────────────────────────────────────────────

    def log(self, msg: str) -> None:
        if not self.enabled or self.is_muted(msg):
            return
        self._write(f"[{self.elapsed:7.3f}s F{self._frame:06d}] {msg}\n")

    def exception(self, msg: str) -> None:
        """Log msg followed by the traceback being handled. Never muted."""
        if not self.enabled:
            return
        trace = traceback.format_exc().rstrip()
        self._write(f"[{self.elapsed:7.3f}s F{self._frame:06d}] {msg}\n{trace}\n")

    def _write(self, text: str) -> None:
        stream = self._stream or sys.stdout
        try:
            stream.write(text)
            stream.flush()
        except Exception:
            try:
                sys.stderr.write(text)
                sys.stderr.flush()
            except Exception:
                pass

    def __call__(self, msg: str) -> None:
        self.log(msg)


_logger: Optional[Logger] = None


def get_logger() -> Logger:
    """Process-wide logger, created on first use."""
    global _logger
    if _logger is None:
        _logger = Logger()
    return _logger


def log(msg: str) -> None:
    get_logger().log(msg)


def log_exception(msg: str) -> None:
    """Log with the active traceback; call from an ``except`` block."""
    get_logger().exception(msg)


def increment_frame() -> None:
    get_logger().increment_frame()


def now() -> float:
    """Monotonic seconds; the scheduler's default clock."""
    return time.perf_counter()
