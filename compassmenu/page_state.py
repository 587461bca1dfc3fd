"""Ready-made page state providers."""

from __future__ import annotations
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, Optional

from .config import PAGE_STATE_WORKERS
from .interfaces import PageStateProvider
from .types import PageState
from .urls import is_top_url
from .logging import log


def page_state_for(url: str, title: str = "", *, is_first: bool = False,
                   is_last: bool = False, is_loading: bool = False) -> PageState:
    """PageState with ``is_top`` derived from the URL hierarchy."""
    return PageState(
        is_first=is_first,
        is_last=is_last,
        is_top=is_top_url(url) if url else False,
        is_loading=is_loading,
        top_url=url,
        top_title=title,
    )


class StaticPageStateProvider(PageStateProvider):
    """Answers every query immediately with a fixed, replaceable state."""

    def __init__(self, state: Optional[PageState] = None):
        self.state = state or PageState()
        self.request_count = 0

    def request_page_state(self, target: Any) -> "Future[PageState]":
        self.request_count += 1
        future: Future = Future()
        future.set_result(self.state)
        return future


class ExecutorPageStateProvider(PageStateProvider):
    """Runs a blocking query function on a worker thread pool."""

    def __init__(self, query: Callable[[Any], PageState],
                 workers: int = PAGE_STATE_WORKERS):
        self._query = query
        self._executor = ThreadPoolExecutor(max_workers=workers,
                                            thread_name_prefix="page-state")

    def request_page_state(self, target: Any) -> "Future[PageState]":
        return self._executor.submit(self._query, target)

    def shutdown(self) -> None:
        log("[PAGESTATE] Shutting down page state workers")
        self._executor.shutdown(wait=False)
