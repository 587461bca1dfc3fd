"""Shared fixtures: a recording renderer, a manual clock and a demo document."""

from concurrent.futures import Future
from typing import List, Optional

import pytest

from compassmenu.config import SLOT_COUNT
from compassmenu.controller import PieMenuController
from compassmenu.dom import Document
from compassmenu.geometry import Vector2D
from compassmenu.interfaces import PageStateProvider, Renderer
from compassmenu.menus import build_default_catalog
from compassmenu.page_state import StaticPageStateProvider
from compassmenu.scheduler import FrameScheduler
from compassmenu.types import MenuConfig, PageState


class RecordingRenderer(Renderer):
    """Keeps the last state pushed for every slot plus the list of moves."""

    def __init__(self):
        self.visible = False
        self.offset = Vector2D()
        self.moves: List[Vector2D] = []
        self.icons: List[Optional[str]] = [None] * SLOT_COUNT
        self.markers: List[bool] = [False] * SLOT_COUNT
        self.labels: List[Optional[str]] = [None] * SLOT_COUNT

    def show_container(self):
        self.visible = True

    def hide_container(self):
        self.visible = False

    def move_container_by(self, movement):
        self.moves.append(movement)
        self.offset = self.offset + movement

    def set_icon(self, slot, icon):
        self.icons[slot] = icon

    def set_marker_visible(self, slot, visible):
        self.markers[slot] = visible

    def set_label_text(self, slot, text):
        self.labels[slot] = text


class ManualClock:
    """Clock for FrameScheduler that only moves when told to."""

    def __init__(self):
        self.t = 0.0

    def __call__(self) -> float:
        return self.t

    def advance(self, ms: float) -> None:
        self.t += ms / 1000.0


class DeferredPageStateProvider(PageStateProvider):
    """Hands out futures the test resolves by hand."""

    def __init__(self):
        self.futures: List[Future] = []

    def request_page_state(self, target):
        future = Future()
        self.futures.append(future)
        return future


class CommandSink:
    """Action sink recording (command name, context) pairs."""

    def __init__(self):
        self.calls = []

    def __call__(self, name, controller):
        self.calls.append((name, controller.context))

    @property
    def names(self):
        return [name for name, _ in self.calls]


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def scheduler(clock):
    return FrameScheduler(clock=clock)


@pytest.fixture
def provider():
    return StaticPageStateProvider(PageState())


@pytest.fixture
def sink():
    return CommandSink()


@pytest.fixture
def catalog(sink):
    return build_default_catalog(sink)


@pytest.fixture
def config():
    return MenuConfig(mac_ctrl_click=False)


@pytest.fixture
def document():
    return Document()


@pytest.fixture
def page(document):
    """Elements of a small page, by role."""
    body = document.create_element("body")
    anchor = document.create_element("a", body, href="https://example.org/")
    return {
        "body": body,
        "paragraph": document.create_element("p", body),
        "link": document.create_element("a", body, href="https://example.org/docs/"),
        "image": document.create_element("img", body, src="logo.png"),
        "image_link": document.create_element("img", anchor, src="banner.png"),
        "text": document.create_element("input", body, type="text"),
    }


@pytest.fixture
def make_controller(renderer, catalog, provider, scheduler, config):
    def factory(**kwargs):
        kwargs.setdefault("page_state_provider", provider)
        kwargs.setdefault("scheduler", scheduler)
        kwargs.setdefault("config", config)
        return PieMenuController(renderer, kwargs.pop("catalog", catalog), **kwargs)
    return factory


@pytest.fixture
def controller(make_controller):
    return make_controller()
