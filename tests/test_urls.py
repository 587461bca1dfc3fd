import pytest

from compassmenu.page_state import page_state_for
from compassmenu.urls import is_openable_url, is_top_url, parent_url


@pytest.mark.parametrize("text", [
    "https://example.org/",
    "  http://example.org/a?b=c  ",
    "ftp://files.example.org/pub",
    "file:///etc/hosts",
])
def test_openable_urls(text):
    assert is_openable_url(text)


@pytest.mark.parametrize("text", [
    "",
    "example.org",
    "javascript:alert(1)",
    "http://",
    "http://exa mple.org/",
    "mailto:someone@example.org",
])
def test_not_openable(text):
    assert not is_openable_url(text)


def test_custom_schemes():
    assert is_openable_url("gopher://example.org/", schemes={"gopher"})
    assert not is_openable_url("https://example.org/", schemes={"gopher"})


@pytest.mark.parametrize("url, parent", [
    ("http://example.org/abc/def", "http://example.org/abc/"),
    ("http://example.org/abc/def/", "http://example.org/abc/"),
    ("http://example.org/abc/", "http://example.org/"),
    ("http://example.org/", "http://example.org/"),
    ("http://example.org", "http://example.org"),
    ("other-scheme:/abc/def", "other-scheme:/abc/"),
    ("about:blank", "about:blank"),
])
def test_parent_url(url, parent):
    assert parent_url(url) == parent


def test_is_top_url():
    assert is_top_url("https://example.org/")
    assert not is_top_url("https://example.org/docs/")


def test_page_state_for_derives_is_top():
    assert page_state_for("https://example.org/").is_top
    state = page_state_for("https://example.org/a/", "A", is_first=True, is_loading=True)
    assert not state.is_top
    assert state.is_first and state.is_loading and not state.is_last
    assert state.top_title == "A"
    assert not page_state_for("").is_top
