import pytest

from compassmenu.context import ContextDetector, ContextRule, tag_is
from compassmenu.dom import Document


@pytest.fixture
def detector():
    return ContextDetector()


@pytest.mark.parametrize("role, expected", [
    ("body", "page"),
    ("paragraph", "page"),
    ("link", "link"),
    ("image", "image"),
    ("image_link", "imageLink"),
    ("text", "text"),
])
def test_detects_element_roles(detector, page, role, expected):
    assert detector.detect(page[role]) == expected


def test_media_and_inputs(detector, document, page):
    body = page["body"]
    assert detector.detect(document.create_element("audio", body)) == "audio"
    assert detector.detect(document.create_element("VIDEO", body)) == "video"
    assert detector.detect(document.create_element("textarea", body)) == "text"
    assert detector.detect(document.create_element("input", body)) == "text"
    assert detector.detect(document.create_element("input", body, type="password")) == "text"
    assert detector.detect(document.create_element("input", body, type="checkbox")) == "page"


def test_anchor_without_href_is_not_a_link(detector, document, page):
    anchor = document.create_element("a", page["body"], name="top")
    assert detector.detect(anchor) == "page"


def test_text_inside_link_is_link(detector, document, page):
    span = document.create_element("span", page["link"])
    assert detector.detect(span) == "link"


def test_selection_wins_over_node_rules(detector, document, page):
    document.select("some words")
    assert detector.detect(page["image_link"]) == "selection"
    assert detector.detect(page["text"]) == "selection"
    document.clear_selection()
    assert detector.detect(page["image_link"]) == "imageLink"


def test_frame_documents(detector, document, page):
    iframe = document.create_element("iframe", page["body"])
    sub = Document(frame_element=iframe)
    sub_body = sub.create_element("body")
    sub_link = sub.create_element("a", sub_body, href="https://example.org/")

    assert detector.detect(sub_body) == "frame"
    assert detector.detect(sub_link) == "link"

    # Selection in the top document does not leak into the frame
    document.select("text")
    assert detector.detect(sub_body) == "frame"
    sub.select("inner")
    assert detector.detect(sub_body) == "selection"


def test_missing_node_gives_default(detector):
    assert detector.detect(None) == "page"


def test_custom_rules_and_default(page):
    detector = ContextDetector(rules=[ContextRule(tag_is("p"), "paragraph")],
                               default="none")
    assert detector.detect(page["paragraph"]) == "paragraph"
    assert detector.detect(page["link"]) == "none"


def test_add_rule_priority(detector, page):
    detector.add_rule(ContextRule(tag_is("img"), "picture"), index=0)
    assert detector.detect(page["image_link"]) == "picture"

    detector.add_rule(ContextRule(tag_is("p"), "paragraph"))
    assert detector.rules[-1].context == "paragraph"
    assert detector.detect(page["paragraph"]) == "paragraph"
