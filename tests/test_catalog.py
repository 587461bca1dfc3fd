import pytest

from compassmenu.catalog import CatalogBuilder, CatalogError
from compassmenu.types import PRIMARY, SECONDARY, Variant, make_ring, resolve_variant


def test_default_contexts(catalog):
    assert set(catalog.contexts) == {
        "page", "selection", "image", "imageLink", "link",
        "audio", "video", "text", "frame",
    }
    assert catalog.default_context == "page"


def test_unknown_context_falls_back_to_page(catalog):
    assert catalog.context_ring("no-such-context") is catalog.context_ring("page")


def test_media_contexts_share_the_navigation_ring(catalog):
    page_id = catalog.context_ring_id("page")
    assert catalog.context_ring_id("audio") == page_id
    assert catalog.context_ring_id("video") == page_id


def test_shared_sub_rings_are_referenced_by_id(catalog):
    page_ring = catalog.context_ring("page")
    selection_ring = catalog.context_ring("selection")
    from_page = page_ring[1][PRIMARY]
    from_selection = selection_ring[1][PRIMARY]
    assert from_page.children is not None
    assert from_page.children == from_selection.children
    assert catalog.children_of(from_page) is catalog.children_of(from_selection)


def test_has_children(catalog):
    page_ring = catalog.context_ring("page")
    assert catalog.has_children(page_ring[1][PRIMARY])
    assert not catalog.has_children(page_ring[0][PRIMARY])
    assert not catalog.has_children(None)


def test_empty_sub_ring_has_no_children():
    b = CatalogBuilder()
    empty = b.add_ring()
    top = b.add_ring((Variant("#x", "x", children=empty),))
    b.bind("page", top)
    catalog = b.build()
    assert catalog.children_of(catalog.ring(top)[0][0]) == (None,) * 8
    assert not catalog.has_children(catalog.ring(top)[0][0])


def test_builder_rejects_unknown_ring_ids():
    b = CatalogBuilder()
    with pytest.raises(CatalogError):
        b.add_ring((Variant("#x", "x", children=3),))
    with pytest.raises(CatalogError):
        b.bind("page", 0)
    b.add_ring()
    with pytest.raises(CatalogError):
        b.build()   # default context not bound


def test_ring_lookup_out_of_range(catalog):
    with pytest.raises(CatalogError):
        catalog.ring(len(catalog))


def test_make_ring_pads_and_limits():
    v = Variant("#a", "a")
    ring = make_ring((v,), ())
    assert len(ring) == 8
    assert ring[0] == (v,)
    assert ring[1] is None
    with pytest.raises(ValueError):
        make_ring(*([(v,)] * 9))


def test_secondary_falls_back_to_primary_for_every_single_variant_slot(catalog):
    for context in catalog.contexts:
        for slot in catalog.context_ring(context):
            if slot and len(slot) == 1:
                assert resolve_variant(slot, SECONDARY) is slot[PRIMARY]


def test_resolve_variant_prefers_secondary_when_present():
    a, b = Variant("#a", "a"), Variant("#b", "b")
    assert resolve_variant((a, b), SECONDARY) is b
    assert resolve_variant((a, b), PRIMARY) is a
    assert resolve_variant(None, SECONDARY) is None


def test_variant_equality_ignores_action():
    assert Variant("#a", "a", action=print) == Variant("#a", "a")
