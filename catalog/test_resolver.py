"""
Tests for listing detail resolution.
"""
import asyncio
from dataclasses import replace

from catalog.mock_listings import MOCK_LISTINGS
from catalog.models import CategoryConfig
from catalog.resolver import (
    IdKey, ListingResolver, ResolutionStatus, SlugKey, build_listing_view, lookup_key_from_params
)
from catalog.slugs import listing_title_slug
from catalog.categories import category_slug


def mock_by_id(listing_id):
    return next(x for x in MOCK_LISTINGS if x.id == listing_id)


class FakeStore:
    """Remote lookup stand-in that records the ids it was asked for."""

    def __init__(self, listings=(), error=None):
        self.listings = {x.id: x for x in listings}
        self.error = error
        self.calls = []

    async def __call__(self, listing_id):
        self.calls.append(listing_id)
        if self.error:
            raise self.error
        return self.listings.get(listing_id)


def test_lookup_key_prefers_slug_pair():
    assert lookup_key_from_params("1", "transport", "x") == SlugKey("transport", "x")
    assert lookup_key_from_params("1", "transport", None) == IdKey("1")
    assert lookup_key_from_params(None, None, None) is None


def test_resolve_by_slug_yields_exact_record():
    resolver = ListingResolver(MOCK_LISTINGS)
    for listing in MOCK_LISTINGS:
        key = SlugKey(category_slug(listing.category_id), listing_title_slug(listing))
        assert asyncio.run(resolver.resolve(key)) is listing


def test_resolve_by_slug_does_not_ask_the_store():
    store = FakeStore()
    resolver = ListingResolver(MOCK_LISTINGS, remote_lookup=store)
    asyncio.run(resolver.resolve(SlugKey("transport", "toyota-camry-70-2019")))
    assert store.calls == []


def test_resolve_by_id_falls_back_to_mock():
    store = FakeStore()
    resolver = ListingResolver(MOCK_LISTINGS, remote_lookup=store)
    assert asyncio.run(resolver.resolve(IdKey("6"))) is mock_by_id("6")
    assert store.calls == ["6"]


def test_remote_takes_precedence_over_mock():
    remote = replace(mock_by_id("1"), title={"ru": "Из базы", "kk": "Дерекқордан"})
    resolver = ListingResolver(MOCK_LISTINGS, remote_lookup=FakeStore([remote]))
    assert asyncio.run(resolver.resolve(IdKey("1"))) is remote


def test_remote_only_listing_resolves():
    remote = replace(mock_by_id("1"), id="r-100")
    resolver = ListingResolver(MOCK_LISTINGS, remote_lookup=FakeStore([remote]))
    assert asyncio.run(resolver.resolve(IdKey("r-100"))) is remote


def test_remote_failure_falls_back_silently():
    store = FakeStore(error=RuntimeError("connection refused"))
    resolver = ListingResolver(MOCK_LISTINGS, remote_lookup=store)
    assert asyncio.run(resolver.resolve(IdKey("2"))) is mock_by_id("2")


def test_unknown_id_is_not_found():
    resolver = ListingResolver(MOCK_LISTINGS, remote_lookup=FakeStore())
    page = asyncio.run(resolver.load("ru", listing_id="does-not-exist"))
    assert page.status is ResolutionStatus.NOT_FOUND
    assert not page.found
    assert page.listing is None
    assert page.breadcrumb == []
    assert page.similar == []


def test_no_params_is_not_found():
    page = asyncio.run(ListingResolver(MOCK_LISTINGS).load("ru"))
    assert page.status is ResolutionStatus.NOT_FOUND


def test_similar_listings_invariants():
    """Similar listings: same category, never self, at most four."""
    resolver = ListingResolver(MOCK_LISTINGS)
    for listing in MOCK_LISTINGS:
        similar = resolver.similar_to(listing)
        assert len(similar) <= 4
        assert listing not in similar
        assert all(item.category_id == listing.category_id for item in similar)


def test_similar_listings_capped():
    similar = ListingResolver(MOCK_LISTINGS).similar_to(mock_by_id("1"))
    assert [x.id for x in similar] == ["2", "3", "4", "5"]


def test_similar_limit_is_configurable():
    similar = ListingResolver(MOCK_LISTINGS, similar_limit=2).similar_to(mock_by_id("1"))
    assert len(similar) == 2


def test_breadcrumb_localized():
    resolver = ListingResolver(MOCK_LISTINGS)
    ru = resolver.breadcrumb_for(mock_by_id("1"), "ru")
    kk = resolver.breadcrumb_for(mock_by_id("1"), "kk")
    assert [(b.label, b.link) for b in ru] == [("Главная", "/"), ("Транспорт", "/category/transport")]
    assert [(b.label, b.link) for b in kk] == [("Басты бет", "/"), ("Көлік", "/category/transport")]


def test_breadcrumb_skips_unregistered_category():
    crumbs = ListingResolver(MOCK_LISTINGS).breadcrumb_for(mock_by_id("11"), "ru")
    assert [b.label for b in crumbs] == ["Главная"]


def test_breadcrumb_label_falls_back_to_category_id(monkeypatch):
    ru_only = CategoryConfig("transport", "transport", {"ru": "Транспорт"})
    monkeypatch.setattr("catalog.resolver.get_category_config", lambda category_id: ru_only)
    crumbs = ListingResolver(MOCK_LISTINGS).breadcrumb_for(mock_by_id("1"), "kk")
    assert [(b.label, b.link) for b in crumbs] == [("Басты бет", "/"), ("transport", "/category/transport")]


def test_load_derives_page():
    page = asyncio.run(ListingResolver(MOCK_LISTINGS).load("kk", listing_id="1"))
    assert page.status is ResolutionStatus.LOADED
    assert page.listing is mock_by_id("1")
    assert page.view.title == "Toyota Camry 70, 2019 ж."
    assert page.view.price_text == "13 900 000 ₸"
    assert page.view.original_price_text == "14 500 000 ₸"
    assert page.view.created_text == "2024 ж. 12 нау."
    assert len(page.similar) == 4
    assert page.breadcrumb[0].label == "Басты бет"


def test_listing_view_plain_strings_and_free_price():
    view = build_listing_view(mock_by_id("8"), "kk")
    assert view.title == "iPhone 13 Pro 256GB"
    assert view.city == "Алматы"
    assert view.url == "/elektronika/iphone-13-pro-256gb"

    free = build_listing_view(mock_by_id("10"), "ru")
    assert free.price_text == "Бесплатно"
    assert free.original_price_text is None


def test_listing_view_gallery_falls_back_to_cover_image():
    view = build_listing_view(mock_by_id("3"), "ru")
    assert view.images == ["/images/merida.jpg"]
    assert build_listing_view(mock_by_id("4"), "ru").description == ""


def test_load_unsupported_language_uses_default():
    page = asyncio.run(ListingResolver(MOCK_LISTINGS).load("de", listing_id="1"))
    assert page.lang == "ru"
    assert page.breadcrumb[0].label == "Главная"
