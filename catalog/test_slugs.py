"""
Tests for SEO slug helpers.
"""
import pytest

from catalog.mock_listings import MOCK_LISTINGS
from catalog.slugs import (
    build_listing_url, find_listing_by_slug, listing_title_slug, parse_listing_url, slugify
)


def test_slugify_latin():
    assert slugify("Toyota Camry 70, 2019") == "toyota-camry-70-2019"
    assert slugify("  iPhone 13 Pro 256GB ") == "iphone-13-pro-256gb"


def test_slugify_transliterates_cyrillic():
    assert slugify("Отдам котенка в добрые руки") == "otdam-kotenka-v-dobrye-ruki"
    assert slugify("2-комнатная квартира, 54 м²") == "2-komnatnaya-kvartira-54-m"
    assert slugify("Қарағанды") == "qaragandy"


def test_slugify_length_limit():
    slug = slugify("a " * 100)
    assert len(slug) <= 80
    assert not slug.endswith("-")


def test_title_slug_prefers_russian():
    listing = next(x for x in MOCK_LISTINGS if x.id == "3")
    assert listing_title_slug(listing) == "velosiped-gornyy-merida"


def test_build_listing_url_uses_category_slug():
    listing = next(x for x in MOCK_LISTINGS if x.id == "8")
    assert build_listing_url(listing) == "/elektronika/iphone-13-pro-256gb"


@pytest.mark.parametrize("path, expected", [
    ("/listing/42", {"id": "42"}),
    ("/transport/toyota-camry-70-2019", {"category_slug": "transport", "title_slug": "toyota-camry-70-2019"}),
    ("/", {}),
    ("/a/b/c", {}),
])
def test_parse_listing_url(path, expected):
    assert parse_listing_url(path) == expected


def test_every_mock_listing_found_by_its_slug():
    """Each mock listing is reachable through its own SEO URL."""
    for listing in MOCK_LISTINGS:
        params = parse_listing_url(build_listing_url(listing))
        found = find_listing_by_slug(MOCK_LISTINGS, params["category_slug"], params["title_slug"])
        assert found is listing


def test_find_listing_by_slug_requires_both_parts():
    assert find_listing_by_slug(MOCK_LISTINGS, "elektronika", "toyota-camry-70-2019") is None
    assert find_listing_by_slug(MOCK_LISTINGS, "transport", "no-such-title") is None
