"""
Tests for the transport listing card.
"""
from datetime import datetime, timezone

from catalog.mock_listings import MOCK_LISTINGS, MOCK_TRANSPORT_LISTINGS
from webapp.views.card import NO_IMAGE, TransportCard, render_listing_tile

CAMRY, LAND_CRUISER, CBR = MOCK_TRANSPORT_LISTINGS
NOW = datetime(2024, 3, 12, 11, 30, tzinfo=timezone.utc)


def make_card(listing=CAMRY, **kwargs):
    toggled, clicked = [], []
    card = TransportCard(
        listing,
        on_favorite_toggle=toggled.append,
        on_click=clicked.append,
        now=NOW,
        **kwargs
    )
    return card, toggled, clicked


def test_favorite_click_does_not_navigate():
    """Favorite toggle stops propagation, so the card click never fires."""
    card, toggled, clicked = make_card()
    event = card.dispatch_click("favorite")

    assert toggled == ["t1"]
    assert clicked == []
    assert event.propagation_stopped
    assert event.default_prevented


def test_card_click_reports_listing():
    card, toggled, clicked = make_card()
    event = card.dispatch_click("card")

    assert clicked == [CAMRY]
    assert toggled == []
    assert not event.propagation_stopped


def test_callbacks_are_optional():
    card = TransportCard(CAMRY)
    card.dispatch_click("favorite")
    card.dispatch_click("card")


def test_price_uses_currency_symbol():
    assert make_card(CAMRY)[0].price_text == "13\u00a0900\u00a0000 ₸"
    assert make_card(LAND_CRUISER)[0].price_text == "41\u00a0500 $"
    assert make_card(CBR)[0].price_text == "5\u00a0200 €"


def test_title_falls_back_to_brand_and_model():
    assert make_card(LAND_CRUISER)[0].display_title == "Toyota Land Cruiser 300"
    assert make_card(CAMRY)[0].display_title == "Toyota Camry 70"


def test_specs_formatting():
    card = make_card(CAMRY)[0]
    assert card.mileage_text == "86\u00a0000 км"
    assert card.engine_text == "Бензин 2.5 л (181 л.с.)"
    assert [icon for icon, _ in card.specs()] == ["📅", "🛣️", "🚘", "⚙️", "🔄"]

    bare = make_card(CBR)[0]
    assert bare.mileage_text is None
    assert bare.engine_text is None
    assert bare.specs() == [("📅", "2015")]


def test_seller_badges():
    assert make_card(CAMRY)[0].badges == [("Проверенный продавец", "bg-blue-600")]
    assert make_card(LAND_CRUISER, lang="kk")[0].badges == [("Дилер", "bg-green-600")]
    assert make_card(CBR)[0].badges == []


def test_relative_post_time():
    assert make_card(CAMRY)[0].posted_text == "2 часа назад"
    assert make_card(CAMRY, lang="kk")[0].posted_text == "2 сағат бұрын"


def test_render_card_markup():
    html = make_card(CAMRY)[0].render()
    assert 'href="/transport/cars/t1?lang=ru"' in html
    assert "event.stopPropagation()" in html
    assert 'data-id="t1"' in html
    assert "toggleFavorite(this, this.dataset.id)" in html
    assert "3 фото" in html
    assert "contact-btn" in html
    assert "Новый" not in html


def test_render_card_without_images_or_contact():
    html = make_card(CBR, show_contact_button=False)[0].render()
    assert NO_IMAGE in html
    assert "contact-btn" not in html
    assert "фото" not in html


def test_render_new_and_favorited():
    html = make_card(LAND_CRUISER, favorited=True)[0].render()
    assert "Новый" in html
    assert 'data-favorite="true"' in html


def test_listing_tile_links_to_seo_url():
    free = next(x for x in MOCK_LISTINGS if x.id == "10")
    html = render_listing_tile(free, "kk")
    assert 'href="/otdam-darom/otdam-kotenka-v-dobrye-ruki?lang=kk"' in html
    assert "Тегін" in html
