"""
Tests for the HTML pages and JSON API.
"""
from dataclasses import replace
from urllib.parse import quote

import pytest
from fastapi.testclient import TestClient

from catalog.database import db_connect, db_init, upsert_listing
from catalog.mock_listings import MOCK_LISTINGS
from webapp.config import config
from webapp.main import app

client = TestClient(app)

QUOTED_ID = "x'+alert(1)+'"


@pytest.fixture
def listing_store(tmp_path, monkeypatch):
    """Seed a store where listing 1 differs from the mock copy and r-7 exists only remotely."""
    db_path = str(tmp_path / "store.db")
    conn = db_connect(db_path)
    db_init(conn)
    camry = next(x for x in MOCK_LISTINGS if x.id == "1")
    upsert_listing(conn, replace(camry, title={"ru": "Camry из базы", "kk": "Camry дерекқордан"}))
    upsert_listing(conn, replace(camry, id="r-7", title="Remote only"))
    upsert_listing(conn, replace(camry, id="r-null", title="No date"))
    upsert_listing(conn, replace(camry, id="r-bad", title="Bad date"))
    upsert_listing(conn, replace(camry, id=QUOTED_ID, title="Quoted id"))
    conn.execute("UPDATE listings SET created_at = NULL WHERE id = ?", ("r-null",))
    conn.execute("UPDATE listings SET created_at = ? WHERE id = ?", ("yesterday", "r-bad"))
    conn.commit()
    conn.close()
    monkeypatch.setattr(config, "DB_PATH", db_path)
    return db_path


def test_detail_page_by_id():
    r = client.get("/listing/1")
    assert r.status_code == 200
    assert "Toyota Camry 70, 2019" in r.text
    assert "13 900 000 ₸" in r.text
    assert 'data-layout="mobile"' in r.text
    assert 'data-layout="desktop"' in r.text
    assert "Главная" in r.text
    assert "Похожие объявления" in r.text
    assert "Hyundai Tucson 2021" in r.text


def test_detail_page_localized_kk():
    r = client.get("/listing/1?lang=kk")
    assert r.status_code == 200
    assert "Toyota Camry 70, 2019 ж." in r.text
    assert "Басты бет" in r.text
    assert "Көлік" in r.text


def test_unsupported_language_uses_default():
    r = client.get("/listing/1?lang=de")
    assert "Главная" in r.text


def test_phone_hidden_until_requested():
    hidden = client.get("/listing/1")
    assert "+7 701 123 45 67" not in hidden.text
    assert "+7 701 *** ** **" in hidden.text

    shown = client.get("/listing/1?show_phone=true")
    assert "+7 701 123 45 67" in shown.text


def test_detail_page_by_slug():
    r = client.get("/elektronika/iphone-13-pro-256gb")
    assert r.status_code == 200
    assert "iPhone 13 Pro 256GB" in r.text
    assert "Электроника" in r.text


def test_free_listing_price():
    r = client.get("/otdam-darom/otdam-kotenka-v-dobrye-ruki?lang=kk")
    assert r.status_code == 200
    assert "Тегін" in r.text


def test_not_found_page():
    r = client.get("/listing/does-not-exist")
    assert r.status_code == 404
    assert "Объявление не найдено" in r.text

    r = client.get("/transport/no-such-slug?lang=kk")
    assert r.status_code == 404
    assert "Хабарландыру табылмады" in r.text


def test_index_and_category_pages():
    r = client.get("/")
    assert r.status_code == 200
    assert r.text.count("listing-tile") == len(MOCK_LISTINGS)

    r = client.get("/category/real-estate")
    assert r.status_code == 200
    assert "Недвижимость" in r.text
    assert r.text.count("listing-tile") == 2

    assert client.get("/category/unknown").status_code == 404


def test_transport_cards_page():
    r = client.get("/transport")
    assert r.status_code == 200
    assert r.text.count("transport-card ") == 3
    assert "13\u00a0900\u00a0000 ₸" in r.text
    assert "41\u00a0500 $" in r.text
    assert "event.stopPropagation()" in r.text


def test_transport_card_target():
    assert client.get("/transport/cars/t1").status_code == 200
    assert client.get("/transport/moto/t1").status_code == 404


def test_api_listing_detail():
    r = client.get("/api/listings/1", params={"lang": "kk"})
    assert r.status_code == 200
    data = r.json()
    assert data["lang"] == "kk"
    assert data["listing"]["title"] == {"ru": "Toyota Camry 70, 2019", "kk": "Toyota Camry 70, 2019 ж."}
    assert data["view"]["title"] == "Toyota Camry 70, 2019 ж."
    assert data["view"]["price_text"] == "13 900 000 ₸"
    assert [b["label"] for b in data["breadcrumb"]] == ["Басты бет", "Көлік"]
    assert [s["id"] for s in data["similar"]] == ["2", "3", "4", "5"]


def test_api_listing_by_slug():
    r = client.get("/api/listings/by-slug/transport/toyota-camry-70-2019")
    assert r.status_code == 200
    assert r.json()["listing"]["id"] == "1"

    assert client.get("/api/listings/by-slug/transport/nothing").status_code == 404


def test_api_listing_not_found():
    r = client.get("/api/listings/missing")
    assert r.status_code == 404
    assert r.json()["detail"] == "Listing not found"


def test_api_similar_listings():
    r = client.get("/api/listings/6/similar")
    assert r.status_code == 200
    assert [s["id"] for s in r.json()] == ["7"]


def test_api_listings_filters():
    r = client.get("/api/listings", params={"category_id": "transport", "limit": 2})
    data = r.json()
    assert data["total"] == 5
    assert len(data["items"]) == 2

    r = client.get("/api/listings", params={"q": "пәтер", "lang": "kk"})
    assert [item["id"] for item in r.json()["items"]] == ["6"]


def test_export_csv():
    r = client.get("/api/export/csv", params={"category_id": "electronics"})
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/csv")
    lines = r.text.strip().splitlines()
    assert lines[0].startswith("id,title,category_id")
    assert len(lines) == 3


def test_health_without_store():
    data = client.get("/health").json()
    assert data["status"] == "healthy"
    assert data["database"] == "unavailable"


def test_store_takes_precedence(listing_store):
    r = client.get("/api/listings/1")
    assert r.json()["view"]["title"] == "Camry из базы"

    r = client.get("/listing/r-7")
    assert r.status_code == 200
    assert "Remote only" in r.text

    assert client.get("/health").json()["database"] == "connected"


def test_slug_lookup_ignores_store(listing_store):
    r = client.get("/api/listings/by-slug/transport/toyota-camry-70-2019")
    assert r.json()["view"]["title"] == "Toyota Camry 70, 2019"


def test_store_record_without_valid_date_renders(listing_store):
    for listing_id, title in (("r-null", "No date"), ("r-bad", "Bad date")):
        r = client.get(f"/listing/{listing_id}")
        assert r.status_code == 200
        assert title in r.text

        r = client.get(f"/api/listings/{listing_id}")
        assert r.status_code == 200
        assert r.json()["view"]["created_text"] == ""


def test_favorite_button_keeps_id_out_of_script(listing_store):
    r = client.get("/listing/" + quote(QUOTED_ID, safe=""))
    assert r.status_code == 200
    assert "Quoted id" in r.text
    assert 'data-id="x&#x27;+alert(1)+&#x27;"' in r.text
    assert "toggleFavorite(this, this.dataset.id)" in r.text
    assert "toggleFavorite(this, &#x27;" not in r.text
    assert "toggleFavorite(this, 'x" not in r.text
