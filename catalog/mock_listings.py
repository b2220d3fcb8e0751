"""
Static placeholder dataset used when the listing store has no match.
"""
from datetime import datetime, timezone
from typing import List

from .models import (
    Coordinates, Engine, Listing, Seller, TransportListing, TransportSeller
)

ALMATY = Coordinates(lat=43.2389, lng=76.8897)
ASTANA = Coordinates(lat=51.1605, lng=71.4704)
SHYMKENT = Coordinates(lat=42.3417, lng=69.5901)

MOCK_LISTINGS: List[Listing] = [
    Listing(
        id="1",
        title={"ru": "Toyota Camry 70, 2019", "kk": "Toyota Camry 70, 2019 ж."},
        description={
            "ru": "Один владелец, полная комплектация, обслуживалась у дилера.",
            "kk": "Бір иесі, толық жинақ, дилерде қызмет көрсетілген.",
        },
        city={"ru": "Алматы", "kk": "Алматы"},
        category_id="transport",
        price=14500000, discount_price=13900000, original_price=14500000, discount=4,
        images=["/images/camry-1.jpg", "/images/camry-2.jpg", "/images/camry-3.jpg"],
        image_url="/images/camry-1.jpg",
        seller=Seller(name="Аслан", phone="+7 701 123 45 67", rating=4.8, reviews=32),
        views=1243, created_at="2024-03-12T09:30:00Z",
        is_featured=True, coordinates=ALMATY,
    ),
    Listing(
        id="2",
        title={"ru": "Hyundai Tucson 2021", "kk": "Hyundai Tucson 2021"},
        description={"ru": "Пробег 35 000 км, полный привод.", "kk": "Жүрісі 35 000 км, толық жетек."},
        city={"ru": "Астана", "kk": "Астана"},
        category_id="transport",
        price=12800000, discount_price=12800000,
        images=["/images/tucson-1.jpg"], image_url="/images/tucson-1.jpg",
        seller=Seller(name="Марат", phone="+7 702 555 10 20", rating=4.5, reviews=11),
        views=842, created_at="2024-03-18T14:05:00Z", coordinates=ASTANA,
    ),
    Listing(
        id="3",
        title={"ru": "Велосипед горный Merida", "kk": "Merida тау велосипеді"},
        description={"ru": "Рама 19, гидравлические тормоза.", "kk": "Рама 19, гидравликалық тежегіштер."},
        city={"ru": "Шымкент", "kk": "Шымкент"},
        category_id="transport",
        price=180000, discount_price=165000, original_price=180000, discount=8,
        image_url="/images/merida.jpg",
        seller=Seller(name="Ержан", phone="+7 705 321 00 11", rating=4.9, reviews=5),
        views=311, created_at="2024-02-28T08:00:00Z", coordinates=SHYMKENT,
    ),
    Listing(
        id="4",
        title={"ru": "Lada Granta 2018", "kk": "Lada Granta 2018"},
        city={"ru": "Караганда", "kk": "Қарағанды"},
        category_id="transport",
        price=3200000, discount_price=3200000,
        images=["/images/granta-1.jpg", "/images/granta-2.jpg"],
        seller=Seller(name="Сергей", phone="+7 700 900 80 70", rating=4.1, reviews=3),
        views=97, created_at="2024-03-20T17:45:00Z",
    ),
    Listing(
        id="5",
        title={"ru": "Скутер Honda Dio", "kk": "Honda Dio скутері"},
        description={"ru": "Идеален для города.", "kk": "Қалаға өте ыңғайлы."},
        city={"ru": "Алматы", "kk": "Алматы"},
        category_id="transport",
        price=450000, discount_price=420000, original_price=450000, discount=7,
        image_url="/images/dio.jpg",
        seller=Seller(name="Динара", phone="+7 747 222 33 44", rating=5.0, reviews=18),
        views=205, created_at="2024-03-01T11:20:00Z", coordinates=ALMATY,
    ),
    Listing(
        id="6",
        title={"ru": "2-комнатная квартира, 54 м²", "kk": "2 бөлмелі пәтер, 54 м²"},
        description={
            "ru": "Евроремонт, рядом школа и парк.",
            "kk": "Еуроремонт, жанында мектеп пен саябақ бар.",
        },
        city={"ru": "Астана", "kk": "Астана"},
        category_id="real-estate",
        price=32000000, discount_price=32000000,
        images=["/images/flat-1.jpg", "/images/flat-2.jpg"],
        seller=Seller(name="Айгерим", phone="+7 771 444 55 66", rating=4.7, reviews=9),
        views=2301, created_at="2024-01-15T10:00:00Z",
        is_featured=True, coordinates=ASTANA,
    ),
    Listing(
        id="7",
        title={"ru": "Дом 120 м² с участком", "kk": "120 м² үй, жер телімімен"},
        city={"ru": "Алматинская область", "kk": "Алматы облысы"},
        category_id="real-estate",
        price=45000000, discount_price=45000000,
        image_url="/images/house.jpg",
        seller=Seller(name="Нурлан", phone="+7 708 111 22 33", rating=4.3, reviews=2),
        views=640, created_at="2024-02-02T12:00:00Z",
    ),
    Listing(
        id="8",
        title="iPhone 13 Pro 256GB",
        description="Состояние отличное, полный комплект.",
        city="Алматы",
        category_id="electronics",
        price=390000, discount_price=375000, original_price=390000, discount=4,
        images=["/images/iphone-1.jpg", "/images/iphone-2.jpg"],
        seller=Seller(name="Тимур", phone="+7 776 010 20 30", rating=4.6, reviews=27),
        views=1870, created_at="2024-03-22T19:10:00Z", coordinates=ALMATY,
    ),
    Listing(
        id="9",
        title={"ru": "Ноутбук Lenovo ThinkPad T14", "kk": "Lenovo ThinkPad T14 ноутбугі"},
        description={"ru": "16 ГБ ОЗУ, SSD 512 ГБ.", "kk": "16 ГБ ЖЖҚ, SSD 512 ГБ."},
        city={"ru": "Павлодар", "kk": "Павлодар"},
        category_id="electronics",
        price=280000, discount_price=280000,
        image_url="/images/thinkpad.jpg",
        seller=Seller(name="Ольга", phone="+7 705 707 07 07", rating=4.4, reviews=6),
        views=158, created_at="2024-03-05T07:30:00Z",
    ),
    Listing(
        id="10",
        title={"ru": "Отдам котенка в добрые руки", "kk": "Мысықты мейірімді қолға беремін"},
        description={"ru": "Приучен к лотку.", "kk": "Науаға үйретілген."},
        city={"ru": "Костанай", "kk": "Қостанай"},
        category_id="free",
        price=0, discount_price=0,
        image_url="/images/kitten.jpg",
        seller=Seller(name="Анна", phone="+7 714 333 22 11"),
        views=76, created_at="2024-03-24T15:00:00Z",
    ),
    Listing(
        id="11",
        title={"ru": "Коллекция виниловых пластинок", "kk": "Винил пластинкалар жинағы"},
        city={"ru": "Актобе", "kk": "Ақтөбе"},
        category_id="misc",
        price=60000, discount_price=60000,
        image_url="/images/vinyl.jpg",
        seller=Seller(name="Бахыт", phone="+7 713 555 66 77", rating=4.0, reviews=1),
        views=44, created_at="2024-03-10T13:00:00Z",
    ),
]

MOCK_TRANSPORT_LISTINGS: List[TransportListing] = [
    TransportListing(
        id="t1",
        title="Toyota Camry 70",
        price=13900000, currency="KZT",
        location="Алматы", year=2019, mileage=86000,
        images=["/images/camry-1.jpg", "/images/camry-2.jpg", "/images/camry-3.jpg"],
        category="cars", subcategory="sedan",
        brand="Toyota", model="Camry",
        body_type="Седан",
        engine=Engine(type="Бензин", power=181, volume=2.5),
        transmission="Автомат", drive_type="Передний",
        condition="used",
        created_at=datetime(2024, 3, 12, 9, 30, tzinfo=timezone.utc),
        seller=TransportSeller(name="Аслан", type="private", rating=4.8, verified=True),
        features=["Кожаный салон", "Камера заднего вида"],
    ),
    TransportListing(
        id="t2",
        title="",
        price=41500, currency="USD",
        location="Астана", year=2024, mileage=0,
        images=["/images/lc300.jpg"],
        category="cars",
        brand="Toyota", model="Land Cruiser 300",
        body_type="Внедорожник",
        engine=Engine(type="Дизель", power=299, volume=3.3),
        transmission="Автомат", drive_type="Полный",
        condition="new",
        created_at=datetime(2024, 3, 20, 12, 0, tzinfo=timezone.utc),
        seller=TransportSeller(name="Toyota Центр Астана", type="dealer", rating=4.9),
    ),
    TransportListing(
        id="t3",
        title="Honda CBR 600RR",
        price=5200, currency="EUR",
        location="Шымкент", year=2015,
        images=[],
        category="moto",
        brand="Honda", model="CBR 600RR",
        condition="used",
        created_at=datetime(2024, 2, 1, 8, 0, tzinfo=timezone.utc),
        seller=TransportSeller(name="Ержан"),
    ),
]
