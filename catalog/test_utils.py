"""
Tests for localized text extraction and formatting helpers.
"""
from datetime import datetime, timezone

from catalog.utils import (
    currency_symbol, format_date, format_number, format_price,
    format_relative_time, group_digits, localized, mask_phone, plural_ru
)

NOW = datetime(2024, 3, 12, 12, 0, tzinfo=timezone.utc)


def test_localized_keyed_object():
    """Language-keyed fields yield the value for the requested language."""
    title = {"ru": "Квартира", "kk": "Пәтер"}
    assert localized(title, "ru") == "Квартира"
    assert localized(title, "kk") == "Пәтер"


def test_localized_plain_string_unchanged():
    assert localized("iPhone 13 Pro", "kk") == "iPhone 13 Pro"
    assert localized("", "ru") == ""


def test_localized_missing_language_and_none():
    assert localized({"ru": "Только русский"}, "kk") == ""
    assert localized(None, "ru") == ""


def test_format_price_free():
    """Zero price renders the localized "free" string."""
    assert format_price(0, "ru") == "Бесплатно"
    assert format_price(0, "kk") == "Тегін"
    assert format_price(0.0, "ru") == "Бесплатно"


def test_format_price_thousands():
    assert format_price(1500000, "ru") == "1 500 000 ₸"
    assert format_price(999, "kk") == "999 ₸"
    assert format_price(1000, "ru") == "1 000 ₸"


def test_format_price_integer_float_has_no_decimal_point():
    assert format_price(14500000.0, "ru") == "14 500 000 ₸"
    assert "." not in format_price(32000000.0, "ru")


def test_group_digits_keeps_fraction_intact():
    assert group_digits(1234.5678) == "1 234.5678"
    assert group_digits(-25000) == "-25 000"


def test_format_number_ru_locale():
    assert format_number(1500000) == "1\u00a0500\u00a0000"
    assert format_number(2.5) == "2,5"
    assert format_number(0) == "0"
    assert format_number(999) == "999"
    assert format_number(1234.56789) == "1\u00a0234,568"


def test_currency_symbol():
    assert currency_symbol("USD") == "$"
    assert currency_symbol("EUR") == "€"
    assert currency_symbol("KZT") == "₸"
    assert currency_symbol("") == "₸"


def test_format_date_ru_and_kk():
    assert format_date("2024-03-12T09:30:00Z", "ru") == "12 мар. 2024 г."
    assert format_date("2024-03-12T09:30:00Z", "kk") == "2024 ж. 12 нау."
    assert format_date("2024-01-05", "ru") == "5 янв. 2024 г."


def test_format_date_unparseable_is_empty():
    assert format_date("", "ru") == ""
    assert format_date(None, "kk") == ""
    assert format_date("yesterday", "ru") == ""


def test_plural_ru():
    forms = ("минуту", "минуты", "минут")
    assert plural_ru(1, forms) == "минуту"
    assert plural_ru(3, forms) == "минуты"
    assert plural_ru(11, forms) == "минут"
    assert plural_ru(21, forms) == "минуту"
    assert plural_ru(14, forms) == "минут"


def test_format_relative_time():
    assert format_relative_time("2024-03-12T11:59:30Z", "ru", now=NOW) == "только что"
    assert format_relative_time("2024-03-12T11:30:00Z", "ru", now=NOW) == "30 минут назад"
    assert format_relative_time("2024-03-12T11:39:00Z", "ru", now=NOW) == "21 минуту назад"
    assert format_relative_time("2024-03-12T09:00:00Z", "ru", now=NOW) == "3 часа назад"
    assert format_relative_time("2024-03-07T12:00:00Z", "ru", now=NOW) == "5 дней назад"
    assert format_relative_time("2024-03-12T09:00:00Z", "kk", now=NOW) == "3 сағат бұрын"
    assert format_relative_time("", "ru", now=NOW) == ""
    assert format_relative_time("not a date", "kk", now=NOW) == ""


def test_mask_phone():
    assert mask_phone("+7 701 123 45 67") == "+7 701 *** ** **"
    assert mask_phone("") == ""
