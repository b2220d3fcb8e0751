"""
Utility functions for logging, localized text extraction and formatting.
"""
import logging
import re
from datetime import datetime, timezone
from typing import Optional, Sequence, Union

from .i18n import t
from .models import LocalizedText

NBSP = "\u00a0"

CURRENCY_SYMBOLS = {"USD": "$", "EUR": "€"}
DEFAULT_CURRENCY_SYMBOL = "₸"

MONTHS_SHORT = {
    "ru": ["янв.", "февр.", "мар.", "апр.", "мая", "июн.",
           "июл.", "авг.", "сент.", "окт.", "нояб.", "дек."],
    "kk": ["қаң.", "ақп.", "нау.", "сәу.", "мам.", "мау.",
           "шіл.", "там.", "қыр.", "қаз.", "қар.", "жел."],
}

# (seconds per unit, russian plural forms, kazakh word)
TIME_UNITS = [
    (365 * 24 * 3600, ("год", "года", "лет"), "жыл"),
    (30 * 24 * 3600, ("месяц", "месяца", "месяцев"), "ай"),
    (24 * 3600, ("день", "дня", "дней"), "күн"),
    (3600, ("час", "часа", "часов"), "сағат"),
    (60, ("минуту", "минуты", "минут"), "минут"),
]


def init_logger(
    name: str = "catalog",
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    log_file: Optional[str] = "catalog.log"
) -> logging.Logger:
    """Initialize logger with console and optional file handlers."""
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    if logger.handlers:
        return logger

    console_level_num = getattr(logging, console_level.upper(), logging.INFO)
    ch = logging.StreamHandler()
    ch.setLevel(console_level_num)

    fmt = logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    if log_file:
        file_level_num = getattr(logging, file_level.upper(), logging.DEBUG)
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level_num)
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    return logger


def now_iso() -> str:
    """Return current UTC timestamp in ISO format."""
    return datetime.now(timezone.utc).isoformat()


def localized(value: Optional[LocalizedText], lang: str) -> str:
    """
    Extract the text for ``lang`` from a bilingual field.

    Plain strings are returned unchanged; language-keyed mappings yield the
    entry for ``lang`` or an empty string when it is missing.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, dict):
        return value.get(lang) or ""
    return ""


def group_digits(value: Union[int, float], sep: str = " ") -> str:
    """Insert ``sep`` between thousands groups of the integer part."""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    text = str(value)
    sign = "-" if text.startswith("-") else ""
    whole, dot, frac = text.lstrip("-").partition(".")
    whole = re.sub(r"\B(?=(\d{3})+(?!\d))", sep, whole)
    return f"{sign}{whole}{dot}{frac}"


def format_price(price: Union[int, float], lang: str) -> str:
    """Detail-page price: localized "free" for zero, otherwise grouped tenge."""
    if price == 0:
        return t("free", lang)
    return f"{group_digits(price)} {DEFAULT_CURRENCY_SYMBOL}"


def format_number(value: Union[int, float]) -> str:
    """
    Format a number the way the ru-RU locale does.

    Non-breaking space between thousands, comma as decimal separator and at
    most three fraction digits.
    """
    text = f"{abs(value):,.3f}"
    whole, frac = text.split(".")
    frac = frac.rstrip("0")
    whole = whole.replace(",", NBSP)
    sign = "-" if value < 0 and (whole != "0" or frac) else ""
    return f"{sign}{whole},{frac}" if frac else f"{sign}{whole}"


def currency_symbol(currency: str) -> str:
    return CURRENCY_SYMBOLS.get(currency, DEFAULT_CURRENCY_SYMBOL)


def parse_datetime(value: Union[str, datetime]) -> datetime:
    """Parse an ISO-8601 timestamp; naive values are treated as UTC."""
    if isinstance(value, datetime):
        dt = value
    else:
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        dt = datetime.fromisoformat(text)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def format_date(date_string: Union[str, datetime], lang: str) -> str:
    """Localized ``day month year`` date, e.g. ``15 янв. 2024 г.``; empty when unparseable."""
    try:
        dt = parse_datetime(date_string)
    except (AttributeError, TypeError, ValueError):
        return ""
    month = MONTHS_SHORT.get(lang, MONTHS_SHORT["ru"])[dt.month - 1]
    if lang == "kk":
        return f"{dt.year} ж. {dt.day} {month}"
    return f"{dt.day} {month} {dt.year} г."


def plural_ru(n: int, forms: Sequence[str]) -> str:
    if n % 10 == 1 and n % 100 != 11:
        return forms[0]
    if 2 <= n % 10 <= 4 and not 12 <= n % 100 <= 14:
        return forms[1]
    return forms[2]


def format_relative_time(
    created_at: Union[str, datetime],
    lang: str,
    now: Optional[datetime] = None
) -> str:
    """Relative post time such as ``5 минут назад`` / ``5 минут бұрын``."""
    now = parse_datetime(now) if now else datetime.now(timezone.utc)
    try:
        posted = parse_datetime(created_at)
    except (AttributeError, TypeError, ValueError):
        return ""
    seconds = int((now - posted).total_seconds())
    if seconds < 60:
        return t("just_now", lang)

    for unit_seconds, ru_forms, kk_word in TIME_UNITS:
        if seconds >= unit_seconds:
            n = seconds // unit_seconds
            word = kk_word if lang == "kk" else plural_ru(n, ru_forms)
            return f"{n} {word} {t('ago', lang)}"
    return t("just_now", lang)


def mask_phone(phone: str, visible_digits: int = 4) -> str:
    """Hide all but the first ``visible_digits`` digits of a phone number."""
    seen = 0
    out = []
    for ch in phone:
        if ch.isdigit():
            seen += 1
            out.append(ch if seen <= visible_digits else "*")
        else:
            out.append(ch)
    return "".join(out)
