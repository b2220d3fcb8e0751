"""
UI strings for the supported interface languages.
"""
from typing import Dict, List

SUPPORTED_LANGUAGES = ("ru", "kk")
DEFAULT_LANGUAGE = "ru"

TEXTS: Dict[str, Dict[str, str]] = {
    "home": {"ru": "Главная", "kk": "Басты бет"},
    "free": {"ru": "Бесплатно", "kk": "Тегін"},
    "listing_not_found": {"ru": "Объявление не найдено", "kk": "Хабарландыру табылмады"},
    "seller_response": {
        "ru": "Отвечает обычно в течении часа",
        "kk": "Әдетте бір сағат ішінде жауап береді",
    },
    "seller_last_online": {"ru": "Был онлайн сегодня", "kk": "Бүгін онлайн болды"},
    "member_since": {"ru": "На сайте с", "kk": "Сайтта"},
    "deals": {"ru": "Сделок", "kk": "Мәмілелер"},
    "rating": {"ru": "Рейтинг", "kk": "Рейтинг"},
    "show_phone": {"ru": "Показать телефон", "kk": "Телефонды көрсету"},
    "seller": {"ru": "Продавец", "kk": "Сатушы"},
    "description": {"ru": "Описание", "kk": "Сипаттама"},
    "no_description": {"ru": "Описание отсутствует", "kk": "Сипаттама жоқ"},
    "published": {"ru": "Опубликовано", "kk": "Жарияланды"},
    "listing_id": {"ru": "Номер объявления", "kk": "Хабарландыру нөмірі"},
    "views": {"ru": "Просмотры", "kk": "Қаралым"},
    "favorite": {"ru": "В избранное", "kk": "Таңдаулыға"},
    "share": {"ru": "Поделиться", "kk": "Бөлісу"},
    "featured": {"ru": "Топ", "kk": "Топ"},
    "location": {"ru": "Местоположение", "kk": "Орналасқан жері"},
    "no_coordinates": {"ru": "Точное местоположение не указано", "kk": "Нақты орны көрсетілмеген"},
    "safety_tips": {"ru": "Советы по безопасности", "kk": "Қауіпсіздік кеңестері"},
    "similar_listings": {"ru": "Похожие объявления", "kk": "Ұқсас хабарландырулар"},
    "photos": {"ru": "фото", "kk": "фото"},
    "verified.seller": {"ru": "Проверенный продавец", "kk": "Тексерілген сатушы"},
    "dealer": {"ru": "Дилер", "kk": "Дилер"},
    "new": {"ru": "Новый", "kk": "Жаңа"},
    "km": {"ru": "км", "kk": "км"},
    "l": {"ru": "л", "kk": "л"},
    "hp": {"ru": "л.с.", "kk": "а.к."},
    "contact.seller": {"ru": "Связаться", "kk": "Байланысу"},
    "just_now": {"ru": "только что", "kk": "жаңа ғана"},
    "ago": {"ru": "назад", "kk": "бұрын"},
    "all_listings": {"ru": "Все объявления", "kk": "Барлық хабарландырулар"},
    "transport": {"ru": "Транспорт", "kk": "Көлік"},
}

SAFETY_TIPS: Dict[str, List[str]] = {
    "ru": [
        "Не переводите предоплату незнакомым продавцам",
        "Встречайтесь в людных местах",
        "Проверяйте товар перед покупкой",
        "Не сообщайте коды из SMS",
    ],
    "kk": [
        "Бейтаныс сатушыларға алдын ала төлем жасамаңыз",
        "Адам көп жерде кездесіңіз",
        "Сатып алмас бұрын тауарды тексеріңіз",
        "SMS кодтарын ешкімге айтпаңыз",
    ],
}


def normalize_language(lang: str) -> str:
    """Return a supported language code, falling back to the default."""
    if lang in SUPPORTED_LANGUAGES:
        return lang
    return DEFAULT_LANGUAGE


def t(key: str, lang: str) -> str:
    """Translate a UI key; unknown keys are returned as-is."""
    entry = TEXTS.get(key)
    if not entry:
        return key
    return entry.get(lang) or entry[DEFAULT_LANGUAGE]
