"""
Category configuration registry.
"""
from typing import Dict, Optional

from .models import CategoryConfig

CATEGORY_REGISTRY: Dict[str, CategoryConfig] = {
    cfg.id: cfg
    for cfg in [
        CategoryConfig("transport", "transport", {"ru": "Транспорт", "kk": "Көлік"}),
        CategoryConfig("real-estate", "nedvizhimost", {"ru": "Недвижимость", "kk": "Жылжымайтын мүлік"}),
        CategoryConfig("electronics", "elektronika", {"ru": "Электроника", "kk": "Электроника"}),
        CategoryConfig("home", "dom-i-sad", {"ru": "Дом и сад", "kk": "Үй және бақ"}),
        CategoryConfig("clothing", "odezhda", {"ru": "Одежда", "kk": "Киім"}),
        CategoryConfig("kids", "detskie-tovary", {"ru": "Детские товары", "kk": "Балалар тауарлары"}),
        CategoryConfig("services", "uslugi", {"ru": "Услуги", "kk": "Қызметтер"}),
        CategoryConfig("free", "otdam-darom", {"ru": "Отдам даром", "kk": "Тегін беремін"}),
    ]
}


def get_category_config(category_id: str) -> Optional[CategoryConfig]:
    return CATEGORY_REGISTRY.get(category_id)


def category_slug(category_id: str) -> str:
    """Slug used in SEO URLs; unregistered categories use their id."""
    cfg = get_category_config(category_id)
    return cfg.slug if cfg else category_id


def category_name(category_id: str, lang: str) -> str:
    """Localized category name, falling back to the raw id."""
    cfg = get_category_config(category_id)
    if not cfg:
        return category_id
    return cfg.name.get(lang) or category_id
