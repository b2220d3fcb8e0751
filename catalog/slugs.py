"""
SEO slug helpers for listing URLs.
"""
import re
from typing import Dict, Iterable, Optional

from .categories import category_slug
from .models import Listing

MAX_SLUG_LENGTH = 80

TRANSLIT = {
    "а": "a", "б": "b", "в": "v", "г": "g", "д": "d", "е": "e", "ё": "e",
    "ж": "zh", "з": "z", "и": "i", "й": "y", "к": "k", "л": "l", "м": "m",
    "н": "n", "о": "o", "п": "p", "р": "r", "с": "s", "т": "t", "у": "u",
    "ф": "f", "х": "h", "ц": "ts", "ч": "ch", "ш": "sh", "щ": "sch",
    "ъ": "", "ы": "y", "ь": "", "э": "e", "ю": "yu", "я": "ya",
    # Kazakh letters
    "ә": "a", "ғ": "g", "қ": "q", "ң": "n", "ө": "o", "ұ": "u",
    "ү": "u", "һ": "h", "і": "i",
}

LISTING_ID_PATH = re.compile(r"^/listing/(?P<id>[^/]+)/?$")
SEO_PATH = re.compile(r"^/(?P<category_slug>[^/]+)/(?P<title_slug>[^/]+)/?$")


def slugify(text: str) -> str:
    """Transliterate Cyrillic and reduce ``text`` to a lowercase URL slug."""
    text = "".join(TRANSLIT.get(ch, ch) for ch in text.lower())
    text = re.sub(r"[^a-z0-9]+", "-", text).strip("-")
    return text[:MAX_SLUG_LENGTH].rstrip("-")


def listing_title_slug(listing: Listing) -> str:
    title = listing.title
    if isinstance(title, dict):
        title = title.get("ru") or title.get("kk") or next(iter(title.values()), "")
    return slugify(title or "") or listing.id


def build_listing_url(listing: Listing) -> str:
    return f"/{category_slug(listing.category_id)}/{listing_title_slug(listing)}"


def parse_listing_url(path: str) -> Dict[str, str]:
    """
    Extract route parameters from a listing path.

    ``/listing/<id>`` yields ``{"id": ...}``; any other two-segment path is
    treated as ``/<category_slug>/<title_slug>``. Unknown shapes give ``{}``.
    """
    m = LISTING_ID_PATH.match(path)
    if m:
        return {"id": m.group("id")}
    m = SEO_PATH.match(path)
    if m:
        return m.groupdict()
    return {}


def find_listing_by_slug(
    listings: Iterable[Listing],
    category_slug_value: str,
    title_slug: str
) -> Optional[Listing]:
    """First listing whose category slug and title slug both match."""
    for listing in listings:
        if (category_slug(listing.category_id) == category_slug_value
                and listing_title_slug(listing) == title_slug):
            return listing
    return None
