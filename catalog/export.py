"""
Export utilities for marketplace listings.
"""
from typing import Iterable

import pandas as pd

from .categories import category_name
from .models import Listing
from .slugs import build_listing_url
from .utils import localized

EXPORT_COLUMNS = [
    "id", "title", "category_id", "category", "city", "price", "discount_price",
    "original_price", "discount", "views", "seller_name", "seller_rating",
    "latitude", "longitude", "created_at", "url",
]


def listings_to_dataframe(listings: Iterable[Listing], lang: str) -> pd.DataFrame:
    """Flatten listings into one row each with texts localized to ``lang``."""
    rows = []
    for x in listings:
        rows.append({
            "id": x.id,
            "title": localized(x.title, lang),
            "category_id": x.category_id,
            "category": category_name(x.category_id, lang),
            "city": localized(x.city, lang),
            "price": x.price,
            "discount_price": x.discount_price,
            "original_price": x.original_price,
            "discount": x.discount,
            "views": x.views,
            "seller_name": x.seller.name,
            "seller_rating": x.seller.rating,
            "latitude": x.coordinates.lat if x.coordinates else None,
            "longitude": x.coordinates.lng if x.coordinates else None,
            "created_at": x.created_at,
            "url": build_listing_url(x),
        })
    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)


def save_output_rows(listings: Iterable[Listing], out_path: str, lang: str, logger=None) -> int:
    """Save listings to CSV or Excel file."""
    df = listings_to_dataframe(listings, lang)
    if out_path.lower().endswith(".xlsx"):
        df.to_excel(out_path, index=False)
    else:
        df.to_csv(out_path, index=False)

    if logger:
        logger.info(f">>> Saved {len(df)} rows to {out_path}")
    return len(df)
