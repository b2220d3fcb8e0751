"""
Request-scoped dependencies shared by the routers.
"""
from typing import Optional

from catalog.mock_listings import MOCK_LISTINGS
from catalog.resolver import ListingResolver

from .config import config
from .database import fetch_listing_by_id


def get_resolver() -> ListingResolver:
    """Resolver backed by the listing store with the mock collection as fallback."""
    return ListingResolver(
        MOCK_LISTINGS,
        remote_lookup=fetch_listing_by_id,
        similar_limit=config.SIMILAR_LISTINGS_LIMIT,
    )


def get_language(lang: Optional[str] = None) -> str:
    """UI language from the ``lang`` query parameter."""
    return config.resolve_language(lang)
