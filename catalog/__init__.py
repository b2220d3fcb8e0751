"""
Marketplace listing catalog package
"""
from .models import (
    BreadcrumbItem,
    CategoryConfig,
    Coordinates,
    Engine,
    Listing,
    Seller,
    TransportListing,
    TransportSeller,
)
from .mock_listings import MOCK_LISTINGS, MOCK_TRANSPORT_LISTINGS
from .resolver import (
    IdKey,
    ListingPage,
    ListingResolver,
    ListingView,
    ResolutionStatus,
    SlugKey,
    lookup_key_from_params,
)
from .slugs import build_listing_url, find_listing_by_slug, parse_listing_url, slugify
from .utils import format_date, format_price, init_logger, localized, now_iso

__version__ = "1.0.0"

__all__ = [
    "BreadcrumbItem",
    "CategoryConfig",
    "Coordinates",
    "Engine",
    "Listing",
    "Seller",
    "TransportListing",
    "TransportSeller",
    "MOCK_LISTINGS",
    "MOCK_TRANSPORT_LISTINGS",
    "IdKey",
    "ListingPage",
    "ListingResolver",
    "ListingView",
    "ResolutionStatus",
    "SlugKey",
    "lookup_key_from_params",
    "build_listing_url",
    "find_listing_by_slug",
    "parse_listing_url",
    "slugify",
    "format_date",
    "format_price",
    "init_logger",
    "localized",
    "now_iso",
]
