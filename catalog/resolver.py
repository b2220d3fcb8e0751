"""
Listing detail resolution.

Turns route parameters into the listing shown on a detail page, together
with everything derived from it: breadcrumb trail, similar listings and the
presentation-ready strings consumed by the page sub-views.

A listing is addressed either by an SEO path (category slug + title slug,
matched against the mock collection only) or by a raw id. Id lookups ask the
remote store first and fall back to the mock collection on a miss or on a
store failure.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Awaitable, Callable, List, Optional, Sequence, Union

from .categories import get_category_config
from .i18n import normalize_language, t
from .models import BreadcrumbItem, Coordinates, Listing, Seller
from .slugs import build_listing_url, find_listing_by_slug
from .utils import format_date, format_price, localized

logger = logging.getLogger(__name__)

SIMILAR_LISTINGS_LIMIT = 4
MEMBER_SINCE = "2022"

RemoteLookup = Callable[[str], Awaitable[Optional[Listing]]]


@dataclass(frozen=True)
class SlugKey:
    category_slug: str
    title_slug: str


@dataclass(frozen=True)
class IdKey:
    listing_id: str


LookupKey = Union[SlugKey, IdKey]


class ResolutionStatus(Enum):
    LOADED = "loaded"
    NOT_FOUND = "not_found"


def lookup_key_from_params(
    listing_id: Optional[str] = None,
    category_slug: Optional[str] = None,
    title_slug: Optional[str] = None
) -> Optional[LookupKey]:
    """Pick the lookup strategy; a complete slug pair wins over an id."""
    if category_slug and title_slug:
        return SlugKey(category_slug, title_slug)
    if listing_id:
        return IdKey(listing_id)
    return None


@dataclass
class ListingView:
    """Presentation-ready listing fields for one UI language."""
    id: str
    title: str
    city: str
    description: str
    price_text: str
    original_price_text: Optional[str]
    discount: Optional[int]
    created_text: str
    views: int
    images: List[str]
    is_featured: bool
    coordinates: Optional[Coordinates]
    seller: Seller
    member_since: str
    seller_response: str
    seller_last_online: str
    url: str


@dataclass
class ListingPage:
    """Outcome of resolving a detail page request."""
    status: ResolutionStatus
    lang: str
    listing: Optional[Listing] = None
    view: Optional[ListingView] = None
    breadcrumb: List[BreadcrumbItem] = field(default_factory=list)
    similar: List[Listing] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.status is ResolutionStatus.LOADED


def build_listing_view(listing: Listing, lang: str) -> ListingView:
    original_price_text = None
    if listing.original_price and listing.original_price != listing.discount_price:
        original_price_text = format_price(listing.original_price, lang)

    return ListingView(
        id=listing.id,
        title=localized(listing.title, lang),
        city=localized(listing.city, lang),
        description=localized(listing.description, lang),
        price_text=format_price(listing.discount_price, lang),
        original_price_text=original_price_text,
        discount=listing.discount,
        created_text=format_date(listing.created_at, lang),
        views=listing.views,
        images=listing.gallery,
        is_featured=listing.is_featured,
        coordinates=listing.coordinates,
        seller=listing.seller,
        member_since=MEMBER_SINCE,
        seller_response=t("seller_response", lang),
        seller_last_online=t("seller_last_online", lang),
        url=build_listing_url(listing),
    )


class ListingResolver:
    """Resolve listings by slug or id and derive their page data."""

    def __init__(
        self,
        listings: Sequence[Listing],
        remote_lookup: Optional[RemoteLookup] = None,
        similar_limit: int = SIMILAR_LISTINGS_LIMIT
    ):
        self.listings = list(listings)
        self.remote_lookup = remote_lookup
        self.similar_limit = similar_limit

    def find_mock(self, listing_id: str) -> Optional[Listing]:
        return next((item for item in self.listings if item.id == listing_id), None)

    async def fetch_remote(self, listing_id: str) -> Optional[Listing]:
        """Remote lookup; any failure counts as a miss."""
        if self.remote_lookup is None:
            return None
        try:
            return await self.remote_lookup(listing_id)
        except Exception as e:
            logger.warning(f"Remote lookup for {listing_id} failed, using mock data: {e}")
            return None

    async def resolve(self, key: Optional[LookupKey]) -> Optional[Listing]:
        if isinstance(key, SlugKey):
            logger.debug(f"Resolving by SEO path: {key.category_slug}/{key.title_slug}")
            return find_listing_by_slug(self.listings, key.category_slug, key.title_slug)

        if isinstance(key, IdKey):
            logger.debug(f"Resolving by id: {key.listing_id}")
            listing = await self.fetch_remote(key.listing_id)
            if listing is not None:
                return listing
            return self.find_mock(key.listing_id)

        return None

    def similar_to(self, listing: Listing) -> List[Listing]:
        """Same-category mock listings other than ``listing`` itself."""
        similar = [item for item in self.listings
                   if item.category_id == listing.category_id and item.id != listing.id]
        return similar[:self.similar_limit]

    def breadcrumb_for(self, listing: Listing, lang: str) -> List[BreadcrumbItem]:
        items = [BreadcrumbItem(label=t("home", lang), link="/")]
        if listing.category_id:
            cfg = get_category_config(listing.category_id)
            if cfg:
                items.append(BreadcrumbItem(
                    label=cfg.name.get(lang) or listing.category_id,
                    link=f"/category/{listing.category_id}",
                ))
        return items

    async def load(
        self,
        lang: str,
        listing_id: Optional[str] = None,
        category_slug: Optional[str] = None,
        title_slug: Optional[str] = None
    ) -> ListingPage:
        """Resolve route parameters into a fully derived detail page."""
        lang = normalize_language(lang)
        key = lookup_key_from_params(listing_id, category_slug, title_slug)
        listing = await self.resolve(key)
        if listing is None:
            logger.info(f"Listing not found for {key}")
            return ListingPage(status=ResolutionStatus.NOT_FOUND, lang=lang)

        logger.info(f"Loaded listing {listing.id}")
        return ListingPage(
            status=ResolutionStatus.LOADED,
            lang=lang,
            listing=listing,
            view=build_listing_view(listing, lang),
            breadcrumb=self.breadcrumb_for(listing, lang),
            similar=self.similar_to(listing),
        )
