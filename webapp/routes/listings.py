"""
API route handlers for listings endpoints.
"""
import logging
from dataclasses import asdict
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import StreamingResponse

from catalog.export import listings_to_dataframe
from catalog.mock_listings import MOCK_LISTINGS
from catalog.models import Listing
from catalog.resolver import IdKey, ListingPage, ListingResolver
from catalog.slugs import build_listing_url
from catalog.utils import format_price, localized

from ..config import config
from ..dependencies import get_language, get_resolver
from ..models import ListingDetailOut, ListingOut, ListingsResponse, ListingSummary

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["listings"])


def get_listing_filters(
    category_id: Optional[str] = None,
    q: Optional[str] = None,
) -> dict:
    """Dependency to extract listing filters."""
    return {'category_id': category_id, 'q': q}


def filter_listings(listings: List[Listing], filters: dict) -> List[Listing]:
    """Apply category and text filters; text matches any language of the title."""
    category_id = filters.get('category_id')
    q = (filters.get('q') or '').strip().lower()
    result = []
    for item in listings:
        if category_id and item.category_id != category_id:
            continue
        if q:
            titles = item.title.values() if isinstance(item.title, dict) else [item.title]
            if not any(q in title.lower() for title in titles):
                continue
        result.append(item)
    return result


def to_summary(listing: Listing, lang: str) -> ListingSummary:
    return ListingSummary(
        id=listing.id,
        title=localized(listing.title, lang),
        city=localized(listing.city, lang),
        category_id=listing.category_id,
        price_text=format_price(listing.discount_price, lang),
        image=listing.gallery[0],
        url=build_listing_url(listing),
    )


def to_detail(page: ListingPage) -> ListingDetailOut:
    return ListingDetailOut(
        lang=page.lang,
        listing=ListingOut(**asdict(page.listing)),
        view=asdict(page.view),
        breadcrumb=[asdict(item) for item in page.breadcrumb],
        similar=[to_summary(item, page.lang) for item in page.similar],
    )


@router.get("/listings", response_model=ListingsResponse)
async def get_api_listings(
    filters: dict = Depends(get_listing_filters),
    lang: str = Depends(get_language),
    limit: int = Query(config.DEFAULT_API_LIMIT, ge=1, le=config.MAX_API_LIMIT),
    offset: int = Query(0, ge=0)
):
    """Get listings with filtering and pagination."""
    try:
        matching = filter_listings(MOCK_LISTINGS, filters)
        items = [to_summary(item, lang) for item in matching[offset:offset + limit]]
        return ListingsResponse(total=len(matching), items=items)

    except Exception as e:
        logger.error(f"Error fetching listings: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/listings/by-slug/{category_slug}/{title_slug}", response_model=ListingDetailOut)
async def get_api_listing_by_slug(
    category_slug: str,
    title_slug: str,
    lang: str = Depends(get_language),
    resolver: ListingResolver = Depends(get_resolver)
):
    """Resolve a listing by its SEO path."""
    try:
        page = await resolver.load(lang, category_slug=category_slug, title_slug=title_slug)
        if not page.found:
            raise HTTPException(status_code=404, detail="Listing not found")
        return to_detail(page)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error resolving listing {category_slug}/{title_slug}: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/listings/{listing_id}", response_model=ListingDetailOut)
async def get_api_listing(
    listing_id: str,
    lang: str = Depends(get_language),
    resolver: ListingResolver = Depends(get_resolver)
):
    """Resolve a listing by id (store first, then mock data)."""
    try:
        page = await resolver.load(lang, listing_id=listing_id)
        if not page.found:
            raise HTTPException(status_code=404, detail="Listing not found")
        return to_detail(page)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching listing {listing_id}: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/listings/{listing_id}/similar", response_model=List[ListingSummary])
async def get_api_similar_listings(
    listing_id: str,
    lang: str = Depends(get_language),
    resolver: ListingResolver = Depends(get_resolver)
):
    """Get listings similar to a specific listing."""
    try:
        listing = await resolver.resolve(IdKey(listing_id))
        if not listing:
            raise HTTPException(status_code=404, detail="Listing not found")
        return [to_summary(item, lang) for item in resolver.similar_to(listing)]

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching similar listings for {listing_id}: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/export/csv")
async def export_listings_csv(
    filters: dict = Depends(get_listing_filters),
    lang: str = Depends(get_language)
):
    """Export filtered listings as CSV."""
    try:
        df = listings_to_dataframe(filter_listings(MOCK_LISTINGS, filters), lang)
        csv_content = df.to_csv(index=False).encode('utf-8')

        return StreamingResponse(
            iter([csv_content]),
            media_type='text/csv',
            headers={'Content-Disposition': 'attachment; filename="listings.csv"'}
        )

    except Exception as e:
        logger.error(f"Error exporting CSV: {e}")
        raise HTTPException(status_code=500, detail="Error generating CSV export")
