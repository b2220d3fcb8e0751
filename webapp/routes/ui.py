"""
Web UI route handlers: listing grids, transport cards and detail pages.
"""
import logging
from html import escape
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse

from catalog.categories import category_name, get_category_config
from catalog.i18n import t
from catalog.mock_listings import MOCK_LISTINGS, MOCK_TRANSPORT_LISTINGS
from catalog.models import BreadcrumbItem, Listing
from catalog.resolver import ListingResolver

from ..dependencies import get_language, get_resolver
from ..views import render_detail_page, render_listing_tile, render_not_found, render_page, render_transport_card
from ..views.layout import render_breadcrumb, with_lang

logger = logging.getLogger(__name__)
router = APIRouter(tags=["ui"])


def render_grid(title: str, listings: List[Listing], lang: str, path: str,
                breadcrumb: Optional[List[BreadcrumbItem]] = None) -> str:
    tiles = "".join(render_listing_tile(item, lang) for item in listings)
    crumbs = render_breadcrumb(breadcrumb, title, lang) if breadcrumb else ''
    transport_link = with_lang("/transport", lang)
    body = f'''{crumbs}
<main class="flex-1 container mx-auto px-4 py-6 max-w-7xl">
<div class="flex items-center justify-between mb-4">
<h1 class="text-2xl font-semibold">{escape(title)}</h1>
<a class="text-blue-600 underline" href="{transport_link}">{t("transport", lang)}</a>
</div>
<div class="grid grid-cols-2 md:grid-cols-4 gap-4">{tiles}</div>
</main>'''
    return render_page(title, body, lang, path)


@router.get('/', response_class=HTMLResponse)
async def index(lang: str = Depends(get_language)):
    """Main page with all listings."""
    return HTMLResponse(render_grid(t("all_listings", lang), MOCK_LISTINGS, lang, '/'))


@router.get('/transport', response_class=HTMLResponse)
async def transport_cards(lang: str = Depends(get_language)):
    """Transport listings rendered as cards."""
    try:
        cards = "".join(render_transport_card(item, lang) for item in MOCK_TRANSPORT_LISTINGS)
        body = f'''<main class="flex-1 container mx-auto px-4 py-6 max-w-5xl">
<h1 class="text-2xl font-semibold mb-4">{t("transport", lang)}</h1>
{cards}
</main>'''
        return HTMLResponse(render_page(t("transport", lang), body, lang, '/transport'))

    except Exception as e:
        logger.error(f"Error rendering transport cards: {e}")
        return HTMLResponse('<div class="text-red-600">Error loading listings</div>')


@router.get('/transport/{category}/{listing_id}', response_class=HTMLResponse)
async def transport_detail(category: str, listing_id: str, request: Request,
                           lang: str = Depends(get_language)):
    """Card target: the transport listing with its description and features."""
    listing = next((item for item in MOCK_TRANSPORT_LISTINGS
                    if item.id == listing_id and item.category == category), None)
    if listing is None:
        return HTMLResponse(render_not_found(lang, request.url.path), status_code=404)

    features = ''
    if listing.features:
        items = "".join(f'<li>{escape(f)}</li>' for f in listing.features)
        features = f'<ul class="list-disc pl-5 mt-3">{items}</ul>'
    body = f'''<main class="flex-1 container mx-auto px-4 py-6 max-w-5xl">
{render_transport_card(listing, lang, show_contact_button=True)}
<div class="bg-white rounded-lg shadow p-4">
<h3 class="font-medium mb-2">{t("description", lang)}</h3>
<div class="whitespace-pre-wrap">{escape(listing.description or t("no_description", lang))}</div>
{features}
</div>
</main>'''
    title = listing.title or f"{listing.brand} {listing.model}"
    return HTMLResponse(render_page(title, body, lang, request.url.path))


@router.get('/category/{category_id}', response_class=HTMLResponse)
async def category_page(category_id: str, request: Request, lang: str = Depends(get_language)):
    """Listings of a single category."""
    listings = [item for item in MOCK_LISTINGS if item.category_id == category_id]
    if not listings and get_category_config(category_id) is None:
        raise HTTPException(status_code=404, detail="Category not found")

    breadcrumb = [BreadcrumbItem(label=t("home", lang), link="/")]
    html = render_grid(category_name(category_id, lang), listings, lang, request.url.path, breadcrumb)
    return HTMLResponse(html)


async def listing_detail_response(
    request: Request,
    resolver: ListingResolver,
    lang: str,
    show_phone: bool,
    listing_id: Optional[str] = None,
    category_slug: Optional[str] = None,
    title_slug: Optional[str] = None
) -> HTMLResponse:
    path = request.url.path
    try:
        page = await resolver.load(lang, listing_id=listing_id,
                                   category_slug=category_slug, title_slug=title_slug)
        if not page.found:
            return HTMLResponse(render_not_found(lang, path), status_code=404)
        return HTMLResponse(render_detail_page(page, path, is_phone_visible=show_phone))

    except Exception as e:
        logger.error(f"Error generating detail page for {path}: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get('/listing/{listing_id}', response_class=HTMLResponse)
async def detail_page_by_id(
    listing_id: str,
    request: Request,
    show_phone: bool = False,
    lang: str = Depends(get_language),
    resolver: ListingResolver = Depends(get_resolver)
):
    """Detail page addressed by listing id."""
    return await listing_detail_response(request, resolver, lang, show_phone, listing_id=listing_id)


# Registered last: matches any two-segment path.
@router.get('/{category_slug}/{title_slug}', response_class=HTMLResponse)
async def detail_page_by_slug(
    category_slug: str,
    title_slug: str,
    request: Request,
    show_phone: bool = False,
    lang: str = Depends(get_language),
    resolver: ListingResolver = Depends(get_resolver)
):
    """Detail page addressed by SEO path."""
    return await listing_detail_response(request, resolver, lang, show_phone,
                                         category_slug=category_slug, title_slug=title_slug)
