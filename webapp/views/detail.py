"""
Listing detail page: sub-views and the mobile/desktop arrangement.
"""
import json
from html import escape
from typing import List, Optional

from catalog.i18n import SAFETY_TIPS, t
from catalog.models import Coordinates, Listing
from catalog.resolver import ListingPage, ListingView
from catalog.utils import mask_phone

from .card import render_listing_tile
from .layout import render_breadcrumb, render_page, with_lang

GALLERY_LIMIT = 16


def render_gallery(images: List[str], title: str, lang: str, gallery_id: str) -> str:
    images = [img for img in images if img]
    if not images:
        return ''
    parts = [f'<div class="gallery bg-white rounded-lg shadow p-3" id="{gallery_id}">',
             f'<img class="gallery-main w-full h-72 md:h-96 object-cover rounded-lg" src="{escape(images[0])}" alt="{escape(title)}"/>']
    if len(images) > 1:
        parts.append('<div class="grid grid-cols-4 md:grid-cols-6 gap-2 mt-2">')
        for i, img in enumerate(images[:GALLERY_LIMIT]):
            parts.append(
                f'<img class="h-16 w-full object-cover rounded cursor-pointer hover:opacity-80" src="{escape(img)}" '
                f'loading="lazy" alt="{escape(title)} {i + 1}" '
                f'onclick="this.closest(\'.gallery\').querySelector(\'.gallery-main\').src=this.src"/>'
            )
        if len(images) > GALLERY_LIMIT:
            parts.append(f'<div class="flex items-center justify-center text-slate-500 bg-slate-100 rounded h-16">+{len(images) - GALLERY_LIMIT}</div>')
        parts.append('</div>')
    parts.append(f'<div class="text-xs text-slate-500 mt-2">{len(images)} {t("photos", lang)}</div>')
    parts.append('</div>')
    return "".join(parts)


def render_action_buttons(view: ListingView, lang: str) -> str:
    return (
        '<div class="flex gap-2">'
        '<button type="button" class="favorite-btn px-3 py-2 border rounded text-slate-700" data-favorite="false" '
        f'data-id="{escape(view.id)}" onclick="toggleFavorite(this, this.dataset.id)">♥ {t("favorite", lang)}</button>'
        '<button type="button" class="share-btn px-3 py-2 border rounded text-slate-700" '
        f'onclick=\'shareListing({escape(json.dumps(view.title, ensure_ascii=False))})\'>{t("share", lang)}</button>'
        '</div>'
    )


def render_header(view: ListingView, lang: str, is_mobile: bool = False) -> str:
    featured = ''
    if view.is_featured:
        featured = f'<span class="bg-amber-500 text-white text-xs px-2 py-1 rounded mr-2">{t("featured", lang)}</span>'
    title_cls = "text-xl" if is_mobile else "text-2xl"
    price = ''
    if is_mobile:
        price = f'<div class="text-2xl font-bold mt-2">{escape(view.price_text)}</div>'
    actions = ''
    if not is_mobile:
        actions = f'<div class="mt-3">{render_action_buttons(view, lang)}</div>'
    return f'''<div class="listing-header bg-white rounded-lg shadow p-4">
<div class="flex items-center">{featured}<h1 class="{title_cls} font-semibold">{escape(view.title)}</h1></div>
{price}
<div class="text-sm text-slate-500 mt-2 flex flex-wrap gap-x-4">
<span>📍 {escape(view.city)}</span>
<span>{escape(view.created_text)}</span>
<span>{t("views", lang)}: {view.views}</span>
<span>№ {escape(view.id)}</span>
</div>
{actions}
</div>'''


def render_price(view: ListingView, lang: str) -> str:
    parts = ['<div class="listing-price bg-white rounded-lg shadow p-4">',
             f'<div class="text-3xl font-bold">{escape(view.price_text)}</div>']
    if view.original_price_text:
        parts.append('<div class="flex items-center gap-2 mt-1">')
        parts.append(f'<span class="line-through text-slate-400">{escape(view.original_price_text)}</span>')
        if view.discount:
            parts.append(f'<span class="bg-red-500 text-white text-xs px-2 py-0.5 rounded">-{view.discount}%</span>')
        parts.append('</div>')
    parts.append(f'<div class="mt-3">{render_action_buttons(view, lang)}</div>')
    parts.append('</div>')
    return "".join(parts)


def render_seller_info(view: ListingView, lang: str, is_phone_visible: bool, show_phone_url: str) -> str:
    seller = view.seller
    if is_phone_visible:
        phone = f'<a class="phone text-lg font-semibold" href="tel:{escape(seller.phone)}">{escape(seller.phone)}</a>'
    else:
        phone = (f'<div class="phone text-lg font-semibold">{escape(mask_phone(seller.phone))}</div>'
                 f'<a class="show-phone inline-block mt-2 px-3 py-2 rounded bg-green-600 text-white" '
                 f'href="{escape(show_phone_url)}">{t("show_phone", lang)}</a>')
    rating = f'{seller.rating:.1f}' if seller.rating is not None else '—'
    return f'''<div class="seller-info bg-white rounded-lg shadow p-4">
<div class="text-sm text-slate-500">{t("seller", lang)}</div>
<div class="text-lg font-semibold">{escape(seller.name)}</div>
<ul class="text-sm text-slate-600 mt-2 space-y-1">
<li>{t("rating", lang)}: {rating}</li>
<li>{t("deals", lang)}: {seller.reviews or 0}</li>
<li>{t("member_since", lang)} {escape(view.member_since)}</li>
<li>{escape(view.seller_response)}</li>
<li>{escape(view.seller_last_online)}</li>
</ul>
<div class="mt-3">{phone}</div>
</div>'''


def render_description(view: ListingView, lang: str) -> str:
    text = view.description or t("no_description", lang)
    return f'''<div class="listing-description bg-white rounded-lg shadow p-4">
<h3 class="font-medium mb-2">{t("description", lang)}</h3>
<div class="whitespace-pre-wrap">{escape(text)}</div>
</div>'''


def render_stats(view: ListingView, lang: str) -> str:
    return f'''<div class="listing-stats bg-white rounded-lg shadow p-4 text-sm">
<ul class="space-y-1">
<li class="flex justify-between"><span class="text-slate-500">{t("published", lang)}</span><span>{escape(view.created_text)}</span></li>
<li class="flex justify-between"><span class="text-slate-500">{t("listing_id", lang)}</span><span>{escape(view.id)}</span></li>
<li class="flex justify-between"><span class="text-slate-500">{t("views", lang)}</span><span>{view.views}</span></li>
</ul>
</div>'''


def render_location_map(city: str, coordinates: Optional[Coordinates], lang: str) -> str:
    if coordinates:
        d = 0.02
        bbox = f"{coordinates.lng - d},{coordinates.lat - d},{coordinates.lng + d},{coordinates.lat + d}"
        map_html = (f'<iframe class="w-full h-48 rounded mt-2" loading="lazy" '
                    f'src="https://www.openstreetmap.org/export/embed.html?bbox={bbox}&amp;layer=mapnik'
                    f'&amp;marker={coordinates.lat},{coordinates.lng}"></iframe>')
    else:
        map_html = f'<div class="text-sm text-slate-500 mt-2">{t("no_coordinates", lang)}</div>'
    return f'''<div class="location-map bg-white rounded-lg shadow p-4">
<h3 class="font-medium">{t("location", lang)}</h3>
<div class="text-sm">📍 {escape(city)}</div>
{map_html}
</div>'''


def render_safety_tips(lang: str) -> str:
    tips = "".join(f'<li>{escape(tip)}</li>' for tip in SAFETY_TIPS.get(lang, SAFETY_TIPS["ru"]))
    return f'''<div class="safety-tips bg-amber-50 border border-amber-200 rounded-lg p-4 text-sm">
<h3 class="font-medium mb-2">{t("safety_tips", lang)}</h3>
<ul class="list-disc pl-5 space-y-1">{tips}</ul>
</div>'''


def render_similar_listings(similar: List[Listing], lang: str) -> str:
    if not similar:
        return ''
    tiles = "".join(render_listing_tile(item, lang) for item in similar)
    return f'''<section class="similar-listings">
<h2 class="text-xl font-semibold mb-3">{t("similar_listings", lang)}</h2>
<div class="grid grid-cols-2 md:grid-cols-4 gap-4">{tiles}</div>
</section>'''


def render_detail_page(page: ListingPage, path: str, is_phone_visible: bool = False) -> str:
    """Detail document with both the stacked mobile and the grid desktop layout."""
    view = page.view
    lang = page.lang
    show_phone_url = with_lang(f"{path}?show_phone=1", lang)

    seller = render_seller_info(view, lang, is_phone_visible, show_phone_url)
    description = render_description(view, lang)
    stats = render_stats(view, lang)
    location = render_location_map(view.city, view.coordinates, lang)
    safety = render_safety_tips(lang)

    mobile = "".join([
        '<div class="lg:hidden space-y-4" data-layout="mobile">',
        render_gallery(view.images, view.title, lang, "gallery-mobile"),
        render_header(view, lang, is_mobile=True),
        render_price(view, lang),
        seller,
        description,
        stats,
        location,
        safety,
        '</div>',
    ])

    desktop = "".join([
        '<div class="hidden lg:grid grid-cols-3 gap-6" data-layout="desktop">',
        '<div class="col-span-2 space-y-6">',
        render_gallery(view.images, view.title, lang, "gallery-desktop"),
        render_header(view, lang),
        description,
        '</div>',
        '<div class="space-y-6">',
        render_price(view, lang),
        seller,
        safety,
        location,
        stats,
        '</div>',
        '</div>',
    ])

    body = f'''{render_breadcrumb(page.breadcrumb, view.title, lang)}
<main class="flex-1 py-6">
<div class="container mx-auto px-4 max-w-7xl">
{mobile}
{desktop}
<div class="mt-8">{render_similar_listings(page.similar, lang)}</div>
</div>
</main>'''
    return render_page(view.title, body, lang, path)
