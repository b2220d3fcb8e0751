"""
Listing cards for search and category grids.
"""
from dataclasses import dataclass
from datetime import datetime
from html import escape
from typing import Callable, List, Optional, Tuple

from catalog.i18n import t
from catalog.models import Listing, TransportListing
from catalog.slugs import build_listing_url
from catalog.utils import (
    currency_symbol, format_number, format_price, format_relative_time, localized
)

from .layout import with_lang

NO_IMAGE = "/images/no-image.png"


@dataclass
class ClickEvent:
    """Click travelling from the element that was hit up to the card."""
    target: str = "card"
    default_prevented: bool = False
    propagation_stopped: bool = False

    def prevent_default(self):
        self.default_prevented = True

    def stop_propagation(self):
        self.propagation_stopped = True


class TransportCard:
    """
    Summary card of a transport listing.

    Purely presentational: it formats the listing and forwards clicks to the
    callbacks it was given. A click on the favorite button never reaches the
    card's own click handler.
    """

    def __init__(
        self,
        listing: TransportListing,
        lang: str = "ru",
        favorited: bool = False,
        on_favorite_toggle: Optional[Callable[[str], None]] = None,
        on_click: Optional[Callable[[TransportListing], None]] = None,
        show_contact_button: bool = True,
        now: Optional[datetime] = None
    ):
        self.listing = listing
        self.lang = lang
        self.favorited = favorited
        self.on_favorite_toggle = on_favorite_toggle
        self.on_click = on_click
        self.show_contact_button = show_contact_button
        self.now = now

    @property
    def link(self) -> str:
        return f"/transport/{self.listing.category}/{self.listing.id}"

    @property
    def display_title(self) -> str:
        return self.listing.title or f"{self.listing.brand} {self.listing.model}"

    @property
    def price_text(self) -> str:
        return f"{format_number(self.listing.price)} {currency_symbol(self.listing.currency)}"

    @property
    def mileage_text(self) -> Optional[str]:
        if self.listing.mileage is None:
            return None
        return f"{format_number(self.listing.mileage)} {t('km', self.lang)}"

    @property
    def engine_text(self) -> Optional[str]:
        engine = self.listing.engine
        if not engine or not engine.type:
            return None
        text = engine.type
        if engine.volume:
            text += f" {engine.volume:g} {t('l', self.lang)}"
        if engine.power:
            text += f" ({engine.power} {t('hp', self.lang)})"
        return text

    @property
    def cover_image(self) -> str:
        return self.listing.images[0] if self.listing.images else NO_IMAGE

    @property
    def posted_text(self) -> str:
        return format_relative_time(self.listing.created_at, self.lang, now=self.now)

    @property
    def badges(self) -> List[Tuple[str, str]]:
        """(label, background class) seller badges."""
        seller = self.listing.seller
        badges = []
        if seller.verified:
            badges.append((t("verified.seller", self.lang), "bg-blue-600"))
        if seller.type == "dealer":
            badges.append((t("dealer", self.lang), "bg-green-600"))
        return badges

    def specs(self) -> List[tuple]:
        """(icon, text) rows for the characteristics grid."""
        rows = [("📅", str(self.listing.year))]
        if self.mileage_text is not None:
            rows.append(("🛣️", self.mileage_text))
        if self.listing.body_type:
            rows.append(("🚘", self.listing.body_type))
        if self.engine_text:
            rows.append(("⚙️", self.engine_text))
        if self.listing.transmission:
            rows.append(("🔄", self.listing.transmission))
        return rows

    def handle_favorite_click(self, event: ClickEvent):
        event.prevent_default()
        event.stop_propagation()
        if self.on_favorite_toggle:
            self.on_favorite_toggle(self.listing.id)

    def handle_card_click(self):
        if self.on_click:
            self.on_click(self.listing)

    def dispatch_click(self, target: str = "card") -> ClickEvent:
        """Deliver a click on ``target`` ("card" or "favorite") with bubbling."""
        event = ClickEvent(target=target)
        if target == "favorite":
            self.handle_favorite_click(event)
        if not event.propagation_stopped:
            self.handle_card_click()
        return event

    def render(self) -> str:
        lst = self.listing
        lang = self.lang
        fav_cls = "text-red-500" if self.favorited else "text-white"
        heart_fill = "currentColor" if self.favorited else "none"

        parts = [
            f'<a href="{escape(with_lang(self.link, lang))}" class="block">',
            f'<div class="transport-card bg-white rounded-xl overflow-hidden shadow hover:shadow-md transition-shadow duration-300 mb-4" data-listing-id="{escape(lst.id)}">',
            '<div class="flex flex-col md:flex-row">',
            '<div class="relative md:w-1/3 h-60 md:h-auto">',
            f'<img src="{escape(self.cover_image)}" alt="{escape(lst.brand)} {escape(lst.model)}" class="w-full h-full object-cover" loading="lazy"/>',
        ]
        if len(lst.images) > 1:
            parts.append(f'<span class="absolute bottom-2 left-2 bg-black/60 text-white text-xs px-2 py-1 rounded">{len(lst.images)} {t("photos", lang)}</span>')

        parts.append(
            f'<button type="button" class="favorite-btn absolute top-2 right-2 rounded-full p-2 {fav_cls} bg-black/40 hover:bg-black/60" '
            f'data-favorite="{"true" if self.favorited else "false"}" '
            'onclick="event.preventDefault(); event.stopPropagation(); toggleFavorite(this, this.dataset.id)" '
            f'data-id="{escape(lst.id)}">'
            f'<svg class="h-5 w-5" viewBox="0 0 24 24" fill="{heart_fill}" stroke="currentColor" stroke-width="2">'
            '<path d="M20.8 4.6a5.5 5.5 0 0 0-7.8 0L12 5.7l-1-1.1a5.5 5.5 0 0 0-7.8 7.8l1 1.1L12 21l7.8-7.5 1-1.1a5.5 5.5 0 0 0 0-7.8z"/>'
            '</svg></button>'
        )
        for label, color in self.badges:
            parts.append(f'<span class="badge absolute top-2 left-2 {color} text-white text-xs px-2 py-1 rounded">{escape(label)}</span>')
        parts.append('</div>')

        parts.append('<div class="md:w-2/3 p-4 flex flex-col">')
        parts.append('<div class="flex justify-between items-start"><div>')
        parts.append(f'<h2 class="text-xl font-bold mb-1 truncate-2">{escape(self.display_title)}</h2>')
        parts.append(f'<p class="price text-2xl font-bold text-gray-900 mb-4">{escape(self.price_text)}</p>')
        parts.append('</div>')
        if lst.condition == "new":
            parts.append(f'<span class="bg-green-600 text-white text-xs px-2 py-1 rounded">{t("new", lang)}</span>')
        parts.append('</div>')

        parts.append('<div class="grid grid-cols-2 gap-x-4 gap-y-1 mb-3 text-sm text-gray-600">')
        for icon, text in self.specs():
            parts.append(f'<div class="flex items-center"><span class="mr-2 w-4">{icon}</span>{escape(text)}</div>')
        parts.append('</div>')

        parts.append('<div class="mt-auto">')
        parts.append(f'<div class="flex items-center text-sm text-gray-500 mb-2">📍 {escape(lst.location)}</div>')
        parts.append('<div class="flex justify-between items-center">')
        parts.append(f'<span class="text-xs text-gray-400">{escape(self.posted_text)}</span>')
        if self.show_contact_button:
            parts.append(f'<span class="contact-btn px-3 py-1.5 rounded bg-green-600 hover:bg-green-700 text-white text-sm">📞 {t("contact.seller", lang)}</span>')
        parts.append('</div></div>')
        parts.append('</div></div></div></a>')
        return "".join(parts)


def render_transport_card(listing: TransportListing, lang: str, favorited: bool = False,
                          show_contact_button: bool = True, now: Optional[datetime] = None) -> str:
    return TransportCard(listing, lang=lang, favorited=favorited,
                         show_contact_button=show_contact_button, now=now).render()


def render_listing_tile(listing: Listing, lang: str) -> str:
    """Compact tile linking to the listing's SEO URL."""
    title = localized(listing.title, lang)
    city = localized(listing.city, lang)
    image = listing.gallery[0] or NO_IMAGE
    url = with_lang(build_listing_url(listing), lang)
    return (
        f'<a href="{escape(url)}" class="listing-tile block bg-white rounded-lg shadow hover:shadow-md transition-shadow overflow-hidden">'
        f'<img src="{escape(image)}" alt="{escape(title)}" class="w-full h-40 object-cover" loading="lazy"/>'
        '<div class="p-3">'
        f'<div class="font-medium truncate-2">{escape(title)}</div>'
        f'<div class="text-lg font-semibold mt-1">{escape(format_price(listing.discount_price, lang))}</div>'
        f'<div class="text-xs text-slate-500 mt-1">{escape(city)}</div>'
        '</div></a>'
    )
