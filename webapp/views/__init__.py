"""
HTML renderers for cards, listing grids and detail pages.
"""
from .card import ClickEvent, TransportCard, render_listing_tile, render_transport_card
from .detail import render_detail_page
from .layout import render_not_found, render_page

__all__ = [
    "ClickEvent",
    "TransportCard",
    "render_listing_tile",
    "render_transport_card",
    "render_detail_page",
    "render_not_found",
    "render_page",
]
