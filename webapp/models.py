"""
Pydantic models for API request/response serialization.
"""
from typing import Dict, List, Optional, Union

from pydantic import BaseModel

LocalizedField = Union[str, Dict[str, str]]


class SellerOut(BaseModel):
    """Seller embedded in a listing."""
    name: str
    phone: str = ""
    rating: Optional[float] = None
    reviews: Optional[int] = None


class CoordinatesOut(BaseModel):
    lat: float
    lng: float


class ListingOut(BaseModel):
    """Raw listing record with bilingual fields untouched."""
    id: str
    title: LocalizedField
    description: Optional[LocalizedField] = None
    city: Optional[LocalizedField] = None
    category_id: str
    price: float = 0
    discount_price: float = 0
    original_price: Optional[float] = None
    discount: Optional[int] = None
    images: List[str] = []
    image_url: str = ""
    seller: SellerOut
    views: int = 0
    created_at: str
    is_featured: bool = False
    coordinates: Optional[CoordinatesOut] = None


class ListingSummary(BaseModel):
    """Localized listing tile used in grids and similar listings."""
    id: str
    title: str
    city: str
    category_id: str
    price_text: str
    image: str = ""
    url: str


class ListingsResponse(BaseModel):
    """Response model for paginated listings."""
    total: int
    items: List[ListingSummary]


class BreadcrumbItemOut(BaseModel):
    label: str
    link: Optional[str] = None


class ListingViewOut(BaseModel):
    """Presentation-ready listing fields for one language."""
    id: str
    title: str
    city: str
    description: str
    price_text: str
    original_price_text: Optional[str] = None
    discount: Optional[int] = None
    created_text: str
    views: int
    images: List[str]
    is_featured: bool
    coordinates: Optional[CoordinatesOut] = None
    seller: SellerOut
    member_since: str
    seller_response: str
    seller_last_online: str
    url: str


class ListingDetailOut(BaseModel):
    """Resolved detail page: listing, view-model, breadcrumb and similar listings."""
    lang: str
    listing: ListingOut
    view: ListingViewOut
    breadcrumb: List[BreadcrumbItemOut]
    similar: List[ListingSummary]
