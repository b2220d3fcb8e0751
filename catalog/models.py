"""
Data models for marketplace listings.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional, Union

# A text field is either a plain string or a {lang: text} mapping.
LocalizedText = Union[str, Dict[str, str]]


@dataclass
class Seller:
    """Seller embedded in a listing."""
    name: str
    phone: str = ""
    rating: Optional[float] = None
    reviews: Optional[int] = None


@dataclass
class Coordinates:
    lat: float
    lng: float


@dataclass
class Listing:
    """Represents a marketplace listing shown on the detail page."""

    id: str
    title: LocalizedText
    category_id: str
    seller: Seller
    created_at: str

    description: Optional[LocalizedText] = None
    city: Optional[LocalizedText] = None

    # Pricing
    price: float = 0
    discount_price: float = 0
    original_price: Optional[float] = None
    discount: Optional[int] = None

    # Media
    images: List[str] = field(default_factory=list)
    image_url: str = ""

    views: int = 0
    is_featured: bool = False
    coordinates: Optional[Coordinates] = None

    @property
    def gallery(self) -> List[str]:
        """Images to show, falling back to the single cover image."""
        return list(self.images) if self.images else [self.image_url]


@dataclass
class Engine:
    type: str
    power: Optional[int] = None
    volume: Optional[float] = None


@dataclass
class TransportSeller:
    name: str
    type: str = "private"  # "dealer" | "private"
    rating: Optional[float] = None
    verified: bool = False


@dataclass
class TransportListing:
    """Vehicle listing rendered by the transport card."""

    id: str
    title: str
    price: float
    currency: str
    location: str
    year: int
    images: List[str]
    category: str
    brand: str
    model: str
    condition: str  # "new" | "used"
    created_at: datetime
    seller: TransportSeller

    description: str = ""
    mileage: Optional[int] = None
    subcategory: str = ""
    body_type: str = ""
    engine: Optional[Engine] = None
    transmission: str = ""
    drive_type: str = ""
    features: List[str] = field(default_factory=list)


@dataclass
class BreadcrumbItem:
    label: str
    link: Optional[str] = None


@dataclass
class CategoryConfig:
    id: str
    slug: str
    name: Dict[str, str]
