"""
SQLite listing store used for lookups by id.
"""
import json
import sqlite3
from typing import Any, Dict, List, Optional

from .models import Coordinates, Listing, Seller
from .utils import now_iso


DDL_LISTINGS = """
CREATE TABLE IF NOT EXISTS listings (
  id TEXT PRIMARY KEY,
  title_json TEXT,
  description_json TEXT,
  city_json TEXT,
  category_id TEXT,
  price REAL,
  discount_price REAL,
  original_price REAL,
  discount INTEGER,
  images TEXT,
  image_url TEXT,
  seller_json TEXT,
  views INTEGER,
  is_featured INTEGER,
  latitude REAL,
  longitude REAL,
  created_at TEXT,
  first_seen TEXT,
  last_seen TEXT
);
"""

DDL_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_listings_category ON listings(category_id);",
]

# Bilingual fields are stored as JSON so both plain strings and
# {lang: text} mappings survive a round trip.
LOCALIZED_COLUMNS = (("title", "title_json"), ("description", "description_json"), ("city", "city_json"))


def db_connect(path: str) -> sqlite3.Connection:
    """Create database connection with optimized settings."""
    conn = sqlite3.connect(path)
    conn.execute("PRAGMA journal_mode=WAL;")
    conn.execute("PRAGMA synchronous=NORMAL;")
    return conn


def db_init(conn: sqlite3.Connection):
    """Initialize database schema with tables and indexes."""
    conn.execute(DDL_LISTINGS)
    for ddl in DDL_INDEXES:
        conn.execute(ddl)
    conn.commit()


def row_to_dict(cur, row):
    """Convert a result row to dictionary."""
    return {desc[0]: row[i] for i, desc in enumerate(cur.description)}


def listing_to_row(lst: Listing) -> Dict[str, Any]:
    row = {column: json.dumps(getattr(lst, attr), ensure_ascii=False)
           for attr, column in LOCALIZED_COLUMNS}
    row.update({
        "id": lst.id,
        "category_id": lst.category_id,
        "price": lst.price,
        "discount_price": lst.discount_price,
        "original_price": lst.original_price,
        "discount": lst.discount,
        "images": "|".join(lst.images) if lst.images else "",
        "image_url": lst.image_url,
        "seller_json": json.dumps(
            {"name": lst.seller.name, "phone": lst.seller.phone,
             "rating": lst.seller.rating, "reviews": lst.seller.reviews},
            ensure_ascii=False,
        ),
        "views": lst.views,
        "is_featured": int(lst.is_featured),
        "latitude": lst.coordinates.lat if lst.coordinates else None,
        "longitude": lst.coordinates.lng if lst.coordinates else None,
        "created_at": lst.created_at,
    })
    return row


def row_to_listing(row: Dict[str, Any]) -> Listing:
    localized_fields = {attr: json.loads(row[column]) if row.get(column) else None
                        for attr, column in LOCALIZED_COLUMNS}
    seller = json.loads(row.get("seller_json") or "{}")
    images = row.get("images") or ""
    coordinates = None
    if row.get("latitude") is not None and row.get("longitude") is not None:
        coordinates = Coordinates(lat=row["latitude"], lng=row["longitude"])

    return Listing(
        id=row["id"],
        title=localized_fields["title"] or "",
        description=localized_fields["description"],
        city=localized_fields["city"],
        category_id=row.get("category_id") or "",
        price=row.get("price") or 0,
        discount_price=row.get("discount_price") or 0,
        original_price=row.get("original_price"),
        discount=row.get("discount"),
        images=[url.strip() for url in images.split("|") if url.strip()],
        image_url=row.get("image_url") or "",
        seller=Seller(
            name=seller.get("name", ""),
            phone=seller.get("phone", ""),
            rating=seller.get("rating"),
            reviews=seller.get("reviews"),
        ),
        views=row.get("views") or 0,
        is_featured=bool(row.get("is_featured")),
        coordinates=coordinates,
        created_at=row.get("created_at") or "",
    )


def db_get_listing(conn: sqlite3.Connection, listing_id: str) -> Optional[Listing]:
    """Retrieve a listing by id."""
    cur = conn.cursor()
    cur.execute("SELECT * FROM listings WHERE id = ?", (listing_id,))
    r = cur.fetchone()
    if not r:
        return None
    return row_to_listing(row_to_dict(cur, r))


def db_list_listings(conn: sqlite3.Connection, category_id: Optional[str] = None) -> List[Listing]:
    cur = conn.cursor()
    if category_id:
        cur.execute("SELECT * FROM listings WHERE category_id = ? ORDER BY created_at DESC", (category_id,))
    else:
        cur.execute("SELECT * FROM listings ORDER BY created_at DESC")
    return [row_to_listing(row_to_dict(cur, r)) for r in cur.fetchall()]


def upsert_listing(conn: sqlite3.Connection, lst: Listing) -> bool:
    """
    Insert or update a listing.

    Returns:
        True if the listing was not stored before
    """
    row = listing_to_row(lst)
    cur = conn.cursor()
    cur.execute("SELECT 1 FROM listings WHERE id = ?", (lst.id,))
    existing = cur.fetchone()
    ts = now_iso()

    if existing is None:
        row["first_seen"] = ts
        row["last_seen"] = ts
        columns = ",".join(row)
        placeholders = ",".join("?" for _ in row)
        cur.execute(f"INSERT INTO listings ({columns}) VALUES ({placeholders})", tuple(row.values()))
        conn.commit()
        return True

    row["last_seen"] = ts
    assignments = ",".join(f"{col}=?" for col in row if col != "id")
    values = [v for col, v in row.items() if col != "id"]
    cur.execute(f"UPDATE listings SET {assignments} WHERE id=?", (*values, lst.id))
    conn.commit()
    return False
