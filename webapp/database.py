"""
Listing store access for the web layer.
"""
import logging
import os
import sqlite3
from contextlib import contextmanager
from typing import Optional

from fastapi.concurrency import run_in_threadpool

from catalog.database import db_get_listing
from catalog.models import Listing

from .config import config

logger = logging.getLogger(__name__)


@contextmanager
def get_db_connection():
    """Get a database connection with proper error handling."""
    conn = None
    try:
        if not config.DB_PATH:
            raise ValueError("Database path not configured")
        # sqlite3.connect would silently create an empty file
        if not os.path.exists(config.DB_PATH):
            raise FileNotFoundError(f"Database file not found: {config.DB_PATH}")

        conn = sqlite3.connect(config.DB_PATH)
        conn.row_factory = sqlite3.Row
        yield conn
    except sqlite3.Error as e:
        logger.error(f"Database error: {e}")
        raise
    finally:
        if conn is not None:
            conn.close()


def get_listing_by_id(listing_id: str) -> Optional[Listing]:
    """Get a single listing from the store by id."""
    with get_db_connection() as conn:
        return db_get_listing(conn, listing_id)


async def fetch_listing_by_id(listing_id: str) -> Optional[Listing]:
    """Store lookup run off the event loop; used as the resolver's remote lookup."""
    return await run_in_threadpool(get_listing_by_id, listing_id)


def store_available() -> bool:
    try:
        with get_db_connection() as conn:
            conn.execute("SELECT 1").fetchone()
        return True
    except (FileNotFoundError, ValueError, sqlite3.Error) as e:
        logger.debug(f"Listing store unavailable: {e}")
        return False
