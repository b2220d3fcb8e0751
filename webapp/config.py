"""
Web application configuration and settings management.
"""
import logging
import os

from catalog.i18n import SUPPORTED_LANGUAGES

logger = logging.getLogger(__name__)


class Config:
    """Application configuration."""

    # Listing store (lookups by id)
    DB_PATH: str = os.getenv("MARKET_DB", "./data/db/marketplace.db")

    # API settings
    API_TITLE: str = "Marketplace Listings"
    API_VERSION: str = "1.0.0"
    API_DESCRIPTION: str = "Listing cards and detail pages for the marketplace"

    # CORS settings
    CORS_ORIGINS: list = ["*"]
    CORS_ALLOW_CREDENTIALS: bool = True
    CORS_ALLOW_METHODS: list = ["*"]
    CORS_ALLOW_HEADERS: list = ["*"]

    # Localization
    DEFAULT_LANGUAGE: str = os.getenv("DEFAULT_LANGUAGE", "ru")
    SUPPORTED_LANGUAGES: tuple = SUPPORTED_LANGUAGES

    # Pagination and page composition
    DEFAULT_API_LIMIT: int = 50
    MAX_API_LIMIT: int = 500
    SIMILAR_LISTINGS_LIMIT: int = 4

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE: str = os.getenv("LOG_FILE", "webapp.log")

    @classmethod
    def validate(cls) -> None:
        """Validate configuration on startup."""
        if cls.DEFAULT_LANGUAGE not in cls.SUPPORTED_LANGUAGES:
            raise ValueError(f"Unsupported default language: {cls.DEFAULT_LANGUAGE}")
        if cls.SIMILAR_LISTINGS_LIMIT <= 0 or cls.DEFAULT_API_LIMIT <= 0:
            raise ValueError("Limits must be positive")
        if not os.path.exists(cls.DB_PATH):
            logger.warning(f"Listing store not found at {cls.DB_PATH}; id lookups will use mock data")

    def resolve_language(self, lang: str = None) -> str:
        """Requested language if supported, otherwise the default."""
        if lang in self.SUPPORTED_LANGUAGES:
            return lang
        return self.DEFAULT_LANGUAGE


# Global config instance
config = Config()
