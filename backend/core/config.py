"""
Centralized configuration for the Storefront backend.

All environment variables and settings should be defined here
to avoid duplication across modules.
"""
import os
from functools import lru_cache


class Settings:
    """Application settings loaded from environment variables."""

    # CORS - comma-separated list of allowed origins
    ALLOWED_ORIGINS: list = os.environ.get(
        "ALLOWED_ORIGINS",
        "http://localhost:8090,http://localhost:5173,http://127.0.0.1:8090"
    ).split(",")

    # Catalog file (CSV, JSON or XLSX). Empty means use a generated sample.
    CATALOG_PATH: str = os.environ.get("FACETS_CATALOG_PATH", "")

    # Facet config JSON. Empty means every color and size.
    CONFIG_PATH: str = os.environ.get("FACETS_CONFIG_PATH", "")

    # Sample catalog used when no CATALOG_PATH is set
    SAMPLE_SIZE: int = int(os.environ.get("FACETS_SAMPLE_SIZE", "1000"))
    SAMPLE_SEED: int = int(os.environ.get("FACETS_SAMPLE_SEED", "42"))


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Singleton instance for easy import
settings = get_settings()
