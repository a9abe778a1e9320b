"""
Centralized configuration management for the bulk location importer.

All configuration is loaded from environment variables with sensible defaults.
Use the `settings` singleton for accessing configuration values.

Usage:
    from location_importer.core.config import settings

    # Access configuration
    print(settings.MAPBOX_TOKEN)
    print(settings.GEOCODE_BATCH_DELAY)
"""

import os
from pathlib import Path
from dataclasses import dataclass, field
from typing import List
from dotenv import load_dotenv

# Load environment variables from .env file
# Search in common locations
_env_paths = [
    Path(__file__).parent.parent.parent / ".env",  # project root
    Path.cwd() / ".env",  # Current working directory
]

for env_path in _env_paths:
    if env_path.exists():
        load_dotenv(env_path)
        break


def _mapbox_token() -> str:
    # The web frontend exposes the token under its public name
    return os.getenv("MAPBOX_TOKEN") or os.getenv("NEXT_PUBLIC_MAPBOX_TOKEN", "")


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    # ==========================================================================
    # Mapbox Configuration
    # ==========================================================================
    MAPBOX_TOKEN: str = field(default_factory=_mapbox_token)
    MAPBOX_GEOCODING_URL: str = field(
        default_factory=lambda: os.getenv(
            "MAPBOX_GEOCODING_URL",
            "https://api.mapbox.com/geocoding/v5/mapbox.places"
        )
    )

    # ==========================================================================
    # Geocoding Rate Limiting
    # ==========================================================================
    GEOCODE_BATCH_SIZE: int = field(
        default_factory=lambda: int(os.getenv("GEOCODE_BATCH_SIZE", "10"))
    )
    GEOCODE_BATCH_DELAY: float = field(
        default_factory=lambda: float(os.getenv("GEOCODE_BATCH_DELAY", "0.2"))
    )
    GEOCODE_REQUEST_TIMEOUT: float = field(
        default_factory=lambda: float(os.getenv("GEOCODE_REQUEST_TIMEOUT", "20"))
    )
    GEOCODE_RESULT_LIMIT: int = field(
        default_factory=lambda: int(os.getenv("GEOCODE_RESULT_LIMIT", "1"))
    )

    # ==========================================================================
    # Export Settings
    # ==========================================================================
    DIRECT_URL_MAX_LOCATIONS: int = field(
        default_factory=lambda: int(os.getenv("DIRECT_URL_MAX_LOCATIONS", "15"))
    )
    DEFAULT_COLLECTION_NAME: str = field(
        default_factory=lambda: os.getenv("DEFAULT_COLLECTION_NAME", "My Locations")
    )

    # ==========================================================================
    # API / Logging
    # ==========================================================================
    CORS_ORIGINS: List[str] = field(
        default_factory=lambda: os.getenv("CORS_ORIGINS", "*").split(",")
    )
    LOG_LEVEL: str = field(
        default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper()
    )

    def validate_mapbox(self) -> bool:
        """Check if the Mapbox access token is configured."""
        return bool(self.MAPBOX_TOKEN)


# Singleton settings instance
settings = Settings()
