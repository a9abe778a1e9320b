"""
API configuration module.

Centralizes all configuration for the Bulk Location Importer API.
"""

from location_importer import __version__
from location_importer.core import settings as core_settings


class APISettings:
    """API-specific settings extending core settings."""

    # Re-export core settings
    MAPBOX_TOKEN = core_settings.MAPBOX_TOKEN
    DEFAULT_COLLECTION_NAME = core_settings.DEFAULT_COLLECTION_NAME

    # API-specific settings
    API_TITLE = "Bulk Location Importer API"
    API_DESCRIPTION = "Geocode CSV place lists and export them to GPX/KML"
    API_VERSION = __version__

    # CORS settings
    CORS_ORIGINS = core_settings.CORS_ORIGINS
    CORS_ALLOW_CREDENTIALS = True
    CORS_ALLOW_METHODS = ["*"]
    CORS_ALLOW_HEADERS = ["*"]

    @classmethod
    def validate_mapbox(cls) -> bool:
        """Check if the Mapbox token is configured."""
        return core_settings.validate_mapbox()


settings = APISettings()
