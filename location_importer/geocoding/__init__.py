"""
Geocoding pipeline for imported locations.

Components:
- queries: primary and fallback search strings for a location
- classifier: raw provider response -> ClassifiedResult
- dispatcher: rate-limited concurrent batches
- orchestrator: first pass + per-location fallback retries
- providers: Mapbox forward geocoding

Usage:
    from location_importer.geocoding import MapboxGeocoder, geocode_queries

    # Using a specific provider
    async with MapboxGeocoder() as geocoder:
        result = await geocoder.resolve("Boulenc, Oaxaca, Mexico")

    # Using convenience function
    results = await geocode_queries(["Boulenc, Oaxaca, Mexico"])
"""

from location_importer.geocoding.base import (
    ClassifiedResult,
    GeocodeOutcome,
    GeocodingError,
    GeocoderConfigurationError,
    QueryValidationError,
    BaseGeocoder,
)
from location_importer.geocoding.queries import build_query, build_fallback_queries
from location_importer.geocoding.dispatcher import BatchDispatcher
from location_importer.geocoding.orchestrator import ResolutionOrchestrator, ResolutionSummary
from location_importer.geocoding.providers.mapbox import MapboxGeocoder
from location_importer.geocoding.facade import (
    get_geocoder,
    geocode_queries,
    resolve_locations,
    validate_queries,
)

__all__ = [
    # Base classes
    "ClassifiedResult",
    "GeocodeOutcome",
    "GeocodingError",
    "GeocoderConfigurationError",
    "QueryValidationError",
    "BaseGeocoder",
    # Pipeline
    "build_query",
    "build_fallback_queries",
    "BatchDispatcher",
    "ResolutionOrchestrator",
    "ResolutionSummary",
    # Providers
    "MapboxGeocoder",
    # Convenience functions
    "get_geocoder",
    "geocode_queries",
    "resolve_locations",
    "validate_queries",
]
