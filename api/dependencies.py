"""
FastAPI dependencies for the Bulk Location Importer API.

Provides dependency injection for the location store and geocoder.
"""

from typing import Callable, Optional

from location_importer.geocoding import BaseGeocoder, BatchDispatcher, get_geocoder
from location_importer.store import LocationStore

GeocoderFactory = Callable[[], BaseGeocoder]

# Process-wide store; the app serves a single user session
_location_store: Optional[LocationStore] = None


def get_location_store() -> LocationStore:
    """
    Get the location store as a FastAPI dependency.

    Usage:
        @router.get("/locations")
        async def list_locations(store: LocationStore = Depends(get_location_store)):
            return store.all()
    """
    global _location_store

    if _location_store is None:
        _location_store = LocationStore()

    return _location_store


def get_geocoder_factory() -> GeocoderFactory:
    """
    Return a callable that builds the geocoder.

    Construction is deferred to the endpoint so that request validation
    happens before the credential check.
    """
    return get_geocoder


def get_dispatcher() -> BatchDispatcher:
    return BatchDispatcher()
