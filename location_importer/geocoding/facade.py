"""
Geocoding facade providing a simple interface to the pipeline.
"""

import logging
from typing import Any, List, Literal, Optional

from location_importer.geocoding.base import (
    BaseGeocoder,
    ClassifiedResult,
    QueryValidationError,
)
from location_importer.geocoding.dispatcher import BatchDispatcher
from location_importer.geocoding.orchestrator import (
    ProgressCallback,
    ResolutionOrchestrator,
    ResolutionSummary,
)
from location_importer.geocoding.providers.mapbox import MapboxGeocoder
from location_importer.store import LocationStore

logger = logging.getLogger(__name__)

ProviderType = Literal["mapbox"]


def get_geocoder(provider: ProviderType = "mapbox", **kwargs) -> BaseGeocoder:
    """
    Get a geocoder instance by provider name.

    Args:
        provider: Provider name ("mapbox")
        **kwargs: Passed to the provider constructor

    Returns:
        Geocoder instance

    Raises:
        ValueError: Unknown provider
        GeocoderConfigurationError: Provider credentials missing
    """
    providers = {
        "mapbox": MapboxGeocoder,
    }

    if provider not in providers:
        raise ValueError(f"Unknown provider: {provider}. Choose from: {list(providers.keys())}")

    return providers[provider](**kwargs)


def validate_queries(queries: Any) -> List[str]:
    """
    Check that a request payload is a list of strings.

    Raises:
        QueryValidationError: Before any external call is made
    """
    if not isinstance(queries, list) or not all(isinstance(q, str) for q in queries):
        raise QueryValidationError("Invalid request: queries array required")
    return queries


async def geocode_queries(
    queries: Any,
    geocoder: Optional[BaseGeocoder] = None,
    dispatcher: Optional[BatchDispatcher] = None,
) -> List[ClassifiedResult]:
    """
    Geocode a list of free-text queries in rate-limited batches.

    Args:
        queries: List of query strings
        geocoder: Geocoder to use (default: Mapbox from settings)
        dispatcher: Batch dispatcher (default: settings batch size/delay)

    Returns:
        One ClassifiedResult per query, same order

    Raises:
        QueryValidationError: Payload is not a list of strings
        GeocoderConfigurationError: No geocoder given and Mapbox token missing

    Example:
        results = await geocode_queries(["Boulenc, Oaxaca, Mexico"])
    """
    queries = validate_queries(queries)
    dispatcher = dispatcher or BatchDispatcher()

    logger.debug(f"Received {len(queries)} queries, sample: {queries[:5]}")

    if geocoder is not None:
        return await dispatcher.dispatch(queries, geocoder.resolve)

    async with get_geocoder() as default_geocoder:
        return await dispatcher.dispatch(queries, default_geocoder.resolve)


async def resolve_locations(
    store: LocationStore,
    geocoder: Optional[BaseGeocoder] = None,
    dispatcher: Optional[BatchDispatcher] = None,
    on_progress: Optional[ProgressCallback] = None,
) -> ResolutionSummary:
    """
    Run the full pipeline (first pass + fallbacks) over a store.

    Example:
        store = LocationStore()
        store.load(parse_csv(text))
        summary = await resolve_locations(store)
    """
    if geocoder is not None:
        orchestrator = ResolutionOrchestrator(geocoder.resolve, dispatcher=dispatcher)
        return await orchestrator.run(store, on_progress=on_progress)

    async with get_geocoder() as default_geocoder:
        orchestrator = ResolutionOrchestrator(default_geocoder.resolve, dispatcher=dispatcher)
        return await orchestrator.run(store, on_progress=on_progress)
