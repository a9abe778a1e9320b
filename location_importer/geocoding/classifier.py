"""
Classification of raw geocoder responses.

Turns an HTTP status + JSON payload (or a caught exception) into a
ClassifiedResult. Only the provider's first-ranked candidate is used.
"""

import logging
from typing import Any, Optional, Tuple

from location_importer.core.utils.geo import is_within_bounds
from location_importer.geocoding.base import ClassifiedResult, GeocodeOutcome

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "No results found"
UNKNOWN_ERROR_MESSAGE = "Unknown error"
MALFORMED_RESPONSE_MESSAGE = "Malformed response"


def classify_error(query: str, error: BaseException) -> ClassifiedResult:
    """Classify a call that raised before producing a response."""
    return ClassifiedResult(
        query=query,
        outcome=GeocodeOutcome.TRANSPORT_ERROR,
        error_message=str(error) or UNKNOWN_ERROR_MESSAGE,
    )


def _extract_lng_lat(feature: dict) -> Optional[Tuple[float, float]]:
    """Pull (lng, lat) from a GeoJSON feature, preferring Mapbox's `center`."""
    coords = feature.get("center")
    if not coords:
        coords = (feature.get("geometry") or {}).get("coordinates")
    try:
        lng, lat = float(coords[0]), float(coords[1])
    except (TypeError, ValueError, IndexError, KeyError):
        return None
    if not is_within_bounds(lat, lng):
        return None
    return lng, lat


def classify_response(query: str, status_code: int, payload: Any) -> ClassifiedResult:
    """
    Classify a provider response.

    Rules, in priority order:
    1. Non-2xx status -> transport_error ("Geocoding failed: <status>")
    2. Empty feature list -> not_found ("No results found")
    3. Otherwise -> resolved, from the first feature

    Args:
        query: The query the response belongs to
        status_code: HTTP status code of the response
        payload: Decoded JSON body (may be None for non-2xx responses)

    Returns:
        ClassifiedResult
    """
    if not 200 <= status_code < 300:
        return ClassifiedResult(
            query=query,
            outcome=GeocodeOutcome.TRANSPORT_ERROR,
            error_message=f"Geocoding failed: {status_code}",
        )

    features = payload.get("features") if isinstance(payload, dict) else None
    if not features:
        return ClassifiedResult(
            query=query,
            outcome=GeocodeOutcome.NOT_FOUND,
            error_message=NOT_FOUND_MESSAGE,
        )

    feature = features[0] if isinstance(features[0], dict) else {}
    lng_lat = _extract_lng_lat(feature)
    if lng_lat is None:
        logger.warning(f"Unusable coordinates in first result for '{query}'")
        return ClassifiedResult(
            query=query,
            outcome=GeocodeOutcome.TRANSPORT_ERROR,
            error_message=MALFORMED_RESPONSE_MESSAGE,
        )

    lng, lat = lng_lat
    return ClassifiedResult(
        query=query,
        outcome=GeocodeOutcome.RESOLVED,
        latitude=lat,
        longitude=lng,
        place_name=feature.get("place_name") or None,
    )
