"""
Search query construction for locations.

The primary query uses every populated address field; fallbacks drop the
most specific parts one step at a time.
"""

from typing import Iterable, List

from location_importer.models import RawLocation

QUERY_SEPARATOR = ", "


def _join(parts: Iterable[str]) -> str:
    return QUERY_SEPARATOR.join(part for part in parts if part)


def build_query(location: RawLocation) -> str:
    """
    Build the primary geocoding query for a location.

    Example:
        >>> build_query(RawLocation(name="Boulenc", city="Oaxaca", country="Mexico"))
        "Boulenc, Oaxaca, Mexico"
    """
    return _join([
        location.name,
        location.neighborhood,
        location.city,
        location.state,
        location.country,
    ])


def build_fallback_queries(location: RawLocation) -> List[str]:
    """
    Build the ordered list of progressively looser queries.

    Always four entries; the first equals build_query(). Consecutive
    duplicates are kept when the dropped fields were already empty.
    """
    return [
        # Full query
        _join([location.name, location.neighborhood, location.city, location.state, location.country]),
        # Without neighborhood
        _join([location.name, location.city, location.state, location.country]),
        # Name, city and country
        _join([location.name, location.city, location.country]),
        # Name and country
        _join([location.name, location.country]),
    ]
