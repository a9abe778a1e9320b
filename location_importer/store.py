"""
In-memory store for the locations of one import.

All state changes go through pure transition functions applied by id.
Positions in the list are never used to match results to locations.
"""

import logging
from dataclasses import replace
from typing import Callable, Dict, Iterable, List, Optional
from urllib.parse import quote

from location_importer.core.utils.geo import CoordinateInput, validate_coordinates
from location_importer.models import (
    GeocodedLocation,
    GeocodeStatus,
    RawLocation,
    create_geocoded_locations,
)

logger = logging.getLogger(__name__)

LOCATION_NOT_FOUND_MESSAGE = "Location not found"

Transition = Callable[[GeocodedLocation], GeocodedLocation]


# =============================================================================
# Transitions
# =============================================================================

def mark_resolved(
    latitude: float,
    longitude: float,
    place_name: Optional[str] = None,
    query: Optional[str] = None,
) -> Transition:
    """Transition to success with geocoded coordinates.

    `query` overwrites geocode_query when a fallback query won.
    """
    def apply(location: GeocodedLocation) -> GeocodedLocation:
        return replace(
            location,
            latitude=latitude,
            longitude=longitude,
            place_name=place_name,
            geocode_status=GeocodeStatus.SUCCESS,
            geocode_query=query if query is not None else location.geocode_query,
            error_message=None,
        )
    return apply


def mark_failed(error_message: Optional[str]) -> Transition:
    def apply(location: GeocodedLocation) -> GeocodedLocation:
        return replace(
            location,
            latitude=None,
            longitude=None,
            geocode_status=GeocodeStatus.FAILED,
            error_message=error_message or LOCATION_NOT_FOUND_MESSAGE,
        )
    return apply


def mark_manual(latitude: float, longitude: float) -> Transition:
    """User-supplied coordinates bypass the pipeline entirely."""
    def apply(location: GeocodedLocation) -> GeocodedLocation:
        return replace(
            location,
            latitude=latitude,
            longitude=longitude,
            place_name=None,
            geocode_status=GeocodeStatus.SUCCESS,
            error_message=None,
        )
    return apply


# =============================================================================
# Store
# =============================================================================

class LocationStore:
    """
    Owns the location collection of one import, keyed by id.

    Usage:
        store = LocationStore()
        store.load(parse_csv(text))
        await ResolutionOrchestrator(geocoder.resolve).run(store)
        store.set_manual_coordinates(location_id, 17.06, -96.72)
    """

    def __init__(self, locations: Optional[Iterable[GeocodedLocation]] = None):
        self._locations: Dict[str, GeocodedLocation] = {}
        if locations:
            for location in locations:
                self._locations[location.id] = location

    def load(self, raw_locations: List[RawLocation]) -> List[GeocodedLocation]:
        """Replace the whole collection with freshly created locations."""
        self.reset()
        for location in create_geocoded_locations(raw_locations):
            self._locations[location.id] = location
        logger.info(f"Loaded {len(self._locations)} locations")
        return self.all()

    def reset(self) -> None:
        """Discard every location. Results still in flight are dropped by apply()."""
        self._locations = {}

    def __len__(self) -> int:
        return len(self._locations)

    def __contains__(self, location_id: str) -> bool:
        return location_id in self._locations

    def get(self, location_id: str) -> GeocodedLocation:
        return self._locations[location_id]

    def all(self) -> List[GeocodedLocation]:
        return list(self._locations.values())

    def by_status(self, status: GeocodeStatus) -> List[GeocodedLocation]:
        return [loc for loc in self._locations.values() if loc.geocode_status == status]

    def valid_locations(self) -> List[GeocodedLocation]:
        """Locations that can be exported (success with coordinates)."""
        return [loc for loc in self._locations.values() if loc.is_exportable]

    def apply(
        self,
        location_id: str,
        transition: Transition,
        expected: Optional[GeocodeStatus] = None,
    ) -> Optional[GeocodedLocation]:
        """
        Apply a transition to one location.

        With `expected`, the transition only runs while the location is
        still in that status, so a manual fix made while a geocode call
        was in flight is not overwritten.

        Returns the updated location, or None when the id is gone (the
        store was reset while the result was in flight) or the status
        no longer matches.
        """
        current = self._locations.get(location_id)
        if current is None:
            logger.debug(f"Dropping update for unknown location {location_id}")
            return None
        if expected is not None and current.geocode_status != expected:
            logger.debug(
                f"Dropping update for {location_id}: status is "
                f"{current.geocode_status.value}, expected {expected.value}"
            )
            return None
        updated = transition(current)
        self._locations[location_id] = updated
        return updated

    def set_manual_coordinates(
        self,
        location_id: str,
        latitude: CoordinateInput,
        longitude: CoordinateInput,
    ) -> GeocodedLocation:
        """
        Set user-entered coordinates on a location.

        Raises:
            KeyError: Unknown location id
            ManualEntryError: Coordinates rejected; the location is unchanged
        """
        if location_id not in self._locations:
            raise KeyError(location_id)
        lat, lng = validate_coordinates(latitude, longitude)
        logger.info(f"Manual coordinates for {location_id}: {lat}, {lng}")
        return self.apply(location_id, mark_manual(lat, lng))


def manual_search_url(location: RawLocation) -> str:
    """Google Maps search link to help a user look up coordinates by hand."""
    text = " ".join([location.name, location.city, location.country])
    return f"https://www.google.com/maps/search/{quote(text)}"
