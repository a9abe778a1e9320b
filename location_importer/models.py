"""
Data models for imported and geocoded locations.
"""
import uuid
from dataclasses import dataclass, asdict
from enum import Enum
from typing import List, Optional

DEFAULT_CATEGORY = "Other"
MULTIPLE_MARKER = "multiple"
MULTIPLE_LOCATIONS_MESSAGE = "Multiple locations - manual entry required"


class GeocodeStatus(str, Enum):
    """Geocoding state of a location."""
    PENDING = "pending"
    SUCCESS = "success"
    FAILED = "failed"
    MANUAL_REQUIRED = "manual_required"


@dataclass(frozen=True)
class RawLocation:
    """A place as it came out of the CSV, before any geocoding."""

    name: str
    category: str = DEFAULT_CATEGORY
    neighborhood: str = ""
    city: str = ""
    state: str = ""
    country: str = ""
    notes: str = ""

    def needs_manual_entry(self) -> bool:
        """Rows spanning several sites cannot be resolved to one point."""
        return (
            MULTIPLE_MARKER in self.neighborhood.lower() or
            MULTIPLE_MARKER in self.city.lower()
        )


@dataclass(frozen=True)
class GeocodedLocation(RawLocation):
    """
    A location tracked through the geocoding pipeline.

    Instances are never mutated in place; state changes produce a new
    instance (see location_importer.store) that is written back by id.
    """

    id: str = ""
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    geocode_status: GeocodeStatus = GeocodeStatus.PENDING
    geocode_query: str = ""
    error_message: Optional[str] = None
    place_name: Optional[str] = None

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    @property
    def is_exportable(self) -> bool:
        """Only resolved locations with coordinates go into exports."""
        return self.geocode_status == GeocodeStatus.SUCCESS and self.has_coordinates

    @property
    def raw(self) -> RawLocation:
        return RawLocation(
            name=self.name,
            category=self.category,
            neighborhood=self.neighborhood,
            city=self.city,
            state=self.state,
            country=self.country,
            notes=self.notes,
        )

    @property
    def as_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        data = asdict(self)
        data["geocode_status"] = self.geocode_status.value
        return data

    def __repr__(self):
        return f"<GeocodedLocation(id='{self.id}', name='{self.name}', status='{self.geocode_status.value}')>"


def new_location_id(index: int) -> str:
    """Build a unique id for the row at `index` of an import."""
    return f"loc-{index}-{uuid.uuid4().hex[:12]}"


def create_geocoded_locations(raw_locations: List[RawLocation]) -> List[GeocodedLocation]:
    """
    Turn parsed rows into trackable locations.

    Rows whose neighborhood or city mention "multiple" start out as
    manual_required and are never sent to the geocoder.
    """
    # Imported here to keep models free of geocoding imports at module load
    from location_importer.geocoding.queries import build_query

    locations = []
    for index, raw in enumerate(raw_locations):
        manual = raw.needs_manual_entry()
        locations.append(GeocodedLocation(
            name=raw.name,
            category=raw.category or DEFAULT_CATEGORY,
            neighborhood=raw.neighborhood,
            city=raw.city,
            state=raw.state,
            country=raw.country,
            notes=raw.notes,
            id=new_location_id(index),
            geocode_status=GeocodeStatus.MANUAL_REQUIRED if manual else GeocodeStatus.PENDING,
            geocode_query=build_query(raw),
            error_message=MULTIPLE_LOCATIONS_MESSAGE if manual else None,
        ))
    return locations
