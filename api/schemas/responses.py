"""
Response schemas for the Bulk Location Importer API.
"""

from typing import Dict, List, Optional
from pydantic import BaseModel, Field


class ClassifiedResultResponse(BaseModel):
    """Outcome of one geocoding query."""

    query: str = Field(..., description="The query as submitted")
    success: bool = Field(..., description="Whether the query resolved")
    outcome: str = Field(..., description="'resolved', 'not_found' or 'transport_error'")
    latitude: Optional[float] = Field(None, description="Latitude")
    longitude: Optional[float] = Field(None, description="Longitude")
    placeName: Optional[str] = Field(None, description="Provider display name")
    errorMessage: Optional[str] = Field(None, description="Why the query did not resolve")


class GeocodeResponse(BaseModel):
    """Results in the same order as the submitted queries."""

    results: List[ClassifiedResultResponse] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    error: str = Field(..., description="Error message")


class LocationResponse(BaseModel):
    """A location and its geocoding state."""

    id: str = Field(..., description="Stable location id")
    name: str
    category: str
    neighborhood: str = ""
    city: str = ""
    state: str = ""
    country: str = ""
    notes: str = ""
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    geocode_status: str = Field(..., description="pending, success, failed or manual_required")
    geocode_query: str = Field(..., description="Query currently associated with the location")
    error_message: Optional[str] = None
    place_name: Optional[str] = None
    manual_search_url: str = Field(..., description="Google Maps search to find coordinates by hand")


class SummaryResponse(BaseModel):
    total: int = 0
    resolved: int = 0
    failed: int = 0
    manual_required: int = 0
    recovered_by_fallback: int = 0


class LocationsResponse(BaseModel):
    """All locations of the current import."""

    locations: List[LocationResponse] = Field(default_factory=list)
    summary: SummaryResponse


class LinksResponse(BaseModel):
    """Map provider links for resolved locations."""

    google_maps_url: Optional[str] = Field(None, description="Search or directions URL")
    can_create_direct_url: bool = Field(..., description="Whether the set fits one URL")
    apple_maps_urls: Dict[str, str] = Field(
        default_factory=dict, description="Apple Maps URL per location id"
    )
    instructions: str = Field(..., description="How to import the KML into Google My Maps")
