"""
Pydantic schemas for API request/response models.
"""

from api.schemas.requests import GeocodeRequest, ImportRequest, ManualCoordinatesRequest
from api.schemas.responses import (
    ClassifiedResultResponse,
    GeocodeResponse,
    ErrorResponse,
    LocationResponse,
    SummaryResponse,
    LocationsResponse,
    LinksResponse,
)

__all__ = [
    "GeocodeRequest",
    "ImportRequest",
    "ManualCoordinatesRequest",
    "ClassifiedResultResponse",
    "GeocodeResponse",
    "ErrorResponse",
    "LocationResponse",
    "SummaryResponse",
    "LocationsResponse",
    "LinksResponse",
]
