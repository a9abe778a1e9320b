"""
Request schemas for the Bulk Location Importer API.
"""

from typing import List, Optional, Union
from pydantic import BaseModel, Field


class GeocodeRequest(BaseModel):
    """Request body for batch geocoding (documentation only; validated by hand)."""

    queries: List[str] = Field(..., description="Free-text search queries")

    model_config = {
        "json_schema_extra": {
            "example": {
                "queries": [
                    "Boulenc, Centro, Oaxaca, Mexico",
                    "Museo Textil de Oaxaca, Oaxaca, Mexico"
                ]
            }
        }
    }


class ImportRequest(BaseModel):
    """Request body for importing a CSV of locations."""

    csv: str = Field(..., description="CSV text with a header row")
    geocode: bool = Field(True, description="Run the geocoding pipeline after import")

    model_config = {
        "json_schema_extra": {
            "example": {
                "csv": "name,category,neighborhood,city,country\n"
                       "Boulenc,Bakery,Centro,Oaxaca,Mexico",
                "geocode": True
            }
        }
    }


class ManualCoordinatesRequest(BaseModel):
    """Coordinates entered by hand for one location."""

    latitude: Optional[Union[float, str]] = Field(
        None, description="Latitude in decimal degrees (-90 to 90)"
    )
    longitude: Optional[Union[float, str]] = Field(
        None, description="Longitude in decimal degrees (-180 to 180)"
    )

    model_config = {
        "json_schema_extra": {
            "example": {"latitude": 17.0614, "longitude": -96.7195}
        }
    }
