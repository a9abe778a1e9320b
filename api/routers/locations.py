"""
Location import, listing and manual correction endpoints.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from api.dependencies import (
    GeocoderFactory,
    get_dispatcher,
    get_geocoder_factory,
    get_location_store,
)
from api.schemas.requests import ImportRequest, ManualCoordinatesRequest
from api.schemas.responses import ErrorResponse, LocationResponse, LocationsResponse, SummaryResponse
from location_importer.core.utils.geo import ManualEntryError
from location_importer.data_import import parse_csv
from location_importer.geocoding import BatchDispatcher, ResolutionOrchestrator
from location_importer.models import GeocodedLocation, GeocodeStatus
from location_importer.store import LocationStore, manual_search_url

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/locations", tags=["Locations"])


def to_response(location: GeocodedLocation) -> LocationResponse:
    return LocationResponse(
        **location.as_dict,
        manual_search_url=manual_search_url(location),
    )


def summarize(store: LocationStore) -> SummaryResponse:
    return SummaryResponse(
        total=len(store),
        resolved=len(store.by_status(GeocodeStatus.SUCCESS)),
        failed=len(store.by_status(GeocodeStatus.FAILED)),
        manual_required=len(store.by_status(GeocodeStatus.MANUAL_REQUIRED)),
    )


@router.get("", response_model=LocationsResponse)
async def list_locations(store: LocationStore = Depends(get_location_store)):
    """List every location of the current import with its status."""
    return LocationsResponse(
        locations=[to_response(loc) for loc in store.all()],
        summary=summarize(store),
    )


@router.post("/import", response_model=LocationsResponse)
async def import_locations(
    request: ImportRequest,
    store: LocationStore = Depends(get_location_store),
    geocoder_factory: GeocoderFactory = Depends(get_geocoder_factory),
    dispatcher: BatchDispatcher = Depends(get_dispatcher),
):
    """
    Replace the current import with the rows of a CSV.

    With geocode=true the full pipeline runs before the response is sent:
    primary queries in batches, then fallback queries for failures.
    """
    store.load(parse_csv(request.csv))

    if not request.geocode:
        return await list_locations(store)

    geocoder = geocoder_factory()
    async with geocoder:
        orchestrator = ResolutionOrchestrator(geocoder.resolve, dispatcher=dispatcher)
        summary = await orchestrator.run(store)

    return LocationsResponse(
        locations=[to_response(loc) for loc in store.all()],
        summary=SummaryResponse(**summary.as_dict),
    )


@router.patch(
    "/{location_id}/coordinates",
    response_model=LocationResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def set_manual_coordinates(
    location_id: str,
    request: ManualCoordinatesRequest,
    store: LocationStore = Depends(get_location_store),
):
    """
    Set coordinates by hand for a location.

    Out-of-range or non-numeric values are rejected and the location is
    left unchanged.
    """
    try:
        updated = store.set_manual_coordinates(location_id, request.latitude, request.longitude)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown location: {location_id}")
    except ManualEntryError as e:
        return JSONResponse(status_code=400, content={"error": e.message})

    return to_response(updated)


@router.delete("")
async def reset_locations(store: LocationStore = Depends(get_location_store)):
    """Discard the current import."""
    store.reset()
    return {"status": "ok"}
