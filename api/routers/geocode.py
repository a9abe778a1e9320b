"""
Batch geocoding endpoint.
"""

import logging

from fastapi import APIRouter, Depends, Request

from api.dependencies import GeocoderFactory, get_dispatcher, get_geocoder_factory
from api.schemas.requests import GeocodeRequest
from api.schemas.responses import ErrorResponse, GeocodeResponse
from location_importer.geocoding import BatchDispatcher, QueryValidationError, validate_queries

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Geocoding"])


@router.post(
    "/geocode",
    response_model=GeocodeResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": GeocodeRequest.model_json_schema()}},
        }
    },
)
async def geocode_endpoint(
    request: Request,
    geocoder_factory: GeocoderFactory = Depends(get_geocoder_factory),
    dispatcher: BatchDispatcher = Depends(get_dispatcher),
):
    """
    Geocode a list of free-text queries.

    Queries run in batches of 10 with a short pause between batches.
    One result is returned per query, in the same order.
    """
    try:
        body = await request.json()
    except ValueError:
        raise QueryValidationError("Invalid request: queries array required")

    queries = validate_queries(body.get("queries") if isinstance(body, dict) else None)

    # Raises GeocoderConfigurationError when the token is missing
    geocoder = geocoder_factory()
    async with geocoder:
        results = await dispatcher.dispatch(queries, geocoder.resolve)

    resolved = sum(1 for r in results if r.success)
    logger.info(f"Geocoded {resolved}/{len(results)} queries")
    return GeocodeResponse(results=[r.as_dict for r in results])
