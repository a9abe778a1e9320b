"""
Bulk Location Importer API - FastAPI Backend

Geocodes pasted CSV place lists through Mapbox and exports the resolved
points as GPX/KML and map links.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.config import settings
from api.routers import export_router, geocode_router, health_router, locations_router
from location_importer.geocoding import GeocoderConfigurationError, QueryValidationError

logger = logging.getLogger(__name__)

# Initialize FastAPI
app = FastAPI(
    title=settings.API_TITLE,
    description=settings.API_DESCRIPTION,
    version=settings.API_VERSION
)

# Configure CORS for the web frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=settings.CORS_ALLOW_METHODS,
    allow_headers=settings.CORS_ALLOW_HEADERS,
)


@app.exception_handler(QueryValidationError)
async def query_validation_handler(request: Request, exc: QueryValidationError):
    return JSONResponse(status_code=400, content={"error": exc.message})


@app.exception_handler(GeocoderConfigurationError)
async def configuration_error_handler(request: Request, exc: GeocoderConfigurationError):
    logger.error(f"Geocoder not configured: {exc}")
    return JSONResponse(status_code=500, content={"error": exc.message})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


app.include_router(health_router)
app.include_router(geocode_router)
app.include_router(locations_router)
app.include_router(export_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
