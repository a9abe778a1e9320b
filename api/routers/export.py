"""
Export endpoints: GPX and KML downloads, map links.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from api.config import settings
from api.dependencies import get_location_store
from api.schemas.responses import LinksResponse
from location_importer.core.utils.formatting import export_filename
from location_importer.export import (
    can_create_direct_url,
    generate_apple_maps_url,
    generate_google_maps_url,
    generate_gpx,
    generate_kml,
    google_my_maps_instructions,
)
from location_importer.store import LocationStore

router = APIRouter(prefix="/api/export", tags=["Export"])


def _require_valid(store: LocationStore) -> None:
    if not store.valid_locations():
        raise HTTPException(status_code=404, detail="No geocoded locations to export")


def _download(content: str, filename: str, media_type: str) -> Response:
    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/gpx")
async def export_gpx(
    name: Optional[str] = None,
    store: LocationStore = Depends(get_location_store),
):
    """Download resolved locations as GPX (Apple Maps and GPS apps)."""
    _require_valid(store)
    collection = name or settings.DEFAULT_COLLECTION_NAME
    return _download(
        generate_gpx(store.all(), collection),
        export_filename(collection, "gpx"),
        "application/gpx+xml",
    )


@router.get("/kml")
async def export_kml(
    name: Optional[str] = None,
    store: LocationStore = Depends(get_location_store),
):
    """Download resolved locations as KML (Google My Maps)."""
    _require_valid(store)
    collection = name or settings.DEFAULT_COLLECTION_NAME
    return _download(
        generate_kml(store.all(), collection),
        export_filename(collection, "kml"),
        "application/vnd.google-earth.kml+xml",
    )


@router.get("/links", response_model=LinksResponse)
async def export_links(store: LocationStore = Depends(get_location_store)):
    """Google Maps / Apple Maps links for resolved locations."""
    locations = store.all()
    direct = can_create_direct_url(locations)
    return LinksResponse(
        google_maps_url=generate_google_maps_url(locations) if direct else None,
        can_create_direct_url=direct,
        apple_maps_urls={
            loc.id: generate_apple_maps_url(loc) for loc in store.valid_locations()
        },
        instructions=google_my_maps_instructions(),
    )
