"""
API routers for the Bulk Location Importer API.
"""

from api.routers.health import router as health_router
from api.routers.geocode import router as geocode_router
from api.routers.locations import router as locations_router
from api.routers.export import router as export_router

__all__ = ["health_router", "geocode_router", "locations_router", "export_router"]
