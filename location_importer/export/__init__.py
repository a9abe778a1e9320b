"""
Export module: resolved locations -> GPX, KML and map links.

Usage:
    from location_importer.export import generate_gpx, generate_kml

    gpx_text = generate_gpx(store.all(), "Oaxaca Trip")
    kml_text = generate_kml(store.all(), "Oaxaca Trip")
"""

from location_importer.export.categories import (
    get_category_color,
    get_category_emoji,
    hex_to_kml_color,
)
from location_importer.export.gpx import generate_gpx
from location_importer.export.kml import generate_kml
from location_importer.export.links import (
    generate_google_maps_url,
    generate_apple_maps_url,
    can_create_direct_url,
    google_my_maps_instructions,
)

__all__ = [
    # Styling
    "get_category_color",
    "get_category_emoji",
    "hex_to_kml_color",
    # Files
    "generate_gpx",
    "generate_kml",
    # Links
    "generate_google_maps_url",
    "generate_apple_maps_url",
    "can_create_direct_url",
    "google_my_maps_instructions",
]
