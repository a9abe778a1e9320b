"""
Shared utility functions for the bulk location importer.

Modules:
- geo: Coordinate parsing and validation (manual entry, bounds checking)
- formatting: XML escaping, slugs and export file names

Usage:
    from location_importer.core.utils import validate_coordinates, escape_xml

    lat, lng = validate_coordinates("17.06", "-96.72")
    escaped = escape_xml("Bar & Grill")
"""

from location_importer.core.utils.geo import (
    ManualEntryError,
    parse_coordinate,
    validate_coordinates,
    is_within_bounds,
)
from location_importer.core.utils.formatting import (
    escape_xml,
    slugify,
    export_filename,
    format_coordinate,
)

__all__ = [
    # Geo utilities
    "ManualEntryError",
    "parse_coordinate",
    "validate_coordinates",
    "is_within_bounds",
    # Formatting utilities
    "escape_xml",
    "slugify",
    "export_filename",
    "format_coordinate",
]
