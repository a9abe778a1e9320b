"""
Text formatting utilities for export files and links.

This module provides consistent formatting functions for the GPX/KML
serializers and the export endpoints.

Usage:
    from location_importer.core.utils.formatting import escape_xml, slugify

    escape_xml("Café & Bar")     # "Café &amp; Bar"
    slugify("My Locations")      # "my-locations"
"""

import html
import re
from typing import Optional

_SLUG_STRIP = re.compile(r"[^a-z0-9]+")


def escape_xml(text: Optional[str], default: str = '') -> str:
    """
    Escape XML special characters for element text and attribute values.

    Uses Python's html.escape which handles:
    - & -> &amp;
    - < -> &lt;
    - > -> &gt;
    - " -> &quot;
    - ' -> &#x27;

    Args:
        text: Text to escape
        default: Default value for None/empty input

    Returns:
        Escaped string
    """
    if not text:
        return default

    return html.escape(str(text), quote=True)


def slugify(text: Optional[str], default: str = '') -> str:
    """
    Lowercase text and collapse anything non-alphanumeric into single dashes.

    Example:
        >>> slugify("Cultural Space")
        "cultural-space"
    """
    if not text:
        return default

    slug = _SLUG_STRIP.sub("-", str(text).lower()).strip("-")
    return slug or default


def export_filename(collection_name: Optional[str], extension: str) -> str:
    """
    Build a download file name for an exported collection.

    Example:
        >>> export_filename("Oaxaca Trip", "gpx")
        "oaxaca-trip.gpx"
        >>> export_filename("", "kml")
        "locations.kml"
    """
    base = slugify(collection_name, default="locations")
    return f"{base}.{extension.lstrip('.')}"


def format_coordinate(value: float, decimal_places: int = 6) -> str:
    """Format a coordinate with a fixed number of decimals, trailing zeros trimmed."""
    formatted = f"{value:.{decimal_places}f}".rstrip("0").rstrip(".")
    return "0" if formatted in ("", "-0") else formatted
