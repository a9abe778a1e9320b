"""
GPX 1.1 export (waypoints only).

Opens in Apple Maps, OsmAnd, Organic Maps and most GPS apps.
"""

import logging
from datetime import datetime, timezone
from typing import Iterable, List

from location_importer.core.utils.formatting import escape_xml, format_coordinate
from location_importer.export.categories import get_category_emoji
from location_importer.models import GeocodedLocation

logger = logging.getLogger(__name__)

GPX_CREATOR = "Bulk Location Importer"


def describe(location: GeocodedLocation) -> str:
    """Waypoint description: category line, then notes if any."""
    parts = [f"{get_category_emoji(location.category)} {location.category}"]
    if location.notes:
        parts.append(location.notes)
    return "\n".join(parts)


def _waypoint(location: GeocodedLocation) -> str:
    lat = format_coordinate(location.latitude)
    lon = format_coordinate(location.longitude)
    return (
        f'  <wpt lat="{lat}" lon="{lon}">\n'
        f'    <name>{escape_xml(location.name)}</name>\n'
        f'    <desc>{escape_xml(describe(location))}</desc>\n'
        f'    <type>{escape_xml(location.category)}</type>\n'
        f'  </wpt>'
    )


def generate_gpx(locations: Iterable[GeocodedLocation], collection_name: str = "") -> str:
    """
    Serialize resolved locations as a GPX document.

    Locations that are not successfully geocoded are skipped.

    Args:
        locations: Any mix of locations; only exportable ones are written
        collection_name: Written as the GPX metadata name

    Returns:
        GPX XML as a string
    """
    valid: List[GeocodedLocation] = [loc for loc in locations if loc.is_exportable]
    name = collection_name or "Locations"
    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")

    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<gpx version="1.1" creator="{escape_xml(GPX_CREATOR)}" '
        'xmlns="http://www.topografix.com/GPX/1/1">',
        '  <metadata>',
        f'    <name>{escape_xml(name)}</name>',
        f'    <time>{timestamp}</time>',
        '  </metadata>',
    ]
    lines.extend(_waypoint(loc) for loc in valid)
    lines.append('</gpx>')

    logger.info(f"GPX export: {len(valid)} waypoints")
    return "\n".join(lines) + "\n"
