"""
Map provider links for resolved locations.
"""

from typing import Iterable, List, Optional
from urllib.parse import quote

from location_importer.core import settings
from location_importer.models import GeocodedLocation

GOOGLE_MY_MAPS_INSTRUCTIONS = """To import into Google My Maps:
1. Go to google.com/mymaps
2. Click "Create a new map"
3. Click "Import" in the left panel
4. Upload the KML file
5. Your locations will appear with colors by category!
6. The map syncs to your Google Maps app"""


def _valid(locations: Iterable[GeocodedLocation]) -> List[GeocodedLocation]:
    return [loc for loc in locations if loc.is_exportable]


def _point(location: GeocodedLocation) -> str:
    return f"{location.latitude},{location.longitude}"


def generate_google_maps_url(locations: Iterable[GeocodedLocation]) -> Optional[str]:
    """
    Google Maps link covering the resolved locations.

    One point gives a search URL; several give a directions URL with the
    first as origin, the last as destination and the rest as waypoints.
    Long lists exceed URL limits; check can_create_direct_url() first.

    Returns:
        URL string, or None when nothing is resolved
    """
    valid = _valid(locations)
    if not valid:
        return None

    if len(valid) == 1:
        return f"https://www.google.com/maps/search/?api=1&query={_point(valid[0])}"

    origin, destination = valid[0], valid[-1]
    url = "https://www.google.com/maps/dir/?api=1"
    url += f"&origin={_point(origin)}"
    url += f"&destination={_point(destination)}"

    waypoints = valid[1:-1]
    if waypoints:
        url += "&waypoints=" + quote("|".join(_point(loc) for loc in waypoints), safe="")

    return url


def generate_apple_maps_url(location: GeocodedLocation) -> Optional[str]:
    """Apple Maps link for a single location, or None without coordinates."""
    if not location.has_coordinates:
        return None
    return f"https://maps.apple.com/?ll={_point(location)}&q={quote(location.name, safe='')}"


def can_create_direct_url(locations: Iterable[GeocodedLocation]) -> bool:
    """Whether the resolved set is small enough for a single Maps URL."""
    return len(_valid(locations)) <= settings.DIRECT_URL_MAX_LOCATIONS


def google_my_maps_instructions() -> str:
    return GOOGLE_MY_MAPS_INSTRUCTIONS
