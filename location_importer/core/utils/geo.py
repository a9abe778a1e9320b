"""
Geographic utility functions for coordinate validation.

This module consolidates the coordinate checks used across the codebase:
- Parsing user-entered latitude/longitude values
- WGS84 range validation
- Bounding box checks

Usage:
    from location_importer.core.utils.geo import validate_coordinates

    lat, lng = validate_coordinates("17.0614", "-96.7195")
"""

import math
from typing import Optional, Tuple, Union

# WGS84 coordinate ranges
MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0

WORLD_BOUNDS = {
    "min_lat": MIN_LATITUDE,
    "max_lat": MAX_LATITUDE,
    "min_lng": MIN_LONGITUDE,
    "max_lng": MAX_LONGITUDE,
}

CoordinateInput = Union[int, float, str, None]


class ManualEntryError(ValueError):
    """Raised when user-entered coordinates are rejected."""

    def __init__(self, message: str, field: str = ""):
        self.message = message
        self.field = field
        super().__init__(message)


def parse_coordinate(value: CoordinateInput) -> Optional[float]:
    """
    Parse a coordinate value entered by a user.

    Accepts numbers and numeric strings (surrounding whitespace ignored).

    Returns:
        The value as a float, or None if it is not a finite number
    """
    if value is None or isinstance(value, bool):
        return None

    try:
        num = float(str(value).strip()) if isinstance(value, str) else float(value)
    except (ValueError, TypeError):
        return None

    if math.isnan(num) or math.isinf(num):
        return None

    return num


def validate_coordinates(
    lat: CoordinateInput,
    lng: CoordinateInput
) -> Tuple[float, float]:
    """
    Validate a manually entered latitude/longitude pair.

    Args:
        lat: Latitude in decimal degrees (number or numeric string)
        lng: Longitude in decimal degrees (number or numeric string)

    Returns:
        Tuple of (latitude, longitude) as floats

    Raises:
        ManualEntryError: With a distinct message per violated constraint

    Example:
        >>> validate_coordinates("17.06", -96.72)
        (17.06, -96.72)
        >>> validate_coordinates(95, 0)
        Traceback (most recent call last):
        ...
        ManualEntryError: Latitude must be between -90 and 90
    """
    parsed_lat = parse_coordinate(lat)
    parsed_lng = parse_coordinate(lng)

    if parsed_lat is None or parsed_lng is None:
        raise ManualEntryError(
            "Please enter valid numbers for latitude and longitude"
        )

    if not MIN_LATITUDE <= parsed_lat <= MAX_LATITUDE:
        raise ManualEntryError("Latitude must be between -90 and 90", field="latitude")

    if not MIN_LONGITUDE <= parsed_lng <= MAX_LONGITUDE:
        raise ManualEntryError("Longitude must be between -180 and 180", field="longitude")

    return parsed_lat, parsed_lng


def is_within_bounds(
    lat: float,
    lng: float,
    bounds: Optional[dict] = None
) -> bool:
    """
    Check if coordinates are within a bounding box.

    Args:
        lat: Latitude to check
        lng: Longitude to check
        bounds: Dictionary with min_lat, max_lat, min_lng, max_lng
                If None, uses the full WGS84 range

    Returns:
        True if coordinates are within bounds
    """
    if bounds is None:
        bounds = WORLD_BOUNDS

    return (
        bounds["min_lat"] <= lat <= bounds["max_lat"] and
        bounds["min_lng"] <= lng <= bounds["max_lng"]
    )
