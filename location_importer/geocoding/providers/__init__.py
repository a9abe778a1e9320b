"""
Geocoding provider implementations.
"""

from location_importer.geocoding.providers.mapbox import MapboxGeocoder

__all__ = ["MapboxGeocoder"]
