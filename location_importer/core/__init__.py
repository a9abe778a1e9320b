"""
Core module providing shared configuration and utilities.

This module consolidates common functionality used across the codebase:
- Configuration management (settings, environment variables)
- Utility functions (geo, formatting)

Usage:
    from location_importer.core import settings
    from location_importer.core.utils import validate_coordinates, escape_xml
"""

from location_importer.core.config import settings, Settings

__all__ = [
    "settings",
    "Settings",
]
