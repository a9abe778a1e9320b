"""
Bulk location importer: CSV of places -> geocoded points -> GPX/KML.
"""

__version__ = "1.0.0"
