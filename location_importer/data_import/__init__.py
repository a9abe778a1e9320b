"""
Data import module: CSV text -> RawLocation records.

Usage:
    from location_importer.data_import import parse_csv

    rows = parse_csv("name,city,country\\nBoulenc,Oaxaca,Mexico")
"""

from location_importer.data_import.csv_parser import (
    normalize_header,
    parse_csv,
    parse_csv_file,
)

__all__ = ["normalize_header", "parse_csv", "parse_csv_file"]
