#!/usr/bin/env python3
"""
Command-line interface for the geocoding pipeline.

Usage:
    python -m location_importer.geocoding.cli --query "Boulenc, Oaxaca, Mexico"
    python -m location_importer.geocoding.cli --csv places.csv
    python -m location_importer.geocoding.cli --csv places.csv --gpx out.gpx --kml out.kml --name "Oaxaca"
"""

import argparse
import asyncio
import logging
import sys
import time
from pathlib import Path
from typing import Optional

from location_importer.core import settings
from location_importer.data_import import parse_csv_file
from location_importer.export import generate_gpx, generate_kml, generate_google_maps_url, can_create_direct_url
from location_importer.geocoding import (
    GeocodingError,
    geocode_queries,
    resolve_locations,
)
from location_importer.models import GeocodeStatus
from location_importer.store import LocationStore, manual_search_url

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.LOG_LEVEL,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()]
    )


async def geocode_single_query(query: str) -> None:
    """Geocode one free-text query and print the result."""
    print(f"\nGeocoding: {query}")
    print("-" * 50)

    result = (await geocode_queries([query]))[0]

    if result.success:
        print("✓ Success!")
        print(f"  Latitude:  {result.latitude:.6f}")
        print(f"  Longitude: {result.longitude:.6f}")
        print(f"  Matched:   {result.place_name}")
    else:
        print(f"✗ {result.outcome.value}: {result.error_message}")


async def geocode_csv(
    csv_path: str,
    collection_name: str,
    gpx_path: Optional[str] = None,
    kml_path: Optional[str] = None,
) -> None:
    """Import a CSV, run the pipeline, and optionally write exports."""
    store = LocationStore()
    store.load(parse_csv_file(csv_path))

    if not len(store):
        print("No locations found in CSV")
        return

    def report(current: int, total: int) -> None:
        if total and (current == total or current % settings.GEOCODE_BATCH_SIZE == 0):
            logger.info(f"Geocoding locations... {current}/{total}")

    start_time = time.time()
    summary = await resolve_locations(store, on_progress=report)
    elapsed = time.time() - start_time

    unresolved = [
        loc for loc in store.all()
        if loc.geocode_status in (GeocodeStatus.FAILED, GeocodeStatus.MANUAL_REQUIRED)
    ]
    if unresolved:
        print("\nNeeds attention:")
        for loc in unresolved:
            print(f"  [{loc.geocode_status.value}] {loc.name}: {loc.error_message}")
            print(f"      search: {manual_search_url(loc)}")

    if gpx_path:
        Path(gpx_path).write_text(generate_gpx(store.all(), collection_name), encoding="utf-8")
        print(f"\nWrote GPX: {gpx_path}")
    if kml_path:
        Path(kml_path).write_text(generate_kml(store.all(), collection_name), encoding="utf-8")
        print(f"Wrote KML: {kml_path}")
    if summary.resolved and can_create_direct_url(store.all()):
        print(f"Google Maps: {generate_google_maps_url(store.all())}")

    # Summary
    print(f"\n{'='*50}")
    print("GEOCODING SUMMARY")
    print(f"{'='*50}")
    print(f"Total locations:       {summary.total}")
    print(f"Resolved:              {summary.resolved}")
    print(f"  via fallback query:  {summary.recovered_by_fallback}")
    print(f"Failed:                {summary.failed}")
    print(f"Manual entry required: {summary.manual_required}")
    print(f"Time elapsed:          {elapsed:.1f}s")


def main():
    parser = argparse.ArgumentParser(
        description="Geocode a CSV of places and export GPX/KML"
    )

    parser.add_argument(
        "--query", "-q",
        type=str,
        help="Geocode a single free-text query"
    )
    parser.add_argument(
        "--csv", "-f",
        type=str,
        help="CSV file of locations to geocode"
    )
    parser.add_argument(
        "--name", "-n",
        type=str,
        default=settings.DEFAULT_COLLECTION_NAME,
        help="Collection name used in exports"
    )
    parser.add_argument(
        "--gpx",
        type=str,
        help="Write resolved locations to this GPX file (with --csv)"
    )
    parser.add_argument(
        "--kml",
        type=str,
        help="Write resolved locations to this KML file (with --csv)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )

    args = parser.parse_args()
    configure_logging(args.verbose)

    try:
        if args.query:
            asyncio.run(geocode_single_query(args.query))
        elif args.csv:
            asyncio.run(geocode_csv(args.csv, args.name, args.gpx, args.kml))
        else:
            parser.print_help()
    except GeocodingError as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
