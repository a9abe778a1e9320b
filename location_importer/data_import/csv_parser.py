"""
CSV importer for pasted location lists.

Header names are matched case-insensitively; any header mentioning
"neighborhood" or "area" is read as the neighborhood column.
"""

import io
import logging
from typing import Dict, List

import pandas as pd
from pandas.errors import EmptyDataError

from location_importer.models import DEFAULT_CATEGORY, RawLocation

logger = logging.getLogger(__name__)

EXACT_HEADERS = {"name", "category", "city", "state", "country", "notes"}


def normalize_header(header: str) -> str:
    """
    Map a CSV header to a location field name.

    Example:
        >>> normalize_header(" Neighborhood / Area ")
        "neighborhood"
        >>> normalize_header("CITY")
        "city"
    """
    normalized = str(header).lower().strip()
    if normalized in EXACT_HEADERS:
        return normalized
    if "neighborhood" in normalized or "area" in normalized:
        return "neighborhood"
    return normalized


def _cell(row: Dict[str, str], field: str) -> str:
    value = row.get(field)
    if value is None:
        return ""
    return str(value).strip()


def _header_width(csv_text: str) -> int:
    header = pd.read_csv(
        io.StringIO(csv_text),
        header=None,
        nrows=1,
        dtype=str,
        keep_default_na=False,
        skip_blank_lines=True,
        engine="python",
    )
    return header.shape[1]


def parse_csv(csv_text: str) -> List[RawLocation]:
    """
    Parse CSV text into RawLocation records.

    - Blank lines are skipped
    - Values are trimmed; a blank category becomes "Other"
    - Rows without a name are dropped

    Args:
        csv_text: CSV content with a header row

    Returns:
        List of RawLocation in file order
    """
    if not csv_text or not csv_text.strip():
        return []

    # The header is read as an ordinary row so that its width fixes the
    # column count; pandas would otherwise turn an extra trailing field
    # into an implicit index and shift every value one column left.
    # Rows with more fields than the header are cut to its width.
    try:
        width = _header_width(csv_text)
        df = pd.read_csv(
            io.StringIO(csv_text),
            header=None,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            skipinitialspace=True,
            engine="python",
            on_bad_lines=lambda fields: fields[:width],
        )
    except EmptyDataError:
        return []

    df = df.fillna("")
    headers = [normalize_header(header) for header in df.iloc[0]]
    df = df.iloc[1:]
    df.columns = headers
    # Two headers can normalize to the same field; the first one wins
    df = df.loc[:, ~df.columns.duplicated()]

    locations = []
    skipped = 0
    for row in df.to_dict(orient="records"):
        name = _cell(row, "name")
        if not name:
            skipped += 1
            continue
        locations.append(RawLocation(
            name=name,
            category=_cell(row, "category") or DEFAULT_CATEGORY,
            neighborhood=_cell(row, "neighborhood"),
            city=_cell(row, "city"),
            state=_cell(row, "state"),
            country=_cell(row, "country"),
            notes=_cell(row, "notes"),
        ))

    logger.info(f"Parsed {len(locations)} locations from CSV ({skipped} rows without a name skipped)")
    return locations


def parse_csv_file(file_path: str) -> List[RawLocation]:
    """Read a CSV file from disk and parse it."""
    with open(file_path, "r", encoding="utf-8-sig") as f:
        return parse_csv(f.read())
