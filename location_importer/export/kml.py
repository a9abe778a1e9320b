"""
KML 2.2 export for Google My Maps.

One icon style per category, one folder per category, so imported
layers come out colored and grouped.
"""

import logging
from collections import OrderedDict
from typing import Dict, Iterable, List

from location_importer.core.utils.formatting import escape_xml, format_coordinate, slugify
from location_importer.export.categories import get_category_color, hex_to_kml_color
from location_importer.export.gpx import describe
from location_importer.models import GeocodedLocation

logger = logging.getLogger(__name__)

ICON_HREF = "http://maps.google.com/mapfiles/kml/paddle/wht-blank.png"


def style_id(category: str) -> str:
    return f"style-{slugify(category, default='other')}"


def _style(category: str) -> str:
    color = hex_to_kml_color(get_category_color(category))
    return (
        f'    <Style id="{style_id(category)}">\n'
        f'      <IconStyle>\n'
        f'        <color>{color}</color>\n'
        f'        <Icon><href>{ICON_HREF}</href></Icon>\n'
        f'      </IconStyle>\n'
        f'    </Style>'
    )


def _placemark(location: GeocodedLocation) -> str:
    lat = format_coordinate(location.latitude)
    lng = format_coordinate(location.longitude)
    return (
        f'      <Placemark>\n'
        f'        <name>{escape_xml(location.name)}</name>\n'
        f'        <description>{escape_xml(describe(location))}</description>\n'
        f'        <styleUrl>#{style_id(location.category)}</styleUrl>\n'
        f'        <Point><coordinates>{lng},{lat},0</coordinates></Point>\n'
        f'      </Placemark>'
    )


def generate_kml(locations: Iterable[GeocodedLocation], collection_name: str = "") -> str:
    """
    Serialize resolved locations as a KML document.

    Categories keep the order in which they first appear.

    Args:
        locations: Any mix of locations; only exportable ones are written
        collection_name: Document name shown in My Maps

    Returns:
        KML XML as a string
    """
    by_category: Dict[str, List[GeocodedLocation]] = OrderedDict()
    for loc in locations:
        if loc.is_exportable:
            by_category.setdefault(loc.category, []).append(loc)

    name = collection_name or "Locations"
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        '<kml xmlns="http://www.opengis.net/kml/2.2">',
        '  <Document>',
        f'    <name>{escape_xml(name)}</name>',
    ]
    lines.extend(_style(category) for category in by_category)

    for category, members in by_category.items():
        lines.append('    <Folder>')
        lines.append(f'      <name>{escape_xml(category)}</name>')
        lines.extend(_placemark(loc) for loc in members)
        lines.append('    </Folder>')

    lines.extend(['  </Document>', '</kml>'])

    logger.info(
        f"KML export: {sum(len(m) for m in by_category.values())} placemarks "
        f"in {len(by_category)} categories"
    )
    return "\n".join(lines) + "\n"
