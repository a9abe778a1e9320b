"""Tests for GPX/KML serialization and map links."""

import pytest

from location_importer.core.utils.formatting import export_filename, format_coordinate
from location_importer.export import (
    can_create_direct_url,
    generate_apple_maps_url,
    generate_gpx,
    generate_google_maps_url,
    generate_kml,
    get_category_color,
    hex_to_kml_color,
)
from location_importer.models import GeocodedLocation, GeocodeStatus


def location(name, lat=17.06, lng=-96.72, category="Bar", notes="", status=GeocodeStatus.SUCCESS):
    return GeocodedLocation(
        name=name,
        category=category,
        notes=notes,
        id=f"loc-{name}",
        latitude=lat if status == GeocodeStatus.SUCCESS else None,
        longitude=lng if status == GeocodeStatus.SUCCESS else None,
        geocode_status=status,
    )


@pytest.fixture
def mixed_locations():
    return [
        location("Mezcaloteca", 17.0657, -96.7237, "Bar", "Tasting by reservation"),
        location("Boulenc", 17.0631, -96.7264, "Bakery"),
        location("Lost Place", status=GeocodeStatus.FAILED),
        location("Hierve el Agua", status=GeocodeStatus.MANUAL_REQUIRED, category="Day Trip"),
        location("In Situ", 17.0622, -96.7222, "Bar"),
    ]


class TestGpx:

    def test_only_exportable_waypoints(self, mixed_locations):
        gpx = generate_gpx(mixed_locations, "Oaxaca Trip")

        assert gpx.count("<wpt ") == 3
        assert "Lost Place" not in gpx
        assert "Hierve el Agua" not in gpx

    def test_document_structure(self, mixed_locations):
        gpx = generate_gpx(mixed_locations, "Oaxaca Trip")

        assert gpx.startswith('<?xml version="1.0" encoding="UTF-8"?>')
        assert 'version="1.1"' in gpx
        assert "<name>Oaxaca Trip</name>" in gpx
        assert '<wpt lat="17.0657" lon="-96.7237">' in gpx
        assert "<type>Bar</type>" in gpx
        assert gpx.rstrip().endswith("</gpx>")

    def test_description_has_category_and_notes(self, mixed_locations):
        gpx = generate_gpx(mixed_locations)

        assert "<desc>🍸 Bar\nTasting by reservation</desc>" in gpx

    def test_special_characters_escaped(self):
        gpx = generate_gpx([location('Tom & Jerry\'s <"Bar">')], "A & B")

        assert "<name>Tom &amp; Jerry&#x27;s &lt;&quot;Bar&quot;&gt;</name>" in gpx
        assert "<name>A &amp; B</name>" in gpx

    def test_empty(self):
        gpx = generate_gpx([], "Nothing")

        assert "<wpt" not in gpx
        assert "</gpx>" in gpx


class TestKml:

    def test_folders_per_category(self, mixed_locations):
        kml = generate_kml(mixed_locations, "Oaxaca Trip")

        assert kml.count("<Folder>") == 2
        assert kml.count("<Placemark>") == 3
        assert "<name>Bar</name>" in kml
        assert "<name>Bakery</name>" in kml
        assert "Day Trip" not in kml

    def test_styles_and_coordinates(self, mixed_locations):
        kml = generate_kml(mixed_locations, "Oaxaca Trip")

        assert '<Style id="style-bar">' in kml
        assert "<color>fff65c8b</color>" in kml
        assert "<styleUrl>#style-bar</styleUrl>" in kml
        # KML puts longitude first
        assert "<coordinates>-96.7237,17.0657,0</coordinates>" in kml

    def test_category_order_follows_first_appearance(self, mixed_locations):
        kml = generate_kml(mixed_locations)

        assert kml.index("<name>Bar</name>") < kml.index("<name>Bakery</name>")

    def test_document_name_escaped(self):
        kml = generate_kml([location("Casa")], "Food & Drink")

        assert "<name>Food &amp; Drink</name>" in kml


class TestCategories:

    def test_color_lookup(self):
        assert get_category_color("Museum") == "#3B82F6"
        assert get_category_color("museum") == "#3B82F6"
        assert get_category_color("Unknown") == "#9CA3AF"

    def test_kml_color_order(self):
        assert hex_to_kml_color("#8B5CF6") == "fff65c8b"

    def test_bad_color(self):
        with pytest.raises(ValueError):
            hex_to_kml_color("#fff")


class TestLinks:

    def test_no_valid_locations(self):
        assert generate_google_maps_url([location("Lost", status=GeocodeStatus.FAILED)]) is None

    def test_single_location_search(self):
        url = generate_google_maps_url([location("Boulenc", 17.06, -96.72)])

        assert url == "https://www.google.com/maps/search/?api=1&query=17.06,-96.72"

    def test_directions_with_waypoints(self, mixed_locations):
        url = generate_google_maps_url(mixed_locations)

        assert url.startswith("https://www.google.com/maps/dir/?api=1")
        assert "&origin=17.0657,-96.7237" in url
        assert "&destination=17.0622,-96.7222" in url
        assert "&waypoints=17.0631%2C-96.7264" in url

    def test_two_locations_no_waypoints(self):
        url = generate_google_maps_url([location("A", 1, 2), location("B", 3, 4)])

        assert "waypoints" not in url

    def test_direct_url_limit(self):
        assert can_create_direct_url([location(str(i)) for i in range(15)])
        assert not can_create_direct_url([location(str(i)) for i in range(16)])

    def test_apple_maps(self):
        url = generate_apple_maps_url(location("Café Brújula", 17.06, -96.72))

        assert url == "https://maps.apple.com/?ll=17.06,-96.72&q=Caf%C3%A9%20Br%C3%BAjula"

    def test_apple_maps_without_coordinates(self):
        assert generate_apple_maps_url(location("Lost", status=GeocodeStatus.FAILED)) is None


class TestFormatting:

    def test_export_filename(self):
        assert export_filename("Oaxaca Trip!", "gpx") == "oaxaca-trip.gpx"
        assert export_filename("", ".kml") == "locations.kml"

    def test_format_coordinate(self):
        assert format_coordinate(17.0600001) == "17.06"
        assert format_coordinate(-0.0000001) == "0"
        assert format_coordinate(-96.7195) == "-96.7195"
