"""Pytest configuration and fixtures."""

import os
from typing import Dict, List, Union

# Set test environment variables before any imports that might use them
os.environ.setdefault("MAPBOX_TOKEN", "test-token")
os.environ.setdefault("GEOCODE_BATCH_SIZE", "10")
os.environ.setdefault("GEOCODE_BATCH_DELAY", "0.2")

import pytest

from location_importer.geocoding.base import ClassifiedResult, GeocodeOutcome
from location_importer.geocoding.dispatcher import BatchDispatcher
from location_importer.models import RawLocation


def resolved(query: str, lat: float = 17.06, lng: float = -96.72, place_name: str = None) -> ClassifiedResult:
    return ClassifiedResult(
        query=query,
        outcome=GeocodeOutcome.RESOLVED,
        latitude=lat,
        longitude=lng,
        place_name=place_name or query,
    )


def not_found(query: str) -> ClassifiedResult:
    return ClassifiedResult(
        query=query,
        outcome=GeocodeOutcome.NOT_FOUND,
        error_message="No results found",
    )


class FakeResolver:
    """
    Async resolver double.

    `responses` maps a query to a ClassifiedResult or an exception to raise;
    unknown queries are not found. Every call is recorded in `calls`.
    """

    def __init__(self, responses: Dict[str, Union[ClassifiedResult, Exception]] = None):
        self.responses = responses or {}
        self.calls: List[str] = []

    async def __call__(self, query: str) -> ClassifiedResult:
        self.calls.append(query)
        response = self.responses.get(query)
        if isinstance(response, Exception):
            raise response
        if response is None:
            return not_found(query)
        return response


@pytest.fixture
def fast_dispatcher():
    """Dispatcher with no inter-batch delay or timeout."""
    return BatchDispatcher(batch_size=10, batch_delay=0, timeout=None)


@pytest.fixture
def oaxaca_rows():
    return [
        RawLocation(name="Boulenc", category="Bakery", neighborhood="Centro",
                    city="Oaxaca", state="Oaxaca", country="Mexico", notes="Get the pan de muerto"),
        RawLocation(name="Mezcaloteca", category="Bar", city="Oaxaca", country="Mexico"),
        RawLocation(name="Hierve el Agua", category="Day Trip", neighborhood="Multiple sites",
                    city="Oaxaca", country="Mexico"),
    ]
