"""
Base classes and interfaces for geocoding providers.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class GeocodeOutcome(str, Enum):
    """Outcome of a single geocode attempt."""
    RESOLVED = "resolved"
    NOT_FOUND = "not_found"
    TRANSPORT_ERROR = "transport_error"


@dataclass(frozen=True)
class ClassifiedResult:
    """Normalized result of one query, whatever the provider said."""

    query: str
    outcome: GeocodeOutcome
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    place_name: Optional[str] = None
    error_message: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.outcome == GeocodeOutcome.RESOLVED

    @property
    def as_dict(self) -> dict:
        """Convert to the camelCase shape returned by the HTTP API."""
        return {
            "query": self.query,
            "success": self.success,
            "outcome": self.outcome.value,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "placeName": self.place_name,
            "errorMessage": self.error_message,
        }


class GeocodingError(Exception):
    """Exception raised when a geocoding request cannot be served at all."""

    def __init__(self, message: str, provider: str = "", query: str = ""):
        self.message = message
        self.provider = provider
        self.query = query
        super().__init__(f"[{provider}] {message}" if provider else message)


class GeocoderConfigurationError(GeocodingError):
    """A required credential or setting for the provider is missing."""


class QueryValidationError(GeocodingError):
    """The request payload is not a list of query strings."""


class BaseGeocoder(ABC):
    """
    Abstract base class for geocoding providers.

    Subclasses must implement:
    - resolve(): Geocode one free-text query into a ClassifiedResult
    - provider_name: Name of the provider

    Per-query failures (HTTP errors, empty result lists) are reported as
    ClassifiedResult outcomes, never raised. Implementations may still
    raise on unexpected faults; the batch dispatcher converts those.
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Name of the geocoding provider."""
        pass

    @abstractmethod
    async def resolve(self, query: str) -> ClassifiedResult:
        """
        Geocode a single free-text query.

        Args:
            query: Search text, e.g. "Mercado 20 de Noviembre, Oaxaca, Mexico"

        Returns:
            ClassifiedResult with outcome resolved, not_found or transport_error
        """
        pass

    async def aclose(self) -> None:
        """Release network resources. No-op by default."""
        return None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()
