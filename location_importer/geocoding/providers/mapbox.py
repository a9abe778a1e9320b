"""
Mapbox Geocoding API provider (forward geocoding).

Requires an access token. Only the first-ranked feature is requested.
https://docs.mapbox.com/api/search/geocoding/
"""

import logging
from typing import Optional
from urllib.parse import quote

import httpx

from location_importer.core import settings
from location_importer.geocoding.base import (
    BaseGeocoder,
    ClassifiedResult,
    GeocoderConfigurationError,
)
from location_importer.geocoding.classifier import classify_error, classify_response

logger = logging.getLogger(__name__)


class MapboxGeocoder(BaseGeocoder):
    """
    Mapbox place search geocoder.

    Pros:
    - Good coverage of points of interest (bars, cafes, museums)
    - Free tier is generous

    Cons:
    - Requires access token
    - Matches on loosely specified names can land on the wrong city

    Usage:
        async with MapboxGeocoder() as geocoder:  # Uses MAPBOX_TOKEN from env
            result = await geocoder.resolve("Boulenc, Oaxaca, Mexico")
    """

    def __init__(
        self,
        access_token: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        base_url: Optional[str] = None,
        limit: Optional[int] = None,
    ):
        """
        Initialize Mapbox Geocoder.

        Args:
            access_token: Mapbox token (uses settings if not provided)
            client: Optional shared httpx.AsyncClient
            base_url: Override of the places endpoint
            limit: Number of candidates to request

        Raises:
            GeocoderConfigurationError: If no access token is available
        """
        self.token = access_token if access_token is not None else settings.MAPBOX_TOKEN
        if not self.token:
            raise GeocoderConfigurationError(
                "Mapbox token not configured", provider=self.provider_name
            )
        self.base_url = (base_url or settings.MAPBOX_GEOCODING_URL).rstrip("/")
        self.limit = limit or settings.GEOCODE_RESULT_LIMIT
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=settings.GEOCODE_REQUEST_TIMEOUT)

    @property
    def provider_name(self) -> str:
        return "mapbox"

    def build_url(self, query: str) -> str:
        return f"{self.base_url}/{quote(query, safe='')}.json"

    async def resolve(self, query: str) -> ClassifiedResult:
        """
        Geocode a query using Mapbox.

        Args:
            query: Free-text search string

        Returns:
            ClassifiedResult
        """
        params = {
            "access_token": self.token,
            "limit": self.limit,
        }

        try:
            response = await self._client.get(self.build_url(query), params=params)
        except httpx.TimeoutException:
            logger.warning(f"Mapbox: Timeout for '{query}'")
            return classify_error(query, TimeoutError("Request timed out"))
        except httpx.HTTPError as e:
            logger.warning(f"Mapbox: Request error for '{query}': {e}")
            return classify_error(query, e)

        if not response.is_success:
            logger.warning(f"Mapbox HTTP {response.status_code} for '{query}'")
            return classify_response(query, response.status_code, None)

        try:
            payload = response.json()
        except ValueError as e:
            logger.error(f"Mapbox: Invalid JSON for '{query}': {e}")
            return classify_error(query, e)

        result = classify_response(query, response.status_code, payload)
        if not result.success:
            logger.debug(f"Mapbox: No results for '{query}'")
        return result

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
