"""Tests for the Mapbox geocoder and the facade, using a mocked HTTP transport."""

import httpx
import pytest

from location_importer.geocoding import (
    GeocoderConfigurationError,
    GeocodeOutcome,
    MapboxGeocoder,
    QueryValidationError,
    geocode_queries,
    get_geocoder,
)

BOULENC_FEATURE = {
    "center": [-96.7264, 17.0631],
    "place_name": "Boulenc, Porfirio Díaz 207, Oaxaca, Mexico",
}


def mock_client(handler):
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.fixture
def requests_seen():
    return []


def geocoder_returning(status_code, payload, requests_seen):
    def handler(request: httpx.Request) -> httpx.Response:
        requests_seen.append(request)
        return httpx.Response(status_code, json=payload)

    return MapboxGeocoder(access_token="pk.test", client=mock_client(handler))


class TestMapboxGeocoder:

    @pytest.mark.asyncio
    async def test_resolved(self, requests_seen):
        geocoder = geocoder_returning(200, {"features": [BOULENC_FEATURE]}, requests_seen)

        result = await geocoder.resolve("Boulenc, Oaxaca, Mexico")

        assert result.outcome == GeocodeOutcome.RESOLVED
        assert (result.latitude, result.longitude) == (17.0631, -96.7264)
        assert result.place_name == BOULENC_FEATURE["place_name"]

    @pytest.mark.asyncio
    async def test_request_shape(self, requests_seen):
        geocoder = geocoder_returning(200, {"features": []}, requests_seen)

        await geocoder.resolve("Café & Bar, Oaxaca")

        [request] = requests_seen
        assert request.url.raw_path.startswith(b"/geocoding/v5/mapbox.places/Caf%C3%A9%20%26%20Bar%2C%20Oaxaca.json")
        assert request.url.params["access_token"] == "pk.test"
        assert request.url.params["limit"] == "1"

    @pytest.mark.asyncio
    async def test_no_features(self, requests_seen):
        geocoder = geocoder_returning(200, {"type": "FeatureCollection", "features": []}, requests_seen)

        result = await geocoder.resolve("Nowhere")

        assert result.outcome == GeocodeOutcome.NOT_FOUND
        assert result.error_message == "No results found"

    @pytest.mark.asyncio
    async def test_unauthorized(self, requests_seen):
        geocoder = geocoder_returning(401, {"message": "Not Authorized - Invalid Token"}, requests_seen)

        result = await geocoder.resolve("Boulenc")

        assert result.outcome == GeocodeOutcome.TRANSPORT_ERROR
        assert result.error_message == "Geocoding failed: 401"

    @pytest.mark.asyncio
    async def test_connection_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        geocoder = MapboxGeocoder(access_token="pk.test", client=mock_client(handler))

        result = await geocoder.resolve("Boulenc")

        assert result.outcome == GeocodeOutcome.TRANSPORT_ERROR
        assert result.error_message == "connection refused"

    @pytest.mark.asyncio
    async def test_invalid_json(self):
        def handler(request):
            return httpx.Response(200, content=b"<html>oops</html>")

        geocoder = MapboxGeocoder(access_token="pk.test", client=mock_client(handler))

        result = await geocoder.resolve("Boulenc")

        assert result.outcome == GeocodeOutcome.TRANSPORT_ERROR

    def test_missing_token(self):
        with pytest.raises(GeocoderConfigurationError, match="Mapbox token not configured"):
            MapboxGeocoder(access_token="")

    def test_unknown_provider(self):
        with pytest.raises(ValueError):
            get_geocoder("nominatim")


class TestGeocodeQueries:

    @pytest.mark.asyncio
    async def test_results_in_order(self, fast_dispatcher):
        def handler(request):
            if "Boulenc" in request.url.path:
                return httpx.Response(200, json={"features": [BOULENC_FEATURE]})
            return httpx.Response(200, json={"features": []})

        geocoder = MapboxGeocoder(access_token="pk.test", client=mock_client(handler))

        results = await geocode_queries(["Boulenc, Oaxaca", "Nowhere"], geocoder, fast_dispatcher)

        assert [r.query for r in results] == ["Boulenc, Oaxaca", "Nowhere"]
        assert [r.success for r in results] == [True, False]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [None, "Boulenc", [1, 2], ["ok", None], {"q": "x"}])
    async def test_invalid_payload_rejected_before_calls(self, payload):
        with pytest.raises(QueryValidationError):
            await geocode_queries(payload)

    @pytest.mark.asyncio
    async def test_missing_token_without_geocoder(self, monkeypatch, fast_dispatcher):
        monkeypatch.setattr("location_importer.core.config.settings.MAPBOX_TOKEN", "")

        with pytest.raises(GeocoderConfigurationError):
            await geocode_queries(["Boulenc"], dispatcher=fast_dispatcher)

    @pytest.mark.asyncio
    async def test_empty_list(self, fast_dispatcher):
        geocoder = MapboxGeocoder(access_token="pk.test", client=mock_client(lambda r: httpx.Response(500)))

        assert await geocode_queries([], geocoder, fast_dispatcher) == []
