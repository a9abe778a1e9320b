"""Tests for the batch dispatcher."""

import asyncio
import time

import pytest

from conftest import FakeResolver, resolved
from location_importer.geocoding.base import GeocodeOutcome
from location_importer.geocoding.dispatcher import BatchDispatcher


class TestDispatch:
    """Test cases for BatchDispatcher.dispatch."""

    @pytest.mark.asyncio
    async def test_results_in_input_order(self, fast_dispatcher):
        resolver = FakeResolver({"A": resolved("A")})
        queries = ["A", "B", "A", "B", "B"]

        results = await fast_dispatcher.dispatch(queries, resolver)

        assert [r.query for r in results] == queries
        assert [r.outcome for r in results] == [
            GeocodeOutcome.RESOLVED,
            GeocodeOutcome.NOT_FOUND,
            GeocodeOutcome.RESOLVED,
            GeocodeOutcome.NOT_FOUND,
            GeocodeOutcome.NOT_FOUND,
        ]

    @pytest.mark.asyncio
    async def test_empty_queries(self, fast_dispatcher):
        resolver = FakeResolver()

        assert await fast_dispatcher.dispatch([], resolver) == []
        assert resolver.calls == []

    @pytest.mark.asyncio
    async def test_raising_resolver_becomes_transport_errors_with_delays(self):
        async def always_fails(query):
            raise ConnectionError(f"network down for {query}")

        dispatcher = BatchDispatcher(batch_size=10, batch_delay=0.2, timeout=None)
        queries = [f"q{i}" for i in range(25)]

        start = time.monotonic()
        results = await dispatcher.dispatch(queries, always_fails)
        elapsed = time.monotonic() - start

        assert len(results) == 25
        assert [r.query for r in results] == queries
        assert all(r.outcome == GeocodeOutcome.TRANSPORT_ERROR for r in results)
        assert results[0].error_message == "network down for q0"
        # Three batches, two pauses between them
        assert elapsed >= 0.4

    @pytest.mark.asyncio
    async def test_one_failure_does_not_block_siblings(self, fast_dispatcher):
        resolver = FakeResolver({
            "A": resolved("A"),
            "boom": RuntimeError("boom"),
            "C": resolved("C"),
        })

        results = await fast_dispatcher.dispatch(["A", "boom", "C"], resolver)

        assert [r.outcome for r in results] == [
            GeocodeOutcome.RESOLVED,
            GeocodeOutcome.TRANSPORT_ERROR,
            GeocodeOutcome.RESOLVED,
        ]
        assert results[1].error_message == "boom"

    @pytest.mark.asyncio
    async def test_batches_bound_concurrency(self):
        in_flight = 0
        peak = 0

        async def slow(query):
            nonlocal in_flight, peak
            in_flight += 1
            peak = max(peak, in_flight)
            await asyncio.sleep(0.01)
            in_flight -= 1
            return resolved(query)

        dispatcher = BatchDispatcher(batch_size=4, batch_delay=0, timeout=None)
        results = await dispatcher.dispatch([str(i) for i in range(10)], slow)

        assert len(results) == 10
        assert peak == 4

    @pytest.mark.asyncio
    async def test_no_delay_after_last_batch(self, monkeypatch):
        sleeps = []
        real_sleep = asyncio.sleep

        async def fake_sleep(delay):
            sleeps.append(delay)
            await real_sleep(0)

        monkeypatch.setattr(
            "location_importer.geocoding.dispatcher.asyncio.sleep", fake_sleep
        )
        dispatcher = BatchDispatcher(batch_size=10, batch_delay=0.2, timeout=None)

        await dispatcher.dispatch([str(i) for i in range(20)], FakeResolver())

        assert sleeps == [0.2]

    @pytest.mark.asyncio
    async def test_timeout_becomes_transport_error(self):
        async def hangs(query):
            await asyncio.sleep(10)

        dispatcher = BatchDispatcher(batch_size=10, batch_delay=0, timeout=0.05)

        results = await dispatcher.dispatch(["slow"], hangs)

        assert results[0].outcome == GeocodeOutcome.TRANSPORT_ERROR
        assert "Timed out" in results[0].error_message

    @pytest.mark.asyncio
    async def test_on_result_called_per_result(self, fast_dispatcher):
        seen = []

        await fast_dispatcher.dispatch(["A", "B", "C"], FakeResolver(), on_result=seen.append)

        assert [r.query for r in seen] == ["A", "B", "C"]

    @pytest.mark.parametrize("batch_size", [0, -1])
    def test_invalid_batch_size(self, batch_size):
        with pytest.raises(ValueError):
            BatchDispatcher(batch_size=batch_size)
