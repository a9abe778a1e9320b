"""
Rate-limited batch dispatch of geocoding queries.

Queries are split into fixed-size batches. All calls in a batch run
concurrently; batches run one after another with a fixed pause between
them so the request rate stays bounded regardless of per-call latency.
"""

import asyncio
import logging
from typing import Awaitable, Callable, List, Optional, Sequence

from location_importer.core import settings
from location_importer.geocoding.base import ClassifiedResult
from location_importer.geocoding.classifier import classify_error

logger = logging.getLogger(__name__)

Resolver = Callable[[str], Awaitable[ClassifiedResult]]
ResultCallback = Callable[[ClassifiedResult], None]


class BatchDispatcher:
    """
    Issue geocode calls in concurrent batches with an inter-batch delay.

    Usage:
        dispatcher = BatchDispatcher(batch_size=10, batch_delay=0.2)
        results = await dispatcher.dispatch(queries, geocoder.resolve)
    """

    def __init__(
        self,
        batch_size: Optional[int] = None,
        batch_delay: Optional[float] = None,
        timeout: Optional[float] = None,
    ):
        """
        Args:
            batch_size: Max concurrent calls per batch (default: settings)
            batch_delay: Seconds to wait between batches (default: settings)
            timeout: Per-call timeout in seconds; None disables it
        """
        self.batch_size = settings.GEOCODE_BATCH_SIZE if batch_size is None else batch_size
        self.batch_delay = settings.GEOCODE_BATCH_DELAY if batch_delay is None else batch_delay
        self.timeout = timeout

        if self.batch_size < 1:
            raise ValueError(f"batch_size must be at least 1, got {self.batch_size}")

    async def _resolve_one(self, query: str, resolver: Resolver) -> ClassifiedResult:
        """Run one call; any failure becomes a transport_error for this query only."""
        try:
            if self.timeout is not None:
                return await asyncio.wait_for(resolver(query), timeout=self.timeout)
            return await resolver(query)
        except asyncio.TimeoutError:
            logger.warning(f"Geocode call timed out after {self.timeout}s: '{query}'")
            return classify_error(query, TimeoutError(f"Timed out after {self.timeout}s"))
        except Exception as e:
            logger.warning(f"Geocode call raised for '{query}': {e}")
            return classify_error(query, e)

    async def dispatch(
        self,
        queries: Sequence[str],
        resolver: Resolver,
        on_result: Optional[ResultCallback] = None,
    ) -> List[ClassifiedResult]:
        """
        Geocode all queries, one result per query in input order.

        Args:
            queries: Ordered free-text queries
            resolver: Async callable mapping a query to a ClassifiedResult
            on_result: Called with each result, in input order, as batches finish

        Returns:
            List of ClassifiedResult, same length and order as queries
        """
        results: List[ClassifiedResult] = []
        total = len(queries)

        for start in range(0, total, self.batch_size):
            batch = list(queries[start:start + self.batch_size])
            logger.debug(f"Dispatching batch start={start} count={len(batch)}")

            batch_results = await asyncio.gather(
                *(self._resolve_one(query, resolver) for query in batch)
            )

            for result in batch_results:
                results.append(result)
                if on_result:
                    on_result(result)

            if start + self.batch_size < total:
                await asyncio.sleep(self.batch_delay)

        return results
