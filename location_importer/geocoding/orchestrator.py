"""
Resolution orchestrator: drives locations from pending to a final state.

First pass: every pending location's primary query goes through the
batch dispatcher. Second pass: each location that failed gets its own
task that walks the fallback queries, one single-item dispatch at a
time, until one resolves or the list runs out.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from location_importer.geocoding.dispatcher import BatchDispatcher, Resolver
from location_importer.geocoding.queries import build_fallback_queries
from location_importer.models import GeocodedLocation, GeocodeStatus
from location_importer.store import LocationStore, mark_failed, mark_resolved

logger = logging.getLogger(__name__)

NETWORK_ERROR_MESSAGE = "Network error"

ProgressCallback = Callable[[int, int], None]


@dataclass
class ResolutionSummary:
    """Counts reported at the end of a run."""

    total: int = 0
    resolved: int = 0
    failed: int = 0
    manual_required: int = 0
    recovered_by_fallback: int = 0

    @property
    def as_dict(self) -> dict:
        return {
            "total": self.total,
            "resolved": self.resolved,
            "failed": self.failed,
            "manual_required": self.manual_required,
            "recovered_by_fallback": self.recovered_by_fallback,
        }


class ResolutionOrchestrator:
    """
    Run the geocoding pipeline over a LocationStore.

    Usage:
        orchestrator = ResolutionOrchestrator(geocoder.resolve)
        summary = await orchestrator.run(store, on_progress=print)
    """

    def __init__(
        self,
        resolver: Resolver,
        dispatcher: Optional[BatchDispatcher] = None,
    ):
        self.resolver = resolver
        self.dispatcher = dispatcher or BatchDispatcher()

    async def run(
        self,
        store: LocationStore,
        on_progress: Optional[ProgressCallback] = None,
    ) -> ResolutionSummary:
        """
        Geocode every pending location in the store.

        Progress is reported after each first-pass result as
        (attempted, total); fallback attempts do not advance it.
        """
        pending = store.by_status(GeocodeStatus.PENDING)
        total = len(pending)
        logger.info(f"Geocoding {total} pending locations ({len(store)} total)")

        if on_progress:
            on_progress(0, total)

        recovered = 0
        if await self._first_pass(store, pending, on_progress):
            failed_ids = [
                loc.id for loc in pending
                if loc.id in store and store.get(loc.id).geocode_status == GeocodeStatus.FAILED
            ]
            recovered = await self._retry_failed(store, failed_ids)

        summary = ResolutionSummary(
            total=len(store),
            resolved=len(store.by_status(GeocodeStatus.SUCCESS)),
            failed=len(store.by_status(GeocodeStatus.FAILED)),
            manual_required=len(store.by_status(GeocodeStatus.MANUAL_REQUIRED)),
            recovered_by_fallback=recovered,
        )
        logger.info(
            f"Geocoding done: {summary.resolved} resolved, {summary.failed} failed, "
            f"{summary.manual_required} need manual entry "
            f"({summary.recovered_by_fallback} recovered by fallback)"
        )
        return summary

    async def _first_pass(
        self,
        store: LocationStore,
        pending: List[GeocodedLocation],
        on_progress: Optional[ProgressCallback],
    ) -> bool:
        """Geocode primary queries. Returns False if the dispatch itself failed."""
        if not pending:
            return True

        total = len(pending)
        attempted = 0

        def report(_result) -> None:
            nonlocal attempted
            attempted += 1
            if on_progress:
                on_progress(attempted, total)

        queries = [loc.geocode_query for loc in pending]
        try:
            results = await self.dispatcher.dispatch(queries, self.resolver, on_result=report)
        except Exception as e:
            logger.error(f"Geocoding dispatch failed: {e}")
            for loc in pending:
                store.apply(loc.id, mark_failed(NETWORK_ERROR_MESSAGE), expected=GeocodeStatus.PENDING)
            return False

        # Results line up with the pending sublist; write back by id, and
        # only to locations nobody has touched since
        for loc, result in zip(pending, results):
            if result.success:
                transition = mark_resolved(result.latitude, result.longitude, result.place_name)
            else:
                transition = mark_failed(result.error_message)
            store.apply(loc.id, transition, expected=GeocodeStatus.PENDING)
        return True

    async def _retry_failed(self, store: LocationStore, location_ids: List[str]) -> int:
        """
        Run one supervised fallback task per failed location.

        At most batch_size locations retry at once, so the fallback pass
        keeps the same in-flight bound as the first pass.
        """
        if not location_ids:
            return 0

        logger.info(f"Retrying {len(location_ids)} failed locations with fallback queries")
        limit = asyncio.Semaphore(self.dispatcher.batch_size)

        async def retry(location_id: str) -> bool:
            async with limit:
                return await self._retry_location(store, location_id)

        tasks = [asyncio.create_task(retry(location_id)) for location_id in location_ids]
        outcomes = await asyncio.gather(*tasks)
        return sum(1 for recovered in outcomes if recovered)

    async def _retry_location(self, store: LocationStore, location_id: str) -> bool:
        """
        Try fallback queries 1..n for one location, stopping at the first hit.

        An exception from an attempt is logged and the next fallback is
        tried. On exhaustion the location keeps its existing error message.
        """
        if not self._still_failed(store, location_id):
            return False

        fallback_queries = build_fallback_queries(store.get(location_id))

        # Index 0 is the primary query, already tried in the first pass
        for query in fallback_queries[1:]:
            if not self._still_failed(store, location_id):
                logger.debug(f"Stopping fallbacks for {location_id}: no longer failed")
                return False

            try:
                results = await self.dispatcher.dispatch([query], self.resolver)
            except Exception as e:
                logger.error(f"Fallback query failed for {location_id} ('{query}'): {e}")
                continue

            result = results[0]
            if result.success:
                logger.info(f"Fallback resolved {location_id} with '{query}'")
                return store.apply(
                    location_id,
                    mark_resolved(result.latitude, result.longitude, result.place_name, query=query),
                    expected=GeocodeStatus.FAILED,
                ) is not None

            logger.debug(f"Fallback '{query}' for {location_id}: {result.error_message}")

        logger.info(f"All fallbacks exhausted for {location_id}")
        return False

    @staticmethod
    def _still_failed(store: LocationStore, location_id: str) -> bool:
        return location_id in store and store.get(location_id).geocode_status == GeocodeStatus.FAILED
