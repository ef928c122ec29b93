"""Statistics cache - item aggregates keyed by the data file's change marker."""

import asyncio
from dataclasses import dataclass

from loguru import logger

from app.models.items import ChangeMarker, ItemStatistics
from app.repositories.items import ItemStore
from app.services.items.aggregation import compute_statistics
from settings import STATS_MAX_WAIT_RETRIES


@dataclass(frozen=True)
class CacheEntry:
    """Cached statistics and the marker they were computed for."""

    statistics: ItemStatistics | None = None
    valid_for: ChangeMarker | None = None

    def is_valid_for(self, marker: ChangeMarker) -> bool:
        return self.statistics is not None and self.valid_for == marker


_EMPTY = CacheEntry()


class StatisticsCache:
    """Serves item statistics, recomputing at most once per change marker.

    Callers that arrive while a recomputation is running await the same task
    instead of starting their own. A result is committed only if the data file
    did not change while it was being computed; otherwise it is handed to the
    waiting callers but not cached.
    """

    def __init__(self, store: ItemStore, max_wait_retries: int = STATS_MAX_WAIT_RETRIES):
        self._store = store
        self._max_wait_retries = max_wait_retries
        self._entry = _EMPTY
        self._inflight: asyncio.Task | None = None
        self.computations = 0
        logger.debug("StatisticsCache initialized (max_wait_retries={})", max_wait_retries)

    @property
    def entry(self) -> CacheEntry:
        return self._entry

    @property
    def computing(self) -> bool:
        return self._inflight is not None

    async def get_statistics(self) -> ItemStatistics:
        """Current statistics, from cache when the data file is unchanged."""
        marker = await self._store.last_changed()

        for _ in range(self._max_wait_retries):
            entry = self._entry
            if entry.is_valid_for(marker):
                logger.debug("Statistics cache hit")
                return entry.statistics

            if self._inflight is None:
                self._start(marker)
            else:
                logger.debug("Waiting for in-flight statistics computation")

            computed_for, statistics = await asyncio.shield(self._inflight)
            if computed_for == marker:
                return statistics

        logger.warning("Statistics cache kept changing, computing directly")
        _, statistics = await self._compute(marker)
        return statistics

    def invalidate(self) -> None:
        """Drop the cached statistics."""
        if self._entry is not _EMPTY:
            logger.info("Statistics cache invalidated")
        self._entry = _EMPTY

    def observe(self, marker: ChangeMarker) -> None:
        """Invalidate if the cached entry belongs to another marker."""
        valid_for = self._entry.valid_for
        if valid_for is not None and valid_for != marker:
            logger.info("Data file changed, invalidating statistics cache")
            self._entry = _EMPTY

    def _start(self, marker: ChangeMarker) -> None:
        task = asyncio.create_task(self._compute(marker))
        task.add_done_callback(self._finished)
        self._inflight = task

    def _finished(self, task: asyncio.Task) -> None:
        if self._inflight is task:
            self._inflight = None

    async def _compute(self, marker: ChangeMarker) -> tuple[ChangeMarker, ItemStatistics]:
        """Read everything, aggregate and commit if still current."""
        self.computations += 1
        logger.info("Computing item statistics")
        try:
            items = await self._store.read_all()
            statistics = compute_statistics(items)
            current = await self._store.last_changed()
        except Exception as e:
            # Prior entry stays as it was.
            logger.warning("Statistics computation failed: {}", e)
            raise

        if current == marker:
            self._entry = CacheEntry(statistics=statistics, valid_for=marker)
            logger.info("Statistics cached: {} items", statistics.total)
        else:
            logger.info("Data file changed during computation, result not cached")
        return marker, statistics
