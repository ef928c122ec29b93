"""Change watcher - polls the data file and invalidates the statistics cache."""

import asyncio
import contextlib

from loguru import logger

from app.errors import ItemStoreError
from app.models.items import ChangeMarker
from app.repositories.items import ItemStore
from app.services.items.statistics import StatisticsCache
from settings import WATCH_INTERVAL


class ChangeWatcher:
    """Background poll of the data file's change marker."""

    def __init__(self, store: ItemStore, cache: StatisticsCache, interval: float = WATCH_INTERVAL):
        self._store = store
        self._cache = cache
        self._interval = interval
        self._task: asyncio.Task | None = None
        self._last: ChangeMarker | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start polling. Must be called from a running event loop."""
        if self.running:
            return
        self._task = asyncio.create_task(self._run(), name="items-change-watcher")
        logger.info("Watching {} every {}s", self._store.path, self._interval)

    async def stop(self) -> None:
        """Cancel the poll and wait for it to finish."""
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None
        logger.info("Stopped watching {}", self._store.path)

    async def check(self) -> ChangeMarker:
        """One poll tick."""
        marker = await self._store.last_changed()
        if self._last is not None and marker != self._last:
            logger.debug("Change marker moved: {} -> {}", self._last, marker)
        self._last = marker
        self._cache.observe(marker)
        return marker

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            try:
                await self.check()
            except ItemStoreError as e:
                logger.warning("Change poll failed: {}", e)
