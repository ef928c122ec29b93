"""Dependency Injection container - created at startup, closed at shutdown."""

from pathlib import Path

from loguru import logger

from app.repositories.items import ItemStore
from app.services.items import ChangeWatcher, ItemService, StatisticsCache
from settings import DATA_PATH, READ_TIMEOUT, STATS_MAX_WAIT_RETRIES, WATCH_INTERVAL


class Container:
    """Application container - owns the store, the statistics cache and its watcher.

    One instance per serving process. Handlers receive it explicitly::

        async with Container() as container:
            stats = await container.items.get_statistics()
    """

    def __init__(
        self,
        data_path: Path | str = DATA_PATH,
        read_timeout: float | None = READ_TIMEOUT,
        watch_interval: float = WATCH_INTERVAL,
        max_wait_retries: int = STATS_MAX_WAIT_RETRIES,
    ):
        # Repositories
        self.store = ItemStore(data_path, timeout=read_timeout)

        # Services (with injected repos)
        self.stats = StatisticsCache(self.store, max_wait_retries=max_wait_retries)
        self.watcher = ChangeWatcher(self.store, self.stats, interval=watch_interval)
        self.items = ItemService(store=self.store, stats=self.stats)

    async def start(self) -> None:
        """Start background change detection."""
        self.watcher.start()
        logger.info("Container started: {}", self.store.path)

    async def stop(self) -> None:
        """Stop background work and drop cached state."""
        await self.watcher.stop()
        self.stats.invalidate()
        logger.info("Container stopped")

    async def __aenter__(self):
        await self.start()
        return self

    async def __aexit__(self, *_):
        await self.stop()
