"""Items service - list, lookup, create and statistics."""

from typing import Any

from loguru import logger

from app.models.items import Item, ItemStatistics, PageInfo
from app.repositories.items import ItemStore
from app.services.items.query import find_item, paginate, search_items
from app.services.items.statistics import StatisticsCache


class ItemService:
    """Items business logic over the store and the statistics cache."""

    def __init__(self, store: ItemStore, stats: StatisticsCache):
        self._store = store
        self._stats = stats

    async def list_items(
        self,
        page: Any = None,
        page_size: Any = None,
        query: str | None = None,
    ) -> tuple[list[Item], PageInfo]:
        """Search, then paginate."""
        items = await self._store.read_all()
        matched = search_items(items, query)
        result, info = paginate(matched, page, page_size)
        logger.debug("list_items(page={}, q={!r}): {}/{} items", info.page, query, len(result), info.total_items)
        return result, info

    async def get_item(self, item_id: Any) -> Item:
        items = await self._store.read_all()
        return find_item(items, item_id)

    async def create_item(self, name: str, category: str, price: int | float) -> Item:
        """Store a validated item. Drops cached statistics on success."""
        item = await self._store.create(name, category, price)
        self._stats.invalidate()
        return item

    async def get_statistics(self) -> ItemStatistics:
        return await self._stats.get_statistics()
