"""Items services."""

from app.services.items.aggregation import compute_statistics, round_price
from app.services.items.query import find_item, paginate, search_items
from app.services.items.service import ItemService
from app.services.items.statistics import CacheEntry, StatisticsCache
from app.services.items.watcher import ChangeWatcher

__all__ = [
    "ItemService",
    "StatisticsCache",
    "CacheEntry",
    "ChangeWatcher",
    "compute_statistics",
    "round_price",
    "search_items",
    "paginate",
    "find_item",
]
