"""Services package - service class exports."""

from app.services.items import ChangeWatcher, ItemService, StatisticsCache

__all__ = [
    "ChangeWatcher",
    "ItemService",
    "StatisticsCache",
]
