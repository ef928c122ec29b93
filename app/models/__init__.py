"""Models package - records and computed entities."""

from app.models.items import ChangeMarker, Item, ItemStatistics, PageInfo, PriceRange

__all__ = [
    "Item",
    "ChangeMarker",
    "ItemStatistics",
    "PageInfo",
    "PriceRange",
]
