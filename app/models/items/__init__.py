"""Items domain models."""

from app.models.items.entities import ChangeMarker, ItemStatistics, PageInfo, PriceRange
from app.models.items.item import Item

__all__ = [
    "Item",
    "ChangeMarker",
    "ItemStatistics",
    "PageInfo",
    "PriceRange",
]
