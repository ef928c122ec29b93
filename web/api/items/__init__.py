"""Items API."""

from web.api.items.views import create_item, get_item, get_statistics, list_items

__all__ = [
    "list_items",
    "get_item",
    "create_item",
    "get_statistics",
]
