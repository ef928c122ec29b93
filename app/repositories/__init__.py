"""Repositories package - data access layer for the items data file."""

from app.repositories.items import ItemStore, next_item_id

__all__ = [
    "ItemStore",
    "next_item_id",
]
