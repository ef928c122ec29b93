"""Items repositories."""

from app.repositories.items.store import ItemStore, next_item_id

__all__ = ["ItemStore", "next_item_id"]
