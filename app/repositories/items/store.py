"""Item store - access to the JSON data file."""

import asyncio
import json
import os
import time
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any, TypeVar

from loguru import logger
from pydantic import TypeAdapter
from pydantic import ValidationError as SchemaError

from app.errors import StoreCorrupt, StoreTimeout, StoreUnreadable, StoreUnwritable
from app.models.items import ChangeMarker, Item
from settings import DATA_PATH, READ_TIMEOUT

T = TypeVar("T")

_ITEMS = TypeAdapter(list[Item])


def next_item_id(items: Sequence[Item]) -> int:
    """Millisecond timestamp, bumped past the highest existing id."""
    highest = max((i.id for i in items), default=0)
    return max(int(time.time() * 1000), highest + 1)


def _record(item: Item) -> dict[str, Any]:
    """Item as written back: extra fields included, an absent price left absent."""
    data = item.model_dump()
    if "price" not in item.model_fields_set:
        data.pop("price")
    return data


class ItemStore:
    """Reads, appends and stats a single JSON data file.

    Holds no state between calls. File I/O runs in a worker thread so the
    event loop keeps serving other requests while a read is pending.
    """

    def __init__(self, path: Path | str = DATA_PATH, timeout: float | None = READ_TIMEOUT):
        self._path = Path(path)
        self._timeout = timeout
        self._write_lock = asyncio.Lock()
        logger.debug("{} initialized: {}", self.__class__.__name__, self._path)

    @property
    def path(self) -> Path:
        return self._path

    async def _io(self, op: str, fn: Callable[..., T], *args: Any) -> T:
        """Run blocking file I/O off the loop, bounded by the timeout."""
        try:
            return await asyncio.wait_for(asyncio.to_thread(fn, *args), self._timeout)
        except asyncio.TimeoutError as e:
            logger.error("{} on {} timed out after {}s", op, self._path, self._timeout)
            raise StoreTimeout(f"Data file {op} timed out after {self._timeout}s") from e

    async def read_all(self) -> list[Item]:
        """Load and parse every item in the data file."""
        try:
            raw = await self._io("read", self._path.read_bytes)
        except OSError as e:
            logger.warning("Failed to read {}: {}", self._path, e)
            raise StoreUnreadable(f"Failed to read data file: {e}") from e

        try:
            items = _ITEMS.validate_json(raw)
        except SchemaError as e:
            logger.error("Corrupt data file {}: {} error(s)", self._path, e.error_count())
            raise StoreCorrupt(f"Failed to read data file: invalid content ({e.error_count()} error(s))") from e

        logger.debug("Read {} items from {}", len(items), self._path)
        return items

    async def append(self, item: Item) -> None:
        """Append one item and write the whole collection back."""
        async with self._write_lock:
            items = await self.read_all()
            await self._write([*items, item])
        logger.info("Appended item {} to {}", item.id, self._path)

    async def create(self, name: str, category: str, price: int | float) -> Item:
        """Assign the next id and append a new item under the write lock."""
        async with self._write_lock:
            items = await self.read_all()
            item = Item(id=next_item_id(items), name=name, category=category, price=price)
            await self._write([*items, item])
        logger.info("Created item {} ({})", item.id, item.name)
        return item

    async def last_changed(self) -> ChangeMarker:
        """Current change marker of the data file."""
        try:
            st = await self._io("stat", self._path.stat)
        except OSError as e:
            logger.warning("Failed to stat {}: {}", self._path, e)
            raise StoreUnreadable(f"Failed to get file stats: {e}") from e
        return ChangeMarker(modified_ns=st.st_mtime_ns, size=st.st_size, inode=st.st_ino)

    async def _write(self, items: list[Item]) -> None:
        payload = json.dumps([_record(i) for i in items], indent=2)
        try:
            await self._io("write", self._replace, payload)
        except OSError as e:
            logger.error("Failed to write {}: {}", self._path, e)
            raise StoreUnwritable(f"Failed to write data file: {e}") from e

    def _replace(self, payload: str) -> None:
        # Readers only ever see the old or the new file, never a partial one.
        tmp = self._path.with_name(f".{self._path.name}.tmp")
        tmp.write_text(payload, encoding="utf-8")
        os.replace(tmp, self._path)
