"""Shared fixtures - temporary data files and an instrumented store."""

import asyncio
import json
from pathlib import Path

import pytest

from app.repositories.items import ItemStore

SAMPLE_ITEMS = [
    {"id": 1, "name": "Test Laptop", "category": "Electronics", "price": 1000},
    {"id": 2, "name": "Test Headphones", "category": "Electronics", "price": 200},
    {"id": 3, "name": "Test Chair", "category": "Furniture", "price": 500},
]


class CountingStore(ItemStore):
    """ItemStore that counts full reads and can slow them down."""

    def __init__(self, path: Path, delay: float = 0.0, **kwargs):
        super().__init__(path, **kwargs)
        self.reads = 0
        self.delay = delay

    async def read_all(self):
        self.reads += 1
        if self.delay:
            await asyncio.sleep(self.delay)
        return await super().read_all()


def write_items(path: Path, items: list[dict]) -> None:
    path.write_text(json.dumps(items, indent=2), encoding="utf-8")


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    path = tmp_path / "items.json"
    write_items(path, SAMPLE_ITEMS)
    return path


@pytest.fixture
def store(data_file: Path) -> CountingStore:
    return CountingStore(data_file)
