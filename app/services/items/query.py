"""Item search, pagination and lookup."""

import math
import re
from collections.abc import Sequence
from typing import Any

from app.errors import NotFoundError
from app.models.items import Item, PageInfo
from settings import DEFAULT_PAGE_SIZE

_INTEGER = re.compile(r"-?[0-9]+")


def _parse_int(value: Any) -> int | None:
    """Plain ASCII base-10 integer, or None for anything else."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if not _INTEGER.fullmatch(text):
        return None
    try:
        return int(text)
    except ValueError:
        # Over the interpreter's digit limit.
        return None


def _positive_int(value: Any, default: int) -> int:
    """Parse a positive integer query value, falling back to default."""
    parsed = _parse_int(value)
    return parsed if parsed is not None and parsed > 0 else default


def search_items(items: Sequence[Item], term: str | None) -> list[Item]:
    """Keep items whose name or category contains term, ignoring case."""
    if not term:
        return list(items)
    needle = term.lower()
    return [i for i in items if needle in i.name.lower() or needle in i.category.lower()]


def paginate(
    items: Sequence[Item],
    page: Any = None,
    page_size: Any = None,
) -> tuple[list[Item], PageInfo]:
    """Slice one page out of items. Pages past the end are empty."""
    size = _positive_int(page_size, DEFAULT_PAGE_SIZE)
    number = _positive_int(page, 1)

    total_items = len(items)
    total_pages = math.ceil(total_items / size)
    start = (number - 1) * size

    info = PageInfo(
        page=number,
        page_size=size,
        total_items=total_items,
        total_pages=total_pages,
        has_next_page=number < total_pages,
        has_prev_page=number > 1,
    )
    return list(items[start : start + size]), info


def find_item(items: Sequence[Item], item_id: Any) -> Item:
    """Exact id match. Ids that are not integers are simply not found."""
    wanted = _parse_int(item_id)
    if wanted is None:
        raise NotFoundError()

    for item in items:
        if item.id == wanted:
            return item
    raise NotFoundError()
