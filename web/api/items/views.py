"""Items API views - thin layer over services."""

from typing import Any

from app.container import Container
from web.api.errors import validate_new_item

from .schemas import (
    ItemResponse,
    ItemsPageResponse,
    PaginationInfo,
    PriceRangeResponse,
    StatisticsResponse,
)


async def list_items(
    container: Container,
    page: Any = None,
    limit: Any = None,
    q: str | None = None,
) -> ItemsPageResponse:
    """Search and paginate items."""
    items, info = await container.items.list_items(page=page, page_size=limit, query=q)

    return ItemsPageResponse(
        items=[ItemResponse(**i.model_dump()) for i in items],
        pagination=PaginationInfo(**info.to_dict()),
    )


async def get_item(container: Container, item_id: Any) -> ItemResponse:
    """Get one item by id."""
    item = await container.items.get_item(item_id)
    return ItemResponse(**item.model_dump())


async def create_item(container: Container, payload: Any) -> ItemResponse:
    """Validate and store a new item."""
    data = validate_new_item(payload)
    item = await container.items.create_item(data.name, data.category, data.price)
    return ItemResponse(**item.model_dump())


async def get_statistics(container: Container) -> StatisticsResponse:
    """Get cached item statistics."""
    stats = await container.items.get_statistics()

    return StatisticsResponse(
        total=stats.total,
        average_price=stats.average_price,
        categories=stats.categories,
        price_range=PriceRangeResponse(
            min=stats.price_range.min,
            max=stats.price_range.max,
        ),
    )
