"""Items API response schemas."""

from pydantic import BaseModel, ConfigDict, Field


class ItemResponse(BaseModel):
    """Single item, including any extra stored fields."""

    model_config = ConfigDict(extra="allow")

    id: int
    name: str
    category: str
    price: int | float | None = None


class PaginationInfo(BaseModel):
    """Pagination metadata."""

    model_config = ConfigDict(populate_by_name=True)

    page: int
    page_size: int = Field(alias="pageSize")
    total_items: int = Field(alias="totalItems")
    total_pages: int = Field(alias="totalPages")
    has_next_page: bool = Field(alias="hasNextPage")
    has_prev_page: bool = Field(alias="hasPrevPage")


class ItemsPageResponse(BaseModel):
    """One page of items."""

    items: list[ItemResponse]
    pagination: PaginationInfo


class PriceRangeResponse(BaseModel):
    """Price range."""

    min: int | float
    max: int | float


class StatisticsResponse(BaseModel):
    """Item statistics."""

    model_config = ConfigDict(populate_by_name=True)

    total: int
    average_price: float = Field(alias="averagePrice")
    categories: dict[str, int]
    price_range: PriceRangeResponse = Field(alias="priceRange")
