"""Items domain entities - change markers and computed results."""

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass(frozen=True)
class ChangeMarker:
    """Identity of one version of the data file.

    Compared for equality only. Modification time alone misses rewrites that
    land within the filesystem's timestamp granularity, so size and inode are
    part of the marker too.
    """

    modified_ns: int
    size: int
    inode: int


@dataclass(frozen=True)
class PriceRange:
    """Lowest and highest item price."""

    min: float = 0
    max: float = 0


@dataclass(frozen=True)
class ItemStatistics:
    """Aggregates over the full item set."""

    total: int = 0
    average_price: float = 0
    categories: dict[str, int] = field(default_factory=dict)
    price_range: PriceRange = field(default_factory=PriceRange)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class PageInfo:
    """Pagination metadata for a list response."""

    page: int
    page_size: int
    total_items: int
    total_pages: int
    has_next_page: bool
    has_prev_page: bool

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
