"""Item statistics aggregation."""

import math
from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal, localcontext

import polars as pl

from app.models.items import Item, ItemStatistics, PriceRange

# Enough digits to quantize any finite float to cents.
_CENTS_PRECISION = 400


def round_price(value: float) -> float:
    """Round to cents, half-up on the hundredths digit.

    Non-finite values are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    with localcontext() as ctx:
        ctx.prec = _CENTS_PRECISION
        return float(Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def compute_statistics(items: Sequence[Item]) -> ItemStatistics:
    """Count, average price, category histogram and price range."""
    if not items:
        return ItemStatistics()

    prices = [i.price if i.price is not None else 0 for i in items]
    df = pl.DataFrame(
        {
            "category": [i.category for i in items],
            "price": [float(p) for p in prices],
        },
        schema={"category": pl.Utf8, "price": pl.Float64},
    )

    total = df.height
    column = df.get_column("price")
    price_sum = column.sum()
    if math.isfinite(price_sum):
        average = price_sum / total
    else:
        # Sum overflowed, scale before adding.
        average = (column / total).sum()
    counts = df.group_by("category", maintain_order=True).agg(pl.len().alias("count"))

    return ItemStatistics(
        total=total,
        average_price=round_price(average),
        categories={category: int(count) for category, count in counts.iter_rows()},
        # Python min/max keep integer prices as int.
        price_range=PriceRange(min=min(prices), max=max(prices)),
    )
