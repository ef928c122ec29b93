"""Tests for statistics aggregation."""

import math

from app.models.items import Item, ItemStatistics, PriceRange
from app.services.items import compute_statistics, round_price
from tests.conftest import SAMPLE_ITEMS


class TestRoundPrice:
    def test_half_up(self):
        assert round_price(2.345) == 2.35
        assert round_price(2.344) == 2.34

    def test_whole(self):
        assert round_price(100.0) == 100.0

    def test_beyond_default_decimal_precision(self):
        assert round_price(1e27) == 1e27
        assert round_price(1.7976931348623157e308) == 1.7976931348623157e308

    def test_non_finite_unchanged(self):
        assert round_price(float("inf")) == float("inf")


class TestComputeStatistics:
    def test_empty(self):
        stats = compute_statistics([])
        assert stats == ItemStatistics(total=0, average_price=0, categories={}, price_range=PriceRange(0, 0))
        assert stats.to_dict() == {
            "total": 0,
            "average_price": 0,
            "categories": {},
            "price_range": {"min": 0, "max": 0},
        }

    def test_sample(self):
        stats = compute_statistics([Item(**d) for d in SAMPLE_ITEMS])
        assert stats.total == 3
        assert stats.average_price == 566.67
        assert stats.categories == {"Electronics": 2, "Furniture": 1}
        assert stats.price_range == PriceRange(min=200, max=1000)

    def test_average_consistent_with_sum(self):
        items = [Item(id=i, name=f"n{i}", category="c", price=p) for i, p in enumerate([0.1, 0.2, 0.7])]
        stats = compute_statistics(items)
        assert abs(stats.total * stats.average_price - 1.0) < 0.02

    def test_missing_price_counts_as_zero(self):
        items = [
            Item(id=1, name="a", category="x", price=10),
            Item(id=2, name="b", category="x"),
        ]
        stats = compute_statistics(items)
        assert stats.average_price == 5.0
        assert stats.price_range == PriceRange(min=0, max=10)

    def test_categories_are_literal(self):
        items = [
            Item(id=1, name="a", category="Books", price=1),
            Item(id=2, name="b", category="books", price=1),
        ]
        assert compute_statistics(items).categories == {"Books": 1, "books": 1}

    def test_integer_range_stays_integer(self):
        stats = compute_statistics([Item(**d) for d in SAMPLE_ITEMS])
        assert type(stats.price_range.min) is int
        assert type(stats.price_range.max) is int

    def test_mixed_range_keeps_each_type(self):
        items = [
            Item(id=1, name="a", category="x", price=2.5),
            Item(id=2, name="b", category="x", price=4),
        ]
        assert compute_statistics(items).price_range == PriceRange(min=2.5, max=4)

    def test_huge_price(self):
        items = [Item(id=1, name="Yacht", category="Boats", price=1e27)]
        stats = compute_statistics(items)
        assert stats.average_price == 1e27
        assert stats.price_range == PriceRange(min=1e27, max=1e27)

    def test_sum_beyond_float_range(self):
        items = [Item(id=i, name=f"n{i}", category="c", price=1e308) for i in (1, 2)]
        stats = compute_statistics(items)
        assert math.isfinite(stats.average_price)
        assert stats.average_price == 1e308
