"""Tests for create payload validation and error mapping."""

import pytest

from app.errors import NotFoundError, StoreCorrupt, StoreTimeout, ValidationError
from web.api.errors import error_response, validate_new_item


class TestValidateNewItem:
    def test_valid_and_trimmed(self):
        item = validate_new_item({"name": "  Spaced  ", "category": " Electronics ", "price": 299})
        assert item.name == "Spaced"
        assert item.category == "Electronics"
        assert item.price == 299

    def test_zero_price_allowed(self):
        assert validate_new_item({"name": "Free", "category": "X", "price": 0}).price == 0

    @pytest.mark.parametrize("name", [None, "", "   ", 5])
    def test_bad_name(self, name):
        with pytest.raises(ValidationError) as exc:
            validate_new_item({"name": name, "category": "X", "price": 1})
        assert exc.value.field == "name"
        assert "Name is required" in exc.value.message

    def test_missing_category(self):
        with pytest.raises(ValidationError) as exc:
            validate_new_item({"name": "X", "price": 1})
        assert exc.value.field == "category"
        assert "Category is required" in exc.value.message

    @pytest.mark.parametrize("price", [None, -1, "expensive", True, float("nan"), float("inf")])
    def test_bad_price(self, price):
        with pytest.raises(ValidationError) as exc:
            validate_new_item({"name": "X", "category": "Y", "price": price})
        assert exc.value.field == "price"
        assert exc.value.message == "Price is required and must be a non-negative number"

    def test_missing_price(self):
        with pytest.raises(ValidationError, match="Price is required"):
            validate_new_item({"name": "X", "category": "Y"})

    def test_not_an_object(self):
        with pytest.raises(ValidationError) as exc:
            validate_new_item(["X"])
        assert exc.value.field == "body"


class TestErrorResponse:
    def test_validation_is_400(self):
        status, body = error_response(ValidationError("name", "is required and must be a non-empty string"))
        assert status == 400
        assert body.field == "name"

    def test_not_found_is_404(self):
        status, body = error_response(NotFoundError())
        assert (status, body.error) == (404, "Item not found")

    def test_store_errors_are_server_side(self):
        assert error_response(StoreCorrupt())[0] == 500
        assert error_response(StoreTimeout())[0] == 504

    def test_unknown_is_500(self):
        status, body = error_response(RuntimeError("boom"))
        assert status == 500
        assert body.error == "Server error"
