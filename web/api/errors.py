"""API errors and validation helpers."""

import math
from typing import Any

from pydantic import BaseModel

from app.errors import ItemStoreError, NotFoundError, ValidationError

__all__ = [
    "ErrorResponse",
    "NewItem",
    "NotFoundError",
    "ValidationError",
    "error_response",
    "validate_new_item",
]


class ErrorResponse(BaseModel):
    """Error body returned to clients."""

    error: str
    field: str | None = None


class NewItem(BaseModel):
    """Validated create payload."""

    name: str
    category: str
    price: int | float


def _required_text(payload: dict, field: str) -> str:
    value = payload.get(field)
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(field, "is required and must be a non-empty string")
    return value.strip()


def validate_new_item(payload: Any) -> NewItem:
    """Check a create payload before anything touches the store."""
    if not isinstance(payload, dict):
        raise ValidationError("body", "must be a JSON object")

    name = _required_text(payload, "name")
    category = _required_text(payload, "category")

    price = payload.get("price")
    if (
        isinstance(price, bool)
        or not isinstance(price, (int, float))
        or not math.isfinite(price)
        or price < 0
    ):
        raise ValidationError("price", "is required and must be a non-negative number")

    return NewItem(name=name, category=category, price=price)


def error_response(exc: Exception) -> tuple[int, ErrorResponse]:
    """Map a domain error to (status code, body). Anything else is a 500."""
    if isinstance(exc, ValidationError):
        return exc.status_code, ErrorResponse(error=exc.message, field=exc.field)
    if isinstance(exc, (NotFoundError, ItemStoreError)):
        return exc.status_code, ErrorResponse(error=exc.message)
    return 500, ErrorResponse(error="Server error")
