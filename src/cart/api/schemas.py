"""Pydantic request/response schemas for the Cart API."""

from datetime import datetime

from pydantic import Field, field_validator

from shared.api.schemas import CamelModel


def _positive_int(value):
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError("Quantity must be a positive integer")
    return value


# --- Request Schemas ---


class AddItemRequest(CamelModel):
    model_config = {"json_schema_extra": {"examples": [{"productId": "6f1c2d3e-0000-4000-8000-000000000001", "qty": 2}]}}

    product_id: str = Field(..., min_length=1, max_length=64)
    qty: int

    @field_validator("qty", mode="before")
    @classmethod
    def qty_must_be_positive(cls, value):
        return _positive_int(value)


class UpdateItemRequest(CamelModel):
    model_config = {"json_schema_extra": {"examples": [{"qty": 5}]}}

    qty: int

    @field_validator("qty", mode="before")
    @classmethod
    def qty_must_be_positive(cls, value):
        return _positive_int(value)


# --- Response Schemas ---


class CartItemSchema(CamelModel):
    product_id: str
    quantity: int


class CartSchema(CamelModel):
    user: str
    items: list[CartItemSchema] = []
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CartTotals(CamelModel):
    item_count: int
    total_quantity: int


class CartResponse(CamelModel):
    message: str
    cart: CartSchema


class CartWithTotalsResponse(CartResponse):
    totals: CartTotals
