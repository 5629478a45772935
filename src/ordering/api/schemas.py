"""Pydantic request/response schemas for the Ordering API."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from shared.api.schemas import CamelModel

# --- Request Schemas ---


class ShippingAddressSchema(CamelModel):
    street: str = Field(..., min_length=1, max_length=255)
    city: str = Field(..., min_length=1, max_length=100)
    state: str = Field(..., min_length=1, max_length=100)
    pincode: str = Field(..., min_length=1, max_length=20)
    country: str = Field(..., min_length=1, max_length=100)


class CreateOrderRequest(CamelModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "shippingAddress": {
                        "street": "221B Baker Street",
                        "city": "Pune",
                        "state": "MH",
                        "pincode": "411001",
                        "country": "India",
                    }
                }
            ]
        }
    }

    shipping_address: ShippingAddressSchema


class UpdateAddressRequest(CamelModel):
    shipping_address: ShippingAddressSchema


class ChangeStatusRequest(CamelModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "CONFIRMED"}]}}

    status: Literal["CONFIRMED", "SHIPPED", "DELIVERED", "CANCELED"]


# --- Response Schemas ---


class MoneySchema(CamelModel):
    amount: float
    currency: str


class OrderItemSchema(CamelModel):
    product: str
    title: str | None = None
    quantity: int
    price: MoneySchema


class AddressOut(CamelModel):
    street: str
    city: str
    state: str | None = None
    zip: str
    country: str


class OrderSchema(CamelModel):
    id: str
    user: str
    items: list[OrderItemSchema] = []
    total_amount: MoneySchema
    status: str
    shipping_address: AddressOut
    created_at: datetime | None = None
    updated_at: datetime | None = None


class OrderResponse(CamelModel):
    message: str | None = None
    order: OrderSchema


class Pagination(CamelModel):
    page: int
    limit: int
    total_pages: int
    total_orders: int


class OrderListResponse(CamelModel):
    orders: list[OrderSchema]
    pagination: Pagination
