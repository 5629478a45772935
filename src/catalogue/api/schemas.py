"""Pydantic request/response schemas for the Catalogue API."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from shared.api.schemas import CamelModel

# --- Request Schemas ---


class PriceUpdateSchema(CamelModel):
    amount: float | None = Field(None, gt=0)
    currency: Literal["USD", "INR"] | None = None


class UpdateProductRequest(CamelModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "title": "Cotton T-Shirt (Navy)",
                    "price": {"amount": 549, "currency": "INR"},
                    "stock": 40,
                }
            ]
        }
    }

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, max_length=2000)
    price: PriceUpdateSchema | None = None
    stock: int | None = Field(None, ge=0)


# --- Response Schemas ---


class PriceSchema(CamelModel):
    amount: float
    currency: str


class ImageSchema(CamelModel):
    id: str
    url: str
    thumbnail: str | None = None
    file_id: str | None = None


class ProductSchema(CamelModel):
    id: str
    title: str
    description: str | None = ""
    price: PriceSchema
    seller: str
    images: list[ImageSchema] = []
    stock: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ProductResponse(CamelModel):
    message: str | None = None
    data: ProductSchema


class ProductListResponse(CamelModel):
    data: list[ProductSchema]
