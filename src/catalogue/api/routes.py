"""FastAPI endpoints for the Catalogue domain."""

import json
from typing import Literal

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from catalogue.api.schemas import ProductListResponse, ProductResponse, UpdateProductRequest
from catalogue.images import get_image_store
from catalogue.product.creation import CreateProduct
from catalogue.product.management import DeleteProduct, UpdateProduct
from catalogue.product.product import MAX_IMAGES, MAX_PAGE_SIZE, Product
from shared.api.schemas import MessageResponse
from shared.auth.dependencies import authorize
from shared.auth.roles import Role
from shared.auth.tokens import Principal

router = APIRouter(prefix="/api/products", tags=["products"])

lister = authorize(Role.ADMIN, Role.SELLER)
seller = authorize(Role.SELLER)


@router.post("", status_code=201, response_model=ProductResponse)
async def create_product(
    title: str = Form(..., min_length=1, max_length=255),
    description: str = Form("", max_length=2000),
    price_amount: float = Form(..., alias="priceAmount", gt=0),
    price_currency: Literal["USD", "INR"] = Form("INR", alias="priceCurrency"),
    stock: int = Form(0, ge=0),
    images: list[UploadFile] = File(default=[]),
    principal: Principal = Depends(lister),
) -> ProductResponse:
    if len(images) > MAX_IMAGES:
        raise ValidationError({"images": [f"A product can have at most {MAX_IMAGES} images"]})

    store = get_image_store()
    stored = []
    for upload in images:
        content = await upload.read()
        image = store.upload(content, filename=upload.filename or "image", content_type=upload.content_type)
        stored.append({"url": image.url, "thumbnail": image.thumbnail, "file_id": image.file_id})

    command = CreateProduct(
        seller_id=principal.id,
        seller_email=principal.email or None,
        title=title,
        description=description,
        price_amount=price_amount,
        price_currency=price_currency,
        stock=stock,
        images=json.dumps(stored),
    )
    product = current_domain.process(command, asynchronous=False)
    return ProductResponse(message="Product created successfully", data=product)


@router.get("", response_model=ProductListResponse)
async def list_products(
    q: str | None = Query(None, max_length=200),
    minprice: float | None = Query(None, ge=0),
    maxprice: float | None = Query(None, ge=0),
    skip: int = Query(0, ge=0),
    limit: int = Query(MAX_PAGE_SIZE, ge=1),
) -> ProductListResponse:
    repo = current_domain.repository_for(Product)
    products = repo.search(q=q, min_price=minprice, max_price=maxprice, skip=skip, limit=limit)
    return ProductListResponse(data=[p.to_dict() for p in products])


# Declared before /{product_id} so "seller" is not taken for an id
@router.get("/seller", response_model=ProductListResponse)
async def list_seller_products(
    skip: int = Query(0, ge=0),
    limit: int = Query(MAX_PAGE_SIZE, ge=1),
    principal: Principal = Depends(seller),
) -> ProductListResponse:
    repo = current_domain.repository_for(Product)
    products = repo.for_seller(principal.id, skip=skip, limit=limit)
    return ProductListResponse(data=[p.to_dict() for p in products])


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    product = current_domain.repository_for(Product).fetch(product_id)
    return ProductResponse(data=product.to_dict())


@router.patch("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: str,
    body: UpdateProductRequest,
    principal: Principal = Depends(seller),
) -> ProductResponse:
    command = UpdateProduct(
        product_id=product_id,
        seller_id=principal.id,
        title=body.title,
        description=body.description,
        price_amount=body.price.amount if body.price else None,
        price_currency=body.price.currency if body.price else None,
        stock=body.stock,
    )
    product = current_domain.process(command, asynchronous=False)
    return ProductResponse(message="Product updated successfully", data=product)


@router.delete("/{product_id}", response_model=MessageResponse)
async def delete_product(product_id: str, principal: Principal = Depends(seller)) -> MessageResponse:
    current_domain.process(DeleteProduct(product_id=product_id, seller_id=principal.id), asynchronous=False)
    return MessageResponse(message="Product deleted successfully")
