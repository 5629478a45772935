"""FastAPI endpoints for the Cart domain."""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from cart.api.schemas import AddItemRequest, CartResponse, CartWithTotalsResponse, UpdateItemRequest
from cart.cart.items import AddItemToCart, OpenCart, UpdateCartItem
from shared.auth.dependencies import authorize
from shared.auth.roles import Role
from shared.auth.tokens import Principal

router = APIRouter(prefix="/api/cart", tags=["cart"])

shopper = authorize(Role.USER)


@router.get("", response_model=CartWithTotalsResponse)
async def get_cart(principal: Principal = Depends(shopper)) -> CartWithTotalsResponse:
    cart = current_domain.process(OpenCart(user_id=principal.id), asynchronous=False)
    return CartWithTotalsResponse(
        message="Cart retrieved successfully",
        cart=cart,
        totals={
            "item_count": len(cart["items"]),
            "total_quantity": cart["total_quantity"],
        },
    )


@router.post("/items", response_model=CartResponse)
async def add_item(body: AddItemRequest, principal: Principal = Depends(shopper)) -> CartResponse:
    command = AddItemToCart(
        user_id=principal.id,
        product_id=body.product_id,
        quantity=body.qty,
    )
    cart = current_domain.process(command, asynchronous=False)
    return CartResponse(message="Item added to cart", cart=cart)


@router.patch("/items/{product_id}", response_model=CartResponse)
async def update_item(product_id: str, body: UpdateItemRequest, principal: Principal = Depends(shopper)) -> CartResponse:
    command = UpdateCartItem(
        user_id=principal.id,
        product_id=product_id,
        quantity=body.qty,
    )
    cart = current_domain.process(command, asynchronous=False)
    return CartResponse(message="Item updated successfully", cart=cart)
