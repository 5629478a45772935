"""FastAPI endpoints for the Ordering domain."""

from fastapi import APIRouter, Depends
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from ordering.api.schemas import (
    ChangeStatusRequest,
    CreateOrderRequest,
    OrderListResponse,
    OrderResponse,
    UpdateAddressRequest,
)
from ordering.order.management import CancelOrder, ChangeOrderStatus, UpdateShippingAddress, readable_order
from ordering.order.order import DEFAULT_PAGE_SIZE, Order, total_pages
from ordering.order.placement import PlaceOrder
from shared.auth.dependencies import authorize
from shared.auth.roles import Role
from shared.auth.tokens import Principal

router = APIRouter(prefix="/api/orders", tags=["orders"])

shopper = authorize(Role.USER)
shopper_or_admin = authorize(Role.USER, Role.ADMIN)
admin = authorize(Role.ADMIN)


@router.post("", status_code=201, response_model=OrderResponse)
async def create_order(body: CreateOrderRequest, principal: Principal = Depends(shopper)) -> OrderResponse:
    address = body.shipping_address
    command = PlaceOrder(
        user_id=principal.id,
        customer_email=principal.email,
        auth_token=principal.token,
        street=address.street,
        city=address.city,
        state=address.state,
        pincode=address.pincode,
        country=address.country,
    )
    order = current_domain.process(command, asynchronous=False)
    return OrderResponse(message="Order created successfully", order=order)


@router.get("/me", response_model=OrderListResponse)
async def my_orders(
    page: int = 1,
    limit: int = DEFAULT_PAGE_SIZE,
    principal: Principal = Depends(shopper),
) -> OrderListResponse:
    if page < 1 or limit < 1:
        raise ValidationError({"pagination": ["Invalid page or limit"]})

    orders, total = current_domain.repository_for(Order).page_for_user(principal.id, page=page, limit=limit)
    return OrderListResponse(
        orders=[order.to_dict() for order in orders],
        pagination={
            "page": page,
            "limit": limit,
            "total_pages": total_pages(total, limit),
            "total_orders": total,
        },
    )


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str, principal: Principal = Depends(shopper_or_admin)) -> OrderResponse:
    order = readable_order(order_id, principal.id, is_admin=principal.is_admin)
    return OrderResponse(order=order.to_dict())


@router.post("/{order_id}/cancel", response_model=OrderResponse)
async def cancel_order(order_id: str, principal: Principal = Depends(shopper)) -> OrderResponse:
    order = current_domain.process(CancelOrder(order_id=order_id, user_id=principal.id), asynchronous=False)
    return OrderResponse(message="Order canceled successfully", order=order)


@router.patch("/{order_id}/address", response_model=OrderResponse)
async def update_address(
    order_id: str,
    body: UpdateAddressRequest,
    principal: Principal = Depends(shopper),
) -> OrderResponse:
    address = body.shipping_address
    command = UpdateShippingAddress(
        order_id=order_id,
        user_id=principal.id,
        street=address.street,
        city=address.city,
        state=address.state,
        pincode=address.pincode,
        country=address.country,
    )
    order = current_domain.process(command, asynchronous=False)
    return OrderResponse(message="Order address updated successfully", order=order)


@router.patch("/{order_id}/status", response_model=OrderResponse)
async def change_status(
    order_id: str,
    body: ChangeStatusRequest,
    principal: Principal = Depends(admin),
) -> OrderResponse:
    order = current_domain.process(ChangeOrderStatus(order_id=order_id, status=body.status), asynchronous=False)
    return OrderResponse(message="Order status updated successfully", order=order)
