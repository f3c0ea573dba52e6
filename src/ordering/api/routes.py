"""FastAPI routes for the Ordering domain: checkout and orders."""

from fastapi import APIRouter, Depends, Request

from ordering.api.dependencies import UserRef, admin_user, checkout_service, current_user
from ordering.api.schemas import (
    CheckoutResponse,
    OrderListResponse,
    OrderSchema,
    OrderStatusResponse,
)
from ordering.checkout.service import CheckoutService
from ordering.order.queries import all_orders, orders_for_buyer
from ordering.order.status import change_order_status

order_router = APIRouter(prefix="/orders", tags=["orders"])


async def _json_body(request: Request) -> dict:
    """Parse the body as a JSON object; anything else reads as empty."""
    try:
        payload = await request.json()
    except ValueError:
        return {}
    return payload if isinstance(payload, dict) else {}


@order_router.post("/checkout", response_model=CheckoutResponse)
async def checkout(
    request: Request,
    user: UserRef = Depends(current_user),
    service: CheckoutService = Depends(checkout_service),
) -> CheckoutResponse:
    """Charge the submitted cart and record the paid order.

    Body: ``{"nonce": str, "cart": [{"name": str, "price": number}, ...]}``
    """
    payload = await _json_body(request)
    order = await service.checkout(payload, buyer_id=user.id)
    return CheckoutResponse(order=OrderSchema.from_order(order))


@order_router.get("", response_model=OrderListResponse)
async def list_my_orders(user: UserRef = Depends(current_user)) -> OrderListResponse:
    orders = orders_for_buyer(user.id)
    return OrderListResponse(orders=[OrderSchema.from_order(order) for order in orders])


@order_router.get("/all", response_model=OrderListResponse)
async def list_all_orders(admin: UserRef = Depends(admin_user)) -> OrderListResponse:  # noqa: ARG001
    orders = all_orders()
    return OrderListResponse(orders=[OrderSchema.from_order(order) for order in orders])


@order_router.put("/{order_id}/status", response_model=OrderStatusResponse)
async def update_order_status(
    order_id: str,
    request: Request,
    admin: UserRef = Depends(admin_user),  # noqa: ARG001
) -> OrderStatusResponse:
    """Overwrite an order's status. Body: ``{"status": str}``."""
    payload = await _json_body(request)
    order = change_order_status(order_id, payload.get("status"))
    return OrderStatusResponse(order=OrderSchema.from_order(order))
