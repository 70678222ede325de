"""Order endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from chicken_shop.api.auth import require_token
from chicken_shop.api.payloads import to_payload
from chicken_shop.api.schemas import (
    ItemRecompute,
    OrderCreate,
    OrderItemPayload,
    OrderStatusUpdate,
    OrderUpdate,
)
from chicken_shop.domain.money import ZERO, line_total
from chicken_shop.domain.orders import (
    OrderItem,
    OrderStatus,
    order_total,
    recompute_item,
)

if TYPE_CHECKING:
    from chicken_shop.containers import AppContainer

router = APIRouter(
    prefix="/orders", tags=["orders"], dependencies=[Depends(require_token)]
)


@router.get("")
async def list_orders(
    request: Request, status: OrderStatus | None = None
) -> dict[str, object]:
    """Return orders, newest first, optionally filtered by status."""
    container: AppContainer = request.app.state.container
    return {"orders": to_payload(container.order_service.list_orders(status))}


@router.get("/customer/{customer_id}")
async def list_customer_orders(
    customer_id: str, request: Request
) -> dict[str, object]:
    """Return one customer's orders."""
    container: AppContainer = request.app.state.container
    orders = container.order_service.list_orders_by_customer(customer_id)
    return {"orders": to_payload(orders)}


@router.get("/stats/today-revenue")
async def today_revenue(request: Request) -> dict[str, str]:
    """Return revenue for the current shop day."""
    container: AppContainer = request.app.state.container
    return {"revenue": str(container.revenue.today_revenue())}


@router.get("/stats/monthly-revenue")
async def monthly_revenue(request: Request) -> dict[str, str]:
    """Return revenue for the current shop month."""
    container: AppContainer = request.app.state.container
    return {"revenue": str(container.revenue.monthly_revenue())}


@router.post("/validate")
async def validate_order(payload: OrderCreate, request: Request) -> dict[str, object]:
    """Validate an order form and return its total without saving it."""
    container: AppContainer = request.app.state.container
    validated = container.order_service.validate(
        payload.customer_id, _resolve_items(container, payload.items), payload.notes
    )
    return to_payload(validated)


@router.post("/recompute-item")
async def recompute_order_item(
    payload: ItemRecompute, request: Request
) -> dict[str, object]:
    """Apply one field change to an order form row and return the rows."""
    container: AppContainer = request.app.state.container
    parts = {part.id: part for part in container.stock_ledger.list_parts()}
    items = recompute_item(
        [_to_item(item) for item in payload.items],
        payload.index,
        payload.field,
        payload.value,
        parts,
    )
    selected = [item for item in items if item.chicken_part_id]
    return {"items": to_payload(items), "total_amount": str(order_total(selected))}


@router.get("/{order_id}")
async def get_order(order_id: str, request: Request) -> dict[str, object]:
    """Return one order with its items."""
    container: AppContainer = request.app.state.container
    return to_payload(container.order_service.get_order(order_id))


@router.post("", status_code=201)
async def create_order(payload: OrderCreate, request: Request) -> dict[str, object]:
    """Validate and place an order, decrementing stock."""
    container: AppContainer = request.app.state.container
    order = container.order_service.place_order(
        payload.customer_id,
        _resolve_items(container, payload.items),
        payload.notes,
    )
    return to_payload(order)


@router.patch("/{order_id}")
async def update_order(
    order_id: str, payload: OrderUpdate, request: Request
) -> dict[str, object]:
    """Edit a pending order and/or change its status."""
    container: AppContainer = request.app.state.container
    service = container.order_service
    edits_fields = (
        payload.customer_id is not None
        or payload.items is not None
        or payload.notes is not None
    )
    order = service.get_order(order_id)
    if edits_fields:
        order = service.update_order(
            order_id,
            customer_id=payload.customer_id,
            items=(
                _resolve_items(container, payload.items)
                if payload.items is not None
                else None
            ),
            notes=payload.notes,
        )
    if payload.status is not None:
        order = service.set_status(order_id, payload.status)
    return to_payload(order)


@router.put("/{order_id}/status")
async def set_order_status(
    order_id: str, payload: OrderStatusUpdate, request: Request
) -> dict[str, object]:
    """Move an order to another status."""
    container: AppContainer = request.app.state.container
    return to_payload(container.order_service.set_status(order_id, payload.status))


@router.delete("/{order_id}", status_code=204)
async def delete_order(order_id: str, request: Request) -> None:
    """Delete an order that is not completed."""
    container: AppContainer = request.app.state.container
    container.order_service.delete_order(order_id)


def _resolve_items(
    container: AppContainer, payloads: list[OrderItemPayload]
) -> list[OrderItem]:
    items: list[OrderItem] = []
    for payload in payloads:
        if payload.price_per_kg is None and payload.chicken_part_id:
            part = container.stock_ledger.get_part(payload.chicken_part_id)
            items.append(OrderItem.for_part(part, payload.quantity))
        else:
            items.append(_to_item(payload))
    return items


def _to_item(payload: OrderItemPayload) -> OrderItem:
    price = payload.price_per_kg if payload.price_per_kg is not None else ZERO
    return OrderItem(
        chicken_part_id=payload.chicken_part_id,
        chicken_part_name=payload.chicken_part_name,
        quantity=payload.quantity,
        price_per_kg=price,
        total=line_total(payload.quantity, price),
    )
