"""Customer endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from chicken_shop.api.auth import require_token
from chicken_shop.api.payloads import to_payload
from chicken_shop.api.schemas import CustomerCreate, CustomerUpdate

if TYPE_CHECKING:
    from chicken_shop.containers import AppContainer

router = APIRouter(
    prefix="/customers", tags=["customers"], dependencies=[Depends(require_token)]
)


@router.get("")
async def list_customers(request: Request, q: str = "") -> dict[str, object]:
    """Return customers, optionally filtered by name or phone."""
    container: AppContainer = request.app.state.container
    return {"customers": to_payload(container.customer_service.search(q))}


@router.get("/inactive")
async def inactive_customers(
    request: Request, days: int | None = None
) -> dict[str, object]:
    """Return customers who have not ordered recently."""
    container: AppContainer = request.app.state.container
    threshold = days if days is not None else container.settings.inactive_customer_days
    return {
        "days": threshold,
        "customers": to_payload(container.revenue.inactive_customers(threshold)),
    }


@router.get("/summaries")
async def customer_summaries(request: Request) -> dict[str, object]:
    """Return order count and spend per customer."""
    container: AppContainer = request.app.state.container
    return {"summaries": to_payload(container.revenue.customer_summaries())}


@router.get("/{customer_id}")
async def get_customer(customer_id: str, request: Request) -> dict[str, object]:
    """Return one customer."""
    container: AppContainer = request.app.state.container
    return to_payload(container.customer_service.get_customer(customer_id))


@router.post("", status_code=201)
async def create_customer(
    payload: CustomerCreate, request: Request
) -> dict[str, object]:
    """Create a customer."""
    container: AppContainer = request.app.state.container
    customer = container.customer_service.create_customer(
        name=payload.name,
        phone=payload.phone,
        address=payload.address,
        notes=payload.notes,
    )
    return to_payload(customer)


@router.patch("/{customer_id}")
async def update_customer(
    customer_id: str, payload: CustomerUpdate, request: Request
) -> dict[str, object]:
    """Edit a customer."""
    container: AppContainer = request.app.state.container
    customer = container.customer_service.update_customer(
        customer_id, payload.model_dump(exclude_none=True)
    )
    return to_payload(customer)


@router.delete("/{customer_id}", status_code=204)
async def delete_customer(customer_id: str, request: Request) -> None:
    """Delete a customer."""
    container: AppContainer = request.app.state.container
    container.customer_service.delete_customer(customer_id)
