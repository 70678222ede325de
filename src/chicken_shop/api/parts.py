"""Chicken part and stock endpoints."""

from __future__ import annotations

from decimal import Decimal  # noqa: TC003
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from chicken_shop.api.auth import require_token
from chicken_shop.api.payloads import to_payload
from chicken_shop.api.schemas import (
    ChickenPartCreate,
    ChickenPartUpdate,
    StockAdjustment,
)

if TYPE_CHECKING:
    from chicken_shop.containers import AppContainer

router = APIRouter(
    prefix="/chicken-parts",
    tags=["chicken-parts"],
    dependencies=[Depends(require_token)],
)


@router.get("")
async def list_parts(request: Request) -> dict[str, object]:
    """Return the part catalogue with a stock summary."""
    container: AppContainer = request.app.state.container
    return {
        "parts": to_payload(container.stock_ledger.list_parts()),
        "summary": to_payload(container.stock_ledger.stock_summary()),
    }


@router.get("/low-stock")
async def low_stock(
    request: Request, threshold: Decimal | None = None
) -> dict[str, object]:
    """Return parts below the stock threshold, lowest first."""
    container: AppContainer = request.app.state.container
    limit = (
        threshold
        if threshold is not None
        else container.settings.stock_page_low_stock_threshold
    )
    return {
        "threshold": str(limit),
        "parts": to_payload(container.stock_ledger.low_stock(limit)),
    }


@router.get("/{part_id}")
async def get_part(part_id: str, request: Request) -> dict[str, object]:
    """Return one part."""
    container: AppContainer = request.app.state.container
    return to_payload(container.stock_ledger.get_part(part_id))


@router.post("", status_code=201)
async def create_part(
    payload: ChickenPartCreate, request: Request
) -> dict[str, object]:
    """Create a part."""
    container: AppContainer = request.app.state.container
    part = container.stock_ledger.create_part(
        name=payload.name,
        price_per_kg=payload.price_per_kg,
        stock=payload.stock,
        unit=payload.unit,
    )
    return to_payload(part)


@router.patch("/{part_id}")
async def update_part(
    part_id: str, payload: ChickenPartUpdate, request: Request
) -> dict[str, object]:
    """Edit a part's name, price, stock or unit."""
    container: AppContainer = request.app.state.container
    part = container.stock_ledger.update_part(
        part_id,
        name=payload.name,
        price_per_kg=payload.price_per_kg,
        stock=payload.stock,
        unit=payload.unit,
    )
    return to_payload(part)


@router.post("/{part_id}/adjust-stock")
async def adjust_stock(
    part_id: str, payload: StockAdjustment, request: Request
) -> dict[str, object]:
    """Apply a signed stock change; the level never drops below zero."""
    container: AppContainer = request.app.state.container
    stock = container.stock_ledger.adjust(part_id, payload.amount)
    return {"id": part_id, "stock": str(stock)}


@router.delete("/{part_id}", status_code=204)
async def delete_part(part_id: str, request: Request) -> None:
    """Delete a part."""
    container: AppContainer = request.app.state.container
    container.stock_ledger.delete_part(part_id)
