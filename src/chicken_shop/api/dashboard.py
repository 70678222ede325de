"""Dashboard endpoint."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from chicken_shop.api.auth import require_token
from chicken_shop.api.payloads import to_payload

if TYPE_CHECKING:
    from chicken_shop.containers import AppContainer

router = APIRouter(
    prefix="/dashboard", tags=["dashboard"], dependencies=[Depends(require_token)]
)


@router.get("")
async def dashboard(request: Request) -> dict[str, object]:
    """Return today's and this month's revenue, wages and profit."""
    container: AppContainer = request.app.state.container
    stats = container.dashboard_service.get_stats(
        low_stock_threshold=container.settings.dashboard_low_stock_threshold,
        inactive_days=container.settings.inactive_customer_days,
    )
    return to_payload(stats)
