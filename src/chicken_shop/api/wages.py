"""Daily wage endpoints."""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo

from fastapi import APIRouter, Depends, Request

from chicken_shop.api.auth import require_token
from chicken_shop.api.payloads import to_payload
from chicken_shop.api.schemas import WageCreate, WageUpdate
from chicken_shop.domain.staff import WageAdjustmentReason
from chicken_shop.services.wages import most_recent_sunday

if TYPE_CHECKING:
    from chicken_shop.containers import AppContainer

router = APIRouter(
    prefix="/wages", tags=["wages"], dependencies=[Depends(require_token)]
)


def _shop_today(container: AppContainer) -> date:
    return datetime.now(tz=ZoneInfo(container.settings.shop_timezone)).date()


@router.get("")
async def list_wages(request: Request) -> dict[str, object]:
    """Return all wage entries."""
    container: AppContainer = request.app.state.container
    return {"wages": to_payload(container.wage_ledger.list_wages())}


@router.get("/adjustment-reasons")
async def adjustment_reasons() -> dict[str, list[str]]:
    """Return the preset reasons offered for wage adjustments."""
    return {"reasons": [reason.value for reason in WageAdjustmentReason]}


@router.get("/stats/today")
async def today_wages(request: Request) -> dict[str, str]:
    """Return the total paid to all employees today."""
    container: AppContainer = request.app.state.container
    today = _shop_today(container)
    return {
        "date": today.isoformat(),
        "total": str(container.wage_ledger.daily_total(today)),
    }


@router.get("/stats/month")
async def month_wages(
    request: Request, year: int | None = None, month: int | None = None
) -> dict[str, object]:
    """Return the total paid to all employees in a month."""
    container: AppContainer = request.app.state.container
    today = _shop_today(container)
    resolved_year = year or today.year
    resolved_month = month or today.month
    return {
        "year": resolved_year,
        "month": resolved_month,
        "total": str(container.wage_ledger.month_total(resolved_year, resolved_month)),
    }


@router.get("/employee/{employee_id}")
async def list_employee_wages(
    employee_id: str, request: Request
) -> dict[str, object]:
    """Return one employee's wage entries."""
    container: AppContainer = request.app.state.container
    return {"wages": to_payload(container.wage_ledger.list_wages(employee_id))}


@router.get("/employee/{employee_id}/monthly")
async def employee_monthly_total(
    employee_id: str,
    request: Request,
    year: int | None = None,
    month: int | None = None,
) -> dict[str, object]:
    """Return one employee's total for a calendar month."""
    container: AppContainer = request.app.state.container
    today = _shop_today(container)
    resolved_year = year or today.year
    resolved_month = month or today.month
    total = container.wage_ledger.monthly_total(
        employee_id, resolved_year, resolved_month
    )
    return {"year": resolved_year, "month": resolved_month, "total": str(total)}


@router.get("/employee/{employee_id}/weekly")
async def employee_weekly_total(
    employee_id: str, request: Request, week_start: date | None = None
) -> dict[str, str]:
    """Return one employee's total for a week starting on ``week_start``.

    Defaults to the week beginning on the most recent Sunday.
    """
    container: AppContainer = request.app.state.container
    start = week_start or most_recent_sunday(_shop_today(container))
    total = container.wage_ledger.weekly_total(employee_id, start)
    return {"week_start": start.isoformat(), "total": str(total)}


@router.get("/date/{day}")
async def wages_for_date(day: date, request: Request) -> dict[str, object]:
    """Return all wage entries for one day."""
    container: AppContainer = request.app.state.container
    return {
        "date": day.isoformat(),
        "wages": to_payload(container.wage_ledger.list_wages_by_date(day)),
    }


@router.get("/{wage_id}")
async def get_wage(wage_id: str, request: Request) -> dict[str, object]:
    """Return one wage entry."""
    container: AppContainer = request.app.state.container
    return to_payload(container.wage_ledger.get_wage(wage_id))


@router.post("", status_code=201)
async def record_wage(payload: WageCreate, request: Request) -> dict[str, object]:
    """Record a day's pay for an employee."""
    container: AppContainer = request.app.state.container
    wage = container.wage_ledger.record_wage(
        employee_id=payload.employee_id,
        day=payload.date,
        adjustment=payload.adjustment,
        adjustment_reason=payload.adjustment_reason,
        notes=payload.notes,
        amount=payload.amount,
    )
    return to_payload(wage)


@router.patch("/{wage_id}")
async def update_wage(
    wage_id: str, payload: WageUpdate, request: Request
) -> dict[str, object]:
    """Edit a wage entry."""
    container: AppContainer = request.app.state.container
    wage = container.wage_ledger.update_wage(
        wage_id, payload.model_dump(exclude_none=True)
    )
    return to_payload(wage)


@router.delete("/{wage_id}", status_code=204)
async def delete_wage(wage_id: str, request: Request) -> None:
    """Delete a wage entry."""
    container: AppContainer = request.app.state.container
    container.wage_ledger.delete_wage(wage_id)
