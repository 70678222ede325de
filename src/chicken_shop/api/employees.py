"""Employee endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from chicken_shop.api.auth import require_token
from chicken_shop.api.payloads import to_payload
from chicken_shop.api.schemas import EmployeeCreate, EmployeeUpdate

if TYPE_CHECKING:
    from chicken_shop.containers import AppContainer

router = APIRouter(
    prefix="/employees", tags=["employees"], dependencies=[Depends(require_token)]
)


@router.get("")
async def list_employees(request: Request) -> dict[str, object]:
    """Return all employees."""
    container: AppContainer = request.app.state.container
    return {"employees": to_payload(container.employee_service.list_employees())}


@router.get("/{employee_id}")
async def get_employee(employee_id: str, request: Request) -> dict[str, object]:
    """Return one employee."""
    container: AppContainer = request.app.state.container
    return to_payload(container.employee_service.get_employee(employee_id))


@router.post("", status_code=201)
async def create_employee(
    payload: EmployeeCreate, request: Request
) -> dict[str, object]:
    """Create an employee."""
    container: AppContainer = request.app.state.container
    employee = container.employee_service.create_employee(
        name=payload.name,
        base_daily_wage=payload.base_daily_wage,
        phone=payload.phone,
        notes=payload.notes,
    )
    return to_payload(employee)


@router.patch("/{employee_id}")
async def update_employee(
    employee_id: str, payload: EmployeeUpdate, request: Request
) -> dict[str, object]:
    """Edit an employee."""
    container: AppContainer = request.app.state.container
    employee = container.employee_service.update_employee(
        employee_id,
        name=payload.name,
        phone=payload.phone,
        base_daily_wage=payload.base_daily_wage,
        notes=payload.notes,
    )
    return to_payload(employee)


@router.delete("/{employee_id}", status_code=204)
async def delete_employee(employee_id: str, request: Request) -> None:
    """Delete an employee."""
    container: AppContainer = request.app.state.container
    container.employee_service.delete_employee(employee_id)
