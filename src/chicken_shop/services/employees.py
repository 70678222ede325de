"""Employee records."""

import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol

from chicken_shop.domain.errors import NotFoundError, ValidationError
from chicken_shop.domain.staff import Employee

PHONE_PATTERN = re.compile(r"^\d{10}$")


class EmployeeRepository(Protocol):
    """Persistence interface for employees."""

    def list_employees(self) -> list[Employee]:
        """Return all employees."""

    def get_employee(self, employee_id: str) -> Employee | None:
        """Return an employee by id, if present."""

    def create_employee(
        self, name: str, phone: str, base_daily_wage: Decimal, notes: str
    ) -> Employee:
        """Create an employee and return it."""

    def update_employee(self, employee_id: str, changes: dict[str, object]) -> Employee:
        """Apply field changes to an employee and return it."""

    def delete_employee(self, employee_id: str) -> None:
        """Delete an employee."""


@dataclass
class EmployeeService:
    """Application service for employee records."""

    repository: EmployeeRepository

    def list_employees(self) -> list[Employee]:
        """Return all employees."""
        return self.repository.list_employees()

    def get_employee(self, employee_id: str) -> Employee:
        """Return an employee or raise ``NotFoundError``."""
        employee = self.repository.get_employee(employee_id)
        if employee is None:
            raise NotFoundError("employee", employee_id)
        return employee

    def create_employee(
        self, name: str, base_daily_wage: Decimal, phone: str = "", notes: str = ""
    ) -> Employee:
        """Validate and create an employee."""
        _validate_employee(name=name, phone=phone, base_daily_wage=base_daily_wage)
        return self.repository.create_employee(
            name=name.strip(),
            phone=phone.strip(),
            base_daily_wage=base_daily_wage,
            notes=notes,
        )

    def update_employee(
        self,
        employee_id: str,
        *,
        name: str | None = None,
        phone: str | None = None,
        base_daily_wage: Decimal | None = None,
        notes: str | None = None,
    ) -> Employee:
        """Validate and apply edits to an employee.

        Wage entries already recorded keep their stored amounts.
        """
        self.get_employee(employee_id)
        _validate_employee(name=name, phone=phone, base_daily_wage=base_daily_wage)
        changes: dict[str, object] = {}
        if name is not None:
            changes["name"] = name.strip()
        if phone is not None:
            changes["phone"] = phone.strip()
        if base_daily_wage is not None:
            changes["base_daily_wage"] = base_daily_wage
        if notes is not None:
            changes["notes"] = notes
        if not changes:
            return self.get_employee(employee_id)
        return self.repository.update_employee(employee_id, changes)

    def delete_employee(self, employee_id: str) -> None:
        """Delete an employee."""
        self.get_employee(employee_id)
        self.repository.delete_employee(employee_id)


def _validate_employee(
    *,
    name: str | None,
    phone: str | None,
    base_daily_wage: Decimal | None,
) -> None:
    errors: list[str] = []
    if name is not None and not name.strip():
        errors.append("name is required")
    if phone and not PHONE_PATTERN.match(phone.strip()):
        errors.append("phone number must be 10 digits")
    if base_daily_wage is not None and base_daily_wage <= 0:
        errors.append("base daily wage must be positive")
    if errors:
        raise ValidationError(errors)
