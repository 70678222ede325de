"""Supabase repository for employees."""

from dataclasses import dataclass
from decimal import Decimal

from supabase import Client

from chicken_shop.adapters.supabase_rows import (
    row_datetime,
    row_decimal,
    row_id,
    row_text,
    to_row,
)
from chicken_shop.domain.errors import PersistenceError
from chicken_shop.domain.staff import Employee
from chicken_shop.services.employees import EmployeeRepository

_TABLE = "employees"


@dataclass
class SupabaseEmployeeRepository(EmployeeRepository):
    """Supabase implementation for employee records."""

    client: Client

    def list_employees(self) -> list[Employee]:
        """Return all employees ordered by name."""
        response = (
            self.client.table(_TABLE).select("*").order("name", desc=False).execute()
        )
        return [_parse_employee(row) for row in response.data or []]

    def get_employee(self, employee_id: str) -> Employee | None:
        """Return an employee by id."""
        response = (
            self.client.table(_TABLE)
            .select("*")
            .eq("id", employee_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_employee(response.data[0])

    def create_employee(
        self, name: str, phone: str, base_daily_wage: Decimal, notes: str
    ) -> Employee:
        """Insert an employee row."""
        response = (
            self.client.table(_TABLE)
            .insert(
                to_row(
                    {
                        "name": name,
                        "phone": phone,
                        "base_daily_wage": base_daily_wage,
                        "notes": notes,
                    }
                )
            )
            .execute()
        )
        if not response.data:
            raise PersistenceError("Failed to create employee")
        return _parse_employee(response.data[0])

    def update_employee(self, employee_id: str, changes: dict[str, object]) -> Employee:
        """Update an employee row."""
        response = (
            self.client.table(_TABLE)
            .update(to_row(changes))
            .eq("id", employee_id)
            .execute()
        )
        if not response.data:
            raise PersistenceError("Failed to update employee")
        return _parse_employee(response.data[0])

    def delete_employee(self, employee_id: str) -> None:
        """Delete an employee row."""
        self.client.table(_TABLE).delete().eq("id", employee_id).execute()


def _parse_employee(row: dict[str, object]) -> Employee:
    return Employee(
        id=row_id(row),
        name=row_text(row, "name"),
        phone=row_text(row, "phone"),
        base_daily_wage=row_decimal(row, "base_daily_wage"),
        notes=row_text(row, "notes"),
        created_at=row_datetime(row, "created_at"),
    )
