"""Supabase repository for daily wage entries."""

from dataclasses import asdict, dataclass
from datetime import date

from supabase import Client

from chicken_shop.adapters.supabase_rows import (
    row_date,
    row_datetime,
    row_decimal,
    row_id,
    row_text,
    to_row,
)
from chicken_shop.domain.errors import PersistenceError
from chicken_shop.domain.staff import DailyWage, DailyWageDraft
from chicken_shop.services.wages import WageRepository

_TABLE = "daily_wages"


@dataclass
class SupabaseWageRepository(WageRepository):
    """Supabase implementation for the wage ledger."""

    client: Client

    def list_wages(self) -> list[DailyWage]:
        """Return all entries, newest date first."""
        response = (
            self.client.table(_TABLE).select("*").order("date", desc=True).execute()
        )
        return [_parse_wage(row) for row in response.data or []]

    def list_wages_by_employee(self, employee_id: str) -> list[DailyWage]:
        """Return an employee's entries, newest date first."""
        response = (
            self.client.table(_TABLE)
            .select("*")
            .eq("employee_id", employee_id)
            .order("date", desc=True)
            .execute()
        )
        return [_parse_wage(row) for row in response.data or []]

    def list_wages_by_date(self, day: date) -> list[DailyWage]:
        """Return entries for one day."""
        response = (
            self.client.table(_TABLE)
            .select("*")
            .eq("date", day.isoformat())
            .execute()
        )
        return [_parse_wage(row) for row in response.data or []]

    def list_wages_between(self, start: date, end: date) -> list[DailyWage]:
        """Return entries dated in ``[start, end)``."""
        response = (
            self.client.table(_TABLE)
            .select("*")
            .gte("date", start.isoformat())
            .lt("date", end.isoformat())
            .order("date", desc=False)
            .execute()
        )
        return [_parse_wage(row) for row in response.data or []]

    def get_wage(self, wage_id: str) -> DailyWage | None:
        """Return an entry by id."""
        response = (
            self.client.table(_TABLE).select("*").eq("id", wage_id).limit(1).execute()
        )
        if not response.data:
            return None
        return _parse_wage(response.data[0])

    def create_wage(self, draft: DailyWageDraft) -> DailyWage:
        """Insert an entry row."""
        response = self.client.table(_TABLE).insert(to_row(asdict(draft))).execute()
        if not response.data:
            raise PersistenceError("Failed to create wage entry")
        return _parse_wage(response.data[0])

    def update_wage(self, wage_id: str, changes: dict[str, object]) -> DailyWage:
        """Update an entry row."""
        response = (
            self.client.table(_TABLE)
            .update(to_row(changes))
            .eq("id", wage_id)
            .execute()
        )
        if not response.data:
            raise PersistenceError("Failed to update wage entry")
        return _parse_wage(response.data[0])

    def delete_wage(self, wage_id: str) -> None:
        """Delete an entry row."""
        self.client.table(_TABLE).delete().eq("id", wage_id).execute()


def _parse_wage(row: dict[str, object]) -> DailyWage:
    return DailyWage(
        id=row_id(row),
        employee_id=row_id(row, "employee_id"),
        employee_name=row_text(row, "employee_name"),
        date=row_date(row, "date"),
        amount=row_decimal(row, "amount"),
        adjustment=row_decimal(row, "adjustment"),
        adjustment_reason=row_text(row, "adjustment_reason"),
        notes=row_text(row, "notes"),
        created_at=row_datetime(row, "created_at"),
    )
